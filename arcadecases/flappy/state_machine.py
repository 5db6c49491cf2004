"""Game states and the machine that switches between them."""

from typing import Callable, Dict, Mapping, Optional


class BaseState:
    """A state with no game behaviour; concrete states override what they need.

    The base state only keeps track of its own lifecycle: whether it is
    current, how much time has passed in it, and how many events and frames
    it has been given.
    """

    def __init__(self, state_machine) -> None:
        self.state_machine = state_machine
        self.active = False
        self.elapsed = 0.0
        self.events_handled = 0
        self.frames_rendered = 0

    @property
    def assets(self):
        """The media shared through the state machine, if any."""
        return getattr(self.state_machine, "assets", None)

    def enter(self, world=None, bird=None) -> None:
        """Called when the state becomes current."""
        self.active = True

    def exit(self) -> None:
        """Called when the state stops being current."""
        self.active = False

    def handle_inputs(self, event) -> None:
        """React to an input event; the base state only counts it."""
        self.events_handled += 1

    def update(self, dt: float) -> None:
        """Advance by ``dt`` seconds; the base state only tracks the time."""
        self.elapsed += dt

    def render(self, surface) -> None:
        """Draw onto ``surface``; the base state draws nothing but counts frames."""
        self.frames_rendered += 1


StateBuilder = Callable[["StateMachine"], BaseState]


class StateMachine:
    """Holds named state builders and the state currently running."""

    def __init__(self, states: Optional[Mapping[str, StateBuilder]] = None, assets=None) -> None:
        self.states: Dict[str, StateBuilder] = dict(states or {})
        self.assets = assets
        self.current_state: BaseState = BaseState(self)

    def change_state(self, state_name: str, world=None, bird=None) -> None:
        """Switch to a freshly built ``state_name``; unknown names are ignored."""
        builder = self.states.get(state_name)
        if builder is None:
            return
        self.current_state.exit()
        self.current_state = builder(self)
        self.current_state.enter(world, bird)

    def handle_inputs(self, event) -> None:
        self.current_state.handle_inputs(event)

    def update(self, dt: float) -> None:
        self.current_state.update(dt)

    def render(self, surface) -> None:
        self.current_state.render(surface)