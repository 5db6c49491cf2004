import pygame

from arcadecases.flappy.game import Game
from arcadecases.flappy.settings import VIRTUAL_HEIGHT, VIRTUAL_WIDTH
from arcadecases.flappy.states import CountDownState, PlayingState, TitleScreenState


def test_game_starts_on_title_and_enter_starts_count_down():
    game = Game()
    assert isinstance(game.state_machine.current_state, TitleScreenState)
    game.handle_inputs(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
    state = game.state_machine.current_state
    assert isinstance(state, CountDownState)
    assert state.counter == 3


def test_count_down_leads_to_playing_with_logs():
    game = Game()
    game.handle_inputs(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
    for _ in range(3):
        game.update(1.0)
    state = game.state_machine.current_state
    assert isinstance(state, PlayingState)
    assert state.world.generate_logs is True


def test_render_uses_virtual_surface_cleared_to_black():
    game = Game()
    game.surface.fill((255, 255, 255))
    game.render()
    assert game.surface.get_size() == (VIRTUAL_WIDTH, VIRTUAL_HEIGHT)
    assert game.surface.get_at((0, 0)) == pygame.Color(0, 0, 0, 255)