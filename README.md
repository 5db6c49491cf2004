# arcadecases

Two small arcade games written with pygame: a two-paddle **Pong** and a
side-scrolling **Flappy Bird**.

## Playing

Pong:

    arcadecases-pong [--assets DIR]

Flappy Bird:

    arcadecases-flappy [--assets DIR]

Both games draw to a small virtual surface and scale it up to a
1280×720 window. They read their media from the directory given with
`--assets`, `assets/` by default. A missing file stops the game with a
`FileNotFoundError` naming it.

- Pong needs `fonts/font.ttf` and `sounds/paddle_hit.wav`,
  `sounds/wall_hit.wav` and `sounds/score.wav`.
- Flappy Bird needs `graphics/bird.png`, `graphics/background.png`,
  `graphics/ground.png` and `graphics/log.png`; `sounds/jump.wav`,
  `sounds/explosion.wav`, `sounds/hurt.wav`, `sounds/score.wav` and the
  music track `sounds/marios_way.ogg`; and `fonts/font.ttf` and
  `fonts/flappy.ttf`.

### Pong

- On the start screen press **1** for a single-player game against the
  computer, or **2** for two players.
- Press **Enter** to serve. The serving side is picked at random for the
  first serve; after a point the side that lost it serves.
- The left paddle moves with **W** and **S**. In a two-player game the
  right paddle moves with the **Up** and **Down** arrows. In a
  single-player game the computer moves it while the ball heads its way
  on its half of the table.
- Each paddle hit speeds the ball up by 3%. The first player to score 5
  points wins. Press **Enter** to play again.
- Closing the window quits.

### Flappy Bird

- Press **Enter** on the title screen to start a three-second countdown.
- Click the left mouse button to flap. The **Left** and **Right** arrows
  nudge the bird forward, **Right** by more than **Left**.
- Each pair of logs passed scores a point. Hitting a log or the ground
  starts the countdown again, and the score starts again from zero.
- **Escape**, or closing the window, quits.

## Using the pieces

The game logic can be used without opening a window.

- `arcadecases.pong.game.Pong` holds the whole match: `handle_input`
  takes the set of pressed keys (`Key` values), `update` advances it by a
  time step, and `state` shows where it is (`PongState`). It takes
  optional sounds (`PongSounds`) and a `random.Random` to make play
  repeatable.
- `arcadecases.pong.hitbox.collides` tests two `Hitbox` rectangles for
  overlap or touching. `Ball` and `Paddle` give their own hitboxes.
- `arcadecases.pong.assets.load_fonts` and `load_sounds` load Pong's
  media from a directory.
- `arcadecases.flappy.world.World`, `arcadecases.flappy.bird.Bird` and
  `arcadecases.flappy.log_pair.LogPair` make up the Flappy Bird
  playfield, with collisions and scoring done through
  `arcadecases.flappy.log.FloatRect`. All of them work without loaded
  media.
- `arcadecases.flappy.settings.load_assets` loads Flappy Bird's media
  into an `Assets` object.
- `arcadecases.flappy.factory.Factory` reuses removed objects before it
  builds new ones.
- `arcadecases.flappy.state_machine.StateMachine` switches between the
  screens in `arcadecases.flappy.states`; `arcadecases.flappy.game.Game`
  puts them together on a virtual surface.

## What is not there

- Flappy Bird has a pause screen (`PauseState`: **P** resumes, **M**
  returns to the title), but nothing in the playing screen switches to
  it, so it cannot be reached while playing.
- Neither game keeps high scores or saves anything between runs.

Running the tests needs the `test` extra, which brings in pytest.