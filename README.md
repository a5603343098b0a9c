# splatdungeon

A two-player, one-keyboard arcade game. Each round builds a fresh dungeon
out of randomly placed rooms. Two players, Red and Blue, start at their
spawn points and walk the corridors. Each player colours the tile they
stand on. A player can also drop a bomb that splashes their colour over
every floor tile within three tiles that the bomb can see. Walls block the
blast. A bomb that catches the opposing player knocks them out. They
respawn at their spawn point two seconds later. Players cannot walk
through walls or through each other.

Each round has a 60-second clock. The round ends when the clock reaches 1.
The player whose colour covers more tiles wins. Equal coverage is a draw.

## Installing

```
pip install .
```

This needs `pygame`.

## Playing

```
splatdungeon
```

Options:

- `--resources PATH`: the directory holding sprites and audio. The default
  is `resources` in the current directory.
- `--seed N`: seed for the dungeon layouts, so that a run can be repeated.

| Action       | Player 1 (Red) | Player 2 (Blue) |
|--------------|----------------|-----------------|
| Move         | W A S D        | Arrow keys      |
| Drop a bomb  | Q              | Right Control   |

Other keys:

- **Enter**: start a game from the menu
- **P**: pause, and P again to resume
- **M**: return to the menu while paused
- **R**: start a new round on the game-over screen
- **Esc**: quit (closing the window also quits)
- **F1**: knock out player 2 (a cheat key, active while playing)

### Resources

The package ships no artwork or audio. The game looks in the resources
directory for these files:

- `sprites/none.png`, `sprites/dot.png`, `sprites/rounded.png`,
  `sprites/spawn.png`, `sprites/deadplayer.png`
- `audio/music/Boost.mp3`
- `audio/sfx/walk.wav`, `audio/sfx/place.wav`, `audio/sfx/explode.wav`,
  `audio/sfx/death.wav`

Any file that is missing or cannot be loaded is logged as a warning and
skipped. A missing sprite is drawn as a plain coloured square. A missing
sound is not played. If `sprites/dot.png` is present, its width sets the
tile size. Otherwise tiles are 16 pixels. The whole view is drawn at twice
that size.

## Using the game logic directly

The rules work without a window. `splatdungeon.game.Game` holds the whole
match state. It starts in the `GameState.MENU` state.

- `Game.restart(seed)` generates a new dungeon, places both players at
  their spawn points, clears the bombs, resets the clock and starts playing.
- `Game.handle_action(action)` applies one `Action`, such as
  `Action.P1_UP`, `Action.P2_ABILITY`, `Action.PAUSE` or `Action.START`. It
  returns the list of `Sound` values that the action triggers. The list is
  empty when the action triggers no sound. `Action.QUIT` sets
  `Game.running` to `False`.
- `Game.tick(dt)` advances the clock, the players and the bombs by `dt`
  seconds. It returns the sounds triggered, which are deaths and
  explosions.
- `Game.seconds_left()` returns the clock rounded up. `Game.winner_text()`
  returns `"Red wins!"`, `"Blue wins!"` or `"It's a draw!"`.

`splatdungeon.app.action_for_key(key, state)` maps a pygame key code to the
`Action` it means in a given `GameState`. It returns `None` for a key that
means nothing in that state.

The building blocks can also be used on their own:

- `splatdungeon.dungeon.Dungeon` is the tile grid. `Dungeon.generate(seed)`
  is deterministic, so the same seed always gives the same layout.
  `Dungeon.spawn_point(color)`, `Dungeon.count(color)` and
  `Dungeon.winner()` query the result.
- `splatdungeon.player.Player` is a player.
- `splatdungeon.bomb.Bomb` is a bomb.
- `splatdungeon.timer.Timer` is a countdown timer.

## Running the tests

```
pip install ".[test]"
pytest
```