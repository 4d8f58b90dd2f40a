# bonvoyage

The screens, moving items and per-frame game logic of a two-level
side-scrolling runner game, drawn with pygame.

In the first level the runner races along a track with a tiger at his
heels. Five coins drift in from the right at different speeds and are
worth 100 points each; every completed run cycle of the character adds
22 more. Obstacles cost a life (six are shown in the corner) and send up
a balloon; the tiger hops when it reaches one. Running past the cinema
at the end of the track completes the level; losing every life ends it.

In the second level the runner jumps between two moving tracks at night
while a dragon crosses the sky and drops a bomb where the runner stood.
A bomb hit costs 10 points of life, a heart (offered while life is at 95
or below) gives 5 back, coins add 100 points and the score also rises by
one every ten frames. Reaching the throne completes the level; life at
zero ends it.

## Modules

- `bonvoyage.scene` – the building blocks: `Rect` (`intersects`,
  `hide`, `resize`, `is_empty`), `Sprite` (a texture drawn stretched
  into its rectangle, optionally from a source area), `Viewport`
  (1280 × 960 by default), the `Screen` enum and the `Scene` that
  records which screens are showing, `SoundBoard` for named sound
  effects, `prepare_scene`, which runs the drawer of every active screen
  in `Screen` order, and `present_scene`, which flips the display.
- `bonvoyage.menus` – `MenuBackdrop`, the scrolling sky, birds and
  mountains shared by every menu, and `MenuScreen`, which draws the
  backdrop and then its own list of sprites (buttons, panels, the back
  button).
- `bonvoyage.name_entry` – `NameEntryScreen`, the window with the name
  prompt, name box and enter button.
- `bonvoyage.scoreboards` – `ScoreBoardScreen` and
  `scoreboard_layers`, the board with five player names and scores.
- `bonvoyage.level_one_items` – `Coins`, `CoinEffects`, `Obstacles`,
  `LifeBar`, `LifeLossBalloons`, `LevelOneStatus` (score, lives, tiger
  height) and `LevelOneItems.collide`.
- `bonvoyage.level_one_backdrop` – `FrameClock`, the parallax
  `LevelOneBackdrop` and `LevelOneEndScreen` for the completed and
  game-over screens.
- `bonvoyage.level_one` – `LevelOne` with `start`, `update` and `draw`.
- `bonvoyage.level_two_items` – the `Dragon` and its bomb,
  `LevelTwoCoins`, the `Walker` state of the runner and the two
  `Tracks`.
- `bonvoyage.level_two_life` – `LevelTwoLife` (life meter, heart and
  bonus pop-up) and `LevelTwoCollisions`.
- `bonvoyage.level_two` – `SpriteSheet`, `LevelTwoBackdrop` and
  `LevelTwo` with `start`, `update` and `draw`.
- `bonvoyage.level_two_completed` and `bonvoyage.level_two_game_over` –
  `LevelTwoCompletedScreen` and `LevelTwoGameOverScreen`.

Every `draw` method takes a pygame surface (or anything with `blit` and
`fill`); the level screens also take the current time in milliseconds,
which drives their sprite sheets and clocks.

## Hooking it up

Each level and end screen is a dataclass whose sprites, sheets and
sounds are set by the caller:

- Sprite textures are pygame surfaces assigned to `Sprite.texture`;
  rectangles are set on `Sprite.rect`.
- Sounds are registered with `SoundBoard.load(name, path)`. The game
  plays them by these names: `levelonecoin`, `hitlevelone`, `tigerroar`,
  `gameover`, `coingain`, `explosion` and `pointgain`.
- `LevelTwo.skin_loader` is called with
  `images/level2obstacles/sonicsprite.png` or
  `images/level2obstacles/sonicsprite3.png` when the runner's skin
  changes; `LevelTwoLife.font_factory` is called with a point size and
  must return a font whose `render` produces the life text.
- `score_listener` callbacks on `LevelOne`, `LevelTwo`,
  `LevelOneEndScreen` and `LevelTwoCompletedScreen` receive the current
  score.

## What the package does not do

It does not open a window or run a main loop, and it installs no
command to start the game. It does not load or lay out the artwork,
fonts or sounds itself, does not read the keyboard or the typed player
name, and does not keep high scores anywhere: scores are handed to the
`score_listener` callbacks and storing them is left to the caller.

## Tests

The tests use pytest and are installed with the `test` extra.