# minefield

A Minesweeper game that you play with the mouse in a window. It has a mine
counter, a game timer, a debug view that shows every mine, a pause button and
a leaderboard of the fastest wins.

## Installing

```
pip install .
```

This also installs `pygame`, which draws the game window.

## Playing

Run the game from a directory that holds a `files/` folder with the board
configuration, the images and the font:

```
minefield
```

First the window asks for your name. Only letters are accepted, and at most
ten of them. The first letter is made a capital and the rest are made lower
case. Backspace deletes the last letter. Enter starts the game once the name
has at least one letter. If you close the window before that, the game does
not start.

In the game window:

- **Left click** on a tile uncovers it. An empty tile also uncovers the tiles
  around it, and keeps spreading across connected empty tiles. If you uncover
  a mine, the game is lost and every mine is shown.
- **Right click** on a hidden tile puts a flag on it. A second right click
  takes the flag off. A flagged tile cannot be uncovered.
- The **face** button deals a new board.
- The **debug** button shows or hides all mines.
- The **pause** button covers the board and locks it. Click it again to go on.
- The **leaderboard** button shows the top five entries over the board. Click
  or press a key to dismiss it.

The counter on the left shows the number of mines less the number of flags
placed. It can go below zero, down to -99. The timer on the right shows
minutes and seconds. You win when every tile that is not a mine is uncovered;
the mines are then shown as flags and the counter reads zero. The first win of
a session adds your time and name to the leaderboard.

## Files the game reads

- `files/board_config.cfg` holds three lines: the board width in columns, the
  board height in rows and the number of mines. The game cannot start without
  it.
- `files/leaderboard.txt` holds one `MM:SS,Name` entry on each line. A new
  entry is added and the whole file is rewritten in sorted order. Only the
  first five lines are read back. The file need not exist at first.
- `files/images/` holds the tile, number, flag, mine, face, button and digit
  images.
- `files/font.ttf` is the font for the name entry and the leaderboard.

## Using the pieces in code

The game logic does not need a window and can be used on its own:

- `minefield.board.Board` holds the tiles, places the mines, counts flags,
  handles debug and pause modes, checks for a win, and reads and writes the
  leaderboard. `minefield.board.format_time` formats seconds as `MM:SS`.
- `minefield.tile.Tile`, `State` and `SecretState` describe one cell.
- `minefield.counter.digitizer` and `minefield.counter.display_timer` turn the
  mine count and the elapsed time into the digits shown on screen.
- `minefield.randomizer.mine_spots` and `pick_mines` draw mine positions.
- `minefield.textures.TextureManager` caches loaded images by path.
- `minefield.game` holds the window code: `NameEntry` for the typed name,
  `Button`, `button_at` and `tile_index_at` for finding what a click hits,
  `format_leaderboard` for the leaderboard text, `welcome_window`, and `Game`,
  whose `run` method plays a session.