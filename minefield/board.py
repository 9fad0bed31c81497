"""The minefield: tile layout, mine placement, game state and the leaderboard."""

from __future__ import annotations

import random
from pathlib import Path

from .randomizer import pick_mines
from .tile import (
    FLAG_IMAGE,
    HIDDEN_IMAGE,
    MINE_IMAGE,
    REVEALED_IMAGE,
    SecretState,
    State,
    Tile,
)

TILE_SIZE = 32
CONFIG_PATH = "files/board_config.cfg"
LEADERBOARD_PATH = "files/leaderboard.txt"
LEADERBOARD_SIZE = 5


def format_time(seconds: float) -> str:
    """Format elapsed seconds as MM:SS, zero-padded."""
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


class Board:
    """A grid of tiles with mines, flags, debug and pause modes."""

    def __init__(
        self,
        config_path: str | Path = CONFIG_PATH,
        leaderboard_path: str | Path = LEADERBOARD_PATH,
        rng: random.Random | None = None,
    ) -> None:
        self.config_path = Path(config_path)
        self.leaderboard_path = Path(leaderboard_path)
        self.rng = rng
        self.width = 22
        self.height = 16
        self.mine_count = 0
        self.tiles: list[Tile] = []
        self.debug = False
        self.paused = False
        self.game_over = False
        self.victory = False

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def flag_count(self) -> int:
        """Number of tiles currently flagged."""
        return sum(tile.state is State.FLAGGED for tile in self.tiles)

    def _read_config(self) -> tuple[int, int, int]:
        with self.config_path.open() as config:
            values = [int(config.readline()) for _ in range(3)]
        width, height, mines = values
        return width, height, mines

    def read_board(self) -> None:
        """Read width, height and mine count from the config and lay out a new game."""
        self.width, self.height, requested = self._read_config()
        mines = pick_mines(requested, self.size, self.rng)

        self.game_over = False
        self.victory = False
        self.tiles = [
            Tile(position=(float(col * TILE_SIZE), float(row * TILE_SIZE)))
            for row in range(self.height)
            for col in range(self.width)
        ]

        for index in mines:
            tile = self.tiles[index]
            tile.secret_state = SecretState.MINE
            if self.debug:
                tile.texture = MINE_IMAGE
        self.mine_count = len(mines)

        self.set_all_neighbors()
        self.set_neighbor_numbers()

    def tile(self, index: int) -> Tile:
        """Tile at a row-major index."""
        if not 0 <= index < len(self.tiles):
            raise IndexError(f"tile index {index} out of range")
        return self.tiles[index]

    def set_all_neighbors(self) -> None:
        """Link each tile to the tiles touching it, diagonals included."""
        for index, tile in enumerate(self.tiles):
            tile.neighbors.clear()
            row, col = divmod(index, self.width)
            for dr in (-1, 0, 1):
                for dc in (-1, 0, 1):
                    if dr == 0 and dc == 0:
                        continue
                    r, c = row + dr, col + dc
                    if 0 <= r < self.height and 0 <= c < self.width:
                        tile.add_neighbor(self.tiles[r * self.width + c])

    def set_neighbor_numbers(self) -> None:
        """Give every non-mine tile the count of mines around it."""
        for tile in self.tiles:
            if tile.secret_state is SecretState.MINE:
                continue
            count = sum(n.secret_state is SecretState.MINE for n in tile.neighbors)
            tile.secret_state = SecretState.from_count(count)

    def toggle_debug(self) -> None:
        """Switch showing mines on or off while the game is in progress."""
        self.debug = not self.debug
        if self.game_over or self.victory:
            return
        for tile in self.tiles:
            is_mine = tile.secret_state is SecretState.MINE
            if self.debug and is_mine:
                tile.texture = MINE_IMAGE
            elif not self.debug and tile.state is State.FLAGGED:
                tile.texture = FLAG_IMAGE
            elif not self.debug and is_mine:
                tile.texture = HIDDEN_IMAGE

    def _lock_tiles(self) -> None:
        for tile in self.tiles:
            tile.clickable = False
            tile.right_clickable = False

    def set_game_over(self) -> None:
        """End the game as lost: lock every tile and show all mines."""
        self.game_over = True
        self._lock_tiles()
        for tile in self.tiles:
            if tile.secret_state is SecretState.MINE:
                tile.texture = MINE_IMAGE

    def reveal_tile(self, tile: Tile) -> None:
        """Uncover a tile, ending the game if it held a mine."""
        if tile.reveal():
            self.set_game_over()

    def toggle_flag(self, tile: Tile) -> None:
        tile.toggle_flag(self.debug)

    def check_victory(self) -> bool:
        """Return True once every safe tile is uncovered, locking the board and flagging mines."""
        revealed = sum(tile.state is State.REVEALED for tile in self.tiles)
        if self.size - revealed - self.mine_count != 0:
            return False
        self._lock_tiles()
        for tile in self.tiles:
            if tile.secret_state is SecretState.MINE:
                tile.texture = FLAG_IMAGE
        self.victory = True
        return True

    def toggle_pause(self) -> None:
        """Cover the board while paused and restore it when resumed."""
        self.paused = not self.paused
        if self.game_over or self.victory:
            return
        for tile in self.tiles:
            if self.paused:
                tile.texture = REVEALED_IMAGE
                tile.clickable = False
                tile.right_clickable = False
            elif tile.state is State.HIDDEN:
                tile.texture = HIDDEN_IMAGE
                tile.clickable = True
                tile.right_clickable = True
            elif tile.state is State.FLAGGED:
                tile.texture = FLAG_IMAGE
                tile.clickable = True
                tile.right_clickable = True
            elif tile.secret_state is not SecretState.MINE:
                tile.texture = tile.secret_state.revealed_image

    def load_leaderboard(self) -> list[str]:
        """Return up to the first five leaderboard lines; empty if there is no file."""
        if not self.leaderboard_path.is_file():
            return []
        with self.leaderboard_path.open() as board_file:
            lines = board_file.read().splitlines()
        return lines[:LEADERBOARD_SIZE]

    def add_to_leaders(self, name: str, time: float) -> bool:
        """Insert a "MM:SS,name" entry and rewrite the leaderboard in sorted order."""
        leaders = self.load_leaderboard()
        leaders.append(f"{format_time(time)},{name}")
        leaders.sort()
        with self.leaderboard_path.open("w") as board_file:
            board_file.writelines(f"{line}\n" for line in leaders)
        return True