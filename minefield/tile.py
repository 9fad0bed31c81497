"""A single cell of the minefield and its visible and hidden states."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

IMAGE_DIR = "files/images/"
HIDDEN_IMAGE = IMAGE_DIR + "tile_hidden.png"
REVEALED_IMAGE = IMAGE_DIR + "tile_revealed.png"
MINE_IMAGE = IMAGE_DIR + "mine.png"
FLAG_IMAGE = IMAGE_DIR + "flag.png"


def number_image(count: int) -> str:
    """Path of the image showing a neighbouring-mine count."""
    return f"{IMAGE_DIR}number_{count}.png"


class State(Enum):
    """What the player can see of a tile."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


class SecretState(Enum):
    """What a tile holds: nothing, a mine, or a count of adjacent mines."""

    EMPTY = 0
    MINE = 1
    ONE = 2
    TWO = 3
    THREE = 4
    FOUR = 5
    FIVE = 6
    SIX = 7
    SEVEN = 8
    EIGHT = 9

    @classmethod
    def from_count(cls, count: int) -> SecretState:
        """State for a tile with count neighbouring mines."""
        if 1 <= count <= len(_NUMBERED):
            return _NUMBERED[count - 1]
        return cls.EMPTY

    @property
    def revealed_image(self) -> str:
        """Image shown once the tile is uncovered."""
        if self is SecretState.MINE:
            return MINE_IMAGE
        if self is SecretState.EMPTY:
            return REVEALED_IMAGE
        return number_image(_NUMBERED.index(self) + 1)


_NUMBERED = (
    SecretState.ONE,
    SecretState.TWO,
    SecretState.THREE,
    SecretState.FOUR,
    SecretState.FIVE,
    SecretState.SIX,
    SecretState.SEVEN,
    SecretState.EIGHT,
)


@dataclass(eq=False)
class Tile:
    """A board cell with its screen position, current image and neighbours."""

    position: tuple[float, float] = (0.0, 0.0)
    texture: str = HIDDEN_IMAGE
    secret_state: SecretState = SecretState.EMPTY
    state: State = State.HIDDEN
    clickable: bool = True
    right_clickable: bool = True
    neighbors: list[Tile] = field(default_factory=list, repr=False)

    def add_neighbor(self, neighbor: Tile) -> None:
        self.neighbors.append(neighbor)

    def _uncover(self) -> bool:
        if not self.clickable or self.state is not State.HIDDEN:
            return False
        self.state = State.REVEALED
        self.texture = self.secret_state.revealed_image
        return True

    def reveal(self) -> bool:
        """Uncover the tile, spreading over empty areas; True if it was a mine."""
        if not self._uncover():
            return False
        if self.secret_state is SecretState.MINE:
            return True
        if self.secret_state is SecretState.EMPTY:
            pending = list(self.neighbors)
            while pending:
                tile = pending.pop()
                if tile._uncover() and tile.secret_state is SecretState.EMPTY:
                    pending.extend(tile.neighbors)
        return False

    def toggle_flag(self, debug: bool) -> None:
        """Place or remove a flag; in debug mode an unflagged mine stays visible."""
        if not self.right_clickable:
            return
        if self.state is State.HIDDEN:
            self.clickable = False
            self.state = State.FLAGGED
            self.texture = FLAG_IMAGE
        elif self.state is State.FLAGGED:
            self.clickable = True
            self.state = State.HIDDEN
            if debug and self.secret_state is SecretState.MINE:
                self.texture = MINE_IMAGE
            else:
                self.texture = HIDDEN_IMAGE