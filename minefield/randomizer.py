"""Random placement of mines on the board."""

from __future__ import annotations

import random
import time

_RANDOM = random.Random(time.time())


def mine_spots(low: int, high: int, rng: random.Random | None = None) -> int:
    """Return a uniformly drawn integer between low and high inclusive."""
    return (rng or _RANDOM).randint(low, high)


def pick_mines(count: int, cells: int, rng: random.Random | None = None) -> list[int]:
    """Return distinct cell indices for the mines, in the order they were drawn.

    At least one mine is always placed, even when count is below one.
    """
    if cells <= 0:
        raise ValueError("a board needs at least one cell")
    if count > cells:
        raise ValueError(f"cannot place {count} mines on {cells} cells")
    chosen = [mine_spots(0, cells - 1, rng)]
    taken = set(chosen)
    while len(chosen) < count:
        spot = mine_spots(0, cells - 1, rng)
        if spot not in taken:
            taken.add(spot)
            chosen.append(spot)
    return chosen