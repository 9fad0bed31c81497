"""A Minesweeper game with a timer, debug view, pause and leaderboard."""

__version__ = "0.1.0"