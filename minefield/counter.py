"""Digit breakdowns for the mine counter and the game timer."""

from __future__ import annotations

MINUS = 10
"""Digit index used for the minus sign in the digit strip."""


def digitizer(number: int) -> list[int]:
    """Split a mine count into three digit indices.

    Negative counts start with the minus sign and are clamped at -99.
    Counts of 1000 or more have no three-digit form and give an empty list.
    """
    if number < -99:
        return [MINUS, 9, 9]
    if number < 0:
        tens, units = divmod(-number, 10)
        return [MINUS, tens, units]
    if number < 1000:
        hundreds, rest = divmod(number, 100)
        tens, units = divmod(rest, 10)
        return [hundreds, tens, units]
    return []


def display_timer(number: float) -> list[int]:
    """Split elapsed seconds into four digits: two for minutes, two for seconds.

    Whole minutes are removed only while more than a minute remains, so an
    exact multiple of 60 keeps its last minute in the seconds field.
    """
    minutes = 0
    seconds = 0
    if number < 60:
        seconds = int(number)
    else:
        while number > 60:
            number -= 60
            minutes += 1
            seconds = int(number)
    return [*divmod(minutes, 10), *divmod(seconds, 10)]