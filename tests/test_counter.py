import pytest

from minefield.counter import MINUS, digitizer, display_timer


@pytest.mark.parametrize("number", [0, 5, 9, 10, 42, 99, 100, 371, 999])
def test_digitizer_round_trips_non_negative(number):
    digits = digitizer(number)
    assert len(digits) == 3
    assert digits[0] * 100 + digits[1] * 10 + digits[2] == number


@pytest.mark.parametrize("number", [-1, -9, -10, -45, -99])
def test_digitizer_negative_starts_with_minus(number):
    digits = digitizer(number)
    assert digits[0] == MINUS
    assert digits[1] * 10 + digits[2] == -number


@pytest.mark.parametrize("number", [-100, -500])
def test_digitizer_clamps_large_negative(number):
    assert digitizer(number) == [10, 9, 9]


def test_digitizer_too_large_is_empty():
    assert digitizer(1000) == []


@pytest.mark.parametrize("number", [0, 0.4, 7.9, 30, 59.99])
def test_display_timer_under_a_minute(number):
    digits = display_timer(number)
    assert digits[:2] == [0, 0]
    assert digits[2] * 10 + digits[3] == int(number)


@pytest.mark.parametrize("number", [61.5, 125.7, 599.2, 3599.0, 3661.3])
def test_display_timer_round_trips(number):
    digits = display_timer(number)
    minutes = digits[0] * 10 + digits[1]
    seconds = digits[2] * 10 + digits[3]
    assert minutes * 60 + seconds == int(number)
    assert 0 <= seconds < 60


def test_display_timer_exactly_one_minute():
    assert display_timer(60) == [0, 0, 0, 0]


def test_display_timer_exact_multiple_keeps_sixty_seconds():
    assert display_timer(120) == [0, 1, 6, 0]