import pytest

from minefield.tile import (
    FLAG_IMAGE,
    HIDDEN_IMAGE,
    MINE_IMAGE,
    REVEALED_IMAGE,
    SecretState,
    State,
    Tile,
    number_image,
)


def _grid(width, height, mines):
    tiles = [Tile(position=(x * 32.0, y * 32.0)) for y in range(height) for x in range(width)]
    for y in range(height):
        for x in range(width):
            tile = tiles[y * width + x]
            for dy in (-1, 0, 1):
                for dx in (-1, 0, 1):
                    nx, ny = x + dx, y + dy
                    if (dx or dy) and 0 <= nx < width and 0 <= ny < height:
                        tile.add_neighbor(tiles[ny * width + nx])
    for index in mines:
        tiles[index].secret_state = SecretState.MINE
    for tile in tiles:
        if tile.secret_state is not SecretState.MINE:
            count = sum(n.secret_state is SecretState.MINE for n in tile.neighbors)
            tile.secret_state = SecretState.from_count(count)
    return tiles


@pytest.mark.parametrize("count", [0, 9, -1])
def test_from_count_out_of_range_is_empty(count):
    assert SecretState.from_count(count) is SecretState.EMPTY


def test_from_count_numbers():
    assert SecretState.from_count(1) is SecretState.ONE
    assert SecretState.from_count(8) is SecretState.EIGHT


def test_revealed_images():
    assert SecretState.MINE.revealed_image == MINE_IMAGE
    assert SecretState.EMPTY.revealed_image == REVEALED_IMAGE
    assert SecretState.THREE.revealed_image == number_image(3)


def test_new_tile_defaults():
    tile = Tile()
    assert tile.state is State.HIDDEN
    assert tile.texture == HIDDEN_IMAGE
    assert tile.clickable and tile.right_clickable


def test_reveal_mine_returns_true():
    tile = Tile(secret_state=SecretState.MINE)
    assert tile.reveal() is True
    assert tile.state is State.REVEALED
    assert tile.texture == MINE_IMAGE


def test_reveal_number_does_not_spread():
    tiles = _grid(3, 3, [0])
    assert tiles[4].reveal() is False
    assert tiles[4].texture == number_image(1)
    assert [t.state for t in tiles].count(State.REVEALED) == 1


def test_reveal_empty_floods_around_mine():
    tiles = _grid(3, 3, [0])
    assert tiles[8].reveal() is False
    assert tiles[0].state is State.HIDDEN
    assert all(t.state is State.REVEALED for t in tiles[1:])


def test_reveal_twice_is_noop():
    tile = Tile(secret_state=SecretState.MINE)
    tile.reveal()
    assert tile.reveal() is False


def test_unclickable_tile_does_not_reveal():
    tile = Tile(clickable=False)
    assert tile.reveal() is False
    assert tile.state is State.HIDDEN


def test_flag_blocks_reveal_and_unflag_restores():
    tile = Tile(secret_state=SecretState.MINE)
    tile.toggle_flag(False)
    assert tile.state is State.FLAGGED
    assert tile.texture == FLAG_IMAGE
    assert tile.reveal() is False
    tile.toggle_flag(False)
    assert tile.state is State.HIDDEN
    assert tile.texture == HIDDEN_IMAGE
    assert tile.clickable


def test_unflag_mine_in_debug_shows_mine():
    tile = Tile(secret_state=SecretState.MINE)
    tile.toggle_flag(True)
    tile.toggle_flag(True)
    assert tile.state is State.HIDDEN
    assert tile.texture == MINE_IMAGE


def test_flag_ignored_when_not_right_clickable():
    tile = Tile(right_clickable=False)
    tile.toggle_flag(False)
    assert tile.state is State.HIDDEN


def test_flag_on_revealed_tile_is_noop():
    tile = Tile()
    tile.reveal()
    tile.toggle_flag(False)
    assert tile.state is State.REVEALED
    assert tile.texture == REVEALED_IMAGE