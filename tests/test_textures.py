import pygame
import pytest

from minefield.textures import TextureManager


def _counting_loader():
    calls = []

    def load(path):
        calls.append(path)
        return object()

    return load, calls


def test_get_caches_by_path():
    load, calls = _counting_loader()
    manager = TextureManager(load)
    first = manager.get("a.png")
    assert manager.get("a.png") is first
    assert calls == ["a.png"]
    assert "a.png" in manager


def test_distinct_paths_load_separately():
    load, calls = _counting_loader()
    manager = TextureManager(load)
    assert manager.get("a.png") is not manager.get("b.png")
    assert len(manager) == 2
    assert calls == ["a.png", "b.png"]


def test_clear_forces_reload():
    load, calls = _counting_loader()
    manager = TextureManager(load)
    first = manager.get("a.png")
    manager.clear()
    assert len(manager) == 0
    assert manager.get("a.png") is not first
    assert calls == ["a.png", "a.png"]


def test_loads_real_image(tmp_path):
    path = tmp_path / "tile.bmp"
    pygame.image.save(pygame.Surface((3, 2)), str(path))
    manager = TextureManager()
    assert manager.get(str(path)).get_size() == (3, 2)


def test_missing_image_raises(tmp_path):
    manager = TextureManager()
    with pytest.raises(FileNotFoundError):
        manager.get(str(tmp_path / "absent.png"))
    assert len(manager) == 0