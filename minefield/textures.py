"""A cache of loaded images keyed by file path."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pygame


def _load_image(path: str) -> pygame.Surface:
    if not Path(path).is_file():
        raise FileNotFoundError(f"no image at {path}")
    return pygame.image.load(path)


class TextureManager:
    """Loads each image once and hands back the cached copy afterwards."""

    def __init__(self, loader: Callable[[str], Any] = _load_image) -> None:
        self._loader = loader
        self._textures: dict[str, Any] = {}

    def get(self, path: str) -> Any:
        """Return the image at path, loading it on first use."""
        if path not in self._textures:
            self._textures[path] = self._loader(path)
        return self._textures[path]

    def clear(self) -> None:
        """Forget every loaded image."""
        self._textures.clear()

    def __contains__(self, path: object) -> bool:
        return path in self._textures

    def __len__(self) -> int:
        return len(self._textures)