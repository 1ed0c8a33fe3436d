"""Shared fixtures: headless pygame, import paths and a recording surface."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterator, List, Tuple

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame as pg
import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
GAME_ROOT = REPO_ROOT / "game"
for path in (REPO_ROOT, GAME_ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


class RecordingSurface:
    """In-memory draw surface that remembers every call in order."""

    def __init__(self, width: int, height: int) -> None:
        self._size = (width, height)
        self.calls: List[Tuple] = []

    @property
    def size(self) -> Tuple[int, int]:
        return self._size

    def clear(self, color) -> None:
        self.calls = []
        self.calls.append(("clear", tuple(color)))

    def fill_rect(self, color, rect) -> None:
        self.calls.append(("rect", tuple(color), tuple(rect)))

    def fill_circle(self, color, center, radius) -> None:
        self.calls.append(("circle", tuple(color), tuple(center), radius))


@pytest.fixture
def recording_surface() -> RecordingSurface:
    return RecordingSurface(480, 288)


@pytest.fixture(scope="module")
def pygame_headless() -> Iterator[None]:
    """Initialise pygame in headless mode for the duration of the module."""

    pg.init()
    try:
        yield
    finally:
        pg.quit()
