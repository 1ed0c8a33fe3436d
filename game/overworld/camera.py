"""Viewport maths: which slice of the grid is visible around the player."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .entities import Position


def viewport_tiles(display_w: int, display_h: int, tile_px: int) -> Tuple[int, int]:
    """Whole tiles that fit on a display surface of the given pixel size."""

    if tile_px <= 0:
        raise ValueError("tile_px must be positive")
    return max(0, display_w // tile_px), max(0, display_h // tile_px)


@dataclass(frozen=True)
class Camera:
    origin_x: int
    origin_y: int
    view_w: int
    view_h: int

    @classmethod
    def centered_on(cls, position: Position, view_w: int, view_h: int) -> "Camera":
        # Hard-centred every frame, so the view snaps with each step.
        return cls(
            math.floor(position.x - view_w / 2),
            math.floor(position.y - view_h / 2),
            view_w,
            view_h,
        )

    def to_screen(self, x: int, y: int, tile_px: int) -> Tuple[int, int]:
        return (x - self.origin_x) * tile_px, (y - self.origin_y) * tile_px
