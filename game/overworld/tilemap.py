"""Fixed-size tile grid with collision queries and a reference generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple


class Tile(Enum):
    OPEN = 0
    BLOCKING = 1
    LIQUID = 2


DEFAULT_LEGEND: Dict[str, Tile] = {
    ".": Tile.OPEN,
    "#": Tile.BLOCKING,
    "~": Tile.LIQUID,
}


@dataclass(frozen=True)
class Region:
    """Inclusive rectangle of tiles used when stamping a generated map."""

    x0: int
    y0: int
    x1: int
    y1: int

    def cells(self) -> Iterable[Tuple[int, int]]:
        for y in range(min(self.y0, self.y1), max(self.y0, self.y1) + 1):
            for x in range(min(self.x0, self.x1), max(self.x0, self.x1) + 1):
                yield x, y


# Ponds and the rock line of the 28x18 starter meadow.
REFERENCE_SIZE: Tuple[int, int] = (28, 18)
REFERENCE_LIQUID: Tuple[Region, ...] = (
    Region(19, 4, 23, 7),
    Region(6, 11, 8, 13),
)
REFERENCE_OBSTACLES: Tuple[Region, ...] = (
    Region(10, 3, 10, 6),
    Region(11, 6, 12, 6),
)


class TileMap:
    """Immutable grid of tiles; anything outside the grid counts as a wall."""

    def __init__(self, width: int, height: int, grid: Sequence[Sequence[Tile]]) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("TileMap dimensions must be positive")
        if len(grid) != height or any(len(row) != width for row in grid):
            raise ValueError(f"TileMap grid must be {width}x{height}")

        self.width = width
        self.height = height
        self._grid: Tuple[Tuple[Tile, ...], ...] = tuple(tuple(row) for row in grid)

        for x, y in self.border_cells():
            if self._grid[y][x] is not Tile.BLOCKING:
                raise ValueError(f"Border tile ({x}, {y}) must be blocking")

    # ------------------------------------------------------------- constructors
    @classmethod
    def generate(
        cls,
        width: int,
        height: int,
        liquid_regions: Iterable[Region] = (),
        obstacles: Iterable[Region] = (),
    ) -> "TileMap":
        """Stamp a walled border, carve liquid regions, then place obstacles."""

        if width < 3 or height < 3:
            raise ValueError("Generated maps need at least a 1x1 interior")
        grid: List[List[Tile]] = [[Tile.OPEN for _ in range(width)] for _ in range(height)]
        for y in range(height):
            for x in range(width):
                if x in (0, width - 1) or y in (0, height - 1):
                    grid[y][x] = Tile.BLOCKING

        for region in liquid_regions:
            for x, y in region.cells():
                if 0 < x < width - 1 and 0 < y < height - 1:
                    grid[y][x] = Tile.LIQUID
        for region in obstacles:
            for x, y in region.cells():
                if 0 <= x < width and 0 <= y < height:
                    grid[y][x] = Tile.BLOCKING
        return cls(width, height, grid)

    @classmethod
    def reference(cls) -> "TileMap":
        width, height = REFERENCE_SIZE
        return cls.generate(width, height, REFERENCE_LIQUID, REFERENCE_OBSTACLES)

    @classmethod
    def from_layout(
        cls,
        rows: Sequence[str],
        legend: Mapping[str, Tile] | None = None,
    ) -> "TileMap":
        if not rows:
            raise ValueError("Map layout must contain at least one row")
        row_lengths = {len(row) for row in rows}
        if len(row_lengths) != 1:
            raise ValueError("Map layout rows must be of equal length")

        legend = legend or DEFAULT_LEGEND
        grid: List[List[Tile]] = []
        for y, row in enumerate(rows):
            parsed: List[Tile] = []
            for x, symbol in enumerate(row):
                tile = legend.get(symbol)
                if tile is None:
                    raise ValueError(f"Unknown map symbol {symbol!r} at ({x}, {y})")
                parsed.append(tile)
            grid.append(parsed)
        return cls(row_lengths.pop(), len(rows), grid)

    # ------------------------------------------------------------------ queries
    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            return Tile.BLOCKING
        return self._grid[y][x]

    def is_blocked(self, x: int, y: int) -> bool:
        return self.tile_at(x, y) is not Tile.OPEN

    def border_cells(self) -> Iterable[Tuple[int, int]]:
        for x in range(self.width):
            yield x, 0
            if self.height > 1:
                yield x, self.height - 1
        for y in range(1, self.height - 1):
            yield 0, y
            if self.width > 1:
                yield self.width - 1, y

    def rows(self) -> Tuple[Tuple[Tile, ...], ...]:
        return self._grid
