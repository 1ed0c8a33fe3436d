"""Player and NPC records for the overworld."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @classmethod
    def from_vector(cls, dx: int, dy: int) -> "Direction":
        try:
            return cls((dx, dy))
        except ValueError:
            raise ValueError(f"({dx}, {dy}) is not a cardinal unit vector") from None


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def step(self, direction: Direction) -> "Position":
        return Position(self.x + direction.dx, self.y + direction.dy)


@dataclass
class Player:
    """The only moving actor. Mutated exclusively by the movement controller."""

    position: Position
    facing: Direction = Direction.DOWN
    cooldown: float = 0.0

    def __post_init__(self) -> None:
        if not isinstance(self.facing, Direction):
            raise ValueError("Player facing must be a Direction")

    def facing_tile(self) -> Position:
        """Tile directly ahead; also the tile an interaction would target."""

        return self.position.step(self.facing)


@dataclass(frozen=True)
class NPC:
    name: str
    position: Position
    color: str
    lines: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("NPC requires a name")
        # Accept any sequence from content files but store a tuple.
        object.__setattr__(self, "lines", tuple(str(line) for line in self.lines))
        if not self.lines:
            raise ValueError(f"NPC {self.name!r} needs at least one dialogue line")


def npc_at(npcs: Iterable[NPC], position: Position) -> Optional[NPC]:
    for npc in npcs:
        if npc.position == position:
            return npc
    return None


def occupied_positions(npcs: Sequence[NPC]) -> frozenset[Position]:
    return frozenset(npc.position for npc in npcs)
