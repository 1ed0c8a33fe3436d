"""Cooldown-gated, one-tile-per-step player movement."""

from __future__ import annotations

from typing import Callable, Collection, Optional

from .entities import Direction, Player, Position
from .input import InputState
from .tilemap import TileMap

DEFAULT_STEP_DURATION_MS = 110.0


def resolve_direction(state: InputState) -> Optional[Direction]:
    """Pick a single direction; Up beats Down beats Left beats Right."""

    if state.up:
        return Direction.UP
    if state.down:
        return Direction.DOWN
    if state.left:
        return Direction.LEFT
    if state.right:
        return Direction.RIGHT
    return None


class MovementController:
    """Advance the player on the grid, at most one tile per step duration."""

    def __init__(
        self,
        tilemap: TileMap,
        occupied: Collection[Position],
        step_duration: float = DEFAULT_STEP_DURATION_MS,
        is_suspended: Callable[[], bool] = lambda: False,
    ) -> None:
        if step_duration <= 0:
            raise ValueError("step_duration must be positive")
        self.tilemap = tilemap
        self.occupied = occupied
        self.step_duration = float(step_duration)
        self._is_suspended = is_suspended

    def can_enter(self, position: Position) -> bool:
        if self.tilemap.is_blocked(position.x, position.y):
            return False
        return position not in self.occupied

    def update(self, dt: float, state: InputState, player: Player) -> None:
        if self._is_suspended():
            return

        player.cooldown = max(0.0, player.cooldown - max(0.0, dt))
        if player.cooldown > 0.0:
            return

        direction = resolve_direction(state)
        if direction is None:
            return
        # Facing turns even when the step below is refused.
        player.facing = direction

        candidate = player.position.step(direction)
        if not self.can_enter(candidate):
            return

        player.position = candidate
        player.cooldown = self.step_duration
