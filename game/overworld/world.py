"""The overworld session: map, NPCs, player and dialogue in one place."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from .camera import Camera
from .dialogue import DialogueController, DialogueView
from .entities import NPC, Player, Position, npc_at, occupied_positions
from .input import InputState
from .movement import DEFAULT_STEP_DURATION_MS, MovementController
from .tilemap import TileMap


class ContentError(ValueError):
    """Static map or NPC data that cannot produce a playable session."""


def validate_world(tilemap: TileMap, npcs: Sequence[NPC], spawn: Position) -> None:
    """Reject static data the runtime rules would otherwise trip over."""

    if not tilemap.in_bounds(spawn.x, spawn.y) or tilemap.is_blocked(spawn.x, spawn.y):
        raise ContentError(f"Spawn tile ({spawn.x}, {spawn.y}) is not walkable")

    seen: dict[Position, str] = {}
    for npc in npcs:
        pos = npc.position
        if tilemap.is_blocked(pos.x, pos.y):
            raise ContentError(f"NPC {npc.name!r} stands on blocked tile ({pos.x}, {pos.y})")
        if pos == spawn:
            raise ContentError(f"NPC {npc.name!r} stands on the spawn tile")
        if pos in seen:
            raise ContentError(f"NPCs {seen[pos]!r} and {npc.name!r} share tile ({pos.x}, {pos.y})")
        seen[pos] = npc.name


class Overworld:
    def __init__(
        self,
        tilemap: TileMap,
        npcs: Iterable[NPC],
        spawn: Position,
        step_duration: float = DEFAULT_STEP_DURATION_MS,
        view: DialogueView | None = None,
    ) -> None:
        self.tilemap = tilemap
        self.npcs: Tuple[NPC, ...] = tuple(npcs)
        validate_world(tilemap, self.npcs, spawn)

        self.player = Player(spawn)
        self.dialogue = DialogueController(view, total_npcs=len(self.npcs))
        self.movement = MovementController(
            tilemap,
            occupied_positions(self.npcs),
            step_duration=step_duration,
            is_suspended=lambda: self.dialogue.is_open,
        )

    # ------------------------------------------------------------------- ticks
    def tick(self, dt: float, state: InputState) -> None:
        self.movement.update(dt, state, self.player)

    def interact(self) -> Optional[NPC]:
        """Handle one interact press: advance an open dialogue or start one."""

        session = self.dialogue.session
        if session is not None:
            self.dialogue.advance()
            return session.npc

        npc = npc_at(self.npcs, self.player.facing_tile())
        if npc is not None:
            self.dialogue.open(npc)
        return npc

    # ----------------------------------------------------------------- queries
    def camera(self, view_w: int, view_h: int) -> Camera:
        return Camera.centered_on(self.player.position, view_w, view_h)
