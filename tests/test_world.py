"""Interaction targeting, movement suspension and startup validation."""

from __future__ import annotations

import pytest

from overworld.entities import Direction, NPC, Position
from overworld.input import InputState
from overworld.tilemap import TileMap
from overworld.world import ContentError, Overworld, validate_world

ENOUGH = 200.0

RACHIT = NPC("Rachit", Position(5, 3), "#00ff88", ("Mission!", "Collect wishes.", "Party time!"))


def _world(npcs: tuple[NPC, ...] = (RACHIT,), spawn: Position = Position(4, 3)) -> Overworld:
    return Overworld(TileMap.generate(10, 8), npcs, spawn)


def test_interact_facing_npc_opens_dialogue() -> None:
    world = _world()
    world.player.facing = Direction.RIGHT
    assert world.interact() is RACHIT
    assert world.dialogue.is_open
    assert world.dialogue.session is not None and world.dialogue.session.index == 0
    assert world.dialogue.current_line == "Mission!"


def test_interact_facing_away_is_noop() -> None:
    world = _world()
    for facing in (Direction.UP, Direction.DOWN, Direction.LEFT):
        world.player.facing = facing
        assert world.interact() is None
        assert not world.dialogue.is_open


def test_interact_targets_exactly_one_tile_ahead() -> None:
    world = _world(spawn=Position(3, 3))
    world.player.facing = Direction.RIGHT
    assert world.interact() is None


def test_interact_advances_open_dialogue_to_close() -> None:
    world = _world()
    world.player.facing = Direction.RIGHT
    world.interact()
    world.interact()
    assert world.dialogue.current_line == "Collect wishes."
    world.interact()
    world.interact()
    assert not world.dialogue.is_open
    assert world.dialogue.talked_to == ("Rachit",)


def test_movement_suspended_while_talking() -> None:
    world = _world()
    world.player.facing = Direction.RIGHT
    world.interact()
    for state in (InputState(up=True), InputState(down=True), InputState(left=True)):
        for _ in range(5):
            world.tick(ENOUGH, state)
    assert world.player.position == Position(4, 3)
    assert world.player.facing is Direction.RIGHT


def test_movement_resumes_after_dialogue_ends() -> None:
    world = _world()
    world.player.facing = Direction.RIGHT
    for _ in range(len(RACHIT.lines) + 1):
        world.interact()
    world.tick(ENOUGH, InputState(up=True))
    assert world.player.position == Position(4, 2)


def test_turn_then_talk() -> None:
    world = _world()
    # Pressing toward the NPC turns the player without moving.
    world.tick(ENOUGH, InputState(right=True))
    assert world.player.position == Position(4, 3)
    assert world.player.facing is Direction.RIGHT
    assert world.interact() is RACHIT


def test_scenario_down_three_times_on_reference_map() -> None:
    world = Overworld(TileMap.reference(), (), Position(3, 3))
    assert (world.tilemap.width, world.tilemap.height) == (28, 18)
    cooldowns = []
    for _ in range(3):
        world.tick(world.movement.step_duration, InputState(down=True))
        cooldowns.append(world.player.cooldown)
        world.tick(1.0, InputState())
    assert world.player.position == Position(3, 6)
    assert cooldowns == [110.0, 110.0, 110.0]


def test_player_spawns_facing_down() -> None:
    world = _world()
    assert world.player.position == Position(4, 3)
    assert world.player.facing is Direction.DOWN
    assert world.player.cooldown == 0.0


@pytest.mark.parametrize(
    "npcs, spawn, message",
    [
        ((), Position(0, 0), "Spawn"),
        ((), Position(40, 2), "Spawn"),
        ((NPC("Wall", Position(0, 3), "#fff", ("x",)),), Position(2, 2), "blocked"),
        ((NPC("Here", Position(2, 2), "#fff", ("x",)),), Position(2, 2), "spawn"),
        (
            (NPC("A", Position(3, 3), "#fff", ("x",)), NPC("B", Position(3, 3), "#fff", ("y",))),
            Position(2, 2),
            "share",
        ),
    ],
)
def test_validation_rejects_bad_static_data(npcs, spawn, message) -> None:
    tilemap = TileMap.generate(10, 8)
    with pytest.raises(ContentError, match=message):
        validate_world(tilemap, npcs, spawn)
    with pytest.raises(ContentError):
        Overworld(tilemap, npcs, spawn)
