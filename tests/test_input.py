from __future__ import annotations

from collections import defaultdict

import pygame as pg

from overworld.input import InputState, InteractEdge, KeyboardInput


def test_edge_fires_once_per_press() -> None:
    edge = InteractEdge()
    fired = [edge.update(pressed) for pressed in (False, True, True, True, False, True, False)]
    assert fired == [False, True, False, False, False, True, False]


def test_edge_tracks_previous_and_current() -> None:
    edge = InteractEdge()
    edge.update(True)
    assert (edge.previous_pressed, edge.current_pressed) == (False, True)
    edge.update(False)
    assert (edge.previous_pressed, edge.current_pressed) == (True, False)


def test_snapshot_maps_arrows_wasd_and_interact_keys() -> None:
    pressed = defaultdict(bool, {pg.K_w: True, pg.K_RIGHT: True, pg.K_RETURN: True})
    state = KeyboardInput.snapshot(pressed)
    assert state == InputState(up=True, right=True, interact=True)

    pressed = defaultdict(bool, {pg.K_s: True, pg.K_a: True, pg.K_e: True})
    assert KeyboardInput.snapshot(pressed) == InputState(down=True, left=True, interact=True)


def test_snapshot_with_nothing_held() -> None:
    assert KeyboardInput.snapshot(defaultdict(bool)) == InputState()
