"""Keyboard state snapshots and interact edge detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import pygame as pg

UP_KEYS = (pg.K_UP, pg.K_w)
DOWN_KEYS = (pg.K_DOWN, pg.K_s)
LEFT_KEYS = (pg.K_LEFT, pg.K_a)
RIGHT_KEYS = (pg.K_RIGHT, pg.K_d)
INTERACT_KEYS = (pg.K_e, pg.K_RETURN, pg.K_KP_ENTER)


@dataclass(frozen=True)
class InputState:
    """Held/released state of the logical buttons for one tick."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    interact: bool = False


@dataclass
class InteractEdge:
    previous_pressed: bool = False
    current_pressed: bool = False

    def update(self, pressed: bool) -> bool:
        """Record this tick's state; True only on a released-to-pressed edge."""

        self.previous_pressed = self.current_pressed
        self.current_pressed = pressed
        return self.current_pressed and not self.previous_pressed


class KeyboardInput:
    """Translate pygame key state into :class:`InputState` snapshots."""

    def __init__(self) -> None:
        self.edge = InteractEdge()

    @staticmethod
    def snapshot(pressed: Sequence[bool]) -> InputState:
        def held(keys: tuple[int, ...]) -> bool:
            return any(pressed[key] for key in keys)

        return InputState(
            up=held(UP_KEYS),
            down=held(DOWN_KEYS),
            left=held(LEFT_KEYS),
            right=held(RIGHT_KEYS),
            interact=held(INTERACT_KEYS),
        )

    def poll(self) -> tuple[InputState, bool]:
        """Read the live keyboard; returns the state and the interact edge."""

        state = self.snapshot(pg.key.get_pressed())
        return state, self.edge.update(state.interact)
