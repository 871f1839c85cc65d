#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Player position and keyboard-driven movement."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Tuple

from pydantic import BaseModel, ConfigDict

from config import PLAYER_SPEED

logger = logging.getLogger("tile_demo.player")


class Direction(Enum):
    # Screen convention: y grows downward
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class PlayerState(BaseModel):
    model_config = ConfigDict(extra="forbid")

    x: float = 0.0
    y: float = 0.0

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y


class PlayerController:
    """Owns the player position and integrates it once per frame."""

    def __init__(self, speed: float = PLAYER_SPEED, state: PlayerState | None = None):
        self.speed = float(speed)
        self.state = state or PlayerState()

    @property
    def position(self) -> Tuple[float, float]:
        return self.state.position

    def update(self, elapsed_seconds: float, pressed_directions: Iterable[Direction]) -> Tuple[float, float]:
        dx = dy = 0.0
        for direction in set(pressed_directions):
            ux, uy = direction.value
            dx += ux
            dy += uy

        if dx == 0 and dy == 0:
            return 0.0, 0.0

        magnitude = (dx * dx + dy * dy) ** 0.5
        step = self.speed * elapsed_seconds
        displacement = (dx / magnitude * step, dy / magnitude * step)
        self.state.x += displacement[0]
        self.state.y += displacement[1]
        logger.debug("Position { %s , %s }", self.state.x, self.state.y)
        return displacement
