#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Per-tick orchestration: input -> player/UI -> world render -> overlay.

The loop is engine-free. The host window feeds it a ``FrameInput`` and the
achieved rates; the renderer, overlay and host are passed in as
collaborators.
"""

from __future__ import annotations

import ctypes
import logging
import math
from collections import deque
from dataclasses import dataclass, field
from typing import Optional, Set, Tuple

from config import MIN_DELTA_SECONDS, RATE_SAMPLE_FRAMES
from player import Direction, PlayerController
from tile_world import TileWorld
from ui_state import UIState

logger = logging.getLogger("tile_demo.frame_loop")


@dataclass
class FrameInput:
    """Held directions plus edge events collected since the last tick."""

    held: Set[Direction] = field(default_factory=set)
    escape_just_pressed: bool = False
    pointer_just_pressed: bool = False
    pointer: Optional[Tuple[float, float]] = None

    def press(self, direction: Direction) -> None:
        self.held.add(direction)

    def release(self, direction: Direction) -> None:
        self.held.discard(direction)

    def end_frame(self) -> None:
        self.escape_just_pressed = False
        self.pointer_just_pressed = False


class PointerTracker:
    """Window mouse handlers that copy the pointer into a ``FrameInput``.

    Push it onto the window after the UI manager so it runs first: a modal
    widget that consumes mouse events would otherwise hide the pointer from
    the loop. The handlers never claim an event.
    """

    def __init__(self, frame_input: FrameInput, primary_button: int = 1):
        self.frame_input = frame_input
        self.primary_button = primary_button

    def on_mouse_motion(self, x, y, dx, dy):
        self.frame_input.pointer = (x, y)

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
        self.frame_input.pointer = (x, y)

    def on_mouse_press(self, x, y, button, modifiers):
        self.frame_input.pointer = (x, y)
        if button == self.primary_button:
            self.frame_input.pointer_just_pressed = True


@dataclass(frozen=True)
class FrameTiming:
    delta_time64: float
    delta_time32: float

    @classmethod
    def from_achieved_rate(cls, achieved_rate: float) -> "FrameTiming":
        if achieved_rate > 0 and math.isfinite(achieved_rate):
            seconds = max(MIN_DELTA_SECONDS, 1.0 / achieved_rate)
        else:
            seconds = MIN_DELTA_SECONDS
        return cls(delta_time64=seconds, delta_time32=ctypes.c_float(seconds).value)


class TickRateMeter:
    """Average rate over the last ``samples`` frame intervals."""

    def __init__(self, samples: int = RATE_SAMPLE_FRAMES):
        self._intervals: deque[float] = deque(maxlen=max(1, samples))

    def record(self, delta_time: float) -> None:
        if delta_time > 0:
            self._intervals.append(delta_time)

    @property
    def rate(self) -> float:
        total = sum(self._intervals)
        if total <= 0:
            return 0.0
        return len(self._intervals) / total


class FrameLoop:
    def __init__(
        self,
        world: TileWorld,
        player: PlayerController,
        ui_state: UIState,
        *,
        renderer,
        overlay,
        host,
    ):
        self.world = world
        self.player = player
        self.ui_state = ui_state
        self.renderer = renderer
        self.overlay = overlay
        self.host = host
        self.timing = FrameTiming.from_achieved_rate(0.0)
        self.gameplay_clicks = 0

    def update(self, frame_input: FrameInput, achieved_tps: float) -> FrameTiming:
        # UI first so it can claim hover/click precedence
        self.overlay.update(frame_input.pointer)

        self.timing = FrameTiming.from_achieved_rate(achieved_tps)
        self.player.update(self.timing.delta_time32, frame_input.held)

        hovered = bool(self.overlay.hovered)
        self.overlay.set_header_text(f"Game Demo!\nUI is hovered: {str(hovered).lower()}")

        if frame_input.pointer_just_pressed and not hovered:
            self.gameplay_clicks += 1
            logger.info("Mouse clicked on gamefield")

        if frame_input.escape_just_pressed:
            logger.info("Escape is pressed")
            if self.ui_state.handle_escape():
                self.overlay.open_main_menu()

        frame_input.end_frame()
        return self.timing

    def draw(self, achieved_fps: float) -> None:
        self.renderer.draw_world(self.world, self.player.position)
        # overlay after the world so it stays on top
        self.overlay.draw()
        settings = self.ui_state.settings
        if settings.show_fps:
            self.renderer.draw_fps(achieved_fps)
        self.host.apply_vsync(settings.vsync)
