#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Menu state machine and user-adjustable settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from config import MENU_H, MENU_W
from errors import UIStateError

logger = logging.getLogger("tile_demo.ui_state")


class MenuState(str, Enum):
    CLOSED = "none"
    MAIN_MENU_OPEN = "mainMenu"


@dataclass
class Settings:
    show_fps: bool = False
    vsync: bool = False


class UIState:
    def __init__(self, settings: Settings | None = None):
        self.state = MenuState.CLOSED
        self.settings = settings or Settings()

    @property
    def is_menu_open(self) -> bool:
        return self.state is MenuState.MAIN_MENU_OPEN

    def handle_escape(self) -> bool:
        """Escape edge. Returns True when the main menu should be opened."""
        if self.state is MenuState.CLOSED:
            self.state = MenuState.MAIN_MENU_OPEN
            logger.info("Main menu opened")
            return True
        if self.state is MenuState.MAIN_MENU_OPEN:
            return False
        raise UIStateError(f"unknown menu state: {self.state!r}")

    def close_main_menu(self) -> None:
        if self.state is not MenuState.MAIN_MENU_OPEN:
            raise UIStateError("main menu is not open")
        self.state = MenuState.CLOSED
        logger.info("Main menu closed")

    def _require_open(self, setting: str) -> None:
        if not self.is_menu_open:
            raise UIStateError(f"{setting} can only change while the main menu is open")

    def toggle_show_fps(self) -> bool:
        self._require_open("show_fps")
        self.settings.show_fps = not self.settings.show_fps
        return self.settings.show_fps

    def toggle_vsync(self) -> bool:
        self._require_open("vsync")
        self.settings.vsync = not self.settings.vsync
        return self.settings.vsync


def main_menu_rect(window_w: int, window_h: int) -> Tuple[int, int, int, int]:
    """(left, top, width, height) of the main menu in top-left-origin pixels."""
    return window_w // 4 // 2, window_h * 2 // 3 // 2, MENU_W, MENU_H
