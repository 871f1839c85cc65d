#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Arcade runtime for the scrolling tile demo.

Usage:
    python tile_demo.py [--map data/tilemap.json] [--atlas data/tiles.png] [--font font.ttf]
"""

from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path

from pydantic import BaseModel, ConfigDict

import config
from errors import TileDemoError
from frame_loop import FrameInput, FrameLoop, PointerTracker, TickRateMeter
from logging_config import parse_level, setup_logging
from player import Direction, PlayerController
from theme import build_theme
from tile_world import ATLAS_FILE, MAP_FILE, TileWorld, build_world_from_tile_map, check_world_fits_atlas
from ui_state import Settings, UIState

logger = logging.getLogger("tile_demo")


class RuntimeConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    window_width: int = config.SCREEN_W
    window_height: int = config.SCREEN_H
    title: str = config.TITLE
    tile_size: int = config.TILE_SIZE
    tile_map_width: int = config.TILE_MAP_WIDTH
    tps: int = config.TPS
    player_speed: float = config.PLAYER_SPEED
    zoom: float = config.ZOOM


def run_arcade(world: TileWorld, runtime: RuntimeConfig, *, atlas_path: Path, font_path: Path | None = None) -> None:
    import arcade

    from camera import ArcadeTileRenderer, load_atlas_textures
    from settings_menu import SettingsOverlay, load_font

    key_directions = {
        arcade.key.W: Direction.UP,
        arcade.key.S: Direction.DOWN,
        arcade.key.A: Direction.LEFT,
        arcade.key.D: Direction.RIGHT,
    }

    textures = load_atlas_textures(atlas_path, runtime.tile_size)
    check_world_fits_atlas(world, textures.atlas)
    font_name = load_font(font_path)

    class TileDemoWindow(arcade.Window):
        def __init__(self):
            super().__init__(
                runtime.window_width,
                runtime.window_height,
                runtime.title,
                resizable=True,
                update_rate=1 / runtime.tps,
            )
            self.frame_input = FrameInput()
            self.tps_meter = TickRateMeter()
            self.fps_meter = TickRateMeter()
            self._last_draw: float | None = None

            ui_state = UIState(Settings(show_fps=False, vsync=bool(self.vsync)))
            self.loop = FrameLoop(
                world,
                PlayerController(speed=runtime.player_speed),
                ui_state,
                renderer=ArcadeTileRenderer(self, textures, zoom=runtime.zoom, font_name=font_name),
                overlay=SettingsOverlay(self, ui_state, build_theme(font_name)),
                host=self,
            )
            # above the overlay's UIManager, so the modal backdrop cannot hide the pointer
            self.push_handlers(PointerTracker(self.frame_input, arcade.MOUSE_BUTTON_LEFT))

        def apply_vsync(self, enabled: bool) -> None:
            if bool(self.vsync) != enabled:
                self.set_vsync(enabled)

        def on_update(self, delta_time: float):
            self.tps_meter.record(delta_time)
            self.loop.update(self.frame_input, self.tps_meter.rate)

        def on_draw(self):
            now = time.perf_counter()
            if self._last_draw is not None:
                self.fps_meter.record(now - self._last_draw)
            self._last_draw = now
            self.clear()
            self.loop.draw(self.fps_meter.rate)

        def on_key_press(self, key: int, modifiers: int):
            direction = key_directions.get(key)
            if direction is not None:
                self.frame_input.press(direction)
            elif key == arcade.key.ESCAPE:
                self.frame_input.escape_just_pressed = True

        def on_key_release(self, key: int, modifiers: int):
            direction = key_directions.get(key)
            if direction is not None:
                self.frame_input.release(direction)

    TileDemoWindow()
    arcade.run()


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Arcade tile demo with settings overlay")
    parser.add_argument("--map", default=str(MAP_FILE), help=f"Tile map JSON (default: {MAP_FILE})")
    parser.add_argument("--atlas", default=str(ATLAS_FILE), help=f"Tile atlas image (default: {ATLAS_FILE})")
    parser.add_argument("--font", default=None, help="TTF font file for the UI (default: first installed system font)")
    parser.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (DEBUG also logs every player position)",
    )
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    setup_logging(parse_level(args.log_level), args.log_file)
    runtime = RuntimeConfig()
    try:
        world = build_world_from_tile_map(
            Path(args.map),
            default_columns=runtime.tile_map_width,
            default_tile_size=runtime.tile_size,
        )
        run_arcade(
            world,
            runtime,
            atlas_path=Path(args.atlas),
            font_path=Path(args.font) if args.font else None,
        )
    except TileDemoError as exc:
        logger.critical("Fatal: %s", exc, exc_info=exc.__cause__ is not None)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
