#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Camera-relative tile rendering.

``tile_draw_ops`` is the engine-free part: it turns a tile world plus a camera
offset into draw operations in top-left-origin screen space. The arcade
renderer only flips y and blits.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, Tuple

from config import ZOOM
from errors import AssetLoadError
from tile_world import TileAtlas, TileWorld


@dataclass(frozen=True)
class TileDrawOp:
    layer_index: int
    cell_index: int
    tile_index: int
    dest_x: float
    dest_y: float
    dest_size: float
    source: Tuple[int, int, int, int]


def tile_draw_ops(
    world: TileWorld,
    atlas: TileAtlas,
    camera_offset: Tuple[float, float],
    zoom: float = ZOOM,
) -> Iterator[TileDrawOp]:
    """Yield ops layer by layer; later ops paint over earlier ones."""
    ox, oy = camera_offset
    tile = world.tile_size
    for layer_index, layer in enumerate(world.layers):
        for i, tile_index in enumerate(layer.tiles):
            col, row = world.cell(i)
            # translate first, then scale
            yield TileDrawOp(
                layer_index=layer_index,
                cell_index=i,
                tile_index=tile_index,
                dest_x=(col * tile - ox) * zoom,
                dest_y=(row * tile - oy) * zoom,
                dest_size=tile * zoom,
                source=atlas.source_rect(tile_index),
            )


class AtlasTextures:
    """Sprite sheet sliced lazily into one texture per atlas index."""

    def __init__(self, sheet, atlas: TileAtlas):
        self._sheet = sheet
        self.atlas = atlas
        self._cache: Dict[int, object] = {}

    def texture(self, tile_index: int):
        import arcade

        found = self._cache.get(tile_index)
        if found is None:
            sx, sy, w, h = self.atlas.source_rect(tile_index)
            found = self._sheet.get_texture(arcade.LBWH(sx, sy, w, h))
            self._cache[tile_index] = found
        return found


def load_atlas_textures(path: str | Path, tile_size: int) -> AtlasTextures:
    import arcade

    try:
        sheet = arcade.load_spritesheet(Path(path))
    except (OSError, ValueError) as exc:
        # PIL.UnidentifiedImageError is an OSError
        raise AssetLoadError(f"cannot load tile atlas {path}: {exc}") from exc
    try:
        atlas = TileAtlas(image_width=sheet.image.width, image_height=sheet.image.height, tile_size=tile_size)
    except ValueError as exc:
        raise AssetLoadError(f"invalid tile atlas {path}: {exc}") from exc
    return AtlasTextures(sheet, atlas)


class ArcadeTileRenderer:
    def __init__(self, window, textures: AtlasTextures, zoom: float = ZOOM, font_name: str | None = None):
        import arcade

        self.window = window
        self.textures = textures
        self.zoom = float(zoom)
        self._fps_text = arcade.Text("", 4, window.height - 16, arcade.color.WHITE, 12, font_name=font_name or ("calibri", "arial"))

    def draw_world(self, world: TileWorld, camera_offset: Tuple[float, float]) -> None:
        import arcade

        width, height = self.window.width, self.window.height
        for op in tile_draw_ops(world, self.textures.atlas, camera_offset, self.zoom):
            size = op.dest_size
            if op.dest_x >= width or op.dest_y >= height or op.dest_x + size <= 0 or op.dest_y + size <= 0:
                continue
            bottom = height - op.dest_y - size
            arcade.draw_texture_rect(
                self.textures.texture(op.tile_index),
                arcade.LBWH(op.dest_x, bottom, size, size),
                pixelated=True,
            )

    def draw_fps(self, fps: float) -> None:
        self._fps_text.text = f"FPS: {fps:f}"
        self._fps_text.y = self.window.height - 16
        self._fps_text.draw()
