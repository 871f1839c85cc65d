#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Tile map asset -> immutable tile world.

Stack:
- pydantic: schema validation
- orjson: payload parsing

There are no stdlib fallbacks; malformed or inconsistent data raises
``AssetLoadError`` carrying the underlying validation error.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import orjson
from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt, model_validator

from config import TILE_MAP_WIDTH, TILE_SIZE
from errors import AssetLoadError

DATA_DIR = Path(__file__).parent / "data"
MAP_FILE = DATA_DIR / "tilemap.json"
ATLAS_FILE = DATA_DIR / "tiles.png"


class TileLayerAsset(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    tiles: List[int]


class TileMapAsset(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    columns: Optional[int] = Field(default=None, alias="tileMapWidth")
    tile_size: Optional[int] = Field(default=None, alias="tileSize")
    layers: List[TileLayerAsset]


class TileLayer(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    tiles: Tuple[NonNegativeInt, ...]


class TileWorld(BaseModel):
    """Layers of row-major atlas indices, all with the same dimensions."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    columns: PositiveInt
    tile_size: PositiveInt
    layers: Tuple[TileLayer, ...]

    @model_validator(mode="after")
    def _check_dimensions(self) -> "TileWorld":
        if not self.layers:
            raise ValueError("tile world needs at least one layer")
        expected = len(self.layers[0].tiles)
        for layer in self.layers:
            if len(layer.tiles) != expected:
                raise ValueError(
                    f"layer {layer.name!r} has {len(layer.tiles)} tiles, expected {expected}"
                )
        if expected == 0 or expected % self.columns:
            raise ValueError(f"layer length {expected} is not a multiple of {self.columns} columns")
        return self

    @property
    def rows(self) -> int:
        return len(self.layers[0].tiles) // self.columns

    @property
    def width_px(self) -> int:
        return self.columns * self.tile_size

    @property
    def height_px(self) -> int:
        return self.rows * self.tile_size

    def cell(self, index: int) -> Tuple[int, int]:
        return index % self.columns, index // self.columns


class TileAtlas(BaseModel):
    """Image logically split into ``tile_size`` square cells."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    image_width: PositiveInt
    tile_size: PositiveInt
    image_height: PositiveInt | None = None

    @model_validator(mode="after")
    def _check_width(self) -> "TileAtlas":
        if self.image_width < self.tile_size:
            raise ValueError(f"atlas width {self.image_width} is smaller than one {self.tile_size}px cell")
        return self

    @property
    def cells_per_row(self) -> int:
        return self.image_width // self.tile_size

    @property
    def cell_count(self) -> int | None:
        if self.image_height is None:
            return None
        return self.cells_per_row * (self.image_height // self.tile_size)

    def source_rect(self, tile_index: int) -> Tuple[int, int, int, int]:
        sx = (tile_index % self.cells_per_row) * self.tile_size
        sy = (tile_index // self.cells_per_row) * self.tile_size
        return sx, sy, self.tile_size, self.tile_size


def check_world_fits_atlas(world: TileWorld, atlas: TileAtlas) -> None:
    if world.tile_size != atlas.tile_size:
        raise AssetLoadError(f"map tile size {world.tile_size} does not match atlas tile size {atlas.tile_size}")
    limit = atlas.cell_count
    if limit is None:
        return
    for layer in world.layers:
        highest = max(layer.tiles)
        if highest >= limit:
            raise AssetLoadError(f"layer {layer.name!r} uses tile {highest}, atlas only has {limit} cells")


def world_from_layers(
    layers: Sequence[Sequence[int]],
    *,
    columns: int = TILE_MAP_WIDTH,
    tile_size: int = TILE_SIZE,
    names: Sequence[str] = (),
) -> TileWorld:
    rows = [
        TileLayer(name=names[i] if i < len(names) else f"layer_{i}", tiles=tuple(tiles))
        for i, tiles in enumerate(layers)
    ]
    return TileWorld(columns=columns, tile_size=tile_size, layers=tuple(rows))


def load_tile_map(path: str | Path) -> TileMapAsset:
    payload = orjson.loads(Path(path).read_bytes())
    return TileMapAsset.model_validate(payload)


def build_world_from_tile_map(
    path: str | Path = MAP_FILE,
    *,
    default_columns: int = TILE_MAP_WIDTH,
    default_tile_size: int = TILE_SIZE,
) -> TileWorld:
    try:
        asset = load_tile_map(path)
        return world_from_layers(
            [layer.tiles for layer in asset.layers],
            columns=asset.columns or default_columns,
            tile_size=asset.tile_size or default_tile_size,
            names=[layer.name for layer in asset.layers],
        )
    except (OSError, ValueError) as exc:
        # orjson.JSONDecodeError and pydantic.ValidationError are ValueErrors
        raise AssetLoadError(f"cannot load tile map {path}: {exc}") from exc
