from __future__ import annotations

import pytest

from camera import tile_draw_ops
from tile_world import TileAtlas, world_from_layers


def _two_by_one_world():
    return world_from_layers([[243, 243], [0, 26]], columns=2, tile_size=16)


def test_atlas_source_rect_for_tile_243_with_twenty_cells_per_row():
    atlas = TileAtlas(image_width=320, tile_size=16)

    assert atlas.cells_per_row == 20
    assert atlas.source_rect(243) == (48, 192, 16, 16)


def test_destination_is_translated_then_scaled():
    world = _two_by_one_world()
    atlas = TileAtlas(image_width=320, tile_size=16)

    ops = list(tile_draw_ops(world, atlas, (8.0, 4.0), zoom=4))

    first, second = ops[0], ops[1]
    assert (first.dest_x, first.dest_y) == (-32.0, -16.0)
    assert (second.dest_x, second.dest_y) == ((16 - 8) * 4, -16.0)
    assert first.dest_size == 64


def test_ops_follow_layer_declaration_order():
    world = _two_by_one_world()
    atlas = TileAtlas(image_width=320, tile_size=16)

    ops = list(tile_draw_ops(world, atlas, (0.0, 0.0)))

    assert [(op.layer_index, op.cell_index) for op in ops] == [(0, 0), (0, 1), (1, 0), (1, 1)]


def test_later_layer_wins_at_overlapping_cell():
    world = _two_by_one_world()
    atlas = TileAtlas(image_width=320, tile_size=16)

    painted = {}
    for op in tile_draw_ops(world, atlas, (0.0, 0.0)):
        painted[(op.dest_x, op.dest_y)] = op.tile_index

    assert painted[(16 * 4, 0)] == 26
    assert painted[(0, 0)] == 0


def test_rows_wrap_at_column_count():
    world = world_from_layers([[1, 2, 3, 4, 5, 6]], columns=3, tile_size=16)
    atlas = TileAtlas(image_width=64, tile_size=16)

    ops = list(tile_draw_ops(world, atlas, (0.0, 0.0), zoom=1))

    assert (ops[3].dest_x, ops[3].dest_y) == (0, 16)
    assert ops[5].source == (16, 16, 16, 16)


@pytest.mark.parametrize("offset", [(0.0, 0.0), (-70.71, -70.71), (1000.0, 3.0)])
def test_camera_offset_shifts_every_tile_equally(offset):
    world = _two_by_one_world()
    atlas = TileAtlas(image_width=320, tile_size=16)

    base = list(tile_draw_ops(world, atlas, (0.0, 0.0), zoom=4))
    moved = list(tile_draw_ops(world, atlas, offset, zoom=4))

    for a, b in zip(base, moved):
        assert a.dest_x - b.dest_x == pytest.approx(offset[0] * 4)
        assert a.dest_y - b.dest_y == pytest.approx(offset[1] * 4)
