# File: tests/layout/test_placed_tile.py
"""Tests for placed tiles and automatic placement."""

from score_cutter.cell_decomposition import Cell
from score_cutter.geometry import Rect
from score_cutter.layout import PlacedTile, create_placed_tile, next_placement_position


def test_create_placed_tile_copies_cell():
    cell = Cell(id="img1-3", image_id="img1", label="3", rect=Rect(400, 0, 400, 300))
    tile = create_placed_tile(cell, 10, 20)

    assert tile.cell_id == "img1-3"
    assert tile.label == "3"
    assert tile.rect == Rect(400, 0, 400, 300)
    assert tile.placement_rect == Rect(10, 20, 400, 300)
    assert tile.id


def test_create_placed_tile_explicit_id():
    cell = Cell(id="img1-1", image_id="img1", label="1", rect=Rect(0, 0, 10, 10))
    assert create_placed_tile(cell, 0, 0, tile_id="t1").id == "t1"


def test_placed_tiles_get_unique_ids():
    cell = Cell(id="img1-1", image_id="img1", label="1", rect=Rect(0, 0, 10, 10))
    assert create_placed_tile(cell, 0, 0).id != create_placed_tile(cell, 0, 0).id


def test_tile_dict_round_trip(make_tile):
    tile = make_tile("t1", 5, 6, 100, 50, label="7")
    assert PlacedTile.from_dict(tile.to_dict()) == tile


class TestNextPlacementPosition:

    def test_empty_layout_uses_origin(self):
        assert next_placement_position([]) == (0, 0)

    def test_wide_layout_grows_down(self, make_tile):
        tiles = [make_tile("t1", 0, 0, 800, 300)]
        assert next_placement_position(tiles) == (0, 300)

    def test_square_layout_grows_down(self, make_tile):
        tiles = [make_tile("t1", 0, 0, 100, 100)]
        assert next_placement_position(tiles) == (0, 100)

    def test_tall_layout_grows_right(self, make_tile):
        tiles = [make_tile("t1", 0, 0, 100, 300), make_tile("t2", 0, 300, 100, 300)]
        assert next_placement_position(tiles) == (100, 0)

    def test_uses_bounding_box_of_moved_tiles(self, make_tile):
        tiles = [make_tile("t1", 50, 40, 100, 100), make_tile("t2", 300, 60, 100, 100)]
        # Box spans x 50..400, y 40..160: wider than tall
        assert next_placement_position(tiles) == (50, 160)
