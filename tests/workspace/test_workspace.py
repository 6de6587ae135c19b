# File: tests/workspace/test_workspace.py
"""Tests for the Workspace session."""

import pytest

from score_cutter.cell_decomposition import ScoreImage
from score_cutter.geometry import Point, Rect
from score_cutter.layout import SnapConfig
from score_cutter.workspace import LabelPosition, Workspace, WorkspaceConfig


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def ws(image) -> Workspace:
    """Workspace holding the standard 800 x 600 image."""
    workspace = Workspace()
    workspace.add_image(image)
    return workspace


def labels(ws, image_id="img1"):
    return [c.label for c in ws.cells_for_image(image_id)]


# ---------------------------------------------------------------------------
# Images and cut lines
# ---------------------------------------------------------------------------

class TestCutting:

    def test_new_image_is_one_cell(self, ws):
        cells = ws.cells_for_image("img1")
        assert len(cells) == 1
        assert cells[0].rect == Rect(0, 0, 800, 600)
        assert cells[0].label == "1"
        assert ws.next_number_by_image["img1"] == 2

    def test_first_cut_spans_image(self, ws):
        line = ws.add_horizontal_line("img1", 100, 300)

        assert (line.left_bound_x, line.right_bound_x) == (0, 800)
        assert labels(ws) == ["1", "2"]

    def test_second_cut_bounded_to_cell_under_point(self, ws):
        ws.add_horizontal_line("img1", 100, 300)
        line = ws.add_vertical_line("img1", 400, 100)

        assert (line.top_bound_y, line.bottom_bound_y) == (0, 300)
        assert [c.rect for c in ws.cells_for_image("img1")] == [
            Rect(0, 0, 400, 300),
            Rect(400, 0, 400, 300),
            Rect(0, 300, 800, 300),
        ]
        # Top band kept "1", its new right half is fresh, bottom kept "2"
        assert labels(ws) == ["1", "3", "2"]

    def test_explicit_bounds(self, ws):
        line = ws.add_vertical_line("img1", 400, 100, top_bound_y=0, bottom_bound_y=600)
        assert (line.top_bound_y, line.bottom_bound_y) == (0, 600)

    def test_unknown_image_is_ignored(self, ws, caplog):
        assert ws.add_horizontal_line("nope", 0, 10) is None
        assert "unknown image" in caplog.text

    def test_move_line(self, ws):
        line = ws.add_horizontal_line("img1", 100, 300)
        ws.move_line(line.id, 200)

        rects = [c.rect for c in ws.cells_for_image("img1")]
        assert rects == [Rect(0, 0, 800, 200), Rect(0, 200, 800, 400)]
        # Neither band matches or fits inside an old band after the move
        assert labels(ws) == ["1", "3"]

    def test_remove_line_merges_with_fresh_label(self, ws):
        line = ws.add_horizontal_line("img1", 100, 300)
        ws.remove_line(line.id)

        assert labels(ws) == ["3"]
        assert ws.remove_line(line.id) is None

    def test_clear_lines_restarts_numbering(self, ws):
        ws.add_horizontal_line("img1", 100, 300)
        ws.add_horizontal_line("img1", 100, 100)
        ws.clear_lines("img1")

        assert labels(ws) == ["1"]
        assert ws.horizontal_lines == []

    def test_clear_lines_unknown_image(self, ws, caplog):
        ws.add_horizontal_line("img1", 100, 300)
        ws.clear_lines("nope")

        assert "unknown image" in caplog.text
        assert labels(ws) == ["1", "2"]
        assert len(ws.horizontal_lines) == 1

    def test_lines_for_image(self, ws):
        h = ws.add_horizontal_line("img1", 100, 300)
        v = ws.add_vertical_line("img1", 400, 100)
        assert ws.lines_for_image("img1") == ([h], [v])
        assert ws.lines_for_image("img2") == ([], [])

    def test_images_are_independent(self, ws):
        ws.add_image(ScoreImage(id="img2", width=400, height=400))
        ws.add_horizontal_line("img1", 100, 300)

        assert labels(ws, "img2") == ["1"]
        assert [c.id for c in ws.cells_for_image("img2")] == ["img2-1"]

    def test_remove_image(self, ws):
        ws.add_horizontal_line("img1", 100, 300)
        ws.remove_image("img1")

        assert ws.cells == []
        assert ws.horizontal_lines == []
        assert ws.remove_image("img1") is None


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

class TestLayout:

    def test_place_cells_auto_position(self, ws):
        ws.add_horizontal_line("img1", 100, 300)
        first = ws.place_cell("img1-1")
        second = ws.place_cell("img1-2")

        assert (first.x, first.y) == (0, 0)
        # 800 x 300 layout is wider than tall, so the next tile goes below
        assert (second.x, second.y) == (0, 300)

    def test_place_unknown_cell(self, ws):
        assert ws.place_cell("img1-99") is None
        assert ws.placed_tiles == []

    def test_placed_tile_survives_recut(self, ws):
        tile = ws.place_cell("img1-1")
        ws.add_horizontal_line("img1", 100, 300)

        assert tile.rect == Rect(0, 0, 800, 600)

    def test_drag_snaps_to_other_tile(self, ws):
        ws.add_horizontal_line("img1", 100, 300)
        a = ws.place_cell("img1-1")
        b = ws.place_cell("img1-2")

        result = ws.drag_tile(b.id, 5, 305)
        assert result.snapped_x and result.snapped_y
        assert (b.x, b.y) == (0, 300)
        assert (a.x, a.y) == (0, 0)

    def test_drag_uses_configured_threshold(self, image):
        ws = Workspace(WorkspaceConfig(snap=SnapConfig(threshold=0)))
        ws.add_image(image)
        tile = ws.place_cell("img1-1")

        result = ws.drag_tile(tile.id, 3, 3)
        assert not result.snapped_x
        assert (tile.x, tile.y) == (3, 3)

    def test_nudge(self, ws):
        tile = ws.place_cell("img1-1")
        ws.nudge_tile(tile.id, 1, 0)
        ws.nudge_tile(tile.id, 0, -1, large=True)

        assert (tile.x, tile.y) == (1, -10)

    def test_remove_tile_drops_strokes_and_selection(self, ws):
        tile = ws.place_cell("img1-1")
        ws.select_tile(tile.id)
        ws.add_stroke([Point(10, 10), Point(50, 50)])

        ws.remove_tile(tile.id)
        assert ws.placed_tiles == []
        assert ws.strokes == []
        assert ws.selected_tile_id is None

    def test_layout_bounds(self, ws):
        assert ws.layout_bounds() is None
        ws.add_horizontal_line("img1", 100, 300)
        ws.place_cell("img1-1")
        ws.place_cell("img1-2")
        assert ws.layout_bounds() == Rect(0, 0, 800, 600)

    def test_cycle_label_position(self, ws):
        assert ws.label_position is LabelPosition.TOP_LEFT
        assert ws.cycle_label_position() is LabelPosition.CENTER
        assert ws.cycle_label_position() is LabelPosition.TOP_RIGHT
        assert ws.cycle_label_position() is LabelPosition.TOP_LEFT


# ---------------------------------------------------------------------------
# Strokes
# ---------------------------------------------------------------------------

class TestStrokes:

    def test_stroke_split_over_tiles(self, ws):
        ws.add_vertical_line("img1", 400, 100)
        left = ws.place_cell("img1-1")
        right = ws.place_cell("img1-2")
        # Tall layout: the right half is placed beside the left half
        assert (right.x, right.y) == (400, 0)

        stored = ws.add_stroke([Point(300, 100), Point(500, 100)], color="#000000", width=4)

        assert [s.placed_tile_id for s in stored] == [left.id, right.id]
        assert stored[1].points == [Point(0, 100), Point(100, 100)]
        assert all(s.color == "#000000" and s.width == 4 for s in stored)
        assert ws.strokes_for_tile(right.id) == [stored[1]]

    def test_default_color_and_width(self, ws):
        ws.place_cell("img1-1")
        stroke = ws.add_stroke([Point(1, 1), Point(2, 2)])[0]
        assert stroke.color == ws.config.default_stroke_color
        assert stroke.width == ws.config.default_stroke_width

    def test_undo_and_remove(self, ws):
        ws.place_cell("img1-1")
        first = ws.add_stroke([Point(1, 1), Point(2, 2)])[0]
        second = ws.add_stroke([Point(3, 3), Point(4, 4)])[0]

        assert ws.undo_last_stroke() == second
        assert ws.remove_stroke(first.id) == first
        assert ws.strokes == []
        assert ws.undo_last_stroke() is None

    def test_clear_layout(self, ws):
        tile = ws.place_cell("img1-1")
        ws.select_tile(tile.id)
        ws.add_stroke([Point(1, 1), Point(2, 2)])
        ws.clear_layout()

        assert ws.placed_tiles == [] and ws.strokes == []
        assert ws.selected_tile_id is None


def test_invalid_config_rejected():
    with pytest.raises(ValueError):
        Workspace(WorkspaceConfig(nudge_step=0))
