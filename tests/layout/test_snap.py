# File: tests/layout/test_snap.py
"""Tests for edge snapping.

The moving tile is 100 x 100 throughout. The layout origin is always an
implicit snap candidate, so tests that probe a single axis keep the other
axis far from 0.
"""

import pytest

from score_cutter.geometry import Rect
from score_cutter.layout import (
    SNAP_THRESHOLD,
    GuideOrientation,
    SnapConfig,
    calculate_snap,
)


@pytest.fixture
def moving() -> Rect:
    return Rect(0, 0, 100, 100)


class TestOriginSnap:
    """The canvas origin acts as a zero-size candidate."""

    def test_no_candidates_far_from_origin(self, moving):
        result = calculate_snap(moving, [], 50, 50)
        assert (result.x, result.y) == (50, 50)
        assert not result.snapped_x
        assert not result.snapped_y
        assert result.guide_lines == []

    def test_left_edge_snaps_to_zero(self, moving):
        result = calculate_snap(moving, [], 5, 50)
        assert result.x == 0
        assert result.snapped_x
        assert not result.snapped_y

    def test_top_edge_snaps_to_zero(self, moving):
        result = calculate_snap(moving, [], 50, 5)
        assert result.y == 0
        assert result.snapped_y

    def test_both_edges_snap(self, moving):
        result = calculate_snap(moving, [], 3, 5)
        assert (result.x, result.y) == (0, 0)
        assert result.snapped_x and result.snapped_y

    def test_origin_can_be_disabled(self, moving):
        result = calculate_snap(moving, [], 5, 5, SnapConfig(snap_to_origin=False))
        assert (result.x, result.y) == (5, 5)
        assert not result.snapped_x and not result.snapped_y


class TestXAxisSnap:

    target = Rect(200, 500, 100, 100)

    def test_left_to_left(self, moving):
        result = calculate_snap(moving, [self.target], 205, 50)
        assert result.x == 200
        assert result.snapped_x

    def test_right_to_right(self, moving):
        # Right edge at 295, target right edge at 300
        result = calculate_snap(moving, [self.target], 195, 50)
        assert result.x == 200
        assert result.snapped_x

    def test_left_to_right_abutting(self, moving):
        target = Rect(0, 500, 100, 100)
        result = calculate_snap(moving, [target], 105, 50)
        assert result.x == 100
        assert result.snapped_x

    def test_right_to_left_abutting(self, moving):
        # Right edge at 195, target left edge at 200
        result = calculate_snap(moving, [self.target], 95, 50)
        assert result.x == 100
        assert result.snapped_x

    def test_out_of_range(self, moving):
        result = calculate_snap(moving, [self.target], 50, 50)
        assert result.x == 50
        assert not result.snapped_x


class TestYAxisSnap:

    target = Rect(500, 200, 100, 100)

    def test_top_to_top(self, moving):
        result = calculate_snap(moving, [self.target], 50, 205)
        assert result.y == 200
        assert result.snapped_y

    def test_bottom_to_bottom(self, moving):
        result = calculate_snap(moving, [self.target], 50, 195)
        assert result.y == 200

    def test_top_to_bottom_abutting(self, moving):
        target = Rect(500, 0, 100, 100)
        result = calculate_snap(moving, [target], 50, 105)
        assert result.y == 100

    def test_bottom_to_top_abutting(self, moving):
        result = calculate_snap(moving, [self.target], 50, 95)
        assert result.y == 100
        assert result.snapped_y


class TestThreshold:
    """Distances up to the threshold snap, inclusive."""

    target = Rect(300, 300, 100, 100)

    def test_default_threshold(self):
        assert SNAP_THRESHOLD == 8.0
        assert SnapConfig().threshold == 8.0

    def test_eight_pixels_snaps(self, moving):
        result = calculate_snap(moving, [self.target], 308, 500)
        assert result.x == 300
        assert result.snapped_x
        assert not result.snapped_y

    def test_nine_pixels_does_not_snap(self, moving):
        result = calculate_snap(moving, [self.target], 309, 500)
        assert result.x == 309
        assert not result.snapped_x

    def test_custom_threshold(self, moving):
        result = calculate_snap(moving, [self.target], 312, 500, SnapConfig(threshold=12))
        assert result.x == 300

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValueError):
            SnapConfig(threshold=-1).validate()


class TestMultipleCandidates:

    def test_closest_candidate_wins(self, moving):
        targets = [Rect(200, 500, 100, 100), Rect(150, 500, 40, 100)]
        # Left edge 145: 5 px from the second target's left edge at 150
        result = calculate_snap(moving, targets, 145, 50)
        assert result.x == 150

    def test_equal_distance_keeps_first_pairing(self, moving):
        # Left edge 204 is 4 px from 200; right edge 304 is 4 px from 308
        targets = [Rect(200, 500, 50, 50), Rect(258, 500, 50, 50)]
        result = calculate_snap(moving, targets, 204, 50)
        assert result.x == 200


class TestGuideLines:

    def test_vertical_guides_on_x_snap(self, moving):
        result = calculate_snap(moving, [Rect(200, 500, 100, 100)], 205, 50)
        assert [(g.orientation, g.position) for g in result.guide_lines] == [
            (GuideOrientation.VERTICAL, 200),
            (GuideOrientation.VERTICAL, 300),
        ]

    def test_horizontal_guides_on_y_snap(self, moving):
        result = calculate_snap(moving, [Rect(500, 200, 100, 100)], 50, 205)
        assert [(g.orientation, g.position) for g in result.guide_lines] == [
            (GuideOrientation.HORIZONTAL, 200),
            (GuideOrientation.HORIZONTAL, 300),
        ]

    def test_four_guides_vertical_first(self, moving):
        result = calculate_snap(moving, [Rect(200, 200, 100, 100)], 205, 205)
        assert result.snapped_x and result.snapped_y
        assert [g.orientation for g in result.guide_lines] == [
            GuideOrientation.VERTICAL,
            GuideOrientation.VERTICAL,
            GuideOrientation.HORIZONTAL,
            GuideOrientation.HORIZONTAL,
        ]

    def test_guide_dict_shape(self, moving):
        result = calculate_snap(moving, [Rect(200, 500, 100, 100)], 205, 50)
        assert result.to_dict()["guide_lines"][0] == {"type": "vertical", "position": 200}
