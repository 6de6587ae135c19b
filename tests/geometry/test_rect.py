# File: tests/geometry/test_rect.py
"""Tests for the rectangle and point primitives."""

import pytest

from score_cutter.geometry import Point, Rect, bounding_box, point_in_rect, rects_intersect


class TestRect:
    """Tests for the Rect dataclass."""

    def test_edges(self):
        rect = Rect(100, 50, 200, 150)
        assert rect.left == 100
        assert rect.top == 50
        assert rect.right == 300
        assert rect.bottom == 200
        assert rect.area == 30000

    def test_from_edges(self):
        assert Rect.from_edges(10, 20, 110, 70) == Rect(10, 20, 100, 50)

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            Rect(0, 0, -1, 10)

    def test_zero_size_allowed(self):
        assert Rect(0, 0, 0, 0).area == 0

    def test_moved_to_keeps_size(self):
        assert Rect(5, 5, 40, 30).moved_to(100, 200) == Rect(100, 200, 40, 30)

    def test_contains_rect(self):
        outer = Rect(0, 0, 200, 100)
        assert outer.contains_rect(Rect(0, 0, 100, 100))
        assert outer.contains_rect(outer)
        assert not outer.contains_rect(Rect(150, 0, 100, 100))

    def test_dict_round_trip(self):
        rect = Rect(1.5, 2, 3, 4)
        assert Rect.from_dict(rect.to_dict()) == rect


class TestPointInRect:
    rect = Rect(100, 100, 200, 150)

    def test_inside_and_corners(self):
        assert point_in_rect(150, 150, self.rect)
        assert point_in_rect(100, 100, self.rect)
        assert point_in_rect(300, 250, self.rect)

    @pytest.mark.parametrize("x, y", [(50, 150), (350, 150), (150, 50), (150, 300)])
    def test_outside(self, x, y):
        assert not point_in_rect(x, y, self.rect)


class TestRectsIntersect:
    base = Rect(100, 100, 200, 150)

    def test_overlapping(self):
        assert rects_intersect(self.base, Rect(150, 150, 100, 100))

    def test_touching_edges(self):
        assert rects_intersect(self.base, Rect(300, 100, 100, 150))

    def test_separate(self):
        assert not rects_intersect(self.base, Rect(400, 100, 100, 150))

    def test_contained(self):
        assert rects_intersect(self.base, Rect(150, 150, 50, 50))


class TestBoundingBox:

    def test_empty(self):
        assert bounding_box([]) is None

    def test_single(self):
        rect = Rect(100, 100, 200, 150)
        assert bounding_box([rect]) == rect

    def test_multiple(self):
        rects = [Rect(0, 0, 100, 100), Rect(200, 150, 100, 100)]
        assert bounding_box(rects) == Rect(0, 0, 300, 250)

    def test_negative_coordinates(self):
        rects = [Rect(-50, -50, 100, 100), Rect(100, 100, 100, 100)]
        assert bounding_box(rects) == Rect(-50, -50, 250, 250)


def test_point_offset():
    assert Point(10, 20).offset(-10, 5) == Point(0, 25)
