# tests/conftest.py
import sys
import os

# Add src directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

import pytest

from score_cutter.cell_decomposition import HorizontalLine, ScoreImage, VerticalLine
from score_cutter.geometry import Rect
from score_cutter.layout import PlacedTile


@pytest.fixture
def image() -> ScoreImage:
    """Standard 800 x 600 test image."""
    return ScoreImage(id="img1", width=800, height=600, name="test.png")


@pytest.fixture
def h_line():
    """Factory for horizontal lines spanning the test image unless bounded."""
    def _make(y, left_bound_x=0, right_bound_x=1000, image_id="img1") -> HorizontalLine:
        return HorizontalLine(
            y=y, left_bound_x=left_bound_x, right_bound_x=right_bound_x, image_id=image_id
        )
    return _make


@pytest.fixture
def v_line():
    """Factory for vertical lines spanning the test image unless bounded."""
    def _make(x, top_bound_y=0, bottom_bound_y=1000, image_id="img1") -> VerticalLine:
        return VerticalLine(
            x=x, top_bound_y=top_bound_y, bottom_bound_y=bottom_bound_y, image_id=image_id
        )
    return _make


@pytest.fixture
def make_tile():
    """Factory for placed tiles whose source rect sits at the image origin."""
    def _make(tile_id, x, y, width, height, label="1") -> PlacedTile:
        return PlacedTile(
            id=tile_id,
            cell_id=f"img1-{label}",
            x=x,
            y=y,
            label=label,
            rect=Rect(0, 0, width, height),
        )
    return _make
