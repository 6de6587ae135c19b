# File: src/score_cutter/workspace/workspace_config.py
"""
Workspace configuration.

Groups the per-stage configurations used by a Workspace session together
with the session-level settings (nudge steps, stroke defaults).

Example:
    >>> config = WorkspaceConfig(snap=SnapConfig(threshold=12.0))
    >>> config.validate()
"""

from dataclasses import dataclass, field
from enum import Enum

from ..cell_decomposition.cell_labeling import LabelConfig
from ..layout.snap import SnapConfig
from ..strokes.stroke_clipping import StrokeConfig


class LabelPosition(Enum):
    """Where a tile's label is drawn."""
    TOP_LEFT = "top-left"
    CENTER = "center"
    TOP_RIGHT = "top-right"


# Cycling order for the label position toggle
LABEL_POSITION_CYCLE = (
    LabelPosition.TOP_LEFT,
    LabelPosition.CENTER,
    LabelPosition.TOP_RIGHT,
)


@dataclass
class WorkspaceConfig:
    """Configuration for a Workspace session.

    Attributes:
        labels: Label numbering configuration.
        snap: Edge snapping configuration.
        strokes: Stroke splitting configuration.
        nudge_step: Tile movement per nudge, in layout pixels.
        large_nudge_step: Tile movement per large nudge.
        default_stroke_color: Color used when a stroke gives none.
        default_stroke_width: Width used when a stroke gives none.
    """
    labels: LabelConfig = field(default_factory=LabelConfig)
    snap: SnapConfig = field(default_factory=SnapConfig)
    strokes: StrokeConfig = field(default_factory=StrokeConfig)

    nudge_step: float = 1.0
    large_nudge_step: float = 10.0

    default_stroke_color: str = "#ffffff"
    default_stroke_width: float = 10.0

    def validate(self) -> None:
        """Validate all nested configurations.

        Raises:
            ValueError: If any setting is out of range.
        """
        self.labels.validate()
        self.snap.validate()
        self.strokes.validate()

        if self.nudge_step <= 0 or self.large_nudge_step <= 0:
            raise ValueError("Nudge steps must be positive")
        if self.default_stroke_width < 0:
            raise ValueError(
                f"default_stroke_width must be >= 0, got {self.default_stroke_width}"
            )
