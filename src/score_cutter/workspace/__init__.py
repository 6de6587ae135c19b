# File: src/score_cutter/workspace/__init__.py
"""
Workspace session combining cutting, layout and strokes.
"""

from .workspace_config import (
    LabelPosition,
    LABEL_POSITION_CYCLE,
    WorkspaceConfig,
)
from .workspace import Workspace

__all__ = [
    "LabelPosition",
    "LABEL_POSITION_CYCLE",
    "WorkspaceConfig",
    "Workspace",
]
