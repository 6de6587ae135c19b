# File: src/score_cutter/cell_decomposition/cell_labeling.py
"""
Stable labels for recomputed cells.

Cells are rebuilt from scratch whenever a cut line changes, so identity has
to be recovered by comparing the new partition with the previous one.

Rules, applied to each new cell in traversal order:
    1. A previous cell with exactly the same rect -> reuse its label
    2. The first previous cell (in its original order) whose rect contains
       the new rect and whose label is still unclaimed -> reuse its label.
       This is one child of a split keeping its parent's identity.
    3. Otherwise -> next sequential number, and advance the counter

Every label handed out is claimed for the rest of the pass, so a parent's
label goes to at most one child. The counter is passed in and returned;
numbers are never given back, so a removed cell's label is not reused.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set

from .cell_types import Cell

logger = logging.getLogger(__name__)


@dataclass
class LabelConfig:
    """Configuration for cell labeling.

    Attributes:
        first_number: Counter value for an image with no labeling history.
    """
    first_number: int = 1

    def validate(self) -> None:
        """Raise ValueError if the configuration is invalid."""
        if self.first_number < 0:
            raise ValueError(
                f"first_number must be >= 0, got {self.first_number}"
            )


@dataclass
class LabelAssignment:
    """Result of a labeling pass.

    Attributes:
        cells: Labeled cells, in the same order as the input cells.
        next_number: Counter value to pass to the next pass for this image.
    """
    cells: List[Cell] = field(default_factory=list)
    next_number: int = 1


def _find_inherited_label(
    cell: Cell,
    previous_cells: Sequence[Cell],
    claimed: Set[str],
) -> Optional[str]:
    """Label the new cell should inherit from the previous partition, if any."""
    for previous in previous_cells:
        if previous.rect == cell.rect:
            return previous.label

    for previous in previous_cells:
        if previous.rect.contains_rect(cell.rect) and previous.label not in claimed:
            return previous.label

    return None


def assign_cell_labels(
    raw_cells: Sequence[Cell],
    previous_cells: Sequence[Cell],
    next_number: int,
) -> LabelAssignment:
    """Assign stable labels to freshly decomposed cells.

    Args:
        raw_cells: Cells from decompose_image_to_cells, in traversal order.
            Their provisional labels are ignored.
        previous_cells: The image's labeled cells from the previous pass.
        next_number: First unused label number for the image.

    Returns:
        LabelAssignment with relabeled cells and the updated counter.
    """
    claimed: Set[str] = set()
    current_number = next_number
    labeled: List[Cell] = []

    for raw in raw_cells:
        label = _find_inherited_label(raw, previous_cells, claimed)
        if label is None:
            label = str(current_number)
            current_number += 1

        claimed.add(label)
        labeled.append(raw.with_label(label))

    fresh = current_number - next_number
    if fresh:
        logger.debug(
            "Labeled %d cells, %d fresh labels (next number %d)",
            len(labeled), fresh, current_number,
        )
    return LabelAssignment(cells=labeled, next_number=current_number)
