# File: api/endpoints/layout.py
from fastapi import APIRouter

from api.models.cutter_models import (
    SnapRequest,
    SnapResponse,
    StrokeClipRequest,
    StrokeClipResponse,
)
from api.utils.errors import ValidationError, handle_exception
from api.utils.serialization import (
    serialize_fragment,
    serialize_snap_result,
    to_placed_tile,
    to_point,
    to_rect,
)
from score_cutter.layout import SnapConfig, calculate_snap
from score_cutter.strokes import split_stroke_by_tiles

import logging
logger = logging.getLogger("score_cutter.api")

# Mounted under /layout
layout_router = APIRouter()

# Mounted under /strokes
strokes_router = APIRouter()


@layout_router.post("/snap", response_model=SnapResponse)
async def snap(request: SnapRequest):
    """
    Snap a dragged tile's proposed position to nearby tile edges.
    
    The layout origin is always a candidate; candidate_rects adds the
    other tiles.
    """
    try:
        config = SnapConfig()
        if request.threshold is not None:
            config = SnapConfig(threshold=request.threshold)

        result = calculate_snap(
            to_rect(request.moving_rect),
            [to_rect(r) for r in request.candidate_rects],
            request.proposed_x,
            request.proposed_y,
            config,
        )
        return serialize_snap_result(result)
    except Exception as e:
        raise handle_exception(e, resource_type="snap")


@strokes_router.post("/clip", response_model=StrokeClipResponse)
async def clip_stroke(request: StrokeClipRequest):
    """Split a layout-space stroke into fragments local to each tile."""
    try:
        tile_ids = [t.id for t in request.placed_tiles]
        if len(set(tile_ids)) != len(tile_ids):
            raise ValidationError("placed tile ids must be unique", field="placed_tiles")

        fragments = split_stroke_by_tiles(
            [to_point(p) for p in request.points],
            [to_placed_tile(t) for t in request.placed_tiles],
            request.color,
            request.width,
        )
        logger.info(
            f"Clipped stroke of {len(request.points)} points into {len(fragments)} fragments"
        )
        return StrokeClipResponse(fragments=[serialize_fragment(f) for f in fragments])
    except Exception as e:
        raise handle_exception(e, resource_type="stroke")
