# File: api/endpoints/cells.py
from fastapi import APIRouter

from api.models.cutter_models import (
    CellBoundsModel,
    DecomposeRequest,
    DecomposeResponse,
    LabelRequest,
    LabelResponse,
    LocateRequest,
)
from api.utils.errors import ValidationError, handle_exception
from api.utils.serialization import (
    serialize_cell,
    serialize_cell_bounds,
    to_cell,
    to_horizontal_lines,
    to_vertical_lines,
)
from score_cutter.cell_decomposition import (
    ScoreImage,
    assign_cell_labels,
    decompose_image_to_cells,
    find_cell_bounds_at_point,
)

import logging
logger = logging.getLogger("score_cutter.api")

router = APIRouter()


@router.post("/decompose", response_model=DecomposeResponse)
async def decompose(request: DecomposeRequest):
    """
    Split an image into cells along its cut lines.
    
    Cells come back in reading order with positional labels "1".."n";
    use /cells/labels to carry labels over from an earlier snapshot.
    """
    try:
        image_id = request.image.id
        for line in [*request.horizontal_lines, *request.vertical_lines]:
            if line.image_id and line.image_id != image_id:
                raise ValidationError(
                    f"line belongs to image '{line.image_id}', not '{image_id}'",
                    field="image_id",
                )

        image = ScoreImage(
            id=image_id,
            width=request.image.width,
            height=request.image.height,
            name=request.image.name,
        )
        cells = decompose_image_to_cells(
            image,
            to_horizontal_lines(request.horizontal_lines),
            to_vertical_lines(request.vertical_lines),
        )
        logger.info(f"Decomposed image {image_id} into {len(cells)} cells")
        return DecomposeResponse(cells=[serialize_cell(c) for c in cells])
    except Exception as e:
        raise handle_exception(e, resource_type="cells")


@router.post("/locate", response_model=CellBoundsModel)
async def locate(request: LocateRequest):
    """Return the bounds of the grid cell under a point."""
    try:
        bounds = find_cell_bounds_at_point(
            request.x,
            request.y,
            to_horizontal_lines(request.horizontal_lines),
            to_vertical_lines(request.vertical_lines),
            request.image_width,
            request.image_height,
        )
        return serialize_cell_bounds(bounds)
    except Exception as e:
        raise handle_exception(e, resource_type="cell_bounds")


@router.post("/labels", response_model=LabelResponse)
async def labels(request: LabelRequest):
    """Relabel fresh cells so they keep the labels of the cells they came from."""
    try:
        assignment = assign_cell_labels(
            [to_cell(c) for c in request.raw_cells],
            [to_cell(c) for c in request.previous_cells],
            request.next_number,
        )
        return LabelResponse(
            cells=[serialize_cell(c) for c in assignment.cells],
            next_number=assignment.next_number,
        )
    except Exception as e:
        raise handle_exception(e, resource_type="labels")
