# File: api/utils/serialization.py
from typing import List

from api.models.cutter_models import (
    CellBoundsModel,
    CellModel,
    GuideLineModel,
    HorizontalLineModel,
    PlacedTileModel,
    PointModel,
    RectModel,
    SnapResponse,
    StrokeFragmentModel,
    VerticalLineModel,
)
from score_cutter.cell_decomposition import Cell, CellBounds, HorizontalLine, VerticalLine
from score_cutter.geometry import Point, Rect
from score_cutter.layout import PlacedTile, SnapResult
from score_cutter.strokes import StrokeFragment


def to_rect(model: RectModel) -> Rect:
    return Rect(model.x, model.y, model.width, model.height)


def serialize_rect(rect: Rect) -> RectModel:
    return RectModel(**rect.to_dict())


def to_point(model: PointModel) -> Point:
    return Point(model.x, model.y)


def to_horizontal_lines(models: List[HorizontalLineModel]) -> List[HorizontalLine]:
    lines = []
    for m in models:
        line = HorizontalLine(y=m.y, left_bound_x=m.left_bound_x,
                              right_bound_x=m.right_bound_x, image_id=m.image_id)
        if m.id:
            line.id = m.id
        lines.append(line)
    return lines


def to_vertical_lines(models: List[VerticalLineModel]) -> List[VerticalLine]:
    lines = []
    for m in models:
        line = VerticalLine(x=m.x, top_bound_y=m.top_bound_y,
                            bottom_bound_y=m.bottom_bound_y, image_id=m.image_id)
        if m.id:
            line.id = m.id
        lines.append(line)
    return lines


def to_cell(model: CellModel) -> Cell:
    return Cell(id=model.id, image_id=model.image_id, label=model.label,
                rect=to_rect(model.rect))


def serialize_cell(cell: Cell) -> CellModel:
    return CellModel(id=cell.id, image_id=cell.image_id, label=cell.label,
                     rect=serialize_rect(cell.rect))


def serialize_cell_bounds(bounds: CellBounds) -> CellBoundsModel:
    return CellBoundsModel(**bounds.to_dict())


def to_placed_tile(model: PlacedTileModel) -> PlacedTile:
    return PlacedTile(id=model.id, cell_id=model.cell_id, x=model.x, y=model.y,
                      label=model.label, rect=to_rect(model.rect))


def serialize_snap_result(result: SnapResult) -> SnapResponse:
    return SnapResponse(
        x=result.x,
        y=result.y,
        snapped_x=result.snapped_x,
        snapped_y=result.snapped_y,
        guide_lines=[GuideLineModel(**g.to_dict()) for g in result.guide_lines],
    )


def serialize_fragment(fragment: StrokeFragment) -> StrokeFragmentModel:
    return StrokeFragmentModel(
        placed_tile_id=fragment.placed_tile_id,
        points=[PointModel(x=p.x, y=p.y) for p in fragment.points],
        color=fragment.color,
        width=fragment.width,
    )
