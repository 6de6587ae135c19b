# File: api/models/cutter_models.py
from pydantic import BaseModel, Field
from typing import List, Literal, Optional


class PointModel(BaseModel):
    """2D point in pixels."""
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate")


class RectModel(BaseModel):
    """Axis-aligned rectangle, top-left origin."""
    x: float = Field(description="Left edge")
    y: float = Field(description="Top edge")
    width: float = Field(description="Width", ge=0)
    height: float = Field(description="Height", ge=0)


class ImageModel(BaseModel):
    """Source image dimensions."""
    id: str = Field(description="Image identifier", min_length=1)
    width: float = Field(description="Image width in pixels", gt=0)
    height: float = Field(description="Image height in pixels", gt=0)
    name: str = Field(default="", description="Display name")


class HorizontalLineModel(BaseModel):
    """Horizontal cut line bounded in x."""
    y: float = Field(description="Line position")
    left_bound_x: float = Field(description="Leftmost x where the line applies")
    right_bound_x: float = Field(description="Rightmost x where the line applies")
    image_id: str = Field(default="", description="Owning image (optional)")
    id: Optional[str] = Field(default=None, description="Line identifier")


class VerticalLineModel(BaseModel):
    """Vertical cut line bounded in y."""
    x: float = Field(description="Line position")
    top_bound_y: float = Field(description="Topmost y where the line applies")
    bottom_bound_y: float = Field(description="Bottommost y where the line applies")
    image_id: str = Field(default="", description="Owning image (optional)")
    id: Optional[str] = Field(default=None, description="Line identifier")


class CellModel(BaseModel):
    """Labeled rectangular region of an image."""
    id: str
    image_id: str
    label: str
    rect: RectModel


class CellBoundsModel(BaseModel):
    """Edges of a cell."""
    left_x: float
    top_y: float
    right_x: float
    bottom_y: float


class DecomposeRequest(BaseModel):
    """Image and its cut lines."""
    image: ImageModel
    horizontal_lines: List[HorizontalLineModel] = Field(default_factory=list)
    vertical_lines: List[VerticalLineModel] = Field(default_factory=list)


class DecomposeResponse(BaseModel):
    cells: List[CellModel]


class LocateRequest(BaseModel):
    """Point lookup against an image's cut lines."""
    x: float
    y: float
    image_width: float = Field(gt=0)
    image_height: float = Field(gt=0)
    horizontal_lines: List[HorizontalLineModel] = Field(default_factory=list)
    vertical_lines: List[VerticalLineModel] = Field(default_factory=list)


class LabelRequest(BaseModel):
    """Freshly decomposed cells plus the previous labeled snapshot."""
    raw_cells: List[CellModel]
    previous_cells: List[CellModel] = Field(default_factory=list)
    next_number: int = Field(default=1, ge=0, description="Next fresh label number")


class LabelResponse(BaseModel):
    cells: List[CellModel]
    next_number: int


class SnapRequest(BaseModel):
    """A tile being dragged and the tiles it may snap to."""
    moving_rect: RectModel
    candidate_rects: List[RectModel] = Field(default_factory=list)
    proposed_x: float
    proposed_y: float
    threshold: Optional[float] = Field(default=None, ge=0, description="Snap distance in pixels")


class GuideLineModel(BaseModel):
    type: Literal["vertical", "horizontal"]
    position: float


class SnapResponse(BaseModel):
    x: float
    y: float
    snapped_x: bool
    snapped_y: bool
    guide_lines: List[GuideLineModel]


class PlacedTileModel(BaseModel):
    """Cell copy placed on the layout."""
    id: str = Field(min_length=1)
    cell_id: str = ""
    x: float
    y: float
    label: str = ""
    rect: RectModel


class StrokeClipRequest(BaseModel):
    """Layout-space stroke to split over the placed tiles."""
    points: List[PointModel]
    placed_tiles: List[PlacedTileModel]
    color: str = "#ffffff"
    width: float = Field(default=10.0, ge=0)


class StrokeFragmentModel(BaseModel):
    placed_tile_id: str
    points: List[PointModel]
    color: str
    width: float


class StrokeClipResponse(BaseModel):
    fragments: List[StrokeFragmentModel]
