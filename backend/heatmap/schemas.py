"""
Compliance heatmap schemas.

Pydantic models for the categorical heatmap grid:
- Observations (row label, column label, score)
- Plot points positioned on the grid
- Severity bands used for color coding
- Pointer selection state and events
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class SeverityBand(str, Enum):
    """Risk severity derived from a compliance score.

    Polarity is inverted: a low score means high severity.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PointerEventKind(str, Enum):
    """Pointer interactions on the plotted point collection."""

    ENTER = "enter"
    LEAVE = "leave"


class ControlStatus(str, Enum):
    """Implementation status of a single assessed control."""

    IMPLEMENTED = "implemented"
    PARTIALLY_IMPLEMENTED = "partially_implemented"
    NOT_IMPLEMENTED = "not_implemented"
    NOT_APPLICABLE = "not_applicable"


class Observation(BaseModel):
    """One (row label, column label, value) input triple."""

    model_config = ConfigDict(frozen=True)

    row_label: str = Field(..., min_length=1, description="Row label (e.g. control)")
    column_label: str = Field(..., min_length=1, description="Column label (e.g. domain)")
    value: float = Field(
        ...,
        strict=True,
        allow_inf_nan=False,
        description="Score, nominally 0-100 (not enforced)",
    )


class PlotPoint(BaseModel):
    """An observation positioned on the grid and classified for rendering."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=0, description="Position of the observation in the input")
    row_position: int = Field(..., ge=0)
    column_position: int = Field(..., ge=0)
    value: float
    row_label: str
    column_label: str
    severity: SeverityBand
    color: str


class AxisDomain(BaseModel):
    """Inclusive integer domain of one grid axis."""

    model_config = ConfigDict(frozen=True)

    lower: int = 0
    upper: int = Field(..., ge=0)


class HeatmapGrid(BaseModel):
    """Dense categorical grid ready for a point-plotting surface."""

    row_index: dict[str, int] = Field(default_factory=dict)
    column_index: dict[str, int] = Field(default_factory=dict)
    points: list[PlotPoint] = Field(default_factory=list)
    row_domain: Optional[AxisDomain] = None
    column_domain: Optional[AxisDomain] = None

    @computed_field
    @property
    def is_empty(self) -> bool:
        return not self.points

    @computed_field
    @property
    def row_labels(self) -> list[str]:
        """Row labels in axis order."""
        return list(self.row_index)

    @computed_field
    @property
    def column_labels(self) -> list[str]:
        """Column labels in axis order."""
        return list(self.column_index)


class SelectionState(BaseModel):
    """Hover selection: at most one active point, or none."""

    model_config = ConfigDict(frozen=True)

    active_id: Optional[int] = Field(None, ge=0)

    @property
    def is_active(self) -> bool:
        return self.active_id is not None


class PointerEvent(BaseModel):
    """Pointer enter/leave event from the rendering surface."""

    model_config = ConfigDict(frozen=True)

    kind: PointerEventKind
    point_id: Optional[int] = Field(None, ge=0)

    @model_validator(mode="after")
    def _enter_needs_point(self) -> "PointerEvent":
        if self.kind == PointerEventKind.ENTER and self.point_id is None:
            raise ValueError("enter events require a point_id")
        return self


class PointStyle(BaseModel):
    """Visual style of one point under the current selection."""

    fill_color: str
    fill_opacity: float = Field(..., ge=0, le=1)
    stroke_color: Optional[str] = None
    stroke_width: float = Field(0, ge=0)


class ControlResult(BaseModel):
    """Assessment result for one control within a domain."""

    domain: str = Field(..., min_length=1)
    control: str = Field(..., min_length=1)
    status: ControlStatus


# Request/response schemas for API
class HeatmapRequest(BaseModel):
    """Request model for building a heatmap grid."""

    observations: list[Observation] = Field(default_factory=list)


class ComplianceGridRequest(BaseModel):
    """Request model for a heatmap built from control assessment results."""

    results: list[ControlResult] = Field(default_factory=list)


class ClassifyRequest(BaseModel):
    """Request model for classifying a single score."""

    value: float = Field(..., strict=True, allow_inf_nan=False)


class ClassifyResponse(BaseModel):
    """Severity classification of a single score."""

    value: float
    severity: SeverityBand
    color: str


class SelectionRequest(BaseModel):
    """Current selection state plus the pointer event to apply."""

    state: SelectionState = Field(default_factory=SelectionState)
    event: PointerEvent
