"""Compliance heatmap domain."""

from .router import router
from .service import (
    AxisIndexMismatchError,
    build_axis_index,
    project,
    classify,
    severity_color,
    list_severity_bands,
    axis_domain,
    build_heatmap,
    format_tooltip,
    control_status_score,
    observations_from_control_results,
)
from .selection import (
    NONE_ACTIVE,
    initial_state,
    handle_pointer_event,
    enter,
    leave,
    is_active,
    point_style,
)
from .schemas import (
    SeverityBand,
    PointerEventKind,
    ControlStatus,
    Observation,
    PlotPoint,
    AxisDomain,
    HeatmapGrid,
    SelectionState,
    PointerEvent,
    PointStyle,
    ControlResult,
    HeatmapRequest,
    ComplianceGridRequest,
    ClassifyRequest,
    ClassifyResponse,
    SelectionRequest,
)
from .constants import (
    HIGH_SEVERITY_MAX,
    MEDIUM_SEVERITY_MAX,
    SEVERITY_COLORS,
    VALUE_DOMAIN,
    MARKER_AREA_RANGE,
    CONTROL_STATUS_SCORES,
)

__all__ = [
    # Router
    "router",
    # Service functions
    "AxisIndexMismatchError",
    "build_axis_index",
    "project",
    "classify",
    "severity_color",
    "list_severity_bands",
    "axis_domain",
    "build_heatmap",
    "format_tooltip",
    "control_status_score",
    "observations_from_control_results",
    # Selection
    "NONE_ACTIVE",
    "initial_state",
    "handle_pointer_event",
    "enter",
    "leave",
    "is_active",
    "point_style",
    # Schemas
    "SeverityBand",
    "PointerEventKind",
    "ControlStatus",
    "Observation",
    "PlotPoint",
    "AxisDomain",
    "HeatmapGrid",
    "SelectionState",
    "PointerEvent",
    "PointStyle",
    "ControlResult",
    "HeatmapRequest",
    "ComplianceGridRequest",
    "ClassifyRequest",
    "ClassifyResponse",
    "SelectionRequest",
    # Constants
    "HIGH_SEVERITY_MAX",
    "MEDIUM_SEVERITY_MAX",
    "SEVERITY_COLORS",
    "VALUE_DOMAIN",
    "MARKER_AREA_RANGE",
    "CONTROL_STATUS_SCORES",
]
