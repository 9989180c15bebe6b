"""MetaWorks Compliance Heatmap - compliance risk visualization backend.

This package maps assessment scores onto a categorical heatmap grid and
summarizes domain risk for the compliance dashboard.
All components are pure Python.
"""

__version__ = "0.1.0"

# Heatmap grid mapper
from .heatmap import (
    Observation,
    PlotPoint,
    HeatmapGrid,
    SeverityBand,
    SelectionState,
    PointerEvent,
    AxisIndexMismatchError,
    build_axis_index,
    project,
    classify,
    build_heatmap,
    handle_pointer_event,
)

# Risk dashboard
from .risk_dashboard import (
    RiskBand,
    DomainRisk,
    RiskDashboard,
    build_dashboard,
)

__all__ = [
    "__version__",
    # Heatmap
    "Observation",
    "PlotPoint",
    "HeatmapGrid",
    "SeverityBand",
    "SelectionState",
    "PointerEvent",
    "AxisIndexMismatchError",
    "build_axis_index",
    "project",
    "classify",
    "build_heatmap",
    "handle_pointer_event",
    # Risk dashboard
    "RiskBand",
    "DomainRisk",
    "RiskDashboard",
    "build_dashboard",
]
