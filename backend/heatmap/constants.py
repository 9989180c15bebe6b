"""
Compliance heatmap constants.

Severity thresholds, band colors and hover styling.
"""

from .schemas import ControlStatus, SeverityBand

# Inclusive upper bounds: score <= 33 is high severity, <= 66 medium, above is low
HIGH_SEVERITY_MAX = 33.0
MEDIUM_SEVERITY_MAX = 66.0

SEVERITY_COLORS: dict[SeverityBand, str] = {
    SeverityBand.HIGH: "#ef4444",    # red
    SeverityBand.MEDIUM: "#f59e0b",  # amber
    SeverityBand.LOW: "#10b981",     # green
}

# Nominal score domain and the marker area range it maps onto
VALUE_DOMAIN = (0.0, 100.0)
MARKER_AREA_RANGE = (100.0, 500.0)

ACTIVE_OPACITY = 0.9
INACTIVE_OPACITY = 0.7
ACTIVE_STROKE_COLOR = "#ffffff"
ACTIVE_STROKE_WIDTH = 1.0

# Tooltip axis names: columns are domains, rows are controls
COLUMN_AXIS_NAME = "Domain"
ROW_AXIS_NAME = "Control"
VALUE_NAME = "Score"

# Score credited per control status; None means the control is skipped
CONTROL_STATUS_SCORES: dict[ControlStatus, float | None] = {
    ControlStatus.IMPLEMENTED: 100.0,
    ControlStatus.PARTIALLY_IMPLEMENTED: 50.0,
    ControlStatus.NOT_IMPLEMENTED: 0.0,
    ControlStatus.NOT_APPLICABLE: None,
}
