"""
UI shared modules for the compliance dashboard.

This package contains reusable UI components and helpers used across
the dashboard pages.
"""

from frontend.ui.heatmap_viz import (
    NO_DATA_MESSAGE,
    marker_size,
    build_heatmap_figure,
    get_selection,
    pointer_event_from_chart,
    render_severity_legend,
    render_heatmap,
    render_observations_heatmap,
    render_point_details,
)
from frontend.ui.risk_cards import (
    NO_RISK_DATA_MESSAGE,
    render_risk_legend,
    render_domain_card,
    render_domain_cards,
    render_dashboard_summary,
)

__all__ = [
    # Heatmap visualization
    "NO_DATA_MESSAGE",
    "marker_size",
    "build_heatmap_figure",
    "get_selection",
    "pointer_event_from_chart",
    "render_severity_legend",
    "render_heatmap",
    "render_observations_heatmap",
    "render_point_details",
    # Risk cards
    "NO_RISK_DATA_MESSAGE",
    "render_risk_legend",
    "render_domain_card",
    "render_domain_cards",
    "render_dashboard_summary",
]
