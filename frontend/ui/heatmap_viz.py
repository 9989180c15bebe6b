"""
Compliance heatmap visualization components for Streamlit.

Provides reusable UI components for:
- Plotly scatter rendering of a heatmap grid
- Severity legend
- Point selection with highlight styling
- Empty-state handling
"""

from __future__ import annotations

import math
from typing import Sequence

import plotly.graph_objects as go
import streamlit as st

from backend.heatmap import (
    MARKER_AREA_RANGE,
    NONE_ACTIVE,
    SEVERITY_COLORS,
    VALUE_DOMAIN,
    HeatmapGrid,
    Observation,
    PlotPoint,
    PointerEvent,
    SelectionState,
    SeverityBand,
    build_heatmap,
    enter,
    format_tooltip,
    handle_pointer_event,
    leave,
    point_style,
)

NO_DATA_MESSAGE = "No heatmap data available. Complete an assessment to view compliance scores."

# Padding around the outermost grid positions, in axis units
AXIS_PADDING = 0.5

TRANSPARENT = "rgba(0,0,0,0)"


# =============================================================================
# Figure Construction
# =============================================================================


def marker_size(value: float) -> float:
    """Marker diameter for a score.

    Scores are clamped to the nominal 0-100 domain and mapped linearly onto
    a marker area range, so larger scores draw larger points.
    """
    lo, hi = VALUE_DOMAIN
    area_lo, area_hi = MARKER_AREA_RANGE
    clamped = min(hi, max(lo, value))
    area = area_lo + (clamped - lo) / (hi - lo) * (area_hi - area_lo)
    return math.sqrt(area)


def _axis_range(upper: int) -> list[float]:
    return [-AXIS_PADDING, upper + AXIS_PADDING]


def _hidden_axis(**kwargs) -> dict:
    return dict(
        showticklabels=False,
        showline=False,
        showgrid=False,
        zeroline=False,
        **kwargs,
    )


def build_heatmap_figure(
    grid: HeatmapGrid,
    selection: SelectionState = NONE_ACTIVE,
    height: int = 400,
) -> go.Figure:
    """Build a Plotly scatter figure for a heatmap grid.

    Columns map to the x axis and rows to the y axis. Each point is colored
    by severity, sized by score and styled by the hover selection. An empty
    grid yields a figure carrying only a "no data" annotation.

    Args:
        grid: Heatmap grid from build_heatmap
        selection: Current hover selection
        height: Chart height in pixels

    Returns:
        Plotly figure
    """
    fig = go.Figure()
    fig.update_layout(
        height=height,
        margin=dict(l=10, r=20, t=20, b=10),
        showlegend=False,
        plot_bgcolor=TRANSPARENT,
        paper_bgcolor=TRANSPARENT,
    )

    if grid.is_empty or grid.row_domain is None or grid.column_domain is None:
        fig.update_layout(
            xaxis=_hidden_axis(visible=False),
            yaxis=_hidden_axis(visible=False),
            annotations=[
                dict(text="No data", x=0.5, y=0.5, xref="paper", yref="paper", showarrow=False)
            ],
        )
        return fig

    styles = [point_style(p, selection) for p in grid.points]

    fig.add_trace(
        go.Scatter(
            x=[p.column_position for p in grid.points],
            y=[p.row_position for p in grid.points],
            mode="markers",
            customdata=[p.id for p in grid.points],
            hovertext=["<br>".join(format_tooltip(p)) for p in grid.points],
            hovertemplate="%{hovertext}<extra></extra>",
            marker=dict(
                size=[marker_size(p.value) for p in grid.points],
                color=[s.fill_color for s in styles],
                opacity=[s.fill_opacity for s in styles],
                line=dict(
                    color=[s.stroke_color or TRANSPARENT for s in styles],
                    width=[s.stroke_width for s in styles],
                ),
            ),
        )
    )

    fig.update_layout(
        xaxis=_hidden_axis(title="Domain", range=_axis_range(grid.column_domain.upper)),
        yaxis=_hidden_axis(title="Control", range=_axis_range(grid.row_domain.upper)),
    )
    return fig


# =============================================================================
# Streamlit Rendering
# =============================================================================


def _selection_key(key: str) -> str:
    return f"{key}_selection"


def get_selection(key: str = "heatmap") -> SelectionState:
    """Current selection for a rendered heatmap, NONE_ACTIVE if never set."""
    return st.session_state.get(_selection_key(key), NONE_ACTIVE)


def _update_selection(key: str, event: PointerEvent) -> SelectionState:
    state = handle_pointer_event(get_selection(key), event)
    st.session_state[_selection_key(key)] = state
    return state


def render_severity_legend() -> None:
    """Render the severity color legend."""
    labels = {
        SeverityBand.HIGH: "High risk (score ≤ 33%)",
        SeverityBand.MEDIUM: "Medium risk (34-66%)",
        SeverityBand.LOW: "Low risk (score > 66%)",
    }
    cols = st.columns(len(labels))
    for col, (band, label) in zip(cols, labels.items()):
        with col:
            st.markdown(
                f'<span style="color:{SEVERITY_COLORS[band]}">●</span> {label}',
                unsafe_allow_html=True,
            )


def pointer_event_from_chart(chart_state) -> PointerEvent | None:
    """Translate a Plotly chart selection into a pointer event.

    A selected point is an enter event on that point; an empty selection is
    a leave event. Returns None when the chart has not reported a selection.
    """
    if not chart_state or "selection" not in chart_state:
        return None
    points_selected = chart_state["selection"].get("points", [])
    if not points_selected or points_selected[0].get("customdata") is None:
        return leave()
    customdata = points_selected[0]["customdata"]
    point_id = customdata[0] if isinstance(customdata, list) else customdata
    return enter(int(point_id))


def render_heatmap(
    grid: HeatmapGrid,
    height: int = 400,
    key: str = "heatmap",
) -> PlotPoint | None:
    """Render a heatmap grid as a Plotly scatter.

    Selecting a point makes it the active point; clearing the selection
    makes none active. The selection lives in session state next to the
    chart widget state, and is applied before the figure is drawn.

    Args:
        grid: Heatmap grid from build_heatmap
        height: Chart height in pixels
        key: Widget key

    Returns:
        The active plot point, or None
    """
    if grid.is_empty:
        st.info(NO_DATA_MESSAGE)
        return None

    event = pointer_event_from_chart(st.session_state.get(key))
    state = _update_selection(key, event) if event is not None else get_selection(key)

    fig = build_heatmap_figure(grid, state, height=height)
    st.plotly_chart(
        fig,
        use_container_width=True,
        key=key,
        on_select="rerun",
        selection_mode="points",
    )

    if state.active_id is None or state.active_id >= len(grid.points):
        return None
    return grid.points[state.active_id]


def render_observations_heatmap(
    observations: Sequence[Observation],
    height: int = 400,
    key: str = "heatmap",
) -> PlotPoint | None:
    """Build and render a heatmap from observations, followed by the legend."""
    grid = build_heatmap(observations)
    active = render_heatmap(grid, height=height, key=key)
    render_severity_legend()
    return active


def render_point_details(point: PlotPoint) -> None:
    """Render tooltip-style details for the active point."""
    for line in format_tooltip(point):
        st.markdown(f"- {line}")
