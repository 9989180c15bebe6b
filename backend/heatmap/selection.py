"""
Hover selection for heatmap points.

The selection is an explicit value owned by the caller: at most one active
point id, or none. Pointer events are applied with a pure transition function
and point styling is derived from the current state.
"""

from .schemas import (
    PlotPoint,
    PointerEvent,
    PointerEventKind,
    PointStyle,
    SelectionState,
)
from .constants import (
    ACTIVE_OPACITY,
    ACTIVE_STROKE_COLOR,
    ACTIVE_STROKE_WIDTH,
    INACTIVE_OPACITY,
)

NONE_ACTIVE = SelectionState()


def initial_state() -> SelectionState:
    """Selection state of a freshly created heatmap."""
    return NONE_ACTIVE


def handle_pointer_event(state: SelectionState, event: PointerEvent) -> SelectionState:
    """Apply a pointer event to the selection state.

    Entering a point makes it the only active point, replacing any previous
    one. Leaving the point collection clears the selection.
    """
    if event.kind == PointerEventKind.ENTER:
        if state.active_id == event.point_id:
            return state
        return SelectionState(active_id=event.point_id)
    return NONE_ACTIVE


def enter(point_id: int) -> PointerEvent:
    """Pointer-enter event on the point with the given id."""
    return PointerEvent(kind=PointerEventKind.ENTER, point_id=point_id)


def leave() -> PointerEvent:
    """Pointer-leave event; clears any active point."""
    return PointerEvent(kind=PointerEventKind.LEAVE)


def is_active(point: PlotPoint, state: SelectionState) -> bool:
    """Whether the point is the active point under the selection state."""
    return state.active_id == point.id


def point_style(point: PlotPoint, state: SelectionState) -> PointStyle:
    """Style of a point: the active point is opaque with a white border."""
    if is_active(point, state):
        return PointStyle(
            fill_color=point.color,
            fill_opacity=ACTIVE_OPACITY,
            stroke_color=ACTIVE_STROKE_COLOR,
            stroke_width=ACTIVE_STROKE_WIDTH,
        )
    return PointStyle(
        fill_color=point.color,
        fill_opacity=INACTIVE_OPACITY,
        stroke_color=None,
        stroke_width=0,
    )
