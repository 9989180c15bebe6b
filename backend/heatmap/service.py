"""
Compliance heatmap service.

Business logic for mapping sparse labeled scores onto a dense categorical grid:
- Axis indexing in first-occurrence order
- Projection of observations onto grid positions
- Severity classification for color coding
- Conversion of control assessment results into observations
"""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Sequence

from .schemas import (
    AxisDomain,
    ControlResult,
    ControlStatus,
    HeatmapGrid,
    Observation,
    PlotPoint,
    SeverityBand,
)
from .constants import (
    COLUMN_AXIS_NAME,
    CONTROL_STATUS_SCORES,
    HIGH_SEVERITY_MAX,
    MEDIUM_SEVERITY_MAX,
    ROW_AXIS_NAME,
    SEVERITY_COLORS,
    VALUE_NAME,
)

logger = logging.getLogger(__name__)


class AxisIndexMismatchError(LookupError):
    """Raised when an observation label is missing from its axis index.

    Signals that the index and the projection were not built from the same
    observation sequence.
    """

    def __init__(self, axis: str, label: str, position: int):
        self.axis = axis
        self.label = label
        self.position = position
        super().__init__(
            f"{axis} label {label!r} of observation {position} is not in the {axis} axis index"
        )


def build_axis_index(labels: Iterable[str]) -> dict[str, int]:
    """Assign each distinct label the next integer position, in first-occurrence order."""
    index: dict[str, int] = {}
    for label in labels:
        if label not in index:
            index[label] = len(index)
    return index


def classify(value: float) -> SeverityBand:
    """Classify a score into a severity band.

    Low scores mean high severity:
    - value <= 33: high
    - 33 < value <= 66: medium
    - value > 66: low

    Values outside 0-100 are classified by the same comparisons.
    """
    if value <= HIGH_SEVERITY_MAX:
        return SeverityBand.HIGH
    if value <= MEDIUM_SEVERITY_MAX:
        return SeverityBand.MEDIUM
    return SeverityBand.LOW


def severity_color(band: SeverityBand) -> str:
    """Get the display color for a severity band."""
    return SEVERITY_COLORS[band]


def list_severity_bands() -> list[dict]:
    """List severity bands with their score ranges and colors."""
    return [
        {
            "severity": SeverityBand.HIGH.value,
            "min_exclusive": None,
            "max_inclusive": HIGH_SEVERITY_MAX,
            "color": SEVERITY_COLORS[SeverityBand.HIGH],
        },
        {
            "severity": SeverityBand.MEDIUM.value,
            "min_exclusive": HIGH_SEVERITY_MAX,
            "max_inclusive": MEDIUM_SEVERITY_MAX,
            "color": SEVERITY_COLORS[SeverityBand.MEDIUM],
        },
        {
            "severity": SeverityBand.LOW.value,
            "min_exclusive": MEDIUM_SEVERITY_MAX,
            "max_inclusive": None,
            "color": SEVERITY_COLORS[SeverityBand.LOW],
        },
    ]


def project(
    observations: Sequence[Observation],
    row_index: dict[str, int],
    column_index: dict[str, int],
) -> list[PlotPoint]:
    """Position each observation on the grid, preserving input order.

    Raises:
        AxisIndexMismatchError: if a label is absent from its axis index
    """
    points = []
    for i, obs in enumerate(observations):
        try:
            row_position = row_index[obs.row_label]
        except KeyError:
            raise AxisIndexMismatchError("row", obs.row_label, i) from None
        try:
            column_position = column_index[obs.column_label]
        except KeyError:
            raise AxisIndexMismatchError("column", obs.column_label, i) from None

        severity = classify(obs.value)
        points.append(
            PlotPoint(
                id=i,
                row_position=row_position,
                column_position=column_position,
                value=obs.value,
                row_label=obs.row_label,
                column_label=obs.column_label,
                severity=severity,
                color=severity_color(severity),
            )
        )
    return points


def axis_domain(count: int) -> Optional[AxisDomain]:
    """Get the inclusive domain [0, count - 1] of an axis, or None for an empty axis."""
    if count <= 0:
        return None
    return AxisDomain(lower=0, upper=count - 1)


def build_heatmap(observations: Sequence[Observation]) -> HeatmapGrid:
    """
    Build a renderable heatmap grid from an observation sequence.

    Builds the row and column axis indices, projects every observation onto
    the grid and classifies its score. An empty sequence yields an empty grid
    with no axis domains.
    """
    row_index = build_axis_index(obs.row_label for obs in observations)
    column_index = build_axis_index(obs.column_label for obs in observations)
    points = project(observations, row_index, column_index)

    logger.debug(
        "Built heatmap grid: %d points, %d rows, %d columns",
        len(points), len(row_index), len(column_index),
    )

    return HeatmapGrid(
        row_index=row_index,
        column_index=column_index,
        points=points,
        row_domain=axis_domain(len(row_index)),
        column_domain=axis_domain(len(column_index)),
    )


def format_tooltip(point: PlotPoint) -> list[str]:
    """Tooltip lines for a point: domain, control and whole-number score.

    The score rounds half up (12.5 becomes 13), not to the nearest even number.
    """
    score = Decimal(point.value).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return [
        f"{COLUMN_AXIS_NAME}: {point.column_label}",
        f"{ROW_AXIS_NAME}: {point.row_label}",
        f"{VALUE_NAME}: {score}%",
    ]


def control_status_score(status: ControlStatus | str) -> Optional[float]:
    """
    Get the compliance score credited for a control status.

    Returns None for not-applicable controls.

    Raises:
        ValueError: if the status is not a known control status
    """
    return CONTROL_STATUS_SCORES[ControlStatus(status)]


def observations_from_control_results(results: Iterable[ControlResult]) -> list[Observation]:
    """
    Convert control assessment results into heatmap observations.

    Domains become columns and controls become rows. Not-applicable controls
    are skipped; order is otherwise preserved.
    """
    observations = []
    skipped = 0
    for result in results:
        score = control_status_score(result.status)
        if score is None:
            skipped += 1
            continue
        observations.append(
            Observation(
                row_label=result.control,
                column_label=result.domain,
                value=score,
            )
        )

    if skipped:
        logger.debug("Skipped %d not-applicable control(s)", skipped)
    return observations
