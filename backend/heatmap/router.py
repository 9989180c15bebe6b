"""Compliance heatmap API endpoints."""

import logging

from fastapi import APIRouter, HTTPException

from . import selection, service
from .schemas import (
    ClassifyRequest,
    ClassifyResponse,
    ComplianceGridRequest,
    HeatmapGrid,
    HeatmapRequest,
    SelectionRequest,
    SelectionState,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/heatmap", tags=["heatmap"])


def _build_or_fail(observations) -> HeatmapGrid:
    try:
        return service.build_heatmap(observations)
    except service.AxisIndexMismatchError as e:
        logger.warning("Heatmap grid rejected: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/grid", response_model=HeatmapGrid)
async def build_grid(request: HeatmapRequest) -> HeatmapGrid:
    """
    Build a heatmap grid from labeled scores.

    Each distinct row and column label gets an integer axis position in
    order of first appearance. Every observation becomes one plot point,
    in input order, classified into a severity band.
    """
    return _build_or_fail(request.observations)


@router.post("/compliance-grid", response_model=HeatmapGrid)
async def build_compliance_grid(request: ComplianceGridRequest) -> HeatmapGrid:
    """
    Build a domain-by-control heatmap from assessment results.

    Implemented controls score 100, partially implemented 50 and not
    implemented 0. Not-applicable controls are left out.
    """
    observations = service.observations_from_control_results(request.results)
    return _build_or_fail(observations)


@router.post("/classify", response_model=ClassifyResponse)
async def classify_score(request: ClassifyRequest) -> ClassifyResponse:
    """Classify a single score into a severity band."""
    severity = service.classify(request.value)
    return ClassifyResponse(
        value=request.value,
        severity=severity,
        color=service.severity_color(severity),
    )


@router.get("/severity-bands")
async def list_severity_bands() -> dict:
    """List severity bands, their score thresholds and colors."""
    return {"bands": service.list_severity_bands()}


@router.post("/selection", response_model=SelectionState)
async def apply_pointer_event(request: SelectionRequest) -> SelectionState:
    """Apply a pointer enter/leave event to a hover selection state."""
    return selection.handle_pointer_event(request.state, request.event)
