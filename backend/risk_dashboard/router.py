"""Compliance risk dashboard API endpoints."""

from fastapi import APIRouter

from . import service
from .schemas import RiskDashboard, RiskDashboardRequest

router = APIRouter(prefix="/risk-dashboard", tags=["risk-dashboard"])


@router.post("/summary", response_model=RiskDashboard)
async def build_dashboard(request: RiskDashboardRequest) -> RiskDashboard:
    """
    Summarize domain risk analysis for the dashboard.

    Returns the overall compliance level, the distribution of domain risk
    levels, the names of high-risk domains and one card per domain.
    """
    return service.build_dashboard(request.domain_risks, request.risk_score)


@router.get("/bands")
async def list_risk_bands() -> dict:
    """List domain risk bands with thresholds, labels and colors."""
    return {"bands": service.list_risk_bands()}
