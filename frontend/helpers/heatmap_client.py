"""
Heatmap API client for Streamlit frontend.

Provides a high-level interface for the heatmap and risk dashboard
endpoints, returning typed models where the backend defines them.
"""

from __future__ import annotations

from typing import Any
import requests

from backend.config import get_settings
from backend.heatmap import (
    ClassifyResponse,
    ControlResult,
    HeatmapGrid,
    Observation,
    PointerEvent,
    SelectionState,
)
from backend.risk_dashboard import DomainRisk, RiskDashboard


class HeatmapClient:
    """Client for heatmap and risk dashboard API endpoints."""

    def __init__(self, base_url: str | None = None, timeout: float = 30):
        """Initialize the heatmap client.

        Args:
            base_url: Base URL of the API server (defaults to settings.api_url)
            timeout: Request timeout in seconds
        """
        if base_url is None:
            base_url = get_settings().api_url
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _get(self, endpoint: str, params: dict | None = None) -> dict:
        """Make a GET request."""
        url = f"{self.base_url}{endpoint}"
        response = requests.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def _post(self, endpoint: str, data: dict) -> dict:
        """Make a POST request."""
        url = f"{self.base_url}{endpoint}"
        response = requests.post(url, json=data, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    # =========================================================================
    # Health
    # =========================================================================

    def health(self) -> bool:
        """Check whether the API server reports healthy."""
        return self._get("/health").get("status") == "healthy"

    # =========================================================================
    # Heatmap
    # =========================================================================

    def build_grid(self, observations: list[Observation | dict[str, Any]]) -> HeatmapGrid:
        """Build a heatmap grid from labeled scores.

        Args:
            observations: Observations or dicts with row_label, column_label, value

        Returns:
            HeatmapGrid with axis indices, plot points and axis domains
        """
        data = {
            "observations": [
                o.model_dump() if isinstance(o, Observation) else o for o in observations
            ]
        }
        return HeatmapGrid.model_validate(self._post("/heatmap/grid", data))

    def build_compliance_grid(self, results: list[ControlResult | dict[str, Any]]) -> HeatmapGrid:
        """Build a domain-by-control heatmap from control assessment results.

        Args:
            results: Control results or dicts with domain, control, status
        """
        data = {
            "results": [
                r.model_dump(mode="json") if isinstance(r, ControlResult) else r for r in results
            ]
        }
        return HeatmapGrid.model_validate(self._post("/heatmap/compliance-grid", data))

    def classify(self, value: float) -> ClassifyResponse:
        """Classify a single score into a severity band."""
        return ClassifyResponse.model_validate(self._post("/heatmap/classify", {"value": value}))

    def get_severity_bands(self) -> list[dict]:
        """Get severity band thresholds and colors."""
        return self._get("/heatmap/severity-bands")["bands"]

    def apply_pointer_event(self, state: SelectionState, event: PointerEvent) -> SelectionState:
        """Apply a pointer event to a selection state on the server."""
        data = {
            "state": state.model_dump(),
            "event": event.model_dump(mode="json"),
        }
        return SelectionState.model_validate(self._post("/heatmap/selection", data))

    # =========================================================================
    # Risk Dashboard
    # =========================================================================

    def get_dashboard(
        self,
        domain_risks: list[DomainRisk | dict[str, Any]],
        risk_score: float = 0.0,
    ) -> RiskDashboard:
        """Summarize domain risk analysis.

        Args:
            domain_risks: Domain risks or dicts with domain, risk_level and control counts
            risk_score: Overall 0-10 risk score

        Returns:
            RiskDashboard with compliance level, distribution and domain cards
        """
        data = {
            "risk_score": risk_score,
            "domain_risks": [
                d.model_dump() if isinstance(d, DomainRisk) else d for d in domain_risks
            ],
        }
        return RiskDashboard.model_validate(self._post("/risk-dashboard/summary", data))

    def get_risk_bands(self) -> list[dict]:
        """Get domain risk band thresholds, labels and colors."""
        return self._get("/risk-dashboard/bands")["bands"]
