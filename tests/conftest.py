"""Pytest fixtures for test suite."""

import pytest
from fastapi.testclient import TestClient

from backend.heatmap import ControlResult, ControlStatus, Observation
from backend.main import app
from backend.risk_dashboard import DomainRisk


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def client() -> TestClient:
    """Test client for the FastAPI app."""
    return TestClient(app)


# =============================================================================
# Heatmap Fixtures
# =============================================================================


@pytest.fixture
def sample_observations() -> list[Observation]:
    """Observations spanning two rows and two columns, with a repeated label pair."""
    return [
        Observation(row_label="A", column_label="X", value=10),
        Observation(row_label="B", column_label="X", value=20),
        Observation(row_label="A", column_label="Y", value=30),
        Observation(row_label="B", column_label="Y", value=80),
        Observation(row_label="A", column_label="X", value=50),
    ]


@pytest.fixture
def compliance_observations() -> list[Observation]:
    """Domain/control scores as shown on the risk prediction page."""
    return [
        Observation(row_label="Control 1.1", column_label="Domain 1", value=12.0),
        Observation(row_label="Control 1.2", column_label="Domain 1", value=47.5),
        Observation(row_label="Control 2.1", column_label="Domain 2", value=66.0),
        Observation(row_label="Control 2.2", column_label="Domain 2", value=91.2),
        Observation(row_label="Control 3.1", column_label="Domain 3", value=33.0),
    ]


@pytest.fixture
def control_results() -> list[ControlResult]:
    """Control assessment results across three domains."""
    return [
        ControlResult(domain="Governance", control="GOV-1.1", status=ControlStatus.IMPLEMENTED),
        ControlResult(domain="Governance", control="GOV-1.2", status=ControlStatus.PARTIALLY_IMPLEMENTED),
        ControlResult(domain="Defense", control="DEF-2.1", status=ControlStatus.NOT_APPLICABLE),
        ControlResult(domain="Defense", control="DEF-2.2", status=ControlStatus.NOT_IMPLEMENTED),
        ControlResult(domain="Resilience", control="RES-3.1", status=ControlStatus.IMPLEMENTED),
    ]


# =============================================================================
# Risk Dashboard Fixtures
# =============================================================================


@pytest.fixture
def domain_risks() -> list[DomainRisk]:
    """Domain risk analysis for four domains."""
    return [
        DomainRisk(domain="Governance", domain_code="GOV", risk_level="Low",
                   implemented=5, partially_implemented=4, not_implemented=3),
        DomainRisk(domain="Defense", domain_code="DEF", risk_level="Medium",
                   implemented=6, partially_implemented=1, not_implemented=1),
        DomainRisk(domain="Resilience", risk_level="High",
                   implemented=4, partially_implemented=3, not_implemented=3),
        DomainRisk(domain="Risk Management", risk_level="High",
                   implemented=2, partially_implemented=2, not_implemented=3, control_count=9),
    ]
