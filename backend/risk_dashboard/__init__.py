"""Compliance risk dashboard domain."""

from .router import router
from .service import (
    risk_band,
    risk_band_label,
    risk_band_color,
    list_risk_bands,
    risk_level_score,
    compliance_percentage,
    domain_code,
    compliance_level,
    domain_risk_distribution,
    build_domain_card,
    build_domain_cards,
    build_dashboard,
)
from .schemas import (
    RiskBand,
    ComplianceLevel,
    DomainRisk,
    DomainRiskCard,
    RiskDistribution,
    RiskDashboard,
    RiskDashboardRequest,
)
from .constants import RISK_BAND_THRESHOLDS, RISK_BAND_LABELS, RISK_BAND_COLORS

__all__ = [
    # Router
    "router",
    # Service functions
    "risk_band",
    "risk_band_label",
    "risk_band_color",
    "list_risk_bands",
    "risk_level_score",
    "compliance_percentage",
    "domain_code",
    "compliance_level",
    "domain_risk_distribution",
    "build_domain_card",
    "build_domain_cards",
    "build_dashboard",
    # Schemas
    "RiskBand",
    "ComplianceLevel",
    "DomainRisk",
    "DomainRiskCard",
    "RiskDistribution",
    "RiskDashboard",
    "RiskDashboardRequest",
    # Constants
    "RISK_BAND_THRESHOLDS",
    "RISK_BAND_LABELS",
    "RISK_BAND_COLORS",
]
