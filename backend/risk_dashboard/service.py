"""
Compliance risk dashboard service.

Business logic for summarizing domain risk analysis:
- Five-band risk classification per domain
- Compliance percentage from control implementation counts
- Risk level distribution across domains
- Overall compliance level from the aggregate risk score
"""

import logging
import math
from typing import Iterable, Optional, Sequence

from .schemas import (
    ComplianceLevel,
    DomainRisk,
    DomainRiskCard,
    RiskBand,
    RiskDashboard,
    RiskDistribution,
)
from .constants import (
    COMPLIANCE_LEVEL_THRESHOLDS,
    DEFAULT_RISK_LEVEL_SCORE,
    NO_ASSESSMENT_MESSAGE,
    PARTIAL_CREDIT,
    RISK_BAND_COLORS,
    RISK_BAND_LABELS,
    RISK_BAND_THRESHOLDS,
    RISK_LEVEL_SCORES,
)

logger = logging.getLogger(__name__)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def risk_band(risk_level: float) -> RiskBand:
    """Classify a 0-100 domain risk level into one of five bands."""
    for upper, band in RISK_BAND_THRESHOLDS:
        if risk_level <= upper:
            return band
    return RiskBand.VERY_HIGH


def risk_band_label(band: RiskBand) -> str:
    """Display label for a risk band, e.g. "Very High"."""
    return RISK_BAND_LABELS[band]


def risk_band_color(band: RiskBand) -> str:
    """Hex color used to draw a risk band."""
    return RISK_BAND_COLORS[band]


def list_risk_bands() -> list[dict]:
    """List risk bands with their upper bounds, labels and colors."""
    bands = []
    for upper, band in RISK_BAND_THRESHOLDS:
        bands.append({
            "band": band.value,
            "label": RISK_BAND_LABELS[band],
            "max_inclusive": upper,
            "color": RISK_BAND_COLORS[band],
        })
    bands.append({
        "band": RiskBand.VERY_HIGH.value,
        "label": RISK_BAND_LABELS[RiskBand.VERY_HIGH],
        "max_inclusive": None,
        "color": RISK_BAND_COLORS[RiskBand.VERY_HIGH],
    })
    return bands


def risk_level_score(risk_level: str) -> float:
    """Numeric risk level for a textual High/Medium/Low level; anything else is 20."""
    return RISK_LEVEL_SCORES.get(risk_level, DEFAULT_RISK_LEVEL_SCORE)


def compliance_percentage(implemented: int, partially_implemented: int, not_implemented: int) -> int:
    """
    Percentage of compliance for a domain.

    Implemented controls count fully, partially implemented ones count half.
    A domain with no controls is 0% compliant.
    """
    total = implemented + partially_implemented + not_implemented
    if total == 0:
        return 0
    credited = implemented + partially_implemented * PARTIAL_CREDIT
    return _round_half_up(credited / total * 100)


def domain_code(domain: str, code: Optional[str] = None) -> str:
    """Short code for a domain: the given code, else its first three letters upper-cased."""
    if code:
        return code
    return domain[:3].upper()


def compliance_level(risk_score: float) -> ComplianceLevel:
    """Overall compliance level for an aggregate 0-10 risk score."""
    if risk_score < 0:
        return ComplianceLevel.LOW
    for upper, level in COMPLIANCE_LEVEL_THRESHOLDS:
        if risk_score <= upper:
            return level
    return ComplianceLevel.LOW


def domain_risk_distribution(domain_risks: Iterable[DomainRisk]) -> RiskDistribution:
    """Count domains per risk level; unrecognized levels count as low."""
    distribution = RiskDistribution()
    for risk in domain_risks:
        if risk.risk_level == "High":
            distribution.high += 1
        elif risk.risk_level == "Medium":
            distribution.medium += 1
        else:
            distribution.low += 1
    return distribution


def build_domain_card(risk: DomainRisk) -> DomainRiskCard:
    """Build the display card for one domain."""
    level = risk_level_score(risk.risk_level)
    band = risk_band(level)
    control_count = risk.control_count
    if control_count is None:
        control_count = risk.implemented + risk.partially_implemented + risk.not_implemented

    return DomainRiskCard(
        domain=risk.domain,
        domain_code=domain_code(risk.domain, risk.domain_code),
        control_count=control_count,
        implemented=risk.implemented,
        partially_implemented=risk.partially_implemented,
        not_implemented=risk.not_implemented,
        risk_level=level,
        risk_band=band,
        risk_label=risk_band_label(band),
        color=risk_band_color(band),
        compliance_percentage=compliance_percentage(
            risk.implemented, risk.partially_implemented, risk.not_implemented
        ),
    )


def build_domain_cards(domain_risks: Iterable[DomainRisk]) -> list[DomainRiskCard]:
    """Domain risk cards in input order."""
    return [build_domain_card(risk) for risk in domain_risks]


def build_dashboard(domain_risks: Sequence[DomainRisk], risk_score: float = 0.0) -> RiskDashboard:
    """
    Build the compliance risk dashboard.

    Without any domain risk analysis the dashboard is empty, with an
    unknown compliance level and an explanatory message.
    """
    if not domain_risks:
        logger.debug("No domain risks supplied, returning empty dashboard")
        return RiskDashboard(message=NO_ASSESSMENT_MESSAGE)

    return RiskDashboard(
        risk_score=risk_score,
        compliance_level=compliance_level(risk_score),
        high_risk_domains=[r.domain for r in domain_risks if r.risk_level == "High"],
        domain_risk_distribution=domain_risk_distribution(domain_risks),
        domains=build_domain_cards(domain_risks),
    )
