"""
Risk dashboard constants.

Band thresholds, labels and colors for domain risk cards.
"""

from .schemas import ComplianceLevel, RiskBand

# Inclusive upper bound of each band, checked in order; above the last is very high
RISK_BAND_THRESHOLDS: list[tuple[float, RiskBand]] = [
    (20.0, RiskBand.VERY_LOW),
    (40.0, RiskBand.LOW),
    (60.0, RiskBand.MEDIUM),
    (80.0, RiskBand.HIGH),
]

RISK_BAND_LABELS: dict[RiskBand, str] = {
    RiskBand.VERY_LOW: "Very Low",
    RiskBand.LOW: "Low",
    RiskBand.MEDIUM: "Medium",
    RiskBand.HIGH: "High",
    RiskBand.VERY_HIGH: "Very High",
}

RISK_BAND_COLORS: dict[RiskBand, str] = {
    RiskBand.VERY_LOW: "#059669",   # emerald
    RiskBand.LOW: "#22c55e",        # green
    RiskBand.MEDIUM: "#f59e0b",     # amber
    RiskBand.HIGH: "#f97316",       # orange
    RiskBand.VERY_HIGH: "#dc2626",  # red
}

# Numeric risk level for the textual levels returned by risk analysis
RISK_LEVEL_SCORES: dict[str, float] = {
    "High": 80.0,
    "Medium": 60.0,
    "Low": 40.0,
}
DEFAULT_RISK_LEVEL_SCORE = 20.0

# Aggregate risk score (0-10) upper bounds for compliance levels
COMPLIANCE_LEVEL_THRESHOLDS: list[tuple[float, ComplianceLevel]] = [
    (3.0, ComplianceLevel.HIGH),
    (6.0, ComplianceLevel.MEDIUM),
]

# Credit given to a partially implemented control
PARTIAL_CREDIT = 0.5

NO_ASSESSMENT_MESSAGE = (
    "No completed assessments found. Complete an assessment to generate risk prediction."
)
