"""
Risk dashboard schemas.

Pydantic models for the compliance risk dashboard:
- Per-domain risk input with control implementation counts
- Five-band risk classification for domain cards
- Aggregate dashboard summary
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class RiskBand(str, Enum):
    """Five-level domain risk classification."""

    VERY_LOW = "very_low"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very_high"


class ComplianceLevel(str, Enum):
    """Overall compliance level derived from the aggregate risk score."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    UNKNOWN = "Unknown"


class DomainRisk(BaseModel):
    """Risk analysis result for one compliance domain."""

    domain: str = Field(..., min_length=1, description="Domain name")
    domain_code: Optional[str] = Field(None, description="Short domain code")
    risk_level: str = Field("Low", description="High, Medium or Low")
    implemented: int = Field(0, ge=0)
    partially_implemented: int = Field(0, ge=0)
    not_implemented: int = Field(0, ge=0)
    control_count: Optional[int] = Field(None, ge=0)


class DomainRiskCard(BaseModel):
    """Display-ready risk card for one domain."""

    domain: str
    domain_code: str
    control_count: int
    implemented: int
    partially_implemented: int
    not_implemented: int
    risk_level: float = Field(..., ge=0, le=100)
    risk_band: RiskBand
    risk_label: str
    color: str
    compliance_percentage: int = Field(..., ge=0, le=100)


class RiskDistribution(BaseModel):
    """Count of domains per risk level."""

    high: int = 0
    medium: int = 0
    low: int = 0


class RiskDashboard(BaseModel):
    """Aggregate compliance risk dashboard."""

    risk_score: float = 0.0
    compliance_level: ComplianceLevel = ComplianceLevel.UNKNOWN
    high_risk_domains: list[str] = Field(default_factory=list)
    domain_risk_distribution: RiskDistribution = Field(default_factory=RiskDistribution)
    domains: list[DomainRiskCard] = Field(default_factory=list)
    message: Optional[str] = None


# Request schema for API
class RiskDashboardRequest(BaseModel):
    """Request model for a risk dashboard summary."""

    risk_score: float = Field(0.0, allow_inf_nan=False, description="Overall risk score (0-10)")
    domain_risks: list[DomainRisk] = Field(default_factory=list)
