"""Tests for the compliance risk dashboard domain."""

import pytest
from pydantic import ValidationError

from backend.risk_dashboard import (
    ComplianceLevel,
    DomainRisk,
    RiskBand,
    RISK_BAND_COLORS,
    build_dashboard,
    build_domain_card,
    build_domain_cards,
    compliance_level,
    compliance_percentage,
    domain_code,
    domain_risk_distribution,
    list_risk_bands,
    risk_band,
    risk_band_color,
    risk_band_label,
    risk_level_score,
)


# =============================================================================
# Classification Tests
# =============================================================================


class TestRiskBand:
    """Tests for five-band domain risk classification."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            (0, RiskBand.VERY_LOW),
            (20, RiskBand.VERY_LOW),
            (20.5, RiskBand.LOW),
            (40, RiskBand.LOW),
            (60, RiskBand.MEDIUM),
            (80, RiskBand.HIGH),
            (81, RiskBand.VERY_HIGH),
            (100, RiskBand.VERY_HIGH),
        ],
    )
    def test_boundaries(self, level, expected):
        assert risk_band(level) == expected

    def test_labels(self):
        assert risk_band_label(RiskBand.VERY_LOW) == "Very Low"
        assert risk_band_label(RiskBand.VERY_HIGH) == "Very High"

    def test_colors(self):
        for band in RiskBand:
            assert risk_band_color(band) == RISK_BAND_COLORS[band]

    def test_list_bands(self):
        bands = list_risk_bands()
        assert [b["band"] for b in bands] == [
            "very_low", "low", "medium", "high", "very_high",
        ]
        assert bands[-1]["max_inclusive"] is None
        assert len({b["color"] for b in bands}) == 5


class TestRiskLevelScore:
    """Tests for textual risk level to numeric conversion."""

    @pytest.mark.parametrize(
        "label,expected",
        [("High", 80), ("Medium", 60), ("Low", 40), ("Unknown", 20), ("high", 20)],
    )
    def test_scores(self, label, expected):
        assert risk_level_score(label) == expected


class TestCompliancePercentage:
    """Tests for compliance percentage from control counts."""

    def test_full_and_partial_credit(self):
        """Implemented counts fully, partial counts half."""
        assert compliance_percentage(5, 4, 3) == 58
        assert compliance_percentage(1, 1, 0) == 75

    def test_all_implemented(self):
        assert compliance_percentage(7, 0, 0) == 100

    def test_no_controls(self):
        assert compliance_percentage(0, 0, 0) == 0

    def test_rounds_half_up(self):
        """12.5% rounds up to 13%."""
        assert compliance_percentage(0, 1, 3) == 13


class TestComplianceLevel:
    """Tests for overall compliance level from the 0-10 risk score."""

    @pytest.mark.parametrize(
        "score,expected",
        [
            (0, ComplianceLevel.HIGH),
            (3, ComplianceLevel.HIGH),
            (3.1, ComplianceLevel.MEDIUM),
            (6, ComplianceLevel.MEDIUM),
            (6.5, ComplianceLevel.LOW),
            (10, ComplianceLevel.LOW),
            (-1, ComplianceLevel.LOW),
        ],
    )
    def test_levels(self, score, expected):
        assert compliance_level(score) == expected


class TestDomainCode:
    """Tests for domain code fallback."""

    def test_given_code_kept(self):
        assert domain_code("Risk Management", "RISK") == "RISK"

    def test_fallback_first_three_letters(self):
        assert domain_code("Risk Management") == "RIS"
        assert domain_code("it") == "IT"


# =============================================================================
# Dashboard Tests
# =============================================================================


class TestDomainCards:
    """Tests for building domain risk cards."""

    def test_card_fields(self, domain_risks):
        card = build_domain_card(domain_risks[0])
        assert card.domain_code == "GOV"
        assert card.control_count == 12
        assert card.risk_level == 40
        assert card.risk_band == RiskBand.LOW
        assert card.risk_label == "Low"
        assert card.color == RISK_BAND_COLORS[RiskBand.LOW]
        assert card.compliance_percentage == 58

    def test_explicit_control_count(self, domain_risks):
        card = build_domain_card(domain_risks[3])
        assert card.control_count == 9
        assert card.domain_code == "RIS"
        assert card.risk_band == RiskBand.HIGH

    def test_cards_in_input_order(self, domain_risks):
        cards = build_domain_cards(domain_risks)
        assert [c.domain for c in cards] == [r.domain for r in domain_risks]
        assert cards[0] == build_domain_card(domain_risks[0])

    def test_negative_counts_rejected(self):
        with pytest.raises(ValidationError):
            DomainRisk(domain="Governance", implemented=-1)


class TestDashboard:
    """Tests for the aggregate risk dashboard."""

    def test_distribution(self, domain_risks):
        distribution = domain_risk_distribution(domain_risks)
        assert (distribution.high, distribution.medium, distribution.low) == (2, 1, 1)

    def test_unrecognized_level_counts_low(self):
        distribution = domain_risk_distribution([DomainRisk(domain="Cloud", risk_level="Critical")])
        assert distribution.low == 1

    def test_build_dashboard(self, domain_risks):
        dashboard = build_dashboard(domain_risks, risk_score=4.5)
        assert dashboard.compliance_level == ComplianceLevel.MEDIUM
        assert dashboard.high_risk_domains == ["Resilience", "Risk Management"]
        assert [c.domain for c in dashboard.domains] == [
            "Governance", "Defense", "Resilience", "Risk Management",
        ]
        assert dashboard.message is None

    def test_empty_dashboard(self):
        dashboard = build_dashboard([], risk_score=7)
        assert dashboard.compliance_level == ComplianceLevel.UNKNOWN
        assert dashboard.risk_score == 0
        assert dashboard.domains == []
        assert dashboard.message


class TestRiskDashboardAPI:
    """Tests for /risk-dashboard endpoints."""

    def test_summary(self, client):
        response = client.post(
            "/risk-dashboard/summary",
            json={
                "risk_score": 2,
                "domain_risks": [
                    {"domain": "Governance", "risk_level": "High",
                     "implemented": 1, "partially_implemented": 1, "not_implemented": 2},
                ],
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["compliance_level"] == "High"
        assert data["high_risk_domains"] == ["Governance"]
        assert data["domain_risk_distribution"] == {"high": 1, "medium": 0, "low": 0}
        card = data["domains"][0]
        assert card["domain_code"] == "GOV"
        assert card["risk_band"] == "high"
        assert card["compliance_percentage"] == 38

    def test_summary_empty(self, client):
        response = client.post("/risk-dashboard/summary", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["compliance_level"] == "Unknown"
        assert data["domains"] == []

    def test_bands(self, client):
        response = client.get("/risk-dashboard/bands")
        assert response.status_code == 200
        assert len(response.json()["bands"]) == 5
