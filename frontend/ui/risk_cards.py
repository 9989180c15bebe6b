"""
Domain risk card components for Streamlit.

Renders the per-domain risk cards of the compliance dashboard together
with the five-band risk legend.
"""

from __future__ import annotations

import streamlit as st

from backend.risk_dashboard import (
    RISK_BAND_COLORS,
    RISK_BAND_LABELS,
    DomainRiskCard,
    RiskDashboard,
)

NO_RISK_DATA_MESSAGE = (
    "There is no risk data to display for this assessment. "
    "Complete an assessment to view your risk heatmap."
)


def render_risk_legend() -> None:
    """Render the five-band risk legend."""
    cols = st.columns(len(RISK_BAND_LABELS))
    for col, (band, label) in zip(cols, RISK_BAND_LABELS.items()):
        with col:
            st.markdown(
                f'<span style="color:{RISK_BAND_COLORS[band]}">■</span> {label} Risk',
                unsafe_allow_html=True,
            )


def render_domain_card(card: DomainRiskCard) -> None:
    """Render one domain risk card.

    Args:
        card: Display-ready domain card from build_domain_cards
    """
    with st.container(border=True):
        st.markdown(
            f'<div style="height:6px;background:{card.color};border-radius:3px"></div>',
            unsafe_allow_html=True,
        )
        header_col, badge_col = st.columns([3, 1])
        with header_col:
            st.markdown(f"**{card.domain_code} - {card.domain}**")
            st.caption(f"{card.control_count} controls")
        with badge_col:
            st.markdown(
                f'<span style="color:{card.color};font-weight:600">{card.risk_label} Risk</span>',
                unsafe_allow_html=True,
            )

        st.caption(f"Compliance: {card.compliance_percentage}%")
        st.progress(card.compliance_percentage / 100)

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Implemented", card.implemented)
        with col2:
            st.metric("Partial", card.partially_implemented)
        with col3:
            st.metric("Not Impl.", card.not_implemented)


def render_domain_cards(cards: list[DomainRiskCard], columns: int = 2) -> None:
    """Render domain risk cards in a grid, or an empty state.

    Args:
        cards: Domain cards to render
        columns: Number of cards per row
    """
    if not cards:
        st.warning("No Risk Data Available")
        st.caption(NO_RISK_DATA_MESSAGE)
        return

    for start in range(0, len(cards), columns):
        row = st.columns(columns)
        for col, card in zip(row, cards[start:start + columns]):
            with col:
                render_domain_card(card)

    render_risk_legend()


def render_dashboard_summary(dashboard: RiskDashboard) -> None:
    """Render headline metrics of the risk dashboard."""
    if dashboard.message:
        st.info(dashboard.message)

    col1, col2, col3, col4 = st.columns(4)
    distribution = dashboard.domain_risk_distribution
    with col1:
        st.metric("Risk Score", f"{dashboard.risk_score:.1f}")
    with col2:
        st.metric("Compliance Level", dashboard.compliance_level.value)
    with col3:
        st.metric("High Risk Domains", distribution.high)
    with col4:
        st.metric("Medium / Low", f"{distribution.medium} / {distribution.low}")
