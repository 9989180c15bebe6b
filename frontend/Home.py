"""
Home - MetaWorks Compliance Risk Dashboard.

Risk dashboard summary, domain risk cards and the compliance score heatmap.

Run from repo root:
    streamlit run frontend/Home.py
"""

import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import requests
import streamlit as st

from frontend.helpers import get_heatmap_client
from frontend.ui import (
    render_dashboard_summary,
    render_domain_cards,
    render_heatmap,
    render_point_details,
    render_severity_legend,
)

# -----------------------------------------------------------------------------
# Demo Data
# -----------------------------------------------------------------------------

DEMO_DOMAIN_RISKS = [
    {"domain": "Governance", "domain_code": "GOV", "risk_level": "Low",
     "implemented": 5, "partially_implemented": 4, "not_implemented": 3},
    {"domain": "Defense", "domain_code": "DEF", "risk_level": "Unknown",
     "implemented": 6, "partially_implemented": 1, "not_implemented": 1},
    {"domain": "Resilience", "domain_code": "RES", "risk_level": "Medium",
     "implemented": 4, "partially_implemented": 3, "not_implemented": 3},
    {"domain": "Risk Management", "risk_level": "High",
     "implemented": 2, "partially_implemented": 2, "not_implemented": 3},
]

DEMO_CONTROL_RESULTS = [
    {"domain": "Governance", "control": "GOV-1.1", "status": "implemented"},
    {"domain": "Governance", "control": "GOV-1.2", "status": "partially_implemented"},
    {"domain": "Defense", "control": "DEF-2.1", "status": "not_implemented"},
    {"domain": "Defense", "control": "DEF-2.2", "status": "implemented"},
    {"domain": "Resilience", "control": "RES-3.1", "status": "partially_implemented"},
    {"domain": "Resilience", "control": "RES-3.2", "status": "not_applicable"},
    {"domain": "Risk Management", "control": "RISK-4.1", "status": "not_implemented"},
]

DEMO_RISK_SCORE = 4.5

# -----------------------------------------------------------------------------
# Page Configuration
# -----------------------------------------------------------------------------

st.set_page_config(
    page_title="Compliance Risk Dashboard",
    page_icon="🛡️",
    layout="wide",
)

st.title("Compliance Risk Dashboard")
st.markdown("Risk levels by domain and compliance scores by control.")

client = get_heatmap_client()

# -----------------------------------------------------------------------------
# Risk Dashboard
# -----------------------------------------------------------------------------

st.header("Domain Risk")

try:
    dashboard = client.get_dashboard(DEMO_DOMAIN_RISKS, risk_score=DEMO_RISK_SCORE)
except requests.RequestException as e:
    st.error(f"Error fetching risk dashboard: {e}")
else:
    render_dashboard_summary(dashboard)
    render_domain_cards(dashboard.domains)

st.divider()

# -----------------------------------------------------------------------------
# Compliance Heatmap
# -----------------------------------------------------------------------------

st.header("Compliance Heatmap")
st.caption("Select a point to highlight it. Clear the selection to reset.")

try:
    grid = client.build_compliance_grid(DEMO_CONTROL_RESULTS)
except requests.RequestException as e:
    st.error(f"Error building heatmap: {e}")
else:
    active = render_heatmap(grid, key="compliance_heatmap")
    render_severity_legend()
    if active is not None:
        st.subheader("Selected Control")
        render_point_details(active)
