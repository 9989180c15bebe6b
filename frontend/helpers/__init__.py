"""Frontend helpers package."""

from __future__ import annotations

import streamlit as st

from frontend.helpers.heatmap_client import HeatmapClient


@st.cache_resource
def get_heatmap_client() -> HeatmapClient:
    """Get a shared heatmap API client for the Streamlit session."""
    return HeatmapClient()


__all__ = [
    "HeatmapClient",
    "get_heatmap_client",
]
