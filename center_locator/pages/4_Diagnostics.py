"""Diagnostics page for checking upstream services and session state."""
import pandas as pd
import streamlit as st

from center_locator.core.center_service import CenterService, fetch
from center_locator.core.geocoder import ReverseGeocoder
from center_locator.core.location_flow import LocationFlow
from center_locator.ui.state import init_session_state
from center_locator.utils.timing import Timer


init_session_state()

st.title("🔧 Diagnostics")

service: CenterService = st.session_state.center_service
geocoder: ReverseGeocoder = st.session_state.reverse_geocoder
flow: LocationFlow = st.session_state.location_flow

# Upstream checks
st.subheader("Upstream Services")
if st.button("Run checks", type="primary"):
    checks = []

    with Timer("diagnostics_api") as timer:
        result = fetch(service.list_countries, error_message="Centers API unreachable")
    checks.append({
        "Service": "Centers API",
        "URL": service.base_url,
        "Status": "✅ OK" if result.ok else f"❌ {result.error.detail}",
        "Detail": f"{len(result.data)} countries" if result.ok else "",
        "Seconds": round(timer.elapsed, 3),
    })

    with Timer("diagnostics_nominatim") as timer:
        address = geocoder.reverse(51.5007, -0.1246)
    checks.append({
        "Service": "Nominatim",
        "URL": geocoder.base_url,
        "Status": "✅ OK" if address else "❌ No response",
        "Detail": address.country if address else "",
        "Seconds": round(timer.elapsed, 3),
    })

    st.dataframe(pd.DataFrame(checks), use_container_width=True, hide_index=True)

# Drill-down state
st.subheader("Browse-by-Location State")
st.json(flow.snapshot())

lists = []
for dependent in (flow.countries, flow.states, flow.districts):
    lists.append({
        "List": dependent.name,
        "Key": " / ".join(dependent.key) if dependent.key else "",
        "Items": len(dependent.items),
        "Generation": dependent.generation,
        "Loading": dependent.loading,
        "Error": dependent.error.message if dependent.error else "",
    })
st.dataframe(pd.DataFrame(lists), use_container_width=True, hide_index=True)

# Results board
st.subheader("Results")
board = st.session_state.results_board
col1, col2 = st.columns(2)
with col1:
    st.metric("Active source", board.source.value if board.source else "none")
with col2:
    st.metric("Centers shown", len(board.centers))

if st.button("Reset session", type="secondary"):
    for key in ("results_board", "location_flow", "nearby_finder"):
        st.session_state.pop(key, None)
    st.success("Session reset")
    st.rerun()
