"""Settings page showing the active configuration."""
import streamlit as st

from center_locator.core.config import (
    API_URL,
    ENVIRONMENT,
    LOG_LEVEL,
    NEARBY_RADIUS_KM,
    NOMINATIM_URL,
    NOMINATIM_USER_AGENT,
    REQUEST_TIMEOUT,
    SENTRY_DSN,
)


st.title("⚙️ Settings")

st.markdown("Configuration is read from environment variables and the `.env` file at startup.")

st.subheader("Centers API")
col1, col2 = st.columns(2)
with col1:
    st.text(f"API URL: {API_URL}")
with col2:
    st.text(f"Request timeout: {REQUEST_TIMEOUT:g} s")

st.subheader("Reverse Geocoding")
col1, col2 = st.columns(2)
with col1:
    st.text(f"Nominatim URL: {NOMINATIM_URL}")
with col2:
    st.text(f"User agent: {NOMINATIM_USER_AGENT}")
st.text(f"Nearby radius shown to users: {NEARBY_RADIUS_KM:g} km")

st.subheader("Logging & Error Tracking")
col1, col2, col3 = st.columns(3)
with col1:
    st.text(f"Log level: {LOG_LEVEL}")
with col2:
    st.text(f"Environment: {ENVIRONMENT}")
with col3:
    st.text(f"Sentry DSN: {'✅ Set' if SENTRY_DSN else '❌ Not set'}")

st.info("""
To change settings, update your `.env` file and restart the app:
- API_URL=https://api.example.org/api
- REQUEST_TIMEOUT=15
- NOMINATIM_URL=https://nominatim.openstreetmap.org
- NOMINATIM_USER_AGENT=center-locator/0.1 (admin@example.org)
- LOG_LEVEL=INFO
- SENTRY_DSN=...
""")
