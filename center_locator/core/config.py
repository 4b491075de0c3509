"""Configuration management for the center locator application."""
import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Centers REST API
API_URL: str = os.getenv("API_URL", "http://localhost:8000/api").rstrip("/")
REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "15"))

# Reverse geocoding (OpenStreetMap Nominatim)
NOMINATIM_URL: str = os.getenv("NOMINATIM_URL", "https://nominatim.openstreetmap.org").rstrip("/")
NOMINATIM_USER_AGENT: str = os.getenv("NOMINATIM_USER_AGENT", "center-locator/0.1")

# Radius the backend uses for nearby search (shown to users, not sent)
NEARBY_RADIUS_KM: float = float(os.getenv("NEARBY_RADIUS_KM", "5"))

# Logging and error tracking
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
SENTRY_DSN: Optional[str] = os.getenv("SENTRY_DSN")
ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
RELEASE: str = os.getenv("RELEASE", "unknown")
