"""Constants for pynatureremo library."""

from __future__ import annotations


LIBRARY_VERSION = "0.1.0"

# API Configuration
DEFAULT_BASE_URL = "https://api.nature.global/1"
DEFAULT_TIMEOUT = 30  # seconds
DEFAULT_USER_AGENT = f"pynatureremo/{LIBRARY_VERSION}"

# Rate Limit Headers
HEADER_RATE_LIMIT_LIMIT = "X-Rate-Limit-Limit"
HEADER_RATE_LIMIT_RESET = "X-Rate-Limit-Reset"
HEADER_RATE_LIMIT_REMAINING = "X-Rate-Limit-Remaining"

# Endpoints
ENDPOINT_DEVICES = "devices"
ENDPOINT_USERS_ME = "users/me"

# Newest Event Keys
EVENT_TEMPERATURE = "te"
EVENT_HUMIDITY = "hu"
EVENT_ILLUMINANCE = "il"
EVENT_MOTION = "mo"
