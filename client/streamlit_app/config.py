"""Configuration for the Streamlit demo client."""
from __future__ import annotations

import os

BACKEND_BASE_URL = os.getenv("BACKEND_BASE_URL", "http://localhost:8080/be")
REQUEST_TIMEOUT = int(os.getenv("BACKEND_REQUEST_TIMEOUT", "30"))
