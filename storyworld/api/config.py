"""API configuration constants.

Single source of truth for settings used across the API layer.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Session table. Sessions live in process memory only.
MAX_SESSIONS = int(os.getenv("MAX_SESSIONS", "1000"))

# Structured JSON logs unless LOG_JSON=0
LOG_JSON = os.getenv("LOG_JSON", "1") == "1"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
