"""Structured logging infrastructure for the API layer.

Provides JSON-formatted logging for production and human-readable
logging for development, plus a SessionLogger helper for wizard events.
"""

import json
import logging
import sys
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    EXTRA_FIELDS = ("session_id", "step", "scene", "duration", "error_type")

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add extra fields if present
        for name in self.EXTRA_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging(json_format: bool = True, level: int = logging.INFO) -> None:
    """Configure structured logging for the application."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root_logger.addHandler(handler)


class SessionLogger:
    """Logger for wizard session events with structured fields."""

    def __init__(self):
        self.logger = logging.getLogger("storyworld.sessions")

    def session_started(self, session_id: str) -> None:
        self.logger.info("Session started", extra={"session_id": session_id})

    def step_changed(self, session_id: str, step: str) -> None:
        self.logger.info(f"Step: {step}", extra={"session_id": session_id, "step": step})

    def illustration_requested(self, session_id: str, scene: int) -> None:
        self.logger.info(
            f"Illustration requested for scene {scene}",
            extra={"session_id": session_id, "scene": scene},
        )

    def illustration_completed(self, session_id: str, scene: int, duration: float) -> None:
        self.logger.info(
            f"Illustration ready for scene {scene}",
            extra={"session_id": session_id, "scene": scene, "duration": round(duration, 2)},
        )

    def illustration_failed(self, session_id: str, scene: int, error: Exception) -> None:
        self.logger.warning(
            f"Illustration failed for scene {scene}: {error}",
            extra={"session_id": session_id, "scene": scene, "error_type": type(error).__name__},
        )

    def session_ended(self, session_id: str) -> None:
        self.logger.info("Session ended", extra={"session_id": session_id})


# Global session logger instance
session_logger = SessionLogger()
