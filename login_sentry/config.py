"""
Configuration module for LoginSentry.

Loads configuration from environment variables (and an optional .env file)
and provides default values.
"""

import logging
import os
from datetime import datetime
from typing import Any, Dict

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_BANNED_IPS_PATH = "banned_ips.txt"
DEFAULT_AUTHORIZED_USERS_PATH = "authorized_users.txt"


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


def _get_log_level(name: str, default: str) -> str:
    level = (os.getenv(name) or default).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{name} must be a logging level name, got {level!r}")
    return level


def load_config() -> Dict[str, Any]:
    """
    Build the application configuration from the current environment.

    Called by the entry point at start-up.

    Returns:
        dict: configuration values keyed by setting name

    Raises:
        ValueError: if a numeric or log level setting is invalid
    """
    return {
        "banned_ips_path": os.getenv("LOGIN_SENTRY_BANNED_IPS", DEFAULT_BANNED_IPS_PATH),
        "authorized_users_path": os.getenv(
            "LOGIN_SENTRY_AUTHORIZED_USERS", DEFAULT_AUTHORIZED_USERS_PATH
        ),
        # Log lines carry no year, so one is assumed for the whole run
        "log_year": _get_int("LOGIN_SENTRY_LOG_YEAR", datetime.now().year),
        "max_logins": _get_int("LOGIN_SENTRY_MAX_LOGINS", 3),
        "window_seconds": _get_int("LOGIN_SENTRY_WINDOW_SECONDS", 20),
        "timeout": _get_float("LOGIN_SENTRY_TIMEOUT", 30.0),
        "alert_output": os.getenv("LOGIN_SENTRY_ALERT_OUTPUT") or None,
        "log_level": _get_log_level("LOGIN_SENTRY_LOG_LEVEL", "WARNING"),
    }


def is_alert_output_configured(config: Dict[str, Any]) -> bool:
    """
    Check if a CSV alert output path is configured.

    Returns:
        bool: True if alerts should also be written to CSV
    """
    return bool(config.get("alert_output"))
