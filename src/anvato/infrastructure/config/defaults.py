"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "anvato-search",
    "environment": "dev",
    "mcp": {
        "url": "",
        "stations": [],
    },
    "http": {
        "timeout_seconds": 20.0,
        "user_agent": "anvato-search/0.1.0",
        "max_attempts": 3,
        "retry_delay_seconds": 1.0,
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
}
