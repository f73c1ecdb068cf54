"""Common infrastructure utilities."""

from __future__ import annotations

from .retry_transport import RetryTransport

__all__ = ["RetryTransport"]
