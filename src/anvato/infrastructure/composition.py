"""Composition root: wires config, HTTP client and the search use case."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import httpx
import structlog

from anvato.application.use_cases import CatalogSearchUseCase
from anvato.infrastructure.common import RetryTransport
from anvato.infrastructure.config import AppConfig
from anvato.infrastructure.transport import HttpxCatalogTransport

log = structlog.get_logger(__name__)


def build_http_client(config: AppConfig) -> httpx.Client:
    """Shared HTTP client with bounded retry underneath."""
    transport = RetryTransport(
        httpx.HTTPTransport(),
        max_attempts=config.http_max_attempts,
        retry_delay=config.http_retry_delay_seconds,
    )
    return httpx.Client(
        transport=transport,
        timeout=httpx.Timeout(config.http_timeout_seconds),
        headers={"User-Agent": config.http_user_agent},
    )


@contextmanager
def catalog_search(config: AppConfig) -> Iterator[CatalogSearchUseCase]:
    """Yield a ready use case; the HTTP client is closed on exit.

    Order matters:
        1. HTTP client (retry transport underneath)
        2. Catalog transport adapter
        3. Use case with the domain settings
    """
    http_client = build_http_client(config)
    log.debug("http_client_initialized", attempts=config.http_max_attempts)

    use_case = CatalogSearchUseCase(
        config.general_settings(),
        HttpxCatalogTransport(http_client),
    )
    log.debug("catalog_search_initialized", stations=len(config.stations))

    try:
        yield use_case
    finally:
        http_client.close()
        log.debug("http_client_closed")
