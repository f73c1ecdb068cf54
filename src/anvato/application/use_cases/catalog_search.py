"""Catalog search use case: resolve, sign, send, validate, extract."""

from __future__ import annotations

import time
from collections.abc import Callable

import structlog

from anvato.application.request_builder import build_signed_request, method_for
from anvato.application.response_validator import validate_response
from anvato.application.result_extractor import extract_results
from anvato.application.stations import ensure_required_settings, resolve_station
from anvato.domain.entities import (
    GeneralSettings,
    ResultRecord,
    SearchRequest,
    SearchType,
)
from anvato.domain.ports import CatalogTransportPort

log = structlog.get_logger(__name__)


class CatalogSearchUseCase:
    """Searches the MCP catalog for one station.

    Flow:
        1. Map the search type to an API method
        2. Resolve the station and check required settings
        3. Build the signed request (fresh body per call)
        4. Send it through the transport (retries live there)
        5. Validate the response
        6. Extract the result records for the method

    The first failing step raises; nothing is retried here. Instances keep
    no per-call state and can be shared between threads.
    """

    def __init__(
        self,
        settings: GeneralSettings,
        transport: CatalogTransportPort,
        *,
        clock: Callable[[], float] = time.time,
        timeout: float | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport
        self._clock = clock
        self._timeout = timeout

    def execute(self, request: SearchRequest) -> list[ResultRecord]:
        """Run one search.

        Raises:
            ConfigurationError: Station missing/unknown or settings incomplete.
            NetworkError: Transport failure.
            ApiError: Non-200 status, non-XML body or ``result=failure``.
        """
        method = method_for(request.type)
        station = resolve_station(self._settings, request.station)
        ensure_required_settings(self._settings, station)

        signed = build_signed_request(
            station, request, self._settings.mcp_url, now=self._clock
        )
        log.info(
            "catalog_search_started",
            station=station.id,
            method=method.value,
            keyword=request.keyword or None,
        )

        response = self._transport.send(signed.url, signed.body, timeout=self._timeout)
        root = validate_response(response)
        records = extract_results(signed.method, root)

        log.info(
            "catalog_search_completed",
            station=station.id,
            method=method.value,
            results=len(records),
        )
        return records

    def search(
        self,
        type: SearchType | str,
        station: str,
        keyword: str | None = None,
    ) -> list[ResultRecord]:
        """Convenience wrapper around :meth:`execute`."""
        return self.execute(
            SearchRequest(type=SearchType(type), station=station, keyword=keyword)
        )
