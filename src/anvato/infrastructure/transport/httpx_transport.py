"""httpx adapter for CatalogTransportPort."""

from __future__ import annotations

import httpx
import structlog

from anvato.domain.entities import ApiResponse, NetworkError

log = structlog.get_logger(__name__)


class HttpxCatalogTransport:
    """Sends catalog requests through a shared ``httpx.Client``.

    The MCP API expects a GET carrying the XML body. Retries, if any, are
    done by the client's transport (see ``RetryTransport``).
    """

    def __init__(self, http_client: httpx.Client) -> None:
        self._http = http_client

    def send(self, url: str, body: str, *, timeout: float | None = None) -> ApiResponse:
        try:
            resp = self._http.request(
                "GET",
                url,
                content=body.encode("utf-8"),
                headers={"Content-Type": "text/xml; charset=utf-8"},
                timeout=httpx.USE_CLIENT_DEFAULT if timeout is None else timeout,
            )
        except httpx.HTTPError as exc:
            log.warning("catalog_network_error", error=type(exc).__name__)
            raise NetworkError(
                "Could not reach the catalog API.", detail=str(exc)
            ) from exc

        log.debug("catalog_response_received", status=resp.status_code)
        return ApiResponse(status_code=resp.status_code, body=resp.content)
