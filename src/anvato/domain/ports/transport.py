"""Port for sending signed requests to the catalog API."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from anvato.domain.entities.catalog import ApiResponse


@runtime_checkable
class CatalogTransportPort(Protocol):
    """Blocking interface for one GET-with-body round trip."""

    def send(self, url: str, body: str, *, timeout: float | None = None) -> ApiResponse:
        """Send *body* to *url* and return status code + raw body.

        Raises NetworkError on transport failure. Any retry happens inside
        the implementation.
        """
        ...
