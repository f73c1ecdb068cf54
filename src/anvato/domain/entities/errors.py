"""Error taxonomy for catalog searches."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    MISSING_REQUIRED_SETTINGS = "missing_required_settings"
    MISSING_STATION = "missing_station"
    STATION_NOT_FOUND = "station_not_found"
    INVALID_MCP_URL = "invalid_mcp_url"
    NETWORK_ERROR = "network_error"
    REQUEST_UNSUCCESSFUL = "request_unsuccessful"
    API_ERROR = "api_error"
    EXTRACTION_ERROR = "extraction_error"


class CatalogError(Exception):
    """Base error for catalog searches.

    ``kind`` is one of a closed set of codes; ``str(err)`` is the stable
    message meant for display.
    """

    default_kind: ErrorKind = ErrorKind.API_ERROR

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind or self.default_kind
        self.detail = detail


class ConfigurationError(CatalogError):
    """Settings are missing or invalid. Raised before any network call."""

    default_kind = ErrorKind.MISSING_REQUIRED_SETTINGS


class StationNotFoundError(ConfigurationError):
    default_kind = ErrorKind.STATION_NOT_FOUND


class NetworkError(CatalogError):
    """Transport-level failure (already retried by the transport)."""

    default_kind = ErrorKind.NETWORK_ERROR


class ApiError(CatalogError):
    """The API reported a failure or sent something unusable."""

    default_kind = ErrorKind.API_ERROR

    def __init__(
        self,
        message: str,
        *,
        kind: ErrorKind | None = None,
        detail: str | None = None,
        api_message: str | None = None,
    ) -> None:
        super().__init__(message, kind=kind, detail=detail)
        self.api_message = api_message


class RequestUnsuccessfulError(ApiError):
    default_kind = ErrorKind.REQUEST_UNSUCCESSFUL


class ExtractionError(CatalogError):
    """Internal inconsistency while picking result nodes."""

    default_kind = ErrorKind.EXTRACTION_ERROR
