from .catalog import (
    ApiMethod,
    ApiResponse,
    GeneralSettings,
    ResultRecord,
    SearchRequest,
    SearchType,
    SignedRequest,
    StationConfig,
)
from .errors import (
    ApiError,
    CatalogError,
    ConfigurationError,
    ErrorKind,
    ExtractionError,
    NetworkError,
    RequestUnsuccessfulError,
    StationNotFoundError,
)

__all__ = [
    "ApiError",
    "ApiMethod",
    "ApiResponse",
    "CatalogError",
    "ConfigurationError",
    "ErrorKind",
    "ExtractionError",
    "GeneralSettings",
    "NetworkError",
    "RequestUnsuccessfulError",
    "ResultRecord",
    "SearchRequest",
    "SearchType",
    "SignedRequest",
    "StationConfig",
    "StationNotFoundError",
]
