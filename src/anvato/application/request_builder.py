"""Signed request construction for the MCP API.

The API authenticates every call with an HMAC-SHA256 signature over the XML
request body followed by the request timestamp, keyed by the station's
private key. The same timestamp must appear in the ``ts`` query parameter,
so it is computed exactly once per request.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import re
import time
from collections.abc import Callable
from types import MappingProxyType
from urllib.parse import quote_plus, urlencode, urlsplit

import structlog

from anvato.domain.entities import (
    ApiMethod,
    ConfigurationError,
    ErrorKind,
    SearchRequest,
    SearchType,
    SignedRequest,
    StationConfig,
)

log = structlog.get_logger(__name__)

REQUEST_BODY_TEMPLATE = (
    '<?xml version="1.0" encoding="utf-8"?>'
    "<request><type>{method}</type><params></params></request>"
)

METHOD_BY_TYPE: MappingProxyType[SearchType, ApiMethod] = MappingProxyType(
    {
        SearchType.LIVE: ApiMethod.LIST_EMBEDDABLE_CHANNELS,
        SearchType.VOD: ApiMethod.LIST_VIDEOS,
        SearchType.PLAYLIST: ApiMethod.LIST_PLAYLISTS,
    }
)

# filter key -> (filter_by, filter_cond); the value goes to filter_value
FILTERS: MappingProxyType[str, tuple[str, str]] = MappingProxyType(
    {
        "lk": ("name", "lk"),
    }
)

_SCRIPT_STYLE_RE = re.compile(
    r"<(script|style)[^>]*?>.*?</\1>", re.IGNORECASE | re.DOTALL
)
_TAG_RE = re.compile(r"<[^>]*>")
_OCTET_RE = re.compile(r"%[a-fA-F0-9]{2}")
_WHITESPACE_RE = re.compile(r"\s+")
_UNSAFE_URL_CHARS_RE = re.compile(r"[^\w\-~+.?#=!&;,/:%@$|*'()\[\]]")
_ALLOWED_SCHEMES = ("http", "https")


def method_for(search_type: SearchType) -> ApiMethod:
    """Map a search intent to the API method. Unknown intents fail fast."""
    try:
        return METHOD_BY_TYPE[SearchType(search_type)]
    except (KeyError, ValueError):
        raise ValueError(f"Unsupported search type: {search_type!r}") from None


def build_request_body(method: ApiMethod) -> str:
    """Return a fresh XML request body for *method*."""
    return REQUEST_BODY_TEMPLATE.format(method=ApiMethod(method).value)


def sanitize_text_field(value: str) -> str:
    """Normalise user input to a single line of plain text.

    Script and style blocks are removed with their contents, other tags
    are stripped, stray angle brackets and percent-encoded octets are
    dropped, and whitespace is collapsed.
    """
    text = _SCRIPT_STYLE_RE.sub("", value)
    text = _TAG_RE.sub("", text)
    text = text.replace("<", "").replace(">", "")
    text = _OCTET_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()


def build_filter_params(**filters: str | None) -> list[tuple[str, str]]:
    """Build the ``filter_by[]`` / ``filter_cond[]`` / ``filter_value[]`` lists.

    Keyword arguments are filter keys (see ``FILTERS``); unknown keys and
    empty values are ignored. The three lists stay index-aligned.
    """
    filter_by: list[str] = []
    filter_cond: list[str] = []
    filter_value: list[str] = []

    for key, raw in filters.items():
        contribution = FILTERS.get(key)
        if contribution is None or not raw:
            continue
        value = sanitize_text_field(raw)
        if not value:
            continue
        by, cond = contribution
        filter_by.append(by)
        filter_cond.append(cond)
        filter_value.append(value)

    return (
        [("filter_by[]", v) for v in filter_by]
        + [("filter_cond[]", v) for v in filter_cond]
        + [("filter_value[]", v) for v in filter_value]
    )


def build_query(params: list[tuple[str, str]]) -> str:
    """Encode ordered (key, value) pairs as a query string."""
    return urlencode(params)


def sign(body: str, timestamp: int, private_key: str) -> str:
    """Base64 HMAC-SHA256 of ``body + str(timestamp)``."""
    digest = hmac.new(
        private_key.encode("utf-8"),
        (body + str(timestamp)).encode("utf-8"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def escape_base_url(url: str) -> str:
    """Make the configured MCP URL safe to embed in the request URL."""
    cleaned = url.strip().replace(" ", "%20")
    cleaned = _UNSAFE_URL_CHARS_RE.sub("", cleaned)
    if not cleaned:
        raise ConfigurationError(
            "The MCP URL setting is required.",
            kind=ErrorKind.MISSING_REQUIRED_SETTINGS,
        )

    if "://" not in cleaned:
        cleaned = f"http://{cleaned}"

    scheme = urlsplit(cleaned).scheme.lower()
    if scheme not in _ALLOWED_SCHEMES:
        raise ConfigurationError(
            "The MCP URL must use http or https.",
            kind=ErrorKind.INVALID_MCP_URL,
            detail=scheme,
        )
    return cleaned.rstrip("/")


def build_signed_request(
    station: StationConfig,
    request: SearchRequest,
    mcp_url: str,
    now: Callable[[], float] = time.time,
) -> SignedRequest:
    """Build the signed URL and body for one search."""
    method = method_for(request.type)
    body = build_request_body(method)
    timestamp = int(now())
    signature = sign(body, timestamp, station.private_key)

    url = "{base}/api?ts={ts}&sgn={sgn}&id={id}&{query}".format(
        base=escape_base_url(mcp_url),
        ts=timestamp,
        sgn=quote_plus(signature),
        id=quote_plus(station.public_key),
        query=build_query(build_filter_params(lk=request.keyword)),
    )

    log.debug(
        "catalog_request_signed",
        station=station.id,
        method=method.value,
        ts=timestamp,
    )
    return SignedRequest(url=url, body=body, timestamp=timestamp, method=method)
