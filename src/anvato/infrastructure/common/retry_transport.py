"""httpx transport with bounded, fixed-delay retry."""

from __future__ import annotations

import time

import httpx
import structlog

log = structlog.get_logger(__name__)

_DEFAULT_RETRYABLE = frozenset({429, 503})


def _parse_retry_after(headers: httpx.Headers) -> float | None:
    """Parse ``Retry-After`` header value (seconds only).

    Returns the delay in seconds, or ``None`` if the header is missing
    or unparseable. HTTP-date format is ignored.
    """
    raw = headers.get("retry-after")
    if raw is None:
        return None
    try:
        return float(raw)
    except (ValueError, TypeError):
        return None


def _redacted_url(request: httpx.Request) -> str:
    # The query string carries the request signature.
    url = request.url
    return f"{url.scheme}://{url.host}{url.path}"


class RetryTransport(httpx.BaseTransport):
    """Wraps an httpx transport and retries failed attempts.

    An attempt fails when the wrapped transport raises
    ``httpx.TransportError`` (connect/read errors, timeouts) or answers
    with a retryable status code (429, 503 by default). At most
    *max_attempts* attempts are made, waiting *retry_delay* seconds in
    between, or the server's ``Retry-After`` capped at *max_delay*.
    The last error or response is passed on unchanged.
    """

    def __init__(
        self,
        wrapped: httpx.BaseTransport,
        *,
        max_attempts: int = 3,
        retry_delay: float = 1.0,
        max_delay: float = 30.0,
        retryable_status_codes: frozenset[int] = _DEFAULT_RETRYABLE,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self._wrapped = wrapped
        self._max_attempts = max_attempts
        self._retry_delay = retry_delay
        self._max_delay = max_delay
        self._retryable = retryable_status_codes

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        for attempt in range(1, self._max_attempts + 1):
            last_attempt = attempt == self._max_attempts
            try:
                response = self._wrapped.handle_request(request)
            except httpx.TransportError as exc:
                if last_attempt:
                    raise
                delay = self._retry_delay
                log.info(
                    "http_retry",
                    url=_redacted_url(request),
                    error=type(exc).__name__,
                    attempt=attempt,
                    delay=delay,
                )
                time.sleep(delay)
                continue

            if response.status_code not in self._retryable or last_attempt:
                return response

            # Read + close the retryable response before retrying
            response.read()
            response.close()

            delay = self._compute_delay(response)
            log.info(
                "http_retry",
                url=_redacted_url(request),
                status=response.status_code,
                attempt=attempt,
                delay=delay,
            )
            time.sleep(delay)

        raise AssertionError("unreachable")  # pragma: no cover

    def _compute_delay(self, response: httpx.Response) -> float:
        retry_after = _parse_retry_after(response.headers)
        if retry_after is not None:
            return min(retry_after, self._max_delay)
        return self._retry_delay

    def close(self) -> None:
        self._wrapped.close()
