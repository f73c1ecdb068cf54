"""Validation of MCP API responses."""

from __future__ import annotations

from xml.etree import ElementTree as ET

import structlog

from anvato.domain.entities import ApiError, ApiResponse, RequestUnsuccessfulError

log = structlog.get_logger(__name__)

# Intentionally uncapitalized: it is embedded in a sentence.
DEFAULT_API_MESSAGE = "no error message provided"

API_ERROR_TEMPLATE = "The API responded with an error ({message})."
REQUEST_UNSUCCESSFUL_MESSAGE = "There was an error contacting the API."


def parse_xml(body: bytes) -> ET.Element | None:
    """Parse *body* and return the root element, or None if it is not XML."""
    try:
        return ET.fromstring(body)
    except ET.ParseError:
        return None


def is_api_error(root: ET.Element | None) -> bool:
    """True when the document is missing or reports ``result=failure``."""
    if root is None:
        return True
    return (root.findtext("result") or "").strip() == "failure"


def error_message(root: ET.Element | None) -> str:
    """Quoted ``comment`` of a failure document, or the default message."""
    if root is not None:
        comment = (root.findtext("comment") or "").strip()
        if comment:
            return f'"{comment}"'
    return DEFAULT_API_MESSAGE


def validate_response(response: ApiResponse) -> ET.Element:
    """Check a raw API response and return its parsed root element.

    Raises:
        RequestUnsuccessfulError: Status code other than 200.
        ApiError: Body is not XML or the API reported a failure.
    """
    if response.status_code != 200:
        log.warning("catalog_request_unsuccessful", status=response.status_code)
        raise RequestUnsuccessfulError(
            REQUEST_UNSUCCESSFUL_MESSAGE, detail=str(response.status_code)
        )

    root = parse_xml(response.body)
    if root is None or is_api_error(root):
        message = error_message(root)
        log.warning(
            "catalog_api_error",
            message=message,
            parsed=root is not None,
        )
        raise ApiError(API_ERROR_TEMPLATE.format(message=message), api_message=message)

    return root
