"""Picks result nodes out of a validated search response."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any
from xml.etree import ElementTree as ET

from anvato.domain.entities import ApiMethod, ExtractionError, ResultRecord

# Playlists share the video_list container with videos.
RESULT_PATHS: MappingProxyType[ApiMethod, str] = MappingProxyType(
    {
        ApiMethod.LIST_VIDEOS: ".//params/video_list/video",
        ApiMethod.LIST_PLAYLISTS: ".//params/video_list/playlist",
        ApiMethod.LIST_EMBEDDABLE_CHANNELS: ".//params/channel_list/channel",
    }
)


def _element_value(element: ET.Element) -> Any:
    """Leaf text, or a dict for elements with attributes or children."""
    text = (element.text or "").strip()
    if len(element) == 0 and not element.attrib:
        return text

    value: dict[str, Any] = {f"@{k}": v for k, v in element.attrib.items()}
    if text:
        value["#text"] = text
    value.update(_children(element))
    return value


def _children(element: ET.Element) -> dict[str, Any]:
    # values are str or dict, so a list always means a repeated tag
    out: dict[str, Any] = {}
    for child in element:
        value = _element_value(child)
        if child.tag not in out:
            out[child.tag] = value
        elif isinstance(out[child.tag], list):
            out[child.tag].append(value)
        else:
            out[child.tag] = [out[child.tag], value]
    return out


def to_record(element: ET.Element) -> ResultRecord:
    return ResultRecord(
        tag=element.tag,
        fields=_children(element),
        attributes=dict(element.attrib),
        text=(element.text or "").strip(),
    )


def extract_results(method: ApiMethod, root: ET.Element) -> list[ResultRecord]:
    """Return the records for *method* in document order.

    A response without a ``params`` container has no results.
    """
    path = RESULT_PATHS.get(method)
    if path is None:
        raise ExtractionError(
            "There was an error processing the search results.",
            detail=str(method),
        )

    if root.find(".//params") is None:
        return []

    return [to_record(node) for node in root.findall(path)]
