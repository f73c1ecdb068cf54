from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SearchType(str, Enum):
    """What the caller wants to find."""

    LIVE = "live"
    VOD = "vod"
    PLAYLIST = "playlist"


class ApiMethod(str, Enum):
    """Remote operation names understood by the MCP API."""

    LIST_EMBEDDABLE_CHANNELS = "list_embeddable_channels"
    LIST_VIDEOS = "list_videos"
    LIST_PLAYLISTS = "list_playlists"


@dataclass(frozen=True)
class StationConfig:
    id: str
    public_key: str
    private_key: str = field(repr=False)  # secret, never logged


@dataclass(frozen=True)
class GeneralSettings:
    mcp_url: str  # catalog base URL, e.g. "https://mcp.example.com"
    stations: tuple[StationConfig, ...] = ()


@dataclass(frozen=True)
class SearchRequest:
    type: SearchType
    station: str  # station id as configured
    keyword: str | None = None  # "lk" filter on the item name


@dataclass(frozen=True)
class SignedRequest:
    url: str
    body: str
    timestamp: int  # same value is signed and sent as ?ts=
    method: ApiMethod


@dataclass(frozen=True)
class ApiResponse:
    status_code: int
    body: bytes


@dataclass(frozen=True)
class ResultRecord:
    """One video, playlist or channel node from a search response.

    The API's per-type schema is not modelled. ``attributes`` holds the
    node's XML attributes and ``fields`` its children, converted
    recursively: a leaf becomes its text, a nested element a dict
    (attributes under ``@name``, text under ``#text``), and repeated tags a
    list in document order.
    """

    tag: str
    fields: dict[str, Any] = field(default_factory=dict, hash=False)
    attributes: dict[str, str] = field(default_factory=dict, hash=False)
    text: str = ""

    def get(self, name: str, default: Any = None) -> Any:
        """Look up a child field, then an attribute."""
        if name in self.fields:
            return self.fields[name]
        return self.attributes.get(name, default)

    def to_dict(self) -> dict[str, Any]:
        """Flat JSON-friendly view.

        ``#tag`` and ``#text`` cannot clash with child names, and attributes
        are prefixed with ``@``.
        """
        data: dict[str, Any] = {"#tag": self.tag}
        data.update({f"@{k}": v for k, v in self.attributes.items()})
        data.update(self.fields)
        if self.text:
            data["#text"] = self.text
        return data
