"""Shared test fixtures for the anvato-search test suite."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from anvato.domain.entities import (
    ApiResponse,
    GeneralSettings,
    SearchRequest,
    SearchType,
    StationConfig,
)

MCP_URL = "https://mcp.example.com"
FIXED_TS = 1_700_000_000

# ---------------------------------------------------------------------------
# Response bodies
# ---------------------------------------------------------------------------

VIDEO_LIST_XML = b"""<?xml version="1.0" encoding="utf-8"?>
<response>
  <result>success</result>
  <params>
    <video_list>
      <video id="v1"><title>Evening News</title><duration>1800</duration></video>
      <video id="v2"><title>Morning News</title><duration>900</duration></video>
      <playlist id="p1"><title>News Playlist</title></playlist>
    </video_list>
  </params>
</response>
"""

CHANNEL_LIST_XML = b"""<?xml version="1.0" encoding="utf-8"?>
<response>
  <result>success</result>
  <params>
    <channel_list>
      <channel id="c1"><name>Live One</name></channel>
    </channel_list>
  </params>
</response>
"""

FAILURE_XML = (
    b"<response><result>failure</result><comment>Bad signature</comment></response>"
)

# ---------------------------------------------------------------------------
# Domain fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def station() -> StationConfig:
    return StationConfig(id="123", public_key="pub", private_key="priv")


@pytest.fixture()
def settings(station: StationConfig) -> GeneralSettings:
    return GeneralSettings(mcp_url=MCP_URL, stations=(station,))


@pytest.fixture()
def vod_request() -> SearchRequest:
    return SearchRequest(type=SearchType.VOD, station="123", keyword="news")


@pytest.fixture()
def clock():
    return lambda: float(FIXED_TS)


# ---------------------------------------------------------------------------
# Mock port fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_transport() -> MagicMock:
    """Mock CatalogTransportPort answering with the video list."""
    transport = MagicMock()
    transport.send.return_value = ApiResponse(status_code=200, body=VIDEO_LIST_XML)
    return transport


@pytest.fixture()
def video_list_xml() -> bytes:
    return VIDEO_LIST_XML


@pytest.fixture()
def channel_list_xml() -> bytes:
    return CHANNEL_LIST_XML


@pytest.fixture()
def failure_xml() -> bytes:
    return FAILURE_XML
