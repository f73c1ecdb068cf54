"""Tests for CatalogSearchUseCase (pipeline over a mocked transport)."""

from __future__ import annotations

from unittest.mock import MagicMock
from urllib.parse import parse_qs, urlsplit

import pytest

from anvato.application.use_cases import CatalogSearchUseCase
from anvato.domain.entities import (
    ApiError,
    ApiResponse,
    ConfigurationError,
    GeneralSettings,
    NetworkError,
    RequestUnsuccessfulError,
    SearchRequest,
    SearchType,
    StationConfig,
    StationNotFoundError,
)


@pytest.fixture()
def use_case(
    settings: GeneralSettings, mock_transport: MagicMock, clock
) -> CatalogSearchUseCase:
    return CatalogSearchUseCase(settings, mock_transport, clock=clock, timeout=5.0)


class TestExecute:
    def test_vod_search_end_to_end(
        self,
        use_case: CatalogSearchUseCase,
        mock_transport: MagicMock,
        vod_request: SearchRequest,
    ) -> None:
        records = use_case.execute(vod_request)

        assert [r.get("id") for r in records] == ["v1", "v2"]
        mock_transport.send.assert_called_once()
        url, body = mock_transport.send.call_args.args
        assert mock_transport.send.call_args.kwargs == {"timeout": 5.0}

        query = parse_qs(urlsplit(url).query)
        assert query["id"] == ["pub"]
        assert query["filter_by[]"] == ["name"]
        assert query["filter_cond[]"] == ["lk"]
        assert query["filter_value[]"] == ["news"]
        assert "<type>list_videos</type>" in body

    def test_playlist_search(
        self, use_case: CatalogSearchUseCase, mock_transport: MagicMock
    ) -> None:
        records = use_case.search(SearchType.PLAYLIST, "123")
        assert [r.tag for r in records] == ["playlist"]
        _, body = mock_transport.send.call_args.args
        assert "<type>list_playlists</type>" in body

    def test_live_search(
        self,
        use_case: CatalogSearchUseCase,
        mock_transport: MagicMock,
        channel_list_xml: bytes,
    ) -> None:
        mock_transport.send.return_value = ApiResponse(200, channel_list_xml)
        records = use_case.search("live", "123")
        assert [r.tag for r in records] == ["channel"]

    def test_empty_station_fails_without_network(
        self, use_case: CatalogSearchUseCase, mock_transport: MagicMock
    ) -> None:
        with pytest.raises(ConfigurationError):
            use_case.search(SearchType.VOD, "")
        mock_transport.send.assert_not_called()

    def test_unknown_station_fails_without_network(
        self, use_case: CatalogSearchUseCase, mock_transport: MagicMock
    ) -> None:
        with pytest.raises(StationNotFoundError):
            use_case.search(SearchType.VOD, "999")
        mock_transport.send.assert_not_called()

    def test_missing_keys_fail_without_network(self, mock_transport: MagicMock) -> None:
        settings = GeneralSettings(
            mcp_url="https://mcp.example.com",
            stations=(StationConfig(id="123", public_key="pub", private_key=""),),
        )
        use_case = CatalogSearchUseCase(settings, mock_transport)
        with pytest.raises(ConfigurationError):
            use_case.search(SearchType.VOD, "123")
        mock_transport.send.assert_not_called()

    def test_invalid_type_fails_before_station_lookup(
        self, use_case: CatalogSearchUseCase, mock_transport: MagicMock
    ) -> None:
        with pytest.raises(ValueError):
            use_case.search("radio", "")
        mock_transport.send.assert_not_called()

    def test_500_is_request_unsuccessful(
        self,
        use_case: CatalogSearchUseCase,
        mock_transport: MagicMock,
        video_list_xml: bytes,
    ) -> None:
        mock_transport.send.return_value = ApiResponse(500, video_list_xml)
        with pytest.raises(RequestUnsuccessfulError):
            use_case.search(SearchType.VOD, "123")

    def test_api_failure(
        self,
        use_case: CatalogSearchUseCase,
        mock_transport: MagicMock,
        failure_xml: bytes,
    ) -> None:
        mock_transport.send.return_value = ApiResponse(200, failure_xml)
        with pytest.raises(ApiError, match='"Bad signature"'):
            use_case.search(SearchType.VOD, "123")

    def test_network_error_propagates_once(
        self, use_case: CatalogSearchUseCase, mock_transport: MagicMock
    ) -> None:
        mock_transport.send.side_effect = NetworkError("Could not reach the catalog API.")
        with pytest.raises(NetworkError):
            use_case.search(SearchType.VOD, "123")
        assert mock_transport.send.call_count == 1

    def test_calls_do_not_share_request_state(
        self, use_case: CatalogSearchUseCase, mock_transport: MagicMock
    ) -> None:
        use_case.search(SearchType.LIVE, "123")
        use_case.search(SearchType.VOD, "123")
        bodies = [c.args[1] for c in mock_transport.send.call_args_list]
        assert "<type>list_embeddable_channels</type>" in bodies[0]
        assert "<type>list_videos</type>" in bodies[1]
        assert "list_embeddable_channels" not in bodies[1]
