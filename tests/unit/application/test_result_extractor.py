"""Tests for routing API methods to result nodes."""

from __future__ import annotations

from xml.etree import ElementTree as ET

import pytest

from anvato.application.result_extractor import extract_results, to_record
from anvato.domain.entities import ApiMethod, ErrorKind, ExtractionError


class TestExtractResults:
    def test_videos_in_document_order(self, video_list_xml: bytes) -> None:
        records = extract_results(ApiMethod.LIST_VIDEOS, ET.fromstring(video_list_xml))
        assert [r.attributes["id"] for r in records] == ["v1", "v2"]
        assert all(r.tag == "video" for r in records)
        assert records[0].fields["title"] == "Evening News"

    def test_playlists_from_video_list(self, video_list_xml: bytes) -> None:
        records = extract_results(
            ApiMethod.LIST_PLAYLISTS, ET.fromstring(video_list_xml)
        )
        assert [r.tag for r in records] == ["playlist"]
        assert records[0].get("id") == "p1"

    def test_channels(self, channel_list_xml: bytes) -> None:
        records = extract_results(
            ApiMethod.LIST_EMBEDDABLE_CHANNELS, ET.fromstring(channel_list_xml)
        )
        assert len(records) == 1
        assert records[0].get("name") == "Live One"

    def test_channels_ignore_video_list(self, video_list_xml: bytes) -> None:
        root = ET.fromstring(video_list_xml)
        assert extract_results(ApiMethod.LIST_EMBEDDABLE_CHANNELS, root) == []

    def test_missing_params_returns_empty(self) -> None:
        root = ET.fromstring("<response><result>success</result></response>")
        for method in ApiMethod:
            assert extract_results(method, root) == []

    def test_empty_container(self) -> None:
        root = ET.fromstring("<response><params><video_list/></params></response>")
        assert extract_results(ApiMethod.LIST_VIDEOS, root) == []

    def test_accepts_wire_string(self, video_list_xml: bytes) -> None:
        records = extract_results("list_videos", ET.fromstring(video_list_xml))  # type: ignore[arg-type]
        assert len(records) == 2

    def test_unknown_method_is_extraction_error(self, video_list_xml: bytes) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            extract_results("list_groups", ET.fromstring(video_list_xml))  # type: ignore[arg-type]
        assert exc_info.value.kind is ErrorKind.EXTRACTION_ERROR


class TestToRecord:
    def test_fields_and_attributes(self) -> None:
        node = ET.fromstring(
            '<video id="9" type="vod"><title> Hi </title><title>dup</title></video>'
        )
        record = to_record(node)
        assert record.tag == "video"
        assert record.attributes == {"id": "9", "type": "vod"}
        assert record.fields["title"] == ["Hi", "dup"]

    def test_nested_and_repeated_children(self) -> None:
        node = ET.fromstring(
            '<video id="v1"><title>News</title>'
            "<thumbnails><thumbnail>http://x/s.jpg</thumbnail></thumbnails>"
            "<tag>t1</tag><tag>t2</tag>"
            '<categories><category id="c">Sports</category></categories>'
            "</video>"
        )
        record = to_record(node)
        assert record.fields["title"] == "News"
        assert record.fields["thumbnails"] == {"thumbnail": "http://x/s.jpg"}
        assert record.fields["tag"] == ["t1", "t2"]
        assert record.fields["categories"] == {
            "category": {"@id": "c", "#text": "Sports"}
        }
        data = record.to_dict()
        assert data["#tag"] == "video"
        assert data["@id"] == "v1"
        assert data["tag"] == ["t1", "t2"]

    def test_empty_child_is_empty_string(self) -> None:
        record = to_record(ET.fromstring("<channel><name/></channel>"))
        assert record.fields == {"name": ""}
        assert record.text == ""
