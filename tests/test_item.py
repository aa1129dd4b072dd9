"""Tests for episode rendering."""

import pytest
from lxml import etree

from conftest import ITUNES, NAMESPACES, child_tags
from podcast_rss.elements import format_duration
from podcast_rss.item import Item


def build(item: Item) -> etree._Element:
    parent = etree.Element("channel")
    return item.build(parent)


def test_build_appends_to_parent(episode):
    parent = etree.Element("channel")
    node = episode.build(parent)
    assert node.tag == "item"
    assert node.getparent() is parent


def test_element_order(episode):
    assert child_tags(build(episode)) == [
        "title",
        "link",
        "guid",
        "itunes:subtitle",
        "itunes:summary",
        "itunes:image",
        "description",
        "pubDate",
        "enclosure",
        "itunes:duration",
    ]


def test_field_values(episode):
    node = build(episode)
    assert node.findtext("title") == "Episode 1"
    assert node.findtext("itunes:summary", namespaces=NAMESPACES) == "All about <the> first & only"
    assert node.find("itunes:image", NAMESPACES).get("href") == "https://example.com/episodes/1.jpg"
    assert node.findtext("pubDate") == "Fri, 13 Feb 2026 10:00:00 +0000"
    assert node.findtext("itunes:duration", namespaces=NAMESPACES) == "1:02:05"
    enclosure = node.find("enclosure")
    assert dict(enclosure.attrib) == {
        "url": "https://example.com/audio/1.mp3",
        "length": "1234567",
        "type": "audio/mpeg",
    }


def test_cdata_sections(episode):
    xml = etree.tostring(build(episode), encoding="unicode")
    assert "<description><![CDATA[<p>Show notes</p>]]></description>" in xml
    assert "<![CDATA[The first one]]>" in xml
    assert "<![CDATA[All about <the> first & only]]>" in xml


def test_empty_item_only_has_enclosure():
    node = build(Item())
    assert child_tags(node) == ["enclosure"]
    assert dict(node.find("enclosure").attrib) == {"url": "", "length": "0", "type": ""}


def test_empty_strings_are_unset():
    item = Item()
    item.set_title("")
    item.set_description("")
    assert child_tags(build(item)) == ["enclosure"]


class TestGuid:
    def test_permalink_omits_attribute(self):
        item = Item()
        item.set_guid("x")
        guid = build(item).find("guid")
        assert guid.text == "x"
        assert "isPermaLink" not in guid.attrib

    def test_non_permalink_attribute(self):
        item = Item()
        item.set_guid("x", False)
        guid = build(item).find("guid")
        assert guid.text == "x"
        assert guid.get("isPermaLink") == "false"

    def test_permalink_flag_uses_truthiness(self):
        item = Item()
        item.set_guid("x", 0)
        assert item.guid_is_permalink is False


class TestDuration:
    @pytest.mark.parametrize(
        "seconds, expected",
        [
            (1, "0:00:01"),
            (59, "0:00:59"),
            (60, "0:01:00"),
            (3599, "0:59:59"),
            (3600, "1:00:00"),
            (3725, "1:02:05"),
            (86399, "23:59:59"),
            (360000, "100:00:00"),
        ],
    )
    def test_format(self, seconds, expected):
        assert format_duration(seconds) == expected

    @pytest.mark.parametrize("seconds", [1, 61, 3725, 45296, 360001])
    def test_formatted_value_reconstructs_seconds(self, seconds):
        hours, minutes, secs = (int(part) for part in format_duration(seconds).split(":"))
        assert hours * 3600 + minutes * 60 + secs == seconds

    @pytest.mark.parametrize("duration", [0, "0", -5, "none"])
    def test_non_positive_duration_is_omitted(self, duration):
        item = Item()
        item.set_media_duration(duration)
        assert build(item).find(f"{{{ITUNES}}}duration") is None

    def test_unset_duration_is_omitted(self):
        item = Item()
        item.set_media("https://example.com/a.mp3", 10, "audio/mpeg")
        assert item.media_duration is None
        assert build(item).find(f"{{{ITUNES}}}duration") is None


def test_media_setters_coerce():
    item = Item()
    item.set_media_size("2048 bytes")
    item.set_media_duration("90")
    assert item.media_size == 2048
    assert item.media_duration == 90


def test_publish_date_string_kept_verbatim():
    item = Item()
    item.set_publish_date("Fri, 13 Feb 2026 11:00:00 +0000")
    assert build(item).findtext("pubDate") == "Fri, 13 Feb 2026 11:00:00 +0000"


def test_itunes_elements_declare_namespace_when_parent_lacks_it(episode):
    node = build(episode)
    assert node.find("itunes:subtitle", NAMESPACES).nsmap["itunes"] == ITUNES
