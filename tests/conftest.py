"""Shared test fixtures for Podcast RSS tests."""

import json
from datetime import datetime, timezone

import pytest
from lxml import etree

from podcast_rss.feed import Feed
from podcast_rss.item import Item

ITUNES = "http://www.itunes.com/dtds/podcast-1.0.dtd"
ATOM = "http://www.w3.org/2005/Atom"
NAMESPACES = {"itunes": ITUNES, "atom": ATOM}

SAMPLE_FEED_DESCRIPTION = {
    "title": "Test Podcast",
    "link": "https://example.com",
    "description": "A <b>test</b> podcast & friends",
    "language": "en",
    "copyright": "2026 Example",
    "managing_editor": "editor@example.com (Editor)",
    "atom_link": "https://example.com/feed.xml",
    "image": {"url": "https://example.com/logo.png", "width": 144, "height": 144},
    "itunes": {
        "image": "https://example.com/cover.jpg",
        "author": "Example Author",
        "owner_email": "owner@example.com",
        "owner_name": "Example Owner",
        "category": "Technology",
        "subcategories": ["Podcasting"],
        "explicit": False,
        "block": False,
    },
    "items": [
        {
            "title": "Episode 1",
            "link": "https://example.com/episodes/1",
            "guid": "https://example.com/episodes/1",
            "description": "First episode",
            "published": "2026-02-13T10:00:00Z",
            "enclosure": {
                "url": "https://example.com/audio/1.mp3",
                "length": 1234567,
                "type": "audio/mpeg",
                "duration": 3725,
            },
        },
        {
            "title": "Episode 2",
            "guid": {"value": "episode-2", "is_permalink": False},
            "published": "Fri, 13 Feb 2026 11:00:00 +0000",
            "enclosure": {
                "url": "https://example.com/audio/2.mp3",
                "length": "2048",
                "type": "audio/mpeg",
            },
        },
    ],
}


def parse(xml: str) -> etree._Element:
    """Parse a rendered document back into an lxml root element."""
    return etree.fromstring(xml.encode("utf-8"))


def channel_of(xml: str) -> etree._Element:
    return parse(xml).find("channel")


def child_tags(element: etree._Element) -> list[str]:
    """Return child tags with namespaces replaced by their usual prefixes."""
    tags = []
    for child in element:
        qname = etree.QName(child)
        prefix = {ITUNES: "itunes:", ATOM: "atom:"}.get(qname.namespace, "")
        tags.append(prefix + qname.localname)
    return tags


@pytest.fixture
def minimal_feed():
    """A feed with only the required fields."""
    return Feed("Test Podcast", "https://example.com", "A test podcast")


@pytest.fixture
def episode():
    """A fully populated episode."""
    item = Item()
    item.set_title("Episode 1")
    item.set_link("https://example.com/episodes/1")
    item.set_guid("https://example.com/episodes/1")
    item.set_itunes_subtitle("The first one")
    item.set_itunes_summary("All about <the> first & only")
    item.set_itunes_image("https://example.com/episodes/1.jpg")
    item.set_description("<p>Show notes</p>")
    item.set_publish_date(datetime(2026, 2, 13, 10, 0, 0, tzinfo=timezone.utc))
    item.set_media("https://example.com/audio/1.mp3", 1234567, "audio/mpeg", 3725)
    return item


@pytest.fixture
def full_feed(episode):
    """A feed with every channel field set and one episode."""
    feed = Feed("Test Podcast", "https://example.com", "A <b>test</b> podcast")
    feed.set_language("en")
    feed.set_copyright("2026 Example")
    feed.set_managing_editor("editor@example.com (Editor)")
    feed.set_atom_link("https://example.com/feed.xml")
    feed.set_image("https://example.com/logo.png", 144, 144)
    feed.set_itunes_image("https://example.com/cover.jpg")
    feed.set_itunes_author("Example Author")
    feed.set_itunes_owner_email("owner@example.com")
    feed.set_itunes_owner("Example Owner")
    feed.set_itunes_categories("Technology", ["Podcasting"])
    feed.set_itunes_explicit(True)
    feed.add_item(episode)
    return feed


@pytest.fixture
def sample_description():
    """A JSON-compatible feed description."""
    return json.loads(json.dumps(SAMPLE_FEED_DESCRIPTION))


@pytest.fixture
def sample_description_path(tmp_path, sample_description):
    """The sample feed description written to a temporary JSON file."""
    path = tmp_path / "feed.json"
    path.write_text(json.dumps(sample_description), encoding="utf-8")
    return path
