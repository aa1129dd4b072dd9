"""Build feeds from loosely typed mappings such as parsed JSON."""

import json
import logging
from datetime import datetime
from os import PathLike

from podcast_rss.feed import Feed
from podcast_rss.item import Item

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("title", "link", "description")

FEED_SETTERS = {
    "language": "set_language",
    "copyright": "set_copyright",
    "managing_editor": "set_managing_editor",
    "atom_link": "set_atom_link",
}

ITUNES_SETTERS = {
    "image": "set_itunes_image",
    "author": "set_itunes_author",
    "owner_email": "set_itunes_owner_email",
    "owner_name": "set_itunes_owner",
    "explicit": "set_itunes_explicit",
    "block": "set_itunes_block",
}

ITEM_SETTERS = {
    "title": "set_title",
    "link": "set_link",
    "description": "set_description",
    "subtitle": "set_itunes_subtitle",
    "summary": "set_itunes_summary",
    "image": "set_itunes_image",
}


class FeedConfigError(Exception):
    """Raised when a feed description cannot be turned into a Feed."""


def load_feed(path: str | PathLike) -> Feed:
    """Read a JSON feed description from ``path``.

    Raises:
        FeedConfigError: If the file is not UTF-8 JSON or not a feed description.
        OSError: If the file cannot be read.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except UnicodeDecodeError as e:
        raise FeedConfigError(f"{path} is not UTF-8 encoded: {e}") from e
    except json.JSONDecodeError as e:
        raise FeedConfigError(f"Invalid JSON in {path}: {e}") from e
    return feed_from_dict(data)


def feed_from_dict(data: dict) -> Feed:
    """Create a populated Feed from a feed description mapping.

    Args:
        data: Mapping with ``title``, ``link`` and ``description`` plus any
            of the optional channel, ``image``, ``itunes`` and ``items`` keys.

    Raises:
        FeedConfigError: If required keys are missing or a section has the
            wrong shape.
    """
    if not isinstance(data, dict):
        raise FeedConfigError("Feed description must be a JSON object")

    missing = [key for key in REQUIRED_KEYS if key not in data]
    if missing:
        raise FeedConfigError(f"Missing required keys: {', '.join(missing)}")

    feed = Feed(data["title"], data["link"], data["description"])
    known = set(REQUIRED_KEYS) | set(FEED_SETTERS) | {"image", "itunes", "items"}
    _log_unknown_keys("feed", data, known)

    _apply_setters(feed, data, FEED_SETTERS)

    if "image" in data:
        image = _section(data, "image")
        feed.set_image(image.get("url"), image.get("width"), image.get("height"))

    if "itunes" in data:
        itunes = _section(data, "itunes")
        _log_unknown_keys(
            "itunes", itunes, set(ITUNES_SETTERS) | {"category", "subcategories"}
        )
        _apply_setters(feed, itunes, ITUNES_SETTERS)
        if "category" in itunes or "subcategories" in itunes:
            subcategories = itunes.get("subcategories") or []
            if not isinstance(subcategories, list):
                raise FeedConfigError("'itunes.subcategories' must be a list")
            feed.set_itunes_categories(itunes.get("category"), subcategories)

    items = data.get("items")
    if items is None:
        items = []
    if not isinstance(items, list):
        raise FeedConfigError("'items' must be a list")
    for position, item_data in enumerate(items, start=1):
        if not isinstance(item_data, dict):
            raise FeedConfigError(f"Item {position} must be a JSON object")
        feed.add_item(item_from_dict(item_data))

    return feed


def item_from_dict(data: dict) -> Item:
    """Create a populated Item from an item description mapping."""
    item = Item()
    known = set(ITEM_SETTERS) | {"guid", "published", "enclosure"}
    _log_unknown_keys("item", data, known)

    _apply_setters(item, data, ITEM_SETTERS)

    guid = data.get("guid")
    if isinstance(guid, dict):
        item.set_guid(guid.get("value"), guid.get("is_permalink", True))
    elif guid is not None:
        item.set_guid(guid)

    if "published" in data:
        item.set_publish_date(_parse_published(data["published"]))

    if "enclosure" in data:
        enclosure = _section(data, "enclosure")
        item.set_media(
            enclosure.get("url"),
            enclosure.get("length"),
            enclosure.get("type"),
            enclosure.get("duration"),
        )

    return item


def _apply_setters(target, data: dict, setters: dict[str, str]) -> None:
    """Call the setter named for each key of ``setters`` present in ``data``.

    Args:
        target: The Feed or Item to populate.
        data: The description mapping.
        setters: Maps description keys to setter method names.
    """
    for key, setter in setters.items():
        if key in data:
            getattr(target, setter)(data[key])


def _section(data: dict, key: str) -> dict:
    """Return the nested mapping stored under ``key``.

    Raises:
        FeedConfigError: If the value is not a mapping.
    """
    value = data[key]
    if not isinstance(value, dict):
        raise FeedConfigError(f"'{key}' must be a JSON object")
    return value


def _log_unknown_keys(section: str, data: dict, known: set[str]) -> None:
    """Log each key of ``data`` that is not in ``known`` at debug level."""
    for key in sorted(set(data) - known):
        logger.debug("Ignoring unknown %s key '%s'", section, key)


def _parse_published(value):
    """Parse ISO 8601 strings into datetimes, keeping other values as given."""
    if not isinstance(value, str):
        return value
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
