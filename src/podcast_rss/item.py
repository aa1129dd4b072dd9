"""Podcast episode model."""

from dataclasses import dataclass

from lxml import etree

from podcast_rss.coerce import format_publish_date, to_bool, to_int, to_text
from podcast_rss.constants import Namespace
from podcast_rss.elements import (
    add_cdata_element,
    add_element,
    add_text_element,
    format_duration,
)


@dataclass
class Item:
    """A single episode of a podcast feed.

    Every field is optional. Unset fields are left out of the rendered
    ``<item>``, except the media enclosure which is always written.
    """

    title: str | None = None
    link: str | None = None
    description: str | None = None
    publish_date: str | None = None
    itunes_image_url: str | None = None
    itunes_subtitle: str | None = None
    itunes_summary: str | None = None
    guid: str | None = None
    guid_is_permalink: bool = True
    media_url: str | None = None
    media_size: int | None = None
    media_mime_type: str | None = None
    media_duration: int | None = None

    def set_title(self, title) -> None:
        """Set the episode title."""
        self.title = to_text(title)

    def set_link(self, link) -> None:
        """Set the web page link of the episode."""
        self.link = to_text(link)

    def set_guid(self, guid, is_permalink=True) -> None:
        """Set the unique identifier and whether it is also a dereferenceable URL."""
        self.guid = to_text(guid)
        self.guid_is_permalink = to_bool(is_permalink)

    def set_description(self, description) -> None:
        """Set the show notes, rendered as CDATA."""
        self.description = to_text(description)

    def set_publish_date(self, date) -> None:
        """Set the publish date from RFC 2822 text or a date/datetime.

        Date values are formatted once, here, so later changes to the
        passed object do not affect the item.
        """
        self.publish_date = format_publish_date(date)

    def set_media_url(self, url) -> None:
        """Set the URL of the media file."""
        self.media_url = to_text(url)

    def set_media_size(self, size) -> None:
        """Set the size of the media file in bytes."""
        self.media_size = to_int(size)

    def set_media_mime_type(self, mime_type) -> None:
        """Set the MIME type of the media file, e.g. ``audio/mpeg``."""
        self.media_mime_type = to_text(mime_type)

    def set_media_duration(self, duration) -> None:
        """Set the media duration in whole seconds."""
        self.media_duration = to_int(duration)

    def set_media(self, url, size, mime_type, duration=None) -> None:
        """Set the enclosure fields, and the duration when one is given."""
        self.set_media_url(url)
        self.set_media_size(size)
        self.set_media_mime_type(mime_type)
        if duration is not None:
            self.set_media_duration(duration)

    def set_itunes_subtitle(self, subtitle) -> None:
        """Set the short iTunes subtitle."""
        self.itunes_subtitle = to_text(subtitle)

    def set_itunes_summary(self, summary) -> None:
        """Set the longer iTunes summary."""
        self.itunes_summary = to_text(summary)

    def set_itunes_image(self, url) -> None:
        """Set the episode artwork URL."""
        self.itunes_image_url = to_text(url)

    def build(self, parent: etree._Element) -> etree._Element:
        """Append this item's ``<item>`` element to ``parent`` and return it."""
        item = add_element(parent, "item")

        if self.title is not None:
            add_text_element(item, "title", self.title)
        if self.link is not None:
            add_text_element(item, "link", self.link)
        if self.guid is not None:
            node = add_text_element(item, "guid", self.guid)
            if not self.guid_is_permalink:
                node.set("isPermaLink", "false")
        if self.itunes_subtitle is not None:
            add_cdata_element(item, "subtitle", self.itunes_subtitle, Namespace.ITUNES)
        if self.itunes_summary is not None:
            add_cdata_element(item, "summary", self.itunes_summary, Namespace.ITUNES)
        if self.itunes_image_url is not None:
            add_element(
                item, "image", Namespace.ITUNES, {"href": self.itunes_image_url}
            )
        if self.description is not None:
            add_cdata_element(item, "description", self.description)
        if self.publish_date is not None:
            add_text_element(item, "pubDate", self.publish_date)

        # Written even when unset so readers see an (empty) enclosure.
        add_element(
            item,
            "enclosure",
            attrib={
                "url": self.media_url or "",
                "length": str(self.media_size or 0),
                "type": self.media_mime_type or "",
            },
        )

        if self.media_duration and self.media_duration > 0:
            add_text_element(
                item,
                "duration",
                format_duration(self.media_duration),
                Namespace.ITUNES,
            )

        return item
