"""Podcast channel model and RSS rendering."""

import logging
from dataclasses import dataclass, field
from os import PathLike

from lxml import etree

from podcast_rss.coerce import to_bool, to_int, to_text
from podcast_rss.constants import RSS_VERSION, Namespace
from podcast_rss.elements import (
    add_cdata_element,
    add_element,
    add_text_element,
)
from podcast_rss.item import Item
from podcast_rss.validation import FeedValidationError, validate_feed

logger = logging.getLogger(__name__)

ATOM_LINK_TYPE = "application/rss+xml"
XML_DECLARATION = b'<?xml version="1.0" encoding="UTF-8"?>\n'


@dataclass
class Feed:
    """A podcast channel.

    Title, link and description are required and always rendered. All
    other channel fields start unset and are omitted until a setter gives
    them a value.
    """

    title: str
    link: str
    description: str
    language: str | None = None
    copyright: str | None = None
    managing_editor: str | None = None
    atom_link: str | None = None
    image_url: str | None = None
    image_width: int | None = None
    image_height: int | None = None
    itunes_image_url: str | None = None
    itunes_author: str | None = None
    itunes_email: str | None = None
    itunes_owner: str | None = None
    itunes_category: str | None = None
    itunes_subcategories: list[str] = field(default_factory=list)
    itunes_explicit: bool = False
    itunes_block: bool = False
    items: list[Item] = field(default_factory=list)

    def __post_init__(self):
        """Coerce the required fields passed to the constructor."""
        self.set_title(self.title)
        self.set_link(self.link)
        self.set_description(self.description)

    def set_title(self, title) -> None:
        """Set the feed title. It is also used as the RSS image title."""
        self.title = to_text(title) or ""

    def set_link(self, link) -> None:
        """Set the web link of the feed. It is also used as the RSS image link."""
        self.link = to_text(link) or ""

    def set_description(self, description) -> None:
        """Set the description, rendered as both ``description`` and ``itunes:summary``."""
        self.description = to_text(description) or ""

    def set_language(self, language) -> None:
        """Set the channel language, normally a 2-letter ISO 639-1 code."""
        self.language = to_text(language)

    def set_copyright(self, copyright) -> None:
        """Set the copyright attribution of this feed."""
        self.copyright = to_text(copyright)

    def set_managing_editor(self, managing_editor) -> None:
        """Set the managing editor, usually ``email (Name)``."""
        self.managing_editor = to_text(managing_editor)

    def set_atom_link(self, atom_link) -> None:
        """Set the self-referential URL the feed is published at."""
        self.atom_link = to_text(atom_link)

    def set_image(self, url, width, height) -> None:
        """Set the RSS image. Directories expect at most 144x400 pixels."""
        self.image_url = to_text(url)
        self.image_width = to_int(width)
        self.image_height = to_int(height)

    def set_itunes_image(self, url) -> None:
        """Set the iTunes cover art, ideally a 1400x1400 or larger square."""
        self.itunes_image_url = to_text(url)

    def set_itunes_author(self, author) -> None:
        """Set the author shown in the iTunes directory."""
        self.itunes_author = to_text(author)

    def set_itunes_owner_email(self, email) -> None:
        """Set the owner email rendered inside ``itunes:owner``."""
        self.itunes_email = to_text(email)

    def set_itunes_owner(self, owner) -> None:
        """Set the owner name rendered inside ``itunes:owner``."""
        self.itunes_owner = to_text(owner)

    def set_itunes_categories(self, category, subcategories=()) -> None:
        """Set the iTunes category and replace its subcategories.

        Names should come from Apple's published category list. Each
        subcategory is rendered nested inside the previous one.
        """
        self.itunes_category = to_text(category)
        self.itunes_subcategories = [
            to_text(subcategory) or "" for subcategory in subcategories
        ]

    def set_itunes_explicit(self, explicit) -> None:
        """Set whether the feed is marked explicit in iTunes."""
        self.itunes_explicit = to_bool(explicit)

    def set_itunes_block(self, block) -> None:
        """Set whether the feed is hidden from the public iTunes directory."""
        self.itunes_block = to_bool(block)

    def add_item(self, item: Item) -> None:
        """Append an item. It is rendered after all existing items."""
        self.items.append(item)

    def build(self, parent: etree._Element) -> etree._Element:
        """Append the ``<channel>`` element for this feed to ``parent``."""
        channel = add_element(parent, "channel")

        add_text_element(channel, "title", self.title)
        self._build_atom_link(channel)
        add_text_element(channel, "link", self.link)
        add_cdata_element(channel, "description", self.description)
        add_cdata_element(channel, "summary", self.description, Namespace.ITUNES)
        if self.language is not None:
            add_text_element(channel, "language", self.language)
        if self.copyright is not None:
            add_text_element(channel, "copyright", self.copyright)
        self._build_image(channel)
        if self.managing_editor is not None:
            add_text_element(channel, "managingEditor", self.managing_editor)
        self._build_itunes_categories(channel)
        if self.itunes_author is not None:
            add_text_element(channel, "author", self.itunes_author, Namespace.ITUNES)
        self._build_itunes_owner(channel)
        if self.itunes_image_url is not None:
            add_element(
                channel, "image", Namespace.ITUNES, {"href": self.itunes_image_url}
            )
        add_text_element(
            channel, "explicit", _yes_no(self.itunes_explicit), Namespace.ITUNES
        )
        add_text_element(
            channel, "block", _yes_no(self.itunes_block), Namespace.ITUNES
        )

        for item in self.items:
            item.build(channel)

        return channel

    def _build_atom_link(self, channel: etree._Element) -> None:
        """Append the Atom self-link if one is set."""
        if self.atom_link is None:
            return
        add_element(
            channel,
            "link",
            Namespace.ATOM,
            {"href": self.atom_link, "rel": "self", "type": ATOM_LINK_TYPE},
        )

    def _build_image(self, channel: etree._Element) -> None:
        """Append the RSS ``image`` block if an image URL is set."""
        if self.image_url is None:
            return
        image = add_element(channel, "image")
        add_text_element(image, "url", self.image_url)
        add_text_element(image, "title", self.title)
        add_text_element(image, "link", self.link)
        add_text_element(image, "width", str(self.image_width or 0))
        add_text_element(image, "height", str(self.image_height or 0))

    def _build_itunes_categories(self, channel: etree._Element) -> None:
        """Append the category chain, nesting each subcategory in the previous one."""
        node = add_element(
            channel, "category", Namespace.ITUNES, {"text": self.itunes_category or ""}
        )
        for subcategory in self.itunes_subcategories:
            node = add_element(node, "category", Namespace.ITUNES, {"text": subcategory})

    def _build_itunes_owner(self, channel: etree._Element) -> None:
        """Append ``itunes:owner`` if an owner email or name is set."""
        if self.itunes_email is None and self.itunes_owner is None:
            return
        owner = add_element(channel, "owner", Namespace.ITUNES)
        if self.itunes_email is not None:
            add_text_element(owner, "email", self.itunes_email, Namespace.ITUNES)
        if self.itunes_owner is not None:
            add_text_element(owner, "name", self.itunes_owner, Namespace.ITUNES)

    def to_xml_bytes(self, strict: bool = False) -> bytes:
        """Render this feed as a UTF-8 encoded XML document.

        Raises:
            FeedValidationError: If ``strict`` is set and the feed has problems.
        """
        return XML_DECLARATION + etree.tostring(
            render(self, strict=strict),
            xml_declaration=False,
            encoding="UTF-8",
            pretty_print=True,
        )

    def to_xml_string(self, strict: bool = False) -> str:
        """Render this feed as an XML document string.

        Raises:
            FeedValidationError: If ``strict`` is set and the feed has problems.
        """
        return self.to_xml_bytes(strict=strict).decode("utf-8")

    def write(self, path: str | PathLike, strict: bool = False) -> None:
        """Write the rendered document to ``path``.

        The document is rendered before the file is opened, so a rendering
        error leaves an existing file untouched.

        Raises:
            FeedValidationError: If ``strict`` is set and the feed has problems.
        """
        data = self.to_xml_bytes(strict=strict)
        with open(path, "wb") as f:
            f.write(data)

    def __str__(self) -> str:
        """Return the rendered document, same as ``to_xml_string()``."""
        return self.to_xml_string()


def _yes_no(flag: bool) -> str:
    """Return the iTunes spelling of a boolean flag."""
    return "yes" if flag else "no"


def render(feed: Feed, strict: bool = False) -> etree._ElementTree:
    """Build a fresh RSS document for ``feed`` without modifying it.

    Args:
        feed: The feed to render.
        strict: Run ``validate_feed`` and raise if it finds problems. Without
            it the problems are only logged at debug level.

    Returns:
        An lxml element tree rooted at ``<rss>``.

    Raises:
        FeedValidationError: If ``strict`` is set and the feed has problems.
    """
    if strict:
        problems = validate_feed(feed)
        if problems:
            raise FeedValidationError(problems)
    elif logger.isEnabledFor(logging.DEBUG):
        for problem in validate_feed(feed):
            logger.debug("Feed '%s': %s", feed.title, problem)

    rss = etree.Element("rss", nsmap=Namespace.ITUNES.nsmap)
    rss.set("version", RSS_VERSION)
    feed.build(rss)

    logger.debug("Rendered feed '%s' with %d items", feed.title, len(feed.items))
    return etree.ElementTree(rss)
