"""Helpers for appending RSS nodes to an lxml tree."""

from lxml import etree

from podcast_rss.constants import Namespace

CDATA_TERMINATOR = "]]>"


def qname(tag: str, namespace: Namespace = Namespace.RSS) -> str:
    """Return the Clark-notation tag for ``tag`` in ``namespace``."""
    if namespace.uri is None:
        return tag
    return f"{{{namespace.uri}}}{tag}"


def add_element(
    parent: etree._Element,
    tag: str,
    namespace: Namespace = Namespace.RSS,
    attrib: dict[str, str] | None = None,
) -> etree._Element:
    """Append an empty element, declaring its namespace if the tree lacks it."""
    nsmap = None
    if namespace.uri is not None and parent.nsmap.get(namespace.prefix) != namespace.uri:
        nsmap = namespace.nsmap
    node = etree.SubElement(parent, qname(tag, namespace), nsmap=nsmap)
    for key, value in (attrib or {}).items():
        node.set(key, value)
    return node


def add_text_element(
    parent: etree._Element,
    tag: str,
    text: str,
    namespace: Namespace = Namespace.RSS,
) -> etree._Element:
    """Append an element holding escaped character data."""
    node = add_element(parent, tag, namespace)
    node.text = text
    return node


def add_cdata_element(
    parent: etree._Element,
    tag: str,
    text: str,
    namespace: Namespace = Namespace.RSS,
) -> etree._Element:
    """Append an element holding ``text`` as a CDATA section.

    A CDATA section cannot contain its own terminator, so text with ``]]>``
    falls back to escaped character data. Parsers read back the same
    characters either way.
    """
    node = add_element(parent, tag, namespace)
    if not text or CDATA_TERMINATOR in text:
        node.text = text
    else:
        node.text = etree.CDATA(text)
    return node


def format_duration(seconds: int) -> str:
    """Format whole seconds as ``H:MM:SS`` with unpadded hours."""
    hours, remainder = divmod(seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}"
