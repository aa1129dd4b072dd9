"""Fixed protocol values for podcast RSS documents."""

from enum import Enum

RSS_VERSION = "2.0"

XMLNS_NAMESPACE = "http://www.w3.org/2000/xmlns/"
ITUNES_NAMESPACE = "http://www.itunes.com/dtds/podcast-1.0.dtd"
ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"


class Namespace(Enum):
    """XML vocabularies an element can belong to."""

    RSS = (None, None)
    ATOM = ("atom", ATOM_NAMESPACE)
    ITUNES = ("itunes", ITUNES_NAMESPACE)

    @property
    def prefix(self) -> str | None:
        """Conventional prefix, or None for plain RSS."""
        return self.value[0]

    @property
    def uri(self) -> str | None:
        """Namespace URI, or None for plain RSS."""
        return self.value[1]

    @property
    def nsmap(self) -> dict[str, str] | None:
        """Namespace declaration for lxml, or None for plain RSS."""
        if self.uri is None:
            return None
        return {self.prefix: self.uri}
