"""Opt-in podcast-domain checks for a feed's builder state."""

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from podcast_rss.feed import Feed

LANGUAGE_PATTERN = re.compile(r"[A-Za-z]{2}(-[A-Za-z]{2,3})?")


class FeedValidationError(Exception):
    """Raised when strict rendering finds problems in a feed."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("; ".join(problems))


def validate_feed(feed: "Feed") -> list[str]:
    """Check a feed for values podcast directories would reject.

    Returns:
        A list of human-readable problems, empty when the feed looks usable.
    """
    problems: list[str] = []

    if feed.language is not None and not LANGUAGE_PATTERN.fullmatch(feed.language):
        problems.append(f"Language '{feed.language}' is not a 2-letter code")

    if feed.image_url is not None:
        if (feed.image_width or 0) <= 0 or (feed.image_height or 0) <= 0:
            problems.append("Image width and height must be positive")

    if not feed.itunes_category:
        if feed.itunes_subcategories:
            problems.append("Subcategories require a primary iTunes category")
        else:
            problems.append("No iTunes category set")

    for position, item in enumerate(feed.items, start=1):
        label = f"Item {position}" + (f" ('{item.title}')" if item.title else "")
        if not item.media_url:
            problems.append(f"{label} has no media URL")
        if not item.media_mime_type:
            problems.append(f"{label} has no media MIME type")
        if (item.media_size or 0) <= 0:
            problems.append(f"{label} has no media size")

    return problems
