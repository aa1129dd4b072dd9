"""Podcast RSS - build RSS 2.0 podcast feeds with iTunes extensions."""

__version__ = "0.1.0"

from podcast_rss.constants import Namespace
from podcast_rss.feed import Feed, render
from podcast_rss.item import Item
from podcast_rss.loader import FeedConfigError, feed_from_dict, load_feed
from podcast_rss.validation import FeedValidationError, validate_feed

__all__ = [
    "Feed",
    "FeedConfigError",
    "FeedValidationError",
    "Item",
    "Namespace",
    "feed_from_dict",
    "load_feed",
    "render",
    "validate_feed",
]
