"""Entry point for Podcast RSS: python -m podcast_rss FEED.json"""

import argparse
import logging
import os
import sys

from podcast_rss.feed import Feed
from podcast_rss.loader import FeedConfigError, load_feed
from podcast_rss.validation import FeedValidationError

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_OUTPUT = "-"

logger = logging.getLogger("podcast_rss")


def _env_flag(name: str) -> bool:
    """Return True when environment variable ``name`` is 1, true or yes."""
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse, defaulting to ``sys.argv[1:]``.

    Returns:
        Namespace with ``input``, ``output`` and ``strict``.
    """
    parser = argparse.ArgumentParser(
        prog="podcast_rss",
        description="Render a JSON podcast description as an RSS 2.0 feed.",
    )
    parser.add_argument("input", help="Path to the JSON feed description")
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        help="Where to write the XML feed ('-' for stdout)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=_env_flag("PODCAST_RSS_STRICT"),
        help="Fail when the feed has podcast-domain problems",
    )
    return parser.parse_args(argv)


def _log_level() -> tuple[str, str | None]:
    """Resolve the log level from the environment.

    Returns:
        The level name to configure, and the rejected value if the
        environment held an unknown level.
    """
    requested = os.environ.get("PODCAST_RSS_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if isinstance(logging.getLevelName(requested), int):
        return requested, None
    return DEFAULT_LOG_LEVEL, requested


def write_feed(feed: Feed, output: str, strict: bool) -> None:
    """Write the rendered feed to a file, or stdout for '-'."""
    if output == DEFAULT_OUTPUT:
        sys.stdout.write(feed.to_xml_string(strict=strict))
        sys.stdout.flush()
    else:
        feed.write(output, strict=strict)
        logger.info("Wrote feed '%s' to %s", feed.title, output)


def main(argv: list[str] | None = None) -> int:
    """Render a feed description. Returns the process exit code."""
    level, rejected = _log_level()
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    if rejected is not None:
        logger.warning(
            "Unknown PODCAST_RSS_LOG_LEVEL '%s', using %s", rejected, DEFAULT_LOG_LEVEL
        )
    args = parse_args(argv)

    try:
        feed = load_feed(args.input)
        write_feed(feed, args.output, args.strict)
    except (FeedConfigError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except FeedValidationError as e:
        print("Feed failed validation:", file=sys.stderr)
        for problem in e.problems:
            print(f"  - {problem}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
