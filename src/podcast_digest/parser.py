"""
RSS parsing into feed items using feedparser.
"""

import logging
from typing import Any, Dict, List

import feedparser

from .errors import FeedParseError
from .models import EpisodeItem

# Content block types produced by content:encoded and Atom HTML content
HTML_CONTENT_TYPES = ("text/html", "application/xhtml+xml")


class TextField:
    """Names of the raw text fields kept on an EpisodeItem."""

    CONTENT_ENCODED = "content_encoded"
    CONTENT = "content"
    DESCRIPTION = "description"
    ITUNES_SUMMARY = "itunes_summary"


class FeedParser:
    """Parses RSS content and extracts episode items."""

    def __init__(self) -> None:
        self.logger = logging.getLogger(__name__)

    def parse(self, content: bytes, feed_url: str = "") -> List[EpisodeItem]:
        """Parse RSS content into items, in feed order.

        Raises:
            FeedParseError: If the document is malformed and has no entries.
        """
        parsed = feedparser.parse(content)
        entries = parsed.get("entries", [])

        if parsed.get("bozo") and not entries:
            reason = parsed.get("bozo_exception", "unknown error")
            raise FeedParseError(f"Could not parse feed: {reason}", feed_url)

        items = [self._parse_entry(entry) for entry in entries]
        self.logger.debug("Parsed %d items from %s", len(items), feed_url)
        return items

    def _parse_entry(self, entry: Any) -> EpisodeItem:
        """Convert a feedparser entry to an EpisodeItem."""
        return EpisodeItem(
            title=entry.get("title", ""),
            published=entry.get("published") or entry.get("updated") or "",
            audio_url=self._get_audio_url(entry),
            duration=entry.get("itunes_duration", ""),
            text_fields=self._get_text_fields(entry),
        )

    def _get_audio_url(self, entry: Any) -> str:
        """Get enclosure URL from enclosures, falling back to links."""
        for enclosure in entry.get("enclosures", []):
            href = enclosure.get("href")
            if href:
                return str(href)

        for link in entry.get("links", []):
            if link.get("rel") == "enclosure" and link.get("href"):
                return str(link["href"])

        return ""

    def _get_text_fields(self, entry: Any) -> Dict[str, str]:
        """Collect the raw text fields used for transcript extraction.

        feedparser keeps a single summary per entry. An itunes:summary
        that follows a description is pushed onto the content list as a
        plain-text block, in document order, next to the HTML block from
        content:encoded.
        """
        html_values: List[str] = []
        plain_values: List[str] = []
        for block in entry.get("content", []):
            value = block.get("value", "")
            if not value:
                continue
            if block.get("type") in HTML_CONTENT_TYPES:
                html_values.append(value)
            else:
                plain_values.append(value)

        description = entry.get("description", "")
        itunes_summary = entry.get("itunes_summary", "") or (
            plain_values[0] if plain_values else ""
        )

        fields = {
            TextField.CONTENT_ENCODED: html_values[0] if html_values else "",
            TextField.CONTENT: "\n".join(html_values) or description,
            TextField.DESCRIPTION: description,
            TextField.ITUNES_SUMMARY: itunes_summary,
        }
        return {name: value for name, value in fields.items() if value}
