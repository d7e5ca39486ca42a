"""
Feed client combining download and parsing.
"""

import logging
from typing import List, Optional

import requests

from .downloader import download_rss_from_url, load_rss_from_file
from .models import EpisodeItem
from .parser import FeedParser


class FeedClient:
    """Fetches feeds over HTTP (or from local files) and parses them."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        parser: Optional[FeedParser] = None,
    ):
        """Initialize with an HTTP session and parser."""
        self.session = session or requests.Session()
        self.parser = parser or FeedParser()
        self.logger = logging.getLogger(__name__)

    def fetch(self, feed_url: str) -> List[EpisodeItem]:
        """Fetch and parse a feed into items, in feed order.

        Raises:
            FeedFetchError: If the feed can't be retrieved.
            FeedParseError: If the feed can't be parsed.
        """
        if feed_url.startswith(("http://", "https://")):
            content = download_rss_from_url(feed_url, self.session)
        else:
            content = load_rss_from_file(feed_url)

        items = self.parser.parse(content, feed_url)
        self.logger.info("Found %d episodes", len(items))
        return items
