"""
Feed downloading from URLs and local files.
"""

import logging
from typing import Optional

import requests

from .errors import FeedFetchError

RSS_TIMEOUT_SECONDS = 30


def download_rss_from_url(
    rss_url: str, session: Optional[requests.Session] = None
) -> bytes:
    """Download RSS content from URL.

    Raises:
        FeedFetchError: On network or HTTP errors, or an empty response.
    """
    logger = logging.getLogger(__name__)
    logger.debug("Downloading RSS from %s", rss_url)
    http = session or requests
    try:
        response = http.get(rss_url, timeout=RSS_TIMEOUT_SECONDS)
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        raise FeedFetchError(f"RSS download error: {e}", rss_url) from e

    if not response.content:
        raise FeedFetchError(
            "Failed to download RSS content - response was empty", rss_url
        )
    logger.debug(
        "Successfully downloaded RSS content (%d bytes)",
        len(response.content),
    )
    return response.content


def load_rss_from_file(rss_file_path: str) -> bytes:
    """Load RSS content from local file.

    Raises:
        FeedFetchError: If the file is missing, unreadable or empty.
    """
    logger = logging.getLogger(__name__)
    logger.debug("Loading RSS from %s", rss_file_path)
    try:
        with open(rss_file_path, "rb") as f:
            rss_content = f.read()
    except FileNotFoundError as e:
        raise FeedFetchError(
            f"RSS file not found: {rss_file_path}", rss_file_path
        ) from e
    except OSError as e:
        raise FeedFetchError(
            f"RSS file read error: {e}", rss_file_path
        ) from e

    if not rss_content:
        raise FeedFetchError("RSS file is empty", rss_file_path)
    logger.debug("Successfully loaded RSS content (%d bytes)", len(rss_content))
    return rss_content
