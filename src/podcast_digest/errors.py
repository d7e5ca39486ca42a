"""
Error classes for feed, summarization and store failures.
"""

from typing import Optional


class PodcastDigestError(Exception):
    """Base error for podcast digest failures."""


class FeedError(PodcastDigestError):
    """Error retrieving or reading a podcast feed."""

    def __init__(self, message: str, feed_url: str = "") -> None:
        super().__init__(message)
        self.feed_url = feed_url


class FeedFetchError(FeedError):
    """Feed could not be downloaded (network, HTTP status, empty body)."""


class FeedParseError(FeedError):
    """Feed content could not be parsed into episodes."""


class SummarizationError(PodcastDigestError):
    """Error generating a summary for a single episode."""

    def __init__(
        self, message: str, status_code: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class ResponseParseError(SummarizationError):
    """Model response did not contain a usable JSON object."""

    def __init__(self, message: str, raw_text: str = "") -> None:
        super().__init__(message)
        self.raw_text = raw_text


class StoreError(PodcastDigestError):
    """Summary store could not be read or written."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path
