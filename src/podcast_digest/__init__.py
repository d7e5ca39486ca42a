"""
Podcast digest package - Fetches podcast RSS feeds, extracts transcript
text, summarizes new episodes with an LLM, and keeps the results in a
JSON store.

Feed parsing, transcript extraction, summarization and storage are
separate components wired together by the factory.
"""

from .factory import create_manager
from .manager import DigestManager
from .models import EpisodeItem, EpisodeSummary, PodcastConfig
from .podcasts import PODCASTS

__all__ = [
    "create_manager",
    "DigestManager",
    "EpisodeItem",
    "EpisodeSummary",
    "PodcastConfig",
    "PODCASTS",
]
