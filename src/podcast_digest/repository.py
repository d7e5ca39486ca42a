"""
Domain-specific repository for the summary store.

This module keeps the whole store in memory and handles deduplication of
feed items against already summarized episodes.
"""

import logging
from typing import Dict, List, Optional, Protocol, Set

from .errors import StoreError
from .models import EpisodeItem, EpisodeSummary, PodcastConfig, PodcastRecord
from .storage import Storage


class EpisodeMatcher(Protocol):
    """Strategy deciding whether a feed item was already summarized."""

    name: str

    def item_key(self, item: EpisodeItem) -> Optional[str]:
        """Match key for a feed item, None if it has none."""
        ...  # pylint: disable=unnecessary-ellipsis

    def summary_key(self, summary: EpisodeSummary) -> Optional[str]:
        """Match key for a stored summary, None if it has none."""
        ...  # pylint: disable=unnecessary-ellipsis


class TitleMatcher:
    """Match episodes by exact title."""

    name = "title"

    def item_key(self, item: EpisodeItem) -> Optional[str]:
        return item.title

    def summary_key(self, summary: EpisodeSummary) -> Optional[str]:
        return summary.title


class AudioUrlMatcher:
    """Match episodes by enclosure URL."""

    name = "audio_url"

    def item_key(self, item: EpisodeItem) -> Optional[str]:
        return item.audio_url or None

    def summary_key(self, summary: EpisodeSummary) -> Optional[str]:
        return summary.audio_url or None


MATCHERS: Dict[str, type] = {
    TitleMatcher.name: TitleMatcher,
    AudioUrlMatcher.name: AudioUrlMatcher,
}


def get_matcher(name: str) -> EpisodeMatcher:
    """Get a matcher instance by name."""
    try:
        return MATCHERS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown matcher '{name}'. "
            f"Choose one of: {', '.join(sorted(MATCHERS))}"
        ) from None


class SummaryRepository:
    """Repository for the podcast summary store.

    The store is a single JSON document of the form
    ``{"podcasts": {<podcast id>: {...config, "episodes": [...]}}}``.
    It is read once with :meth:`load` and rewritten wholesale by
    :meth:`save`.
    """

    def __init__(
        self,
        storage: Storage,
        path: str,
        matcher: Optional[EpisodeMatcher] = None,
    ):
        """Initialize with storage instance and store file path."""
        self.storage = storage
        self.path = path
        self.matcher = matcher or TitleMatcher()
        self.records: Dict[str, PodcastRecord] = {}
        self.logger = logging.getLogger(__name__)

    def load(self) -> Dict[str, PodcastRecord]:
        """Load the store from disk, starting empty if it doesn't exist."""
        data = self.storage.read_json(self.path)
        if data is None:
            self.logger.info("No existing store at %s, starting fresh", self.path)
            self.records = {}
            return self.records

        podcasts = data.get("podcasts") or {}
        try:
            self.records = {
                podcast_id: PodcastRecord.from_dict(entry)
                for podcast_id, entry in podcasts.items()
            }
        except (AttributeError, TypeError, ValueError) as e:
            raise StoreError(
                f"Malformed podcast entry in {self.path}: {e}", self.path
            ) from e
        self.logger.info(
            "Loaded %d stored episodes across %d podcasts from %s",
            self.total_episodes(),
            len(self.records),
            self.path,
        )
        return self.records

    def save(self) -> None:
        """Write the whole store to disk, overwriting the previous file."""
        self.storage.write_json(self.path, self.to_json())
        self.logger.debug("Saved store to %s", self.path)

    def to_json(self) -> dict:
        """Serialize the in-memory store."""
        return {
            "podcasts": {
                podcast_id: record.to_json()
                for podcast_id, record in self.records.items()
            }
        }

    def get_episodes(self, podcast_id: str) -> List[EpisodeSummary]:
        """Get stored summaries for a podcast, empty if none."""
        record = self.records.get(podcast_id)
        return list(record.episodes) if record else []

    def get_existing_keys(self, podcast_id: str) -> Set[str]:
        """Extract match keys of stored summaries.

        An empty title is a valid key, so untitled episodes are only
        summarized once.
        """
        keys = set()
        for summary in self.get_episodes(podcast_id):
            key = self.matcher.summary_key(summary)
            if key is not None:
                keys.add(key)
        return keys

    def is_processed(
        self,
        podcast_id: str,
        item: EpisodeItem,
        existing_keys: Optional[Set[str]] = None,
    ) -> bool:
        """Check whether a feed item matches a stored summary."""
        if existing_keys is None:
            existing_keys = self.get_existing_keys(podcast_id)
        key = self.matcher.item_key(item)
        return key is not None and key in existing_keys

    def add_summaries(
        self, podcast: PodcastConfig, summaries: List[EpisodeSummary]
    ) -> PodcastRecord:
        """Append new summaries, creating the podcast record if missing."""
        record = self.records.get(podcast.id)
        if record is None:
            record = PodcastRecord(podcast=podcast)
            self.records[podcast.id] = record

        record.episodes.extend(summaries)
        return record

    def total_episodes(self) -> int:
        """Count stored summaries across all podcasts."""
        return sum(len(record.episodes) for record in self.records.values())
