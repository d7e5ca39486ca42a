"""
Data models for podcast configuration, feed items and stored summaries.
"""

from __future__ import annotations

import time
from dataclasses import asdict, dataclass, field, fields
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


class StoreFiles:
    """Standard store file names."""

    SUMMARIES = "summaries.json"


@dataclass(frozen=True)
class PodcastConfig:
    """Static description of a podcast to follow."""

    id: str
    name: str
    rss_url: str
    description: str = ""
    website: str = ""

    def __post_init__(self) -> None:
        if not self.id or not self.rss_url:
            raise ValueError("id and rss_url are required")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PodcastConfig":
        """Create PodcastConfig from dictionary, accepting legacy keys."""
        data = data.copy()
        data.pop("episodes", None)

        # Older stores spread the camelCase config straight into the record
        if "rssUrl" in data and "rss_url" not in data:
            data["rss_url"] = data.pop("rssUrl")
        data.pop("rssUrl", None)

        # Keys this version doesn't know stay on the stored record
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_json(self) -> dict[str, Any]:
        """Convert config to JSON-serializable dictionary."""
        return asdict(self)


@dataclass
class EpisodeItem:
    """A single episode as read from a feed.

    Only lives for the duration of one run. ``text_fields`` maps the
    candidate field names used for transcript extraction to their raw
    (possibly HTML) text.
    """

    title: str
    published: str = ""
    audio_url: str = ""
    duration: str = ""
    text_fields: Dict[str, str] = field(default_factory=dict)

    def get_text(self, field_name: str) -> Optional[str]:
        """Get a raw text field, None when missing or empty."""
        return self.text_fields.get(field_name) or None


def _utc_timestamp() -> str:
    """ISO 8601 UTC timestamp with millisecond precision and Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class EpisodeSummary:  # pylint: disable=too-many-instance-attributes
    """Persisted summary record for one episode.

    Created once when an episode is summarized and never changed
    afterwards.
    """

    id: str
    podcast_id: str
    podcast_name: str
    title: str
    published_date: str
    audio_url: str
    duration: str
    summary: Dict[str, Any]
    processed_at: str
    # Entry as read from the store, written back unchanged
    source: Optional[Dict[str, Any]] = field(
        default=None, compare=False, repr=False
    )

    @classmethod
    def create(
        cls,
        podcast: PodcastConfig,
        item: EpisodeItem,
        summary: Dict[str, Any],
    ) -> "EpisodeSummary":
        """Build a new record for a freshly summarized feed item."""
        return cls(
            id=f"{podcast.id}-{int(time.time() * 1000)}",
            podcast_id=podcast.id,
            podcast_name=podcast.name,
            title=item.title,
            published_date=item.published,
            audio_url=item.audio_url,
            duration=item.duration,
            summary=summary,
            processed_at=_utc_timestamp(),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EpisodeSummary":
        """Create EpisodeSummary from dictionary.

        Missing optional fields (older records may lack duration or
        audio URL) default to empty values. The entry itself is kept so
        that saving writes it back exactly as it was read.
        """
        return cls(
            id=data.get("id", ""),
            podcast_id=data.get("podcast_id", ""),
            podcast_name=data.get("podcast_name", ""),
            title=data.get("title", ""),
            published_date=data.get("published_date") or "",
            audio_url=data.get("audio_url") or "",
            duration=data.get("duration") or "",
            summary=data.get("summary") or {},
            processed_at=data.get("processed_at", ""),
            source=dict(data),
        )

    def to_json(self) -> dict[str, Any]:
        """Convert summary to JSON-serializable dictionary."""
        if self.source is not None:
            return dict(self.source)
        data = asdict(self)
        data.pop("source")
        return data


@dataclass
class PodcastRecord:
    """A podcast entry in the store: its config plus stored summaries."""

    podcast: PodcastConfig
    episodes: List[EpisodeSummary] = field(default_factory=list)
    # Config keys as read from the store, legacy and unknown ones included
    source: Optional[Dict[str, Any]] = field(
        default=None, compare=False, repr=False
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PodcastRecord":
        """Create PodcastRecord from a store entry."""
        episodes_data = data.get("episodes", [])
        episodes = [EpisodeSummary.from_dict(ep) for ep in episodes_data]
        source = {key: value for key, value in data.items() if key != "episodes"}
        return cls(
            podcast=PodcastConfig.from_dict(data),
            episodes=episodes,
            source=source,
        )

    def to_json(self) -> dict[str, Any]:
        """Flatten config and episodes into a single store entry."""
        if self.source is not None:
            data = dict(self.source)
        else:
            data = self.podcast.to_json()
        data["episodes"] = [episode.to_json() for episode in self.episodes]
        return data
