"""
Per-podcast processing of new feed items.

This module provides the bounded catch-up loop: walk the feed in order,
skip what is already stored or has no transcript, and summarize until the
limit of new episodes is reached.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from .config import DEFAULT_EPISODE_LIMIT
from .models import EpisodeItem, EpisodeSummary, PodcastConfig
from .repository import SummaryRepository
from .summarizer import Summarizer
from .transcript import extract_transcript


@dataclass
class ProcessingSummary:
    """Outcome of processing one podcast's feed items."""

    processed: int = 0
    skipped_existing: int = 0
    skipped_no_transcript: int = 0
    failed: int = 0
    summaries: List[EpisodeSummary] = field(default_factory=list)


class EpisodeProcessor:
    """Service for summarizing new episodes of a podcast."""

    def __init__(
        self, repository: SummaryRepository, summarizer: Summarizer
    ):
        """Initialize with repository and summarizer."""
        self.repository = repository
        self.summarizer = summarizer
        self.logger = logging.getLogger(__name__)

    def process_items(
        self,
        podcast: PodcastConfig,
        items: List[EpisodeItem],
        limit: int = DEFAULT_EPISODE_LIMIT,
    ) -> ProcessingSummary:
        """Summarize up to ``limit`` new items, in feed order.

        Failed summaries are logged and don't count toward the limit.
        Items after the limit is reached are not looked at.
        """
        result = ProcessingSummary()
        existing_keys = self.repository.get_existing_keys(podcast.id)

        for item in items:
            if result.processed >= limit:
                break

            if self.repository.is_processed(podcast.id, item, existing_keys):
                result.skipped_existing += 1
                self.logger.info(
                    "Skipping (already processed): %s", item.title
                )
                continue

            self.logger.info(
                "Processing episode %d/%d: %s",
                result.processed + 1,
                limit,
                item.title,
            )

            transcript = extract_transcript(item)
            if not transcript:
                result.skipped_no_transcript += 1
                self.logger.info("No transcript found, skipping...")
                continue

            self.logger.info("Transcript found (%d chars)", len(transcript))
            self.logger.info("Generating summary...")

            try:
                summary = self.summarizer.summarize(
                    podcast.name, item, transcript
                )
            except Exception as e:  # pylint: disable=broad-except
                result.failed += 1
                self.logger.error(
                    "Error generating summary for '%s': %s", item.title, e
                )
                continue

            result.summaries.append(
                EpisodeSummary.create(podcast, item, summary)
            )
            result.processed += 1

            # Later duplicates in the same feed count as already processed
            key = self.repository.matcher.item_key(item)
            if key is not None:
                existing_keys.add(key)

            self.logger.info(
                "Summary generated! (%s)",
                summary.get("estimated_read_time", "unknown read time"),
            )

        return result
