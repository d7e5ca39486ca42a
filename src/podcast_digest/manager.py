"""
Main orchestration class for digest runs.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from tqdm import tqdm

from .config import DEFAULT_EPISODE_LIMIT
from .errors import StoreError
from .feeds import FeedClient
from .models import EpisodeItem, PodcastConfig
from .processor import EpisodeProcessor, ProcessingSummary
from .repository import SummaryRepository
from .summarizer import Summarizer
from .transcript import describe_text_fields, extract_transcript


@dataclass
class PodcastOutcome:
    """Result of processing one podcast in a run."""

    podcast_id: str
    podcast_name: str
    summary: Optional[ProcessingSummary] = None
    error: Optional[str] = None

    @property
    def new_episodes(self) -> int:
        """Number of summaries added for this podcast."""
        return self.summary.processed if self.summary else 0


@dataclass
class RunReport:
    """Result of a full run across podcasts."""

    outcomes: List[PodcastOutcome] = field(default_factory=list)
    total_episodes: int = 0

    @property
    def new_episodes(self) -> int:
        """Summaries added across all podcasts."""
        return sum(outcome.new_episodes for outcome in self.outcomes)

    @property
    def failed_podcasts(self) -> List[PodcastOutcome]:
        """Podcasts whose feed could not be processed."""
        return [outcome for outcome in self.outcomes if outcome.error]


@dataclass
class PreviewResult:
    """Result of summarizing the latest episode without storing it."""

    item: EpisodeItem
    transcript_chars: int = 0
    summary: Optional[Dict[str, Any]] = None
    field_lengths: Dict[str, int] = field(default_factory=dict)


class DigestManager:
    """
    Orchestrates feed fetching, episode summarization and store
    checkpoints using dependency injection.
    """

    def __init__(
        self,
        feed_client: FeedClient,
        repository: SummaryRepository,
        summarizer: Summarizer,
        processor: Optional[EpisodeProcessor] = None,
    ):
        """Initialize with dependencies."""
        self.logger = logging.getLogger(__name__)
        self.feed_client = feed_client
        self.repository = repository
        self.summarizer = summarizer
        self.processor = processor or EpisodeProcessor(repository, summarizer)

    def run(
        self,
        podcasts: List[PodcastConfig],
        limit: int = DEFAULT_EPISODE_LIMIT,
        show_progress: bool = False,
    ) -> RunReport:
        """Process every podcast, saving the store after each one.

        Feed and processing errors are scoped to their podcast. Store
        errors propagate and end the run.
        """
        self.repository.load()
        report = RunReport()

        if show_progress:
            with tqdm(
                total=len(podcasts), unit="podcast", desc="Podcasts"
            ) as progress_bar:
                for podcast in podcasts:
                    progress_bar.set_description(podcast.name[:30])
                    report.outcomes.append(self.run_podcast(podcast, limit))
                    progress_bar.update(1)
                progress_bar.set_description("Digest Complete!")
        else:
            for podcast in podcasts:
                report.outcomes.append(self.run_podcast(podcast, limit))

        report.total_episodes = self.repository.total_episodes()
        self.logger.debug(
            "Run complete, %d episodes stored", report.total_episodes
        )
        return report

    def run_podcast(
        self, podcast: PodcastConfig, limit: int = DEFAULT_EPISODE_LIMIT
    ) -> PodcastOutcome:
        """Process one podcast and checkpoint the store if anything is new."""
        outcome = PodcastOutcome(podcast_id=podcast.id, podcast_name=podcast.name)
        self.logger.info("Fetching RSS for: %s", podcast.name)

        try:
            items = self.feed_client.fetch(podcast.rss_url)
            outcome.summary = self.processor.process_items(podcast, items, limit)
        except StoreError:
            raise
        except Exception as e:  # pylint: disable=broad-except
            outcome.error = str(e)
            self.logger.error("Error processing %s: %s", podcast.name, e)
            return outcome

        summaries = outcome.summary.summaries
        if not summaries:
            self.logger.info("No new episodes to process for %s", podcast.name)
            return outcome

        self.repository.add_summaries(podcast, summaries)
        self.repository.save()
        self.logger.info(
            "Saved %d new summary(ies) for %s", len(summaries), podcast.name
        )
        return outcome

    def preview(self, podcast: PodcastConfig) -> Optional[PreviewResult]:
        """Summarize the latest episode of a podcast without storing it.

        Returns:
            None if the feed has no items.

        Raises:
            FeedError: If the feed can't be fetched or parsed.
            SummarizationError: If summarization fails.
        """
        items = self.feed_client.fetch(podcast.rss_url)
        if not items:
            self.logger.warning("Feed for %s has no episodes", podcast.name)
            return None

        latest = items[0]
        self.logger.info("Latest episode: \"%s\"", latest.title)

        transcript = extract_transcript(latest)
        if not transcript:
            self.logger.warning("No transcript found in RSS feed")
            return PreviewResult(
                item=latest, field_lengths=describe_text_fields(latest)
            )

        self.logger.info("Transcript found! (%d characters)", len(transcript))
        summary = self.summarizer.summarize(podcast.name, latest, transcript)
        return PreviewResult(
            item=latest, transcript_chars=len(transcript), summary=summary
        )
