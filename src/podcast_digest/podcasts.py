"""
Podcasts followed by the digest.
"""

from typing import Iterable, List, Optional

from .models import PodcastConfig

PODCASTS: List[PodcastConfig] = [
    PodcastConfig(
        id="dwarkesh-patel",
        name="Dwarkesh Podcast",
        description="Deeply researched interviews on technology, AI, and history",
        rss_url="https://api.substack.com/feed/podcast/69345.rss",
        website="https://www.dwarkesh.com/",
    ),
    PodcastConfig(
        id="lennys-podcast",
        name="Lenny's Podcast",
        description="Product, growth, and career advice from world-class leaders",
        rss_url="https://api.substack.com/feed/podcast/10845.rss",
        website="https://www.lennysnewsletter.com/podcast",
    ),
    PodcastConfig(
        id="founders",
        name="Founders",
        description="Learn from history's greatest entrepreneurs with David Senra",
        rss_url="https://rss.art19.com/founders",
        website="https://www.founderspodcast.com",
    ),
    PodcastConfig(
        id="a16z-podcast",
        name="a16z Podcast",
        description="Tech and culture trends from Andreessen Horowitz",
        rss_url="https://feeds.simplecast.com/AuWJKpna",
        website="https://a16z.com/podcasts/",
    ),
]


def select_podcasts(
    podcast_ids: Optional[Iterable[str]] = None,
    podcasts: Optional[List[PodcastConfig]] = None,
) -> List[PodcastConfig]:
    """Filter podcasts by id, keeping configuration order.

    Raises:
        ValueError: If an id isn't configured.
    """
    podcasts = PODCASTS if podcasts is None else podcasts
    if not podcast_ids:
        return list(podcasts)

    wanted = set(podcast_ids)
    unknown = wanted - {podcast.id for podcast in podcasts}
    if unknown:
        raise ValueError(f"Unknown podcast id(s): {', '.join(sorted(unknown))}")
    return [podcast for podcast in podcasts if podcast.id in wanted]
