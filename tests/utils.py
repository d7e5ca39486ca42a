"""
Test helpers for building feed items, podcasts and API responses.
"""

import json
from typing import Any, Dict, Optional
from unittest.mock import Mock

from podcast_digest.models import EpisodeItem, PodcastConfig

LONG_TEXT = " ".join(["Insightful discussion about building products."] * 40)

SAMPLE_SUMMARY: Dict[str, Any] = {
    "one_liner": "Small teams win by shipping weekly.",
    "estimated_read_time": "15 min",
    "key_insights": [
        {
            "category": "Product Strategy",
            "title": "Ship weekly",
            "content": "Teams that ship weekly learn faster.",
            "data_highlights": ["3x faster iteration"],
            "quote": "Speed is a habit.",
            "timestamp": "12:00",
        }
    ],
    "actionable_takeaways": ["Cut your release cycle in half"],
    "notable_quotes": [
        {"quote": "Speed is a habit.", "speaker": "Guest", "timestamp": "12:00"}
    ],
    "topics_discussed": ["Shipping"],
    "who_should_listen": "Product managers",
}


def create_test_podcast(**overrides: Any) -> PodcastConfig:
    """Create a PodcastConfig with default test values."""
    defaults: Dict[str, Any] = {
        "id": "test-podcast",
        "name": "Test Podcast",
        "description": "A podcast for tests",
        "rss_url": "http://test.com/rss",
        "website": "http://test.com",
    }
    defaults.update(overrides)
    return PodcastConfig(**defaults)


def create_test_item(
    title: str = "Test Episode",
    text: Optional[str] = LONG_TEXT,
    **overrides: Any,
) -> EpisodeItem:
    """Create an EpisodeItem whose content_encoded field holds ``text``."""
    defaults: Dict[str, Any] = {
        "title": title,
        "published": "Mon, 01 Jan 2024 00:00:00 GMT",
        "audio_url": f"http://test.com/{title.replace(' ', '_')}.mp3",
        "duration": "01:00:00",
        "text_fields": {"content_encoded": f"<p>{text}</p>"} if text else {},
    }
    defaults.update(overrides)
    return EpisodeItem(**defaults)


def create_api_response(text: str) -> Mock:
    """Create a Messages API response with a single text block."""
    response = Mock()
    response.content = [Mock(text=text)]
    return response


def create_mock_client(summary: Optional[Dict[str, Any]] = None) -> Mock:
    """Create an Anthropic client mock returning ``summary`` as JSON."""
    client = Mock()
    payload = json.dumps(summary or SAMPLE_SUMMARY)
    client.messages.create.return_value = create_api_response(
        f"```json\n{payload}\n```"
    )
    return client
