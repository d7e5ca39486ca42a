"""
Tests for settings, podcast selection and model serialization.
"""

import unittest

from podcast_digest.config import (
    DEFAULT_EPISODE_LIMIT,
    DEFAULT_STORE_PATH,
    MODEL,
    Settings,
)
from podcast_digest.models import PodcastConfig
from podcast_digest.podcasts import PODCASTS, select_podcasts


class TestSettings(unittest.TestCase):
    """Test suite for Settings.from_env."""

    def test_defaults(self) -> None:
        """Test settings with an empty environment."""
        settings = Settings.from_env({})

        self.assertEqual(settings.store_path, DEFAULT_STORE_PATH)
        self.assertEqual(settings.model, MODEL)
        self.assertEqual(settings.episode_limit, DEFAULT_EPISODE_LIMIT)
        self.assertEqual(settings.match_by, "title")
        self.assertIsNone(settings.api_key)

    def test_environment_values(self) -> None:
        """Test settings read from environment variables."""
        settings = Settings.from_env(
            {
                "ANTHROPIC_API_KEY": "sk-test",
                "PODCAST_DIGEST_STORE": "/tmp/store.json",
                "PODCAST_DIGEST_MODEL": "claude-test",
                "PODCAST_DIGEST_EPISODE_LIMIT": "3",
            }
        )

        self.assertEqual(settings.api_key, "sk-test")
        self.assertEqual(settings.store_path, "/tmp/store.json")
        self.assertEqual(settings.model, "claude-test")
        self.assertEqual(settings.episode_limit, 3)

    def test_invalid_limit(self) -> None:
        """Test a non-numeric episode limit."""
        with self.assertRaises(ValueError):
            Settings.from_env({"PODCAST_DIGEST_EPISODE_LIMIT": "many"})

    def test_limit_below_one(self) -> None:
        """Test that zero and negative episode limits are rejected."""
        for value in ("0", "-1"):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    Settings.from_env({"PODCAST_DIGEST_EPISODE_LIMIT": value})


class TestPodcasts(unittest.TestCase):
    """Test suite for the configured podcast list."""

    def test_configured_ids_are_unique(self) -> None:
        """Test that podcast ids don't collide in the store."""
        ids = [podcast.id for podcast in PODCASTS]
        self.assertEqual(len(ids), len(set(ids)))

    def test_select_all(self) -> None:
        """Test that no filter selects every podcast."""
        self.assertEqual(select_podcasts(), PODCASTS)

    def test_select_keeps_config_order(self) -> None:
        """Test filtering by id."""
        selected = select_podcasts(["a16z-podcast", "dwarkesh-patel"])

        self.assertEqual(
            [podcast.id for podcast in selected],
            ["dwarkesh-patel", "a16z-podcast"],
        )

    def test_select_unknown(self) -> None:
        """Test filtering by an unknown id."""
        with self.assertRaises(ValueError):
            select_podcasts(["nope"])


class TestPodcastConfig(unittest.TestCase):
    """Test suite for PodcastConfig."""

    def test_required_fields(self) -> None:
        """Test that id and rss_url are required."""
        with self.assertRaises(ValueError):
            PodcastConfig(id="", name="X", rss_url="http://x.test/rss")

    def test_from_dict_legacy_key(self) -> None:
        """Test conversion of the camelCase rssUrl key."""
        config = PodcastConfig.from_dict(
            {"id": "x", "name": "X", "rssUrl": "http://x.test/rss", "episodes": []}
        )

        self.assertEqual(config.rss_url, "http://x.test/rss")
        self.assertEqual(config.to_json()["rss_url"], "http://x.test/rss")


if __name__ == "__main__":
    unittest.main()
