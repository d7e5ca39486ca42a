"""
Configuration constants and environment-based settings.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .models import StoreFiles

MODEL = "claude-sonnet-4-20250514"
MAX_OUTPUT_TOKENS = 4000
# Single truncation budget for every summarization entry point
MAX_TRANSCRIPT_CHARS = 100_000
DEFAULT_EPISODE_LIMIT = 1
DEFAULT_DATA_DIR = "./data"
DEFAULT_STORE_PATH = os.path.join(DEFAULT_DATA_DIR, StoreFiles.SUMMARIES)


class EnvVars:
    """Environment variable names read by Settings."""

    API_KEY = "ANTHROPIC_API_KEY"
    STORE = "PODCAST_DIGEST_STORE"
    MODEL = "PODCAST_DIGEST_MODEL"
    EPISODE_LIMIT = "PODCAST_DIGEST_EPISODE_LIMIT"


def validate_episode_limit(limit: int, source: str = "episode limit") -> int:
    """Check that at least one episode may be summarized per podcast."""
    if limit < 1:
        raise ValueError(f"{source} must be at least 1, got {limit}")
    return limit


@dataclass
class Settings:
    """Runtime settings for a digest run."""

    store_path: str = DEFAULT_STORE_PATH
    model: str = MODEL
    episode_limit: int = DEFAULT_EPISODE_LIMIT
    match_by: str = "title"
    api_key: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from environment variables.

        The API key is passed through as-is; a missing key is reported by
        the API on the first request.
        """
        env = os.environ if environ is None else environ

        limit_value = env.get(EnvVars.EPISODE_LIMIT)
        try:
            episode_limit = (
                int(limit_value) if limit_value else DEFAULT_EPISODE_LIMIT
            )
        except ValueError:
            raise ValueError(
                f"{EnvVars.EPISODE_LIMIT} must be an integer, "
                f"got '{limit_value}'"
            ) from None
        validate_episode_limit(episode_limit, EnvVars.EPISODE_LIMIT)

        return cls(
            store_path=env.get(EnvVars.STORE) or DEFAULT_STORE_PATH,
            model=env.get(EnvVars.MODEL) or MODEL,
            episode_limit=episode_limit,
            api_key=env.get(EnvVars.API_KEY) or None,
        )
