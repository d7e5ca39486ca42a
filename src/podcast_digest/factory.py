"""
Factory functions for creating DigestManager instances.

This module wires the service handles (HTTP session, API client, store)
once at process start.
"""

import logging
from typing import Optional

import anthropic
import requests

from .config import Settings
from .feeds import FeedClient
from .manager import DigestManager
from .repository import SummaryRepository, get_matcher
from .storage import Storage
from .summarizer import Summarizer


def create_anthropic_client(api_key: Optional[str] = None) -> anthropic.Anthropic:
    """Create the generation API client.

    SDK retries are disabled: a failed call is reported for its episode
    and the run moves on.
    """
    return anthropic.Anthropic(api_key=api_key, max_retries=0)


def create_manager(
    settings: Settings,
    client: Optional[anthropic.Anthropic] = None,
    session: Optional[requests.Session] = None,
) -> DigestManager:
    """Create DigestManager with dependencies built from settings."""
    logger = logging.getLogger(__name__)

    storage = Storage()
    repository = SummaryRepository(
        storage, settings.store_path, get_matcher(settings.match_by)
    )
    summarizer = Summarizer(
        client or create_anthropic_client(settings.api_key),
        model=settings.model,
    )
    feed_client = FeedClient(session=session)

    logger.debug(
        "Created DigestManager (store=%s, model=%s, match_by=%s)",
        settings.store_path,
        settings.model,
        settings.match_by,
    )
    return DigestManager(feed_client, repository, summarizer)
