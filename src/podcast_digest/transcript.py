"""
Heuristic transcript extraction from feed item text fields.

Feeds rarely ship a real transcript. Some publishers put the full text in
the show notes, so the longest-lived descriptive fields are scanned in a
fixed order and the first one that is still long after removing markup is
used as the transcript.
"""

import re
from typing import Dict, Optional, Tuple

from .models import EpisodeItem
from .parser import TextField

MIN_TRANSCRIPT_CHARS = 1000

CANDIDATE_FIELDS: Tuple[str, ...] = (
    TextField.CONTENT_ENCODED,
    TextField.CONTENT,
    TextField.DESCRIPTION,
    TextField.ITUNES_SUMMARY,
)

_TAG_PATTERN = re.compile(r"<[^>]*>")


def strip_html(text: str) -> str:
    """Remove HTML-tag-like substrings and trim whitespace."""
    return _TAG_PATTERN.sub("", text).strip()


def extract_transcript(
    item: EpisodeItem, min_chars: int = MIN_TRANSCRIPT_CHARS
) -> Optional[str]:
    """Get the first candidate field longer than ``min_chars``.

    A field is only cleaned when its raw length already exceeds the
    threshold, and is accepted when the cleaned text still does.

    Returns:
        Cleaned text, or None if no candidate qualifies.
    """
    for field_name in CANDIDATE_FIELDS:
        raw = item.get_text(field_name)
        if not raw or len(raw) <= min_chars:
            continue

        cleaned = strip_html(raw)
        if len(cleaned) > min_chars:
            return cleaned

    return None


def describe_text_fields(item: EpisodeItem) -> Dict[str, int]:
    """Raw length of each candidate field, 0 when missing."""
    return {
        field_name: len(item.get_text(field_name) or "")
        for field_name in CANDIDATE_FIELDS
    }
