"""
Parsing of JSON payloads out of model responses.
"""

import json
import re
from typing import Any, Dict

from .errors import ResponseParseError

# First fenced block, optionally tagged ``json``. An unterminated fence
# runs to the end of the text.
_FENCE_PATTERN = re.compile(
    r"```[ \t]*(?:json)?[ \t]*\r?\n?(.*?)(?:```|\Z)", re.DOTALL | re.IGNORECASE
)


def extract_json_text(text: str) -> str:
    """Get the JSON candidate text from a response.

    Returns the content of the first fenced code block if there is one,
    otherwise the whole response, stripped.
    """
    match = _FENCE_PATTERN.search(text)
    if match:
        return match.group(1).strip()
    return text.strip()


def parse_json_response(text: str) -> Dict[str, Any]:
    """Parse a model response into a JSON object.

    Raises:
        ResponseParseError: If no JSON object can be parsed.
    """
    candidate = extract_json_text(text or "")
    if not candidate:
        raise ResponseParseError("Empty JSON payload in response", text)

    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise ResponseParseError(f"Invalid JSON in response: {e}", text) from e

    if not isinstance(data, dict):
        raise ResponseParseError(
            f"Expected a JSON object, got {type(data).__name__}", text
        )
    return data
