"""
Tests for the Summarizer.
"""

import json
import unittest
from unittest.mock import Mock

import anthropic
import httpx

from podcast_digest.config import MAX_OUTPUT_TOKENS, MAX_TRANSCRIPT_CHARS, MODEL
from podcast_digest.errors import ResponseParseError, SummarizationError
from podcast_digest.summarizer import Summarizer

from tests.utils import (
    SAMPLE_SUMMARY,
    create_api_response,
    create_mock_client,
    create_test_item,
)


class TestSummarizer(unittest.TestCase):
    """Test suite for Summarizer."""

    def test_summarize_parses_fenced_response(self) -> None:
        """Test a successful summary call."""
        client = create_mock_client()
        summarizer = Summarizer(client)

        result = summarizer.summarize("Test Podcast", create_test_item(), "text")

        self.assertEqual(result, SAMPLE_SUMMARY)

    def test_request_parameters(self) -> None:
        """Test model, output budget and single user message."""
        client = create_mock_client()
        item = create_test_item(title="Big Ideas")

        Summarizer(client).summarize("Test Podcast", item, "transcript body")

        client.messages.create.assert_called_once()
        kwargs = client.messages.create.call_args.kwargs
        self.assertEqual(kwargs["model"], MODEL)
        self.assertEqual(kwargs["max_tokens"], MAX_OUTPUT_TOKENS)
        self.assertEqual(len(kwargs["messages"]), 1)
        self.assertEqual(kwargs["messages"][0]["role"], "user")
        prompt = kwargs["messages"][0]["content"]
        self.assertIn("Podcast: Test Podcast", prompt)
        self.assertIn("Episode: Big Ideas", prompt)
        self.assertIn('"one_liner"', prompt)
        self.assertTrue(prompt.endswith("transcript body"))

    def test_transcript_truncated(self) -> None:
        """Test that the transcript is cut to the character budget."""
        summarizer = Summarizer(Mock())
        transcript = "a" * MAX_TRANSCRIPT_CHARS + "TAIL"

        prompt = summarizer.build_prompt("P", create_test_item(), transcript)

        self.assertNotIn("TAIL", prompt)
        self.assertTrue(prompt.endswith("a" * 100))

    def test_custom_truncation(self) -> None:
        """Test a smaller character budget."""
        summarizer = Summarizer(Mock(), max_transcript_chars=10)

        prompt = summarizer.build_prompt("P", create_test_item(), "0123456789XYZ")

        self.assertTrue(prompt.endswith("Transcript:\n0123456789"))

    def test_only_first_text_block_used(self) -> None:
        """Test that later content blocks are ignored."""
        client = Mock()
        response = create_api_response(json.dumps({"one_liner": "first"}))
        response.content.append(Mock(text='{"one_liner": "second"}'))
        client.messages.create.return_value = response

        result = Summarizer(client).summarize("P", create_test_item(), "t")

        self.assertEqual(result, {"one_liner": "first"})

    def test_api_error_wrapped(self) -> None:
        """Test that API errors become SummarizationError."""
        client = Mock()
        client.messages.create.side_effect = anthropic.APIConnectionError(
            request=httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        )

        with self.assertRaises(SummarizationError):
            Summarizer(client).summarize("P", create_test_item(), "t")

    def test_empty_response(self) -> None:
        """Test a response without content blocks."""
        client = Mock()
        client.messages.create.return_value = Mock(content=[])

        with self.assertRaises(SummarizationError):
            Summarizer(client).summarize("P", create_test_item(), "t")

    def test_malformed_json(self) -> None:
        """Test a response that isn't JSON."""
        client = Mock()
        client.messages.create.return_value = create_api_response(
            "Sorry, I can't summarize this."
        )

        with self.assertRaises(ResponseParseError):
            Summarizer(client).summarize("P", create_test_item(), "t")


if __name__ == "__main__":
    unittest.main()
