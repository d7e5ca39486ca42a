"""
Episode summarization with the Anthropic Messages API.
"""

import logging
from typing import Any, Dict

import anthropic

from .config import MAX_OUTPUT_TOKENS, MAX_TRANSCRIPT_CHARS, MODEL
from .errors import SummarizationError
from .models import EpisodeItem
from .response_parser import parse_json_response

PROMPT_TEMPLATE = """You are analyzing a podcast transcript to extract the most valuable insights for busy professionals.

Context:
- Podcast: {podcast_name}
- Episode: {episode_title}
- Published: {published}

Read this transcript and identify:

1. KEY INSIGHTS (the "aha" moments):
   - Non-obvious ideas that shift thinking
   - Contrarian takes that challenge assumptions
   - Frameworks and mental models
   - Stories that illustrate principles
   - When data/metrics are mentioned, include them naturally to support the insight

2. KEY DATA POINTS & METRICS (if present):
   - Revenue numbers, growth rates, conversion rates
   - Specific dollar amounts, percentages, timeframes
   - User/customer counts and metrics
   - Performance data (CAC, LTV, retention, etc.)
   - For each data point: include the number, context, and why it matters

3. FRAMEWORKS & MENTAL MODELS (if present):
   - Named frameworks or heuristics
   - Decision criteria with specific thresholds
   - Repeatable processes

4. ACTIONABLE TAKEAWAYS:
   - What could someone actually do differently?
   - Be specific when the guest is specific

5. MEMORABLE QUOTES:
   - Lines that capture the essence
   - Include data if it's part of a punchy quote

WRITING STYLE:
- Write like a thoughtful journalist, not a transcription bot
- When guest shares numbers, weave them into the narrative naturally
- If an episode is data-heavy, let that show. If it's philosophy-heavy, that's fine too
- Don't force metrics where they don't exist
- Avoid "the guest mentioned that..." - just tell the story

AVOID:
- Chronological play-by-play ("First they discussed X, then Y...")
- Forcing data points into every insight
- Generic statements ("it's important to...")
- Over-systematizing organic conversations

Think: "What would I tell a smart friend about this episode over coffee?"

Estimated read time: 10-20 minutes depending on density of ideas.

Respond in JSON format with this structure:
{{
  "one_liner": "Single sentence capturing the core insight",
  "estimated_read_time": "15 min",
  "key_insights": [
    {{
      "category": "Product Strategy",
      "title": "Insight title",
      "content": "2-4 paragraphs weaving narrative naturally",
      "data_highlights": ["$0→$100M ARR", "67% viral growth"],
      "quote": "Optional memorable quote",
      "timestamp": "18:30"
    }}
  ],
  "actionable_takeaways": [
    "Specific, concrete advice"
  ],
  "notable_quotes": [
    {{
      "quote": "The quote text",
      "speaker": "Guest name",
      "timestamp": "34:20"
    }}
  ],
  "topics_discussed": ["Product-Market Fit", "Fundraising"],
  "who_should_listen": "Target audience description"
}}

Transcript:
{transcript}"""


class Summarizer:
    """Generates structured episode summaries from transcripts."""

    def __init__(
        self,
        client: anthropic.Anthropic,
        model: str = MODEL,
        max_output_tokens: int = MAX_OUTPUT_TOKENS,
        max_transcript_chars: int = MAX_TRANSCRIPT_CHARS,
    ):
        """Initialize with an API client and generation limits."""
        self.client = client
        self.model = model
        self.max_output_tokens = max_output_tokens
        self.max_transcript_chars = max_transcript_chars
        self.logger = logging.getLogger(__name__)

    def build_prompt(
        self, podcast_name: str, item: EpisodeItem, transcript: str
    ) -> str:
        """Render the summary prompt for one episode."""
        return PROMPT_TEMPLATE.format(
            podcast_name=podcast_name,
            episode_title=item.title,
            published=item.published,
            transcript=transcript[: self.max_transcript_chars],
        )

    def summarize(
        self, podcast_name: str, item: EpisodeItem, transcript: str
    ) -> Dict[str, Any]:
        """Summarize one episode.

        Args:
            podcast_name: Display name of the podcast
            item: Feed item being summarized
            transcript: Extracted transcript text (truncated here)

        Returns:
            Parsed summary object

        Raises:
            SummarizationError: If the API call fails or the response
                isn't a JSON object.
        """
        prompt = self.build_prompt(podcast_name, item, transcript)

        try:
            response = self.client.messages.create(
                model=self.model,
                max_tokens=self.max_output_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIError as e:
            status_code = getattr(e, "status_code", None)
            raise SummarizationError(
                f"Anthropic API error: {e}", status_code=status_code
            ) from e

        response_text = self._first_text_block(response)
        if not response_text:
            raise SummarizationError("Empty response from Anthropic API")

        self.logger.debug(
            "Received %d chars of summary for '%s'", len(response_text), item.title
        )
        return parse_json_response(response_text)

    def _first_text_block(self, response: Any) -> str:
        """Text of the first content block, empty if there is none."""
        if not response.content:
            return ""
        first_block = response.content[0]
        return getattr(first_block, "text", "") or ""
