"""Delegated scoring via Claude.

Sends an issue's normalized fields to the Anthropic Messages API and parses
the AI fields out of the JSON object in the reply. Non-deterministic and
network-bound; only used when SCORING_ENGINE=anthropic.
"""

import logging
from typing import Any

import anthropic

from jira_ai_fields.config.field_mapping import SCORED_FIELD_NAMES
from jira_ai_fields.config.settings import Settings
from jira_ai_fields.core.exceptions import ConfigurationError, ScoringResponseError
from jira_ai_fields.services.jira.types import JiraIssue
from jira_ai_fields.services.scoring.base import IssueScorer
from jira_ai_fields.services.scoring.context import IssueContext, build_issue_context
from jira_ai_fields.services.scoring.parsing import extract_json, select_scored_fields

logger = logging.getLogger(__name__)

MAX_PROMPT_COMMENTS = 10


def _display(value: Any) -> str:
    if value is None:
        return "(none)"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class AnthropicScorer(IssueScorer):
    """Scores issues by asking Claude for the AI fields as JSON.

    The client is injected so a single AsyncAnthropic instance (and its
    connection pool) is shared by every item of a batch.
    """

    name = "anthropic"
    model: str = "claude-sonnet-4-20250514"
    max_tokens: int = 1000
    temperature: float = 0.2

    def __init__(self, client: anthropic.AsyncAnthropic, model: str | None = None):
        self.client = client
        if model:
            self.model = model

    @classmethod
    def from_settings(cls, settings: Settings) -> "AnthropicScorer":
        """Build a scorer, failing fast when no API key is configured."""
        if not settings.anthropic_api_key:
            raise ConfigurationError("Missing required environment variable: ANTHROPIC_API_KEY")
        client = anthropic.AsyncAnthropic(api_key=settings.anthropic_api_key)
        return cls(client, model=settings.anthropic_model)

    def get_system_prompt(self) -> str:
        return (
            "You are an AI assistant helping product discovery teams prioritize work. "
            "Only respond with valid JSON."
        )

    def format_input(self, context: IssueContext) -> str:
        """Render a normalized issue as the user prompt."""
        comments = "\n".join(
            f"{comment.author or 'Unknown'}: {comment.body}"
            for comment in context.comments[-MAX_PROMPT_COMMENTS:]
        )
        lines = [
            "Analyze the following Jira Product Discovery idea and output a JSON object "
            f"with keys: {', '.join(SCORED_FIELD_NAMES)}.",
            "",
            f"Idea key: {context.key}",
            f"Summary: {context.summary}",
            f"Description: {context.description}",
            f"Labels: {', '.join(context.labels)}",
            f"Votes: {_display(context.votes)}",
            f"Status: {context.status_name or ''}",
            f"Created: {_display(context.created)}",
            f"Updated: {_display(context.updated)}",
            f"Existing Impact: {_display(context.existing_impact)}",
            f"Existing Effort: {_display(context.existing_effort)}",
            f"Existing Confidence: {_display(context.existing_confidence)}",
            f"Recent Comments: {comments}",
            "",
            "Scores are integers from 1 to 10, ai_priority_rank is a number with two decimals, "
            "ai_confidence_level is a number between 0 and 1.",
        ]
        return "\n".join(lines)

    def parse_output(self, response_text: str) -> dict[str, Any]:
        return select_scored_fields(extract_json(response_text))

    async def score(self, issue: JiraIssue) -> dict[str, Any]:
        context = build_issue_context(issue)

        response = await self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            system=self.get_system_prompt(),
            messages=[{"role": "user", "content": self.format_input(context)}],
        )

        # Extract text from the first text block
        response_text = next(
            (block.text for block in response.content if getattr(block, "text", None)),
            None,
        )
        if not response_text:
            raise ScoringResponseError("AI response did not include text output.")

        logger.debug(f"Claude scored {context.key} ({len(response_text)} chars)")
        return self.parse_output(response_text)
