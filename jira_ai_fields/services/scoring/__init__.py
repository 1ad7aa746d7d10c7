"""
Issue scoring package.

Two interchangeable strategies behind IssueScorer:
- rule_based.py: RuleBasedScorer, deterministic formulas (default)
- anthropic_scorer.py: AnthropicScorer, delegates to Claude

Supporting modules:
- context.py: Raw issue -> IssueContext normalization
- constants.py: Themes, keyword groups, formula constants, message templates
- parsing.py: JSON object extraction from model responses
"""

from jira_ai_fields.config.settings import Settings
from jira_ai_fields.services.scoring.anthropic_scorer import AnthropicScorer
from jira_ai_fields.services.scoring.base import IssueScorer
from jira_ai_fields.services.scoring.context import (
    CommentContext,
    IssueContext,
    build_issue_context,
    to_number,
)
from jira_ai_fields.services.scoring.parsing import extract_json
from jira_ai_fields.services.scoring.rule_based import (
    RuleBasedScorer,
    determine_theme,
    score_context,
    score_issue,
)


def build_scorer(settings: Settings) -> IssueScorer:
    """Select the configured scoring strategy (raises ConfigurationError)."""
    settings.validate_scoring()
    if settings.anthropic_enabled:
        return AnthropicScorer.from_settings(settings)
    return RuleBasedScorer()


__all__ = [
    # Strategies
    "IssueScorer",
    "RuleBasedScorer",
    "AnthropicScorer",
    "build_scorer",
    # Normalization
    "CommentContext",
    "IssueContext",
    "build_issue_context",
    "to_number",
    # Utilities
    "determine_theme",
    "extract_json",
    "score_context",
    "score_issue",
]
