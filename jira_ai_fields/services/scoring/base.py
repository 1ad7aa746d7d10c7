"""Scoring strategy interface."""

from abc import ABC, abstractmethod
from typing import Any

from jira_ai_fields.services.jira.types import JiraIssue


class IssueScorer(ABC):
    """Abstract base for all scoring strategies.

    A strategy maps one raw issue to the eight scored AI fields
    (everything except ai_last_evaluated_at, which the orchestrator stamps).
    Errors raised here are isolated to the issue being scored.
    """

    # Override in subclasses
    name: str = "base"

    @abstractmethod
    async def score(self, issue: JiraIssue) -> dict[str, Any]:
        """Return the scored AI fields for one issue."""
        ...
