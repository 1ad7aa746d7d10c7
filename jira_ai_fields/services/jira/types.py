"""Data types for Jira API requests."""

from dataclasses import dataclass
from typing import Any

# Raw issue as returned by /search: {"key": ..., "fields": {...}}
JiraIssue = dict[str, Any]


@dataclass(frozen=True)
class IssueQuery:
    """Selection of issues to analyze."""

    project_key: str | None = None
    status_filter: str | None = None
    jql: str | None = None  # Explicit JQL overrides project/status

    def to_jql(self) -> str:
        """Build the JQL string sent to /search."""
        if self.jql:
            return self.jql
        if not self.project_key:
            raise ValueError("project_key or jql is required")

        clauses = [f"project={self.project_key}"]
        if self.status_filter:
            clauses.append(f'status="{self.status_filter}"')
        return " AND ".join(clauses)
