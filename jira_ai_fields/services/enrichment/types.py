"""Data types for batch analysis and update runs."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from jira_ai_fields.services.jira.types import IssueQuery, JiraIssue


class IssueFetcher(Protocol):
    """Returns every issue matching a query, all pages drained."""

    async def fetch_all_issues(self, query: IssueQuery) -> list[JiraIssue]: ...


class FieldUpdater(Protocol):
    """Writes one issue's fields in a single remote call."""

    async def update_issue_fields(self, issue_id: str, fields: Mapping[str, Any]) -> None: ...


@dataclass(frozen=True)
class FieldUpdate:
    """One (issue id, field map) pair submitted for writing."""

    issue_id: str | None
    fields: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class Succeeded:
    """Item processed. For updates, ``written`` is False on dry runs."""

    id: str | None
    fields: dict[str, Any]
    summary: str | None = None
    written: bool = True

    @property
    def field_names(self) -> list[str]:
        return list(self.fields)


@dataclass(frozen=True)
class Skipped:
    """Update item with no recognized AI field left after sanitizing."""

    id: str | None
    reason: str


@dataclass(frozen=True)
class Failed:
    """Item whose scoring or update raised."""

    id: str | None
    error: str
    summary: str | None = None


ItemOutcome = Succeeded | Skipped | Failed


@dataclass(frozen=True)
class AnalysisReport:
    """Result of one batch analysis run.

    ``total_issues`` is the number fetched, before any limit;
    ``items`` follows the selection order.
    """

    query: IssueQuery
    total_issues: int
    limit: int | None
    items: tuple[ItemOutcome, ...] = field(default_factory=tuple)

    @property
    def analyzed_count(self) -> int:
        return sum(1 for item in self.items if not isinstance(item, Failed))

    @property
    def failed_count(self) -> int:
        return sum(1 for item in self.items if isinstance(item, Failed))


@dataclass(frozen=True)
class UpdateReport:
    """Result of one batch update run, ``items`` in submission order."""

    dry_run: bool
    items: tuple[ItemOutcome, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def updated_count(self) -> int:
        return sum(1 for item in self.items if isinstance(item, Succeeded) and item.written)

    @property
    def skipped_count(self) -> int:
        return sum(1 for item in self.items if isinstance(item, Skipped))

    @property
    def failed_count(self) -> int:
        return sum(1 for item in self.items if isinstance(item, Failed))
