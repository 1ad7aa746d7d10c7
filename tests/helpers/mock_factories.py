"""Builders and fakes for unit tests.

Creates raw Jira issues shaped like /search results, plus in-memory
stand-ins for the fetcher, field updater and scorer collaborators.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any

from jira_ai_fields.services.jira.types import IssueQuery, JiraIssue
from jira_ai_fields.services.scoring.base import IssueScorer


def make_adf(*paragraphs: str) -> dict[str, Any]:
    """Build an ADF document with one paragraph per string."""
    return {
        "type": "doc",
        "version": 1,
        "content": [
            {"type": "paragraph", "content": [{"type": "text", "text": text}]}
            for text in paragraphs
        ],
    }


def jira_timestamp(moment: datetime) -> str:
    """Format a datetime the way Jira does (2025-05-31T12:00:00.000+0000)."""
    return moment.strftime("%Y-%m-%dT%H:%M:%S.000%z")


def make_issue(
    key: str = "WD-101",
    *,
    summary: str = "",
    description: Any = None,
    labels: list[str] | None = None,
    votes: int | None = 0,
    comments: list[tuple[str, str]] | None = None,
    status: str | None = "未着手",
    updated: datetime | None = None,
    **extra_fields: Any,
) -> JiraIssue:
    """Build a raw Jira issue; extra keyword args become extra fields."""
    fields: dict[str, Any] = {
        "summary": summary,
        "description": description,
        "labels": labels or [],
        "votes": {"votes": votes, "hasVoted": False} if votes is not None else None,
        "comment": {
            "comments": [
                {
                    "author": {"displayName": author},
                    "body": make_adf(body),
                    "created": "2025-05-01T09:00:00.000+0000",
                }
                for author, body in comments or []
            ]
        },
        "status": {"name": status} if status is not None else None,
        "created": "2025-01-01T09:00:00.000+0000",
        "updated": jira_timestamp(updated) if updated else None,
    }
    fields.update(extra_fields)
    return {"key": key, "fields": fields}


def days_before(now: datetime, days: float) -> datetime:
    return now - timedelta(days=days)


class FakeFetcher:
    """IssueFetcher returning a fixed list, or raising a fixed error."""

    def __init__(self, issues: list[JiraIssue] | None = None, error: Exception | None = None):
        self.issues = issues or []
        self.error = error
        self.queries: list[IssueQuery] = []

    async def fetch_all_issues(self, query: IssueQuery) -> list[JiraIssue]:
        self.queries.append(query)
        if self.error:
            raise self.error
        return list(self.issues)


class RecordingUpdater:
    """FieldUpdater that records calls and fails for selected issue ids."""

    def __init__(
        self,
        fail_ids: Mapping[str, Exception] | None = None,
        delays: Mapping[str, float] | None = None,
    ):
        self.fail_ids = dict(fail_ids or {})
        self.delays = dict(delays or {})
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def update_issue_fields(self, issue_id: str, fields: Mapping[str, Any]) -> None:
        await asyncio.sleep(self.delays.get(issue_id, 0))
        self.calls.append((issue_id, dict(fields)))
        if issue_id in self.fail_ids:
            raise self.fail_ids[issue_id]


class StubScorer(IssueScorer):
    """Scorer returning a constant field set, with optional delays and failures.

    Tracks the peak number of concurrent score() calls.
    """

    name = "stub"

    def __init__(
        self,
        fail_keys: Mapping[str, Exception] | None = None,
        delays: Mapping[str, float] | None = None,
    ):
        self.fail_keys = dict(fail_keys or {})
        self.delays = dict(delays or {})
        self.in_flight = 0
        self.max_in_flight = 0
        self.scored: list[str] = []

    async def score(self, issue: JiraIssue) -> dict[str, Any]:
        key = issue["key"]
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(key, 0))
            if key in self.fail_keys:
                raise self.fail_keys[key]
            self.scored.append(key)
            return {"ai_impact_score": 5, "ai_theme_category": "その他"}
        finally:
            self.in_flight -= 1
