"""
Batch Analysis Orchestrator.

Coordinates one analysis run:
1. Fetch every matching issue (sequential paging, fatal on failure)
2. Apply the optional limit as a stable prefix
3. Score the selection on the bounded worker pool, isolating per-issue failures
4. Stamp ai_last_evaluated_at and assemble the report in selection order
"""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from jira_ai_fields.config.field_mapping import AI_LAST_EVALUATED_AT
from jira_ai_fields.config.settings import coerce_concurrency
from jira_ai_fields.core.exceptions import PreconditionError
from jira_ai_fields.services.enrichment.pool import run_bounded
from jira_ai_fields.services.enrichment.types import (
    AnalysisReport,
    Failed,
    IssueFetcher,
    ItemOutcome,
    Succeeded,
)
from jira_ai_fields.services.jira.types import IssueQuery, JiraIssue
from jira_ai_fields.services.scoring.base import IssueScorer

logger = logging.getLogger(__name__)


def select_issues(issues: list[JiraIssue], limit: int | None) -> list[JiraIssue]:
    """Return the first ``limit`` issues (all of them when limit is None)."""
    if limit is None:
        return list(issues)
    if limit < 0:
        raise PreconditionError("limit must be a non-negative integer")
    return issues[:limit]


def _summary(issue: JiraIssue) -> str:
    return (issue.get("fields") or {}).get("summary") or ""


class BatchAnalysisOrchestrator:
    """
    Runs the scoring strategy over a fetched issue set.

    The fetcher, scorer and worker count are injected at startup; the
    orchestrator keeps no per-run state, so one instance serves every request.
    """

    def __init__(
        self,
        fetcher: IssueFetcher,
        scorer: IssueScorer,
        concurrency: int = 5,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """
        Initialize the orchestrator.

        Args:
            fetcher: Paginated issue source (JiraClient in production)
            scorer: Scoring strategy applied to each issue
            concurrency: Maximum issues scored at once (coerced to >= 1)
            clock: Source of the ai_last_evaluated_at timestamp
        """
        self.fetcher = fetcher
        self.scorer = scorer
        self.concurrency = coerce_concurrency(concurrency)
        self._clock = clock or (lambda: datetime.now(UTC))

    async def run(self, query: IssueQuery, limit: int | None = None) -> AnalysisReport:
        """
        Fetch, score and report.

        Args:
            query: Issue selection
            limit: Maximum number of issues to score; None for all, 0 for none

        Returns:
            AnalysisReport with one outcome per selected issue

        Raises:
            PreconditionError: If the limit is negative
            JiraAPIError: If fetching fails (nothing is scored)
        """
        if limit is not None and limit < 0:
            raise PreconditionError("limit must be a non-negative integer")

        issues = await self.fetcher.fetch_all_issues(query)
        selected = select_issues(issues, limit)

        logger.info(
            f"Analyzing {len(selected)} of {len(issues)} issues "
            f"with {self.scorer.name} scorer (concurrency={self.concurrency})"
        )

        outcomes = await run_bounded(selected, self._analyze_one, self.concurrency)
        report = AnalysisReport(
            query=query,
            total_issues=len(issues),
            limit=limit,
            items=tuple(outcomes),
        )

        logger.info(
            f"Analysis complete: {report.analyzed_count} analyzed, {report.failed_count} failed"
        )
        return report

    async def _analyze_one(self, issue: JiraIssue) -> ItemOutcome:
        issue_id = issue.get("key") if isinstance(issue, dict) else None
        summary: str | None = None
        try:
            summary = _summary(issue)
            scored = await self.scorer.score(issue)
            fields = {**scored, AI_LAST_EVALUATED_AT: self._clock().isoformat()}
        except Exception as e:
            logger.warning(f"Scoring failed for {issue_id}: {e}")
            return Failed(id=issue_id, error=str(e) or type(e).__name__, summary=summary)

        return Succeeded(id=issue_id, fields=fields, summary=summary)
