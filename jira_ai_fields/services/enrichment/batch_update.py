"""
Batch Update Orchestrator.

Sanitizes each (issue id, fields) pair and writes it back to Jira on the
bounded worker pool. Each item ends as exactly one of Succeeded, Skipped
or Failed; a failing item never stops its siblings.
"""

import logging
from collections.abc import Sequence

from jira_ai_fields.config.settings import coerce_concurrency
from jira_ai_fields.core.exceptions import PreconditionError
from jira_ai_fields.services.enrichment.pool import run_bounded
from jira_ai_fields.services.enrichment.sanitizer import sanitize_fields
from jira_ai_fields.services.enrichment.types import (
    Failed,
    FieldUpdate,
    FieldUpdater,
    ItemOutcome,
    Skipped,
    Succeeded,
    UpdateReport,
)

logger = logging.getLogger(__name__)

MISSING_ID_ERROR = "issue_id is required"
NO_FIELDS_REASON = "no AI fields to update"


class BatchUpdateOrchestrator:
    """Writes sanitized AI fields to Jira, one remote call per issue."""

    def __init__(self, updater: FieldUpdater, concurrency: int = 5) -> None:
        self.updater = updater
        self.concurrency = coerce_concurrency(concurrency)

    async def run(
        self,
        updates: FieldUpdate | Sequence[FieldUpdate],
        dry_run: bool = False,
    ) -> UpdateReport:
        """
        Update one issue or a list of issues.

        A single update is checked up front: a missing id or a field map with
        no recognized AI field raises before anything is written. In a list,
        the same problems become that item's Failed / Skipped outcome.

        Args:
            updates: One FieldUpdate or an ordered list of them
            dry_run: Sanitize and report without calling Jira

        Returns:
            UpdateReport in submission order

        Raises:
            PreconditionError: For an invalid single update
        """
        if isinstance(updates, FieldUpdate):
            self._check_single(updates)
            items: list[FieldUpdate] = [updates]
        else:
            items = list(updates)

        logger.info(
            f"Updating {len(items)} issues (dry_run={dry_run}, concurrency={self.concurrency})"
        )

        async def handle(update: FieldUpdate) -> ItemOutcome:
            return await self._update_one(update, dry_run)

        outcomes = await run_bounded(items, handle, self.concurrency)
        report = UpdateReport(dry_run=dry_run, items=tuple(outcomes))

        logger.info(
            f"Update complete: {report.updated_count} updated, "
            f"{report.skipped_count} skipped, {report.failed_count} failed"
        )
        return report

    @staticmethod
    def _check_single(update: FieldUpdate) -> None:
        if not update.issue_id:
            raise PreconditionError(MISSING_ID_ERROR)
        if not sanitize_fields(update.fields):
            raise PreconditionError("No ai_ fields provided for update")

    async def _update_one(self, update: FieldUpdate, dry_run: bool) -> ItemOutcome:
        issue_id = update.issue_id
        if not issue_id:
            return Failed(id=issue_id, error=MISSING_ID_ERROR)

        try:
            sanitized = sanitize_fields(update.fields)
            if not sanitized:
                return Skipped(id=issue_id, reason=NO_FIELDS_REASON)

            if dry_run:
                return Succeeded(id=issue_id, fields=sanitized, written=False)

            await self.updater.update_issue_fields(issue_id, sanitized)
        except Exception as e:
            logger.warning(f"Field update failed for {issue_id}: {e}")
            return Failed(id=issue_id, error=str(e) or type(e).__name__)

        return Succeeded(id=issue_id, fields=sanitized)
