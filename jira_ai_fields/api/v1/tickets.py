"""Ticket endpoints: batch AI-field analysis and field write-back."""

import logging

from fastapi import APIRouter, Depends

from jira_ai_fields.api.deps import (
    get_analysis_orchestrator,
    get_settings,
    get_update_orchestrator,
)
from jira_ai_fields.config.settings import Settings
from jira_ai_fields.core.exceptions import PreconditionError, UpstreamError, ValidationError
from jira_ai_fields.schemas.tickets import (
    AnalyzeTicketsRequest,
    AnalyzeTicketsResponse,
    UpdateFieldsRequest,
    UpdateFieldsResponse,
)
from jira_ai_fields.services.enrichment import (
    BatchAnalysisOrchestrator,
    BatchUpdateOrchestrator,
    Failed,
    FieldUpdate,
)
from jira_ai_fields.services.jira import IssueQuery, JiraAPIError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tickets", tags=["tickets"])


@router.post(
    "/analyze",
    response_model=AnalyzeTicketsResponse,
)
async def analyze_tickets(
    data: AnalyzeTicketsRequest,
    settings: Settings = Depends(get_settings),
    orchestrator: BatchAnalysisOrchestrator = Depends(get_analysis_orchestrator),
) -> AnalyzeTicketsResponse:
    """
    Analyze every issue matching a project/status (or JQL) selection.

    Per-issue scoring failures are reported inline under `error`;
    only a failed Jira search fails the whole request.
    """
    if not data.project_key and not data.jql:
        raise ValidationError("project_key is required")

    query = IssueQuery(
        project_key=data.project_key,
        status_filter=data.status_filter or settings.default_status_filter,
        jql=data.jql,
    )

    try:
        report = await orchestrator.run(query, limit=data.limit)
    except PreconditionError as e:
        raise ValidationError(str(e)) from e
    except JiraAPIError as e:
        logger.error(f"Issue search failed: {e.message}")
        raise UpstreamError(f"Jira search failed: {e.message}") from e

    return AnalyzeTicketsResponse.from_report(report)


@router.post(
    "/update-fields",
    response_model=UpdateFieldsResponse,
    response_model_exclude_none=True,
)
async def update_fields(
    data: UpdateFieldsRequest,
    orchestrator: BatchUpdateOrchestrator = Depends(get_update_orchestrator),
) -> UpdateFieldsResponse:
    """
    Write ai_* fields to one issue, or to many with `batch: true`.

    Unrecognized keys are dropped. With `dry_run: true` nothing is written
    and `updated_count` is 0.
    """
    if data.batch:
        if data.issues is None:
            raise ValidationError("issues array is required when batch=true")
        updates: FieldUpdate | list[FieldUpdate] = [
            FieldUpdate(issue_id=item.issue_id, fields=item.fields) for item in data.issues
        ]
    else:
        updates = FieldUpdate(issue_id=data.issue_id, fields=data.fields)

    try:
        report = await orchestrator.run(updates, dry_run=data.dry_run)
    except PreconditionError as e:
        raise ValidationError(str(e)) from e

    if not data.batch and report.failed_count:
        # A single-issue request surfaces its failure as the response status
        failure = report.items[0]
        if isinstance(failure, Failed):
            raise UpstreamError(f"Jira update failed: {failure.error}")

    return UpdateFieldsResponse.from_report(report)

