"""Request and response schemas for the ticket analysis and update endpoints."""

from typing import Any

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, field_validator, model_serializer

from jira_ai_fields.services.enrichment import (
    AnalysisReport,
    Failed,
    ItemOutcome,
    Skipped,
    Succeeded,
    UpdateReport,
)

UNLIMITED = "unlimited"


def parse_limit(value: Any) -> int | None:
    """Accept an int, a numeric string, "unlimited" or null."""
    if value is None or value == "" or value == UNLIMITED:
        return None
    if isinstance(value, bool):
        raise ValueError("limit must be an integer or 'unlimited'")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ValueError("limit must be an integer or 'unlimited'")


# ─────────────────────────────────────────────────────────────────────
# Analyze
# ─────────────────────────────────────────────────────────────────────


class AnalyzeTicketsRequest(BaseModel):
    project_key: str | None = Field(default=None, description="Jira project key, e.g. 'WD'")
    status_filter: str | None = Field(
        default=None, description="Status name; defaults to DEFAULT_STATUS_FILTER"
    )
    jql: str | None = Field(default=None, description="Explicit JQL, overrides project/status")
    limit: int | None = Field(
        default=None, description="Maximum issues to analyze; 'unlimited' or null for all"
    )

    @field_validator("limit", mode="before")
    @classmethod
    def _parse_limit(cls, value: Any) -> int | None:
        return parse_limit(value)


class AnalyzedIssue(BaseModel):
    id: str | None
    summary: str | None = None
    ai_fields: dict[str, Any] | None = None
    error: str | None = None

    @model_serializer(mode="wrap")
    def _drop_unset_outcome(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        # An item carries either ai_fields or error, never both
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None or key == "id"}


class AnalyzeTicketsResponse(BaseModel):
    """Echoes project_key and limit even when null."""

    project_key: str | None
    total_issues: int
    analyzed_count: int
    limit: int | None
    issues: list[AnalyzedIssue]

    @classmethod
    def from_report(cls, report: AnalysisReport) -> "AnalyzeTicketsResponse":
        issues = []
        for item in report.items:
            if isinstance(item, Succeeded):
                issues.append(AnalyzedIssue(id=item.id, summary=item.summary, ai_fields=item.fields))
            elif isinstance(item, Failed):
                issues.append(AnalyzedIssue(id=item.id, summary=item.summary, error=item.error))
            else:
                issues.append(AnalyzedIssue(id=item.id, error=item.reason))
        return cls(
            project_key=report.query.project_key,
            total_issues=report.total_issues,
            analyzed_count=report.analyzed_count,
            limit=report.limit,
            issues=issues,
        )


# ─────────────────────────────────────────────────────────────────────
# Update
# ─────────────────────────────────────────────────────────────────────


class BatchUpdateItem(BaseModel):
    issue_id: str | None = None
    fields: dict[str, Any] | None = None


class UpdateFieldsRequest(BaseModel):
    issue_id: str | None = None
    fields: dict[str, Any] | None = None
    batch: bool = False
    issues: list[BatchUpdateItem] | None = None
    dry_run: bool = False


class UpdateLog(BaseModel):
    issue_id: str | None
    fields_updated: list[str] | None = None
    skipped: bool | None = None
    reason: str | None = None
    error: str | None = None

    @classmethod
    def from_outcome(cls, item: ItemOutcome) -> "UpdateLog":
        if isinstance(item, Failed):
            return cls(issue_id=item.id, error=item.error)
        if isinstance(item, Skipped):
            return cls(issue_id=item.id, skipped=True, reason=item.reason)
        return cls(issue_id=item.id, fields_updated=item.field_names, skipped=False)


class UpdateFieldsResponse(BaseModel):
    updated_count: int
    status: str = "success"
    dry_run: bool
    logs: list[UpdateLog]

    @classmethod
    def from_report(cls, report: UpdateReport) -> "UpdateFieldsResponse":
        return cls(
            updated_count=report.updated_count,
            dry_run=report.dry_run,
            logs=[UpdateLog.from_outcome(item) for item in report.items],
        )
