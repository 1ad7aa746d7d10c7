"""Pydantic schemas for API requests and responses."""

from jira_ai_fields.schemas.tickets import (
    AnalyzedIssue,
    AnalyzeTicketsRequest,
    AnalyzeTicketsResponse,
    BatchUpdateItem,
    UpdateFieldsRequest,
    UpdateFieldsResponse,
    UpdateLog,
)

__all__ = [
    "AnalyzeTicketsRequest",
    "AnalyzeTicketsResponse",
    "AnalyzedIssue",
    "BatchUpdateItem",
    "UpdateFieldsRequest",
    "UpdateFieldsResponse",
    "UpdateLog",
]
