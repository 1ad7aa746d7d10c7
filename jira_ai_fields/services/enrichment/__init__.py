"""
Enrichment package: batch analysis and batch update of Jira AI fields.

Module structure:
- batch_analysis.py: BatchAnalysisOrchestrator (fetch -> score -> report)
- batch_update.py: BatchUpdateOrchestrator (sanitize -> write -> report)
- sanitizer.py: Exact-name allow-list for written fields
- pool.py: Bounded worker pool preserving input order
- types.py: Outcomes, reports and collaborator protocols
"""

from jira_ai_fields.services.enrichment.batch_analysis import (
    BatchAnalysisOrchestrator,
    select_issues,
)
from jira_ai_fields.services.enrichment.batch_update import BatchUpdateOrchestrator
from jira_ai_fields.services.enrichment.pool import run_bounded
from jira_ai_fields.services.enrichment.sanitizer import sanitize_fields
from jira_ai_fields.services.enrichment.types import (
    AnalysisReport,
    Failed,
    FieldUpdate,
    FieldUpdater,
    IssueFetcher,
    ItemOutcome,
    Skipped,
    Succeeded,
    UpdateReport,
)

__all__ = [
    # Orchestrators
    "BatchAnalysisOrchestrator",
    "BatchUpdateOrchestrator",
    # Utilities
    "run_bounded",
    "sanitize_fields",
    "select_issues",
    # Types
    "AnalysisReport",
    "UpdateReport",
    "FieldUpdate",
    "ItemOutcome",
    "Succeeded",
    "Skipped",
    "Failed",
    # Collaborator protocols
    "IssueFetcher",
    "FieldUpdater",
]
