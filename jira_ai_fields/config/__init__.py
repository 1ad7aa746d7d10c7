"""Configuration package."""

from jira_ai_fields.config.field_mapping import (
    AI_FIELD_LABELS,
    AI_FIELD_NAMES,
    OVERRIDE_FIELD_SOURCES,
    SCORED_FIELD_NAMES,
)
from jira_ai_fields.config.settings import Settings, coerce_concurrency, settings

__all__ = [
    "AI_FIELD_LABELS",
    "AI_FIELD_NAMES",
    "OVERRIDE_FIELD_SOURCES",
    "SCORED_FIELD_NAMES",
    "Settings",
    "coerce_concurrency",
    "settings",
]
