"""Allow-list filtering for fields written back to Jira."""

from collections.abc import Mapping
from typing import Any

from jira_ai_fields.config.field_mapping import AI_FIELD_NAMES

_ALLOWED = frozenset(AI_FIELD_NAMES)


def sanitize_fields(fields: Mapping[str, Any] | None) -> dict[str, Any]:
    """
    Keep only recognized AI fields that carry a value.

    Keys are matched exactly against the nine AI field names (no prefix
    matching) and None values are dropped. Input order is preserved.

    Returns:
        The filtered mapping, possibly empty; callers decide what empty means
    """
    if not fields:
        return {}
    return {key: value for key, value in fields.items() if key in _ALLOWED and value is not None}
