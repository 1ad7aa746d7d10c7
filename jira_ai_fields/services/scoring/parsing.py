"""
Delegated scoring response parsing.

Pulls the JSON object out of a free-text model response.
"""

import json
from typing import Any

from jira_ai_fields.config.field_mapping import SCORED_FIELD_NAMES
from jira_ai_fields.core.exceptions import ScoringResponseError


def extract_json(text: str) -> dict[str, Any]:
    """
    Parse the JSON object spanning the first ``{`` to the last ``}``.

    Handles responses wrapped in prose or markdown code fences.

    Raises:
        ScoringResponseError: If no such substring exists or it does not
            parse to a JSON object
    """
    trimmed = text.strip()
    start = trimmed.find("{")
    end = trimmed.rfind("}")

    if start == -1 or end == -1 or end <= start:
        raise ScoringResponseError("Unable to locate JSON object in AI response.")

    try:
        parsed = json.loads(trimmed[start : end + 1])
    except json.JSONDecodeError as e:
        raise ScoringResponseError(f"Failed to parse AI response as JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise ScoringResponseError("AI response JSON is not an object.")

    return parsed


def select_scored_fields(parsed: dict[str, Any]) -> dict[str, Any]:
    """
    Return the eight scored AI fields, in canonical order.

    Unrecognized keys are dropped. A key that is absent or null counts as
    missing.

    Raises:
        ScoringResponseError: If any scored field is missing
    """
    missing = [name for name in SCORED_FIELD_NAMES if parsed.get(name) is None]
    if missing:
        raise ScoringResponseError(f"AI response is missing AI fields: {', '.join(missing)}")
    return {name: parsed[name] for name in SCORED_FIELD_NAMES}
