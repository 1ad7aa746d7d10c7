"""
Issue normalization for scoring.

Turns a raw Jira issue into the flat, plain-text view both scoring
strategies work from.
"""

import math
import re
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from jira_ai_fields.config.field_mapping import OVERRIDE_FIELD_SOURCES
from jira_ai_fields.services.jira.text import adf_to_text, extract_comment_body
from jira_ai_fields.services.jira.types import JiraIssue
from jira_ai_fields.services.scoring.constants import DEFAULT_DAYS_SINCE_UPDATE, MIN_DAYS_SINCE_UPDATE

_NON_NUMERIC = re.compile(r"[^0-9+\-.]")
# Jira writes offsets as +0900; fromisoformat wants +09:00 on older Pythons
_COMPACT_OFFSET = re.compile(r"([+-]\d{2})(\d{2})$")


def to_number(value: Any) -> float | None:
    """
    Coerce a Jira attribute to a number.

    Accepts numbers, numeric strings (stray characters such as units are
    stripped), and option objects carrying a ``value`` or ``score`` key.

    Returns:
        The number, or None when nothing numeric can be read
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value) if math.isfinite(value) else None
    if isinstance(value, str):
        cleaned = _NON_NUMERIC.sub("", value.strip())
        try:
            parsed = float(cleaned)
        except ValueError:
            return None
        return parsed if math.isfinite(parsed) else None
    if isinstance(value, dict):
        for key in ("value", "score"):
            if value.get(key) is not None:
                parsed = to_number(value[key])
                if parsed is not None:
                    return parsed
    return None


def parse_timestamp(value: Any) -> datetime | None:
    """Parse a Jira ISO-8601 timestamp; naive values are taken as UTC."""
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    text = _COMPACT_OFFSET.sub(r"\1:\2", text)
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def pick_override(fields: dict[str, Any], name: str) -> float | None:
    """Read an override value, first present attribute wins."""
    for attribute in OVERRIDE_FIELD_SOURCES[name]:
        raw = fields.get(attribute)
        if raw is not None:
            return to_number(raw)
    return None


def _labels(value: Any) -> list[str]:
    """Jira labels are a list of strings; any other shape means no labels."""
    if not isinstance(value, list | tuple):
        return []
    return [str(label) for label in value if label is not None]


@dataclass
class CommentContext:
    """One issue comment reduced to plain text."""

    author: str | None
    body: str
    created: str | None


@dataclass
class IssueContext:
    """Normalized view of a Jira issue used by scoring strategies."""

    key: str | None
    summary: str
    description: str  # Plain text (ADF flattened)
    labels: list[str]
    votes: float
    comments: list[CommentContext] = field(default_factory=list)
    status_name: str | None = None
    created: str | None = None
    updated: str | None = None

    # Human-entered override values (already coerced to numbers)
    existing_impact: float | None = None
    existing_effort: float | None = None
    existing_confidence: float | None = None

    @property
    def comment_count(self) -> int:
        return len(self.comments)

    def days_since_update(self, now: datetime) -> float:
        """Days elapsed since the last update, floored at 0.1; 90 when unknown."""
        updated_at = parse_timestamp(self.updated)
        if updated_at is None:
            return DEFAULT_DAYS_SINCE_UPDATE
        elapsed = (now - updated_at).total_seconds() / 86400
        return max(elapsed, MIN_DAYS_SINCE_UPDATE)


def build_issue_context(issue: JiraIssue) -> IssueContext:
    """Normalize a raw /search issue."""
    fields = issue.get("fields") or {}

    raw_votes = fields.get("votes")
    if isinstance(raw_votes, dict) and raw_votes.get("votes") is not None:
        raw_votes = raw_votes["votes"]
    votes = max(to_number(raw_votes) or 0.0, 0.0)

    comment_container = fields.get("comment") or {}
    comments = [
        CommentContext(
            author=(comment.get("author") or {}).get("displayName"),
            body=extract_comment_body(comment),
            created=comment.get("created"),
        )
        for comment in comment_container.get("comments") or []
        if isinstance(comment, dict)
    ]

    status = fields.get("status") or {}

    return IssueContext(
        key=issue.get("key"),
        summary=fields.get("summary") or "",
        description=adf_to_text(fields.get("description")),
        labels=_labels(fields.get("labels")),
        votes=votes,
        comments=comments,
        status_name=status.get("name") if isinstance(status, dict) else None,
        created=fields.get("created"),
        updated=fields.get("updated"),
        existing_impact=pick_override(fields, "impact"),
        existing_effort=pick_override(fields, "effort"),
        existing_confidence=pick_override(fields, "confidence"),
    )
