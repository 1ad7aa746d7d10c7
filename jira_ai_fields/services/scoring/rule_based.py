"""
Deterministic rule-based scoring.

Maps an issue's votes, comments, description length, labels, status and
update recency to the eight scored AI fields. Every function here is pure:
the current time is passed in, so the same issue scored at the same instant
always yields the same fields.
"""

import math
from collections.abc import Callable
from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from jira_ai_fields.config.field_mapping import (
    AI_ANALYSIS_NOTE,
    AI_CONFIDENCE_LEVEL,
    AI_EFFORT_SCORE,
    AI_IMPACT_SCORE,
    AI_PRIORITY_RANK,
    AI_SUGGESTED_NEXT_ACTION,
    AI_THEME_CATEGORY,
    AI_URGENCY_SCORE,
)
from jira_ai_fields.services.jira.types import JiraIssue
from jira_ai_fields.services.scoring import constants as c
from jira_ai_fields.services.scoring.base import IssueScorer
from jira_ai_fields.services.scoring.context import IssueContext, build_issue_context


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from -inf (0.5 -> 1, 2.5 -> 3)."""
    return math.floor(value + 0.5)


def round2(value: float) -> float:
    """Round to two decimals, halves up, using the exact binary value."""
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _clamp_score(value: float) -> int:
    return round_half_up(clamp(value, c.SCORE_MIN, c.SCORE_MAX))


def _format_count(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def determine_theme(labels: list[str], summary: str, description: str) -> str:
    """Classify an issue by keyword groups; falls back to the first label."""
    text = f"{summary} {description}".lower()
    normalized_labels = [label.lower() for label in labels]

    for theme, keywords in c.THEME_KEYWORDS:
        if any(
            keyword in text or any(keyword in label for label in normalized_labels)
            for keyword in keywords
        ):
            return theme

    if normalized_labels and normalized_labels[0]:
        return normalized_labels[0].upper()
    return c.THEME_OTHER


def score_impact(existing: float | None, votes: float, comment_count: int, theme: str) -> int:
    if existing is not None:
        return _clamp_score(existing)

    vote_component = math.log2(votes + 2) * 2
    comment_boost = min(comment_count * c.IMPACT_COMMENT_WEIGHT, c.IMPACT_COMMENT_CAP)
    theme_boost = c.IMPACT_THEME_BOOST.get(theme, c.IMPACT_DEFAULT_THEME_BOOST)
    return _clamp_score(round_half_up(c.IMPACT_BASE + vote_component + comment_boost + theme_boost))


def score_effort(existing: float | None, description: str, theme: str) -> int:
    if existing is not None:
        return _clamp_score(existing)

    if len(description) < c.EFFORT_SHORT_DESCRIPTION:
        base = 3
    elif len(description) < c.EFFORT_MEDIUM_DESCRIPTION:
        base = 5
    else:
        base = 7
    return _clamp_score(base + c.EFFORT_THEME_ADJUSTMENT.get(theme, 0))


def score_urgency(days_since_update: float, comment_count: int, theme: str) -> int:
    urgency = float(c.URGENCY_BASE)
    if days_since_update <= c.URGENCY_RECENT_DAYS:
        urgency += 2
    if days_since_update >= c.URGENCY_STALE_DAYS:
        urgency -= 1
    urgency += min(comment_count, c.URGENCY_COMMENT_CAP) * c.URGENCY_COMMENT_WEIGHT
    if theme == c.THEME_STABILITY:
        urgency += c.URGENCY_STABILITY_BOOST
    return _clamp_score(round_half_up(urgency))


def priority_rank(impact: int, urgency: int, effort: int) -> float:
    return round2((impact * urgency) / max(effort, 1))


def score_confidence(
    existing: float | None,
    votes: float,
    comment_count: int,
    days_since_update: float,
) -> float:
    """Confidence in [0, 1]; overrides on a 0-10 scale are divided by 10."""
    if existing is not None:
        normalized = existing / 10 if existing > 1 else existing
        return round2(clamp(normalized, 0, 1))

    base = (
        c.CONFIDENCE_BASE
        + min(comment_count * c.CONFIDENCE_COMMENT_WEIGHT, c.CONFIDENCE_COMMENT_CAP)
        + min(votes * c.CONFIDENCE_VOTE_WEIGHT, c.CONFIDENCE_VOTE_CAP)
    )
    staleness_penalty = min(days_since_update / c.CONFIDENCE_STALENESS_DAYS, c.CONFIDENCE_STALENESS_CAP)
    return round2(clamp(round2(base - staleness_penalty), c.CONFIDENCE_MIN, c.CONFIDENCE_MAX))


def build_suggested_action(status_name: str | None, theme: str, urgency: int) -> str:
    if not status_name:
        return c.ACTION_NO_STATUS.format(theme=theme)

    status = status_name.lower()
    if any(marker in status for marker in c.DONE_STATUS_MARKERS):
        return c.ACTION_DONE
    if urgency >= c.URGENT_THRESHOLD:
        return c.ACTION_URGENT
    if any(marker in status for marker in c.IN_PROGRESS_STATUS_MARKERS):
        return c.ACTION_IN_PROGRESS
    if theme == c.THEME_UX:
        return c.ACTION_UX
    if theme == c.THEME_STABILITY:
        return c.ACTION_STABILITY
    return c.ACTION_BACKLOG.format(theme=theme)


def build_analysis_note(
    *,
    votes: float,
    comment_count: int,
    theme: str,
    days_since_update: float,
    impact: int,
    effort: int,
    urgency: int,
) -> str:
    parts = [
        c.NOTE_ACTIVITY.format(votes=_format_count(votes), comments=comment_count),
        c.NOTE_STALENESS.format(days=round_half_up(days_since_update)),
        c.NOTE_THEME.format(theme=theme),
        c.NOTE_SCORES.format(impact=impact, urgency=urgency, effort=effort),
    ]
    return c.NOTE_DELIMITER.join(parts)


def score_context(context: IssueContext, now: datetime) -> dict[str, Any]:
    """Compute the eight scored AI fields for a normalized issue."""
    days = context.days_since_update(now)
    comment_count = context.comment_count
    theme = determine_theme(context.labels, context.summary, context.description)

    impact = score_impact(context.existing_impact, context.votes, comment_count, theme)
    effort = score_effort(context.existing_effort, context.description, theme)
    urgency = score_urgency(days, comment_count, theme)

    return {
        AI_IMPACT_SCORE: impact,
        AI_EFFORT_SCORE: effort,
        AI_URGENCY_SCORE: urgency,
        AI_PRIORITY_RANK: priority_rank(impact, urgency, effort),
        AI_THEME_CATEGORY: theme,
        AI_CONFIDENCE_LEVEL: score_confidence(
            context.existing_confidence, context.votes, comment_count, days
        ),
        AI_SUGGESTED_NEXT_ACTION: build_suggested_action(context.status_name, theme, urgency),
        AI_ANALYSIS_NOTE: build_analysis_note(
            votes=context.votes,
            comment_count=comment_count,
            theme=theme,
            days_since_update=days,
            impact=impact,
            effort=effort,
            urgency=urgency,
        ),
    }


def score_issue(issue: JiraIssue, now: datetime | None = None) -> dict[str, Any]:
    """Score a raw Jira issue with the rule-based engine."""
    return score_context(build_issue_context(issue), now or datetime.now(UTC))


class RuleBasedScorer(IssueScorer):
    """Default scoring strategy: deterministic formulas, no I/O."""

    name = "rule"

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or (lambda: datetime.now(UTC))

    async def score(self, issue: JiraIssue) -> dict[str, Any]:
        return score_issue(issue, now=self._clock())
