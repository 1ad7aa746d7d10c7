"""
Field names shared with Jira.

The nine AI field names are part of the external contract: front ends,
the update path and the scoring strategies all refer to these constants.
"""

AI_IMPACT_SCORE = "ai_impact_score"
AI_EFFORT_SCORE = "ai_effort_score"
AI_URGENCY_SCORE = "ai_urgency_score"
AI_PRIORITY_RANK = "ai_priority_rank"
AI_THEME_CATEGORY = "ai_theme_category"
AI_CONFIDENCE_LEVEL = "ai_confidence_level"
AI_SUGGESTED_NEXT_ACTION = "ai_suggested_next_action"
AI_ANALYSIS_NOTE = "ai_analysis_note"
AI_LAST_EVALUATED_AT = "ai_last_evaluated_at"

# Display names of the matching Jira Product Discovery fields
AI_FIELD_LABELS: dict[str, str] = {
    AI_IMPACT_SCORE: "AI Impact Score",
    AI_EFFORT_SCORE: "AI Effort Score",
    AI_URGENCY_SCORE: "AI Urgency Score",
    AI_PRIORITY_RANK: "AI Priority Rank",
    AI_THEME_CATEGORY: "AI Theme Category",
    AI_CONFIDENCE_LEVEL: "AI Confidence Level",
    AI_SUGGESTED_NEXT_ACTION: "AI Suggested Next Action",
    AI_ANALYSIS_NOTE: "AI Analysis Note",
    AI_LAST_EVALUATED_AT: "AI Last Evaluated At",
}

AI_FIELD_NAMES: tuple[str, ...] = tuple(AI_FIELD_LABELS)

# Fields a scoring strategy produces (the timestamp is stamped by the orchestrator)
SCORED_FIELD_NAMES: tuple[str, ...] = tuple(
    name for name in AI_FIELD_NAMES if name != AI_LAST_EVALUATED_AT
)

# Human-entered override values, in precedence order: the first attribute
# present on the issue wins, custom field before canonical name.
OVERRIDE_FIELD_SOURCES: dict[str, tuple[str, str]] = {
    "impact": ("customfield_impact", "Impact"),
    "effort": ("customfield_effort", "Effort"),
    "confidence": ("customfield_confidence", "Confidence"),
}

# Fields requested from /search
JIRA_SEARCH_FIELDS: tuple[str, ...] = (
    "summary",
    "description",
    "labels",
    "votes",
    "comment",
    "created",
    "updated",
    "status",
    "Impact",
    "Effort",
    "Confidence",
    "customfield_impact",
    "customfield_effort",
    "customfield_confidence",
)
