"""Unit tests for the AI field allow-list."""

from __future__ import annotations

from jira_ai_fields.config.field_mapping import AI_FIELD_NAMES
from jira_ai_fields.services.enrichment.sanitizer import sanitize_fields


class TestSanitizeFields:
    def test_keeps_known_fields_in_input_order(self):
        fields = {
            "ai_urgency_score": 5,
            "summary": "should go",
            "ai_impact_score": 7,
        }

        assert list(sanitize_fields(fields).items()) == [
            ("ai_urgency_score", 5),
            ("ai_impact_score", 7),
        ]

    def test_prefix_alone_is_not_enough(self):
        assert sanitize_fields({"ai_custom_thing": 1, "ai_": 2}) == {}

    def test_exact_case_required(self):
        assert sanitize_fields({"AI_IMPACT_SCORE": 3}) == {}

    def test_none_values_dropped(self):
        assert sanitize_fields({"ai_impact_score": None, "ai_effort_score": 0}) == {
            "ai_effort_score": 0
        }

    def test_empty_and_missing(self):
        assert sanitize_fields({}) == {}
        assert sanitize_fields(None) == {}

    def test_all_nine_fields_pass(self):
        fields = {name: "x" for name in AI_FIELD_NAMES}
        assert sanitize_fields(fields) == fields

    def test_input_not_mutated(self):
        fields = {"ai_impact_score": 1, "other": 2}
        sanitize_fields(fields)
        assert fields == {"ai_impact_score": 1, "other": 2}

    def test_idempotent(self):
        fields = {"ai_impact_score": 4, "ai_note": 1, "ai_effort_score": None}
        once = sanitize_fields(fields)
        assert sanitize_fields(once) == once
