"""Unit tests for ADF plain-text extraction."""

from __future__ import annotations

from jira_ai_fields.services.jira.text import adf_to_text, extract_comment_body
from tests.helpers.mock_factories import make_adf


class TestAdfToText:
    def test_plain_string_passes_through(self):
        assert adf_to_text("Already plain") == "Already plain"

    def test_paragraphs_joined_by_newline(self):
        assert adf_to_text(make_adf("One", "Two")) == "One\nTwo"

    def test_inline_nodes_joined_by_space(self):
        doc = {
            "type": "doc",
            "content": [
                {
                    "type": "paragraph",
                    "content": [
                        {"type": "text", "text": "Hello"},
                        {"type": "text", "text": "world"},
                    ],
                }
            ],
        }
        assert adf_to_text(doc) == "Hello world"

    def test_nested_blocks(self):
        doc = {
            "type": "doc",
            "content": [
                {
                    "type": "bulletList",
                    "content": [
                        {"type": "listItem", "content": [make_adf("alpha")["content"][0]]},
                        {"type": "listItem", "content": [make_adf("beta")["content"][0]]},
                    ],
                }
            ],
        }
        assert adf_to_text(doc) == "alpha beta"

    def test_non_text_nodes_ignored(self):
        doc = {
            "type": "doc",
            "content": [
                {"type": "paragraph", "content": [{"type": "hardBreak"}, {"type": "text", "text": "x"}]}
            ],
        }
        assert adf_to_text(doc) == "x"

    def test_unknown_shapes_are_empty(self):
        assert adf_to_text(None) == ""
        assert adf_to_text({"type": "paragraph"}) == ""
        assert adf_to_text(42) == ""


class TestExtractCommentBody:
    def test_string_body(self):
        assert extract_comment_body({"body": "+1"}) == "+1"

    def test_adf_body(self):
        assert extract_comment_body({"body": make_adf("Looks good")}) == "Looks good"

    def test_missing_body(self):
        assert extract_comment_body({}) == ""
        assert extract_comment_body(None) == ""
