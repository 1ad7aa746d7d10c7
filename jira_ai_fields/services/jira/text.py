"""Plain-text extraction for Atlassian Document Format (ADF) values."""

from typing import Any


def _flatten_content(content: list[Any] | None) -> str:
    parts = []
    for node in content or []:
        if not isinstance(node, dict):
            parts.append("")
        elif isinstance(node.get("text"), str):
            parts.append(node["text"])
        elif isinstance(node.get("content"), list):
            parts.append(_flatten_content(node["content"]))
        else:
            parts.append("")
    return " ".join(parts).strip()


def adf_to_text(value: Any) -> str:
    """
    Convert a Jira rich-text value to plain text.

    Plain strings pass through. ADF documents are flattened block by block:
    inline nodes are joined with spaces and top-level blocks with newlines.
    Anything else yields an empty string.
    """
    if not value:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, dict) and value.get("type") == "doc" and isinstance(
        value.get("content"), list
    ):
        blocks = [
            _flatten_content(node.get("content")) if isinstance(node, dict) else ""
            for node in value["content"]
        ]
        return "\n".join(blocks).strip()
    return ""


def extract_comment_body(comment: Any) -> str:
    """Return the textual body of a Jira comment (string or ADF body)."""
    if not comment or not isinstance(comment, dict):
        return ""
    body = comment.get("body")
    if isinstance(body, str):
        return body
    if isinstance(body, dict) and body.get("content"):
        return adf_to_text(body)
    return ""
