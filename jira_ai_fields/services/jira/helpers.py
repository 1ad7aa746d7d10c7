"""
Jira API helper utilities.

Error response processing shared by the read (search) and write (edit)
operations of the Jira client.
"""

import logging

import httpx

from jira_ai_fields.services.jira.exceptions import JiraAPIError

logger = logging.getLogger(__name__)


def extract_error_messages(response: httpx.Response) -> str | None:
    """
    Pull Jira's human-readable error text out of a failed response.

    Jira returns ``{"errorMessages": [...], "errors": {field: message}}``
    for most 4xx responses.

    Returns:
        Joined messages, or None if the body has none
    """
    try:
        body = response.json()
    except ValueError:
        return None

    if not isinstance(body, dict):
        return None

    messages = [str(m) for m in body.get("errorMessages") or []]
    errors = body.get("errors") or {}
    if isinstance(errors, dict):
        messages.extend(f"{field}: {message}" for field, message in errors.items())

    return "; ".join(messages) or None


def handle_error_response(response: httpx.Response, context: str) -> None:
    """
    Handle common error responses from Jira API.

    Args:
        response: The HTTP response from Jira API
        context: What was being requested (e.g. "search", "issue WD-101")

    Raises:
        JiraAPIError: For authentication, authorization, or other API errors
    """
    if response.is_success:
        return

    detail = extract_error_messages(response)
    suffix = f": {detail}" if detail else ""

    if response.status_code == 401:
        raise JiraAPIError("Invalid Jira credentials", 401)
    elif response.status_code == 403:
        raise JiraAPIError(f"Jira API forbidden for {context}{suffix}", 403)
    elif response.status_code == 404:
        raise JiraAPIError(f"Jira resource not found: {context}{suffix}", 404)
    elif response.status_code == 429:
        logger.warning(f"Jira rate limit hit for {context}")
        raise JiraAPIError("Jira API rate limit exceeded", 429)

    raise JiraAPIError(
        f"Jira API error {response.status_code} for {context}{suffix}",
        response.status_code,
    )
