"""
Jira service package.

Usage: `from jira_ai_fields.services.jira import JiraClient, IssueQuery`

Module structure:
- client.py: JiraClient (paginated search + field edit)
- http_client.py: httpx.AsyncClient construction
- helpers.py: Error response handling
- text.py: ADF to plain text helpers
- types.py: Query and issue types
- exceptions.py: Custom exceptions
"""

from jira_ai_fields.services.jira.client import JiraClient
from jira_ai_fields.services.jira.exceptions import JiraAPIError
from jira_ai_fields.services.jira.helpers import handle_error_response
from jira_ai_fields.services.jira.http_client import create_jira_http_client
from jira_ai_fields.services.jira.text import adf_to_text, extract_comment_body
from jira_ai_fields.services.jira.types import IssueQuery, JiraIssue

__all__ = [
    "JiraClient",
    "create_jira_http_client",
    "handle_error_response",
    "JiraAPIError",
    "IssueQuery",
    "JiraIssue",
    "adf_to_text",
    "extract_comment_body",
]
