"""
Jira API operations.

Provides the two remote operations the enrichment core depends on:
- Paginated issue search (drains every page before returning)
- Single-issue field edit
"""

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from jira_ai_fields.config.field_mapping import JIRA_SEARCH_FIELDS
from jira_ai_fields.config.settings import Settings
from jira_ai_fields.services.jira.exceptions import JiraAPIError
from jira_ai_fields.services.jira.helpers import handle_error_response
from jira_ai_fields.services.jira.http_client import create_jira_http_client
from jira_ai_fields.services.jira.types import IssueQuery, JiraIssue

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 100


def _json_object(response: httpx.Response, context: str) -> dict[str, Any]:
    """Decode a successful response body that must be a JSON object."""
    try:
        data = response.json()
    except ValueError as e:
        raise JiraAPIError(f"Invalid JSON in Jira response for {context}: {e}") from e
    if not isinstance(data, dict):
        raise JiraAPIError(f"Unexpected Jira response for {context}: expected a JSON object")
    return data


class JiraClient:
    """
    Jira REST v3 client.

    Owns one pooled httpx.AsyncClient for its whole lifetime; call
    ``aclose()`` on shutdown.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        page_size: int = DEFAULT_PAGE_SIZE,
        field_ids: Mapping[str, str] | None = None,
    ):
        self._http = http_client
        self.page_size = max(1, page_size)
        self.field_ids = dict(field_ids or {})

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "JiraClient":
        """Validate Jira settings and build a client (raises ConfigurationError)."""
        settings.validate_jira()
        http_client = create_jira_http_client(
            settings.jira_base_url,
            settings.jira_email,
            settings.jira_api_token,
            timeout=settings.jira_timeout_seconds,
            transport=transport,
        )
        return cls(
            http_client,
            page_size=settings.jira_page_size,
            field_ids=settings.jira_field_ids,
        )

    async def aclose(self) -> None:
        if not self._http.is_closed:
            await self._http.aclose()

    async def _request(self, method: str, url: str, context: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise JiraAPIError(f"Jira request failed for {context}: {e}") from e

        handle_error_response(response, context)
        return response

    async def fetch_all_issues(self, query: IssueQuery) -> list[JiraIssue]:
        """
        Fetch every issue matching a query, paging through /search.

        Pages are requested strictly in sequence: each request depends on
        whether the previous page was the last one.

        Args:
            query: Project/status selection or explicit JQL

        Returns:
            All matching issues in the order Jira returned them
        """
        jql = query.to_jql()
        issues: list[JiraIssue] = []
        start_at = 0

        while True:
            response = await self._request(
                "GET",
                "/search",
                "search",
                params={
                    "jql": jql,
                    "startAt": start_at,
                    "maxResults": self.page_size,
                    "fields": ",".join(JIRA_SEARCH_FIELDS),
                    "expand": "renderedFields,names",
                },
            )
            data = _json_object(response, "search")
            batch = data.get("issues") or []
            if not isinstance(batch, list):
                raise JiraAPIError("Unexpected Jira search response: issues is not a list")
            issues.extend(batch)
            start_at += len(batch)

            logger.debug(f"Fetched {len(batch)} issues (startAt now {start_at}) for: {jql}")

            if isinstance(data.get("isLast"), bool):
                is_last = data["isLast"]
            else:
                total = data.get("total")
                is_last = start_at >= (total if total is not None else len(issues))

            # An empty page can never advance startAt
            if is_last or not batch:
                break

        logger.info(f"Fetched {len(issues)} issues for: {jql}")
        return issues

    async def update_issue_fields(self, issue_id: str, fields: Mapping[str, Any]) -> None:
        """
        Write field values to one issue.

        Keys are translated through ``field_ids`` when a Jira field id is
        configured for them; unmapped keys are sent as-is.
        """
        payload = {"fields": {self.field_ids.get(key, key): value for key, value in fields.items()}}
        await self._request(
            "PUT",
            f"/issue/{quote(issue_id, safe='')}",
            f"issue {issue_id}",
            json=payload,
        )
        logger.debug(f"Updated {len(fields)} fields on {issue_id}")
