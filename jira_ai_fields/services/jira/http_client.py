"""
HTTP client construction for Jira REST API calls.

One AsyncClient is built per JiraClient at startup and passed in explicitly,
so connections are pooled across every page fetch and field update of a
batch without any module-level state.
"""

import logging

import httpx

logger = logging.getLogger(__name__)

JIRA_API_PATH = "/rest/api/3"


def build_api_base_url(site_url: str) -> str:
    """Return the REST v3 base URL for a Jira site root."""
    return f"{site_url.rstrip('/')}{JIRA_API_PATH}"


def create_jira_http_client(
    site_url: str,
    email: str,
    api_token: str,
    timeout: float = 30.0,
    max_connections: int = 20,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Create the HTTP client used for Jira API calls.

    Args:
        site_url: Jira site root, e.g. "https://team.atlassian.net"
        email: Account email for basic auth
        api_token: API token for basic auth
        timeout: Per-request timeout in seconds
        max_connections: Connection pool ceiling
        transport: Optional transport override (tests use httpx.MockTransport)

    Returns:
        httpx.AsyncClient with base URL, auth and JSON headers configured
    """
    client = httpx.AsyncClient(
        base_url=build_api_base_url(site_url),
        auth=httpx.BasicAuth(email, api_token),
        headers={
            "Content-Type": "application/json",
            "Accept": "application/json",
        },
        timeout=httpx.Timeout(timeout, connect=5.0),
        limits=httpx.Limits(max_connections=max_connections, max_keepalive_connections=10),
        transport=transport,
    )
    logger.debug(f"Created Jira HTTP client for {site_url}")
    return client
