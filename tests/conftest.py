"""Root conftest: shared fixtures for all tests.

Provides:
- A fixed "now" so rule-based scores are reproducible
- Settings isolated from the developer's environment and .env file
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from jira_ai_fields.config.settings import Settings

FIXED_NOW = datetime(2025, 6, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def test_settings() -> Settings:
    """Fully configured settings; no env file is read."""
    return Settings(
        _env_file=None,
        jira_base_url="https://example.atlassian.net",
        jira_email="bot@example.com",
        jira_api_token="test-token",
        anthropic_api_key="",
        scoring_engine="rule",
        analysis_concurrency=3,
        default_status_filter="未着手",
    )
