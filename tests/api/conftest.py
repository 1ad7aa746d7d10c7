"""API test fixtures: the FastAPI app wired to in-memory collaborators.

The app lifespan is not run; orchestrators are injected through
dependency_overrides so no Jira or Anthropic client is ever built.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from httpx import ASGITransport, AsyncClient

from jira_ai_fields.api.deps import (
    get_analysis_orchestrator,
    get_settings,
    get_update_orchestrator,
)
from jira_ai_fields.main import app
from jira_ai_fields.services.enrichment import BatchAnalysisOrchestrator, BatchUpdateOrchestrator
from jira_ai_fields.services.scoring import RuleBasedScorer
from tests.helpers.mock_factories import FakeFetcher, RecordingUpdater, make_issue

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher([make_issue("WD-1", summary="Idea one"), make_issue("WD-2")])


@pytest.fixture
def updater() -> RecordingUpdater:
    return RecordingUpdater()


@pytest.fixture
async def api_client(test_settings, fetcher, updater):
    """AsyncClient against the app with services overridden."""
    analysis = BatchAnalysisOrchestrator(
        fetcher,
        RuleBasedScorer(clock=lambda: NOW),
        concurrency=2,
        clock=lambda: NOW,
    )
    update = BatchUpdateOrchestrator(updater, concurrency=2)

    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_analysis_orchestrator] = lambda: analysis
    app.dependency_overrides[get_update_orchestrator] = lambda: update

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
async def bare_client():
    """AsyncClient against the app with no services built."""
    app.dependency_overrides.clear()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
