"""
Service wiring.

Builds the Jira client, the configured scorer and both orchestrators once,
so front ends share a single connection pool and never reach for hidden
module-level clients.
"""

import logging
from dataclasses import dataclass

import httpx

from jira_ai_fields.config.settings import Settings
from jira_ai_fields.services.enrichment import BatchAnalysisOrchestrator, BatchUpdateOrchestrator
from jira_ai_fields.services.jira import JiraClient
from jira_ai_fields.services.scoring import IssueScorer, build_scorer

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Long-lived collaborators for one process."""

    jira: JiraClient
    scorer: IssueScorer
    analysis: BatchAnalysisOrchestrator
    update: BatchUpdateOrchestrator

    async def aclose(self) -> None:
        await self.jira.aclose()


def build_container(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ServiceContainer:
    """
    Construct every service from settings.

    Raises:
        ConfigurationError: If Jira credentials or the scoring engine
            configuration are missing or invalid
    """
    scorer = build_scorer(settings)
    jira = JiraClient.from_settings(settings, transport=transport)

    logger.info(
        f"Services ready: scorer={scorer.name}, concurrency={settings.concurrency}, "
        f"page_size={jira.page_size}"
    )
    return ServiceContainer(
        jira=jira,
        scorer=scorer,
        analysis=BatchAnalysisOrchestrator(jira, scorer, concurrency=settings.concurrency),
        update=BatchUpdateOrchestrator(jira, concurrency=settings.concurrency),
    )
