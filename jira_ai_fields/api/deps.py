"""API dependencies: access to the services built at startup."""

from fastapi import Request, status

from jira_ai_fields.config.settings import Settings
from jira_ai_fields.core.exceptions import UpstreamError
from jira_ai_fields.services.container import ServiceContainer
from jira_ai_fields.services.enrichment import BatchAnalysisOrchestrator, BatchUpdateOrchestrator


def get_settings(request: Request) -> Settings:
    settings: Settings = request.app.state.settings
    return settings


def get_services(request: Request) -> ServiceContainer:
    """Return the service container, or 503 if startup could not build it."""
    services: ServiceContainer | None = getattr(request.app.state, "services", None)
    if services is None:
        reason = getattr(request.app.state, "startup_error", None) or "Services not initialized"
        raise UpstreamError(reason, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    return services


def get_analysis_orchestrator(request: Request) -> BatchAnalysisOrchestrator:
    return get_services(request).analysis


def get_update_orchestrator(request: Request) -> BatchUpdateOrchestrator:
    return get_services(request).update
