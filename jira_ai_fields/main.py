import logging
import sys
from contextlib import asynccontextmanager
from typing import TextIO

from fastapi import FastAPI, Request

from jira_ai_fields import __version__
from jira_ai_fields.api.router import api_router
from jira_ai_fields.config import settings
from jira_ai_fields.core.exceptions import ConfigurationError
from jira_ai_fields.services.container import build_container


def setup_logging(debug: bool = False, stream: TextIO = sys.stdout) -> None:
    """Configure application logging."""
    # Format: timestamp - level - logger name - message
    log_format = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
    date_format = "%H:%M:%S"

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=log_format,
        datefmt=date_format,
        stream=stream,
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("anthropic").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: build services once, close them on shutdown."""
    setup_logging(settings.debug)
    logger.info("Jira AI field service starting up")

    app.state.settings = settings
    app.state.services = None
    try:
        app.state.services = build_container(settings)
    except ConfigurationError as e:
        # Keep serving /health; ticket endpoints answer 503 with this reason
        app.state.startup_error = str(e)
        logger.error(f"Service configuration invalid: {e}")

    yield

    if app.state.services is not None:
        await app.state.services.aclose()
    logger.info("Jira AI field service shutting down")


app = FastAPI(
    title="Jira AI Field Auto",
    description="Derives AI prioritization fields for Jira Product Discovery ideas",
    version=__version__,
    lifespan=lifespan,
)
app.state.settings = settings


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log failed requests and every analyze/update call."""
    if request.method == "OPTIONS" or request.url.path == "/health":
        return await call_next(request)

    response = await call_next(request)

    path = request.url.path
    if response.status_code >= 400 or any(
        keyword in path for keyword in ["analyze", "update-fields"]
    ):
        logger.info(f"{request.method} {path} → {response.status_code}")

    return response


app.include_router(api_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
