from fastapi import HTTPException, status


class EnrichmentError(Exception):
    """Base error for the analysis and update core."""


class PreconditionError(EnrichmentError):
    """Raised when a request is rejected before any batch work starts."""


class ConfigurationError(EnrichmentError):
    """Raised when a client cannot be initialized from the current settings."""


class ScoringResponseError(EnrichmentError):
    """Raised when a delegated scoring response cannot be used."""


class ValidationError(HTTPException):
    """Raised when request validation fails."""

    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message,
        )


class UpstreamError(HTTPException):
    """Raised when Jira or the scoring delegate fails for the whole request."""

    def __init__(self, message: str, status_code: int = status.HTTP_502_BAD_GATEWAY):
        super().__init__(
            status_code=status_code,
            detail=message,
        )
