from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jira_ai_fields.core.exceptions import ConfigurationError

SCORING_ENGINES = ("rule", "anthropic")


def coerce_concurrency(value: object) -> int:
    """Coerce a configured worker count to an integer of at least 1."""
    try:
        count = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return 1
    return max(1, count)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Jira - site root, e.g. https://your-team.atlassian.net
    jira_base_url: str = ""
    jira_email: str = ""
    jira_api_token: str = ""
    # maxResults per /search page (Jira caps this at 100)
    jira_page_size: int = 100
    jira_timeout_seconds: float = 30.0
    # Optional ai_* name -> Jira field id map applied on write,
    # e.g. JIRA_FIELD_IDS='{"ai_impact_score": "customfield_10071"}'
    jira_field_ids: dict[str, str] = {}

    # AI / Anthropic (only used when scoring_engine == "anthropic")
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-20250514"

    # Analysis
    scoring_engine: str = "rule"
    analysis_concurrency: int = 5
    default_status_filter: str = "未着手"

    # Application
    debug: bool = False

    @field_validator("analysis_concurrency", mode="before")
    @classmethod
    def _coerce_concurrency(cls, value: object) -> int:
        return coerce_concurrency(value)

    @property
    def concurrency(self) -> int:
        """Worker pool size shared by both orchestrators (never below 1)."""
        return coerce_concurrency(self.analysis_concurrency)

    @property
    def anthropic_enabled(self) -> bool:
        """Check if the delegated scoring strategy is selected."""
        return (self.scoring_engine or "").strip().lower() == "anthropic"

    def missing_jira_settings(self) -> list[str]:
        """Return the names of required Jira variables that are unset."""
        missing = []
        if not self.jira_base_url:
            missing.append("JIRA_BASE_URL")
        if not self.jira_email:
            missing.append("JIRA_EMAIL")
        if not self.jira_api_token:
            missing.append("JIRA_API_TOKEN")
        return missing

    def validate_jira(self) -> None:
        missing = self.missing_jira_settings()
        if missing:
            raise ConfigurationError(
                f"Missing required Jira environment variables: {', '.join(missing)}"
            )

    def validate_scoring(self) -> None:
        engine = (self.scoring_engine or "").strip().lower()
        if engine not in SCORING_ENGINES:
            raise ConfigurationError(
                f"Unknown scoring engine '{self.scoring_engine}'. "
                f"Expected one of: {', '.join(SCORING_ENGINES)}"
            )
        if engine == "anthropic" and not self.anthropic_api_key:
            raise ConfigurationError("Missing required environment variable: ANTHROPIC_API_KEY")


settings = Settings()
