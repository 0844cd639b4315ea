"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Values are validated at load time.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults. database_url may be left empty for
    processes that never touch the issue store (the search endpoint then
    answers 503 via SqlNotConfiguredException).
    """

    # App
    app_name: str = "monitor-search"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (SQLAlchemy async URL, e.g. mysql+aiomysql://... or sqlite+aiosqlite://)
    database_url: str = ""
    database_echo: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None

    # Search provider
    monitor_enabled: bool = True
    search_issue_text: bool = True
    search_target: str = ""
    issue_href_base: str = "index.php?option=com_monitor&view=issue"

    # Caller access levels: set by the host's authentication gateway.
    view_levels_header: str = "X-View-Levels"
    guest_view_levels: str = "1"

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("guest_view_levels")
    @classmethod
    def validate_guest_view_levels(cls, value: str) -> str:
        """Reject guest levels that are not a comma-separated list of integers."""
        for part in value.split(","):
            part = part.strip()
            if part and not part.lstrip("-").isdigit():
                raise ValueError(
                    f"GUEST_VIEW_LEVELS must be comma-separated integers, got: {value!r}"
                )
        return value

    @property
    def guest_view_level_ids(self) -> tuple[int, ...]:
        """Guest view levels parsed to integers (empty entries skipped)."""
        return tuple(
            int(part) for part in self.guest_view_levels.split(",") if part.strip()
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
