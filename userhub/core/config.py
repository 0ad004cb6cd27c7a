from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Environment mode: dev or prod
    ENV: Literal["dev", "prod"] = "dev"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True
    SLACK_WEBHOOK_URL: str | None = None

    # Docs Configuration
    DOCS_ENABLED: bool | None = None  # Override docs setting (None = auto based on ENV)

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",  # ignore unrelated keys in local .env
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENV == "prod"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENV == "dev"

    @property
    def debug_enabled(self) -> bool:
        """Debug mode is only enabled in development."""
        return self.is_development

    @property
    def effective_log_level(self) -> str:
        """Return appropriate log level based on environment."""
        if self.is_production:
            # Production never logs below INFO
            return self.LOG_LEVEL if self.LOG_LEVEL.upper() != "DEBUG" else "INFO"
        return self.LOG_LEVEL

    @property
    def docs_enabled(self) -> bool:
        """Swagger/ReDoc docs enabled based on environment or override."""
        if self.DOCS_ENABLED is not None:
            return self.DOCS_ENABLED
        return self.is_development


settings = Settings()
