"""Configuration settings for the interactive WebDriver client."""

import logging
from typing import Optional
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application configuration from environment variables."""

    # WebDriver server
    server_url: str = "http://localhost:4444/"
    default_browser: str = "chrome"

    # None keeps httpx's default transport timeout
    request_timeout_seconds: Optional[float] = None

    # MCP server settings
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "INTERACTIVE_WEBDRIVER_"}

    @property
    def normalized_server_url(self) -> str:
        """Server URL with exactly one trailing slash."""
        return self.server_url.rstrip("/") + "/"


# Global settings instance
settings = Settings()
