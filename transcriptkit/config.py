"""Hosting configuration loaded from the environment."""

import os

from dotenv import load_dotenv

from .models import FetchConfig

# Load environment variables from .env file (don't override existing env vars)
load_dotenv(override=False)


class Config:
    """Web application configuration."""

    HOST: str = os.getenv("TRANSCRIPTKIT_HOST", "127.0.0.1")
    PORT: int = int(os.getenv("TRANSCRIPTKIT_PORT", "5000"))
    LOG_LEVEL: str = os.getenv("TRANSCRIPTKIT_LOG_LEVEL", "INFO").upper()
    TIMEOUT: int = int(os.getenv("TRANSCRIPTKIT_TIMEOUT", "30"))

    @classmethod
    def fetch_config(cls) -> FetchConfig:
        """Build the FetchConfig used for requests served by the web app."""
        return FetchConfig(timeout=cls.TIMEOUT)
