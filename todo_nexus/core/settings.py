"""Application settings and configuration utilities."""

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from todo_nexus import __version__

# Load environment variables from .env file
load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Immutable application settings derived from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Todo Nexus")
    version: str = os.getenv("PROJECT_VERSION", __version__)
    environment: str = os.getenv("ENVIRONMENT", "local")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Store defaults
    default_priority: str = os.getenv("DEFAULT_PRIORITY", "medium")
    default_category: str = os.getenv("DEFAULT_CATEGORY", "general")
    default_filter: str = os.getenv("DEFAULT_FILTER", "all")
    default_sort: str = os.getenv("DEFAULT_SORT", "newest")

    seed_demo_data: bool = os.getenv("SEED_DEMO_DATA", "false").lower() == "true"


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()
