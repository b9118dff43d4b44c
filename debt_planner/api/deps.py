"""FastAPI dependency injection."""

from debt_planner.config import Settings, settings


def get_settings() -> Settings:
    return settings
