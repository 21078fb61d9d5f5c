"""FastAPI dependency injection helpers."""

from src.config import Settings, settings
from src.domain.planner import BackloadPlanner


def get_settings() -> Settings:
    return settings


def get_planner() -> BackloadPlanner:
    """Planner bound to the process-wide settings; stateless, cheap to build."""
    return BackloadPlanner(settings)
