"""Domain models for Git Monitor."""

from git_monitor.models.config import AppConfig, GroupConfig, ProjectConfig
from git_monitor.models.status import (
    DashboardSnapshot,
    GroupResult,
    ProjectResult,
    RepoStatus,
)

__all__ = [
    # Config
    "AppConfig",
    "GroupConfig",
    "ProjectConfig",
    # Status
    "DashboardSnapshot",
    "GroupResult",
    "ProjectResult",
    "RepoStatus",
]
