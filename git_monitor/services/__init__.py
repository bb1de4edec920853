"""Services for Git Monitor."""

from git_monitor.services.command_runner import CommandResult, CommandRunner
from git_monitor.services.config_service import ConfigError, ConfigService
from git_monitor.services.dashboard_service import DashboardService
from git_monitor.services.project_resolver import ResolvedProject, resolve
from git_monitor.services.status_classifier import StatusClassifier

__all__ = [
    # Command runner
    "CommandResult",
    "CommandRunner",
    # Config
    "ConfigError",
    "ConfigService",
    # Dashboard
    "DashboardService",
    # Resolver
    "ResolvedProject",
    "resolve",
    # Classifier
    "StatusClassifier",
]
