"""Dashboard classification pass.

Classifies every configured project concurrently, one task per project,
and waits for all of them before returning a snapshot. A failure while
classifying one project is reported as UNKNOWN_ERROR for that project
and never affects the others.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor

from git_monitor.models.config import AppConfig, ProjectConfig
from git_monitor.models.status import DashboardSnapshot, GroupResult, ProjectResult, RepoStatus
from git_monitor.services.command_runner import CommandRunner
from git_monitor.services.project_resolver import resolve
from git_monitor.services.status_classifier import StatusClassifier

logger = logging.getLogger(__name__)


class DashboardService:
    """Produces fresh dashboard snapshots from a read-only configuration."""

    def __init__(self, config: AppConfig, classifier: StatusClassifier | None = None):
        """Initialize the dashboard service.

        Args:
            config: Loaded application configuration.
            classifier: Status classifier. Built from config if not provided.
        """
        self.config = config
        self._classifier = classifier or StatusClassifier(
            runner=CommandRunner(timeout=config.probe_timeout),
            git_binary=config.git_binary,
        )

    def classify_project(self, project: ProjectConfig) -> ProjectResult:
        """Classify a single project.

        Never raises; unexpected errors become UNKNOWN_ERROR.
        """
        started = time.monotonic()
        try:
            working_path, git_dir = resolve(project)
            status = self._classifier.classify(working_path, git_dir)
        except Exception:
            logger.warning(f"Error while checking status of project '{project.name}'", exc_info=True)
            status = RepoStatus.UNKNOWN_ERROR

        duration_ms = (time.monotonic() - started) * 1000
        logger.debug(f"{project.name}: {status.label} ({duration_ms:.0f}ms)")
        return ProjectResult(project=project, status=status, duration_ms=duration_ms)

    def collect(self) -> DashboardSnapshot:
        """Run one classification pass over all configured projects.

        Returns:
            DashboardSnapshot with results in configuration order.
        """
        started = time.monotonic()
        with ThreadPoolExecutor(
            max_workers=self.config.max_workers,
            thread_name_prefix="git-monitor-",
        ) as executor:
            futures = [
                [executor.submit(self.classify_project, project) for project in group.projects]
                for group in self.config.groups
            ]
            groups = [
                GroupResult(
                    title=group.title,
                    results=[future.result() for future in group_futures],
                )
                for group, group_futures in zip(self.config.groups, futures)
            ]

        snapshot = DashboardSnapshot(groups=groups)
        logger.info(
            f"Checked {len(snapshot.all_results)} projects in "
            f"{(time.monotonic() - started) * 1000:.0f}ms"
        )
        return snapshot
