"""Repository status values and per-request classification results."""

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from git_monitor.models.config import ProjectConfig


class RepoStatus(str, Enum):
    """Outcome of classifying one working directory.

    Members are declared most severe first. The classifier returns the first
    applicable status in this order and never replaces it with a later one.
    """

    PATH_NOT_FOUND = "Path does not exist"
    NOT_A_GIT_REPO = "Not a git repo"
    NO_COMMITS_YET = "No commits yet"
    UNKNOWN_ERROR = "Unknown Error"
    UNTRACKED_FILES = "Untracked files"
    UNCOMMITTED_CHANGES = "Uncommitted changes"
    UNPUSHED_CHANGES = "Ahead of remote branch"
    UNPULLED_CHANGES = "Behind remote branch"
    OKAY = "Okay!"

    @property
    def label(self) -> str:
        return self.value

    @property
    def severity(self) -> int:
        """Position in the precedence order (0 is most severe)."""
        return list(RepoStatus).index(self)

    @property
    def level(self) -> str:
        """Bulma colour level: danger, warning or success."""
        return _LEVELS[self]

    @property
    def icon(self) -> str:
        """Font Awesome icon classes for the dashboard card."""
        return _ICONS[self]

    @property
    def text_class(self) -> str:
        return f"has-text-{self.level}"


_LEVELS = {
    RepoStatus.PATH_NOT_FOUND: "danger",
    RepoStatus.NOT_A_GIT_REPO: "danger",
    RepoStatus.NO_COMMITS_YET: "warning",
    RepoStatus.UNKNOWN_ERROR: "danger",
    RepoStatus.UNTRACKED_FILES: "warning",
    RepoStatus.UNCOMMITTED_CHANGES: "warning",
    RepoStatus.UNPUSHED_CHANGES: "warning",
    RepoStatus.UNPULLED_CHANGES: "warning",
    RepoStatus.OKAY: "success",
}

_ICONS = {
    RepoStatus.PATH_NOT_FOUND: "fa-exclamation-circle",
    RepoStatus.NOT_A_GIT_REPO: "fa-exclamation-circle",
    RepoStatus.NO_COMMITS_YET: "fa-baby",
    RepoStatus.UNKNOWN_ERROR: "fa-exclamation-circle",
    RepoStatus.UNTRACKED_FILES: "fa-search",
    RepoStatus.UNCOMMITTED_CHANGES: "fa-pencil-alt",
    RepoStatus.UNPUSHED_CHANGES: "fa-exchange-alt fa-rotate-90",
    RepoStatus.UNPULLED_CHANGES: "fa-exchange-alt fa-rotate-90",
    RepoStatus.OKAY: "fa-check-circle",
}


@dataclass(frozen=True)
class ProjectResult:
    """Status computed for one project during a single dashboard pass."""

    project: ProjectConfig
    status: RepoStatus
    duration_ms: float = 0.0


@dataclass(frozen=True)
class GroupResult:
    """Results for one configured group, in configuration order."""

    title: str
    results: list[ProjectResult]


@dataclass(frozen=True)
class DashboardSnapshot:
    """A point-in-time classification of every configured project."""

    groups: list[GroupResult]
    generated_at: datetime = field(default_factory=datetime.now)

    @property
    def all_results(self) -> list[ProjectResult]:
        return [result for group in self.groups for result in group.results]

    @property
    def worst_status(self) -> RepoStatus | None:
        """Most severe status across all projects, or None when empty."""
        results = self.all_results
        if not results:
            return None
        return min((r.status for r in results), key=lambda s: s.severity)

    def status_counts(self) -> dict[RepoStatus, int]:
        """Count projects per status, ordered by severity."""
        counts = Counter(r.status for r in self.all_results)
        return {status: counts[status] for status in RepoStatus if counts[status]}
