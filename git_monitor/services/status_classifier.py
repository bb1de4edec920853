"""Repository status classification.

Determines a single RepoStatus for a working directory by running a fixed
sequence of git queries and applying an ordered decision policy:

1. Working path missing            -> PATH_NOT_FOUND
2. ``git log -1`` diagnostics       -> NOT_A_GIT_REPO / NO_COMMITS_YET / UNKNOWN_ERROR
3. ``git status --porcelain=v1``    -> UNKNOWN_ERROR / UNTRACKED_FILES / UNCOMMITTED_CHANGES
4. ``git rev-list --count @{u}..HEAD`` -> UNPUSHED_CHANGES
5. ``git rev-list --count HEAD..@{u}`` -> UNPULLED_CHANGES
6. Otherwise                       -> OKAY

The first matching step wins. Later queries are not issued once a status
has been decided.
"""

import logging
import os

from git_monitor.models.status import RepoStatus
from git_monitor.services.command_runner import CommandResult, CommandRunner

logger = logging.getLogger(__name__)

# Lets git follow a --git-dir that lives on a different filesystem
GIT_ENV = {"GIT_DISCOVERY_ACROSS_FILESYSTEM": "true"}

UNTRACKED_CODE = "??"

# (stderr marker, status), checked in order
HISTORY_MARKERS: tuple[tuple[str, RepoStatus], ...] = (
    ("not a git repository", RepoStatus.NOT_A_GIT_REPO),
    ("does not have any commits", RepoStatus.NO_COMMITS_YET),
    ("fatal", RepoStatus.UNKNOWN_ERROR),
)

WORKTREE_MARKERS: tuple[tuple[str, RepoStatus], ...] = (("fatal", RepoStatus.UNKNOWN_ERROR),)


def match_marker(
    stderr: str, markers: tuple[tuple[str, RepoStatus], ...]
) -> RepoStatus | None:
    """Return the status of the first marker found in stderr, if any."""
    for marker, status in markers:
        if marker in stderr:
            return status
    return None


def parse_porcelain(stdout: str) -> list[str]:
    """Extract the two-character status codes from porcelain v1 output."""
    return [line[:2] for line in stdout.splitlines() if line.strip()]


def status_from_porcelain(codes: list[str]) -> RepoStatus | None:
    """Map working tree status codes to a status, or None when clean."""
    if UNTRACKED_CODE in codes:
        return RepoStatus.UNTRACKED_FILES
    if codes:
        return RepoStatus.UNCOMMITTED_CHANGES
    return None


def parse_count(stdout: str) -> int:
    """Parse ``rev-list --count`` output.

    Anything that is not an integer (e.g. no upstream configured) counts as 0.
    """
    try:
        return int(stdout.strip())
    except ValueError:
        return 0


def path_missing(working_path: str) -> bool:
    """True when nothing exists at working_path.

    Uses lstat so a dangling symlink counts as present. Errors other than
    "missing" (e.g. permission denied) also count as present and are left
    for the git queries to report.
    """
    try:
        os.lstat(working_path)
    except (FileNotFoundError, NotADirectoryError):
        return True
    except OSError:
        return False
    return False


class StatusClassifier:
    """Classifies a working directory into exactly one RepoStatus."""

    def __init__(
        self,
        runner: CommandRunner | None = None,
        git_binary: str = "git",
    ):
        """Initialize the classifier.

        Args:
            runner: Command runner used for git queries. Creates one if not provided.
            git_binary: Git executable to invoke.
        """
        self._runner = runner or CommandRunner()
        self.git_binary = git_binary

    def classify(self, working_path: str, git_dir: str) -> RepoStatus:
        """Determine the status of a working directory.

        Args:
            working_path: Directory whose contents are inspected.
            git_dir: Git directory tracking working_path.

        Returns:
            The most severe applicable RepoStatus.
        """
        if path_missing(working_path):
            return RepoStatus.PATH_NOT_FOUND

        history = self._git(working_path, git_dir, "log", "-1")
        if not history.completed:
            return RepoStatus.UNKNOWN_ERROR
        status = match_marker(history.stderr, HISTORY_MARKERS)
        if status is not None:
            return status

        worktree = self._git(working_path, git_dir, "status", "--porcelain=v1")
        if not worktree.completed:
            return RepoStatus.UNKNOWN_ERROR
        status = match_marker(worktree.stderr, WORKTREE_MARKERS)
        if status is not None:
            return status
        status = status_from_porcelain(parse_porcelain(worktree.stdout))
        if status is not None:
            return status

        ahead = self._git(working_path, git_dir, "rev-list", "--count", "@{u}..HEAD")
        if not ahead.completed:
            return RepoStatus.UNKNOWN_ERROR
        if parse_count(ahead.stdout) > 0:
            return RepoStatus.UNPUSHED_CHANGES

        behind = self._git(working_path, git_dir, "rev-list", "--count", "HEAD..@{u}")
        if not behind.completed:
            return RepoStatus.UNKNOWN_ERROR
        if parse_count(behind.stdout) > 0:
            return RepoStatus.UNPULLED_CHANGES

        return RepoStatus.OKAY

    def _git(self, working_path: str, git_dir: str, *args: str) -> CommandResult:
        """Run a git query against an explicit work tree and git directory."""
        result = self._runner.run(
            [
                self.git_binary,
                f"--work-tree={working_path}",
                f"--git-dir={git_dir}",
                *args,
            ],
            env=GIT_ENV,
        )
        if not result.completed:
            logger.debug(f"git {args[0]} did not complete for {working_path}: {result.stderr}")
        return result
