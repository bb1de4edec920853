"""Maps configured projects to the paths the classifier inspects."""

from typing import NamedTuple

from git_monitor.models.config import ProjectConfig

DEFAULT_GIT_DIR = ".git"


class ResolvedProject(NamedTuple):
    working_path: str
    git_dir: str


def resolve(project: ProjectConfig) -> ResolvedProject:
    """Return the working path and git directory for a project.

    An explicit git_dir is used verbatim; otherwise it is <path>/.git.
    """
    git_dir = project.git_dir or f"{project.path}/{DEFAULT_GIT_DIR}"
    return ResolvedProject(working_path=project.path, git_dir=git_dir)
