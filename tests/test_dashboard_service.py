"""Tests for DashboardService."""

import threading
from unittest.mock import MagicMock

import pytest

from git_monitor.models import AppConfig, GroupConfig, ProjectConfig, RepoStatus
from git_monitor.services.command_runner import CommandRunner
from git_monitor.services.dashboard_service import DashboardService
from git_monitor.services.status_classifier import StatusClassifier
from tests.git_helpers import requires_git


@pytest.fixture
def config():
    """A config with two groups."""
    return AppConfig(
        groups=[
            GroupConfig(
                title="Work",
                projects=[
                    ProjectConfig(name="api", path="/srv/api"),
                    ProjectConfig(name="web", path="/srv/web", gitDir="/git/web"),
                ],
            ),
            GroupConfig(title="Home", projects=[ProjectConfig(name="dotfiles", path="/home/me")]),
        ],
        max_workers=4,
    )


@pytest.fixture
def classifier():
    """Create a mock StatusClassifier."""
    classifier = MagicMock(spec=StatusClassifier)
    classifier.classify.return_value = RepoStatus.OKAY
    return classifier


class TestClassifyProject:
    """Tests for classify_project."""

    def test_uses_resolved_paths(self, config, classifier):
        """The classifier receives the working path and resolved git dir."""
        service = DashboardService(config, classifier=classifier)

        service.classify_project(config.groups[0].projects[1])

        classifier.classify.assert_called_once_with("/srv/web", "/git/web")

    def test_returns_result(self, config, classifier):
        classifier.classify.return_value = RepoStatus.UNTRACKED_FILES
        service = DashboardService(config, classifier=classifier)
        project = config.groups[0].projects[0]

        result = service.classify_project(project)

        assert result.project is project
        assert result.status == RepoStatus.UNTRACKED_FILES
        assert result.duration_ms >= 0

    def test_exception_becomes_unknown_error(self, config, classifier):
        """Unexpected errors are contained to the project."""
        classifier.classify.side_effect = RuntimeError("boom")
        service = DashboardService(config, classifier=classifier)

        result = service.classify_project(config.groups[0].projects[0])

        assert result.status == RepoStatus.UNKNOWN_ERROR


class TestCollect:
    """Tests for a full classification pass."""

    def test_results_follow_config_order(self, config, classifier):
        service = DashboardService(config, classifier=classifier)

        snapshot = service.collect()

        assert [g.title for g in snapshot.groups] == ["Work", "Home"]
        assert [r.project.name for r in snapshot.all_results] == ["api", "web", "dotfiles"]
        assert classifier.classify.call_count == 3

    def test_one_failure_does_not_affect_others(self, config, classifier):
        """A project that raises is reported alongside its siblings."""

        def classify(working_path, git_dir):
            if working_path == "/srv/web":
                raise OSError("disk on fire")
            return RepoStatus.OKAY

        classifier.classify.side_effect = classify
        service = DashboardService(config, classifier=classifier)

        snapshot = service.collect()

        statuses = {r.project.name: r.status for r in snapshot.all_results}
        assert statuses == {
            "api": RepoStatus.OKAY,
            "web": RepoStatus.UNKNOWN_ERROR,
            "dotfiles": RepoStatus.OKAY,
        }

    def test_projects_run_concurrently(self, config, classifier):
        """All projects are in flight at the same time."""
        barrier = threading.Barrier(3, timeout=5)

        def classify(working_path, git_dir):
            barrier.wait()
            return RepoStatus.OKAY

        classifier.classify.side_effect = classify
        service = DashboardService(config, classifier=classifier)

        snapshot = service.collect()

        assert all(r.status == RepoStatus.OKAY for r in snapshot.all_results)

    def test_each_pass_is_fresh(self, config, classifier):
        """Every collect() re-classifies every project."""
        service = DashboardService(config, classifier=classifier)

        first = service.collect()
        classifier.classify.return_value = RepoStatus.UNCOMMITTED_CHANGES
        second = service.collect()

        assert first.worst_status == RepoStatus.OKAY
        assert second.worst_status == RepoStatus.UNCOMMITTED_CHANGES
        assert classifier.classify.call_count == 6


class TestDefaultClassifier:
    """Tests for the classifier built from config."""

    def test_uses_config_settings(self):
        config = AppConfig(
            groups=[GroupConfig(title="A", projects=[ProjectConfig(name="a", path="/a")])],
            probe_timeout=5,
            git_binary="/opt/git/bin/git",
        )

        service = DashboardService(config)

        assert service._classifier.git_binary == "/opt/git/bin/git"
        assert isinstance(service._classifier._runner, CommandRunner)
        assert service._classifier._runner.timeout == 5


@requires_git
class TestCollectRealRepositories:
    """End-to-end pass over real directories."""

    def test_valid_and_invalid_projects(self, make_repo, tmp_path, git_env):
        """A clean repo and a plain directory are both reported."""
        repo = make_repo("clean")
        plain = tmp_path / "plain"
        plain.mkdir()
        config = AppConfig(
            groups=[
                GroupConfig(
                    title="Mixed",
                    projects=[
                        ProjectConfig(name="clean", path=str(repo)),
                        ProjectConfig(name="plain", path=str(plain)),
                        ProjectConfig(name="demo", path=str(tmp_path / "missing")),
                    ],
                )
            ]
        )

        snapshot = DashboardService(config).collect()

        statuses = [r.status for r in snapshot.all_results]
        assert statuses == [RepoStatus.OKAY, RepoStatus.NOT_A_GIT_REPO, RepoStatus.PATH_NOT_FOUND]
