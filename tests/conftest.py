"""Pytest configuration and shared fixtures for Git Monitor tests."""

from pathlib import Path

import pytest

from tests.git_helpers import commit_file, run_git


@pytest.fixture
def git_env(tmp_path, monkeypatch):
    """Isolate git from the user's configuration and set a commit identity."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test User")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test User")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")
    return home


@pytest.fixture
def make_repo(tmp_path, git_env):
    """Factory for git repositories inside the test's temporary directory."""

    def _make(name: str = "repo", with_commit: bool = True) -> Path:
        repo = tmp_path / name
        repo.mkdir()
        run_git(repo, "init", "-q")
        if with_commit:
            commit_file(repo, "README.md", "# readme\n", "Initial commit")
        return repo

    return _make


@pytest.fixture
def tracked_repo(tmp_path, make_repo):
    """A committed repository tracking a bare remote, plus a second clone.

    Returns:
        Tuple of (local repo, other clone) sharing the same upstream.
    """
    local = make_repo("local")
    remote = tmp_path / "remote.git"
    run_git(tmp_path, "init", "-q", "--bare", str(remote))
    branch = run_git(local, "rev-parse", "--abbrev-ref", "HEAD").strip()
    run_git(local, "remote", "add", "origin", str(remote))
    run_git(local, "push", "-q", "-u", "origin", branch)

    other = tmp_path / "other"
    run_git(tmp_path, "clone", "-q", "-b", branch, str(remote), str(other))
    return local, other


@pytest.fixture
def write_config(tmp_path):
    """Factory writing a config document and returning its path."""

    def _write(content: str, name: str = "config.yaml") -> Path:
        config_path = tmp_path / name
        config_path.write_text(content)
        return config_path

    return _write
