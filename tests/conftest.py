"""Shared fixtures for git-ai tests."""

import logging
import shutil
import subprocess
import sys
from pathlib import Path

import pytest

from git_ai.engine import AuthorshipEngine
from git_ai.errors import EngineError
from git_ai.repository import Repository, RepositoryContext


HAS_GIT = shutil.which("git") is not None
requires_git = pytest.mark.skipif(not HAS_GIT, reason="git not installed")


FAKE_GIT = """#!/bin/sh
# Records its arguments one per line, then exits with FAKE_GIT_EXIT.
: > "$FAKE_GIT_LOG"
for arg in "$@"; do
    printf '%s\\n' "$arg" >> "$FAKE_GIT_LOG"
done
if [ -n "$FAKE_GIT_ENV_FILE" ]; then
    printf '%s' "$GIT_AI_TEST_MARKER" > "$FAKE_GIT_ENV_FILE"
fi
exit "${FAKE_GIT_EXIT:-0}"
"""


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point git-ai at an empty config and clear env overrides."""
    monkeypatch.setenv("GIT_AI_CONFIG", str(tmp_path / "git-ai-config.json"))
    for name in ("GIT_AI_ENGINE", "GIT_AI_DEBUG", "GIT_AI_GIT_BINARY"):
        monkeypatch.delenv(name, raising=False)
    yield
    logger = logging.getLogger("git_ai")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class FakeGit:
    """A stand-in git executable that records how it was called."""

    def __init__(self, tmp_path: Path, monkeypatch):
        self.path = tmp_path / "fake-git"
        self.path.write_text(FAKE_GIT)
        self.path.chmod(0o755)
        self.log = tmp_path / "fake-git.log"
        self.monkeypatch = monkeypatch
        monkeypatch.setenv("GIT_AI_GIT_BINARY", str(self.path))
        monkeypatch.setenv("FAKE_GIT_LOG", str(self.log))

    def exit_with(self, code: int) -> None:
        self.monkeypatch.setenv("FAKE_GIT_EXIT", str(code))

    @property
    def called(self) -> bool:
        return self.log.exists()

    @property
    def argv(self) -> list:
        return self.log.read_text().splitlines()


@pytest.fixture
def fake_git(tmp_path, monkeypatch):
    if sys.platform == "win32":
        pytest.skip("fake git needs /bin/sh")
    return FakeGit(tmp_path, monkeypatch)


class RecordingEngine(AuthorshipEngine):
    """Engine that records calls and can be told to fail."""

    def __init__(self, fail_on=()):
        self.fail_on = set(fail_on)
        self.calls = []

    def _record(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))
        if name in self.fail_on:
            raise EngineError(f"{name} exploded")

    def create_checkpoint(self, repo, author, show_working_log=False, reset=False,
                          is_amend=False, model=None, default_author=None):
        self._record("create_checkpoint", repo, author, show_working_log=show_working_log,
                     reset=reset, is_amend=is_amend, model=model,
                     default_author=default_author)

    def query_blame(self, repo, path, line_range=None):
        self._record("query_blame", repo, path, line_range)

    def query_stats(self, repo, sha):
        self._record("query_stats", repo, sha)

    def pre_commit(self, repo, author):
        self._record("pre_commit", repo, author)

    def post_commit(self, repo, is_amend=False):
        self._record("post_commit", repo, is_amend=is_amend)

    @property
    def names(self):
        return [name for name, _, _ in self.calls]


@pytest.fixture
def engine():
    return RecordingEngine()


@pytest.fixture
def fake_repo(tmp_path):
    """A Repository handle that doesn't need git."""
    workdir = tmp_path / "work"
    git_dir = workdir / ".git"
    git_dir.mkdir(parents=True)
    return Repository(workdir=workdir, git_dir=git_dir)


@pytest.fixture
def fake_context(fake_repo):
    return RepositoryContext(repo=fake_repo, default_author="Ada")


@pytest.fixture
def git_repo(tmp_path, monkeypatch):
    """A real, empty git repository; cwd is moved into it."""
    if not HAS_GIT:
        pytest.skip("git not installed")
    repo_dir = tmp_path / "repo"
    repo_dir.mkdir()
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("GIT_DIR", raising=False)
    monkeypatch.delenv("GIT_WORK_TREE", raising=False)
    subprocess.run(["git", "init", "-q", str(repo_dir)], check=True)
    monkeypatch.chdir(repo_dir)
    return repo_dir


def git(repo_dir, *args):
    subprocess.run(["git", *args], cwd=repo_dir, check=True, capture_output=True)
