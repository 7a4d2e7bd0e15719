"""
Repository discovery and config access.

Discovery and config reads are delegated to git itself
(`git rev-parse`, `git config --get`), so worktrees, GIT_DIR and
includes behave exactly as they do for the proxied commands.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from git_ai import executor
from git_ai.errors import ConfigError, RepositoryNotFoundError, SpawnError

logger = logging.getLogger(__name__)

UNKNOWN_AUTHOR = "unknown"


@dataclass(frozen=True)
class Repository:
    """Handle to a non-bare git repository."""
    workdir: Path
    git_dir: Path

    @property
    def hooks_dir(self) -> Path:
        return self.git_dir / "hooks"


@dataclass(frozen=True)
class RepositoryContext:
    """Repository plus the identity commands default to.

    Resolved once per invocation and read-only afterwards.
    """
    repo: Repository
    default_author: str


def find_repository(cwd: Optional[Path] = None) -> Repository:
    """Resolve the repository containing cwd (default: current directory).

    Raises:
        RepositoryNotFoundError: not inside a work tree, or git is unavailable
    """
    try:
        code, out, err = executor.capture_git(
            ["rev-parse", "--show-toplevel", "--absolute-git-dir"], cwd=cwd
        )
    except SpawnError as e:
        raise RepositoryNotFoundError(str(e)) from e

    lines = [line.strip() for line in out.splitlines() if line.strip()]
    if code != 0 or len(lines) < 2:
        raise RepositoryNotFoundError(err.strip() or "not a git repository")

    return Repository(workdir=Path(lines[0]), git_dir=Path(lines[1]))


def get_config_string(repo: Repository, key: str) -> str:
    """Read a single git config value.

    Raises:
        ConfigError: the key is unset or config could not be read
    """
    try:
        code, out, err = executor.capture_git(["config", "--get", key], cwd=repo.workdir)
    except SpawnError as e:
        raise ConfigError(str(e)) from e

    if code != 0:
        raise ConfigError(err.strip() or f"{key} is not set")
    return out.rstrip("\n")


def resolve_default_author(repo: Repository, warn: bool = False) -> str:
    """user.name from git config, or "unknown" when it can't be read."""
    try:
        return get_config_string(repo, "user.name")
    except ConfigError:
        if warn:
            logger.warning(
                "git user.name not configured. Using '%s' as author.", UNKNOWN_AUTHOR
            )
        return UNKNOWN_AUTHOR


def resolve_context(cwd: Optional[Path] = None, warn: bool = False) -> RepositoryContext:
    """Find the repository and its default author.

    Raises:
        RepositoryNotFoundError: see find_repository
    """
    repo = find_repository(cwd)
    return RepositoryContext(repo=repo, default_author=resolve_default_author(repo, warn=warn))
