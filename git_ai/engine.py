"""
Authorship engine interface.

The engine is what actually records and attributes AI/human
authorship. git-ai only decides when to call it. An engine is plugged
in through config ("engine": "package.module:ClassName") or the
GIT_AI_ENGINE environment variable; it must subclass AuthorshipEngine
and report failures by raising EngineError.
"""

import importlib
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple

from git_ai.config import ProxyConfig
from git_ai.errors import ConfigError, EngineError
from git_ai.repository import Repository

logger = logging.getLogger(__name__)

LineRange = Optional[Tuple[int, int]]


class AuthorshipEngine(ABC):
    """Operations git-ai delegates to the attribution engine."""

    @abstractmethod
    def create_checkpoint(
        self,
        repo: Repository,
        author: str,
        show_working_log: bool = False,
        reset: bool = False,
        is_amend: bool = False,
        model: Optional[str] = None,
        default_author: Optional[str] = None,
    ) -> Any:
        """Record the working-tree state for later attribution."""

    @abstractmethod
    def query_blame(self, repo: Repository, path: str, line_range: LineRange = None) -> Any:
        """Show line-by-line ownership for a file, optionally a line range."""

    @abstractmethod
    def query_stats(self, repo: Repository, sha: str) -> Any:
        """Show authorship statistics for a commit."""

    @abstractmethod
    def pre_commit(self, repo: Repository, author: str) -> None:
        """Runs before git commit; raising EngineError blocks the commit."""

    @abstractmethod
    def post_commit(self, repo: Repository, is_amend: bool = False) -> None:
        """Runs after a successful git commit."""


class UnconfiguredEngine(AuthorshipEngine):
    """Stand-in used when no engine is configured.

    Bookkeeping steps succeed as no-ops so commits keep working; queries
    fail because there is nothing to answer them.
    """

    def create_checkpoint(self, repo, author, show_working_log=False, reset=False,
                          is_amend=False, model=None, default_author=None):
        logger.debug("no engine configured, checkpoint for %s skipped", author)

    def query_blame(self, repo, path, line_range=None):
        raise EngineError(_not_configured("blame"))

    def query_stats(self, repo, sha):
        raise EngineError(_not_configured("stats"))

    def pre_commit(self, repo, author):
        logger.debug("no engine configured, pre-commit skipped")

    def post_commit(self, repo, is_amend=False):
        logger.debug("no engine configured, post-commit skipped")


def _not_configured(operation: str) -> str:
    return (
        f"no authorship engine configured for {operation}; "
        "set \"engine\" in ~/.git-ai/config.json or GIT_AI_ENGINE"
    )


def load_engine(config: ProxyConfig) -> AuthorshipEngine:
    """Instantiate the configured engine.

    Raises:
        ConfigError: the engine path can't be imported or isn't an AuthorshipEngine
    """
    if not config.engine:
        return UnconfiguredEngine()

    module_name, sep, attr = config.engine.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigError(f"Engine must be 'module:ClassName', got '{config.engine}'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Cannot import engine module '{module_name}': {e}") from e

    engine_cls = getattr(module, attr, None)
    if engine_cls is None:
        raise ConfigError(f"Engine '{attr}' not found in '{module_name}'")
    if not (isinstance(engine_cls, type) and issubclass(engine_cls, AuthorshipEngine)):
        raise ConfigError(f"Engine '{config.engine}' is not an AuthorshipEngine")

    logger.debug("loaded engine %s", config.engine)
    return engine_cls()
