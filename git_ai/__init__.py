"""
git-ai - track AI authorship and prompts in git.

A thin proxy in front of git:
- Most subcommands are forwarded to git untouched
- commit is wrapped with pre/post authorship hooks
- blame answers line-range authorship queries
- simple fetch/push also sync the refs/ai/authorship namespace

Intrinsic commands (checkpoint, stats, install-hooks) are handled by git-ai
itself through a pluggable authorship engine.
"""

__version__ = "0.1.0"

from git_ai.blame_target import BlameTarget, parse_blame_target
from git_ai.errors import (
    GitAiError,
    RepositoryNotFoundError,
    ConfigError,
    EngineError,
    SpawnError,
)

__all__ = [
    "BlameTarget",
    "parse_blame_target",
    "GitAiError",
    "RepositoryNotFoundError",
    "ConfigError",
    "EngineError",
    "SpawnError",
]
