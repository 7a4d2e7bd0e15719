"""
Error types for git-ai.

Library code raises these; only the CLI layer turns them into
messages on stderr and an exit status.
"""


class GitAiError(Exception):
    """Base class for all git-ai errors."""


class RepositoryNotFoundError(GitAiError):
    """The working directory is not inside a git repository."""


class ConfigError(GitAiError):
    """A configuration value is missing or unusable."""


class EngineError(GitAiError):
    """The authorship engine reported a failure."""


class SpawnError(GitAiError):
    """The git binary could not be started."""
