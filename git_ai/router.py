"""
Command routing.

Every invocation is classified once:
- intrinsic: implemented by git-ai itself (checkpoint, stats, install-hooks, _hook)
- wrapped: git's own command replaced or surrounded by git-ai logic (commit, blame)
- transparent: forwarded to git, with fetch/push arguments augmented

The handlers here return the exit status to finish with; the CLI
layer does the actual exit.
"""

import logging
from enum import Enum
from typing import List, Sequence

import click

from git_ai import executor, refspecs, repository
from git_ai.blame_target import parse_blame_target
from git_ai.commit_hooks import run_wrapped_commit
from git_ai.config import load_config
from git_ai.engine import load_engine
from git_ai.errors import ConfigError, EngineError, RepositoryNotFoundError

logger = logging.getLogger(__name__)


class Disposition(Enum):
    INTRINSIC = "intrinsic"
    WRAPPED = "wrapped"
    TRANSPARENT = "transparent"


INTRINSIC_COMMANDS = frozenset({"checkpoint", "stats", "install-hooks", "_hook"})
WRAPPED_COMMANDS = frozenset({"commit", "blame"})
AUGMENTED_COMMANDS = frozenset({refspecs.FETCH, refspecs.PUSH})


def classify(command: str) -> Disposition:
    if command in INTRINSIC_COMMANDS:
        return Disposition.INTRINSIC
    if command in WRAPPED_COMMANDS:
        return Disposition.WRAPPED
    return Disposition.TRANSPARENT


def build_proxy_args(command: str, args: Sequence[str]) -> List[str]:
    """Final arguments for a transparently proxied command."""
    if command in AUGMENTED_COMMANDS:
        return refspecs.augment_args(command, args)
    return list(args)


def proxy_to_git(command: str, args: Sequence[str]) -> int:
    return executor.exec_git(command, build_proxy_args(command, args))


def handle_commit(args: Sequence[str]) -> int:
    """git commit wrapped with the engine's pre/post hooks."""
    try:
        context = repository.resolve_context()
    except RepositoryNotFoundError as e:
        click.echo(f"Failed to find repository: {e}", err=True)
        return 1

    try:
        engine = load_engine(load_config())
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        return 1

    result = run_wrapped_commit(args, engine, context)
    if result.error:
        click.echo(result.error, err=True)
    if result.post_commit_error:
        click.echo(result.post_commit_error, err=True)
    return result.exit_status


def handle_blame(args: Sequence[str]) -> int:
    """Authorship blame for the first argument, which may carry a line range."""
    try:
        repo = repository.find_repository()
    except RepositoryNotFoundError as e:
        click.echo(f"Failed to find repository: {e}", err=True)
        return 1

    if not args:
        click.echo("Usage: git-ai blame <file>", err=True)
        return 1

    target = parse_blame_target(args[0])
    try:
        engine = load_engine(load_config())
        engine.query_blame(repo, target.path, target.range)
    except (ConfigError, EngineError) as e:
        click.echo(f"Blame failed: {e}", err=True)
        return 1
    return 0


WRAPPED_HANDLERS = {
    "commit": handle_commit,
    "blame": handle_blame,
}


def dispatch(command: str, args: Sequence[str]) -> int:
    """Route a command that git-ai does not implement itself."""
    if classify(command) is Disposition.WRAPPED:
        return WRAPPED_HANDLERS[command](args)
    return proxy_to_git(command, args)
