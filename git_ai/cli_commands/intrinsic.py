"""
Intrinsic Commands - implemented by git-ai, never forwarded to git.

Commands:
- checkpoint: Record working-tree state for authorship attribution
- stats: Authorship statistics for a commit
- install-hooks: Install git-ai's git hooks
- _hook: Entry point for installed hooks (hidden)
"""

import sys

import click

from git_ai.config import load_config
from git_ai.engine import load_engine
from git_ai.errors import ConfigError, EngineError, RepositoryNotFoundError
from git_ai.hooks import install_hooks
from git_ai.repository import RepositoryContext, resolve_context


def _resolve_or_exit() -> RepositoryContext:
    try:
        return resolve_context(warn=True)
    except RepositoryNotFoundError as e:
        click.echo(f"Failed to find repository: {e}", err=True)
        sys.exit(1)


def _run_engine(operation):
    """Call operation(engine), exiting 1 with a message on failure."""
    try:
        engine = load_engine(load_config())
        operation(engine)
    except (ConfigError, EngineError) as e:
        click.echo(f"Command failed: {e}", err=True)
        sys.exit(1)


def register(cli):
    """Register intrinsic commands with CLI."""

    @cli.command()
    @click.option("--author", default=None, help="Author of the checkpoint")
    @click.option("--show-working-log", is_flag=True, help="Show log of working copy changes")
    @click.option("--reset", is_flag=True, help="Reset working copy changes")
    @click.option("--model", default=None, help="AI model + version")
    def checkpoint(author: str, show_working_log: bool, reset: bool, model: str):
        """[tool use] Create a checkpoint with the current working directory state."""
        context = _resolve_or_exit()
        _run_engine(lambda engine: engine.create_checkpoint(
            context.repo,
            author or context.default_author,
            show_working_log=show_working_log,
            reset=reset,
            is_amend=False,
            model=model,
            default_author=context.default_author,
        ))

    @cli.command()
    @click.argument("sha", required=False, default="HEAD")
    def stats(sha: str):
        """Show authorship statistics for a commit (defaults to HEAD)."""
        context = _resolve_or_exit()
        _run_engine(lambda engine: engine.query_stats(context.repo, sha))

    @cli.command("install-hooks")
    def install_hooks_cmd():
        """Install git-ai hooks in the current repository."""
        context = _resolve_or_exit()
        try:
            installed = install_hooks(context.repo)
        except OSError as e:
            click.echo(f"Command failed: {e}", err=True)
            sys.exit(1)

        click.echo("git-ai initialized successfully!")
        click.echo(f"  Hooks: {', '.join(installed)}")
        click.echo("You can now use git-ai as a git proxy:")
        click.echo("  git-ai pull                    # git pull")
        click.echo("  git-ai commit -m 'message'     # git commit with AI tracking")
        click.echo("  git-ai checkpoint              # create checkpoint")

    @cli.command("_hook", hidden=True)
    @click.argument("name")
    @click.argument("hook_args", nargs=-1)
    def run_hook(name: str, hook_args: tuple):
        """Called by installed git hooks."""
        if name != "post-rewrite":
            click.echo(f"Error: Unknown hook '{name}'", err=True)
            sys.exit(1)

        # post-rewrite gets "amend" or "rebase"; only amends are attributed
        if not hook_args or hook_args[0] != "amend":
            return

        context = _resolve_or_exit()
        _run_engine(lambda engine: engine.post_commit(context.repo, is_amend=True))
