"""
git-ai CLI - git with AI authorship tracking.

Usage:
    git-ai <git-command> [args...]    # forwarded to git
    git-ai <git-ai-command> [options] # handled by git-ai

Commands:
- Intrinsic: checkpoint, stats, install-hooks
- Wrapped: commit (pre/post hooks), blame (line-range authorship)
- Everything else goes to git; simple fetch/push also sync
  refs/ai/authorship/*
"""

import sys

import click

from git_ai import __version__
from git_ai.cli_commands import register_all
from git_ai.cli_commands.proxy import passthrough_command
from git_ai.config import load_config
from git_ai.log import setup_logging


USAGE = [
    "Usage: git-ai <git-command> or git-ai <git-ai-command>",
    "Examples:",
    "  git-ai pull                    # git pull",
    "  git-ai commit -m 'message'     # git commit with pre/post hooks",
    "  git-ai checkpoint              # create checkpoint",
]


class ProxyGroup(click.Group):
    """Click group that sends any command it doesn't know to git."""

    def get_command(self, ctx, cmd_name):
        command = super().get_command(ctx, cmd_name)
        if command is None:
            command = passthrough_command(cmd_name)
        return command


@click.group(
    cls=ProxyGroup,
    invoke_without_command=True,
    context_settings={"ignore_unknown_options": True},
)
@click.version_option(version=__version__, prog_name="git-ai")
@click.pass_context
def cli(ctx):
    """git-ai - track AI authorship and prompts in git.

    Any git command works: git-ai pull runs git pull.
    """
    config = load_config()
    setup_logging(config.debug)

    if ctx.invoked_subcommand is None:
        for line in USAGE:
            click.echo(line, err=True)
        sys.exit(1)


register_all(cli)


# ============================================================================
# Entry Point
# ============================================================================

def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
