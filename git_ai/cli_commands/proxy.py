"""
Proxy Commands - everything that ends up at git.

Commands:
- commit: git commit with authorship pre/post hooks
- blame: authorship blame, accepts file:line and file:start-end
- any other name: forwarded to git as-is
"""

import sys

import click

from git_ai import router


class PassthroughCommand(click.Command):
    """Command whose arguments reach the handler untouched.

    Click would otherwise eat '--' and option-looking arguments,
    which git needs to see verbatim.
    """

    def parse_args(self, ctx, args):
        ctx.params["args"] = tuple(args)
        ctx.args = []
        return []


def passthrough_command(name: str, help: str = None) -> click.Command:
    """Build a command that routes `name` and its raw arguments."""

    def callback(args):
        sys.exit(router.dispatch(name, args))

    return PassthroughCommand(
        name,
        callback=callback,
        help=help,
        short_help=help,
        add_help_option=False,
    )


def register(cli):
    """Register wrapped git commands with CLI."""
    cli.add_command(passthrough_command(
        "commit", help="git commit with AI authorship pre/post hooks."
    ))
    cli.add_command(passthrough_command(
        "blame", help="Line-by-line ownership for a file (file.rs:10-20)."
    ))
