"""
git-ai CLI Commands - Modular command structure.

Structure:
    cli_commands/
    ├── __init__.py   # This file - registration
    ├── intrinsic.py  # checkpoint, stats, init, hook
    └── proxy.py      # commit, blame, and the git passthrough command

Usage:
    from git_ai.cli_commands import register_all

    @click.group()
    def cli():
        pass

    register_all(cli)
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_all(cli: "click.Group") -> None:
    """Register all command modules with the CLI group.

    Args:
        cli: The Click group to register commands with
    """
    from . import intrinsic
    from . import proxy

    intrinsic.register(cli)
    proxy.register(cli)
