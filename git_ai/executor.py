"""
Subprocess execution for git.

Two ways to run git:
- spawn_git: inherits stdin/stdout/stderr, used for everything the
  user actually asked git to do
- capture_git: captures output, used for config and rev-parse queries

Every child gets a full copy of this process's environment. Calls
block until the child exits; there are no timeouts.
"""

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import click

from git_ai.config import load_config
from git_ai.errors import SpawnError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExitOutcome:
    """How a child process ended.

    code is None when the child terminated abnormally (killed by a signal).
    """
    code: Optional[int]

    @classmethod
    def from_returncode(cls, returncode: int) -> "ExitOutcome":
        # subprocess reports death-by-signal N as -N
        if returncode < 0:
            return cls(code=None)
        return cls(code=returncode)

    @property
    def success(self) -> bool:
        return self.code == 0

    @property
    def exit_status(self) -> int:
        """Exit status for this process: the child's code, else 1."""
        return self.code if self.code is not None else 1


def git_binary() -> str:
    """The git executable to proxy to."""
    return load_config().git_binary


def child_environment() -> dict:
    """A full, unfiltered copy of the current environment."""
    return dict(os.environ)


def spawn_git(command: str, args: Sequence[str]) -> ExitOutcome:
    """Run `git <command> <args>` with inherited stdio and wait for it.

    Raises:
        SpawnError: git could not be started
    """
    argv = [git_binary(), command] + list(args)
    logger.debug("running %s", shlex.join(argv))
    try:
        completed = subprocess.run(argv, env=child_environment())
    except OSError as e:
        raise SpawnError(f"Failed to execute git {command}: {e}") from e
    return ExitOutcome.from_returncode(completed.returncode)


def capture_git(args: List[str], cwd: Optional[Path] = None) -> Tuple[int, str, str]:
    """Run a git command and capture its output.

    Output that isn't valid UTF-8 is decoded with replacement characters.

    Returns:
        Tuple of (return_code, stdout, stderr)

    Raises:
        SpawnError: git could not be started
    """
    cmd = [git_binary()] + args
    try:
        result = subprocess.run(
            cmd,
            cwd=cwd or Path.cwd(),
            capture_output=True,
            text=True,
            errors="replace",
            env=child_environment(),
        )
    except OSError as e:
        raise SpawnError(f"Failed to execute git {args[0] if args else ''}: {e}") from e
    return result.returncode, result.stdout, result.stderr


def exec_git(command: str, args: Sequence[str]) -> int:
    """Run git in the foreground and return the exit status to finish with.

    Spawn failures are reported on stderr and map to 1.
    """
    try:
        outcome = spawn_git(command, args)
    except SpawnError as e:
        click.echo(str(e), err=True)
        return 1
    return outcome.exit_status
