"""
Refspec augmentation for fetch and push.

A "simple" fetch/push (no arguments, or just a remote name) is
rewritten to name every configured refspec for the remote explicitly
and add one more for the authorship namespace:

    git-ai fetch           -> git fetch origin <remote.origin.fetch...> +refs/ai/authorship/*:refs/remotes/origin/ai/authorship/*
    git-ai push upstream   -> git push upstream <remote.upstream.push...> refs/ai/authorship/*:refs/ai/authorship/*

Anything with a flag or more than one argument is left alone.
Augmentation never fails a command: if the repository can't be found
the original arguments are used.
"""

import logging
from typing import List, Sequence

from git_ai import executor, repository
from git_ai.errors import RepositoryNotFoundError, SpawnError

logger = logging.getLogger(__name__)

FETCH = "fetch"
PUSH = "push"
DEFAULT_REMOTE = "origin"
AUTHORSHIP_REFS = "refs/ai/authorship/*"
PUSH_AUTHORSHIP_REFSPEC = f"{AUTHORSHIP_REFS}:{AUTHORSHIP_REFS}"


def fetch_authorship_refspec(remote: str) -> str:
    """Force-updating fetch refspec into the remote's tracking namespace."""
    return f"+{AUTHORSHIP_REFS}:refs/remotes/{remote}/ai/authorship/*"


def authorship_refspec(direction: str, remote: str) -> str:
    if direction == FETCH:
        return fetch_authorship_refspec(remote)
    if direction == PUSH:
        return PUSH_AUTHORSHIP_REFSPEC
    raise ValueError(f"Unknown refspec direction: {direction}")


def is_simple_invocation(args: Sequence[str]) -> bool:
    """No arguments, or exactly one that isn't a flag."""
    return len(args) == 0 or (len(args) == 1 and not args[0].startswith("-"))


def configured_refspecs(remote: str, direction: str, cwd=None) -> List[str]:
    """All remote.<remote>.<direction> values; empty when unset or unreadable."""
    try:
        code, out, _ = executor.capture_git(
            ["config", "--get-all", f"remote.{remote}.{direction}"], cwd=cwd
        )
    except SpawnError as e:
        logger.debug("refspec query failed: %s", e)
        return []

    if code != 0:
        return []
    return [line.strip() for line in out.splitlines() if line.strip()]


def augment_args(direction: str, args: Sequence[str]) -> List[str]:
    """Final argument list for `git <direction>`.

    Returns a new list; args is never modified.
    """
    if direction not in (FETCH, PUSH):
        raise ValueError(f"Unknown refspec direction: {direction}")

    if not is_simple_invocation(args):
        return list(args)

    try:
        repo = repository.find_repository()
    except RepositoryNotFoundError as e:
        logger.debug("skipping %s augmentation: %s", direction, e)
        return list(args)

    remote = args[0] if args else DEFAULT_REMOTE
    final = [remote]
    final.extend(configured_refspecs(remote, direction, cwd=repo.workdir))
    final.append(authorship_refspec(direction, remote))
    return final
