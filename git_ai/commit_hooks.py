"""
Commit wrapped with authorship hooks.

    START -> PRE_HOOK -> NATIVE_COMMIT -> POST_HOOK -> DONE
                 |
                 +-> ABORTED

- Pre-hook failure aborts: git commit is never run, exit 1.
- A failing git commit ends the flow with git's own exit code; there
  is no new commit to attribute, so the post-hook is skipped.
- Post-hook failure is reported but the commit still counts as a
  success (exit 0).

Usage:
    from git_ai.commit_hooks import run_wrapped_commit

    result = run_wrapped_commit(args, engine, context)
    if result.error:
        print(result.error)
    sys.exit(result.exit_status)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from git_ai import executor
from git_ai.engine import AuthorshipEngine
from git_ai.errors import EngineError, SpawnError
from git_ai.repository import RepositoryContext

logger = logging.getLogger(__name__)


class CommitStage(Enum):
    START = "start"
    PRE_HOOK = "pre_hook"
    NATIVE_COMMIT = "native_commit"
    POST_HOOK = "post_hook"
    DONE = "done"
    ABORTED = "aborted"


@dataclass
class CommitResult:
    """Result of a wrapped commit."""
    stage: CommitStage = CommitStage.START
    exit_status: int = 0
    error: str = ""
    post_commit_error: str = ""


def run_wrapped_commit(
    args: Sequence[str],
    engine: AuthorshipEngine,
    context: RepositoryContext,
) -> CommitResult:
    """Run pre-commit, git commit <args>, then post-commit.

    Args:
        args: Arguments for git commit, forwarded unchanged
        engine: Authorship engine providing the hooks
        context: Resolved repository and default author

    Returns:
        CommitResult with the final stage and the exit status to use
    """
    result = CommitResult(stage=CommitStage.PRE_HOOK)

    try:
        engine.pre_commit(context.repo, context.default_author)
    except EngineError as e:
        result.stage = CommitStage.ABORTED
        result.exit_status = 1
        result.error = f"Pre-commit hook failed: {e}"
        return result
    logger.debug("ran pre-commit hook")

    result.stage = CommitStage.NATIVE_COMMIT
    try:
        outcome = executor.spawn_git("commit", args)
    except SpawnError as e:
        result.stage = CommitStage.ABORTED
        result.exit_status = 1
        result.error = str(e)
        return result

    if not outcome.success:
        result.exit_status = outcome.exit_status
        return result

    result.stage = CommitStage.POST_HOOK
    try:
        engine.post_commit(context.repo, is_amend=False)
    except EngineError as e:
        result.post_commit_error = f"Post-commit hook failed: {e}"
    else:
        logger.debug("ran post-commit hook")

    result.stage = CommitStage.DONE
    result.exit_status = 0
    return result
