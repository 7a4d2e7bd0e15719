"""
Git hook installation.

`git-ai commit` runs the authorship hooks itself. Amends and rebases
rewrite commits behind the proxy's back, so a post-rewrite hook is
installed that reports them to the engine via `git-ai _hook`.
"""

import logging
import os
import shutil
import stat
from pathlib import Path
from typing import List

from git_ai.repository import Repository

logger = logging.getLogger(__name__)

MANAGED_MARKER = "# installed by git-ai"

HOOK_SCRIPTS = {
    "post-rewrite": f"""#!/bin/sh
{MANAGED_MARKER}
git-ai _hook post-rewrite "$1" || true
""",
}


def is_managed(hook_path: Path) -> bool:
    """True if the hook file was written by git-ai."""
    try:
        return MANAGED_MARKER in hook_path.read_text(errors="replace")
    except OSError:
        return False


def install_hooks(repo: Repository) -> List[str]:
    """Write git-ai's hooks into the repository's hooks directory.

    A foreign hook already in place is moved to <name>.bak first.
    Re-running over git-ai's own hooks just rewrites them.

    Returns:
        Names of the hooks written
    """
    hooks_dir = repo.hooks_dir
    hooks_dir.mkdir(parents=True, exist_ok=True)

    installed = []
    for name, script in HOOK_SCRIPTS.items():
        hook_path = hooks_dir / name
        if hook_path.exists() and not is_managed(hook_path):
            backup = hook_path.with_name(name + ".bak")
            shutil.move(str(hook_path), str(backup))
            logger.warning("Existing %s hook moved to %s", name, backup.name)

        hook_path.write_text(script)
        mode = os.stat(hook_path).st_mode
        os.chmod(hook_path, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        installed.append(name)
        logger.debug("installed %s hook at %s", name, hook_path)

    return installed
