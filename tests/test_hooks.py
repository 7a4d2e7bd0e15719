"""
Tests for git hook installation.

Tests:
- Hooks are written executable with the managed marker
- Foreign hooks are backed up, managed ones rewritten in place
"""

import os
import sys

import pytest

from git_ai.hooks import MANAGED_MARKER, install_hooks, is_managed


class TestInstallHooks:

    def test_writes_post_rewrite_hook(self, fake_repo):
        installed = install_hooks(fake_repo)

        hook = fake_repo.hooks_dir / "post-rewrite"
        assert installed == ["post-rewrite"]
        assert hook.exists()
        assert MANAGED_MARKER in hook.read_text()
        assert 'git-ai _hook post-rewrite "$1"' in hook.read_text()

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_hook_is_executable(self, fake_repo):
        install_hooks(fake_repo)

        assert os.access(fake_repo.hooks_dir / "post-rewrite", os.X_OK)

    def test_creates_hooks_dir(self, fake_repo):
        assert not fake_repo.hooks_dir.exists()

        install_hooks(fake_repo)

        assert fake_repo.hooks_dir.is_dir()

    def test_backs_up_foreign_hook(self, fake_repo):
        fake_repo.hooks_dir.mkdir()
        existing = fake_repo.hooks_dir / "post-rewrite"
        existing.write_text("#!/bin/sh\necho mine\n")

        install_hooks(fake_repo)

        backup = fake_repo.hooks_dir / "post-rewrite.bak"
        assert backup.read_text() == "#!/bin/sh\necho mine\n"
        assert is_managed(existing)

    def test_reinstall_is_idempotent(self, fake_repo):
        install_hooks(fake_repo)
        first = (fake_repo.hooks_dir / "post-rewrite").read_text()

        install_hooks(fake_repo)

        assert (fake_repo.hooks_dir / "post-rewrite").read_text() == first
        assert not (fake_repo.hooks_dir / "post-rewrite.bak").exists()


class TestIsManaged:

    def test_missing_file(self, tmp_path):
        assert not is_managed(tmp_path / "nope")

    def test_foreign_file(self, tmp_path):
        hook = tmp_path / "pre-commit"
        hook.write_text("#!/bin/sh\n")
        assert not is_managed(hook)
