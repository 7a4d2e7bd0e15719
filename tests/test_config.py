"""Tests for git-ai configuration loading."""

import json

from git_ai.config import ProxyConfig, get_config_path, load_config, save_config


class TestLoadConfig:

    def test_defaults_when_missing(self):
        config = load_config()

        assert config.git_binary == "git"
        assert config.engine is None
        assert config.debug is False

    def test_reads_file(self, tmp_path):
        (tmp_path / "git-ai-config.json").write_text(json.dumps({
            "git_binary": "/usr/local/bin/git",
            "engine": "pkg.mod:Engine",
            "debug": True,
        }))

        config = load_config()

        assert config.git_binary == "/usr/local/bin/git"
        assert config.engine == "pkg.mod:Engine"
        assert config.debug is True

    def test_malformed_file_gives_defaults(self, tmp_path):
        (tmp_path / "git-ai-config.json").write_text("{not json")

        assert load_config() == ProxyConfig()

    def test_non_object_gives_defaults(self, tmp_path):
        (tmp_path / "git-ai-config.json").write_text("[1, 2]")

        assert load_config() == ProxyConfig()

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        (tmp_path / "git-ai-config.json").write_text(json.dumps({"engine": "a:B"}))
        monkeypatch.setenv("GIT_AI_ENGINE", "c:D")
        monkeypatch.setenv("GIT_AI_GIT_BINARY", "hub")
        monkeypatch.setenv("GIT_AI_DEBUG", "1")

        config = load_config()

        assert config.engine == "c:D"
        assert config.git_binary == "hub"
        assert config.debug is True


class TestSaveConfig:

    def test_round_trip(self, tmp_path, monkeypatch):
        path = tmp_path / "nested" / "config.json"
        monkeypatch.setenv("GIT_AI_CONFIG", str(path))

        save_config(ProxyConfig(engine="x.y:Z", debug=True))

        assert get_config_path() == path
        assert json.loads(path.read_text()) == {
            "git_binary": "git",
            "engine": "x.y:Z",
            "debug": True,
        }
        assert load_config().engine == "x.y:Z"
