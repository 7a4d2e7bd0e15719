"""
git-ai configuration.

User-level settings stored in ~/.git-ai/config.json. Environment
variables override the file:

- GIT_AI_CONFIG: alternate config file path
- GIT_AI_GIT_BINARY: git executable to proxy to
- GIT_AI_ENGINE: authorship engine as "package.module:ClassName"
- GIT_AI_DEBUG: any non-empty value turns on debug logging
"""

import json
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional


CONFIG_ENV = "GIT_AI_CONFIG"
GIT_BINARY_ENV = "GIT_AI_GIT_BINARY"
ENGINE_ENV = "GIT_AI_ENGINE"
DEBUG_ENV = "GIT_AI_DEBUG"


@dataclass
class ProxyConfig:
    """Proxy-level configuration."""
    git_binary: str = "git"
    engine: Optional[str] = None  # "package.module:ClassName"
    debug: bool = False

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "ProxyConfig":
        return cls(
            git_binary=data.get("git_binary") or "git",
            engine=data.get("engine"),
            debug=bool(data.get("debug", False)),
        )


def get_config_path() -> Path:
    """Get the config file path."""
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override)
    return Path.home() / ".git-ai" / "config.json"


def _apply_env(config: ProxyConfig) -> ProxyConfig:
    git_binary = os.environ.get(GIT_BINARY_ENV)
    if git_binary:
        config.git_binary = git_binary
    engine = os.environ.get(ENGINE_ENV)
    if engine:
        config.engine = engine
    if os.environ.get(DEBUG_ENV):
        config.debug = True
    return config


def load_config() -> ProxyConfig:
    """Load configuration. Returns defaults if the file is missing or broken."""
    config_file = get_config_path()

    if not config_file.exists():
        return _apply_env(ProxyConfig())

    try:
        with open(config_file) as f:
            data = json.load(f)
        if not isinstance(data, dict):
            return _apply_env(ProxyConfig())
        return _apply_env(ProxyConfig.from_dict(data))
    except (json.JSONDecodeError, OSError):
        return _apply_env(ProxyConfig())


def save_config(config: ProxyConfig) -> None:
    """Save configuration."""
    config_file = get_config_path()
    config_file.parent.mkdir(parents=True, exist_ok=True)

    with open(config_file, "w") as f:
        json.dump(config.to_dict(), f, indent=2)
