"""Centralized CLI settings for teamkit.

Precedence: explicit option > TEAMKIT_* environment variable > YAML config
file > default. Never exposes the API key in repr.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from teamkit_cli.core.errors import ConfigError
from teamkit_cli.core.io import read_yaml

DEFAULT_SERVER = "http://127.0.0.1:8000"
DEFAULT_TIMEOUT_S = 30.0


def default_config_path() -> Path:
    """TEAMKIT_CONFIG, else ~/.config/teamkit/config.yaml."""
    override = os.environ.get("TEAMKIT_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "teamkit" / "config.yaml"


def _load_file(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        data = read_yaml(path)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping")
    return data


def _pick(key: str, env_var: str, file_data: Dict[str, Any], default: Any) -> Any:
    val = os.environ.get(env_var)
    if val:
        return val
    val = file_data.get(key)
    if val not in (None, ""):
        return val
    return default


@dataclass(frozen=True)
class Settings:
    """Immutable CLI configuration. The API key is masked in repr."""

    server: str = DEFAULT_SERVER
    chat_server: str = DEFAULT_SERVER
    api_key: str = field(default="", repr=False)
    username: str = ""
    timeout_s: float = DEFAULT_TIMEOUT_S
    log_level: str = "WARNING"

    @classmethod
    def load(
        cls,
        server: Optional[str] = None,
        chat_server: Optional[str] = None,
        api_key: Optional[str] = None,
        config_path: Optional[Path] = None,
    ) -> "Settings":
        """Merge CLI options, environment, and the config file."""
        file_data = _load_file(config_path or default_config_path())

        resolved_server = server or _pick("server", "TEAMKIT_SERVER", file_data, DEFAULT_SERVER)
        resolved_chat = chat_server or _pick(
            "chat_server", "TEAMKIT_CHAT_SERVER", file_data, resolved_server,
        )
        timeout = _pick("timeout", "TEAMKIT_TIMEOUT", file_data, DEFAULT_TIMEOUT_S)
        try:
            timeout_s = float(timeout)
        except (TypeError, ValueError):
            raise ConfigError(f"invalid timeout: {timeout!r}")

        return cls(
            server=str(resolved_server).rstrip("/"),
            chat_server=str(resolved_chat).rstrip("/"),
            api_key=api_key or str(_pick("api_key", "TEAMKIT_API_KEY", file_data, "")),
            username=str(_pick("username", "TEAMKIT_USERNAME", file_data, "")),
            timeout_s=timeout_s,
            log_level=str(_pick("log_level", "TEAMKIT_LOG_LEVEL", file_data, "WARNING")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "server": self.server,
            "chat_server": self.chat_server,
            "api_key": "***" if self.api_key else "",
            "username": self.username,
            "timeout_s": self.timeout_s,
            "log_level": self.log_level,
        }
