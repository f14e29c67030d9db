from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional

import yaml

from mkfile.core.notify.gntp_notifier import DEFAULT_PORT


CONFIG_ENV_VAR = "MKFILE_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/mkfile/config.yaml")


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Settings:
    debug: bool = False
    clipboard: bool = True

    gntp_enabled: bool = True
    gntp_host: str = "localhost"
    gntp_port: int = DEFAULT_PORT
    gntp_password: Optional[str] = None
    gntp_icon: Optional[str] = None


_TOP_KEYS = {"debug", "clipboard", "gntp"}
_GNTP_KEYS = {"enabled", "host", "port", "password", "icon"}


def _expect(value: Any, kind: type, key: str, *, nullable: bool = False) -> Any:
    if value is None and nullable:
        return None
    # bool is an int subclass; don't let `port: true` through.
    if kind is int and isinstance(value, bool):
        raise ConfigError(f"'{key}' must be an integer")
    if not isinstance(value, kind):
        raise ConfigError(f"'{key}' must be of type {kind.__name__}")
    return value


def parse_config(raw: Any) -> dict[str, Any]:
    """Validate a decoded YAML document and flatten it into Settings field overrides.

    Format:
      debug: bool
      clipboard: bool
      gntp: {enabled: bool, host: str, port: int, password: str|null, icon: str|null}
    """
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("config file must be a mapping")

    unknown = sorted(str(k) for k in raw if k not in _TOP_KEYS)
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}")

    out: dict[str, Any] = {}
    if "debug" in raw:
        out["debug"] = _expect(raw["debug"], bool, "debug")
    if "clipboard" in raw:
        out["clipboard"] = _expect(raw["clipboard"], bool, "clipboard")

    gntp = raw.get("gntp")
    if gntp is None:
        return out
    if not isinstance(gntp, dict):
        raise ConfigError("'gntp' must be a mapping")

    unknown = sorted(str(k) for k in gntp if k not in _GNTP_KEYS)
    if unknown:
        raise ConfigError(f"unknown gntp keys: {', '.join(unknown)}")

    if "enabled" in gntp:
        out["gntp_enabled"] = _expect(gntp["enabled"], bool, "gntp.enabled")
    if "host" in gntp:
        host = _expect(gntp["host"], str, "gntp.host")
        if not host.strip():
            raise ConfigError("'gntp.host' must be a non-empty string")
        out["gntp_host"] = host.strip()
    if "port" in gntp:
        port = _expect(gntp["port"], int, "gntp.port")
        if not 0 < port < 65536:
            raise ConfigError("'gntp.port' must be between 1 and 65535")
        out["gntp_port"] = port
    if "password" in gntp:
        out["gntp_password"] = _expect(gntp["password"], str, "gntp.password", nullable=True)
    if "icon" in gntp:
        out["gntp_icon"] = _expect(gntp["icon"], str, "gntp.icon", nullable=True)
    return out


def load_config_file(path: str | Path) -> dict[str, Any]:
    p = Path(path).expanduser()
    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {p}: {e}") from e
    return parse_config(raw)


def resolve_config_path(config_file: str | None) -> Optional[Path]:
    """Explicit path, then $MKFILE_CONFIG, then the default path if it exists."""
    if config_file:
        return Path(config_file).expanduser()
    env_path = (os.getenv(CONFIG_ENV_VAR, "") or "").strip()
    if env_path:
        return Path(env_path).expanduser()
    default = DEFAULT_CONFIG_PATH.expanduser()
    if default.is_file():
        return default
    return None


def load_and_merge(config_file: str | None = None, **overrides: Any) -> Settings:
    """Return Settings from defaults, the resolved config file and keyword overrides.

    Overrides with value None are ignored. Raises FileNotFoundError if an explicit
    or env-provided path does not exist, ConfigError if it is invalid.
    """
    settings = Settings()
    path = resolve_config_path(config_file)
    if path is not None:
        if not path.is_file():
            raise FileNotFoundError(str(path))
        settings = replace(settings, **load_config_file(path))

    explicit = {k: v for k, v in overrides.items() if v is not None}
    if explicit:
        settings = replace(settings, **explicit)
    return settings
