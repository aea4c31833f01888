"""Configuration loader for fetchz.

Resolution order (first match wins):
  1. --config <path> CLI flag (explicit_path argument)
  2. FETCHZ_CONFIG environment variable
  3. $XDG_CONFIG_HOME/fetchz/config.yaml (XDG_CONFIG_HOME defaults to ~/.config)

No file at all is fine: the built-in defaults are used. Command-line flags
are applied on top of the loaded values by the CLI.

Example::

    display:
      colors: true
      logo: false
    network:
      public_ip_url: https://ifconfig.me/ip
      public_ip_timeout: 1.5
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

from ..models.schema import DisplayConfig

_CONFIG_ENV = "FETCHZ_CONFIG"

# Default config schema with all supported keys and their default values.
_DEFAULTS: dict[str, Any] = {
    "display": {
        "colors":  True,
        "logo":    True,
        "network": True,
        "compact": False,
    },
    "network": {
        "public_ip_url":     "https://ifconfig.me/ip",
        "public_ip_timeout": 2.0,
        "probe_address":     "8.8.8.8",
        "probe_port":        53,
    },
}


# ── path helpers ──────────────────────────────────────────────────────────────

def _user_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / "fetchz" / "config.yaml"


# ── YAML loading ──────────────────────────────────────────────────────────────

def _load_yaml(path: Path) -> dict:
    """Load a YAML file and return its top-level mapping."""
    import yaml
    with open(path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data).__name__}: {path}")
    return data


def _deep_merge(base: dict, override: dict) -> dict:
    """Return a new dict with override merged recursively into base."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


# ── public API ────────────────────────────────────────────────────────────────

def load_config(explicit_path: str | None = None) -> dict:
    """Load and return the resolved configuration dict.

    Args:
        explicit_path: Path passed via ``--config``. When provided, this is
            used exclusively and an error is raised if the file is missing.
            If ``None`` the auto-resolution chain is used.

    Returns:
        Config dict deeply merged over ``_DEFAULTS``.

    Raises:
        FileNotFoundError: If ``explicit_path`` is given but does not exist.
        ValueError: If the YAML file is not a mapping.
    """
    raw: dict = {}

    if explicit_path is not None:
        p = Path(explicit_path)
        if not p.exists():
            raise FileNotFoundError(f"Config file not found: {p}")
        raw = _load_yaml(p)

    else:
        env_path_str = os.environ.get(_CONFIG_ENV)
        if env_path_str:
            env_p = Path(env_path_str)
            if env_p.exists():
                raw = _load_yaml(env_p)
            else:
                print(
                    f"[config] Warning: {_CONFIG_ENV} points to missing file: {env_p}",
                    file=sys.stderr,
                )

        if not raw:
            user = _user_config_path()
            if user.exists():
                raw = _load_yaml(user)

    return _deep_merge(_DEFAULTS, raw)


def _section(config: dict, name: str) -> dict:
    section = config.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' must be a mapping, got {type(section).__name__}")
    return section


def _flag(section: dict, key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"'display.{key}' must be true or false, got {value!r}")
    return value


def _text(value) -> str:
    if not isinstance(value, str) or not value:
        raise TypeError(f"expected a non-empty string, got {value!r}")
    return value


def display_config(config: dict) -> DisplayConfig:
    """Build the DisplayConfig from the ``display`` section."""
    display = _section(config, "display")
    return DisplayConfig(
        show_colors=_flag(display, "colors", True),
        show_logo=_flag(display, "logo", True),
        show_network=_flag(display, "network", True),
        compact=_flag(display, "compact", False),
    )


def network_options(config: dict) -> dict:
    """Keyword arguments for NetworkCollector from the ``network`` section."""
    network = _deep_merge(_DEFAULTS["network"], _section(config, "network"))
    try:
        return {
            "public_ip_url":     _text(network["public_ip_url"]),
            "public_ip_timeout": float(network["public_ip_timeout"]),
            "probe_address":     (_text(network["probe_address"]), int(network["probe_port"])),
        }
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid 'network' setting: {exc}") from exc
