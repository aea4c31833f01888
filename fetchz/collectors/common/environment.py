"""Sub-operations shared by the Linux and macOS collectors.

These read the kernel's uname data and the process environment, plus one
``<shell> --version`` invocation.
"""

from __future__ import annotations

import os
import platform

from ...parsers import extract_version
from .. import _utils

# Shell name -> prefix that precedes the version in `<shell> --version`.
_SHELL_VERSION_PREFIX = {
    "bash": "version ",
    "zsh":  "zsh ",
    "fish": "fish, version ",
}


def get_hostname() -> str:
    try:
        return os.uname().nodename or "unknown"
    except (AttributeError, OSError):
        return "unknown"


def get_kernel() -> str:
    try:
        return os.uname().release or "Unknown"
    except (AttributeError, OSError):
        return "Unknown"


def get_arch() -> str:
    return platform.machine() or "Unknown"


def get_username() -> str:
    return os.environ.get("USER") or os.environ.get("LOGNAME") or "unknown"


def get_terminal() -> str:
    for var in ("TERM_PROGRAM", "TERMINAL", "TERM"):
        value = os.environ.get(var)
        if value:
            return value
    return "Unknown"


def get_locale() -> str:
    return os.environ.get("LANG") or os.environ.get("LC_ALL") or "C"


def get_shell() -> tuple[str, str]:
    """Return ``(name, version)``; version is '' when it cannot be determined."""
    path = os.environ.get("SHELL") or "/bin/sh"
    name = path.rstrip("/").rsplit("/", 1)[-1] or path
    prefix = _SHELL_VERSION_PREFIX.get(name)
    if prefix is None:
        return name, ""
    output = _utils.run_cmd([name, "--version"])
    return name, extract_version(output, prefix) or ""
