"""Platform collectors for fetchz.

The host family is detected once; there is no fallback from one family's
collectors to the other's.
"""

from __future__ import annotations

import sys

from .base import BaseCollector
from .common.network import NetworkCollector

LINUX = "linux"
MACOS = "macos"


def detect_family(platform: str | None = None) -> str:
    """Map ``sys.platform`` to a supported family (everything non-Darwin is Linux)."""
    platform = sys.platform if platform is None else platform
    return MACOS if platform == "darwin" else LINUX


def load_system_collector(family: str | None = None) -> BaseCollector:
    """Return the system collector for *family* (detected when omitted)."""
    family = family or detect_family()
    if family == MACOS:
        from .macos.system import MacSystemCollector
        return MacSystemCollector()
    from .linux.system import LinuxSystemCollector
    return LinuxSystemCollector()


def load_network_collector(family: str | None = None, **options) -> NetworkCollector:
    """Return a NetworkCollector wired to *family*'s interface enumerator."""
    family = family or detect_family()
    if family == MACOS:
        from .macos.network import list_interfaces
    else:
        from .linux.network import list_interfaces
    return NetworkCollector(list_interfaces, **options)


__all__ = [
    "BaseCollector",
    "NetworkCollector",
    "detect_family",
    "load_network_collector",
    "load_system_collector",
]
