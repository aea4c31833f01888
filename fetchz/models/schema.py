"""Pydantic v2 models for a fetchz snapshot."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


def saturating_sub(a: int, b: int) -> int:
    """Return a - b, clamped at zero."""
    return a - b if a > b else 0


class SystemInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    hostname: str = "unknown"
    username: str = "unknown"
    os_name: str = "Linux"
    os_version: str = "Unknown"
    kernel: str = "Unknown"
    arch: str = "Unknown"

    uptime_seconds: int = 0

    shell: str = "sh"
    shell_version: str = ""   # empty -> rendered as name only

    terminal: str = "Unknown"

    cpu_model: str = "Unknown"
    cpu_cores: int = 1
    cpu_threads: int = 1

    # bytes
    memory_total: int = 0
    memory_used: int = 0
    memory_available: int = 0

    # bytes, root filesystem
    disk_total: int = 0
    disk_used: int = 0
    disk_available: int = 0

    locale: str = "C"

    @field_validator("cpu_cores", "cpu_threads", mode="before")
    @classmethod
    def _at_least_one(cls, value):
        try:
            return max(int(value), 1)
        except (TypeError, ValueError):
            return 1

    @field_validator(
        "uptime_seconds",
        "memory_total", "memory_used", "memory_available",
        "disk_total", "disk_used", "disk_available",
        mode="before",
    )
    @classmethod
    def _non_negative(cls, value):
        try:
            return max(int(value), 0)
        except (TypeError, ValueError):
            return 0


class Interface(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    ipv4: str = ""
    ipv6: str = ""   # reserved, not collected yet
    mac: str = ""
    is_up: bool = True
    is_loopback: bool = False


class NetworkInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    hostname: str = "unknown"
    local_ip: str = "Unknown"
    public_ip: str = "N/A"
    interfaces: tuple[Interface, ...] = ()


class DisplayConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    show_colors: bool = True
    show_logo: bool = True
    show_network: bool = True
    compact: bool = False
