"""Human-readable formatting of durations and byte quantities."""

from __future__ import annotations

MIB = 1024 ** 2
GIB = 1024 ** 3


def percent(used: int, total: int) -> int:
    """Integer percentage, truncated; 0 when *total* is 0."""
    if total <= 0:
        return 0
    return used * 100 // total


def format_uptime(seconds: int) -> str:
    """Format uptime with the coarsest non-zero unit first.

    >>> format_uptime(3661)
    '1 hours, 1 mins'
    """
    days, remainder = divmod(seconds, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes = remainder // 60

    if days > 0:
        return f"{days} days, {hours} hours, {minutes} mins"
    if hours > 0:
        return f"{hours} hours, {minutes} mins"
    return f"{minutes} mins"


def _format_usage(used: int, total: int, unit: int, suffix: str) -> str:
    return f"{used // unit} {suffix} / {total // unit} {suffix} ({percent(used, total)}%)"


def format_memory(used: int, total: int) -> str:
    return _format_usage(used, total, MIB, "MiB")


def format_disk(used: int, total: int) -> str:
    return _format_usage(used, total, GIB, "GiB")
