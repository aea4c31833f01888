"""Small text parsers for property files and command output.

None of these raise: a line that does not have the expected shape simply
produces no value.
"""

from __future__ import annotations

import re
from typing import NamedTuple

_WS_RE = re.compile(r"[ \t]+")

# Characters that end a version token in `<shell> --version` output.
_VERSION_STOP = " \n(-"


def split_key_value(line: str) -> tuple[str, str] | None:
    """Split ``key: value`` at the first colon.

    Returns ``None`` when the line has no colon.
    """
    key, sep, value = line.partition(":")
    if not sep:
        return None
    return key.strip(" \t"), value.strip(" \t")


def parse_uint(text: str, default: int = 0) -> int:
    """Parse an unsigned decimal integer, returning *default* on failure."""
    text = text.strip()
    if not text.isdigit():
        return default
    return int(text)


def parse_key_number(line: str) -> tuple[str, int] | None:
    """Parse lines like ``MemTotal:       16384000 kB``.

    The first whitespace-delimited token of the value is read as an unsigned
    integer (0 if it is not one).
    """
    pair = split_key_value(line)
    if pair is None:
        return None
    key, value = pair
    tokens = tokenize_row(value)
    return key, parse_uint(tokens[0]) if tokens else 0


def tokenize_row(line: str) -> list[str]:
    """Split a row of tabular command output on runs of spaces/tabs."""
    return [tok for tok in _WS_RE.split(line.strip(" \t\r\n")) if tok]


def extract_version(blob: str, prefix: str) -> str | None:
    """Return the token that follows *prefix* in *blob*.

    The token ends at the first space, newline, ``(`` or ``-``.
    ``None`` if the prefix is missing or nothing follows it.

    >>> extract_version("GNU bash, version 5.2.15(1)-release", "version ")
    '5.2.15'
    """
    start = blob.find(prefix)
    if start < 0:
        return None
    rest = blob[start + len(prefix):]
    end = len(rest)
    for i, ch in enumerate(rest):
        if ch in _VERSION_STOP:
            end = i
            break
    return rest[:end] or None


def parse_env_file(text: str) -> dict[str, str]:
    """Parse ``KEY=value`` lines (os-release style); values are de-quoted."""
    values: dict[str, str] = {}
    for line in text.splitlines():
        key, sep, value = line.partition("=")
        if not sep or not key or key.startswith("#"):
            continue
        values[key.strip()] = value.strip().strip("\"'")
    return values


class Usage(NamedTuple):
    """Byte totals for a memory pool or filesystem."""

    total: int
    used: int
    available: int


EMPTY_USAGE = Usage(0, 0, 0)


def parse_df(text: str, unit: int) -> Usage:
    """Read total/used/available from the first data row of ``df`` output.

    *unit* is the size of the block the columns are counted in. Used space
    is capped at the total.
    """
    lines = text.splitlines()
    if len(lines) < 2:
        return EMPTY_USAGE
    tokens = tokenize_row(lines[1])
    if len(tokens) < 4:
        return EMPTY_USAGE
    total, used, available = (parse_uint(tok) * unit for tok in tokens[1:4])
    return Usage(total, min(used, total), available)
