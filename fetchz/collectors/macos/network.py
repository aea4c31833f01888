"""Enumerate macOS network interfaces by parsing `ifconfig -a`."""

from __future__ import annotations

from ...models.schema import Interface
from .. import _utils


def list_interfaces() -> list[Interface]:
    return parse_ifconfig(_utils.run_cmd(["ifconfig", "-a"]))


def parse_ifconfig(text: str) -> list[Interface]:
    """Parse ``ifconfig -a`` output into interfaces, in listing order.

    An unindented line opens a record; the indented lines that follow
    belong to it. The record is flushed at the next unindented line and at
    end of input.
    """
    interfaces: list[Interface] = []
    current: dict | None = None

    def flush() -> None:
        if current is not None:
            interfaces.append(Interface(**current))

    for line in text.splitlines():
        if not line:
            continue
        if line[0] not in " \t":
            flush()
            name, sep, _ = line.partition(":")
            current = None
            if sep:
                current = {
                    "name":        name,
                    "ipv4":        "",
                    "mac":         "",
                    "is_loopback": name.startswith("lo"),
                }
            continue
        if current is None:
            continue
        stripped = line.strip(" \t")
        if stripped.startswith("inet "):
            rest = stripped[len("inet "):]
            addr, sep, _ = rest.partition(" ")
            if sep:
                current["ipv4"] = addr
        elif stripped.startswith("ether "):
            current["mac"] = stripped[len("ether "):].partition(" ")[0]
    flush()
    return interfaces
