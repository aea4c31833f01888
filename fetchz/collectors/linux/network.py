"""Enumerate Linux network interfaces via /proc/net/dev, `ip` and sysfs."""

from __future__ import annotations

from ...models.schema import Interface
from ...parsers import split_key_value
from .. import _utils

PROC_NET_DEV = "/proc/net/dev"
SYS_CLASS_NET = "/sys/class/net"


def list_interfaces() -> list[Interface]:
    text = _utils.read_text(PROC_NET_DEV, limit=4096)
    if text is None:
        return []
    interfaces = []
    for name in parse_net_dev(text):
        interfaces.append(Interface(
            name=name,
            ipv4=get_ipv4(name),
            mac=get_mac(name),
            is_loopback=name == "lo",
        ))
    return interfaces


def get_ipv4(name: str) -> str:
    return parse_ip_addr(_utils.run_cmd(["ip", "-4", "addr", "show", name]))


def get_mac(name: str) -> str:
    text = _utils.read_text(f"{SYS_CLASS_NET}/{name}/address", limit=32)
    return text.strip() if text else ""


# ── Parsers ───────────────────────────────────────────────────────────────────

def parse_net_dev(text: str) -> list[str]:
    """Interface names from /proc/net/dev, in file order."""
    names = []
    for line in text.splitlines()[2:]:   # two header lines
        pair = split_key_value(line)
        if pair and pair[0]:
            names.append(pair[0])
    return names


def parse_ip_addr(text: str) -> str:
    """First IPv4 address in `ip -4 addr show` output, or ''."""
    for line in text.splitlines():
        line = line.strip(" \t")
        if not line.startswith("inet "):
            continue
        rest = line[len("inet "):]
        for stop in ("/", " "):
            end = rest.find(stop)
            if end >= 0:
                return rest[:end]
    return ""
