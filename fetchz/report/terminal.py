"""Render a snapshot as text for the terminal, next to the OS logo."""

from __future__ import annotations

from typing import Iterable, Iterator

from ..models.schema import DisplayConfig, NetworkInfo, SystemInfo
from .formatting import format_disk, format_memory, format_uptime
from .logos import RESET, Color, Logo
from .theme import select_logo

# Columns between the logo and the info text.
GAP = 3

PALETTE = (
    "".join(f"\x1b[{code}m   " for code in range(40, 48)) + RESET,
    "".join(f"\x1b[{code}m   " for code in range(100, 108)) + RESET,
)


def format_line(label: str, value: str, color: Color, show_colors: bool) -> str:
    if show_colors:
        return f"{color.bold}{label}{RESET}: {value}"
    return f"{label}: {value}"


def build_info_lines(
    config: DisplayConfig,
    sys_info: SystemInfo,
    net_info: NetworkInfo,
    color: Color,
) -> list[str]:
    """Return the info column, one entry per output row."""
    colors = config.show_colors

    def line(label: str, value: str) -> str:
        return format_line(label, value, color, colors)

    title = f"{sys_info.username}@{sys_info.hostname}"
    lines = [f"{color.bold}{title}{RESET}" if colors else title, "-" * len(title)]

    shell = sys_info.shell
    if sys_info.shell_version:
        shell = f"{shell} {sys_info.shell_version}"

    lines += [
        line("OS", sys_info.os_name),
        line("Kernel", sys_info.kernel),
        line("Arch", sys_info.arch),
        line("Uptime", format_uptime(sys_info.uptime_seconds)),
        line("Shell", shell),
        line("Terminal", sys_info.terminal),
        line("CPU", f"{sys_info.cpu_model} ({sys_info.cpu_cores}C/{sys_info.cpu_threads}T)"),
        line("Memory", format_memory(sys_info.memory_used, sys_info.memory_total)),
        line("Disk (/)", format_disk(sys_info.disk_used, sys_info.disk_total)),
        line("Locale", sys_info.locale),
    ]

    if config.show_network:
        if not config.compact:
            lines.append("")
        lines.append(line("Local IP", net_info.local_ip))
        lines.append(line("Public IP", net_info.public_ip))
        for iface in net_info.interfaces:
            if iface.is_loopback or not iface.ipv4:
                continue
            lines.append(line("Interface", f"{iface.name}: {iface.ipv4}"))

    # compact only drops the blank spacer rows
    if not config.compact:
        lines.append("")
    if colors:
        lines.extend(PALETTE)

    return lines


def side_by_side(logo: Logo, info_lines: list[str], show_colors: bool) -> Iterator[str]:
    """Yield rows of the logo column padded to ``logo.width``, a gap, then the info column."""
    rows = max(len(logo.art), len(info_lines))
    gap = " " * GAP
    for i in range(rows):
        if i < len(logo.art):
            art = logo.art[i]
            padding = " " * max(logo.width - len(art), 0)
            if show_colors:
                art = f"{logo.color.ansi}{art}{RESET}"
            left = art + padding
        else:
            left = " " * logo.width
        right = info_lines[i] if i < len(info_lines) else ""
        yield left + gap + right


def render_lines(
    config: DisplayConfig,
    sys_info: SystemInfo,
    net_info: NetworkInfo,
) -> Iterator[str]:
    """Yield the output rows (without newlines)."""
    logo = select_logo(sys_info.os_name)
    info_lines = build_info_lines(config, sys_info, net_info, logo.color)
    if config.show_logo:
        yield from side_by_side(logo, info_lines, config.show_colors)
    else:
        yield from info_lines


def render(
    config: DisplayConfig,
    sys_info: SystemInfo,
    net_info: NetworkInfo,
) -> str:
    return _join(render_lines(config, sys_info, net_info))


def _join(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)
