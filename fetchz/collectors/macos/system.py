"""Collect macOS system identity and resources via sw_vers, sysctl, vm_stat and df."""

from __future__ import annotations

import time

import psutil

from ...models.schema import SystemInfo, saturating_sub
from ...parsers import EMPTY_USAGE, Usage, parse_df, parse_key_number, parse_uint, tokenize_row
from ..base import BaseCollector
from ..common import environment
from .. import _utils

# Major version -> marketing name.
_RELEASE_NAMES = {
    15: "macOS Sequoia",
    14: "macOS Sonoma",
    13: "macOS Ventura",
    12: "macOS Monterey",
    11: "macOS Big Sur",
    10: "macOS Catalina",
}

DEFAULT_PAGE_SIZE = 4096


class MacSystemCollector(BaseCollector[SystemInfo]):
    name = "macos.system"

    def _collect(self) -> SystemInfo:
        os_name, os_version = self._field("os", self._get_os, ("macOS", "Unknown"))
        shell, shell_version = self._field("shell", environment.get_shell, ("sh", ""))
        mem = self._field("memory", self._get_memory, EMPTY_USAGE)
        disk = self._field("disk", self._get_disk, EMPTY_USAGE)

        return SystemInfo(
            hostname=self._field("hostname", environment.get_hostname, "unknown"),
            username=environment.get_username(),
            os_name=os_name,
            os_version=os_version,
            kernel=self._field("kernel", environment.get_kernel, "Unknown"),
            arch=self._field("arch", environment.get_arch, "Unknown"),
            uptime_seconds=self._field("uptime", self._get_uptime, 0),
            shell=shell,
            shell_version=shell_version,
            terminal=environment.get_terminal(),
            cpu_model=self._field("cpu_model", self._get_cpu_model, "Unknown"),
            cpu_cores=self._field("cpu_cores", lambda: self._sysctl_int("hw.physicalcpu"), 1),
            cpu_threads=self._field("cpu_threads", lambda: self._sysctl_int("hw.logicalcpu"), 1),
            memory_total=mem.total,
            memory_used=mem.used,
            memory_available=mem.available,
            disk_total=disk.total,
            disk_used=disk.used,
            disk_available=disk.available,
            locale=environment.get_locale(),
        )

    # ── OS version ───────────────────────────────────────────────────────────

    def _get_os(self) -> tuple[str, str] | None:
        version = _utils.run_cmd(["sw_vers", "-productVersion"]).strip()
        if not version:
            return None
        return release_name(version), version

    # ── Uptime ───────────────────────────────────────────────────────────────

    def _get_uptime(self) -> int:
        return int(time.time() - psutil.boot_time())

    # ── CPU ──────────────────────────────────────────────────────────────────

    def _sysctl(self, key: str) -> str:
        return _utils.run_cmd(["sysctl", "-n", key]).strip()

    def _sysctl_int(self, key: str) -> int | None:
        value = parse_uint(self._sysctl(key), default=-1)
        return value if value >= 0 else None

    def _get_cpu_model(self) -> str | None:
        return self._sysctl("machdep.cpu.brand_string") or None

    # ── Memory ───────────────────────────────────────────────────────────────

    def _get_memory(self) -> Usage:
        total = self._sysctl_int("hw.memsize") or 0
        available = parse_vm_stat(_utils.run_cmd(["vm_stat"]))
        return Usage(total, saturating_sub(total, available), available)

    # ── Disk (df) ────────────────────────────────────────────────────────────

    def _get_disk(self) -> Usage | None:
        out = _utils.run_cmd(["df", "-k", "/"])
        if not out:
            return None
        return parse_df(out, unit=1024)


# ── Helpers ───────────────────────────────────────────────────────────────────

def release_name(version: str) -> str:
    major = parse_uint(version.split(".", 1)[0])
    return _RELEASE_NAMES.get(major, "macOS")


def parse_vm_stat(text: str) -> int:
    """Return available bytes, (free + inactive pages) x page size."""
    page_size = DEFAULT_PAGE_SIZE
    free_pages = 0
    inactive_pages = 0
    for line in text.splitlines():
        if line.startswith("Mach Virtual Memory Statistics"):
            # "... (page size of 16384 bytes)"
            _, sep, rest = line.partition("page size of ")
            if sep:
                tokens = tokenize_row(rest)
                if tokens:
                    page_size = parse_uint(tokens[0], DEFAULT_PAGE_SIZE)
        elif line.startswith(("Pages free:", "Pages inactive:")):
            parsed = parse_key_number(line.rstrip(". \t"))
            if parsed is None:
                continue
            key, pages = parsed
            if key == "Pages free":
                free_pages = pages
            else:
                inactive_pages = pages
    return (free_pages + inactive_pages) * page_size
