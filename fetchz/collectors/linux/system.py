"""Collect Linux system identity and resources from /proc, /etc and df."""

from __future__ import annotations

from typing import NamedTuple

from ...models.schema import SystemInfo, saturating_sub
from ...parsers import (
    EMPTY_USAGE,
    Usage,
    parse_df,
    parse_env_file,
    parse_key_number,
    parse_uint,
    split_key_value,
)
from ..base import BaseCollector
from ..common import environment
from .. import _utils

OS_RELEASE = "/etc/os-release"
PROC_UPTIME = "/proc/uptime"
PROC_CPUINFO = "/proc/cpuinfo"
PROC_MEMINFO = "/proc/meminfo"


class CpuInfo(NamedTuple):
    model: str
    cores: int
    threads: int


class LinuxSystemCollector(BaseCollector[SystemInfo]):
    name = "linux.system"

    def _collect(self) -> SystemInfo:
        os_name, os_version = self._field("os", self._get_os, ("Linux", "Unknown"))
        shell, shell_version = self._field("shell", environment.get_shell, ("sh", ""))
        cpu = self._field("cpu", self._get_cpu, CpuInfo("Unknown", 1, 1))
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
            cpu_model=cpu.model,
            cpu_cores=cpu.cores,
            cpu_threads=cpu.threads,
            memory_total=mem.total,
            memory_used=mem.used,
            memory_available=mem.available,
            disk_total=disk.total,
            disk_used=disk.used,
            disk_available=disk.available,
            locale=environment.get_locale(),
        )

    # ── OS release ───────────────────────────────────────────────────────────

    def _get_os(self) -> tuple[str, str] | None:
        text = _utils.read_text(OS_RELEASE, limit=4096)
        if text is None:
            return None
        return parse_os_release(text)

    # ── Uptime ───────────────────────────────────────────────────────────────

    def _get_uptime(self) -> int | None:
        text = _utils.read_text(PROC_UPTIME, limit=64)
        if text is None:
            return None
        return parse_uptime(text)

    # ── CPU ──────────────────────────────────────────────────────────────────

    def _get_cpu(self) -> CpuInfo | None:
        text = _utils.read_text(PROC_CPUINFO)
        if text is None:
            return None
        return parse_cpuinfo(text)

    # ── Memory ───────────────────────────────────────────────────────────────

    def _get_memory(self) -> Usage | None:
        text = _utils.read_text(PROC_MEMINFO, limit=4096)
        if text is None:
            return None
        return parse_meminfo(text)

    # ── Disk (df) ────────────────────────────────────────────────────────────

    def _get_disk(self) -> Usage | None:
        out = _utils.run_cmd(["df", "-B1", "/"])
        if not out:
            return None
        return parse_df(out, unit=1)


# ── Parsers ───────────────────────────────────────────────────────────────────

def parse_os_release(text: str) -> tuple[str, str]:
    values = parse_env_file(text)
    return values.get("PRETTY_NAME") or "Linux", values.get("VERSION_ID") or "Unknown"


def parse_uptime(text: str) -> int:
    # "12345.67 54321.00" -> 12345
    fields = text.split()
    if not fields:
        return 0
    return parse_uint(fields[0].split(".", 1)[0])


def parse_cpuinfo(text: str) -> CpuInfo:
    model = None
    cores = 0
    threads = 0
    for line in text.splitlines():
        if line.startswith("model name"):
            pair = split_key_value(line)
            if pair and model is None:
                model = pair[1]
        elif line.startswith("processor"):
            threads += 1
        elif line.startswith("cpu cores"):
            pair = split_key_value(line)
            if pair:
                cores = parse_uint(pair[1], cores)
    if cores == 0:
        cores = threads
    return CpuInfo(model or "Unknown", max(cores, 1), max(threads, 1))


def parse_meminfo(text: str) -> Usage:
    """Parse /proc/meminfo (kB) into byte totals."""
    fields: dict[str, int] = {}
    for line in text.splitlines():
        parsed = parse_key_number(line)
        if parsed is not None:
            key, value = parsed
            fields[key] = value * 1024

    total = fields.get("MemTotal", 0)
    available = fields.get("MemAvailable", 0)
    if available == 0:
        # kernels before 3.14 have no MemAvailable
        available = fields.get("MemFree", 0) + fields.get("Buffers", 0) + fields.get("Cached", 0)
    return Usage(total, saturating_sub(total, available), available)
