"""Tests for the Linux collector.

Each test patches read_text / run_cmd to return fixed text, so nothing on
the host is read. No real commands are invoked.
"""

import os
import unittest
import unittest.mock as mock

from fetchz.collectors.linux.system import (
    CpuInfo,
    LinuxSystemCollector,
    parse_cpuinfo,
    parse_meminfo,
    parse_os_release,
    parse_uptime,
)
from fetchz.parsers import Usage

PATCH_READ = "fetchz.collectors._utils.read_text"
PATCH_CMD = "fetchz.collectors._utils.run_cmd"

OS_RELEASE = """\
PRETTY_NAME="Ubuntu 22.04.4 LTS"
NAME="Ubuntu"
VERSION_ID="22.04"
ID=ubuntu
"""

CPUINFO = """\
processor\t: 0
model name\t: AMD Ryzen 7 5800X 8-Core Processor
cpu cores\t: 8

processor\t: 1
model name\t: AMD Ryzen 7 5800X 8-Core Processor
cpu cores\t: 8

processor\t: 2
model name\t: AMD Ryzen 7 5800X 8-Core Processor
cpu cores\t: 8

processor\t: 3
model name\t: AMD Ryzen 7 5800X 8-Core Processor
cpu cores\t: 8
"""

MEMINFO = """\
MemTotal:       16384000 kB
MemFree:         1000000 kB
MemAvailable:    8192000 kB
Buffers:          200000 kB
Cached:          3000000 kB
"""

DF = (
    "Filesystem        1B-blocks        Used   Available Use% Mounted on\n"
    "/dev/sda2      107374182400 53687091200 53687091200  50% /\n"
)

FILES = {
    "/etc/os-release": OS_RELEASE,
    "/proc/uptime": "93784.52 350000.10\n",
    "/proc/cpuinfo": CPUINFO,
    "/proc/meminfo": MEMINFO,
}

ENV = {"USER": "ada", "SHELL": "/bin/bash", "TERM": "xterm-256color", "LANG": "en_US.UTF-8"}


def _fake_read(files):
    def read_text(path, limit=None):
        return files.get(str(path))
    return read_text


def _fake_cmd(cmd, **kwargs):
    if cmd[0] == "df":
        return DF
    if cmd[:2] == ["bash", "--version"]:
        return "GNU bash, version 5.1.16(1)-release (x86_64-pc-linux-gnu)\n"
    return ""


class TestLinuxParsers(unittest.TestCase):

    def test_os_release(self):
        self.assertEqual(parse_os_release(OS_RELEASE), ("Ubuntu 22.04.4 LTS", "22.04"))

    def test_os_release_missing_keys(self):
        self.assertEqual(parse_os_release("ID=alpine\n"), ("Linux", "Unknown"))

    def test_uptime_truncates_fraction(self):
        self.assertEqual(parse_uptime("119.99 400.00\n"), 119)

    def test_uptime_garbage(self):
        self.assertEqual(parse_uptime(""), 0)
        self.assertEqual(parse_uptime("abc def"), 0)

    def test_cpuinfo(self):
        self.assertEqual(parse_cpuinfo(CPUINFO),
                         CpuInfo("AMD Ryzen 7 5800X 8-Core Processor", 8, 4))

    def test_cpuinfo_cores_default_to_threads(self):
        text = "processor : 0\nprocessor : 1\nmodel name : ARMv8\n"
        self.assertEqual(parse_cpuinfo(text), CpuInfo("ARMv8", 2, 2))

    def test_cpuinfo_empty_floors_at_one(self):
        self.assertEqual(parse_cpuinfo(""), CpuInfo("Unknown", 1, 1))

    def test_meminfo_uses_mem_available(self):
        usage = parse_meminfo(MEMINFO)
        self.assertEqual(usage.total, 16384000 * 1024)
        self.assertEqual(usage.available, 8192000 * 1024)
        self.assertEqual(usage.used, (16384000 - 8192000) * 1024)

    def test_meminfo_fallback_without_mem_available(self):
        text = "\n".join(l for l in MEMINFO.splitlines() if not l.startswith("MemAvailable"))
        usage = parse_meminfo(text)
        self.assertEqual(usage.available, (1000000 + 200000 + 3000000) * 1024)

    def test_meminfo_used_never_negative(self):
        usage = parse_meminfo("MemTotal: 100 kB\nMemAvailable: 200 kB\n")
        self.assertEqual(usage.used, 0)


class TestLinuxSystemCollector(unittest.TestCase):

    def _collect(self, files=FILES, cmd=_fake_cmd, env=ENV):
        with mock.patch.dict(os.environ, env, clear=True), \
                mock.patch(PATCH_READ, side_effect=_fake_read(files)), \
                mock.patch(PATCH_CMD, side_effect=cmd):
            collector = LinuxSystemCollector()
            return collector, collector.collect()

    def test_full_snapshot(self):
        _, info = self._collect()
        self.assertEqual(info.username, "ada")
        self.assertEqual(info.os_name, "Ubuntu 22.04.4 LTS")
        self.assertEqual(info.os_version, "22.04")
        self.assertEqual(info.uptime_seconds, 93784)
        self.assertEqual(info.shell, "bash")
        self.assertEqual(info.shell_version, "5.1.16")
        self.assertEqual(info.terminal, "xterm-256color")
        self.assertEqual(info.cpu_cores, 8)
        self.assertEqual(info.cpu_threads, 4)
        self.assertEqual(info.memory_total, 16384000 * 1024)
        self.assertEqual(info.disk_total, 107374182400)
        self.assertEqual(info.disk_used, 53687091200)
        self.assertEqual(info.locale, "en_US.UTF-8")

    def test_everything_missing_degrades_to_sentinels(self):
        collector, info = self._collect(files={}, cmd=lambda cmd, **kw: "", env={})
        self.assertEqual((info.os_name, info.os_version), ("Linux", "Unknown"))
        self.assertEqual(info.uptime_seconds, 0)
        self.assertEqual(info.cpu_model, "Unknown")
        self.assertEqual((info.cpu_cores, info.cpu_threads), (1, 1))
        self.assertEqual(info.memory_total, 0)
        self.assertEqual(info.disk_total, 0)
        self.assertEqual(info.username, "unknown")
        self.assertEqual(info.shell, "sh")
        self.assertEqual(info.shell_version, "")
        self.assertEqual(info.terminal, "Unknown")
        self.assertEqual(info.locale, "C")
        self.assertTrue(any("linux.system.os" in e for e in collector.errors))

    def test_failing_source_only_affects_its_field(self):
        def read_text(path, limit=None):
            if path == "/proc/cpuinfo":
                raise RuntimeError("boom")
            return FILES.get(path)

        with mock.patch.dict(os.environ, ENV, clear=True), \
                mock.patch(PATCH_READ, side_effect=read_text), \
                mock.patch(PATCH_CMD, side_effect=_fake_cmd):
            collector = LinuxSystemCollector()
            info = collector.collect()

        self.assertEqual(info.cpu_model, "Unknown")
        self.assertEqual(info.os_version, "22.04")
        self.assertIn("linux.system.cpu: boom", collector.errors)

    def test_memory_error_is_not_swallowed(self):
        def read_text(path, limit=None):
            raise MemoryError

        with mock.patch(PATCH_READ, side_effect=read_text), \
                mock.patch(PATCH_CMD, side_effect=_fake_cmd):
            with self.assertRaises(MemoryError):
                LinuxSystemCollector().collect()

    def test_df_invoked_with_byte_units(self):
        with mock.patch(PATCH_CMD, return_value=DF) as run:
            usage = LinuxSystemCollector()._get_disk()
        run.assert_called_once_with(["df", "-B1", "/"])
        self.assertEqual(usage, Usage(107374182400, 53687091200, 53687091200))


if __name__ == "__main__":
    unittest.main()
