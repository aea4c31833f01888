"""Tests for the macOS collector.

Each test patches run_cmd to return fixed command output, so these run on
any platform. No real sw_vers / sysctl / vm_stat is invoked.
"""

import os
import unittest
import unittest.mock as mock

from fetchz.collectors.macos.system import (
    DEFAULT_PAGE_SIZE,
    MacSystemCollector,
    parse_vm_stat,
    release_name,
)


PATCH_CMD = "fetchz.collectors._utils.run_cmd"

VM_STAT = """\
Mach Virtual Memory Statistics: (page size of 16384 bytes)
Pages free:                               12345.
Pages active:                            400000.
Pages inactive:                           20000.
Pages speculative:                         1500.
"""

DF = (
    "Filesystem     1024-blocks     Used Available Capacity iused ifree %iused  Mounted on\n"
    "/dev/disk3s1s1   971350180 10000000 500000000     3%  404167 4294563 0%   /\n"
)

OUTPUTS = {
    ("sw_vers", "-productVersion"): "14.5\n",
    ("sysctl", "-n", "hw.physicalcpu"): "10\n",
    ("sysctl", "-n", "hw.logicalcpu"): "12\n",
    ("sysctl", "-n", "machdep.cpu.brand_string"): "Apple M2 Pro\n",
    ("sysctl", "-n", "hw.memsize"): "17179869184\n",
    ("vm_stat",): VM_STAT,
    ("df", "-k", "/"): DF,
    ("zsh", "--version"): "zsh 5.9 (x86_64-apple-darwin23.0)\n",
}

ENV = {"USER": "grace", "SHELL": "/bin/zsh", "TERM_PROGRAM": "iTerm.app", "LANG": "en_GB.UTF-8"}


def _fake_cmd(outputs):
    def run_cmd(cmd, **kwargs):
        return outputs.get(tuple(cmd), "")
    return run_cmd


# ── Parsers ───────────────────────────────────────────────────────────────────

class TestReleaseName(unittest.TestCase):

    def test_known_majors(self):
        self.assertEqual(release_name("15.0"), "macOS Sequoia")
        self.assertEqual(release_name("14.5"), "macOS Sonoma")
        self.assertEqual(release_name("11.7.10"), "macOS Big Sur")
        self.assertEqual(release_name("10.15.7"), "macOS Catalina")

    def test_unknown_major_is_generic(self):
        self.assertEqual(release_name("16.0"), "macOS")
        self.assertEqual(release_name(""), "macOS")


class TestVmStat(unittest.TestCase):

    def test_free_plus_inactive_times_page_size(self):
        self.assertEqual(parse_vm_stat(VM_STAT), (12345 + 20000) * 16384)

    def test_default_page_size_without_header(self):
        text = "Pages free: 10.\nPages inactive: 5.\n"
        self.assertEqual(parse_vm_stat(text), 15 * DEFAULT_PAGE_SIZE)

    def test_empty(self):
        self.assertEqual(parse_vm_stat(""), 0)


# ── Collector ─────────────────────────────────────────────────────────────────

class TestMacSystemCollector(unittest.TestCase):

    def _collect(self, outputs, env=ENV, boot_time=None):
        boot = mock.patch("psutil.boot_time", return_value=6400.0) if boot_time is None \
            else mock.patch("psutil.boot_time", side_effect=boot_time)
        with mock.patch.dict(os.environ, env, clear=True), \
                mock.patch(PATCH_CMD, side_effect=_fake_cmd(outputs)), \
                mock.patch("time.time", return_value=10000.0), boot:
            collector = MacSystemCollector()
            return collector, collector.collect()

    def test_full_snapshot(self):
        _, info = self._collect(OUTPUTS)
        self.assertEqual(info.os_name, "macOS Sonoma")
        self.assertEqual(info.os_version, "14.5")
        self.assertEqual(info.uptime_seconds, 3600)
        self.assertEqual(info.cpu_model, "Apple M2 Pro")
        self.assertEqual(info.cpu_cores, 10)
        self.assertEqual(info.cpu_threads, 12)
        self.assertEqual(info.shell, "zsh")
        self.assertEqual(info.shell_version, "5.9")
        self.assertEqual(info.terminal, "iTerm.app")

        available = (12345 + 20000) * 16384
        self.assertEqual(info.memory_total, 17179869184)
        self.assertEqual(info.memory_available, available)
        self.assertEqual(info.memory_used, 17179869184 - available)

        self.assertEqual(info.disk_total, 971350180 * 1024)
        self.assertEqual(info.disk_used, 10000000 * 1024)
        self.assertEqual(info.disk_available, 500000000 * 1024)

    def test_no_commands_available(self):
        collector, info = self._collect({}, env={}, boot_time=OSError("sysctl failed"))
        self.assertEqual((info.os_name, info.os_version), ("macOS", "Unknown"))
        self.assertEqual(info.cpu_model, "Unknown")
        self.assertEqual((info.cpu_cores, info.cpu_threads), (1, 1))
        self.assertEqual(info.uptime_seconds, 0)
        self.assertEqual(info.memory_total, 0)
        self.assertEqual(info.disk_total, 0)
        self.assertIn("macos.system.uptime: sysctl failed", collector.errors)
        self.assertIn("macos.system.cpu_cores: unavailable", collector.errors)

    def test_unparsable_core_count(self):
        outputs = dict(OUTPUTS)
        outputs[("sysctl", "-n", "hw.physicalcpu")] = "sysctl: unknown oid\n"
        _, info = self._collect(outputs)
        self.assertEqual(info.cpu_cores, 1)
        self.assertEqual(info.cpu_threads, 12)

    def test_df_invoked_with_kilobyte_units(self):
        with mock.patch(PATCH_CMD, return_value=DF) as run:
            MacSystemCollector()._get_disk()
        run.assert_called_once_with(["df", "-k", "/"])


if __name__ == "__main__":
    unittest.main()
