"""Tests for the stateless text parsers.

Run with:  python -m pytest tests/  or  python -m unittest discover tests/
"""

import unittest

from fetchz.parsers import (
    EMPTY_USAGE,
    Usage,
    extract_version,
    parse_df,
    parse_env_file,
    parse_key_number,
    parse_uint,
    split_key_value,
    tokenize_row,
)


class TestKeyValue(unittest.TestCase):

    def test_meminfo_line(self):
        self.assertEqual(parse_key_number("MemTotal:       16384000 kB"), ("MemTotal", 16384000))

    def test_line_without_colon_yields_nothing(self):
        self.assertIsNone(parse_key_number("MemTotal 16384000 kB"))
        self.assertIsNone(split_key_value("no delimiter here"))

    def test_splits_at_first_colon_only(self):
        self.assertEqual(split_key_value("model name\t: Intel(R) i7 @ 2:00"),
                         ("model name", "Intel(R) i7 @ 2:00"))

    def test_non_numeric_value_is_zero(self):
        self.assertEqual(parse_key_number("Hugepagesize:  abc kB"), ("Hugepagesize", 0))

    def test_empty_value_is_zero(self):
        self.assertEqual(parse_key_number("Key:"), ("Key", 0))


class TestParseUint(unittest.TestCase):

    def test_digits(self):
        self.assertEqual(parse_uint(" 42\n"), 42)

    def test_negative_is_rejected(self):
        self.assertEqual(parse_uint("-3"), 0)

    def test_custom_default(self):
        self.assertEqual(parse_uint("", default=7), 7)


class TestTokenizeRow(unittest.TestCase):

    def test_runs_of_spaces_and_tabs(self):
        self.assertEqual(tokenize_row("  /dev/sda1 \t 100   40  60 40% /\n"),
                         ["/dev/sda1", "100", "40", "60", "40%", "/"])

    def test_blank_line(self):
        self.assertEqual(tokenize_row("   "), [])


class TestExtractVersion(unittest.TestCase):

    def test_bash(self):
        out = "GNU bash, version 5.2.15(1)-release (x86_64-pc-linux-gnu)\n"
        self.assertEqual(extract_version(out, "version "), "5.2.15")

    def test_zsh(self):
        self.assertEqual(extract_version("zsh 5.9 (x86_64-apple-darwin23.0)\n", "zsh "), "5.9")

    def test_fish(self):
        self.assertEqual(extract_version("fish, version 3.7.1\n", "fish, version "), "3.7.1")

    def test_stops_at_hyphen(self):
        self.assertEqual(extract_version("tool 1.2-beta", "tool "), "1.2")

    def test_runs_to_end_of_blob(self):
        self.assertEqual(extract_version("zsh 5.9", "zsh "), "5.9")

    def test_missing_prefix(self):
        self.assertIsNone(extract_version("something else", "version "))

    def test_empty_token(self):
        self.assertIsNone(extract_version("version (none)", "version "))


class TestEnvFile(unittest.TestCase):

    def test_values_are_dequoted(self):
        text = 'NAME="Ubuntu"\nVERSION_ID="22.04"\n# comment\nID=ubuntu\nbroken line\n'
        values = parse_env_file(text)
        self.assertEqual(values["NAME"], "Ubuntu")
        self.assertEqual(values["VERSION_ID"], "22.04")
        self.assertEqual(values["ID"], "ubuntu")
        self.assertNotIn("broken line", values)


class TestParseDf(unittest.TestCase):

    LINUX_DF = (
        "Filesystem         1B-blocks         Used    Available Use% Mounted on\n"
        "/dev/nvme0n1p2  502392610816 125098110976 351666487296  27% /\n"
    )

    def test_byte_columns(self):
        self.assertEqual(parse_df(self.LINUX_DF, unit=1),
                         Usage(502392610816, 125098110976, 351666487296))

    def test_kilobyte_columns(self):
        text = (
            "Filesystem     1024-blocks      Used Available Capacity  Mounted on\n"
            "/dev/disk3s1s1   971350180  10523000 456789012     3%    /\n"
        )
        usage = parse_df(text, unit=1024)
        self.assertEqual(usage.total, 971350180 * 1024)
        self.assertEqual(usage.used, 10523000 * 1024)
        self.assertEqual(usage.available, 456789012 * 1024)

    def test_header_only(self):
        self.assertEqual(parse_df(self.LINUX_DF.splitlines()[0], unit=1), EMPTY_USAGE)

    def test_short_row(self):
        self.assertEqual(parse_df("header\n/dev/sda1 100\n", unit=1), EMPTY_USAGE)

    def test_used_capped_at_total(self):
        usage = parse_df("header\nfs 100 250 0 100% /\n", unit=1)
        self.assertEqual(usage.used, 100)


if __name__ == "__main__":
    unittest.main()
