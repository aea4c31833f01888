"""Command-line interface and orchestration for fetchz."""

from __future__ import annotations

import argparse
import sys

import yaml

from . import __version__
from .collectors import detect_family, load_network_collector, load_system_collector
from .config.settings import display_config, load_config, network_options
from .models.schema import DisplayConfig, NetworkInfo
from .report.terminal import render_lines


# ── argument parsing ──────────────────────────────────────────────────────────

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fetchz",
        description="A fast, simple system information tool.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  fetchz              Show full system information with ASCII art\n"
            "  fetchz --no-ascii   Show system information without logo\n"
            "  fetchz --no-color   Show output without ANSI colors\n"
        ),
    )
    parser.add_argument(
        "--no-ascii", "--no-logo", "-n",
        dest="logo",
        action="store_false",
        default=None,
        help="Disable ASCII art logo",
    )
    parser.add_argument(
        "--no-color", "-c",
        dest="colors",
        action="store_false",
        default=None,
        help="Disable colored output",
    )
    parser.add_argument(
        "--no-network",
        dest="network",
        action="store_false",
        default=None,
        help="Disable network information display",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        default=None,
        help="Use compact output mode",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="YAML config file (default: $XDG_CONFIG_HOME/fetchz/config.yaml)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Report collection progress and unavailable fields on stderr",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"fetchz {__version__}",
    )
    return parser.parse_args(argv)


def _apply_flags(display: DisplayConfig, args: argparse.Namespace) -> DisplayConfig:
    """Command-line flags override the config file."""
    overrides = {
        "show_logo":    args.logo,
        "show_colors":  args.colors,
        "show_network": args.network,
        "compact":      args.compact,
    }
    return display.model_copy(update={k: v for k, v in overrides.items() if v is not None})


def _log(verbose: bool, message: str) -> None:
    if verbose:
        print(f"[fetchz] {message}", file=sys.stderr, flush=True)


# ── main entry point ──────────────────────────────────────────────────────────

def run(argv=None) -> None:
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        display = _apply_flags(display_config(config), args)
        net_options = network_options(config)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"[error] {exc}", file=sys.stderr)
        sys.exit(1)

    family = detect_family()
    _log(args.verbose, f"Collecting system information ({family})...")

    system_collector = load_system_collector(family)
    sys_info = system_collector.collect()

    if display.show_network:
        _log(args.verbose, "Collecting network information...")
        network_collector = load_network_collector(family, **net_options)
        net_info = network_collector.collect()
        errors = system_collector.errors + network_collector.errors
    else:
        net_info = NetworkInfo(hostname=sys_info.hostname)
        errors = system_collector.errors

    for error in errors:
        _log(args.verbose, f"  - {error}")

    for line in render_lines(display, sys_info, net_info):
        sys.stdout.write(line + "\n")
    sys.stdout.flush()
