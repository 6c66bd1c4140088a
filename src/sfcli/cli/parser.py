"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("sf-cli")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sf-cli", description="CLI tool for Semantic Flow Root Repositories")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser("init", help="Initialize a new SFRootRepo at the given path")
    init_parser.add_argument("path", nargs="?", default=".", help="Target directory (default: current directory)")
    init_parser.add_argument(
        "--siteRoot",
        "--site-root",
        dest="site_root",
        default=None,
        help="Site root URL (skips inference and the site root prompt)",
    )
    init_parser.add_argument("--output", default=None, help="Output folder name (default: docs)")
    init_parser.add_argument("--src", default=None, help="Source folder name (default: src)")
    init_parser.add_argument("--defaults", action="store_true", help="Accept defaults without prompting")
    init_parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    return parser


__all__ = ["build_parser"]
