"""CLI app entrypoint."""

from __future__ import annotations

import logging
import sys


def main(argv: list[str] | None = None) -> int:
    import sfcli.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "debug", False):
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    if args.command == "init":
        return cli._run_init(args)

    print(f"error: unsupported command: {args.command}", file=sys.stderr)
    return 2


__all__ = ["main"]
