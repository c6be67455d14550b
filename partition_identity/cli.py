#!/usr/bin/env python3
"""
Partition Identity CLI

Usage:
    partition-identity from-path <device>...        # every ID kind for each device
    partition-identity by-uuid <uuid>...            # device path for each UUID
    partition-identity by-partuuid <partuuid>...    # device path for each PARTUUID
    partition-identity by-label <label>...
    partition-identity by-partlabel <partlabel>...
    partition-identity by-id <id>...
    partition-identity resolve <KIND=value|/path>...

Options:
    --root DIR      look for by-* directories under DIR instead of /dev/disk
    -v, --verbose   debug logging on stderr
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.markup import escape

from .errors import DirectoryUnavailableError, PartitionIDParseError
from .identity import PartitionID
from .source import PartitionSource

SUBCOMMANDS = ["from-path", "by-uuid", "by-partuuid", "by-label", "by-partlabel", "by-id", "resolve"]


class _Parser(argparse.ArgumentParser):
    """Usage errors exit 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _console(stderr: bool = False) -> Console:
    # Identifier values are data: no emoji codes (LABEL=BK:cd:2), no highlighting
    return Console(stderr=stderr, soft_wrap=True, emoji=False, highlight=False)


def _show(value) -> str:
    return escape(str(value)) if value is not None else "[dim]None[/dim]"


def cmd_from_path(args) -> int:
    console = _console()
    err = _console(stderr=True)
    status = 0

    for i, device in enumerate(args.devices):
        if i:
            console.print()
        console.print(f"{escape(device)}:")
        for source in PartitionSource:
            try:
                pid = PartitionID.resolve_identity(source, device, args.root)
            except DirectoryUnavailableError as e:
                err.print(f"[red]{escape(str(e))}[/red]")
                console.print(f"  {source.name}: [dim]unavailable[/dim]")
                status = 1
                continue
            console.print(f"  {source.name}: {_show(pid.id if pid else None)}")

    return status


def _by_source(source: PartitionSource):
    def cmd(args) -> int:
        console = _console()
        for value in args.ids:
            try:
                path = PartitionID(source, value).resolve_path(args.root)
            except DirectoryUnavailableError as e:
                _console(stderr=True).print(f"[red]{escape(str(e))}[/red]")
                return 1
            console.print(f"{escape(value)}: {_show(path)}")
        return 0
    return cmd


def cmd_resolve(args) -> int:
    console = _console()
    err = _console(stderr=True)

    for text in args.specs:
        try:
            path = PartitionID.parse(text).resolve_path(args.root)
        except (PartitionIDParseError, DirectoryUnavailableError) as e:
            err.print(f"[red]{escape(str(e))}[/red]")
            return 1
        console.print(f"{escape(text)}: {_show(path)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="partition-identity",
        description="Find the ID of a device by its path, or a device path by its ID",
    )
    parser.add_argument("--root", help="Directory holding the by-* trees (default: /dev/disk)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subs = parser.add_subparsers(dest="cmd", metavar="{" + ",".join(SUBCOMMANDS) + "}")

    # from-path
    p = subs.add_parser("from-path", help="Print every ID kind for each device")
    p.add_argument("devices", nargs="+", metavar="device")
    p.set_defaults(func=cmd_from_path)

    # by-<kind>
    for source in (
        PartitionSource.UUID,
        PartitionSource.PARTUUID,
        PartitionSource.LABEL,
        PartitionSource.PARTLABEL,
        PartitionSource.ID,
    ):
        p = subs.add_parser(f"by-{source.token}", help=f"Find device path by {source.name}")
        p.add_argument("ids", nargs="+", metavar=source.token)
        p.set_defaults(func=_by_source(source))

    # resolve
    p = subs.add_parser("resolve", help="Find device path for KIND=value strings")
    p.add_argument("specs", nargs="+", metavar="spec")
    p.set_defaults(func=cmd_resolve)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.cmd is None:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: must give subcommand: [{', '.join(SUBCOMMANDS)}]", file=sys.stderr)
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
