"""Command-line interface of the datashed tool."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import semver

from datashed.config import DEFAULT_VERSION, DatashedError
from datashed.init import InitCommand, Vcs

_PROG = "datashed"
_VERSION = "0.1.0"


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(2, f"error: {message}\n")


def _version(value: str) -> semver.Version:
    try:
        return semver.Version.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"invalid value '{value}' for '--version <VERSION>': {exc}"
        ) from exc


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser of the ``datashed`` command."""
    parser = _Parser(prog=_PROG, description="Manage datasheds.")
    parser.add_argument("-V", "--version", action="version", version=f"{_PROG} {_VERSION}")

    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")
    init = commands.add_parser(
        "init",
        help="Create a new datashed or re-initialize an existing one",
        description="Create a new datashed or re-initialize an existing one",
    )

    noise = init.add_mutually_exclusive_group()
    noise.add_argument(
        "-q", "--quiet", action="store_true", help="Operate quietly; do not show progress"
    )
    noise.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Run verbosely; print additional information to the standard error stream",
    )

    init.add_argument("-n", "--name", help="The name of the datashed.")
    init.add_argument(
        "--version",
        type=_version,
        default=_version(DEFAULT_VERSION),
        help="The version of the datashed.",
    )
    init.add_argument("-d", "--description", help="A short blurb about the datashed.")
    init.add_argument(
        "-a",
        "--author",
        dest="authors",
        action="append",
        default=[],
        help="An author of the datashed; defaults to the Git identity.",
    )
    init.add_argument(
        "--vcs",
        choices=[vcs.value for vcs in Vcs],
        default=Vcs.GIT.value,
        help="Initialize the datashed for the given version control system.",
    )
    init.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Whether to overwrite config with default values or not.",
    )
    init.add_argument(
        "directory", nargs="?", help='The location of the new datashed (default ".")'
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return its exit code."""
    args = build_parser().parse_args(argv)

    command = InitCommand(
        name=args.name,
        version=args.version,
        description=args.description,
        authors=list(args.authors),
        vcs=Vcs(args.vcs),
        force=args.force,
        directory=args.directory,
        quiet=args.quiet,
        verbose=args.verbose,
    )

    try:
        return command.execute()
    except (DatashedError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())