import argparse
import sys

PROG = "gcloud-backup"
USAGE = (
    f"{PROG} [-import|-export] -account=<user_name> -project=<project_name> "
    "-service=<service_list> OPTIONS..."
)


class UsageError(ValueError):
    """Raised when the command line is missing or has conflicting flags."""


class BackupArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that leaves reporting and exit codes to the caller."""

    def error(self, message: str):
        raise UsageError(message)


TRUE_VALUES = {"1", "t", "true"}
FALSE_VALUES = {"0", "f", "false"}


def parse_bool(value: str) -> bool:
    """Parse the optional value of a boolean flag, e.g. -readable=false."""
    lowered = value.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {value!r}")


def create_parser() -> BackupArgumentParser:
    parser = BackupArgumentParser(
        prog=PROG,
        usage=USAGE,
        description="Export Google Compute Engine resources to JSON",
        add_help=False,
        allow_abbrev=False,
    )

    parser.add_argument(
        "-version",
        "--version",
        nargs="?",
        const=True,
        default=False,
        type=parse_bool,
        metavar="BOOL",
        help="Display version information",
    )
    parser.add_argument(
        "-h",
        "-help",
        "--help",
        nargs="?",
        const=True,
        default=False,
        type=parse_bool,
        metavar="BOOL",
        dest="help",
        help="Display this help",
    )

    # Actions (exactly one, checked in Action.from_args)
    parser.add_argument(
        "-export",
        "--export",
        nargs="?",
        const=True,
        default=False,
        type=parse_bool,
        metavar="BOOL",
        help="Create new services export",
    )
    parser.add_argument(
        "-import",
        "--import",
        nargs="?",
        const=True,
        default=False,
        type=parse_bool,
        metavar="BOOL",
        dest="import_",
        help="Start services import from backup",
    )

    parser.add_argument(
        "-readable",
        "--readable",
        nargs="?",
        const=True,
        default=False,
        type=parse_bool,
        metavar="BOOL",
        help="Output JSON in readable format",
    )
    parser.add_argument(
        "-service",
        "--service",
        type=str,
        default="",
        help="List of services to export/import (comma separated)",
    )
    parser.add_argument(
        "-account",
        "--account",
        type=str,
        default="",
        help="Google SDK account username",
    )
    parser.add_argument(
        "-project",
        "--project",
        type=str,
        default="",
        help="Google SDK project name",
    )
    parser.add_argument(
        "-region",
        "--region",
        type=str,
        default="",
        help="Specify Google compute region",
    )
    parser.add_argument(
        "-v",
        "-verbose",
        "--verbose",
        nargs="?",
        const=True,
        default=False,
        type=parse_bool,
        metavar="BOOL",
        help="If flagged, print debug logs as the export runs",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return create_parser().parse_args(argv)


def print_usage(message: str = "") -> None:
    """Print an optional error and the full usage text to stderr."""
    if message:
        print(f"Error: {message}\n", file=sys.stderr)
    sys.stderr.write(create_parser().format_help())
