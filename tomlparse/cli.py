"""
Command-line interface for tomlparse.

Usage:
    tomlparse < config.toml           # TOML on stdin -> JSON on stdout
    tomlparse config.toml             # read a file instead of stdin
    tomlparse --compact config.toml   # single-line JSON
    tomlparse --config                # show effective configuration
    tomlparse --version               # show version

Exit status is 0 on success and 1 when the input can't be parsed; the
error message is printed in place of the JSON.
"""

import argparse
import json
import sys
from datetime import date, time

from ._version import __version__, get_display_version
from .errors import TomlError


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    p = argparse.ArgumentParser(
        prog="tomlparse",
        description=(
            "Parse a TOML document and print it as JSON. "
            "Reads standard input unless a FILE is given."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  tomlparse < pyproject.toml          # TOML from stdin\n"
            "  tomlparse Cargo.toml                # TOML from a file\n"
            "  tomlparse --sort-keys app.toml      # stable key order\n"
            "  tomlparse --compact app.toml | jq   # one-line JSON for jq\n"
        ),
    )

    p.add_argument(
        "file",
        nargs="?",
        metavar="FILE",
        help="TOML file to read (default: standard input)",
    )

    p.add_argument(
        "--indent",
        type=int,
        metavar="N",
        help="indent JSON output by N spaces (default: 2)",
    )

    p.add_argument(
        "--compact", "-c",
        action="store_true",
        help="print JSON on a single line",
    )

    p.add_argument(
        "--sort-keys", "-s",
        action="store_true",
        help="sort keys in JSON output",
    )

    p.add_argument(
        "--strict-arrays",
        action="store_true",
        help="reject arrays mixing any two kinds of value",
    )

    p.add_argument(
        "--config",
        action="store_true",
        dest="show_config",
        help="show current configuration",
    )

    p.add_argument(
        "--version", "-V",
        action="version",
        version=f"tomlparse {get_display_version()} ({__version__})",
    )

    return p


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load config and apply CLI overrides
    from .config import load_config
    config = load_config()
    config = config.with_overrides(
        output_indent=0 if args.compact else args.indent,
        output_sort_keys=args.sort_keys or None,
        parser_strict_arrays=args.strict_arrays or None,
    )

    # --config: show effective configuration
    if args.show_config:
        _cmd_config(config)
        return

    from .loader import parse, parse_file
    try:
        if args.file:
            document = parse_file(args.file, strict_arrays=config.parser_strict_arrays)
        else:
            document = parse(sys.stdin.read(), strict_arrays=config.parser_strict_arrays)
    except TomlError as e:
        print(e)
        sys.exit(1)

    try:
        output = to_json(document, config)
    except ValueError as e:
        # Non-finite floats such as 1e999 have no JSON form
        print(f"Cannot convert to JSON: {e}")
        sys.exit(1)

    print(output)


def to_json(document, config) -> str:
    """Serialize a parsed document using the output settings in config.

    Raises ValueError for inf or nan floats, which JSON can't represent.
    """
    return json.dumps(
        document,
        indent=config.output_indent or None,
        sort_keys=config.output_sort_keys,
        ensure_ascii=config.output_ensure_ascii,
        allow_nan=False,
        default=_json_default,
    )


def _json_default(obj):
    # datetime is a date subclass
    if isinstance(obj, (date, time)):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _cmd_config(config):
    """Show effective configuration."""
    from .config import format_config
    print(format_config(config))


if __name__ == "__main__":
    main()
