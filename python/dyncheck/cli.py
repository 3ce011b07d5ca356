"""CLI entry point for checking JSON values against spec expressions."""

import sys
import json
import logging
import argparse


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="dyncheck",
        description="dyncheck: runtime structural type checking for Python"
    )
    parser.add_argument("command", choices=["match", "version"], help="Command to run")
    parser.add_argument("value", nargs="?", help="JSON value to check")
    parser.add_argument("spec", nargs="?", help="Spec expression, e.g. 'ArrayOf[Number]'")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command == "version":
        from dyncheck import __version__
        print(f"dyncheck version {__version__}")
        return 0

    if args.value is None or args.spec is None:
        print("Error: value and spec arguments required for match", file=sys.stderr)
        return 2

    from dyncheck.core import describe_kind, matches, parse_spec

    try:
        value = json.loads(args.value)
    except json.JSONDecodeError as e:
        print(f"Error: invalid JSON value: {e}", file=sys.stderr)
        return 2

    try:
        spec = parse_spec(args.spec)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if matches(value, spec):
        print(f"✓ {args.value} matches {spec!r}")
        return 0

    print(f"✗ {args.value} does not match {spec!r} (got {describe_kind(value)})")
    return 1


if __name__ == "__main__":
    sys.exit(main())
