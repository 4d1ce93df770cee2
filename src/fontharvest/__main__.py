import argparse
import json
import logging
import sys
from typing import Optional

from fontharvest.core.constants import DEFAULT_MAX_DEPTH
from fontharvest.core.extraction import extract_first_string, extract_font_family
from fontharvest.core.typography import normalize_typography_value_to_form

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Extract typography strings from serialized token values"
    )
    parser.add_argument(
        "input",
        metavar="INPUT",
        type=str,
        nargs="?",
        default="-",
        help="JSON file path, or - for stdin (default)",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--font-family",
        dest="mode",
        action="store_const",
        const="font-family",
        help="Print the font family found anywhere in the value.",
    )
    mode.add_argument(
        "--first-string",
        dest="mode",
        action="store_const",
        const="first-string",
        help="Print the first scalar string of the value.",
    )
    parser.add_argument(
        "--max-depth",
        metavar="N",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Depth ceiling for --font-family. Default: {DEFAULT_MAX_DEPTH}",
    )
    parser.add_argument(
        "--loglevel",
        metavar="LEVEL",
        default="WARNING",
        help="Logging level, default WARNING",
    )
    parser.set_defaults(mode="form")
    return parser.parse_args(argv)


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def main(argv: Optional[list[str]] = None) -> int:
    """Main function to extract typography values from JSON input."""
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.loglevel.upper(), "WARNING"))

    try:
        text = _read_input(args.input)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.mode == "form":
        form = normalize_typography_value_to_form(text)
        print(json.dumps(form, ensure_ascii=False))
        return 0

    try:
        value = json.loads(text)
    except (ValueError, RecursionError) as e:
        print(f"Error: invalid JSON input: {e}", file=sys.stderr)
        return 1

    if args.mode == "font-family":
        result = extract_font_family(value, max_depth=args.max_depth)
    else:
        result = extract_first_string(value)
    logger.debug(f"Extracted {result!r} in {args.mode} mode")

    if result is None:
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
