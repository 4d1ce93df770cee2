"""CLI tool for generating the slim webfont catalog module.

This tool reads the full webfont catalog JSON (``gfonts.json``, ~1.8 MB) and
emits a Python module containing only ``family``, ``variants`` and
``category`` for each font, sorted alphabetically by family.

Usage:
    python -m fontharvest.tools.generate_font_catalog
    python -m fontharvest.tools.generate_font_catalog gfonts.json -o catalog.py
"""

import argparse
import datetime
import json
import logging
import sys
import unicodedata
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = Path("gfonts.json")
DEFAULT_OUTPUT = Path("fontharvest_font_catalog.py")


class CatalogError(Exception):
    """Raised when the source catalog is missing or malformed."""


def load_catalog(path: Path) -> list[Any]:
    """Load the ``items`` list from a webfont catalog file.

    Args:
        path: Path to the catalog JSON file.

    Returns:
        The raw catalog entries.

    Raises:
        CatalogError: If the file is missing, is not JSON, or has no items list.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"{path.name} not found at {path}") from e

    try:
        catalog = json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise CatalogError(f"{path.name} is not valid JSON: {e}") from e

    items = catalog.get("items") if isinstance(catalog, dict) else None
    if not isinstance(items, list):
        raise CatalogError(f"{path.name} has no items array")
    logger.debug(f"Loaded {len(items)} catalog entries from {path}")
    return items


def project_item(entry: Any) -> dict[str, Any]:
    """Reduce a catalog entry to family, variants and category.

    Dropped: files (URL map), menu URL, subsets, version, lastModified, kind.
    """
    if not isinstance(entry, dict):
        entry = {}
    family = entry.get("family")
    category = entry.get("category")
    variants = entry.get("variants")
    return {
        "family": "" if family is None else str(family),
        "variants": [str(v) for v in variants]
        if isinstance(variants, list)
        else ["regular"],
        "category": "" if category is None else str(category),
    }


def _collation_key(family: str) -> tuple[str, str]:
    decomposed = unicodedata.normalize("NFKD", family)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return (stripped.casefold(), family)


def sort_items(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Sort projected items alphabetically by family, ignoring case and accents."""
    return sorted(items, key=lambda item: _collation_key(item["family"]))


def render_module(
    items: list[dict[str, Any]],
    source_name: str,
    date: datetime.date | None = None,
) -> str:
    """Render the catalog as Python source.

    Each item is written on its own line to keep diffs readable.
    """
    date = date or datetime.date.today()
    rows = ",\n    ".join(json.dumps(item, ensure_ascii=False) for item in items)
    body = f"    {rows},\n" if items else ""
    return (
        "# AUTO-GENERATED - do not edit manually.\n"
        "# Run `python -m fontharvest.tools.generate_font_catalog` to regenerate.\n"
        f"# Source: {source_name} ({len(items)} fonts, {date.isoformat()})\n"
        "\n"
        "from typing import TypedDict\n"
        "\n"
        "\n"
        "class FontCatalogItem(TypedDict):\n"
        "    family: str\n"
        "    variants: list[str]\n"
        "    category: str\n"
        "\n"
        "\n"
        "# Full webfont catalog, alphabetically sorted.\n"
        "FONT_CATALOG: list[FontCatalogItem] = [\n"
        f"{body}"
        "]\n"
    )


def generate_catalog(source: Path, output: Path) -> int:
    """Build the catalog module from ``source`` and write it to ``output``.

    Returns:
        Number of fonts written.

    Raises:
        CatalogError: If the source catalog cannot be used.
    """
    items = sort_items([project_item(entry) for entry in load_catalog(source)])
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(render_module(items, source.name), encoding="utf-8")
    return len(items)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI tool.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    parser = argparse.ArgumentParser(
        description="Generate the slim webfont catalog module.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Read gfonts.json from the current directory
  python -m fontharvest.tools.generate_font_catalog

  # Explicit source and output paths
  python -m fontharvest.tools.generate_font_catalog gfonts.json -o src/catalog.py
        """,
    )
    parser.add_argument(
        "source",
        nargs="?",
        type=Path,
        default=DEFAULT_SOURCE,
        help=f"Source catalog JSON (default: {DEFAULT_SOURCE})",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"Output module path (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug messages",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        count = generate_catalog(args.source, args.output)
    except CatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Wrote {count} fonts to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
