"""Best-effort extraction of typography strings from decoded token values.

Two selectors are provided:

- :func:`extract_font_family` walks the whole value with the deep harvester,
  because font families are sets/vectors buried inside trie nodes.
- :func:`extract_first_string` handles scalar fields (size, weight, line
  height, ...) which are never deeply nested. It must not enumerate arbitrary
  mappings, otherwise trie internals like ``shift: 5`` surface as ``"5"``.

Both return None rather than an empty string when nothing is found.
"""

import decimal
import logging
import math
import numbers
from collections.abc import Mapping, Sequence
from typing import Any, Callable

from fontharvest.core.alias import is_alias
from fontharvest.core.constants import DEFAULT_MAX_DEPTH, MAX_NORMALIZE_DEPTH
from fontharvest.core.harvest import collect_strings_deep
from fontharvest.core.transit import transit_to_plain

logger = logging.getLogger(__name__)

# Semantic fields checked on plain mappings, in order.
SCALAR_FIELD_KEYS = ("value", "name")


def is_number(value: Any) -> bool:
    """Check for a real number, excluding booleans."""
    return isinstance(value, (numbers.Real, decimal.Decimal)) and not isinstance(
        value, bool
    )


def format_number(value: numbers.Real | decimal.Decimal) -> str:
    """Format a number as its plain decimal string.

    Integral floats drop the fractional part so that ``14.0`` and ``14``
    both read ``"14"``. Exponent notation is kept only where the shortest
    float form needs it (``1e+21``, ``1.25e-07``). Decimals keep their own
    digits; other real types (e.g. ``Fraction``) are formatted as floats.
    """
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, decimal.Decimal):
        if value.is_finite() and value == value.to_integral_value():
            return str(int(value))
        return str(value)
    value = float(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _scalar_to_string(value: Any) -> str | None:
    if isinstance(value, str):
        return value.strip() or None
    if is_number(value):
        return format_number(value)
    return None


def extract_font_family(
    raw: Any, max_depth: int = DEFAULT_MAX_DEPTH
) -> str | None:
    """Extract a font-family string from any value shape.

    Candidates are harvested from the whole structure without assumptions
    about field names or trie layout. The first alias reference wins, even
    if a plain font name was found before it; otherwise the first plausible
    font name is returned.

    Args:
        raw: Font-family value: a string, a decoded set/vector, or a trie node.
        max_depth: Depth ceiling for the harvester.

    Returns:
        The alias reference or font-family name, or None if nothing is found.
    """
    if raw is None:
        return None
    if isinstance(raw, str):
        return raw.strip() or None

    candidates: list[str] = []
    collect_strings_deep(raw, candidates, 0, max_depth)
    if not candidates:
        logger.debug(f"No font-family candidate in {type(raw).__name__} value")
        return None

    for candidate in candidates:
        if is_alias(candidate):
            return candidate
    return candidates[0]


def extract_first_string(
    val: Any, normalizer: Callable[[Any], Any] = transit_to_plain
) -> str | None:
    """Extract the first meaningful string from a scalar typography value.

    Top-level strings are trimmed and top-level numbers converted to strings.
    Anything else is normalized once, then sequences are searched element by
    element and mappings are checked only at ``value`` and ``name``. Sequences
    nested deeper than ``MAX_NORMALIZE_DEPTH`` are not searched.

    Args:
        val: Field value, e.g. ``"16px"``, ``400``, ``["{font.size.20}"]``.
        normalizer: Converts opaque values to plain dicts and lists.

    Returns:
        The string form of the value, or None if nothing is found.
    """
    return _first_string(val, normalizer, 0)


def _first_string(
    val: Any, normalizer: Callable[[Any], Any], depth: int
) -> str | None:
    if val is None:
        return None
    if isinstance(val, str) or is_number(val):
        return _scalar_to_string(val)
    if depth > MAX_NORMALIZE_DEPTH:
        logger.debug(f"Nesting ceiling {MAX_NORMALIZE_DEPTH} reached, giving up")
        return None

    plain = normalizer(val)
    if isinstance(plain, str) or is_number(plain):
        return _scalar_to_string(plain)

    if isinstance(plain, Mapping):
        for key in SCALAR_FIELD_KEYS:
            found = _scalar_to_string(plain.get(key))
            if found is not None:
                return found
        return None

    if isinstance(plain, Sequence) and not isinstance(plain, (bytes, bytearray)):
        for item in plain:
            found = _first_string(item, normalizer, depth + 1)
            if found is not None:
                return found
        return None

    return None
