"""Normalization of shadow token values for preview display.

Shadow values arrive in the same serialization formats as typography values:

- API JSON ``{"type", "x", "y", "blur", "spread", "color"}``
- Transit map ``{"$meta$", "$cnt$", "$arr$": [keyObj, val, ...]}``
- EDN key variants ``{"offset-x": ..., "offset-y": ...}``

:func:`normalize_shadow_value_to_preview` converts any of them into a plain
dict of optional strings that a preview can render without knowing the wire
format.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from fontharvest.core.constants import MAX_NORMALIZE_DEPTH
from fontharvest.core.extraction import (
    extract_first_string,
    format_number,
    is_number,
)
from fontharvest.core.transit import load_plain_object, transit_to_plain

logger = logging.getLogger(__name__)

# Property names that may hold the color string of a nested color value.
COLOR_FIELD_KEYS = ("value", "color", "hex", "rgba", "name")

# Preview key and the source keys read for it.
SHADOW_FIELDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("x", ("x", "offset-x", "offsetX")),
    ("y", ("y", "offset-y", "offsetY")),
    ("blur", ("blur",)),
    ("spread", ("spread",)),
    ("type", ("type",)),
)


def _field_to_string(value: Any) -> str | None:
    if isinstance(value, str):
        return value.strip()
    if is_number(value):
        return format_number(value)
    return None


def extract_shadow_color_string(val: Any) -> str | None:
    """Extract a displayable color string from a shadow ``color`` value.

    Colors may be CSS strings (``"rgba(0,0,0,0.25)"``), alias references
    (``"{color.shadow}"``) or nested Transit maps. Mappings are checked at
    ``value``, ``color``, ``hex``, ``rgba`` and ``name`` before falling back
    to :func:`extract_first_string`.

    Args:
        val: Color value.

    Returns:
        The color string, or None if nothing is found.
    """
    return _color_string(val, 0)


def _color_string(val: Any, depth: int) -> str | None:
    if isinstance(val, str):
        return val.strip() or None
    if depth > MAX_NORMALIZE_DEPTH:
        logger.debug(f"Nesting ceiling {MAX_NORMALIZE_DEPTH} reached, giving up")
        return None

    plain = transit_to_plain(val)
    if isinstance(plain, str):
        return plain.strip() or None

    if isinstance(plain, Sequence) and not isinstance(plain, (bytes, bytearray)):
        for item in plain:
            found = _color_string(item, depth + 1)
            if found:
                return found
        return None

    if isinstance(plain, Mapping):
        for k in COLOR_FIELD_KEYS:
            v = plain.get(k)
            if isinstance(v, str) and v.strip():
                return v.strip()
        return extract_first_string(plain)

    return extract_first_string(val)


def normalize_shadow_value_to_preview(raw: str) -> dict[str, str]:
    """Convert a serialized shadow value into the preview shape.

    The result has any of the keys ``x``, ``y``, ``blur``, ``spread``,
    ``type`` and ``color``. Numbers become strings, aliases stay intact.
    A field holding a blank string is kept as ``""``.

    Args:
        raw: JSON text of the token value.

    Returns:
        Preview dict, empty when the input is not a JSON object.
    """
    plain = load_plain_object(raw)
    if plain is None:
        return {}

    result = {}
    for out_key, keys in SHADOW_FIELDS:
        for k in keys:
            value = _field_to_string(plain.get(k))
            if value is not None:
                result[out_key] = value
                break

    raw_color = plain.get("color")
    if raw_color is not None:
        color = extract_shadow_color_string(raw_color)
        if color:
            result["color"] = color

    return result
