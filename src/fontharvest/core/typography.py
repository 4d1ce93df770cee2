"""Normalization and sanitization of typography token values.

Typography values arrive in several serialization formats:

- Transit map ``{"$meta$", "$cnt$", "$arr$": [keyObj, val, ...]}`` (primary)
- API JSON ``{"fontFamilies": "Inter", "fontSizes": "16px", ...}``
- EDN JSON ``{"font-family": ["Inter"], "font-size": "16px", ...}``

:func:`normalize_typography_value_to_form` turns any of them into the stable
form shape used for display and editing, and
:func:`sanitize_typography_value_for_api` strips unknown or empty keys before
a value is written back.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from fontharvest.core.extraction import extract_first_string, extract_font_family
from fontharvest.core.transit import load_plain_object

logger = logging.getLogger(__name__)

# Keys accepted by the typography token value schema.
TYPOGRAPHY_API_KEYS: frozenset[str] = frozenset(
    {
        "fontFamilies",
        "fontSizes",
        "fontWeight",
        "lineHeight",
        "letterSpacing",
        "textCase",
        "textDecoration",
    }
)

FONT_FAMILY_KEYS = ("font-families", "font-family", "fontFamilies", "fontFamily")

# Form key and the source keys read for it: kebab-case first, then API
# camelCase. Plural weights come from resolved values, singular from raw ones.
SIMPLE_FIELDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("fontSize", ("font-sizes", "font-size", "fontSizes", "fontSize")),
    ("fontWeight", ("font-weights", "font-weight", "fontWeights", "fontWeight")),
    ("lineHeight", ("line-height", "lineHeight")),
    ("letterSpacing", ("letter-spacing", "letterSpacing")),
    ("textCase", ("text-case", "textCase")),
    ("textDecoration", ("text-decoration", "textDecoration")),
)


def sanitize_typography_value_for_api(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Drop unknown and empty keys from a form-field map.

    Empty strings are rejected by the schema for numeric fields, so they are
    omitted to let the default apply. Alias references are kept as-is.
    """
    out = {}
    for k, v in raw.items():
        if k not in TYPOGRAPHY_API_KEYS:
            continue
        if v is None or v == "":
            continue
        out[k] = v
    logger.debug(f"Sanitized typography payload: {json.dumps(out, default=str)}")
    return out


def _first_present(m: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for k in keys:
        v = m.get(k)
        if v is not None:
            return v
    return None


def normalize_typography_value_to_form(raw: str) -> dict[str, str]:
    """Convert a serialized typography value into the form shape.

    The result has any of the keys ``fontFamily``, ``fontSize``,
    ``fontWeight``, ``lineHeight``, ``letterSpacing``, ``textCase`` and
    ``textDecoration``; fields that cannot be extracted are omitted.

    Args:
        raw: JSON text of the token value.

    Returns:
        Form dict, empty when the input is not a JSON object.
    """
    plain = load_plain_object(raw)
    if plain is None:
        return {}

    form = {}
    family = extract_font_family(_first_present(plain, FONT_FAMILY_KEYS))
    if family:
        form["fontFamily"] = family

    for form_key, keys in SIMPLE_FIELDS:
        for k in keys:
            value = extract_first_string(plain.get(k))
            if value:
                form[form_key] = value
                break

    return form
