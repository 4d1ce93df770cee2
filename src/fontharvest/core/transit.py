"""Transit-JSON deserialization utilities.

Token values (typography, shadow, ...) are stored as ClojureScript
PersistentHashMaps and PersistentVectors. Serialized to JSON they produce a
Transit-like wire format::

    map:    {"$meta$": null, "$cnt$": N, "$arr$": [keyObj, val, keyObj, val, ...]}
    vector: {"$meta$": null, "$cnt$": N, "$arr$": ["Inter", ...]}

where ``keyObj`` is a keyword such as
``{"ns": null, "name": "font-size", "$fqn$": "font-size"}``.
"""

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from fontharvest.core.constants import MAX_NORMALIZE_DEPTH

logger = logging.getLogger(__name__)

TRANSIT_ARRAY_KEY = "$arr$"


def _keyword_name(key: Any) -> str | None:
    """Get the name of a keyword object, or None if it is not a keyword."""
    if not isinstance(key, Mapping):
        return None
    fqn = key.get("$fqn$")
    if isinstance(fqn, str) and fqn:
        return fqn
    name = key.get("name")
    if isinstance(name, str) and name:
        return name
    return None


def _is_keyword(key: Any) -> bool:
    return isinstance(key, Mapping) and (
        isinstance(key.get("$fqn$"), str) or isinstance(key.get("name"), str)
    )


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def transit_to_plain(val: Any, depth: int = 0) -> Any:
    """Convert a Transit structure to plain dicts and lists.

    Transit maps become dicts keyed by keyword name, Transit vectors become
    lists. Plain mappings lose their ``$``-prefixed infrastructure keys.
    Strings, numbers and anything else are returned as-is, and so is any
    value nested deeper than ``MAX_NORMALIZE_DEPTH``.

    Args:
        val: Decoded JSON value, or an object exposing mapping/sequence shape.
        depth: Nesting depth of ``val``, 0 for the root value.

    Returns:
        Plain representation of ``val``.
    """
    if val is None or isinstance(val, (str, bytes, bytearray)):
        return val
    if depth > MAX_NORMALIZE_DEPTH:
        logger.debug(f"Nesting ceiling {MAX_NORMALIZE_DEPTH} reached, keeping value")
        return val

    if _is_sequence(val):
        return [transit_to_plain(item, depth + 1) for item in val]

    if not isinstance(val, Mapping):
        return val

    arr = val.get(TRANSIT_ARRAY_KEY)
    if _is_sequence(arr):
        if len(arr) > 0 and _is_keyword(arr[0]):
            result: dict[str, Any] = {}
            for i in range(0, len(arr) - 1, 2):
                key = _keyword_name(arr[i]) or str(i // 2)
                result[key] = transit_to_plain(arr[i + 1], depth + 1)
            return result
        return [transit_to_plain(item, depth + 1) for item in arr]

    return {
        k: transit_to_plain(v, depth + 1)
        for k, v in val.items()
        if not (isinstance(k, str) and k.startswith("$"))
    }


def load_plain_object(raw: str) -> dict[str, Any] | None:
    """Parse a serialized token value into a plain dict.

    The text must be a JSON object (after trimming); Transit maps are
    flattened with :func:`transit_to_plain`.

    Args:
        raw: JSON text of the token value.

    Returns:
        The plain dict, or None when the text is empty, is not valid JSON,
        nests too deeply to decode, or does not describe a map.
    """
    if not raw:
        return None
    s = raw.strip()
    if not s.startswith("{") or not s.endswith("}"):
        return None

    try:
        parsed = json.loads(s)
    except (ValueError, RecursionError) as e:
        logger.debug(f"Token value is not decodable JSON: {e}")
        return None
    if not isinstance(parsed, dict):
        return None

    plain = transit_to_plain(parsed)
    if not isinstance(plain, dict):
        return None
    return plain
