"""Depth-first string harvester for decoded ClojureScript/Transit values.

Font families are stored as PersistentHashSet or PersistentVector tries. The
string element lives inside nested BitmapIndexedNode / ArrayNode structures
whose field path depends on the hash of the string and the trie depth, so
instead of probing fixed paths the whole value is walked and every plausible
string is collected.
"""

import logging
from collections.abc import Mapping, Sequence, Set
from typing import Any

from fontharvest.core.alias import is_alias
from fontharvest.core.constants import (
    DEFAULT_MAX_DEPTH,
    INTERNAL_KEY_PREFIX,
    TRAVERSE_SKIP_KEYS,
)
from fontharvest.core.font_names import is_plausible_font_name

logger = logging.getLogger(__name__)

_ATOMIC_SEQUENCE_TYPES = (str, bytes, bytearray, memoryview)


def is_skipped_key(key: Any) -> bool:
    """Check whether a mapping key holds trie bookkeeping rather than data."""
    if isinstance(key, str):
        return key in TRAVERSE_SKIP_KEYS or key.startswith(INTERNAL_KEY_PREFIX)
    return False


def is_candidate(s: str) -> bool:
    """Check whether a trimmed string is worth collecting."""
    return bool(s) and (is_alias(s) or is_plausible_font_name(s))


def collect_strings_deep(
    value: Any,
    out: list[str],
    depth: int = 0,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> None:
    """Collect candidate strings from an arbitrarily nested value.

    Strings are trimmed and kept when they are alias references (kept
    verbatim) or plausible font names. Numbers and booleans are never
    collected, they are always trie internals. Sequences are walked in
    order, mappings in their iteration order, skipping bookkeeping keys
    (``shift``, ``$cnt$``, ``edit``, ``__hash__``, ``cljs$`` masks).
    Any other object is a dead end.

    Args:
        value: Value to traverse.
        out: Accumulator, candidates are appended in discovery order.
        depth: Current recursion depth, 0 for the root value.
        max_depth: Values below this depth are not visited.
    """
    if depth > max_depth:
        logger.debug(f"Depth ceiling {max_depth} reached, abandoning subtree")
        return
    if value is None:
        return

    if isinstance(value, str):
        s = value.strip()
        if is_candidate(s):
            out.append(s)
        return

    if isinstance(value, Mapping):
        for key, item in value.items():
            if is_skipped_key(key):
                continue
            collect_strings_deep(item, out, depth + 1, max_depth)
        return

    if isinstance(value, (Sequence, Set)) and not isinstance(
        value, _ATOMIC_SEQUENCE_TYPES
    ):
        for item in value:
            collect_strings_deep(item, out, depth + 1, max_depth)
        return

    # Numbers, booleans and unknown objects are dead ends.
