"""Lookup data shared by the font-name and traversal predicates.

Decoded ClojureScript collections (PersistentHashMap, PersistentVector,
PersistentHashSet) carry trie bookkeeping next to the actual payload. The
sets below describe that bookkeeping so it can be told apart from data.
"""

# Mapping keys whose values are trie internals, never user-visible data.
TRAVERSE_SKIP_KEYS: frozenset[str] = frozenset(
    {
        "$meta$",
        "$cnt$",
        "shift",
        "edit",
        "__hash__",
    }
)

# Keys with this prefix are compiler-generated protocol masks.
INTERNAL_KEY_PREFIX = "cljs$"

# Identifiers that show up as strings inside trie nodes; compared lowercase.
FONT_NAME_STOP_WORDS: frozenset[str] = frozenset(
    {
        "root",
        "tail",
        "shift",
        "edit",
        "ns",
        "fqn",
        "meta",
        "cnt",
    }
)

# Deep enough for any HAMT node nesting produced by the decoder.
DEFAULT_MAX_DEPTH = 8

# Font-name length bounds, inclusive.
MIN_FONT_NAME_LENGTH = 2
MAX_FONT_NAME_LENGTH = 80

# Nesting ceiling for normalization and scalar selection; deeper values are
# left as-is (normalizer) or treated as not found (selectors).
MAX_NORMALIZE_DEPTH = 128
