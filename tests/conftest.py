import json
import logging
import os
from typing import Any

import pytest

logger = logging.getLogger(__name__)


def get_fixture(name: str) -> str:
    """Get a fixture by name."""
    return os.path.join(os.path.dirname(__file__), "fixtures", name)


def load_json_fixture(name: str) -> Any:
    """Load a JSON fixture by name."""
    with open(get_fixture(name), encoding="utf-8") as f:
        return json.load(f)


def nested(depth: int, leaf: Any) -> Any:
    """Wrap a leaf value in ``depth`` levels of single-key mappings.

    ``nested(2, "x")`` returns ``{"a": {"b": "x"}}``, so the leaf sits at
    harvester depth ``depth``.
    """
    value = leaf
    for i in reversed(range(depth)):
        value = {chr(ord("a") + i): value}
    return value


def keyword(name: str) -> dict[str, Any]:
    """Build a Transit keyword object."""
    return {"ns": None, "name": name, "$fqn$": name, "__hash__": None}


def transit_map(**fields: Any) -> dict[str, Any]:
    """Build a Transit map from keyword arguments (underscores become dashes)."""
    arr: list[Any] = []
    for key, value in fields.items():
        arr.extend([keyword(key.replace("_", "-")), value])
    return {"$meta$": None, "$cnt$": len(fields), "$arr$": arr}


def transit_vector(*items: Any) -> dict[str, Any]:
    """Build a Transit vector."""
    return {"$meta$": None, "$cnt$": len(items), "$arr$": list(items)}


def hash_set_trie(*names: str) -> dict[str, Any]:
    """Build a PersistentHashSet-like trie holding ``names``."""
    return {
        "meta": None,
        "hash_map": {
            "meta": None,
            "cnt": len(names),
            "shift": 5,
            "root": {
                "edit": None,
                "bitmap": 2048,
                "arr": [x for name in names for x in (name, True)],
            },
            "has_nil_QMARK_": False,
            "nil_val": None,
            "__hash__": None,
        },
        "__hash__": None,
        "cljs$lang$protocol_mask$partition0$": 15077647,
    }


@pytest.fixture
def typography_transit() -> dict[str, Any]:
    """Transit-encoded typography value with a trie-backed font family."""
    return load_json_fixture("typography-transit.json")


def deep_list(depth: int, leaf: Any) -> Any:
    """Wrap a leaf value in ``depth`` levels of single-element lists."""
    value = leaf
    for _ in range(depth):
        value = [value]
    return value


def deep_json_list(depth: int, leaf: str) -> str:
    """JSON text of ``leaf`` wrapped in ``depth`` levels of arrays."""
    return "[" * depth + leaf + "]" * depth
