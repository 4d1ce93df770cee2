"""Tests for transit module."""

import json
from typing import Any

import pytest

from fontharvest.core.constants import MAX_NORMALIZE_DEPTH
from fontharvest.core.transit import load_plain_object, transit_to_plain

from .conftest import (
    deep_json_list,
    deep_list,
    keyword,
    transit_map,
    transit_vector,
)


class TestTransitToPlain:
    """Tests for transit_to_plain function."""

    @pytest.mark.parametrize("value", [None, "Inter", 16, 1.5, True, b"raw"])
    def test_scalars_unchanged(self, value: Any) -> None:
        """Test that scalars are returned as-is."""
        assert transit_to_plain(value) == value

    def test_map(self) -> None:
        """Test converting a Transit map to a dict."""
        value = transit_map(font_size="16px", font_weight=400)
        assert transit_to_plain(value) == {"font-size": "16px", "font-weight": 400}

    def test_vector(self) -> None:
        """Test converting a Transit vector to a list."""
        assert transit_to_plain(transit_vector("Inter", "Roboto")) == [
            "Inter",
            "Roboto",
        ]

    def test_empty_array(self) -> None:
        """Test that an empty $arr$ becomes an empty list."""
        assert transit_to_plain(transit_vector()) == []

    def test_nested(self) -> None:
        """Test that nested Transit values are converted recursively."""
        value = transit_map(
            font_family=transit_vector("Inter"),
            line_height=transit_map(value="1.5"),
        )
        assert transit_to_plain(value) == {
            "font-family": ["Inter"],
            "line-height": {"value": "1.5"},
        }

    def test_keyword_name_fallback(self) -> None:
        """Test keyword objects with only a name, or no usable name."""
        value = {
            "$arr$": [
                {"name": "text-case"},
                "uppercase",
                {"name": ""},
                "lowercase",
            ]
        }
        assert transit_to_plain(value) == {"text-case": "uppercase", "1": "lowercase"}

    def test_fqn_preferred(self) -> None:
        """Test that $fqn$ takes priority over name."""
        key = {"ns": "token", "name": "size", "$fqn$": "token/size"}
        assert transit_to_plain({"$arr$": [key, "16px"]}) == {"token/size": "16px"}

    def test_odd_map_array(self) -> None:
        """Test that a trailing unpaired key is ignored."""
        value = {"$arr$": [keyword("font-size"), "16px", keyword("font-weight")]}
        assert transit_to_plain(value) == {"font-size": "16px"}

    def test_plain_mapping(self) -> None:
        """Test that $-prefixed keys are dropped from plain mappings."""
        value = {"$meta$": None, "$cnt$": 2, "fontFamilies": ["Inter"], "shift": 5}
        assert transit_to_plain(value) == {"fontFamilies": ["Inter"], "shift": 5}

    def test_plain_sequence(self) -> None:
        """Test that tuples and lists become lists."""
        assert transit_to_plain(("Inter", transit_vector("Lato"))) == [
            "Inter",
            ["Lato"],
        ]

    def test_non_list_array(self) -> None:
        """Test that a non-sequence $arr$ is treated as a plain key."""
        assert transit_to_plain({"$arr$": "Inter", "name": "x"}) == {"name": "x"}

    def test_input_not_modified(self) -> None:
        """Test that the input value is left untouched."""
        value = transit_map(font_size="16px")
        before = repr(value)
        transit_to_plain(value)
        assert repr(value) == before

    def test_nesting_ceiling(self) -> None:
        """Test that containers below the nesting ceiling are kept as-is."""
        value = deep_list(5000, "Inter")
        result = transit_to_plain(value)

        original_node, result_node = value, result
        for _ in range(MAX_NORMALIZE_DEPTH):
            original_node, result_node = original_node[0], result_node[0]
        assert result_node is not original_node
        assert result_node[0] is original_node[0]


class TestLoadPlainObject:
    """Tests for load_plain_object function."""

    def test_transit_map(self) -> None:
        """Test parsing and flattening a Transit map."""
        raw = json.dumps(transit_map(blur=4, color="#000"))
        assert load_plain_object(raw) == {"blur": 4, "color": "#000"}

    @pytest.mark.parametrize(
        "raw",
        ["", "  ", "16px", "{color.shadow}", "[1]", '{"a": 1', "{oops}"],
    )
    def test_rejected(self, raw: str) -> None:
        """Test that non-object text yields None."""
        assert load_plain_object(raw) is None

    def test_transit_vector(self) -> None:
        """Test that an object decoding to a vector yields None."""
        assert load_plain_object(json.dumps(transit_vector("x"))) is None

    def test_too_deep_to_decode(self) -> None:
        """Test that JSON too deep for the decoder yields None."""
        raw = '{"a": ' + deep_json_list(100_000, "1") + "}"
        assert load_plain_object(raw) is None
