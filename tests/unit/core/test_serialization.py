"""Unit tests for JSON rendering helpers."""

from __future__ import annotations

import math

from core.serialization import json_safe


def test_json_safe_replaces_nested_non_finite_floats() -> None:
    """NaN and infinities should become None at any depth."""
    payload = {"record": {"a": math.inf, "b": 1.5}, "rows": [{"c": math.nan}, {"c": -math.inf}]}

    assert json_safe(payload) == {
        "record": {"a": None, "b": 1.5},
        "rows": [{"c": None}, {"c": None}],
    }


def test_json_safe_keeps_other_values() -> None:
    """Finite numbers, strings, booleans and None should pass through."""
    assert json_safe({"n": 3, "s": "x", "t": True, "z": None}) == {
        "n": 3,
        "s": "x",
        "t": True,
        "z": None,
    }
