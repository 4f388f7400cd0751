"""Tests for the JSON helpers."""

import json
from dataclasses import dataclass

import pytest

from models.rectangle import Rectangle, rectangle
from serialization import from_json, positional, to_json


@dataclass
class Circle:
    radius: float


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------


class TestToJson:
    def test_array(self):
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_object_keeps_insertion_order(self):
        assert to_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'
        assert to_json({"b": 1, "a": 2}) == '{"b":1,"a":2}'

    def test_primitives(self):
        assert to_json("hi") == '"hi"'
        assert to_json(None) == "null"
        assert to_json(True) == "true"

    def test_non_ascii_kept(self):
        assert to_json({"name": "café"}) == '{"name":"café"}'

    def test_non_finite_floats_become_null(self):
        assert to_json([float("nan"), float("inf"), -float("inf")]) == "[null,null,null]"

    def test_pydantic_model(self):
        assert to_json(rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_dataclass(self):
        assert to_json(Circle(radius=10)) == '{"radius":10}'


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_positional_dataclass(self):
        assert from_json(positional(Circle), '{"radius":10}') == Circle(radius=10)

    def test_rectangle_round_trip(self):
        text = to_json({"width": 10, "height": 20})
        r = from_json(Rectangle.from_values, text)
        assert r.width == 10
        assert r.height == 20
        assert r.get_area() == 200

    def test_positional_rectangle_round_trip(self):
        text = to_json({"width": 10, "height": 20})
        r = from_json(positional(Rectangle), text)
        assert r == Rectangle(10, 20)
        assert r.get_area() == 200

    def test_array_values(self):
        assert from_json(list, "[1,2,3]") == [1, 2, 3]

    def test_values_in_key_order(self):
        assert from_json(tuple, '{"z":1,"a":2}') == (1, 2)

    def test_malformed_text(self):
        with pytest.raises(json.JSONDecodeError):
            from_json(list, "{not json")

    def test_scalar_rejected(self):
        with pytest.raises(ValueError):
            from_json(list, "42")

    def test_arity_mismatch_is_factory_defined(self):
        with pytest.raises(TypeError):
            from_json(positional(Circle), '{"radius":1,"extra":2}')
