"""Tests for Rectangle and the JSON helpers."""

import json
from dataclasses import dataclass

import pytest

from cssbuilder.objects import Rectangle, from_json, to_json


@dataclass
class Circle:
    radius: float

    def get_diameter(self):
        return self.radius * 2


class Plain:
    def __init__(self):
        self.name = "plain"
        self.tags = ["a", "b"]


# ---------------------------------------------------------------------------
# Rectangle
# ---------------------------------------------------------------------------


class TestRectangle:
    def test_fields(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self):
        assert Rectangle(10, 20).get_area() == 200

    def test_area_follows_mutation(self):
        r = Rectangle(2, 3)
        r.width = 5
        assert r.get_area() == 15


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------


class TestToJson:
    def test_list(self):
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_dict(self):
        assert to_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_dataclass(self):
        assert to_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object(self):
        assert to_json(Plain()) == '{"name":"plain","tags":["a","b"]}'

    def test_non_ascii_kept(self):
        assert to_json({"city": "Zürich"}) == '{"city":"Zürich"}'

    def test_unserializable(self):
        with pytest.raises(TypeError):
            to_json({1, 2})


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_binds_methods(self):
        c = from_json(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10
        assert c.get_diameter() == 20

    def test_rectangle_round_trip(self):
        r = from_json(Rectangle, to_json(Rectangle(10, 20)))
        assert r == Rectangle(10, 20)
        assert r.get_area() == 200

    def test_init_not_called(self):
        p = from_json(Plain, '{"name":"loaded"}')
        assert p.name == "loaded"
        assert not hasattr(p, "tags")

    def test_non_object_document(self):
        with pytest.raises(TypeError, match="Expected a JSON object"):
            from_json(Circle, "[1,2,3]")

    def test_malformed(self):
        with pytest.raises(json.JSONDecodeError):
            from_json(Circle, "{radius: 10")
