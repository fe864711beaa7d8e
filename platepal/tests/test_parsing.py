from __future__ import annotations

import pytest

from platepal.client.parsing import PARSE_ERROR_MESSAGE, parse_restaurants
from platepal.errors import ParseError


def test_extracts_array_surrounded_by_prose():
    text = (
        "Sure! Here are some options:\n"
        '[{"name": "Green Leaf", "address": "1 Main St", "description": "All vegan", "rating": "4.5/5"},'
        ' {"name": "Falafel Hut", "address": "2 Side St", "description": "Halal"}]\n'
        "Enjoy your meal!"
    )
    restaurants = parse_restaurants(text)
    assert [r.name for r in restaurants] == ["Green Leaf", "Falafel Hut"]
    assert restaurants[0].rating == "4.5/5"
    assert restaurants[1].rating is None


def test_extracts_array_inside_code_fence():
    text = '```json\n[{"name": "A", "address": "x", "description": "y"}]\n```'
    assert parse_restaurants(text)[0].name == "A"


def test_nested_arrays_stay_intact():
    text = '[{"name": "A", "address": "x", "description": "y", "tags": ["vegan", "raw"]}]'
    assert len(parse_restaurants(text)) == 1


def test_missing_fields_default_to_empty():
    restaurant = parse_restaurants('[{"name": "Only Name"}]')[0]
    assert restaurant.address == ""
    assert restaurant.description == ""


def test_numeric_rating_becomes_text():
    assert parse_restaurants('[{"name": "A", "rating": 4.2}]')[0].rating == "4.2"


def test_non_object_items_are_skipped():
    assert [r.name for r in parse_restaurants('[1, "x", {"name": "A"}]')] == ["A"]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Sorry, I could not find anything.",
        '{"name": "not an array"}',
        "[this is not json]",
        "[1, 2] and later [3]",
    ],
)
def test_unparseable_reply_raises(text):
    with pytest.raises(ParseError, match=PARSE_ERROR_MESSAGE):
        parse_restaurants(text)
