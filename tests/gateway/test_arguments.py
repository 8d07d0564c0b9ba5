"""Tests for argument coercion."""

import pytest

from cfpulse.arguments import Arguments
from cfpulse.errors import ArgumentCoercionError


def test_absent_and_none_are_not_supplied():
    args = Arguments({"memory": None})

    assert args.integer("memory") is None
    assert args.integer("disk") is None
    assert args.string("name", default="fallback") == "fallback"
    assert "memory" not in args


def test_required_argument_missing():
    with pytest.raises(ArgumentCoercionError) as exc_info:
        Arguments({}).string("name", required=True)

    assert exc_info.value.argument == "name"
    assert str(exc_info.value) == "Invalid argument 'name': missing required argument"


def test_required_string_must_not_be_blank():
    with pytest.raises(ArgumentCoercionError, match="must not be empty"):
        Arguments({"name": "  "}).string("name", required=True)


def test_string_accepts_numbers_but_not_booleans_or_objects():
    assert Arguments({"name": 42}).string("name") == "42"
    with pytest.raises(ArgumentCoercionError):
        Arguments({"name": True}).string("name")
    with pytest.raises(ArgumentCoercionError):
        Arguments({"name": {"a": 1}}).string("name")


@pytest.mark.parametrize(
    "raw, expected",
    [(3, 3), (3.0, 3), ("3", 3), (" 12 ", 12), (0, 0)],
)
def test_integer_coercion(raw, expected):
    assert Arguments({"instances": raw}).integer("instances") == expected


@pytest.mark.parametrize("raw", [3.5, "three", True, [1], float("inf")])
def test_integer_rejects_non_integers(raw):
    with pytest.raises(ArgumentCoercionError):
        Arguments({"instances": raw}).integer("instances")


def test_integer_minimum():
    with pytest.raises(ArgumentCoercionError, match="must be at least 1"):
        Arguments({"memory": 0}).integer("memory", minimum=1)
    assert Arguments({"instances": 0}).integer("instances", minimum=0) == 0


@pytest.mark.parametrize(
    "raw, expected",
    [(True, True), (False, False), ("true", True), ("No", False), ("1", True), (0, False)],
)
def test_boolean_coercion(raw, expected):
    assert Arguments({"noStart": raw}).boolean("noStart") is expected


def test_boolean_rejects_other_values():
    with pytest.raises(ArgumentCoercionError):
        Arguments({"noStart": "maybe"}).boolean("noStart")
    with pytest.raises(ArgumentCoercionError):
        Arguments({"noStart": 2}).boolean("noStart")


def test_string_list():
    assert Arguments({"tags": "db"}).string_list("tags") == ["db"]
    assert Arguments({"tags": ["db", "prod"]}).string_list("tags") == ["db", "prod"]
    assert Arguments({}).string_list("tags") is None
    with pytest.raises(ArgumentCoercionError):
        Arguments({"tags": ["db", 1]}).string_list("tags")


def test_json_object_from_text_or_mapping():
    assert Arguments({"parameters": '{"size": "small"}'}).json_object("parameters") == {"size": "small"}
    assert Arguments({"parameters": {"size": "small"}}).json_object("parameters") == {"size": "small"}
    assert Arguments({"parameters": ""}).json_object("parameters") is None


def test_json_object_rejects_invalid_json_and_non_objects():
    with pytest.raises(ArgumentCoercionError, match="not valid JSON"):
        Arguments({"parameters": "{oops"}).json_object("parameters")
    with pytest.raises(ArgumentCoercionError, match="must be an object"):
        Arguments({"parameters": "[1, 2]"}).json_object("parameters")
