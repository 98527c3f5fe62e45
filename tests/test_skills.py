from decimal import Decimal

import pytest

from opportunity_matcher.skills import (
    SkillShape,
    classify_skill_source,
    comparison_tokens,
    normalize_skills,
)


SAMPLES = [
    None,
    "",
    "   ",
    "Python",
    '["React","CSS"]',
    '["React", 3, null, true]',
    '{"a": 1}',
    "42",
    '"Python"',
    "[not json",
    ["React", "CSS"],
    ["a", 1, True, None, {"k": [1, 2]}],
    ("x", "y"),
    {"b", "a"},
    [],
    42,
    1.5,
    True,
    False,
    {"skills": ["React"]},
    b'["Go"]',
    object(),
]


def test_json_array_text():
    assert normalize_skills('["React","CSS"]') == ["React", "CSS"]


def test_plain_text_wraps():
    assert normalize_skills("Python") == ["Python"]


def test_list_passes_through_in_order():
    assert normalize_skills(["React", "CSS", "React"]) == ["React", "CSS", "React"]


@pytest.mark.parametrize("raw", [None, "", "   ", [], (), set(), b""])
def test_absent_is_empty(raw):
    assert normalize_skills(raw) == []


def test_non_string_elements_are_stringified():
    assert normalize_skills(["a", 1, True, None, {"k": 1}]) == ["a", "1", "true", '{"k":1}']


def test_json_array_elements_are_stringified():
    assert normalize_skills('[1, "x", null, false]') == ["1", "x", "false"]


@pytest.mark.parametrize("raw", ['{"a": 1}', "42", '"Python"', "true"])
def test_non_array_json_text_wraps_original(raw):
    assert normalize_skills(raw) == [raw]


def test_malformed_json_wraps_original():
    assert normalize_skills('["React", ') == ['["React", ']


@pytest.mark.parametrize(
    "raw, expected",
    [(42, ["42"]), (1.5, ["1.5"]), (True, ["true"]), (False, ["false"]), (0, ["0"]), (Decimal("3"), ["3"])],
)
def test_scalars(raw, expected):
    assert normalize_skills(raw) == expected


@pytest.mark.parametrize("raw", [{"skills": ["React"]}, {}, object()])
def test_structured_is_empty(raw):
    assert normalize_skills(raw) == []


def test_tuple_and_set():
    assert normalize_skills(("x", "y")) == ["x", "y"]
    assert normalize_skills({"b", "a"}) == ["a", "b"]


def test_bytes_decoded():
    assert normalize_skills(b'["Go"]') == ["Go"]


@pytest.mark.parametrize("raw", SAMPLES)
def test_idempotent(raw):
    once = normalize_skills(raw)
    assert normalize_skills(once) == once


@pytest.mark.parametrize("raw", SAMPLES)
def test_always_list_of_strings(raw):
    out = normalize_skills(raw)
    assert isinstance(out, list)
    assert all(isinstance(s, str) for s in out)


def test_deeply_nested_json_does_not_raise():
    raw = "[" * 100000 + "]" * 100000
    out = normalize_skills(raw)
    assert isinstance(out, list)


@pytest.mark.parametrize(
    "raw, shape",
    [
        (None, SkillShape.ABSENT),
        ("", SkillShape.ABSENT),
        ([], SkillShape.ABSENT),
        (["x"], SkillShape.LIST),
        ("x", SkillShape.TEXT),
        (3, SkillShape.SCALAR),
        (True, SkillShape.SCALAR),
        ({"x": 1}, SkillShape.STRUCTURED),
    ],
)
def test_classify(raw, shape):
    assert classify_skill_source(raw) is shape


def test_comparison_tokens_lowercase_and_drop_blanks():
    assert comparison_tokens(["  React ", "", "   ", "CSS"]) == ["react", "css"]


def test_decimal_elements_are_plain_numbers():
    assert normalize_skills(["SQL", Decimal("2.5")]) == ["SQL", "2.5"]
