"""Tests for JSDoc tag extraction and annotation parsing."""

from __future__ import annotations

import pytest

from action_codegen.codegen.core.annotations import (
    extract_tags,
    parse_annotation,
    parse_annotations,
)
from action_codegen.codegen.core.errors import MalformedAnnotationError
from action_codegen.codegen.core.schema import Annotation


def test_extract_tags_skips_description_and_keeps_order() -> None:
    comment = """/**
     * Sent when the user submits the login form.
     * @userGenerated
     * @foo {"a": 1}
     * @foo {"b": 2}
     */"""
    assert extract_tags(comment) == [
        ("userGenerated", ""),
        ("foo", '{"a": 1}'),
        ("foo", '{"b": 2}'),
    ]


def test_extract_tags_single_line_comment() -> None:
    assert extract_tags("/** @userGenerated */") == [("userGenerated", "")]


def test_extract_tags_argument_spanning_lines() -> None:
    comment = """/**
     * @throttle {
     *   "ms": 500
     * }
     */"""
    [(name, text)] = extract_tags(comment)
    assert name == "throttle"
    assert parse_annotation(name, text) == Annotation("throttle", {"ms": 500})


def test_extract_tags_without_tags() -> None:
    assert extract_tags("/** Just a description. */") == []


def test_bare_tag_defaults_to_true() -> None:
    assert parse_annotation("userGenerated", "") == Annotation("userGenerated", True)


@pytest.mark.parametrize(
    "text, expected",
    [
        ('{"key1": "blah", "key2": [1, 2, 3]}', {"key1": "blah", "key2": [1, 2, 3]}),
        ("[1, 2]", [1, 2]),
        ('"label"', "label"),
        ("42", 42),
        ("false", False),
        ("null", None),
    ],
)
def test_tag_argument_is_parsed_as_json(text: str, expected: object) -> None:
    assert parse_annotation("tag", text).arg == expected


def test_malformed_argument_is_fatal() -> None:
    with pytest.raises(MalformedAnnotationError) as excinfo:
        parse_annotations([("ok", ""), ("broken", "{not json}")])
    assert excinfo.value.tag_name == "broken"
    assert "@broken" in str(excinfo.value)


@pytest.mark.parametrize("text", ["NaN", "Infinity", "-Infinity", '{"limit": NaN}', "[1, Infinity]"])
def test_non_finite_constants_are_fatal(text: str) -> None:
    with pytest.raises(MalformedAnnotationError) as excinfo:
        parse_annotation("limit", text)
    assert excinfo.value.text == text


def test_parse_annotations_preserves_order() -> None:
    annotations = parse_annotations([("b", "1"), ("a", "2"), ("b", "3")])
    assert [(ann.name, ann.arg) for ann in annotations] == [("b", 1), ("a", 2), ("b", 3)]
