"""Tests for tree-sitter based action extraction."""

from __future__ import annotations

import pytest

from action_codegen.codegen.core.errors import (
    DuplicateActionError,
    MalformedAnnotationError,
    SourceUnreadableError,
    UnrenderableTypeError,
)
from action_codegen.codegen.core.extractor import extract_actions, extract_source
from action_codegen.codegen.core.schema import Annotation, Field


def test_extracts_actions_in_declaration_order(sample_source: str) -> None:
    parsed = extract_source(sample_source)
    assert parsed.action_names == [
        "AttemptLogin",
        "RejectLogin",
        "LoginSuccessful",
        "GoToThing",
    ]


def test_extracts_fields_with_opaque_types(sample_source: str) -> None:
    actions = {action.name: action for action in extract_actions(sample_source)}
    assert actions["AttemptLogin"].fields == (
        Field("username", "string"),
        Field("password", "string"),
    )
    assert actions["RejectLogin"].get_field("foo") == Field("foo", "t.Foo")
    assert actions["GoToThing"].fields == (Field("subThing", "string", optional=True),)


def test_collects_imports_verbatim(sample_source: str) -> None:
    parsed = extract_source(sample_source)
    assert parsed.imports == ('import * as t from "./types";',)


def test_complex_types_are_copied_as_text() -> None:
    source = """
    export interface Select {
      ids: Array<string | number>;
      range?: { from: number; to: number };
    }
    """
    [action] = extract_actions(source)
    assert action.fields == (
        Field("ids", "Array<string | number>"),
        Field("range", "{ from: number; to: number }", optional=True),
    )


def test_doc_tags_become_annotations() -> None:
    source = """
    /**
     * Sent when the login form is submitted.
     * @userGenerated
     * @foo {"a":1}
     * @foo {"b":2}
     */
    export interface AttemptLogin {
      username: string;
    }
    """
    [action] = extract_actions(source)
    assert action.annotations == (
        Annotation("userGenerated", True),
        Annotation("foo", {"a": 1}),
        Annotation("foo", {"b": 2}),
    )


def test_doc_comment_separated_by_statement_is_not_attached() -> None:
    source = """
    /** @foo 1 */
    const unrelated = 1;
    interface Reset {
      force: boolean;
    }
    """
    [action] = extract_actions(source)
    assert action.name == "Reset"
    assert action.annotations == ()


def test_non_record_declarations_are_ignored() -> None:
    source = """
    export type Id = string;
    export const VERSION = 2;
    export function helper(): void {}
    export class Store {}
    enum Mode { A, B }
    interface Local {
      id: Id;
    }
    export type Shaped = {
      size: number;
    };
    """
    assert [action.name for action in extract_actions(source)] == ["Local", "Shaped"]


def test_non_property_members_are_ignored() -> None:
    source = """
    interface Mixed {
      // comment
      go(): void;
      [key: string]: unknown;
      value: number;
    }
    """
    [action] = extract_actions(source)
    assert action.fields == (Field("value", "number"),)


def test_empty_source_has_no_actions() -> None:
    parsed = extract_source("")
    assert parsed.actions == ()
    assert parsed.imports == ()


def test_property_without_type_is_unrenderable() -> None:
    with pytest.raises(UnrenderableTypeError) as excinfo:
        extract_actions("interface Broken {\n  value;\n}\n")
    assert excinfo.value.record_name == "Broken"
    assert excinfo.value.field_name == "value"


def test_malformed_tag_fails_extraction() -> None:
    source = """
    /** @foo {oops} */
    export interface AttemptLogin {
      username: string;
    }
    """
    with pytest.raises(MalformedAnnotationError):
        extract_source(source)


def test_duplicate_names_are_rejected() -> None:
    source = """
    interface Reset { a: string }
    interface Reset { b: string }
    """
    with pytest.raises(DuplicateActionError) as excinfo:
        extract_source(source)
    assert excinfo.value.name == "Reset"


def test_names_converting_to_the_same_constant_are_rejected() -> None:
    source = """
    interface GoToThing { a: string }
    interface goToThing { b: string }
    """
    with pytest.raises(DuplicateActionError) as excinfo:
        extract_source(source)
    assert excinfo.value.name == "goToThing"
    assert excinfo.value.previous == "GoToThing"
    assert "clashes with 'GoToThing'" in str(excinfo.value)


def test_non_finite_tag_argument_fails_extraction() -> None:
    source = "/** @limit NaN */\ninterface A {\n  a: string;\n}\n"
    with pytest.raises(MalformedAnnotationError) as excinfo:
        extract_source(source)
    assert excinfo.value.tag_name == "limit"


def test_syntax_error_is_unreadable() -> None:
    with pytest.raises(SourceUnreadableError):
        extract_source("export interface {\n  broken: \n")
