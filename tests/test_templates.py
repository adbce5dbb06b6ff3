"""Tests for the template engine wrapper."""

from __future__ import annotations

import pytest

from action_codegen.codegen.core.templates import TemplateEngine, TemplateError


def test_naming_filters() -> None:
    engine = TemplateEngine()
    engine.add_template(
        "names", "{{ name | constant_case }}|{{ name | sentence }}|{{ name | uncapitalise }}"
    )
    assert engine.render_template("names", {"name": "GoToThing"}) == (
        "GO_TO_THING|go to thing|goToThing"
    )


def test_template_exists() -> None:
    engine = TemplateEngine()
    engine.add_template("present", "x")
    assert engine.template_exists("present")
    assert not engine.template_exists("absent")


def test_missing_template_raises() -> None:
    with pytest.raises(TemplateError):
        TemplateEngine().render_template("absent", {})


def test_undefined_variables_raise() -> None:
    with pytest.raises(TemplateError):
        TemplateEngine().render_string("{{ missing }}", {})
