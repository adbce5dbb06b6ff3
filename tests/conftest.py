from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

SAMPLE_ACTIONS = """\
import * as t from "./types";

export interface AttemptLogin {
  username: string;
  password: string;
}

export interface RejectLogin {
  reason: string;
  foo: t.Foo;
}

export interface LoginSuccessful {
  token: string;
}

export interface GoToThing {
  subThing?: string;
}
"""


@pytest.fixture
def sample_source() -> str:
    """Declaration source with four actions and one pass-through import."""
    return SAMPLE_ACTIONS


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[..., Path]:
    """Write dedented declaration source into tmp_path and return its path."""

    def _write(content: str, name: str = "actions.ts") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write
