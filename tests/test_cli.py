"""CLI behaviour tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from action_codegen.cli import _build_parser, main


def test_parser_accepts_feature_and_output() -> None:
    args = _build_parser().parse_args(["--feature", "auth", "-o", "out.ts", "actions.ts"])
    assert args.file == "actions.ts"
    assert args.feature == "auth"
    assert args.output == "out.ts"
    assert args.verbose is False


def test_main_prints_code_to_stdout(
    write_source: Callable[..., Path], sample_source: str, capsys: pytest.CaptureFixture[str]
) -> None:
    path = write_source(sample_source)
    assert main([str(path), "--feature", "auth"]) == 0

    out = capsys.readouterr().out
    assert out.startswith('import * as redux from "redux";\n')
    assert '  ATTEMPT_LOGIN = "[auth] attempt login",\n' in out
    assert out.endswith("}\n")


def test_main_writes_output_file(
    write_source: Callable[..., Path], sample_source: str, tmp_path: Path
) -> None:
    path = write_source(sample_source)
    output = tmp_path / "actions.generated.ts"
    assert main([str(path), "--output", str(output)]) == 0

    text = output.read_text(encoding="utf-8")
    assert "export function loginSuccessful(" in text
    assert text.endswith("}\n")


def test_main_fails_on_malformed_tag(
    write_source: Callable[..., Path], capsys: pytest.CaptureFixture[str]
) -> None:
    path = write_source('/** @foo {bad} */\ninterface A {\n  a: string;\n}\n')
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == ""


def test_main_fails_on_wrongly_typed_config(
    write_source: Callable[..., Path], tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = write_source("interface A {\n  a: string;\n}\n")
    config_file = tmp_path / "codegen.json"
    config_file.write_text('{"feature": 5}', encoding="utf-8")
    assert main([str(path), "--config", str(config_file)]) == 1
    assert capsys.readouterr().out == ""


def test_main_fails_on_missing_file(tmp_path: Path) -> None:
    assert main([str(tmp_path / "missing.ts")]) == 1


def test_main_reads_config_file(
    write_source: Callable[..., Path], sample_source: str, tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = write_source(sample_source)
    config_file = tmp_path / "codegen.json"
    config_file.write_text('{"feature": "auth", "actions_module": "./data/actions"}', encoding="utf-8")

    assert main([str(path), "--config", str(config_file), "--feature", "admin"]) == 0
    out = capsys.readouterr().out
    assert 'import * as actions from "./data/actions";' in out
    assert '"[admin] attempt login"' in out
