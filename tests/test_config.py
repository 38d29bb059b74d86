import os
from datetime import datetime
from pathlib import Path

import pytest
from pydantic import ValidationError

from argweave.config import import_object, loader, resolve_type
from argweave.exceptions import ArgumentDefinitionError
from argweave.parser import ArgumentParser

YAML_CONFIG = """
prog: render
description: Render an image
arguments:
  - flags: ["-r", "--retries"]
    type: int
    default: 3
  - flags: ["--when"]
    type: datetime
  - flags: ["--out"]
    action: os.path.join
    bind: ["build"]
  - flags: ["--say"]
    action: builtins.print
    kind: void
    default: quiet
  - flags: ["files"]
    type: path
    nargs: "+"
"""

TOML_CONFIG = """
prog = "render"

[[arguments]]
flags = ["--scale"]
type = "float"
default = 1.0

[[arguments]]
flags = ["name"]
"""


def test_yaml_loader(tmp_path, capsys):
    config = tmp_path / "cli.yaml"
    config.write_text(YAML_CONFIG, encoding="UTF-8")

    parser = loader(config)
    assert isinstance(parser, ArgumentParser)
    assert parser.prog == "render"

    parsed = parser.parse_args(
        ["--when", "2024-01-02", "--out", "app.bin", "--say", "hello", "a.png", "b.png"]
    )
    assert parsed.get("retries", int) == 3
    assert parsed.get("when", datetime).year == 2024
    assert parsed.get("out", str) == os.path.join("build", "app.bin")
    assert parsed.get("say", str) == "quiet"
    assert parsed.get("files", list) == [Path("a.png"), Path("b.png")]
    assert "hello" in capsys.readouterr().out


def test_toml_loader(tmp_path):
    config = tmp_path / "cli.toml"
    config.write_text(TOML_CONFIG, encoding="UTF-8")

    parser = loader(str(config))
    parsed = parser.parse_args(["ada"])
    assert parsed.get("scale", float) == 1.0
    assert parsed.get("name", str) == "ada"


def test_loader_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")


def test_loader_unsupported_format(tmp_path):
    config = tmp_path / "cli.json"
    config.write_text("{}", encoding="UTF-8")
    with pytest.raises(ValueError):
        loader(config)


def test_loader_requires_mapping(tmp_path):
    config = tmp_path / "cli.yaml"
    config.write_text("- just\n- a list\n", encoding="UTF-8")
    with pytest.raises(ValueError):
        loader(config)


def test_loader_rejects_bad_kind(tmp_path):
    config = tmp_path / "cli.yaml"
    config.write_text(
        "arguments:\n  - flags: ['--x']\n    action: builtins.str\n    kind: maybe\n",
        encoding="UTF-8",
    )
    with pytest.raises(ValidationError):
        loader(config)


def test_loader_rejects_bind_without_action(tmp_path):
    config = tmp_path / "cli.yaml"
    config.write_text("arguments:\n  - flags: ['--x']\n    bind: [1]\n", encoding="UTF-8")
    with pytest.raises(ArgumentDefinitionError):
        loader(config)


def test_loader_type_error():
    with pytest.raises(TypeError):
        loader(42)


def test_import_object():
    assert import_object("os.path.join") is os.path.join
    with pytest.raises(ArgumentDefinitionError):
        import_object("join")
    with pytest.raises(ArgumentDefinitionError):
        import_object("no_such_module_here.func")
    with pytest.raises(ArgumentDefinitionError):
        import_object("os.path.no_such_attr")


def test_resolve_type():
    assert resolve_type("int") is int
    assert resolve_type("path") is Path
    assert resolve_type("decimal.Decimal").__name__ == "Decimal"
