"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from click.testing import CliRunner
from openapi_schema_gen.cli import cli, main


def _write_config(tmp_path: Path, *, output_format: str = "yaml", broken: bool = False) -> Path:
    types = [
        {
            "namespace": "base/foo",
            "name": "Blah",
            "doc": "Blah is a test.\n+openapi-gen=true",
            "fields": [
                {"name": "String", "doc": "A simple string", "type": "string"},
                {"name": "Parent", "type": {"pointer": "Blah"}},
            ],
        }
    ]
    if broken:
        types.append(
            {
                "namespace": "base/foo",
                "name": "Counter",
                "doc": "+openapi-gen=true",
                "fields": [{"name": "Count", "type": "int"}],
            }
        )
    (tmp_path / "types.json").write_text(json.dumps({"types": types}), encoding="utf-8")
    config = {
        "universe": {"path": "types.json"},
        "output": {"path": f"definitions.{output_format}", "format": output_format},
        "generation": {"local_namespace": "base/foo"},
    }
    path = tmp_path / "config.json"
    path.write_text(json.dumps(config), encoding="utf-8")
    return path


def test_generate_command_writes_document(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)

    result = runner.invoke(cli, ["generate", "--config", str(config_path)])

    assert result.exit_code == 0
    output_path = tmp_path / "definitions.yaml"
    assert str(output_path.resolve()) in result.output
    document = yaml.safe_load(output_path.read_text(encoding="utf-8"))
    assert document["imports"] == ['spec "github.com/go-openapi/spec"']
    assert document["definitions"]["base/foo.Blah"]["dependencies"] == ["base/foo.Blah"]


def test_generate_command_writes_json_to_override_path(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path, output_format="json")
    override = tmp_path / "out" / "schemas.json"

    result = runner.invoke(
        cli, ["generate", "--config", str(config_path), "--output", str(override)]
    )

    assert result.exit_code == 0
    document = json.loads(override.read_text(encoding="utf-8"))
    assert document["definitions"]["base/foo.Blah"]["schema"]["required"] == ["String", "Parent"]


def test_generate_reports_skipped_types_and_exits_non_zero(tmp_path: Path, capsys) -> None:
    config_path = _write_config(tmp_path, broken=True)

    exit_code = main(["generate", "--config", str(config_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "skipped base/foo.Counter: UnsupportedKindError" in captured.err
    assert "1 entry type(s) could not be generated." in captured.err
    document = yaml.safe_load((tmp_path / "definitions.yaml").read_text(encoding="utf-8"))
    assert list(document["definitions"]) == ["base/foo.Blah"]


def test_generate_fail_fast_writes_nothing(tmp_path: Path, capsys) -> None:
    config_path = _write_config(tmp_path, broken=True)

    exit_code = main(["generate", "--config", str(config_path), "--fail-fast"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Failed to generate base/foo.Counter" in captured.err
    assert not (tmp_path / "definitions.yaml").exists()


def test_list_entries_prints_qualified_names(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path, broken=True)

    result = runner.invoke(cli, ["list-entries", "--config", str(config_path)])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["base/foo.Blah", "base/foo.Counter"]


def test_generate_config_command_writes_scaffold(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "openapi-gen.yaml"

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0
    assert output_path.exists()
    assert str(output_path.resolve()) in result.output


def test_generate_config_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "openapi-gen.yaml"
    output_path.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err
