"""Scenario-style integration tests over the sample declarations."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest
import yaml
from openapi_schema_gen.configuration import load_configuration
from openapi_schema_gen.import_tracking import ImportTracker
from openapi_schema_gen.run_execution import RunRequest, execute_generation_run
from openapi_schema_gen.schema_generation import SchemaWriter
from openapi_schema_gen.type_universe import TypeRef, load_universe

SAMPLES_DIR = Path(__file__).resolve().parents[3] / "samples"


@pytest.fixture
def sample_workspace(tmp_path: Path) -> Path:
    for name in ("sample-config.yaml", "sample-types.yaml"):
        shutil.copy(SAMPLES_DIR / name, tmp_path / name)
    return tmp_path


def test_sample_run_generates_marked_types_only(sample_workspace: Path) -> None:
    outcome = execute_generation_run(
        RunRequest(config_path=str(sample_workspace / "sample-config.yaml"))
    )

    assert outcome.is_ok
    assert outcome.generated == (TypeRef("base/bar", "Owner"), TypeRef("base/foo", "Blah"))
    assert outcome.import_lines == ('bar "base/bar"', 'spec "github.com/go-openapi/spec"')
    assert outcome.output_path == (sample_workspace / "build" / "openapi_generated.yaml").resolve()


def test_sample_blah_schema_matches_expected_document(sample_workspace: Path) -> None:
    outcome = execute_generation_run(
        RunRequest(config_path=str(sample_workspace / "sample-config.yaml"))
    )
    document = yaml.safe_load(outcome.output_path.read_text(encoding="utf-8"))

    assert document["definitions"]["base/foo.Blah"] == {
        "schema": {
            "description": "Blah is a test.",
            "properties": {
                "String": {"description": "A simple string", "type": "string", "format": ""},
                "Int64": {"description": "A simple int64", "type": "integer", "format": "int64"},
                "Float64": {
                    "description": "A simple float64",
                    "type": "number",
                    "format": "double",
                },
                "ByteArray": {
                    "description": "a base64 encoded characters",
                    "type": "string",
                    "format": "byte",
                },
                "Parent": {
                    "description": "A struct pointer",
                    "$ref": "#/definitions/base/foo.Blah",
                },
                "Owner": {
                    "description": "An owner from another namespace",
                    "$ref": "#/definitions/base/bar.Owner",
                },
                "Labels": {
                    "description": "A map pointer",
                    "type": "object",
                    "additionalProperties": {"type": "string", "format": ""},
                },
            },
            "required": ["String", "Int64", "Float64", "ByteArray", "Parent", "Owner", "Labels"],
        },
        "dependencies": ["base/foo.Blah", "base/bar.Owner"],
    }


def test_sample_owner_schema_has_no_dependencies(sample_workspace: Path) -> None:
    outcome = execute_generation_run(
        RunRequest(config_path=str(sample_workspace / "sample-config.yaml"))
    )
    document = yaml.safe_load(outcome.output_path.read_text(encoding="utf-8"))

    assert document["definitions"]["base/bar.Owner"] == {
        "schema": {
            "description": "Owner identifies who maintains a Blah.",
            "properties": {
                "Name": {"description": "Display name", "type": "string", "format": ""},
                "Aliases": {"type": "array", "items": {"type": "string", "format": ""}},
            },
            "required": ["Name", "Aliases"],
        }
    }


def test_sample_run_is_deterministic(sample_workspace: Path) -> None:
    request = RunRequest(config_path=str(sample_workspace / "sample-config.yaml"))

    first = execute_generation_run(request).output_path.read_text(encoding="utf-8")
    second = execute_generation_run(request).output_path.read_text(encoding="utf-8")

    assert first == second


def test_unmarked_types_can_still_be_generated_directly() -> None:
    configuration = load_configuration(SAMPLES_DIR / "sample-config.yaml")
    universe = load_universe(configuration.universe_path)
    tracker = ImportTracker(local_namespace="base/bar")
    writer = SchemaWriter(universe, tracker, configuration.schema_library)

    definition = writer.generate(universe[TypeRef("base/bar", "Internal")])

    assert definition.schema.description == "Internal is not exported as a schema."
    assert definition.schema.required == ("Secret",)
    assert tracker.import_lines() == ['spec "github.com/go-openapi/spec"']
