"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from openapi_schema_gen.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from openapi_schema_gen.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_generation_run,
    list_entry_points,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="openapi-schema-gen")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log generation details.")
def cli(verbose: bool) -> None:
    """Generate OpenAPI schema definitions from declared types."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generator configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML generator configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="list-entries")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON generator configuration file",
)
def list_entries(config_path: str) -> None:
    """List the entry types selected for generation."""
    try:
        entries = list_entry_points(config_path)
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    for entry in entries:
        click.echo(entry.qualified_name)


@cli.command(name="generate")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON generator configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Override the configured output document path",
)
@click.option(
    "--fail-fast",
    is_flag=True,
    default=False,
    help="Stop at the first entry type that cannot be generated.",
)
def generate(config_path: str, output_path: str | None, fail_fast: bool) -> None:
    """Generate the OpenAPI definitions document."""
    try:
        outcome = execute_generation_run(
            RunRequest(
                config_path=config_path,
                output_path=output_path,
                fail_fast=True if fail_fast else None,
            )
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc

    for failure in outcome.failures:
        click.echo(f"skipped {failure.ref}: {failure.error_kind}: {failure.message}", err=True)
    click.echo(str(outcome.output_path))
    if not outcome.is_ok:
        raise CliError(f"{len(outcome.failures)} entry type(s) could not be generated.")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="openapi-schema-gen", standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
