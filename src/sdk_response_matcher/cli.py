"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click
import yaml

from sdk_response_matcher.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from sdk_response_matcher.run_execution import (
    RunExecutionError,
    RunRequest,
    build_schema_matcher,
    execute_schema_validation_run,
    load_run_configuration,
)
from sdk_response_matcher.schema_management import UnknownSchemaError, dump_schema_node


class CliError(Exception):
    """Custom CLI error."""


_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML configuration file (built-in schemas only when omitted)",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="sdk-response-matcher")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level for diagnostic output on stderr",
)
def cli(log_level: str) -> None:
    """Named response schema matcher for SDK integration suites."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="list-schemas")
@_CONFIG_OPTION
def list_schemas(config_path: str | None) -> None:
    """List registered schema names."""
    try:
        matcher = build_schema_matcher(load_run_configuration(config_path))
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    for name in matcher.registry.names():
        click.echo(name)


@cli.command(name="show-schema")
@click.argument("schema_name")
@_CONFIG_OPTION
def show_schema(schema_name: str, config_path: str | None) -> None:
    """Print one schema definition in document notation."""
    try:
        matcher = build_schema_matcher(load_run_configuration(config_path))
        definition = matcher.registry.get(schema_name)
    except (RunExecutionError, UnknownSchemaError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(
        yaml.safe_dump({schema_name: dump_schema_node(definition)}, sort_keys=False).rstrip()
    )


@cli.command(name="validate")
@click.option(
    "--schema",
    "schema_name",
    required=True,
    help="Registered schema name to validate against",
)
@click.option(
    "--input",
    "input_paths",
    required=True,
    multiple=True,
    type=click.Path(path_type=str),
    help="JSON document to validate (repeatable)",
)
@_CONFIG_OPTION
@click.option(
    "--each",
    is_flag=True,
    default=False,
    help="Validate every element of a top-level JSON array separately.",
)
@click.option(
    "--report",
    "report_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path for a validation report workbook",
)
def validate(
    schema_name: str,
    input_paths: tuple[str, ...],
    config_path: str | None,
    each: bool,
    report_path: str | None,
) -> None:
    """Validate JSON documents against a named schema."""
    try:
        outcome = execute_schema_validation_run(
            RunRequest(
                schema_name=schema_name,
                input_paths=tuple(input_paths),
                config_path=config_path,
                report_path=report_path,
                each=each,
            )
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc

    for validation in outcome.validations:
        click.echo(f"{validation.status.value} {validation.label}")
        for message in validation.result.messages():
            click.echo(f"  {message}", err=True)
    if outcome.report_path is not None:
        click.echo(str(outcome.report_path))
    if not outcome.passed:
        raise CliError(
            f"{len(outcome.failed)} of {len(outcome.validations)} document(s) "
            f"do not match schema '{schema_name}'."
        )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
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
