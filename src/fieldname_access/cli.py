"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

import click

from fieldname_access.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    build_declared_schema,
    load_configuration,
    write_placeholder_configuration,
)
from fieldname_access.generation_plan import GenerationPlan, generate_plan, write_plan_document
from fieldname_access.schema_model import MalformedSchema
from fieldname_access.variant_planning import VariantNameCollision


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="fieldname-access")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log planning steps.")
def cli(verbose: bool) -> None:
    """Plan name-indexed field accessors for record declarations."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML declaration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML declaration file with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="plan")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON declaration file",
)
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON plan document to write",
)
@click.option(
    "--record",
    "record_names",
    multiple=True,
    help="Plan only the named record; repeat to select several",
)
def plan_records(config_path: str, output_path: str, record_names: tuple[str, ...]) -> None:
    """Write the generation plan of every declared record as JSON."""
    plans = _plan_declarations(config_path, record_names)
    try:
        resolved_output = write_plan_document(plans, output_path)
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="check")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON declaration file",
)
def check_records(config_path: str) -> None:
    """Validate declarations and print the planned variants of each record."""
    for plan in _plan_declarations(config_path, ()):
        variants = ",".join(variant.variant_name for variant in plan.variants)
        click.echo(
            f"{plan.record_name}: {plan.read_union.name}/{plan.mutable_union.name} "
            f"variants={variants}"
        )


def _plan_declarations(config_path: str, record_names: Sequence[str]) -> list[GenerationPlan]:
    try:
        configuration = load_configuration(config_path)
        missing = [name for name in record_names if configuration.get_record(name) is None]
        if missing:
            raise CliError(f"Unknown record(s): {', '.join(missing)}")
        selected = [
            record
            for record in configuration.records
            if not record_names or record.name in record_names
        ]
        return [generate_plan(build_declared_schema(record)) for record in selected]
    except (ConfigurationError, MalformedSchema, VariantNameCollision) as exc:
        raise CliError(str(exc)) from exc


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
