"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from struct_catalog.catalog_emission import CatalogEncodingError, encode_catalog
from struct_catalog.catalog_generation import generate_catalog_from_settings
from struct_catalog.catalog_tree import TreeDepthError
from struct_catalog.configuration import (
    DEFAULT_CONFIG_FILENAME,
    CatalogSettings,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from struct_catalog.type_shapes import ShapeError, load_type_reference


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="struct-catalog")
def cli() -> None:
    """Flat field catalogs for nested dataclass types."""


@cli.command(name="describe")
@click.argument("target")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON catalog configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the catalog to this file instead of stdout",
)
@click.option(
    "--indent",
    required=False,
    type=click.IntRange(min=0),
    help="JSON indentation; overrides catalog.indent from the configuration",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def describe(
    target: str,
    config_path: str | None,
    output_path: str | None,
    indent: int | None,
    verbose: bool,
) -> None:
    """Print the field catalog of TARGET, given as 'package.module:TypeName'."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    try:
        settings = load_configuration(config_path) if config_path else CatalogSettings.defaults()
        root_type = load_type_reference(target)
        fields = generate_catalog_from_settings(root_type, settings)
        text = encode_catalog(fields, indent=indent if indent is not None else settings.indent)
    except (ConfigurationError, ShapeError, TreeDepthError, CatalogEncodingError) as exc:
        raise CliError(str(exc)) from exc

    if output_path is None:
        click.echo(text)
        return
    destination = Path(output_path)
    try:
        destination.write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(destination.resolve()))


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
    """Generate a YAML catalog configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


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
