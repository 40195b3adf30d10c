"""
Command-line interface for the Swagger/OpenAPI to mock environment converter.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from .converter import OpenAPIConverter
from .models import Environment
from .notifications import CollectingNotifier

app = typer.Typer(help="Convert Swagger/OpenAPI specifications to and from mock environments")


def _converter(verbose: bool) -> OpenAPIConverter:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return OpenAPIConverter(notifier=CollectingNotifier())


def _report(converter: OpenAPIConverter) -> None:
    """Echo the converter's notifications on stderr."""
    for notification in converter.notifier.notifications:
        typer.echo(f"{notification.severity}: {notification.message}", err=True)


def _load_environment(path: Path) -> Environment:
    """Load an environment JSON file.

    Raises:
        typer.Exit: If the file cannot be loaded
    """
    try:
        with open(path) as f:
            return Environment.model_validate(json.load(f))
    except (OSError, ValueError, ValidationError) as e:
        typer.echo(f"Error loading {path}: {str(e)}", err=True)
        raise typer.Exit(1)


def _save(content: str, path: Path) -> None:
    """Save text to a file.

    Raises:
        typer.Exit: If the file cannot be saved
    """
    try:
        with open(path, "w") as f:
            f.write(content)
    except OSError as e:
        typer.echo(f"Error saving to {path}: {str(e)}", err=True)
        raise typer.Exit(1)


@app.command("import")
def import_specification(
    input_file: str = typer.Argument(..., help="Path or URL of the Swagger/OpenAPI file"),
    output_file: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Path to save the environment. If not provided, will use input filename with .environment.json suffix",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress"),
) -> None:
    """Import a Swagger 2.0 or OpenAPI 3.x specification as a mock environment."""
    if output_file is None:
        output_file = Path(f"{Path(input_file).stem}.environment.json")

    converter = _converter(verbose)
    environment = converter.import_file(input_file)
    _report(converter)

    if environment is None:
        raise typer.Exit(1)

    _save(
        json.dumps(environment.model_dump(mode="json", by_alias=True), indent=2),
        output_file,
    )
    typer.echo(
        f"Successfully imported {len(environment.routes)} routes from {input_file} to {output_file}"
    )


@app.command("export")
def export_environment(
    input_file: Path = typer.Argument(..., help="Path to the environment JSON file"),
    output_file: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Path to save the OpenAPI document, as YAML for .yaml/.yml files. If not provided, will use input filename with .openapi.json suffix",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress"),
) -> None:
    """Export a mock environment as an OpenAPI 3.0 specification."""
    if not input_file.exists():
        typer.echo(f"Input file not found: {input_file}", err=True)
        raise typer.Exit(1)

    if output_file is None:
        output_file = input_file.parent / f"{input_file.stem}.openapi.json"

    converter = _converter(verbose)
    content = converter.export(_load_environment(input_file), indent=2)
    _report(converter)

    if content is None:
        raise typer.Exit(1)

    if output_file.suffix in (".yaml", ".yml"):
        content = yaml.safe_dump(json.loads(content), sort_keys=False)

    _save(content, output_file)
    typer.echo(f"Successfully exported {input_file} to {output_file}")


def main():
    """Entry point for the CLI."""
    app()
