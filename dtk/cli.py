"""CLI interface for Data Transform Kit."""

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from dtk import __version__
from dtk.config.settings import get_settings
from dtk.mapping.errors import DataTransformError
from dtk.mapping.processor import MappingProcessor

console = Console()
stderr_console = Console(file=sys.stderr)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=stderr_console, rich_tracebacks=True)],
    )


def _read_json(path: Path):
    with open(path, "r", encoding="utf-8") as file_handle:
        return json.load(file_handle)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose: bool) -> None:
    """Data Transform Kit - declarative field mapping between documents and objects"""
    configure_logging("DEBUG" if verbose else get_settings().log_level)


@cli.command(name="map")
@click.option(
    '--path', '-p',
    'mapping_path',
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help='Path to mapping config'
)
@click.option('--map', '-m', 'map_name', required=True, help='Name of the map to apply')
@click.option(
    '--source', '-s',
    'source_path',
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help='JSON document to read fields from'
)
@click.option(
    '--destination', '-d',
    'destination_path',
    type=click.Path(exists=True, path_type=Path),
    help='JSON document to start from (defaults to an empty object)'
)
@click.option(
    '--output', '-o',
    'output_path',
    type=click.Path(path_type=Path),
    help='Write the result here instead of printing it'
)
def map_document(
    mapping_path: Path,
    map_name: str,
    source_path: Path,
    destination_path: Path | None,
    output_path: Path | None,
) -> None:
    """Apply one map to one JSON document."""
    try:
        source = _read_json(source_path)
        destination = _read_json(destination_path) if destination_path else {}
        result = MappingProcessor().process(mapping_path, map_name, source, destination)
    except (DataTransformError, json.JSONDecodeError) as e:
        stderr_console.print(f"[red]✗ Mapping failed: {e}[/red]")
        raise click.Abort()

    rendered = json.dumps(result, indent=2, ensure_ascii=False, default=str)
    if output_path is None:
        click.echo(rendered)
        return

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(rendered + "\n", encoding="utf-8")
    console.print(f"[green]✓ Result written to {output_path}[/green]")


@cli.command(name="show")
@click.option(
    '--path', '-p',
    'mapping_path',
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help='Path to mapping config'
)
def show(mapping_path: Path) -> None:
    """List the maps declared in a mapping config."""
    processor = MappingProcessor()
    try:
        config = processor.load(mapping_path)
        contexts = processor.build_contexts(config)
    except DataTransformError as e:
        stderr_console.print(f"[red]✗ Invalid mapping config: {e}[/red]")
        raise click.Abort()

    table = Table(title=f"Maps in {config.name}")
    table.add_column("Map", style="cyan")
    table.add_column("Source kind")
    table.add_column("Destination kind")
    table.add_column("Mappings", justify="right")

    settings = processor.settings
    for definition in config.maps:
        source_kind = definition.source_kind or settings.default_source_kind
        destination_kind = definition.destination_kind or settings.default_destination_kind
        table.add_row(
            definition.name,
            source_kind.value,
            destination_kind.value,
            str(len(contexts[definition.name].get_map())),
        )
    console.print(table)


if __name__ == "__main__":
    cli()
