"""CLI entry point for magic carver."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .catalog import load_catalog
from .config import CarveSettings, RunConfig
from .errors import CarveError
from .scanner import extract_embedded_files


def _setup_logging(log_level: str) -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
        force=True,
    )


@click.command()
@click.argument("input_file", type=str)
@click.argument("output_dir", type=click.Path(path_type=Path), required=False)
@click.option(
    "--definitions",
    "-d",
    type=click.Path(path_type=Path),
    default=None,
    help="Signature definitions file (default: type.txt)",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(path_type=Path),
    default=None,
    help="JSON settings file",
)
@click.option(
    "--log-level",
    "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (overrides config)",
)
def main(
    input_file: str,
    output_dir: Optional[Path],
    definitions: Optional[Path],
    config: Optional[Path],
    log_level: Optional[str],
) -> None:
    """
    Extract files embedded in INPUT_FILE by their magic-byte signatures.

    Every signature listed in the definitions file that occurs in INPUT_FILE
    is written to OUTPUT_DIR (default: ./output) as <basename>.<ext>. Image
    types are re-encoded, all other types are copied verbatim. OUTPUT_DIR
    must already exist.
    """
    try:
        settings = CarveSettings.from_json(config) if config else CarveSettings()

        # Apply CLI overrides
        if output_dir:
            settings.output_directory = output_dir
        if definitions:
            settings.definitions_file = definitions
        if log_level:
            settings.log_level = log_level.upper()

        run = RunConfig.from_input(input_file, settings.output_directory)

    except FileNotFoundError as e:
        click.echo(f"❌ Configuration file not found: {e}", err=True)
        sys.exit(1)

    except ValueError as e:
        click.echo(f"❌ Configuration error: {e}", err=True)
        sys.exit(1)

    _setup_logging(settings.log_level)

    try:
        catalog = load_catalog(settings.definitions_file)
    except (CarveError, OSError) as e:
        click.echo(f"❌ Error reading file signatures: {e}", err=True)
        sys.exit(1)

    try:
        written = extract_embedded_files(run, catalog)
    except (CarveError, OSError) as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)

    if not written:
        click.echo(f"No known signatures found in {run.input_path}")
        return

    click.echo(f"✅ Extracted {len(written)} file(s):")
    for path in written:
        click.echo(f"  • {path}")


if __name__ == "__main__":
    main()
