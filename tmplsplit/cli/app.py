"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from .. import __version__
from ..core.errors import TmplSplitError
from ..core.settings import ALL_TEMPLATES, load_settings
from ..rendering import finder
from ..rendering.orchestrator import Orchestrator
from .parsers import parse_extension, parse_file_mode

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="tmplsplit",
    help="Render Jinja2 templates with YAML data and split the output into files.",
    no_args_is_help=True,
)


@app.command()
def gen(
    source_dir: Annotated[
        Path,
        typer.Argument(
            help="Source directory containing templates.",
            metavar="DIRECTORY",
        ),
    ],
    template: Annotated[
        str,
        typer.Option(
            "--template",
            "-t",
            help=f"Template to process in --multiple mode ({ALL_TEMPLATES} for all).",
        ),
    ] = ALL_TEMPLATES,
    separate: Annotated[
        bool,
        typer.Option(
            "--separate/--no-separate",
            "-s/-S",
            help="Split output into multiple files at document separators (---).",
        ),
    ] = True,
    clean: Annotated[
        bool,
        typer.Option(
            "--clean/--no-clean",
            "-c/-C",
            help="Clean the output directory before processing templates.",
        ),
    ] = True,
    config_path: Annotated[
        Path,
        typer.Option(
            "--config",
            "-f",
            help="Path to the settings file.",
            metavar="FILE",
        ),
    ] = Path("config.yaml"),
    output_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output directory for generated files (default: from settings).",
            metavar="DIR",
        ),
    ] = None,
    extension: Annotated[
        Optional[str],
        typer.Option(
            "--ext",
            help="Extension for output files (default: from settings).",
            metavar="EXT",
        ),
    ] = None,
    multiple: Annotated[
        bool,
        typer.Option(
            "--multiple",
            "-m",
            help="Process one template per subdirectory of DIRECTORY.",
        ),
    ] = False,
    keep_going: Annotated[
        bool,
        typer.Option(
            "--keep-going",
            help="Continue with the next template after a failure.",
        ),
    ] = False,
    file_mode: Annotated[
        str,
        typer.Option(
            "--mode",
            help="File permissions in octal (default: 0644).",
            metavar="OCTAL",
        ),
    ] = "0644",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Generate files from templates in DIRECTORY.

    Single mode expects the template and data file directly in DIRECTORY;
    --multiple expects one subdirectory per template.
    """
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    logger.debug("Starting tmplsplit")

    mode = parse_file_mode(file_mode)
    ext = parse_extension(extension)

    try:
        settings = load_settings(
            config_path, output_dir=output_dir, output_extension=ext
        )
        logger.debug(f"Settings: {settings!r}")

        if multiple:
            templates = finder.find_templates(source_dir, settings, template)
        else:
            templates = finder.find_single(source_dir, settings)
    except TmplSplitError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e

    orchestrator = Orchestrator(settings, separate=separate, file_mode=mode)
    result = orchestrator.run(templates, multiple, clean=clean, keep_going=keep_going)

    if not result.ok:
        raise typer.Exit(code=1)

    logger.debug(f"Completed: {len(result.written)} file(s) written")


@app.command()
def version() -> None:
    """Print the version information."""
    typer.echo(f"tmplsplit version: {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
