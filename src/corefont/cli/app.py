"""CLI application entry point for corefont.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from corefont import __version__
from corefont.cli.output import (
    console,
    print_artifact,
    print_error,
    print_fonts,
    print_header,
    print_source_info,
    print_step,
    print_success,
)
from corefont.config import (
    CoreFontSettings,
    LoggingConfig,
    OutputConfig,
    OutputFormat,
    ParserConfig,
    SourceConfig,
)
from corefont.core import RegistryBuilder, list_font_files
from corefont.domain.encoding import ENCODINGS
from corefont.exceptions import BuildError, CoreFontError, SourceDirectoryError
from corefont.io import RegistryEmitter
from corefont.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="corefont",
    help="Generate core font metrics from a directory of AFM files.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Corefont[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def generate(
    source_dir: Annotated[
        Path,
        typer.Argument(
            help="Directory containing the AFM files",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: core_font_metrics.py or .json)",
        ),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format (python|json)",
        ),
    ] = "python",
    extension: Annotated[
        str,
        typer.Option(
            "--extension",
            help="Font metric file extension",
        ),
    ] = ".afm",
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            help="Print the generated output instead of writing it",
        ),
    ] = False,
    reject_duplicates: Annotated[
        bool,
        typer.Option(
            "--reject-duplicates",
            help="Fail on repeated glyph names instead of keeping the last width",
        ),
    ] = False,
    list_fonts: Annotated[
        bool,
        typer.Option(
            "--list-fonts",
            help="List parsed fonts and exit without generating output",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Parse the AFM files of SOURCE_DIR and generate a font metrics module.

    Every file with the AFM extension is parsed in filename order. The font
    bounding boxes and glyph widths are emitted together with the WinAnsi,
    Symbol and ZapfDingbats glyph maps. Any malformed file aborts the run.

    Example:
        corefont Core14_AFMs -o core_font_metrics.py
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        format_choice = OutputFormat(output_format.lower())
    except ValueError:
        print_error(
            f"Invalid format: {output_format}",
            details="Valid values: python, json",
        )
        raise typer.Exit(code=1)

    try:
        settings = CoreFontSettings(
            source=SourceConfig(extension=extension),
            parser=ParserConfig(reject_duplicate_glyphs=reject_duplicates),
            output=OutputConfig(path=output, format=format_choice, debug=debug),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "ERROR",
            ),
        )
    except ValueError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=1)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    show_progress = not quiet and not debug

    if show_progress:
        print_header(__version__)

    try:
        if show_progress:
            print_step("Scanning source")
            font_files = list_font_files(source_dir, settings.source.extension)
            print_source_info(str(source_dir), len(font_files), settings.source.extension)
            print_step("Parsing")

        builder = RegistryBuilder(settings, logger=logger)
        registry = builder.build(source_dir)
        stats = builder.stats

        if list_fonts:
            print_fonts(registry)
            raise typer.Exit(code=0)

        if verbose:
            print_fonts(registry)

        emitter = RegistryEmitter(
            registry,
            encodings=list(ENCODINGS.values()),
            output_format=settings.output.format,
        )

        if settings.output.debug:
            print_artifact(emitter.render())
            raise typer.Exit(code=0)

        if show_progress:
            print_step("Writing")

        output_path = settings.output.resolve_path()
        size = emitter.write(output_path)

        if show_progress:
            print_success(
                output_path=str(output_path),
                file_size=_format_file_size(size),
                total_time_s=stats.duration_seconds,
                fonts=len(registry),
                glyphs=stats.glyphs_parsed,
            )

    except SourceDirectoryError as e:
        print_error(f"Could not read source directory: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except BuildError as e:
        print_error(f"Could not parse {e.filename}", details=str(e.cause))
        raise typer.Exit(code=1)
    except CoreFontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable form.

    Args:
        size_bytes: Size in bytes

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
