"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with font tables and formatted messages.
"""


from rich.console import Console
from rich.table import Table
from rich.text import Text

from corefont.domain.metrics import FontMetricsRegistry

console = Console(stderr=True)

# Generated artifacts printed in debug mode go to stdout, undecorated
stdout_console = Console(highlight=False, soft_wrap=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Corefont[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_source_info(source_dir: str, file_count: int, extension: str) -> None:
    """Print source directory information.

    Args:
        source_dir: Path to the AFM directory
        file_count: Number of font metric files found
        extension: Matched file extension
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(source_dir)
    console.print(line)
    console.print(f"  {file_count} {extension} files")


def print_fonts(registry: FontMetricsRegistry) -> None:
    """Print a table of the fonts in a registry.

    Args:
        registry: Finished font metrics registry
    """
    table = Table(box=None, pad_edge=False, show_edge=False)
    table.add_column("Font", style="bold")
    table.add_column("Glyphs", justify="right")
    table.add_column("FontBBox")

    for font_name, metrics in registry.items():
        bbox = " ".join(f"{value:g}" for value in metrics.bbox.as_tuple())
        table.add_row(font_name, str(metrics.glyph_count), bbox)

    console.print(table)


def print_artifact(text: str) -> None:
    """Print generated artifact text without markup processing.

    Args:
        text: Rendered artifact
    """
    stdout_console.out(text, end="")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    fonts: int,
    glyphs: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total build time in seconds
        fonts: Number of fonts in the registry
        glyphs: Total number of glyph widths
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print(f"  {fonts} fonts {SYM_DOT} {glyphs} glyph widths")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    # Use Text so file names and reasons are never parsed as markup
    line = Text("\n")
    line.append(f"{SYM_ERR} Error:", style="bold red")
    line.append(f" {message}")
    console.print(line)
    if details:
        console.print(Text(f"  {details}"))
