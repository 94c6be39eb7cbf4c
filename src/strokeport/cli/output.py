"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted messages and summary tables.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console()

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
    console.print(f"\n[bold]Strokeport[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def _format_size(size: tuple[float, float] | None) -> str:
    if size is None:
        return "none"
    return f"{size[0]:.1f} × {size[1]:.1f}"


def print_content_info(
    content_path: str,
    stroke_counts: dict[str, int],
    size: tuple[float, float] | None,
    has_background: bool,
) -> None:
    """Print stroke content information.

    Args:
        content_path: Path to the content file
        stroke_counts: Number of strokes per stroke kind
        size: Size of the effective bounds, None for empty content
        has_background: Whether the content has a background
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(content_path)
    console.print(line)
    total = sum(stroke_counts.values())
    background = "background" if has_background else "no background"
    console.print(f"  {total:,} strokes {SYM_DOT} {_format_size(size)} {SYM_DOT} {background}")


def print_export_settings(
    margin: float,
    draw_background: bool,
    draw_pattern: bool,
    optimize_printing: bool,
    image_scale: float = 1.0,
) -> None:
    """Print the export settings in effect."""
    switches = []
    if not draw_background:
        switches.append("no background")
    elif not draw_pattern:
        switches.append("no pattern")
    if optimize_printing:
        switches.append("optimized for printing")
    if image_scale != 1.0:
        switches.append(f"images at {image_scale:g}x")
    detail = f" {SYM_DOT} " + ", ".join(switches) if switches else ""
    console.print(f"  margin {margin:g}{detail}")


def print_bounds(
    mins: tuple[float, float],
    maxs: tuple[float, float],
    explicit: bool,
) -> None:
    """Print content bounds.

    Args:
        mins: Top left corner
        maxs: Bottom right corner
        explicit: Whether the bounds were set on the content instead of computed
    """
    source = "explicit" if explicit else "computed"
    console.print(
        f"  bounds ({source}): "
        f"({mins[0]:.1f}, {mins[1]:.1f}) to ({maxs[0]:.1f}, {maxs[1]:.1f})"
    )


def print_stroke_table(stroke_counts: dict[str, int]) -> None:
    """Print a table of stroke counts per kind."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Kind")
    table.add_column("Strokes", justify="right")
    for kind, count in sorted(stroke_counts.items()):
        table.add_row(kind, str(count))
    console.print(table)


def print_success(output_path: str, file_size: str, size: tuple[float, float]) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        size: Size of the exported document
    """
    console.print(f"\n[bold green]{SYM_OK} Exported[/bold green]")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)
    console.print(f"  {_format_size(size)} document units")


def print_nothing_to_export() -> None:
    """Print notice for empty content."""
    console.print(f"\n{SYM_DOT} Content is empty, nothing to export")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
