"""CLI application entry point for strokeport.

This module provides the main CLI interface using Typer.
"""

from collections import Counter
from pathlib import Path
from typing import Annotated

import typer

from strokeport import __version__
from strokeport.cli.output import (
    console,
    print_bounds,
    print_content_info,
    print_error,
    print_export_settings,
    print_header,
    print_nothing_to_export,
    print_step,
    print_stroke_table,
    print_success,
)
from strokeport.config import ExportConfig, LoggingConfig, StrokeportSettings
from strokeport.core import generate_svg
from strokeport.exceptions import (
    ContentError,
    ExportSaveError,
    RenderError,
    StrokeportError,
)
from strokeport.io import StrokeContentReader, SvgWriter
from strokeport.utils import ExportLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="strokeport",
    help="Export stroke content as portable SVG documents.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Strokeport[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Export stroke content as portable SVG documents."""


@app.command()
def export(
    input_content: Annotated[
        Path,
        typer.Argument(
            help="Path to stroke content JSON file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}.svg)",
        ),
    ] = None,
    margin: Annotated[
        float | None,
        typer.Option(
            "--margin",
            "-m",
            help="Margin around the content in document units",
        ),
    ] = None,
    clipboard: Annotated[
        bool,
        typer.Option(
            "--clipboard",
            help="Use the clipboard export margin unless --margin is given",
        ),
    ] = False,
    no_background: Annotated[
        bool,
        typer.Option(
            "--no-background",
            help="Do not draw the background",
        ),
    ] = False,
    no_pattern: Annotated[
        bool,
        typer.Option(
            "--no-pattern",
            help="Do not draw the background pattern",
        ),
    ] = False,
    optimize_printing: Annotated[
        bool,
        typer.Option(
            "--optimize-printing",
            "-p",
            help="Draw strokes outside of images with their darkest color",
        ),
    ] = False,
    image_scale: Annotated[
        float | None,
        typer.Option(
            "--image-scale",
            help="Pixels per document unit for embedded raster images",
        ),
    ] = None,
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
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Export stroke content to an SVG document.

    The document is moved to the origin, so its top left corner is the top
    left corner of the content bounds minus the margin.

    Example:
        strokeport export selection.json --optimize-printing

    This will create selection.svg next to the input file.
    """
    if not input_content.exists():
        print_error(
            f"Input file not found: {input_content}",
            details=f"The file '{input_content}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_content.is_file():
        print_error(
            f"Input path is not a file: {input_content}",
            details="Please provide a path to a stroke content JSON file.",
        )
        raise typer.Exit(code=1)

    overrides: dict[str, object] = {
        "draw_background": not no_background,
        "draw_pattern": not no_pattern,
        "optimize_printing": optimize_printing,
    }
    if margin is not None:
        overrides["margin"] = margin
    if image_scale is not None:
        overrides["image_scale"] = image_scale

    try:
        export_config = (
            ExportConfig.for_clipboard(**overrides)
            if clipboard
            else ExportConfig.model_validate(overrides)
        )
    except ValueError as e:
        print_error("Invalid export settings", details=str(e))
        raise typer.Exit(code=1)

    settings = StrokeportSettings(
        export=export_config,
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )
    export_logger = ExportLogger(
        configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
    )

    if not quiet:
        print_header(__version__)

    output_path = output if output is not None else SvgWriter.get_export_path(input_content)

    input_name = str(input_content)
    export_logger.log_export_start(input_name)

    try:
        if not quiet:
            print_step("Loading stroke content")

        with StrokeContentReader(input_content) as reader:
            content = reader.content

        stroke_counts = _count_strokes(content.strokes)
        export_logger.log_content_loaded(
            input_name, stroke_counts, content.background is not None
        )

        if not quiet:
            print_content_info(
                content_path=input_name,
                stroke_counts=stroke_counts,
                size=content.size(),
                has_background=content.background is not None,
            )
            print_export_settings(
                margin=settings.export.margin,
                draw_background=settings.export.draw_background,
                draw_pattern=settings.export.draw_pattern,
                optimize_printing=settings.export.optimize_printing,
                image_scale=settings.export.image_scale,
            )
            print_step("Rendering")

        svg = generate_svg(
            content,
            draw_background=settings.export.draw_background,
            draw_pattern=settings.export.draw_pattern,
            optimize_printing=settings.export.optimize_printing,
            margin=settings.export.margin,
            image_scale=settings.export.image_scale,
        )

        if svg is None:
            if not quiet:
                print_nothing_to_export()
            export_logger.log_nothing_to_export(input_name)
            raise typer.Exit(code=0)

        SvgWriter(output_path).save(svg)
        export_logger.log_export_complete(
            input_name, str(output_path), len(content.strokes), svg.bounds.extents()
        )

        if not quiet:
            print_success(
                output_path=str(output_path),
                file_size=_format_file_size(output_path),
                size=svg.bounds.extents(),
            )

    except ContentError as e:
        export_logger.log_export_error(input_name, e)
        print_error(f"Could not load stroke content: {e}")
        raise typer.Exit(code=1)
    except RenderError as e:
        export_logger.log_export_error(input_name, e)
        print_error(f"Could not render stroke content: {e.reason}")
        raise typer.Exit(code=1)
    except ExportSaveError as e:
        export_logger.log_export_error(input_name, e)
        print_error(f"Could not save export: {e.reason}")
        raise typer.Exit(code=1)
    except StrokeportError as e:
        export_logger.log_export_error(input_name, e)
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        export_logger.log_export_error(input_name, e)
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


@app.command()
def info(
    input_content: Annotated[
        Path,
        typer.Argument(
            help="Path to stroke content JSON file",
            show_default=False,
        ),
    ],
) -> None:
    """Show strokes, bounds and size of a stroke content file."""
    try:
        with StrokeContentReader(input_content) as reader:
            content = reader.content
    except FileNotFoundError:
        print_error(f"Input file not found: {input_content}")
        raise typer.Exit(code=1)
    except ContentError as e:
        print_error(f"Could not load stroke content: {e}")
        raise typer.Exit(code=1)

    stroke_counts = _count_strokes(content.strokes)
    print_content_info(
        content_path=str(input_content),
        stroke_counts=stroke_counts,
        size=content.size(),
        has_background=content.background is not None,
    )

    bounds = content.effective_bounds()
    if bounds is not None:
        print_bounds(bounds.mins, bounds.maxs, explicit=content.bounds is not None)

    if stroke_counts:
        console.print()
        print_stroke_table(stroke_counts)


def _count_strokes(strokes: list) -> dict[str, int]:
    """Count strokes per kind."""
    return dict(Counter(stroke.kind for stroke in strokes))


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
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
