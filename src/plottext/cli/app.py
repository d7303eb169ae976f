"""CLI application entry point for plottext.

This module provides the main CLI interface using Typer.
"""

import asyncio
import sys
from pathlib import Path
from typing import Annotated, Any

import typer

from plottext import __version__
from plottext.cli.output import (
    console,
    print_error,
    print_header,
    print_profile_info,
    print_step,
    print_success,
)
from plottext.config import (
    FontConfig,
    LoggingConfig,
    MachineProfile,
    PlottextSettings,
    ProfileName,
    StyleProfile,
    get_profile,
)
from plottext.core import TextCompiler, get_template
from plottext.exceptions import FontLoadError, PlottextError
from plottext.io.provider import resolve_locator
from plottext.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="plottext",
    help="Compile text into G-code for a pen plotter.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Plottext[/bold blue] v{__version__}")
        raise typer.Exit()


def parse_fields(fields: list[str]) -> dict[str, str]:
    """Parse key=value template fields.

    Args:
        fields: Strings of the form key=value

    Returns:
        Field values by key

    Raises:
        typer.BadParameter: If an entry has no '='
    """
    values: dict[str, str] = {}
    for entry in fields:
        key, sep, value = entry.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"expected key=value, got '{entry}'", param_hint="--field")
        values[key.strip()] = value
    return values


def build_style(base: StyleProfile, **overrides: Any) -> StyleProfile:
    """Apply CLI overrides (None means keep) to a profile's style."""
    updates = {key: value for key, value in overrides.items() if value is not None}
    return StyleProfile(**{**base.model_dump(), **updates})


def build_machine(base: MachineProfile, **overrides: Any) -> MachineProfile:
    """Apply CLI overrides (None means keep) to a profile's machine settings."""
    updates = {key: value for key, value in overrides.items() if value is not None}
    return MachineProfile(**{**base.model_dump(), **updates})


@app.command()
def plot(
    text: Annotated[
        str | None,
        typer.Argument(
            help="Text to plot ('-' reads stdin; omit when using --template)",
            show_default=False,
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write G-code to this file (default: stdout)",
        ),
    ] = None,
    profile: Annotated[
        str,
        typer.Option(
            "--profile",
            "-p",
            help="Plotter profile (api|preview)",
        ),
    ] = "api",
    font: Annotated[
        str | None,
        typer.Option(
            "--font",
            "-f",
            help="Font name, looked up as {font-dir}/{name}.ttf",
        ),
    ] = None,
    font_path: Annotated[
        Path | None,
        typer.Option(
            "--font-path",
            help="Explicit TTF/OTF font file",
        ),
    ] = None,
    font_dir: Annotated[
        Path,
        typer.Option(
            "--font-dir",
            help="Directory for fonts referenced by name",
        ),
    ] = Path("fonts"),
    font_size: Annotated[
        float | None,
        typer.Option("--font-size", "-s", help="Em size in mm", min=0.01),
    ] = None,
    margin_x: Annotated[
        float | None,
        typer.Option("--margin-x", help="Left pen origin in mm"),
    ] = None,
    margin_y: Annotated[
        float | None,
        typer.Option("--margin-y", help="First baseline in mm"),
    ] = None,
    line_height: Annotated[
        float | None,
        typer.Option("--line-height", help="Baseline distance in mm", min=0.01),
    ] = None,
    letter_spacing: Annotated[
        float | None,
        typer.Option("--letter-spacing", help="Extra gap after each character in mm"),
    ] = None,
    curve_steps: Annotated[
        int | None,
        typer.Option("--curve-steps", help="Line segments per curve", min=1, max=1000),
    ] = None,
    close_contours: Annotated[
        bool | None,
        typer.Option(
            "--close-contours/--no-close-contours",
            help="Draw back to each contour's start before lifting",
        ),
    ] = None,
    template: Annotated[
        str | None,
        typer.Option(
            "--template",
            "-t",
            help="Render a message template (chumba|stake) instead of TEXT",
        ),
    ] = None,
    field: Annotated[
        list[str] | None,
        typer.Option(
            "--field",
            help="Template field as key=value (repeatable)",
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
    """Compile TEXT into a pen-plotter G-code program.

    Every glyph contour is traced with the pen down, with pen-up travel
    between strokes.

    Example:
        plottext "Hello" --font-path Quicksand.ttf -o hello.gcode
    """
    try:
        plotter_profile = get_profile(profile.lower())
    except ValueError:
        valid = ", ".join(p.value for p in ProfileName)
        print_error(f"Invalid profile: {profile}", details=f"Valid values: {valid}")
        raise typer.Exit(code=1)

    settings = PlottextSettings(
        font=FontConfig(font_dir=font_dir),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    try:
        if template is not None:
            if text is not None:
                print_error("Cannot use TEXT and --template together")
                raise typer.Exit(code=1)
            text = get_template(template).render(parse_fields(field or []))
        elif text == "-":
            text = sys.stdin.read()

        style = build_style(
            plotter_profile.style,
            font=font,
            font_path=font_path,
            font_size=font_size,
            margin_x=margin_x,
            margin_y=margin_y,
            line_height=line_height,
            letter_spacing=letter_spacing,
        )
        machine = build_machine(
            plotter_profile.machine,
            curve_steps=curve_steps,
            close_contours=close_contours,
        )

        if not quiet and output is not None:
            print_header(__version__)
            print_profile_info(
                profile=plotter_profile.name,
                font=resolve_locator(style, font_dir) if style.locator else "(none)",
                font_size=style.font_size,
                curve_steps=machine.curve_steps,
            )
            print_step("Compiling")

        compiler = TextCompiler(settings, logger=logger)
        program = asyncio.run(compiler.compile(text or "", style, machine))

        if output is None:
            typer.echo(program.text, nl=False)
            return

        output.write_text(program.text, encoding="utf-8")
        if not quiet:
            stats = compiler.stats
            print_success(
                output_path=str(output),
                total_time_s=stats.duration_seconds,
                program_lines=len(program),
                traced=stats.glyphs_traced,
                skipped=stats.glyphs_skipped,
                skipped_chars=stats.skipped_chars,
            )

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}", details=e.locator)
        raise typer.Exit(code=1)
    except PlottextError as e:
        print_error(str(e), details=f"stage: {e.stage}")
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except OSError as e:
        print_error(f"Could not write output: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
