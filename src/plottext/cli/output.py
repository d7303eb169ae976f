"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library.
Messages go to stderr so a program written to stdout stays clean.
"""


from rich.console import Console
from rich.text import Text

console = Console(stderr=True)

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
    console.print(f"\n[bold]Plottext[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_profile_info(profile: str, font: str, font_size: float, curve_steps: int) -> None:
    """Print the settings a compilation runs with.

    Args:
        profile: Profile name
        font: Font locator
        font_size: Em size in output units
        curve_steps: Segments per flattened curve
    """
    line = Text("  ")
    line.append(font)
    line.append(f" ({profile})")
    console.print(line)
    console.print(f"  {font_size:g} mm em {SYM_DOT} {curve_steps} curve steps")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    total_time_s: float,
    program_lines: int,
    traced: int,
    skipped: int,
    skipped_chars: list[str] | None = None,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        total_time_s: Compilation time in seconds
        program_lines: Number of G-code lines written
        traced: Number of glyphs traced
        skipped: Number of characters that drew nothing
        skipped_chars: The characters that drew nothing
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({program_lines:,} lines)")
    console.print(line)

    console.print(f"  {traced} glyphs traced {SYM_DOT} {skipped} skipped")

    # Whitespace is always skipped; only list what may surprise
    visible = sorted({c for c in skipped_chars or [] if not c.isspace()})
    if visible:
        console.print(f"  [yellow]no outline for: {' '.join(visible)}[/yellow]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
