"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""


from rich.console import Console
from rich.table import Table
from rich.text import Text

from knotinsert.core.path import SegmentPosition
from knotinsert.domain import Knot, Point

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def _fmt_point(point: Point) -> str:
    return f"({point.x:.3f}, {point.y:.3f})"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Knotinsert[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_path_info(file_path: str, knot_count: int, segment_count: int, length: float) -> None:
    """Print path summary.

    Args:
        file_path: Path to the document
        knot_count: Number of knots
        segment_count: Number of segments
        length: Approximate arc length of the whole path
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(file_path)
    console.print(line)
    console.print(
        f"  {knot_count} knots {SYM_DOT} {segment_count} segments {SYM_DOT} "
        f"length ≈ {length:.2f}"
    )


def print_knots(knots: list[Knot]) -> None:
    """Print a table of knots with their handles.

    Args:
        knots: Knots to list
    """
    if not knots:
        console.print("  No knots")
        return

    table = Table(show_edge=False, pad_edge=False, box=None)
    table.add_column("#", justify="right")
    table.add_column("Anchor")
    table.add_column("Outgoing")
    table.add_column("Incoming")
    table.add_column("Handles")
    for index, knot in enumerate(knots):
        table.add_row(
            str(index),
            _fmt_point(knot.anchor),
            _fmt_point(knot.outgoing_control),
            _fmt_point(knot.incoming_control),
            "symmetric" if knot.is_symmetric else "independent",
        )
    console.print(table)


def print_point(progress: float, position: SegmentPosition | None, point: Point | None) -> None:
    """Print the point at a progress value.

    Args:
        progress: Requested progress value
        position: Resolved segment position
        point: Evaluated point
    """
    if position is None or point is None:
        console.print(f"  progress {progress:g} {SYM_DOT} [yellow]no position[/yellow] (fewer than 2 knots)")
        return
    console.print(
        f"  progress {progress:g} {SYM_DOT} segment {position.index} "
        f"{SYM_DOT} t={position.t:.4f}"
    )
    console.print(f"  [bold]{_fmt_point(point)}[/bold]")


def print_success(message: str, output_path: str | None = None) -> None:
    """Print success message.

    Args:
        message: Summary of what was done
        output_path: File that was written, if any
    """
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")
    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)


def print_notice(message: str) -> None:
    """Print a notice for a request that changed nothing.

    Args:
        message: Notice text
    """
    console.print(f"\n{SYM_DOT} {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
