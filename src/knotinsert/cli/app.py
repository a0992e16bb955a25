"""CLI application entry point for knotinsert.

This module provides the main CLI interface using Typer. Every command works
on a JSON path document; editing commands apply the request through an
EditorSession and save the result.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer

from knotinsert import __version__
from knotinsert.cli.output import (
    console,
    print_error,
    print_header,
    print_knots,
    print_notice,
    print_path_info,
    print_point,
    print_step,
    print_success,
)
from knotinsert.config import KnotInsertSettings, LoggingConfig, RenderConfig
from knotinsert.core import EditorSession
from knotinsert.exceptions import KnotInsertError, SessionLoadError
from knotinsert.io import EditorDocument, PathReader, PathWriter
from knotinsert.io.converter import path_length
from knotinsert.utils import EditLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="knotinsert",
    help="Edit chains of cubic Bezier segments stored as JSON path documents.",
    add_completion=False,
    no_args_is_help=True,
)


class CliState:
    """Options shared by all commands."""

    def __init__(self, settings: KnotInsertSettings, quiet: bool) -> None:
        self.settings = settings
        self.quiet = quiet
        self.logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )

    def session(self, document: EditorDocument) -> EditorSession:
        """Create an editing session for a loaded document."""
        session = EditorSession(
            config=self.settings.editor,
            logger=EditLogger(self.logger),
        )
        session.restore(document.knots, document.progress)
        return session


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Knotinsert[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
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
    """Edit chains of cubic Bezier segments."""
    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    settings = KnotInsertSettings(
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )
    ctx.obj = CliState(settings, quiet)


def _load(file: Path) -> EditorDocument:
    """Load a document, turning a missing file into a load error."""
    try:
        return PathReader(file).load()
    except FileNotFoundError as e:
        raise SessionLoadError(str(file), "file not found") from e


def _run(action: Callable[[], None]) -> None:
    """Run a command body, reporting knotinsert errors as exit code 1."""
    try:
        action()
    except KnotInsertError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


ProgressOption = Annotated[
    float,
    typer.Option(
        "--progress",
        "-p",
        help="Position along the whole path (0-1)",
        min=0.0,
        max=1.0,
    ),
]

OutputOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Output path (default: overwrite the input file)",
    ),
]


@app.command()
def new(
    ctx: typer.Context,
    file: Annotated[Path, typer.Argument(help="Path document to create", show_default=False)],
    knots: Annotated[
        int,
        typer.Option("--knots", "-n", help="Number of knots to add", min=0),
    ] = 2,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing file"),
    ] = False,
) -> None:
    """Create a path document with knots placed along a diagonal."""
    state: CliState = ctx.obj

    if file.exists() and not force:
        print_error(f"File already exists: {file}", details="Use --force to overwrite it.")
        raise typer.Exit(code=1)

    def action() -> None:
        session = state.session(EditorDocument())
        for _ in range(knots):
            session.add_knot()
        PathWriter(file).save(EditorDocument(knots=session.path.knots))
        if not state.quiet:
            print_success(f"Created path with {knots} knots", str(file))

    _run(action)


@app.command()
def info(
    ctx: typer.Context,
    file: Annotated[Path, typer.Argument(help="Path document", show_default=False)],
) -> None:
    """Show the knots of a path document."""
    state: CliState = ctx.obj

    def action() -> None:
        document = _load(file)
        path = document.to_path()
        if not state.quiet:
            print_header(__version__)
        print_path_info(str(file), len(path), path.segment_count, path_length(path))
        if document.progress is not None:
            console.print(f"  progress marker at {document.progress:g}")
        print_step("Knots")
        print_knots(path.knots)

    _run(action)


@app.command()
def point(
    file: Annotated[Path, typer.Argument(help="Path document", show_default=False)],
    progress: ProgressOption = 0.5,
) -> None:
    """Evaluate the point at a progress value."""

    def action() -> None:
        path = _load(file).to_path()
        print_point(progress, path.progress_to_segment(progress), path.point_at(progress))

    _run(action)


@app.command()
def split(
    ctx: typer.Context,
    file: Annotated[Path, typer.Argument(help="Path document", show_default=False)],
    progress: ProgressOption = 0.5,
    output: OutputOption = None,
) -> None:
    """Insert a knot at a progress value without changing the curve."""
    state: CliState = ctx.obj

    def action() -> None:
        session = state.session(_load(file))
        session.set_progress(progress)
        index = session.split()
        if index is None:
            print_notice("Nothing to split: the path needs at least 2 knots")
            return

        target = output if output is not None else file
        PathWriter(target).save(
            EditorDocument(knots=session.path.knots, progress=session.progress)
        )
        if not state.quiet:
            print_success(f"Inserted knot {index}", str(target))

    _run(action)


@app.command()
def delete(
    ctx: typer.Context,
    file: Annotated[Path, typer.Argument(help="Path document", show_default=False)],
    progress: ProgressOption = 0.5,
    output: OutputOption = None,
) -> None:
    """Remove the knot nearest to a progress value."""
    state: CliState = ctx.obj

    def action() -> None:
        session = state.session(_load(file))
        session.set_progress(progress)
        index = session.delete_nearest()
        if index is None:
            print_notice("Nothing to delete: the path needs at least 2 knots")
            return

        target = output if output is not None else file
        PathWriter(target).save(
            EditorDocument(knots=session.path.knots, progress=session.progress)
        )
        if not state.quiet:
            print_success(f"Removed knot {index}", str(target))

    _run(action)


@app.command()
def render(
    ctx: typer.Context,
    file: Annotated[Path, typer.Argument(help="Path document", show_default=False)],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="SVG output path (default: {name}.svg)"),
    ] = None,
    progress: Annotated[
        float | None,
        typer.Option(
            "--progress",
            "-p",
            help="Draw the progress marker here (default: the document's marker)",
            min=0.0,
            max=1.0,
        ),
    ] = None,
    no_controls: Annotated[
        bool,
        typer.Option("--no-controls", help="Hide control lines and control points"),
    ] = False,
    flatten: Annotated[
        bool,
        typer.Option("--flatten", help="Draw the curve as a flattened polyline"),
    ] = False,
) -> None:
    """Export the editor view of a path document as SVG."""
    state: CliState = ctx.obj

    def action() -> None:
        document = _load(file)
        session = state.session(document)
        if progress is not None:
            session.set_progress(progress)

        target = output if output is not None else PathWriter.get_svg_path(file)
        config = RenderConfig(show_controls=not no_controls)
        tolerance = state.settings.geometry.flatten_tolerance if flatten else None
        PathWriter(target).save_svg(session.path, session.marker, config, tolerance)
        if not state.quiet:
            print_success("Rendered SVG", str(target))

    _run(action)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
