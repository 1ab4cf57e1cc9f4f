"""CLI entry point for hilite-diff."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from hilite_diff.core.catalogs import BUILTIN_CATALOGS, resolve_catalog
from hilite_diff.core.checker import EquivalenceChecker
from hilite_diff.core.extract import split_markers, strip_markers
from hilite_diff.core.models import OutputMode
from hilite_diff.output.rich_output import RichRenderer

if TYPE_CHECKING:
    from hilite_diff.core.models import MarkerCatalog
    from hilite_diff.output.base import Renderer

app = typer.Typer(
    name="hilite-diff",
    help="Compare highlighted text while tolerating harmless marker placement.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

EXIT_EQUIVALENT = 0
EXIT_NOT_EQUIVALENT = 1
EXIT_ERROR = 2

# Unreadable paths, unknown encodings, undecodable bytes and bad catalogs.
_INPUT_ERRORS = (OSError, LookupError, ValueError)

CatalogOption = Annotated[
    str,
    typer.Option(
        "--catalog",
        "-c",
        help=f"Built-in catalog name ({', '.join(sorted(BUILTIN_CATALOGS))}) or JSON file path.",
    ),
]
OutputOption = Annotated[
    str,
    typer.Option("--output", "-o", help="Output mode: rich or json."),
]
EncodingOption = Annotated[
    str,
    typer.Option("--encoding", help="Text encoding of the input files."),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from hilite_diff import __version__

        typer.echo(f"hilite-diff {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    logging.getLogger("hilite_diff").setLevel(level)


def _parse_output_mode(value: str) -> OutputMode:
    """Parse output string to OutputMode enum."""
    try:
        return OutputMode(value)
    except ValueError:
        valid = ", ".join(o.value for o in OutputMode)
        msg = f"Invalid output mode '{value}'. Choose from: {valid}"
        raise typer.BadParameter(msg) from None


def _get_renderer(output_mode: OutputMode) -> Renderer:
    """Get the appropriate renderer for the output mode."""
    if output_mode == OutputMode.json:
        from hilite_diff.output.json_output import JsonRenderer

        return JsonRenderer()
    return RichRenderer()


def _fail(exc: Exception) -> typer.Exit:
    typer.echo(f"Error: {exc}", err=True)
    return typer.Exit(code=EXIT_ERROR)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Check highlighted renderer output against an expected annotated string."""
    _configure_logging(verbose)


@app.command()
def check(
    expected: Annotated[Path, typer.Argument(help="File holding the expected annotated text.")],
    actual: Annotated[Path, typer.Argument(help="File holding the actual annotated text.")],
    catalog: CatalogOption = "ansi",
    output: OutputOption = "rich",
    encoding: EncodingOption = "utf-8",
) -> None:
    """Compare two annotated files.

    Exits 0 when equivalent, 1 when not, 2 on input or catalog errors.
    """
    output_mode = _parse_output_mode(output)
    try:
        marker_catalog = resolve_catalog(catalog)
        expected_text = expected.read_text(encoding=encoding)
        actual_text = actual.read_text(encoding=encoding)
    except _INPUT_ERRORS as exc:
        raise _fail(exc) from None

    result = EquivalenceChecker(marker_catalog).check(expected_text, actual_text)
    _get_renderer(output_mode).render(result)

    if not result.equivalent:
        raise typer.Exit(code=EXIT_NOT_EQUIVALENT)


@app.command()
def strip(
    file: Annotated[Path, typer.Argument(help="File holding annotated text.")],
    catalog: CatalogOption = "ansi",
    encoding: EncodingOption = "utf-8",
) -> None:
    """Print the plain text of an annotated file."""
    try:
        marker_catalog = resolve_catalog(catalog)
        text = file.read_text(encoding=encoding)
    except _INPUT_ERRORS as exc:
        raise _fail(exc) from None

    typer.echo(strip_markers(text, marker_catalog), nl=False)


@app.command()
def show(
    file: Annotated[Path, typer.Argument(help="File holding annotated text.")],
    catalog: CatalogOption = "ansi",
    output: OutputOption = "rich",
    encoding: EncodingOption = "utf-8",
) -> None:
    """Print an annotated file with every marker shown as a named tag."""
    output_mode = _parse_output_mode(output)
    try:
        marker_catalog = resolve_catalog(catalog)
        text = file.read_text(encoding=encoding)
    except _INPUT_ERRORS as exc:
        raise _fail(exc) from None

    _get_renderer(output_mode).render_segments(split_markers(text, marker_catalog))


@app.command("catalogs")
def list_catalogs() -> None:
    """List the built-in marker catalogs."""
    for name in sorted(BUILTIN_CATALOGS):
        marker_catalog: MarkerCatalog = BUILTIN_CATALOGS[name]
        markers = ", ".join(
            f"{m.name}*" if m == marker_catalog.reset else m.name for m in marker_catalog.markers
        )
        typer.echo(f"{name}: {markers}")
