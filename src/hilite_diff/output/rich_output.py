"""Rich console renderer (default output mode)."""

from __future__ import annotations

import difflib
from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from hilite_diff.core.models import DivergenceKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from hilite_diff.core.models import Divergence, EquivalenceResult, Marker, Segment

_MARKER_STYLES: dict[str, str] = {
    "keyword": "bold",
    "identifier": "cyan",
    "function": "yellow",
    "operator": "bold yellow",
    "alias": "green",
    "substitution": "bold cyan",
    "none": "",
}
_UNKNOWN_MARKER_STYLE = "magenta"


def _marker_style(marker: Marker | None) -> str:
    """Return the Rich style used to display text under ``marker``."""
    if marker is None:
        return ""
    return _MARKER_STYLES.get(marker.name, _UNKNOWN_MARKER_STYLE)


def _marker_label(marker: Marker | None) -> str:
    return marker.name if marker is not None else "-"


class RichRenderer:
    """Renders equivalence results to a Rich console.

    - Equivalent: a single green verdict line.
    - Text divergence: a line-level ndiff of the two plain texts.
    - Style divergence: the offending plain-text line with a caret under
      the character and a table of the active style on each side.
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize with an optional Rich console.

        Args:
            console: Rich Console instance. Defaults to Console() if None.
        """
        self._console = console or Console()

    def render(self, result: EquivalenceResult) -> None:
        """Render the verdict and, when not equivalent, the first divergence."""
        if result.equivalent:
            self._console.print("[green]equivalent[/green]")
            return

        divergence = result.divergence
        if divergence is None:
            self._console.print("[red]not equivalent[/red]")
            return

        self._console.print(
            f"[red]not equivalent[/red]: {divergence.kind.value} mismatch "
            f"at offset {divergence.offset}"
        )
        if divergence.kind == DivergenceKind.text:
            self._render_text_diff(result.expected_plain, result.actual_plain)
        else:
            self._render_position(result.expected_plain, divergence)
            self._console.print(self._build_style_table(divergence))

    def render_segments(self, segments: Sequence[Segment]) -> None:
        """Print an annotated string with each marker shown as a tag."""
        text = Text()
        active: Marker | None = None
        for segment in segments:
            if segment.marker is not None:
                active = segment.marker
                text.append(f"⟨{segment.marker.name}⟩", style="dim")
            else:
                text.append(segment.text, style=_marker_style(active))
        self._console.print(text)

    # -- Divergence details -----------------------------------------------

    def _render_text_diff(self, expected: str, actual: str) -> None:
        """Render an ndiff of the plain texts in a Panel."""
        diff_text = Text()
        for line in difflib.ndiff(
            expected.splitlines(keepends=True),
            actual.splitlines(keepends=True),
        ):
            if not line.endswith("\n"):
                line += "\n"
            diff_text.append(line, style=self._diff_line_style(line))

        panel = Panel(
            diff_text,
            title="[yellow]plain text (expected -, actual +)[/yellow]",
            border_style="yellow",
            expand=False,
        )
        self._console.print(panel)

    def _render_position(self, plain: str, divergence: Divergence) -> None:
        """Print the plain-text line containing the divergence with a caret."""
        offset = min(divergence.offset, len(plain))
        line_start = plain.rfind("\n", 0, offset) + 1
        line_end = plain.find("\n", offset)
        if line_end == -1:
            line_end = len(plain)

        line = Text(plain[line_start:line_end])
        if offset < line_end:
            line.stylize("reverse red", offset - line_start, offset - line_start + 1)
        self._console.print(line)
        self._console.print(" " * (offset - line_start) + "^", style="red")

    @staticmethod
    def _build_style_table(divergence: Divergence) -> Table:
        """Build a table comparing the active style on each side."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("Side")
        table.add_column("Char", justify="center")
        table.add_column("Active style")
        table.add_column("Raw offset", justify="right")

        rows = (
            (
                "expected",
                divergence.expected_char,
                divergence.expected_style,
                divergence.expected_offset,
            ),
            ("actual", divergence.actual_char, divergence.actual_style, divergence.actual_offset),
        )
        for side, char, style, raw in rows:
            table.add_row(
                side,
                Text(repr(char) if char is not None else "<end>"),
                Text(_marker_label(style), style=_marker_style(style)),
                str(raw) if raw is not None else "-",
            )
        return table

    @staticmethod
    def _diff_line_style(line: str) -> str:
        """Return Rich style string for an ndiff line."""
        if line.startswith("- "):
            return "red"
        if line.startswith("+ "):
            return "green"
        if line.startswith("? "):
            return "cyan"
        return "dim"
