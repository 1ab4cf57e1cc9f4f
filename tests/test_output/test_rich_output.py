"""Tests for hilite_diff.output.rich_output."""

from __future__ import annotations

from io import StringIO

from rich.console import Console

from hilite_diff.core.checker import EquivalenceChecker
from hilite_diff.core.extract import split_markers
from hilite_diff.core.models import (
    Divergence,
    DivergenceKind,
    EquivalenceResult,
    MarkerCatalog,
)
from hilite_diff.output.base import Renderer
from hilite_diff.output.rich_output import RichRenderer


def _renderer() -> RichRenderer:
    return RichRenderer(console=Console(file=StringIO(), width=120, no_color=True))


def _capture_render(renderer: RichRenderer, result: EquivalenceResult) -> str:
    """Render a result and capture the output as a string."""
    renderer.render(result)
    file = renderer._console.file
    assert isinstance(file, StringIO)
    return file.getvalue()


class TestRichRendererInit:
    """Verify RichRenderer constructor."""

    def test_default_console(self) -> None:
        r = RichRenderer()
        assert isinstance(r._console, Console)

    def test_custom_console(self) -> None:
        console = Console(file=StringIO())
        r = RichRenderer(console=console)
        assert r._console is console

    def test_satisfies_protocol(self) -> None:
        assert isinstance(RichRenderer(), Renderer)


class TestRichRendererVerdict:
    """Verify verdict lines."""

    def test_equivalent(self, tag_catalog: MarkerCatalog) -> None:
        result = EquivalenceChecker(tag_catalog).check("<kw>a </>", "<kw>a</> ")
        output = _capture_render(_renderer(), result)
        assert "equivalent" in output
        assert "not equivalent" not in output

    def test_not_equivalent_without_divergence(self) -> None:
        result = EquivalenceResult(equivalent=False, expected_plain="a", actual_plain="a")
        output = _capture_render(_renderer(), result)
        assert "not equivalent" in output


class TestRichRendererDivergence:
    """Verify divergence details."""

    def test_text_divergence_shows_ndiff(self, tag_catalog: MarkerCatalog) -> None:
        result = EquivalenceChecker(tag_catalog).check("<kw>select\nfrom", "<kw>select\nform")
        output = _capture_render(_renderer(), result)
        assert "text mismatch at offset 8" in output
        assert "- from" in output
        assert "+ form" in output
        assert "plain text" in output

    def test_style_divergence_shows_caret_and_styles(self, tag_catalog: MarkerCatalog) -> None:
        result = EquivalenceChecker(tag_catalog).check(
            "<kw>SELECT </><id>x</>", "<kw>SELECT </><fn>x</>"
        )
        output = _capture_render(_renderer(), result)
        lines = output.splitlines()
        assert "style mismatch at offset 7" in output
        assert "SELECT x" in output
        caret_line = next(line for line in lines if line.strip() == "^")
        assert caret_line.index("^") == 7
        assert "id" in output
        assert "fn" in output
        assert "expected" in output
        assert "actual" in output

    def test_caret_on_later_line(self, tag_catalog: MarkerCatalog) -> None:
        result = EquivalenceChecker(tag_catalog).check("a\n<kw>bc", "a\nb<kw>c")
        output = _capture_render(_renderer(), result)
        caret_line = next(line for line in output.splitlines() if line.strip() == "^")
        assert caret_line.index("^") == 0

    def test_length_divergence_shows_end(self) -> None:
        result = EquivalenceResult(
            equivalent=False,
            expected_plain="a",
            actual_plain="a",
            divergence=Divergence(
                kind=DivergenceKind.length,
                offset=1,
                expected_char=None,
                actual_char="b",
            ),
        )
        output = _capture_render(_renderer(), result)
        assert "length mismatch" in output
        assert "<end>" in output


class TestRenderSegments:
    """Verify marker tag display."""

    def test_markers_shown_as_tags(self, tag_catalog: MarkerCatalog) -> None:
        renderer = _renderer()
        renderer.render_segments(split_markers("<kw>SELECT </>* <xx>", tag_catalog))
        file = renderer._console.file
        assert isinstance(file, StringIO)
        output = file.getvalue()
        assert "⟨kw⟩SELECT ⟨none⟩* <xx>" in output
