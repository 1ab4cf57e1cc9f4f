"""Plain-text extraction and segmentation of annotated strings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hilite_diff.core.models import Segment
from hilite_diff.core.scanner import MarkerScanner

if TYPE_CHECKING:
    from hilite_diff.core.models import MarkerCatalog


def _scanner_for(catalog: MarkerCatalog | MarkerScanner) -> MarkerScanner:
    if isinstance(catalog, MarkerScanner):
        return catalog
    return MarkerScanner(catalog)


def strip_markers(annotated: str, catalog: MarkerCatalog | MarkerScanner) -> str:
    """Remove every marker from ``annotated``, keeping all visible text.

    Whitespace and character order are preserved. Accepts a catalog or an
    already-built scanner for it.
    """
    scanner = _scanner_for(catalog)
    out: list[str] = []
    position = 0
    while True:
        position, _ = scanner.consume_markers(annotated, position)
        if position == len(annotated):
            return "".join(out)
        out.append(annotated[position])
        position += 1


def split_markers(
    annotated: str,
    catalog: MarkerCatalog | MarkerScanner,
) -> tuple[Segment, ...]:
    """Split ``annotated`` into marker segments and runs of plain text.

    Concatenating the segment texts reproduces ``annotated`` exactly.
    """
    scanner = _scanner_for(catalog)
    segments: list[Segment] = []
    plain: list[str] = []
    position = 0

    while position < len(annotated):
        marker = scanner.match_at(annotated, position)
        if marker is None:
            plain.append(annotated[position])
            position += 1
            continue
        if plain:
            segments.append(Segment(text="".join(plain)))
            plain = []
        segments.append(Segment(text=marker.text, marker=marker))
        position += len(marker.text)

    if plain:
        segments.append(Segment(text="".join(plain)))
    return tuple(segments)
