"""JSON export renderer."""

from __future__ import annotations

import dataclasses
import json
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

    from hilite_diff.core.models import EquivalenceResult, Segment


class JsonRenderer:
    """Renders equivalence results as JSON to a text stream.

    Output modes:
    - render(): full EquivalenceResult as a JSON object
    - render_segments(): an annotated string split into segments

    Markers serialize as ``{"name", "text"}`` objects and StrEnum values
    natively as strings. Output goes to stdout by default. Pass a custom
    TextIO for file output or testing.
    """

    def __init__(self, output: TextIO | None = None, *, indent: int = 2) -> None:
        """Initialize with an optional output stream.

        Args:
            output: Text stream for JSON output. Defaults to sys.stdout.
            indent: JSON indentation level. Defaults to 2.
        """
        self._output = output or sys.stdout
        self._indent = indent

    def render(self, result: EquivalenceResult) -> None:
        """Serialize the full equivalence result as JSON."""
        self._dump(dataclasses.asdict(result))

    def render_segments(self, segments: Sequence[Segment]) -> None:
        """Serialize annotated-string segments as a JSON array."""
        self._dump([dataclasses.asdict(s) for s in segments])

    def _dump(self, data: object) -> None:
        json.dump(data, self._output, indent=self._indent, ensure_ascii=False)
        self._output.write("\n")
