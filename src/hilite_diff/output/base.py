"""Renderer protocol for equivalence results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from hilite_diff.core.models import EquivalenceResult, Segment


@runtime_checkable
class Renderer(Protocol):
    """Protocol for rendering equivalence results.

    Implementations must provide a render method that takes an
    EquivalenceResult, and a render_segments method that shows an
    annotated string split into markers and plain text. Both write
    output to the appropriate destination.
    """

    def render(self, result: EquivalenceResult) -> None:
        """Render the equivalence result."""
        ...

    def render_segments(self, segments: Sequence[Segment]) -> None:
        """Render an annotated string's segments."""
        ...
