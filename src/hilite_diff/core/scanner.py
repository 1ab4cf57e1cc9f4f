"""Greedy marker scanning over annotated strings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hilite_diff.core.models import PrefixPolicy

if TYPE_CHECKING:
    from hilite_diff.core.models import Marker, MarkerCatalog


class MarkerScanner:
    """Consumes runs of consecutive markers from an annotated string.

    The catalog is swept at the current position; on a match the position
    advances past the marker and the sweep restarts. Scanning stops at the
    first sweep that matches nothing. Which marker wins when several match
    at one position is decided by the catalog's prefix policy:

    - first_match / forbid: the first matching marker in catalog order
    - longest_match: the longest matching marker
    """

    def __init__(self, catalog: MarkerCatalog) -> None:
        """Initialize with the catalog to scan for.

        Args:
            catalog: Markers recognized by this scanner.
        """
        self._catalog = catalog
        if catalog.prefix_policy == PrefixPolicy.longest_match:
            # Stable sort keeps catalog order among equal lengths.
            self._sweep_order = tuple(
                sorted(catalog.markers, key=lambda m: len(m.text), reverse=True)
            )
        else:
            self._sweep_order = catalog.markers

    @property
    def catalog(self) -> MarkerCatalog:
        return self._catalog

    def match_at(self, text: str, position: int) -> Marker | None:
        """Return the marker starting at ``position``, or None."""
        for marker in self._sweep_order:
            if text.startswith(marker.text, position):
                return marker
        return None

    def consume_markers(self, text: str, position: int) -> tuple[int, Marker | None]:
        """Skip every marker that starts at ``position``.

        Args:
            text: Annotated string to scan.
            position: Starting index, ``0 <= position <= len(text)``.

        Returns:
            The position after the run of markers and the last marker
            consumed, or ``(position, None)`` when no marker starts there.

        Raises:
            IndexError: If ``position`` is outside the string.
        """
        if not 0 <= position <= len(text):
            msg = f"Scan position {position} out of range for string of length {len(text)}"
            raise IndexError(msg)

        last: Marker | None = None
        while True:
            marker = self.match_at(text, position)
            if marker is None:
                return position, last
            position += len(marker.text)
            last = marker
