"""Data models for hilite-diff markers, catalogs and comparison results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


class CatalogError(ValueError):
    """Raised when a marker catalog is malformed."""


class PrefixPolicy(StrEnum):
    """How the scanner resolves markers whose text is a prefix of another."""

    first_match = "first_match"
    longest_match = "longest_match"
    forbid = "forbid"


class DivergenceKind(StrEnum):
    """Where two annotated strings first stopped agreeing."""

    text = "text"
    style = "style"
    length = "length"
    character = "character"


class OutputMode(StrEnum):
    """Output format for rendering results."""

    rich = "rich"
    json = "json"


@dataclass(frozen=True)
class Marker:
    """A sentinel substring that switches the active style."""

    name: str
    text: str


@dataclass(frozen=True)
class MarkerCatalog:
    """Ordered, immutable set of recognized markers.

    Exactly one member is the reset marker, the style every scan starts
    in. Marker names and texts are unique, so two markers compare equal
    only when they are the same catalog entry.

    Raises:
        CatalogError: On construction, if the catalog is empty, the reset
            marker is not a member, a marker text is empty, names or texts
            repeat, or prefix-ambiguous markers exist under
            ``PrefixPolicy.forbid``.
    """

    markers: tuple[Marker, ...]
    reset: Marker
    prefix_policy: PrefixPolicy = PrefixPolicy.longest_match

    def __post_init__(self) -> None:
        if not self.markers:
            msg = "Marker catalog must contain at least one marker"
            raise CatalogError(msg)

        names: set[str] = set()
        texts: set[str] = set()
        for marker in self.markers:
            if not marker.text:
                msg = f"Marker '{marker.name}' has empty text"
                raise CatalogError(msg)
            if marker.name in names:
                msg = f"Duplicate marker name: '{marker.name}'"
                raise CatalogError(msg)
            if marker.text in texts:
                msg = f"Duplicate marker text for '{marker.name}': {marker.text!r}"
                raise CatalogError(msg)
            names.add(marker.name)
            texts.add(marker.text)

        if self.reset not in self.markers:
            msg = f"Reset marker '{self.reset.name}' is not in the catalog"
            raise CatalogError(msg)

        if self.prefix_policy == PrefixPolicy.forbid:
            self._reject_prefixes()

    def _reject_prefixes(self) -> None:
        """Raise CatalogError if any marker text starts another."""
        for short in self.markers:
            for long in self.markers:
                if short is not long and long.text.startswith(short.text):
                    msg = (
                        f"Marker '{short.name}' ({short.text!r}) is a prefix of "
                        f"'{long.name}' ({long.text!r})"
                    )
                    raise CatalogError(msg)

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, str],
        *,
        reset: str,
        prefix_policy: PrefixPolicy = PrefixPolicy.longest_match,
    ) -> MarkerCatalog:
        """Build a catalog from an ordered ``{name: text}`` mapping.

        Args:
            mapping: Marker names to marker texts, in scan order.
            reset: Name of the reset marker.
            prefix_policy: Resolution of prefix-ambiguous markers.

        Raises:
            CatalogError: If ``reset`` is not a key of ``mapping`` or the
                resulting catalog is invalid.
        """
        markers = tuple(Marker(name=name, text=text) for name, text in mapping.items())
        by_name = {m.name: m for m in markers}
        if reset not in by_name:
            msg = f"Reset marker '{reset}' is not in the catalog"
            raise CatalogError(msg)
        return cls(markers=markers, reset=by_name[reset], prefix_policy=prefix_policy)

    @property
    def names(self) -> tuple[str, ...]:
        """Marker names in catalog order."""
        return tuple(m.name for m in self.markers)

    def get(self, name: str) -> Marker:
        """Return the marker called ``name``.

        Raises:
            KeyError: If no marker has that name.
        """
        for marker in self.markers:
            if marker.name == name:
                return marker
        raise KeyError(name)


@dataclass(frozen=True)
class Segment:
    """A slice of an annotated string: either one marker or plain text."""

    text: str
    marker: Marker | None = None

    @property
    def is_marker(self) -> bool:
        return self.marker is not None


@dataclass(frozen=True)
class Divergence:
    """First point at which two annotated strings disagree.

    ``offset`` indexes the plain (marker-free) text. ``expected_offset``
    and ``actual_offset`` index the raw annotated strings and are None
    for a text divergence, which is detected before the lockstep walk.
    """

    kind: DivergenceKind
    offset: int
    expected_char: str | None = None
    actual_char: str | None = None
    expected_offset: int | None = None
    actual_offset: int | None = None
    expected_style: Marker | None = None
    actual_style: Marker | None = None


@dataclass(frozen=True)
class EquivalenceResult:
    """Outcome of comparing an expected and an actual annotated string."""

    equivalent: bool
    expected_plain: str
    actual_plain: str
    divergence: Divergence | None = None

    def __bool__(self) -> bool:
        return self.equivalent
