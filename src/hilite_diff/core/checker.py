"""Tolerant equivalence checking of highlighted output."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from hilite_diff.core.extract import strip_markers
from hilite_diff.core.models import Divergence, DivergenceKind, EquivalenceResult
from hilite_diff.core.scanner import MarkerScanner

if TYPE_CHECKING:
    from hilite_diff.core.models import MarkerCatalog

logger = logging.getLogger(__name__)

# ASCII whitespace only, matching C isspace in the "C" locale.
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _first_difference(left: str, right: str) -> int:
    """Index of the first differing character, or the shorter length."""
    for idx, (a, b) in enumerate(zip(left, right, strict=False)):
        if a != b:
            return idx
    return min(len(left), len(right))


def _char_at(text: str, position: int) -> str | None:
    return text[position] if position < len(text) else None


class EquivalenceChecker:
    """Decides whether two highlighted strings style the same text the same way.

    Highlighted output cannot be compared character by character, since
    renderers are free to:

    1. highlight whitespace with any style, or leave it unstyled, and
    2. omit the reset marker before the next style marker, e.g.
       ``<kw>foo<none><op>+`` and ``<kw>foo<op>+`` are equal.

    The check first strips markers from both sides and requires identical
    plain text. It then walks both strings in lockstep, tracking the most
    recent marker on each side as the active style, and requires the active
    styles to agree at every non-whitespace character.
    """

    def __init__(self, catalog: MarkerCatalog) -> None:
        """Initialize with the marker catalog shared by both inputs.

        Args:
            catalog: Markers recognized in expected and actual strings.
        """
        self._catalog = catalog
        self._scanner = MarkerScanner(catalog)

    @property
    def catalog(self) -> MarkerCatalog:
        return self._catalog

    def equivalent(self, expected: str, actual: str) -> bool:
        """Return True when ``expected`` and ``actual`` are equivalent."""
        return self.check(expected, actual).equivalent

    def check(self, expected: str, actual: str) -> EquivalenceResult:
        """Compare two annotated strings.

        Args:
            expected: Reference highlighted string.
            actual: Highlighted string under test.

        Returns:
            An EquivalenceResult carrying both plain texts and, when not
            equivalent, the first divergence.
        """
        expected_plain = strip_markers(expected, self._scanner)
        actual_plain = strip_markers(actual, self._scanner)

        if expected_plain != actual_plain:
            offset = _first_difference(expected_plain, actual_plain)
            logger.debug("Plain text differs at offset %d", offset)
            return EquivalenceResult(
                equivalent=False,
                expected_plain=expected_plain,
                actual_plain=actual_plain,
                divergence=Divergence(
                    kind=DivergenceKind.text,
                    offset=offset,
                    expected_char=_char_at(expected_plain, offset),
                    actual_char=_char_at(actual_plain, offset),
                ),
            )

        divergence = self._walk(expected, actual)
        return EquivalenceResult(
            equivalent=divergence is None,
            expected_plain=expected_plain,
            actual_plain=actual_plain,
            divergence=divergence,
        )

    def _walk(self, expected: str, actual: str) -> Divergence | None:
        """Lockstep walk comparing active styles at visible characters."""
        scanner = self._scanner
        left_pos = right_pos = 0
        left_style = right_style = self._catalog.reset
        offset = 0

        while True:
            left_pos, marker = scanner.consume_markers(expected, left_pos)
            if marker is not None:
                left_style = marker

            right_pos, marker = scanner.consume_markers(actual, right_pos)
            if marker is not None:
                right_style = marker

            left_done = left_pos == len(expected)
            right_done = right_pos == len(actual)
            if left_done and right_done:
                return None

            left_char = _char_at(expected, left_pos)
            right_char = _char_at(actual, right_pos)
            kind: DivergenceKind | None = None

            # Unreachable once the plain texts matched; a hit means the
            # scanner or catalog is inconsistent.
            if left_done or right_done:
                kind = DivergenceKind.length
            elif left_char != right_char:
                kind = DivergenceKind.character
            if kind is not None:
                logger.warning(
                    "Internal consistency fault: %s divergence at plain offset %d "
                    "after plain texts matched",
                    kind,
                    offset,
                )
            elif left_char not in _WHITESPACE and left_style != right_style:
                kind = DivergenceKind.style
                logger.debug(
                    "Style differs at plain offset %d (%r): %s != %s",
                    offset,
                    left_char,
                    left_style.name,
                    right_style.name,
                )

            if kind is not None:
                return Divergence(
                    kind=kind,
                    offset=offset,
                    expected_char=left_char,
                    actual_char=right_char,
                    expected_offset=left_pos,
                    actual_offset=right_pos,
                    expected_style=left_style,
                    actual_style=right_style,
                )

            left_pos += 1
            right_pos += 1
            offset += 1


def equivalent(expected: str, actual: str, catalog: MarkerCatalog) -> bool:
    """Return True when two annotated strings are equivalent under ``catalog``."""
    return EquivalenceChecker(catalog).equivalent(expected, actual)
