"""hilite-diff: tolerant equivalence checking for highlighted text."""

from __future__ import annotations

from hilite_diff.core import (
    ANSI_CATALOG,
    CatalogError,
    EquivalenceChecker,
    EquivalenceResult,
    Marker,
    MarkerCatalog,
    MarkerScanner,
    PrefixPolicy,
    equivalent,
    split_markers,
    strip_markers,
)

__version__ = "0.1.0"

__all__ = [
    "ANSI_CATALOG",
    "CatalogError",
    "EquivalenceChecker",
    "EquivalenceResult",
    "Marker",
    "MarkerCatalog",
    "MarkerScanner",
    "PrefixPolicy",
    "__version__",
    "equivalent",
    "split_markers",
    "strip_markers",
]
