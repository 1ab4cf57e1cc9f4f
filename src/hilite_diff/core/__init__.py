"""Public API for hilite_diff.core."""

from __future__ import annotations

from hilite_diff.core.catalogs import (
    ANSI_CATALOG,
    BUILTIN_CATALOGS,
    catalog_from_dict,
    load_catalog,
    resolve_catalog,
)
from hilite_diff.core.checker import EquivalenceChecker, equivalent
from hilite_diff.core.extract import split_markers, strip_markers
from hilite_diff.core.models import (
    CatalogError,
    Divergence,
    DivergenceKind,
    EquivalenceResult,
    Marker,
    MarkerCatalog,
    OutputMode,
    PrefixPolicy,
    Segment,
)
from hilite_diff.core.scanner import MarkerScanner

__all__ = [
    "ANSI_CATALOG",
    "BUILTIN_CATALOGS",
    "CatalogError",
    "Divergence",
    "DivergenceKind",
    "EquivalenceChecker",
    "EquivalenceResult",
    "Marker",
    "MarkerCatalog",
    "MarkerScanner",
    "OutputMode",
    "PrefixPolicy",
    "Segment",
    "catalog_from_dict",
    "equivalent",
    "load_catalog",
    "resolve_catalog",
    "split_markers",
    "strip_markers",
]
