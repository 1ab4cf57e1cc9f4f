"""Built-in marker catalogs and JSON catalog loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from hilite_diff.core.models import CatalogError, Marker, MarkerCatalog, PrefixPolicy

logger = logging.getLogger(__name__)

ANSI_CATALOG = MarkerCatalog.from_mapping(
    {
        "keyword": "\033[1m",
        "identifier": "\033[0;36m",
        "function": "\033[0;33m",
        "operator": "\033[1;33m",
        "alias": "\033[0;32m",
        "substitution": "\033[1;36m",
        "none": "\033[0m",
    },
    reset="none",
)

BUILTIN_CATALOGS: dict[str, MarkerCatalog] = {
    "ansi": ANSI_CATALOG,
}


def _require(data: dict[str, Any], key: str, kind: type, *, where: str) -> Any:
    """Fetch ``data[key]`` and check its type, raising CatalogError otherwise."""
    if key not in data:
        msg = f"{where}: missing required key '{key}'"
        raise CatalogError(msg)
    value = data[key]
    if not isinstance(value, kind):
        msg = f"{where}: '{key}' must be {kind.__name__}, got {type(value).__name__}"
        raise CatalogError(msg)
    return value


def catalog_from_dict(data: object, *, source: str = "<catalog>") -> MarkerCatalog:
    """Build a catalog from its decoded JSON form.

    Expected shape::

        {
            "reset": "none",
            "prefix_policy": "longest_match",   # optional
            "markers": [{"name": "keyword", "text": "..."}, ...]
        }

    Raises:
        CatalogError: If the document does not have that shape or the
            catalog it describes is invalid.
    """
    if not isinstance(data, dict):
        msg = f"{source}: catalog must be a JSON object"
        raise CatalogError(msg)

    reset = _require(data, "reset", str, where=source)
    entries = _require(data, "markers", list, where=source)

    markers: list[Marker] = []
    for idx, entry in enumerate(entries):
        where = f"{source}: markers[{idx}]"
        if not isinstance(entry, dict):
            msg = f"{where} must be an object"
            raise CatalogError(msg)
        markers.append(
            Marker(
                name=_require(entry, "name", str, where=where),
                text=_require(entry, "text", str, where=where),
            )
        )

    policy_value = data.get("prefix_policy", PrefixPolicy.longest_match.value)
    try:
        policy = PrefixPolicy(policy_value)
    except ValueError:
        valid = ", ".join(p.value for p in PrefixPolicy)
        msg = f"{source}: invalid prefix_policy {policy_value!r}. Choose from: {valid}"
        raise CatalogError(msg) from None

    by_name = {m.name: m for m in markers}
    if reset not in by_name:
        msg = f"{source}: reset marker '{reset}' is not in the catalog"
        raise CatalogError(msg)

    return MarkerCatalog(markers=tuple(markers), reset=by_name[reset], prefix_policy=policy)


def load_catalog(path: Path, *, encoding: str = "utf-8") -> MarkerCatalog:
    """Read and validate a JSON catalog file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        CatalogError: If the file is not valid JSON or not a valid catalog.
    """
    try:
        data = json.loads(path.read_text(encoding=encoding))
    except json.JSONDecodeError as exc:
        msg = f"{path}: invalid JSON: {exc}"
        raise CatalogError(msg) from exc

    catalog = catalog_from_dict(data, source=str(path))
    logger.debug("Loaded catalog %s with markers: %s", path, ", ".join(catalog.names))
    return catalog


def resolve_catalog(spec: str) -> MarkerCatalog:
    """Return a built-in catalog by name, or load ``spec`` as a JSON file path.

    Raises:
        FileNotFoundError: If ``spec`` is neither a built-in name nor an
            existing file.
        CatalogError: If the file is not a valid catalog.
    """
    if spec in BUILTIN_CATALOGS:
        return BUILTIN_CATALOGS[spec]

    path = Path(spec)
    if not path.is_file():
        builtins = ", ".join(sorted(BUILTIN_CATALOGS))
        msg = f"Catalog '{spec}' is not a built-in ({builtins}) or an existing file"
        raise FileNotFoundError(msg)
    return load_catalog(path)
