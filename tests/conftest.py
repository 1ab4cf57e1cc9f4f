"""Shared test fixtures for hilite-diff."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from hilite_diff.core.models import MarkerCatalog

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def tag_catalog() -> MarkerCatalog:
    """Readable catalog used in place of terminal escapes.

    Order: kw, id, fn, op, none. ``</>`` is the reset marker.
    """
    return MarkerCatalog.from_mapping(
        {
            "kw": "<kw>",
            "id": "<id>",
            "fn": "<fn>",
            "op": "<op>",
            "none": "</>",
        },
        reset="none",
    )


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """Write a JSON catalog equivalent to ``tag_catalog``."""
    path = tmp_path / "tags.json"
    path.write_text(
        json.dumps(
            {
                "reset": "none",
                "markers": [
                    {"name": "kw", "text": "<kw>"},
                    {"name": "id", "text": "<id>"},
                    {"name": "fn", "text": "<fn>"},
                    {"name": "op", "text": "<op>"},
                    {"name": "none", "text": "</>"},
                ],
            }
        )
    )
    return path


@pytest.fixture
def annotated_files(tmp_path: Path) -> tuple[Path, Path]:
    """Create an expected/actual pair that differ only in tolerated ways.

    Expected: <kw>SELECT </>* <kw>FROM </><id>table</>
    Actual:   <kw>SELECT</> * <kw>FROM <id>table
    """
    expected = tmp_path / "expected.txt"
    actual = tmp_path / "actual.txt"
    expected.write_text("<kw>SELECT </>* <kw>FROM </><id>table</>")
    actual.write_text("<kw>SELECT</> * <kw>FROM <id>table")
    return expected, actual


@pytest.fixture
def mismatched_files(tmp_path: Path) -> tuple[Path, Path]:
    """Create an expected/actual pair whose styling differs on one word."""
    expected = tmp_path / "expected.txt"
    actual = tmp_path / "actual.txt"
    expected.write_text("<kw>SELECT </><id>x</>")
    actual.write_text("<kw>SELECT </><fn>x</>")
    return expected, actual
