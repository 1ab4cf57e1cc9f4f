"""Public API for hilite_diff.output."""

from __future__ import annotations

from hilite_diff.output.base import Renderer
from hilite_diff.output.json_output import JsonRenderer
from hilite_diff.output.rich_output import RichRenderer

__all__ = [
    "JsonRenderer",
    "Renderer",
    "RichRenderer",
]
