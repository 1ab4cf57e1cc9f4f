"""Command-line interface for hilite-diff."""
