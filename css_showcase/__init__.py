"""Extract living style-guide data from documented CSS.

This package reads JavaDoc-like ``/** ... */`` comments from a style-sheet
and everything it ``@import``s, and turns them into ordered showcase items
whose example markup has every documented modifier and state applied.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from css_showcase import main
>>> callable(main)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
