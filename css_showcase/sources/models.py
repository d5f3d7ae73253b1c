"""Dataclasses produced by one import-resolution pass."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from css_showcase.comment_parser import Tag


class LoadError(RuntimeError):
    """Raised when a style-sheet (root or imported) cannot be retrieved.

    Attributes
    ----------
    url : str
        Location that failed to load.
    reason : object
        Underlying error or status description.
    """

    def __init__(self, url: str, reason: object) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Error loading {url}: {reason}")


@dc.dataclass(frozen=True, slots=True)
class ImportRef:
    """An ``@import`` target as written and as resolved."""

    path: str
    url: str


@dc.dataclass(frozen=True, slots=True)
class RawDoc:
    """One documentation comment: normalized text and its tags."""

    content: str
    tags: list[Tag]


@dc.dataclass(frozen=True, slots=True)
class ParsedContent:
    """Imports and documentation comments extracted from one file."""

    imports: list[ImportRef]
    docs: list[RawDoc]


@dc.dataclass(frozen=True, slots=True)
class SourceFile:
    """A loaded style-sheet with its imports and documentation comments.

    Attributes
    ----------
    url : str
        Location the file was loaded from.
    parent_url : str or None
        Location of the importing file; ``None`` for the root.
    content : str
        Raw file text.
    imports : list[ImportRef]
        Import directives in source order.
    docs : list[RawDoc]
        Documentation comments in source order.
    """

    url: str
    parent_url: str | None
    content: str
    imports: list[ImportRef]
    docs: list[RawDoc]


__all__ = ["ImportRef", "LoadError", "ParsedContent", "RawDoc", "SourceFile"]
