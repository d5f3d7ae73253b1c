"""Typed dataclasses describing css_showcase configuration structures."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import types
import typing as typ

from css_showcase._constants import (
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_MAX_CONCURRENT_LOADS,
    DEFAULT_STATES_HTML_GLUE,
)

if typ.TYPE_CHECKING:
    from css_showcase.markup.mutator import ModifierContext

    PostProcessHook = cabc.Callable[[str, ModifierContext], str | None]
else:  # pragma: no cover - type-checking fallback
    PostProcessHook = typ.Any


class ShowcaseConfigError(ValueError):
    """Raised when the showcase configuration is invalid or incomplete."""


# tag name -> whether the tag may span several lines
DEFAULT_TAGS: typ.Final[cabc.Mapping[str, bool]] = types.MappingProxyType(
    {
        "$title": False,
        "$description": True,
        "section": False,
        "base": False,
        "modifier": False,
        "state": False,
        "pseudo": False,
        "example": True,
        "markup": True,
        "presentation": True,
        "preview": True,
        "author": False,
        "version": False,
        "since": False,
        "deprecated": False,
        "see": False,
        "todo": False,
        "fixme": False,
    }
)


@dc.dataclass(frozen=True, slots=True)
class TagTable:
    """Recognized comment tags and their multi-line capability."""

    multiline: cabc.Mapping[str, bool] = dc.field(default_factory=lambda: DEFAULT_TAGS)

    def is_known(self, name: str) -> bool:
        """Return ``True`` when ``name`` is a recognized tag."""
        return name in self.multiline

    def is_multiline(self, name: str) -> bool:
        """Return ``True`` when ``name`` may absorb following lines."""
        return bool(self.multiline.get(name, False))

    def with_overrides(self, overrides: cabc.Mapping[str, bool]) -> TagTable:
        """Return a new table with ``overrides`` merged over this one."""
        merged = dict(self.multiline)
        merged.update(overrides)
        return TagTable(types.MappingProxyType(merged))


@dc.dataclass(frozen=True, slots=True)
class ShowcaseConfig:
    """Options threaded into the parser, resolver, builder, and mutator.

    Attributes
    ----------
    tags : TagTable
        Recognized comment tags.
    use_selector_based_ids : bool
        Derive subitem ids from selectors (``button_large``) instead of
        numbering them (``3_0``).
    collapse_id_underscores : bool
        Collapse repeated underscores and trim them from the ends of ids.
    modify_unique_attrs : bool
        Rewrite ``id``/``for`` values when applying base and modifier
        selectors.
    states_modify_unique_attrs : bool
        Rewrite ``id``/``for`` values in rendered state blocks.
    states_html_glue : str
        Separator placed between the subitem markup and each state block.
    max_concurrent_loads : int
        Upper bound on in-flight loads while resolving one import graph.
    http_timeout : float
        Per-request timeout used by the HTTP loader.
    post_process : callable, optional
        Hook receiving mutated markup and a ``ModifierContext``; a returned
        string replaces the markup.
    """

    tags: TagTable = dc.field(default_factory=TagTable)
    use_selector_based_ids: bool = True
    collapse_id_underscores: bool = False
    modify_unique_attrs: bool = False
    states_modify_unique_attrs: bool = True
    states_html_glue: str = DEFAULT_STATES_HTML_GLUE
    max_concurrent_loads: int = DEFAULT_MAX_CONCURRENT_LOADS
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    post_process: PostProcessHook | None = None


__all__ = [
    "DEFAULT_TAGS",
    "PostProcessHook",
    "ShowcaseConfig",
    "ShowcaseConfigError",
    "TagTable",
]
