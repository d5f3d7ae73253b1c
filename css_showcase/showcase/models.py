"""Shared dataclasses handed to the rendering layer."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(slots=True)
class State:
    """A pseudo-state variant rendered after every subitem of an item.

    Attributes
    ----------
    state : str or None
        Selector fragment such as ``:disabled`` or ``.active``.
    description : str or None
        Free text following the selector.
    """

    state: str | None
    description: str | None = None


@dc.dataclass(slots=True)
class ShowcaseSubitem:
    """One concrete renderable variant: the base itself or base plus modifier.

    Attributes
    ----------
    id : str
        Identifier unique across the run; also used for file names.
    anchor : str
        HTML anchor for the variant.
    base : str
        Base selector of the owning item.
    modifier : str or None
        Modifier selector; ``None`` for the unmodified base.
    selector : str
        ``base`` and ``modifier`` concatenated.
    description : str or None
        Text describing the variant.
    example : str
        Example markup with the modifier and every state applied.
    presentation : str
        Live-preview markup with the modifier and every state applied.
    """

    id: str
    anchor: str
    base: str
    modifier: str | None
    selector: str
    description: str | None
    example: str
    presentation: str


@dc.dataclass(slots=True)
class ShowcaseItem:
    """Everything documented by one comment block.

    An item without ``base`` documents non-visual facts only and never has
    subitems.
    """

    id: int
    section: str | None = None
    anchor: str = ""
    title: str | None = None
    description: str | None = None
    base: str | None = None
    base_description: str | None = None
    example: str | None = None
    presentation: str | None = None
    version: str | None = None
    author: list[str] = dc.field(default_factory=list)
    since: str | None = None
    is_deprecated: bool = False
    deprecated_info: str | None = None
    see: list[str] = dc.field(default_factory=list)
    todo: list[str] = dc.field(default_factory=list)
    fixme: list[str] = dc.field(default_factory=list)
    states: list[State] = dc.field(default_factory=list)
    subitems: list[ShowcaseSubitem] = dc.field(default_factory=list)


__all__ = ["ShowcaseItem", "ShowcaseSubitem", "State"]
