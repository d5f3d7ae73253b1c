"""Serialize showcase items for templates and external renderers."""

from __future__ import annotations

import typing as typ

import msgspec

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import ShowcaseItem


def to_builtins(items: cabc.Sequence[ShowcaseItem]) -> list[dict[str, typ.Any]]:
    """Return ``items`` as plain lists and dictionaries."""
    return msgspec.to_builtins(list(items))


def to_json(items: cabc.Sequence[ShowcaseItem], *, indent: int = 2) -> str:
    """Encode ``items`` as JSON text, pretty-printed unless ``indent`` is 0.

    Examples
    --------
    >>> from css_showcase.showcase.models import ShowcaseItem
    >>> to_json([ShowcaseItem(id=1, anchor="section_1")], indent=0)[:30]
    '[{"id":1,"section":null,"ancho'
    """
    payload = msgspec.json.encode(list(items))
    if indent:
        payload = msgspec.json.format(payload, indent=indent)
    return payload.decode("utf-8")


__all__ = ["to_builtins", "to_json"]
