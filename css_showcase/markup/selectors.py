"""Tokenize and match the small CSS selector subset used in showcase comments.

Supported syntax: tag names, ``*``, ``#id``, ``.class``, ``[attr]``,
``[attr=value]`` (bare or quoted value), ``:pseudo`` and ``:pseudo(arg)``,
descendant whitespace and ``,`` groups. Pseudo-classes other than
``:first-child`` and ``:last-child`` are matched as a materialized attribute of
the same name, mirroring how the mutator renders them. Other combinators and
pseudo-elements raise :class:`SelectorError`.

Example
-------
>>> from css_showcase.markup.selectors import tokenize
>>> [part.type for part in tokenize("a.b#c")[0]]
['TAG', 'CLASS', 'ID']
"""

from __future__ import annotations

import re
import typing as typ

if typ.TYPE_CHECKING:
    from bs4 import Tag as Element

TOKEN_PATTERN = re.compile(
    r"""
    (?P<ws>\s+)
    |(?P<comma>,)
    |\#(?P<id>[\w-]+)
    |\.(?P<cls>[\w-]+)
    |\[\s*(?P<attr>[\w-]+)\s*
        (?:=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<bare>[^\]\s]*))\s*)?
     \]
    |:(?P<pseudo>[\w-]+)(?:\((?P<arg>[^()]*)\))?
    |(?P<universal>\*)
    |(?P<tag>[\w-]+)
    """,
    re.VERBOSE,
)


class SelectorError(ValueError):
    """Raised when a selector uses syntax outside the supported subset."""


class PartType:
    """Kinds of selector parts produced by :func:`tokenize`."""

    TAG = "TAG"
    UNIVERSAL = "UNIVERSAL"
    ID = "ID"
    CLASS = "CLASS"
    ATTR = "ATTR"
    PSEUDO = "PSEUDO"
    COMBINATOR = "COMBINATOR"


class SelectorPart(typ.NamedTuple):
    """One discrete piece of a compound selector.

    ``value`` holds the attribute value for ``ATTR`` parts (``None`` for a
    bare ``[attr]``) and the argument text for functional pseudo-classes.
    """

    type: str
    name: str
    value: str | None = None


def tokenize(selector: str) -> list[list[SelectorPart]]:
    """Split ``selector`` into comma groups of ordered parts.

    Parameters
    ----------
    selector : str
        Selector text such as ``.btn.large:disabled`` or ``{nav a}`` contents.

    Returns
    -------
    list[list[SelectorPart]]
        One list per comma-separated group; an empty selector yields ``[]``.

    Raises
    ------
    SelectorError
        If the selector contains unsupported or malformed syntax.
    """
    text = selector.strip()
    if not text:
        return []

    groups: list[list[SelectorPart]] = [[]]
    pending_descendant = False
    pos = 0
    while pos < len(text):
        match = TOKEN_PATTERN.match(text, pos)
        if match is None:
            msg = f"Unsupported selector syntax at offset {pos} in {selector!r}"
            raise SelectorError(msg)
        pos = match.end()

        if match.group("ws") is not None:
            pending_descendant = bool(groups[-1])
            continue
        if match.group("comma") is not None:
            if not groups[-1]:
                msg = f"Empty selector group in {selector!r}"
                raise SelectorError(msg)
            groups.append([])
            pending_descendant = False
            continue

        if pending_descendant:
            groups[-1].append(SelectorPart(PartType.COMBINATOR, " "))
            pending_descendant = False
        groups[-1].append(_part_from_match(match))

    if not groups[-1]:
        msg = f"Trailing comma in selector {selector!r}"
        raise SelectorError(msg)
    return groups


def _part_from_match(match: re.Match[str]) -> SelectorPart:
    """Build a SelectorPart from a non-whitespace token match."""
    if match.group("id") is not None:
        return SelectorPart(PartType.ID, match.group("id"))
    if match.group("cls") is not None:
        return SelectorPart(PartType.CLASS, match.group("cls"))
    if match.group("attr") is not None:
        value = next(
            (
                match.group(name)
                for name in ("dq", "sq", "bare")
                if match.group(name) is not None
            ),
            None,
        )
        return SelectorPart(PartType.ATTR, match.group("attr"), value)
    if match.group("pseudo") is not None:
        return SelectorPart(PartType.PSEUDO, match.group("pseudo"), match.group("arg"))
    if match.group("universal") is not None:
        return SelectorPart(PartType.UNIVERSAL, "*")
    return SelectorPart(PartType.TAG, match.group("tag").lower())


def compounds(group: list[SelectorPart]) -> list[list[SelectorPart]]:
    """Split one selector group into compounds at descendant combinators."""
    result: list[list[SelectorPart]] = [[]]
    for part in group:
        if part.type == PartType.COMBINATOR:
            result.append([])
        else:
            result[-1].append(part)
    return result


def select(root: Element, selector: str) -> list[Element]:
    """Return descendants of ``root`` matching ``selector`` in document order.

    Raises
    ------
    SelectorError
        If ``selector`` cannot be tokenized.
    """
    chains = [compounds(group) for group in tokenize(selector)]
    if not chains:
        return []
    return [
        element
        for element in root.find_all(True)
        if any(_matches_chain(element, chain) for chain in chains)
    ]


def matches(element: Element, selector: str) -> bool:
    """Return ``True`` when ``element`` itself matches ``selector``."""
    return any(
        _matches_chain(element, compounds(group)) for group in tokenize(selector)
    )


def _matches_chain(element: Element, chain: list[list[SelectorPart]]) -> bool:
    """Match the last compound on ``element`` and the rest on its ancestors."""
    if not _matches_compound(element, chain[-1]):
        return False
    ancestor = element.parent
    for compound in reversed(chain[:-1]):
        while ancestor is not None and not (
            _is_element(ancestor) and _matches_compound(ancestor, compound)
        ):
            ancestor = ancestor.parent
        if ancestor is None:
            return False
        ancestor = ancestor.parent
    return True


def _is_element(node: Element) -> bool:
    # the BeautifulSoup document object is a Tag named "[document]"
    return node.parent is not None


def _matches_compound(element: Element, parts: list[SelectorPart]) -> bool:
    return all(_matches_part(element, part) for part in parts)


def _matches_part(element: Element, part: SelectorPart) -> bool:  # noqa: PLR0911
    if part.type == PartType.TAG:
        return element.name == part.name
    if part.type == PartType.UNIVERSAL:
        return True
    if part.type == PartType.ID:
        return attribute_text(element, "id") == part.name
    if part.type == PartType.CLASS:
        return part.name in element.get_attribute_list("class")
    if part.type == PartType.ATTR:
        if part.value is None:
            return element.has_attr(part.name)
        return attribute_text(element, part.name) == part.value
    if part.type == PartType.PSEUDO:
        if part.name == "first-child":
            return element.find_previous_sibling(True) is None
        if part.name == "last-child":
            return element.find_next_sibling(True) is None
        return element.has_attr(part.name)
    return False


def attribute_text(element: Element, name: str) -> str | None:
    """Return an attribute value as text, joining multi-valued attributes."""
    value = element.get(name)
    if isinstance(value, list):
        return " ".join(value)
    return value


__all__ = [
    "PartType",
    "SelectorError",
    "SelectorPart",
    "attribute_text",
    "compounds",
    "matches",
    "select",
    "tokenize",
]
