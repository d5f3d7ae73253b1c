"""Synthesize variant markup by applying selectors to an example fragment.

The mutator parses an example HTML fragment under a synthetic wrapper
element, finds the elements matching the item's base selector, and turns each
part of a modifier selector into a concrete mutation: ``#id`` sets ``id``,
``.class`` adds a class, ``[attr=value]`` sets the attribute, and ``:pseudo``
materializes as ``pseudo="pseudo"`` so the state is visible in static markup.
Declared states are appended as extra blocks with ``id``/``for`` values
suffixed to keep them unique.

Example
-------
>>> from css_showcase.markup import MarkupMutator
>>> MarkupMutator().apply_modifier("<a></a>", "a", ".b.c#d:disabled[href=#]")
'<a class="b c" id="d" disabled="disabled" href="#"></a>'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import typing as typ

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from css_showcase._constants import UNIQUE_ATTRS, WRAPPER_TAG
from css_showcase.config import ShowcaseConfig
from css_showcase.identifiers import selector_to_id

from .selectors import (
    PartType,
    SelectorError,
    SelectorPart,
    attribute_text,
    select,
    tokenize,
)

if typ.TYPE_CHECKING:
    from bs4 import Tag as Element

    from css_showcase.showcase.models import State

logger = logging.getLogger(__name__)


def _substitute_entities(value: str) -> str:
    """Escape markup characters and keep non-breaking spaces visible."""
    return EntitySubstitution.substitute_xml(value).replace("\xa0", "&nbsp;")


class _SourceOrderFormatter(HTMLFormatter):
    """HTML5-style output: attributes in insertion order, no ``/>`` on voids."""

    def __init__(self) -> None:
        super().__init__(
            entity_substitution=_substitute_entities, void_element_close_prefix=None
        )

    def attributes(self, tag: Element) -> cabc.Iterable[tuple[str, typ.Any]]:
        return list(tag.attrs.items())


MARKUP_FORMATTER = _SourceOrderFormatter()


@dc.dataclass(frozen=True, slots=True)
class ModifierContext:
    """Selector context handed to a post-processing hook."""

    base: str | None
    modifier: str
    is_presentation: bool
    wrapper: Element
    elements: list[Element]


class MarkupMutator:
    """Apply modifier and state selectors to example markup."""

    def __init__(self, config: ShowcaseConfig | None = None) -> None:
        self.config = config or ShowcaseConfig()

    def apply_modifier(
        self,
        markup: str | None,
        base: str | None,
        modifier: str | None = "",
        states: cabc.Sequence[State] = (),
        *,
        is_presentation: bool = False,
        modify_unique_attrs: bool | None = None,
    ) -> str:
        """Return ``markup`` modified by ``modifier`` with state blocks appended.

        Parameters
        ----------
        markup : str or None
            Example HTML fragment; ``None`` is treated as empty.
        base : str or None
            Selector locating the elements to modify.
        modifier : str, optional
            Compound selector whose parts become attributes and classes.
        states : sequence of State, optional
            States rendered as additional blocks after the modified markup.
        is_presentation : bool, optional
            Passed through to the post-processing hook.
        modify_unique_attrs : bool, optional
            Suffix every ``id``/``for`` value with the normalized modifier;
            defaults to the configured ``modify_unique_attrs``.

        Returns
        -------
        str
            The mutated markup. A selector matching nothing leaves the markup
            untouched apart from the optional unique-attribute rewriting.
        """
        markup = markup or ""
        modifier = modifier or ""
        if modify_unique_attrs is None:
            modify_unique_attrs = self.config.modify_unique_attrs

        soup = BeautifulSoup(f"<{WRAPPER_TAG}>{markup}</{WRAPPER_TAG}>", "html.parser")
        wrapper = soup.find(WRAPPER_TAG)
        elements = self._select(wrapper, base)

        parts = self._modifier_parts(modifier) if elements else []
        modify_by_selector = bool(parts)
        if modify_by_selector:
            retarget = any(part.type == PartType.TAG for part in parts)
            for element in elements:
                _apply_parts(element, parts, retarget=retarget)

        if modify_unique_attrs:
            suffix = "_" + selector_to_id(
                modifier, collapse=self.config.collapse_id_underscores
            )
            _rewrite_unique_attrs(wrapper, suffix)

        if modify_by_selector or modify_unique_attrs:
            markup = wrapper.decode_contents(formatter=MARKUP_FORMATTER)

        hook = self.config.post_process
        if hook is not None:
            context = ModifierContext(base, modifier, is_presentation, wrapper, elements)
            replaced = hook(markup, context)
            if isinstance(replaced, str):
                markup = replaced

        return self.apply_states(markup, base, states, is_presentation=is_presentation)

    def apply_states(
        self,
        markup: str,
        base: str | None,
        states: cabc.Sequence[State],
        *,
        is_presentation: bool = False,
    ) -> str:
        """Append one block per state, each derived from ``markup``."""
        result = markup
        for state in states:
            block = self.apply_modifier(
                markup,
                base,
                state.state or "",
                is_presentation=is_presentation,
                modify_unique_attrs=self.config.states_modify_unique_attrs,
            )
            if block:
                result += self.config.states_html_glue + block
        return result

    @staticmethod
    def _select(wrapper: Element, base: str | None) -> list[Element]:
        if not base:
            return []
        try:
            return select(wrapper, base)
        except SelectorError as exc:
            logger.debug("Skipping base selector %r: %s", base, exc)
            return []

    @staticmethod
    def _modifier_parts(modifier: str) -> list[SelectorPart]:
        """Return the parts of the last selector group in ``modifier``."""
        if not modifier:
            return []
        try:
            groups = tokenize(modifier)
        except SelectorError as exc:
            logger.debug("Skipping modifier %r: %s", modifier, exc)
            return []
        return groups[-1] if groups else []


def _class_list(element: Element) -> list[str]:
    value = element.get("class")
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    return list(value)


def _apply_parts(
    element: Element, parts: cabc.Iterable[SelectorPart], *, retarget: bool
) -> None:
    """Materialize selector parts as attributes on ``element``.

    With ``retarget`` set (the modifier names a bare tag) class tokens are
    appended to the existing value as written, duplicates included.
    """
    for part in parts:
        if part.type == PartType.ID:
            element["id"] = part.name
        elif part.type == PartType.CLASS:
            classes = _class_list(element)
            if retarget or part.name not in classes:
                classes.append(part.name)
            element["class"] = classes
        elif part.type == PartType.ATTR:
            element[part.name] = part.value or ""
        elif part.type == PartType.PSEUDO:
            element[part.name] = part.name


def _rewrite_unique_attrs(wrapper: Element, suffix: str) -> None:
    for attr_name in UNIQUE_ATTRS:
        for element in wrapper.find_all(attrs={attr_name: True}):
            element[attr_name] = (attribute_text(element, attr_name) or "") + suffix


def apply_modifier(
    markup: str | None,
    base: str | None,
    modifier: str | None = "",
    states: cabc.Sequence[State] = (),
    *,
    is_presentation: bool = False,
    modify_unique_attrs: bool | None = None,
    config: ShowcaseConfig | None = None,
) -> str:
    """Apply ``modifier`` with a mutator built from ``config``."""
    return MarkupMutator(config).apply_modifier(
        markup,
        base,
        modifier,
        states,
        is_presentation=is_presentation,
        modify_unique_attrs=modify_unique_attrs,
    )


__all__ = ["MarkupMutator", "ModifierContext", "apply_modifier"]
