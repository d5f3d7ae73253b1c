"""Turn parsed documentation comments into the showcase data model.

Each :class:`~css_showcase.sources.models.RawDoc` becomes one
:class:`ShowcaseItem`. Ordinary tags are folded first, then ``state`` tags, so
that the base selector and example markup are known before modifiers are
expanded into subitems. Subitem ids and section anchors are unique across the
whole run, and items are finally ordered by section.

Example
-------
>>> from css_showcase.comment_parser import Tag
>>> from css_showcase.sources.models import RawDoc
>>> from css_showcase.showcase import ShowcaseDataBuilder
>>> doc = RawDoc(
...     "", [Tag("base", ".btn Button"), Tag("example", '<a class="btn"></a>')]
... )
>>> [sub.id for sub in ShowcaseDataBuilder().build([doc])[0].subitems]
['_btn']
"""

from __future__ import annotations

import logging
import re
import typing as typ

from css_showcase._constants import ANCHOR_TEMPLATE
from css_showcase.config import ShowcaseConfig
from css_showcase.identifiers import IdRegistry, selector_to_id
from css_showcase.markup import MarkupMutator

from .models import ShowcaseItem, ShowcaseSubitem, State

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from css_showcase.comment_parser import Tag
    from css_showcase.sources.models import RawDoc

logger = logging.getLogger(__name__)

BRACED_CONTENT_PATTERN = re.compile(r"\{([^{}]+)\}(\s+(\S[\S\s]*))?")
BARE_CONTENT_PATTERN = re.compile(r"(\S+)(\s+(\S[\S\s]*))?")

EXAMPLE_TAGS = frozenset({"example", "markup", "presentation", "preview"})
PRESENTATION_TAGS = frozenset({"presentation", "preview"})
LIST_TAGS = frozenset({"author", "see", "todo", "fixme"})
STATE_TAGS = frozenset({"state", "pseudo"})


def parse_complex_content(content: str) -> tuple[str | None, str | None]:
    """Split ``selector description`` or ``{selector with spaces} description``.

    Returns
    -------
    tuple[str | None, str | None]
        The selector and the description; ``(None, None)`` when ``content``
        fits neither shape. The description is ``None`` when absent.

    Examples
    --------
    >>> parse_complex_content(".large Large button")
    ('.large', 'Large button')
    >>> parse_complex_content("{.menu .item} Menu entry")
    ('.menu .item', 'Menu entry')
    >>> parse_complex_content("")
    (None, None)
    """
    match = BRACED_CONTENT_PATTERN.fullmatch(content) or BARE_CONTENT_PATTERN.fullmatch(
        content
    )
    if match is None:
        return None, None
    return match.group(1), match.group(3)


def _section_key(item: ShowcaseItem) -> str:
    return item.section or ""


class ShowcaseDataBuilder:
    """Build ordered showcase items from documentation comments.

    One builder corresponds to one run: identifiers handed out by
    :meth:`build` stay reserved for later calls on the same instance.
    Section anchors and subitem ids are tracked separately, so a subitem may
    share its id with an anchor.
    """

    def __init__(
        self,
        config: ShowcaseConfig | None = None,
        *,
        mutator: MarkupMutator | None = None,
    ) -> None:
        self.config = config or ShowcaseConfig()
        self.mutator = mutator or MarkupMutator(self.config)
        self.anchors = IdRegistry()
        self.subitem_ids = IdRegistry()

    def build(self, docs: cabc.Iterable[RawDoc]) -> list[ShowcaseItem]:
        """Return one item per doc, stable-sorted by section.

        Parameters
        ----------
        docs : Iterable[RawDoc]
            Documentation comments in collection order; their position
            (1-based) becomes the item id.

        Returns
        -------
        list[ShowcaseItem]
            Items ordered by ``section``; items without a section sort first
            and ties keep collection order.
        """
        items = [
            self._build_item(index, doc) for index, doc in enumerate(docs, start=1)
        ]
        return sorted(items, key=_section_key)

    def _build_item(self, item_id: int, doc: RawDoc) -> ShowcaseItem:
        item = ShowcaseItem(id=item_id)
        section_label = self._fold_tags(item, doc.tags)
        item.title = item.title or section_label or item.base_description
        item.states = [
            State(*parse_complex_content(content))
            for name, content in doc.tags
            if name in STATE_TAGS
        ]
        anchor_key = item.section or str(item.id)
        item.anchor = self.anchors.claim(
            ANCHOR_TEMPLATE.format(key=self._normalize(anchor_key))
        )

        if item.base:
            item.subitems.append(
                self._build_subitem(
                    item,
                    None,
                    item.base_description or "",
                    self._subitem_key(item, None, 0),
                )
            )
            for index, (name, content) in enumerate(doc.tags):
                if name != "modifier":
                    continue
                modifier, description = parse_complex_content(content)
                if modifier is None:
                    logger.debug("Skipping empty modifier on item %s", item.id)
                    continue
                item.subitems.append(
                    self._build_subitem(
                        item,
                        modifier,
                        description,
                        self._subitem_key(item, modifier, index + 1),
                    )
                )
        return item

    def _fold_tags(self, item: ShowcaseItem, tags: list[Tag]) -> str | None:
        """Copy ordinary tag values onto ``item``; return the section label."""
        section_label: str | None = None
        explicit_presentation: str | None = None
        for name, content in tags:
            match name:
                case "$title":
                    item.title = content
                case "$description":
                    item.description = content
                case "section":
                    item.section, section_label = parse_complex_content(content)
                case "base":
                    item.base, item.base_description = parse_complex_content(content)
                case _ if name in EXAMPLE_TAGS:
                    if item.example is None:
                        item.example = content
                    if name in PRESENTATION_TAGS and explicit_presentation is None:
                        explicit_presentation = content
                case "version":
                    item.version = content
                case "since":
                    item.since = content
                case "deprecated":
                    item.is_deprecated = True
                    item.deprecated_info = content
                case _ if name in LIST_TAGS:
                    getattr(item, name).append(content)
        item.presentation = (
            explicit_presentation if explicit_presentation is not None else item.example
        )
        return section_label

    def _subitem_key(self, item: ShowcaseItem, modifier: str | None, index: int) -> str:
        if self.config.use_selector_based_ids:
            return self._normalize(f"{item.base}{modifier or ''}")
        return f"{item.id}_{index}"

    def _build_subitem(
        self,
        item: ShowcaseItem,
        modifier: str | None,
        description: str | None,
        key: str,
    ) -> ShowcaseSubitem:
        base = typ.cast("str", item.base)
        subitem_id = self.subitem_ids.claim(key)
        return ShowcaseSubitem(
            id=subitem_id,
            anchor=subitem_id,
            base=base,
            modifier=modifier,
            selector=f"{base}{modifier or ''}",
            description=description,
            example=self.mutator.apply_modifier(
                item.example, base, modifier, item.states
            ),
            presentation=self.mutator.apply_modifier(
                item.presentation, base, modifier, item.states, is_presentation=True
            ),
        )

    def _normalize(self, value: str) -> str:
        return selector_to_id(value, collapse=self.config.collapse_id_underscores)


def build_showcase(
    docs: cabc.Iterable[RawDoc], config: ShowcaseConfig | None = None
) -> list[ShowcaseItem]:
    """Build showcase items for ``docs`` with a fresh builder."""
    return ShowcaseDataBuilder(config).build(docs)


__all__ = ["ShowcaseDataBuilder", "build_showcase", "parse_complex_content"]
