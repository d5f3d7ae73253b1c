"""Unit tests for the markup mutator.

These cover the literal modifier scenarios, state blocks, unique-attribute
rewriting and the post-processing hook.
"""

from __future__ import annotations

import typing as typ

import pytest

from css_showcase.config import ShowcaseConfig
from css_showcase.markup import MarkupMutator, apply_modifier
from css_showcase.showcase import State

if typ.TYPE_CHECKING:
    from css_showcase.markup import ModifierContext


@pytest.mark.parametrize(
    ("markup", "base", "modifier", "expected"),
    [
        ("<a></a>", "a", ".b", '<a class="b"></a>'),
        ('<a class="b"></a>', ".b", ".c", '<a class="b c"></a>'),
        ("<a></a>", "a", "#b", '<a id="b"></a>'),
        ("<a></a>", "a", ":disabled", '<a disabled="disabled"></a>'),
        ("<a></a>", "a", "[href=#]", '<a href="#"></a>'),
        (
            "<a></a>",
            "a",
            ".b.c#d:disabled[href=#]",
            '<a class="b c" id="d" disabled="disabled" href="#"></a>',
        ),
        ('<a class="b"></a>', ".d", ".c", '<a class="b"></a>'),
        ("<a><i></i><u></u></a>", "a", ".b", '<a class="b"><i></i><u></u></a>'),
        (
            "<a><b></b><b></b></a>",
            "b",
            ".c",
            '<a><b class="c"></b><b class="c"></b></a>',
        ),
    ],
)
def test_apply_modifier_scenarios(
    markup: str, base: str, modifier: str, expected: str
) -> None:
    """Modifier parts should materialize on every element matching the base."""
    actual = apply_modifier(markup, base, modifier)
    assert actual == expected, f"{modifier!r} on {markup!r} gave {actual!r}"


def test_empty_modifier_returns_markup_unchanged() -> None:
    """A no-op modifier must not re-serialize the fragment."""
    markup = "<A HREF='#'>x</A>\n<br>"
    assert apply_modifier(markup, "a", "") == markup


def test_existing_class_is_not_duplicated() -> None:
    """Adding a class the element already has keeps a single token."""
    assert apply_modifier('<a class="b"></a>', "a", ".b") == '<a class="b"></a>'


def test_bare_tag_in_modifier_appends_classes_verbatim() -> None:
    """A modifier naming a tag extends the class value even with duplicates."""
    assert apply_modifier('<a class="b"></a>', "a", "a.b") == '<a class="b b"></a>'


def test_attributes_keep_source_order() -> None:
    """Existing attributes stay in place and new ones follow in selector order."""
    actual = apply_modifier('<a id="x" class="y"></a>', "a", "[data-v=1]#z")
    assert actual == '<a id="z" class="y" data-v="1"></a>'


def test_entities_and_void_elements_serialize_as_html() -> None:
    """Re-serialized fragments keep ``&nbsp;`` and void tags without ``/>``."""
    assert (
        apply_modifier("<button>&nbsp;OK &amp; go</button>", "button", ".b")
        == '<button class="b">&nbsp;OK &amp; go</button>'
    )
    assert (
        apply_modifier('<label>x<input type="text"><br></label>', "label", ".b")
        == '<label class="b">x<input type="text"><br></label>'
    )


def test_unparseable_selectors_degrade_to_no_op() -> None:
    """Selectors outside the supported subset leave the markup alone."""
    assert apply_modifier("<a></a>", "a > b", ".c") == "<a></a>"
    assert apply_modifier("<a></a>", "a", ".c + .d") == "<a></a>"


def test_missing_markup_is_treated_as_empty() -> None:
    """Items without an example still produce a string."""
    assert apply_modifier(None, "a", ".b") == ""


def test_unique_attrs_rewritten_without_match() -> None:
    """Rewriting applies to the whole fragment even if the base matches nothing."""
    markup = '<label for="name">Name</label><span id="name"></span>'
    actual = apply_modifier(markup, ".missing", ".large", modify_unique_attrs=True)
    assert actual == (
        '<label for="name__large">Name</label><span id="name__large"></span>'
    )


def test_states_append_blocks_with_glue() -> None:
    """Each state adds a block derived from the modified markup."""
    states = [State(":disabled", "Disabled"), State(".active", None)]
    actual = apply_modifier("<a></a>", "a", ".b", states)
    assert actual.split("\n") == [
        '<a class="b"></a>',
        '<a class="b" disabled="disabled"></a>',
        '<a class="b active"></a>',
    ]


def test_state_blocks_rewrite_unique_attrs() -> None:
    """State blocks suffix ``id``/``for`` while the first block keeps them."""
    markup = '<label for="f">L</label><span id="f"></span>'
    actual = apply_modifier(markup, "span", "", [State(":hover", None)])
    first, state_block = actual.split("\n")
    assert first == markup
    assert state_block == (
        '<label for="f__hover">L</label><span id="f__hover" hover="hover"></span>'
    )


def test_state_rewriting_can_be_disabled() -> None:
    """``states_modify_unique_attrs`` controls rewriting in state blocks."""
    config = ShowcaseConfig(states_modify_unique_attrs=False, states_html_glue="|")
    mutator = MarkupMutator(config)
    actual = mutator.apply_modifier(
        '<span id="f"></span>', "span", "", [State(".on", None)]
    )
    assert actual == '<span id="f"></span>|<span id="f" class="on"></span>'


def test_empty_state_blocks_are_skipped() -> None:
    """An empty fragment yields no glued state blocks."""
    assert apply_modifier("", "a", "", [State(":hover", None)]) == ""


def test_post_process_hook_receives_context() -> None:
    """A string returned by the hook replaces the mutated markup."""
    seen: list[ModifierContext] = []

    def hook(markup: str, context: ModifierContext) -> str | None:
        seen.append(context)
        if context.is_presentation:
            return f"<div class='preview'>{markup}</div>"
        return None

    mutator = MarkupMutator(ShowcaseConfig(post_process=hook))
    example = mutator.apply_modifier("<a></a>", "a", ".b")
    preview = mutator.apply_modifier("<a></a>", "a", ".b", is_presentation=True)

    assert example == '<a class="b"></a>'
    assert preview == "<div class='preview'><a class=\"b\"></a></div>"
    assert [context.modifier for context in seen] == [".b", ".b"]
    assert [element.name for element in seen[0].elements] == ["a"]
