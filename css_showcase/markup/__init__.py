"""Selector matching and markup mutation for showcase variants."""

from .mutator import MarkupMutator, ModifierContext, apply_modifier
from .selectors import PartType, SelectorError, SelectorPart, select, tokenize

__all__ = [
    "MarkupMutator",
    "ModifierContext",
    "PartType",
    "SelectorError",
    "SelectorPart",
    "apply_modifier",
    "select",
    "tokenize",
]
