"""Build the showcase data model from documentation comments."""

from .builder import ShowcaseDataBuilder, build_showcase, parse_complex_content
from .export import to_builtins, to_json
from .models import ShowcaseItem, ShowcaseSubitem, State

__all__ = [
    "ShowcaseDataBuilder",
    "ShowcaseItem",
    "ShowcaseSubitem",
    "State",
    "build_showcase",
    "parse_complex_content",
    "to_builtins",
    "to_json",
]
