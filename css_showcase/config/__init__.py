"""Load and validate showcase configuration YAML.

This subpackage parses the optional ``showcase.yaml`` file, merges tag
overrides with the default tag table, and produces immutable dataclasses
(:class:`ShowcaseConfig`, :class:`TagTable`) that the parser, resolver, builder,
and mutator receive at construction time. The primary entry point is
:func:`load_showcase_config`.

Examples
--------
>>> from css_showcase.config import ShowcaseConfig
>>> ShowcaseConfig().tags.is_multiline("example")
True
"""

from .loader import build_showcase_config, load_showcase_config
from .models import (
    DEFAULT_TAGS,
    ShowcaseConfig,
    ShowcaseConfigError,
    TagTable,
)

__all__ = [
    "DEFAULT_TAGS",
    "ShowcaseConfig",
    "ShowcaseConfigError",
    "TagTable",
    "build_showcase_config",
    "load_showcase_config",
]
