"""Load showcase configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import _bool_option, _positive_number, _section, _tag_overrides
from .models import ShowcaseConfig, TagTable

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_showcase_config(path: Path | None = None) -> ShowcaseConfig:
    """Load the YAML file describing parser and builder options.

    Parameters
    ----------
    path : Path, optional
        Filesystem path to the YAML configuration (for example,
        ``config/showcase.yaml``). ``None`` returns the defaults.

    Returns
    -------
    ShowcaseConfig
        Parsed configuration with defaults applied for omitted keys.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given but does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    ShowcaseConfigError
        If a section or option has the wrong shape.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from css_showcase.config import load_showcase_config
    >>> load_showcase_config().use_selector_based_ids
    True
    """
    if path is None:
        return ShowcaseConfig()
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    return build_showcase_config(raw)


def build_showcase_config(raw: typ.Mapping[str, typ.Any]) -> ShowcaseConfig:
    """Build a ShowcaseConfig from an already parsed mapping."""
    defaults = ShowcaseConfig()
    ids = _section(raw, "ids")
    states = _section(raw, "states")
    loading = _section(raw, "loading")

    tags = TagTable().with_overrides(_tag_overrides(_section(raw, "tags")))
    glue = states.get("html_glue", defaults.states_html_glue)

    return ShowcaseConfig(
        tags=tags,
        use_selector_based_ids=_bool_option(
            ids, "selector_based", defaults.use_selector_based_ids, where="ids"
        ),
        collapse_id_underscores=_bool_option(
            ids, "collapse_underscores", defaults.collapse_id_underscores, where="ids"
        ),
        modify_unique_attrs=_bool_option(
            raw, "modify_unique_attrs", defaults.modify_unique_attrs, where="root"
        ),
        states_modify_unique_attrs=_bool_option(
            states,
            "modify_unique_attrs",
            defaults.states_modify_unique_attrs,
            where="states",
        ),
        states_html_glue=str(glue),
        max_concurrent_loads=int(
            _positive_number(
                loading,
                "max_concurrent",
                defaults.max_concurrent_loads,
                where="loading",
                integer=True,
            )
        ),
        http_timeout=_positive_number(
            loading, "http_timeout", defaults.http_timeout, where="loading"
        ),
    )


__all__ = ["build_showcase_config", "load_showcase_config"]
