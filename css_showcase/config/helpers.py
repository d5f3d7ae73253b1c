"""Utility helpers shared by the showcase configuration loader."""

from __future__ import annotations

import typing as typ

from .models import ShowcaseConfigError

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def _section(raw: cabc.Mapping[str, typ.Any], key: str) -> cabc.Mapping[str, typ.Any]:
    """Return the nested mapping stored under ``key`` (empty when absent)."""
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"Configuration section '{key}' must be a mapping."
        raise ShowcaseConfigError(msg)
    return value


def _bool_option(
    raw: cabc.Mapping[str, typ.Any], key: str, default: bool, *, where: str
) -> bool:
    """Return a boolean option, rejecting anything but ``true``/``false``."""
    value = raw.get(key, default)
    if not isinstance(value, bool):
        msg = f"Option '{where}.{key}' must be a boolean, got {value!r}."
        raise ShowcaseConfigError(msg)
    return value


def _positive_number(
    raw: cabc.Mapping[str, typ.Any],
    key: str,
    default: float,
    *,
    where: str,
    integer: bool = False,
) -> float:
    """Return a positive numeric option, coercing to ``int`` when requested."""
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"Option '{where}.{key}' must be a number, got {value!r}."
        raise ShowcaseConfigError(msg)
    if value <= 0:
        msg = f"Option '{where}.{key}' must be positive, got {value!r}."
        raise ShowcaseConfigError(msg)
    return int(value) if integer else float(value)


def _tag_overrides(payload: cabc.Mapping[str, typ.Any] | None) -> dict[str, bool]:
    """Normalize the ``tags`` mapping into ``{name: is_multiline}`` pairs."""
    if not payload:
        return {}
    overrides: dict[str, bool] = {}
    for name, multiline in payload.items():
        text = str(name).strip()
        if not text:
            continue
        if not isinstance(multiline, bool):
            msg = f"Tag '{text}' must map to true (multi-line) or false."
            raise ShowcaseConfigError(msg)
        overrides[text] = multiline
    return overrides


__all__ = [
    "_bool_option",
    "_positive_number",
    "_section",
    "_tag_overrides",
]
