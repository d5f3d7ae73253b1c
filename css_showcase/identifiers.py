"""Turn selectors into HTML-safe identifiers and keep them unique per run."""

from __future__ import annotations

import re

NON_ID_CHAR_PATTERN = re.compile(r"[^A-Za-z0-9_-]")
REPEATED_UNDERSCORE_PATTERN = re.compile(r"_{2,}")


def selector_to_id(selector: str, *, collapse: bool = False) -> str:
    """Replace every character outside ``[A-Za-z0-9_-]`` with ``_``.

    Parameters
    ----------
    selector : str
        CSS selector such as ``.my-class.sub#id``.
    collapse : bool, optional
        Collapse repeated underscores and trim them from both ends.

    Returns
    -------
    str
        Identifier derived from ``selector``.

    Examples
    --------
    >>> selector_to_id(".btn.large")
    '_btn_large'
    >>> selector_to_id(".btn .icon", collapse=True)
    'btn_icon'
    """
    result = NON_ID_CHAR_PATTERN.sub("_", selector)
    if collapse:
        result = REPEATED_UNDERSCORE_PATTERN.sub("_", result).strip("_")
    return result


class IdRegistry:
    """Hand out identifiers that are unique for the registry's lifetime.

    The first request for a base value returns it unchanged; later requests
    get ``_1``, ``_2``, ... appended in request order.
    """

    def __init__(self) -> None:
        self._used: set[str] = set()

    def __contains__(self, candidate: object) -> bool:
        return candidate in self._used

    def claim(self, base: str) -> str:
        """Return a unique identifier derived from ``base`` and reserve it."""
        candidate = base
        suffix = 1
        while candidate in self._used:
            candidate = f"{base}_{suffix}"
            suffix += 1
        self._used.add(candidate)
        return candidate


__all__ = ["IdRegistry", "selector_to_id"]
