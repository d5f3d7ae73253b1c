"""High-level orchestration for showcase data generation.

:class:`ShowcaseGenerator` resolves a root style-sheet with its imports,
extracts the documentation comments in collection order, builds the ordered
showcase items, and optionally persists them as JSON for an external
renderer.

Example
-------
>>> from pathlib import Path
>>> from css_showcase.generator import ShowcaseGenerator
>>> generator = ShowcaseGenerator("css/main.css")  # doctest: +SKIP
>>> generator.run(Path("public/showcase.json"))  # doctest: +SKIP
PosixPath('public/showcase.json')
"""

from __future__ import annotations

import logging
import typing as typ

from css_showcase.config import ShowcaseConfig
from css_showcase.showcase import ShowcaseDataBuilder, to_json
from css_showcase.sources import ImportResolver, extract_docs

if typ.TYPE_CHECKING:
    from pathlib import Path

    from css_showcase.showcase import ShowcaseItem
    from css_showcase.sources import Loader

logger = logging.getLogger(__name__)


class ShowcaseGenerator:
    """Resolve a style-sheet tree and turn its comments into showcase items."""

    def __init__(
        self,
        root_url: str,
        *,
        config: ShowcaseConfig | None = None,
        loader: Loader | None = None,
    ) -> None:
        """Initialize the generator.

        Parameters
        ----------
        root_url : str
            Path or URL of the entry style-sheet.
        config : ShowcaseConfig, optional
            Parser, identifier, and mutation options; defaults apply when
            omitted.
        loader : Loader, optional
            Transport override, mainly for tests.
        """
        self.root_url = root_url
        self.config = config or ShowcaseConfig()
        self.resolver = ImportResolver(loader, self.config)

    def collect(self) -> list[ShowcaseItem]:
        """Resolve the style-sheet tree and build the ordered items.

        Raises
        ------
        LoadError
            If any style-sheet in the tree cannot be loaded.
        """
        files = self.resolver.resolve(self.root_url)
        docs = extract_docs(files)
        logger.debug("Found %d documentation comment(s)", len(docs))
        return ShowcaseDataBuilder(self.config).build(docs)

    def run(self, output: Path) -> Path:
        """Write the showcase items for ``root_url`` to ``output`` as JSON."""
        payload = to_json(self.collect())
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(payload + "\n", encoding="utf-8")
        return output


__all__ = ["ShowcaseGenerator"]
