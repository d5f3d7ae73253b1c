"""Recursively load a style-sheet and everything it imports.

:class:`ImportResolver` loads the root file through an injected
:class:`~css_showcase.sources.loaders.Loader`, parses its ``@import``
directives and documentation comments, and resolves every import
concurrently. All files land in one shared, append-only list; the order of
files reached through different import branches is not guaranteed, while the
tags of each file keep their declaration order.

Example
-------
>>> from css_showcase.sources import ImportResolver, extract_docs
>>> files = ImportResolver().resolve("css/main.css")  # doctest: +SKIP
>>> docs = extract_docs(files)  # doctest: +SKIP
"""

from __future__ import annotations

import asyncio
import logging
import typing as typ

from css_showcase.comment_parser import CommentTagParser
from css_showcase.config import ShowcaseConfig

from .content import parse_file_content
from .loaders import AutoLoader, HttpLoader
from .models import LoadError, SourceFile

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .loaders import Loader
    from .models import RawDoc

logger = logging.getLogger(__name__)


class ImportResolver:
    """Load a root style-sheet and its transitive imports."""

    def __init__(
        self, loader: Loader | None = None, config: ShowcaseConfig | None = None
    ) -> None:
        """Initialize the resolver.

        Parameters
        ----------
        loader : Loader, optional
            Transport used for every file; defaults to an :class:`AutoLoader`
            honouring the configured HTTP timeout.
        config : ShowcaseConfig, optional
            Supplies the recognized tags and the fan-out bound.
        """
        self.config = config or ShowcaseConfig()
        self.loader = loader or AutoLoader(
            http=HttpLoader(timeout=self.config.http_timeout)
        )
        self.parser = CommentTagParser(self.config.tags)

    def resolve(self, root_url: str) -> list[SourceFile]:
        """Resolve ``root_url`` on a fresh event loop.

        Raises
        ------
        LoadError
            If the root file or any transitively imported file fails to load.
            No partial result is returned.
        """
        return asyncio.run(self.resolve_async(root_url))

    async def resolve_async(self, root_url: str) -> list[SourceFile]:
        """Resolve ``root_url`` within an already running event loop."""
        result: list[SourceFile] = []
        limiter = asyncio.Semaphore(self.config.max_concurrent_loads)
        await self._load_recursive(root_url, None, (), result, limiter)
        logger.debug("Resolved %d file(s) from %s", len(result), root_url)
        return result

    async def _load_recursive(
        self,
        url: str,
        parent_url: str | None,
        ancestry: tuple[str, ...],
        result: list[SourceFile],
        limiter: asyncio.Semaphore,
    ) -> None:
        async with limiter:
            content = await self.loader.load_text(url)
        parsed = parse_file_content(content, url, self.parser)
        result.append(
            SourceFile(
                url=url,
                parent_url=parent_url,
                content=content,
                imports=parsed.imports,
                docs=parsed.docs,
            )
        )

        lineage = (*ancestry, url)
        branches: list[cabc.Coroutine[typ.Any, typ.Any, None]] = []
        for ref in parsed.imports:
            if ref.url in lineage:
                logger.warning("Skipping cyclic import of %s from %s", ref.url, url)
                continue
            branches.append(
                self._load_recursive(ref.url, url, lineage, result, limiter)
            )
        if not branches:
            return
        # One failing branch cancels its unfinished siblings.
        try:
            async with asyncio.TaskGroup() as group:
                for branch in branches:
                    group.create_task(branch)
        except ExceptionGroup as failures:
            load_errors = failures.subgroup(LoadError)
            if load_errors is None:
                raise
            raise _first_leaf(load_errors)  # noqa: B904


def _first_leaf(group: BaseExceptionGroup[LoadError]) -> LoadError:
    """Return the first error of ``group``, looking through nested groups."""
    first = group.exceptions[0]
    while isinstance(first, BaseExceptionGroup):
        first = first.exceptions[0]
    return first


def extract_docs(files: cabc.Iterable[SourceFile]) -> list[RawDoc]:
    """Flatten the documentation comments of ``files`` in collection order."""
    return [doc for source in files for doc in source.docs]


def resolve(
    root_url: str,
    *,
    loader: Loader | None = None,
    config: ShowcaseConfig | None = None,
) -> list[SourceFile]:
    """Resolve ``root_url`` with a one-off :class:`ImportResolver`."""
    return ImportResolver(loader, config).resolve(root_url)


__all__ = ["ImportResolver", "extract_docs", "resolve"]
