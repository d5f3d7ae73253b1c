"""Cyclopts CLI entrypoint for extracting CSS showcase data.

The ``showcase`` console script resolves a root style-sheet with everything
it imports, builds the showcase model from its documentation comments, and
emits it as JSON for a template renderer. ``showcase tags`` prints the raw
tags of a single file, which helps when debugging comment layout.

Examples
--------
Build the showcase for a local style-sheet and print it:

>>> from css_showcase.cli import app
>>> app.run(["build", "css/main.css"])  # doctest: +SKIP

Write the data to a file using a custom configuration:

>>> app.run(
...     ["build", "css/main.css", "--config", "showcase.yaml", "--output", "out.json"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import asyncio
import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .comment_parser import CommentTagParser
from .config import ShowcaseConfig, load_showcase_config
from .generator import ShowcaseGenerator
from .showcase import to_json
from .sources import AutoLoader, HttpLoader, parse_file_content

DEFAULT_CONFIG = Path("config/showcase.yaml")

app = App(name="showcase", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    resolved = path.resolve()
    try:
        return str(resolved.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_config(config: Path | None) -> ShowcaseConfig:
    if config is None:
        # default location is optional
        return load_showcase_config(DEFAULT_CONFIG if DEFAULT_CONFIG.exists() else None)
    return load_showcase_config(config)


@app.command(help="Build showcase data from a style-sheet and its imports.")
def build(
    root: typ.Annotated[str, Parameter(help="Path or URL of the root style-sheet")],
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to showcase config", env_var="INPUT_CONFIG")
    ] = None,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Write JSON here instead of stdout", env_var="INPUT_OUTPUT"),
    ] = None,
    verbose: typ.Annotated[
        bool, Parameter(help="Log loads and skipped selectors")
    ] = False,
) -> None:
    """Resolve ``root`` and emit the showcase items as JSON.

    Parameters
    ----------
    root : str
        Path or HTTP(S) URL of the entry style-sheet.
    config : Path or None, optional
        Path to a ``showcase.yaml`` file; ``config/showcase.yaml`` is used
        when present and no path is given.
    output : Path or None, optional
        Destination file; JSON is printed to stdout when omitted.
    verbose : bool, optional
        Enable debug logging on stderr.

    Raises
    ------
    LoadError
        If any style-sheet in the import tree cannot be loaded. Nothing is
        written in that case.
    """
    _configure_logging(verbose=verbose)
    generator = ShowcaseGenerator(root, config=_load_config(config))
    if output is None:
        print(to_json(generator.collect()))
        return
    written = generator.run(output)
    print(f"wrote {_format_path(written)}")


@app.command(help="Print the documentation tags found in a single style-sheet.")
def tags(
    source: typ.Annotated[str, Parameter(help="Path or URL of the style-sheet")],
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to showcase config", env_var="INPUT_CONFIG")
    ] = None,
) -> None:
    """Print each documentation comment of ``source`` as ``@name content`` lines.

    Imports are listed but not followed.
    """
    showcase_config = _load_config(config)
    loader = AutoLoader(http=HttpLoader(timeout=showcase_config.http_timeout))
    content = asyncio.run(loader.load_text(source))
    parsed = parse_file_content(
        content, source, CommentTagParser(showcase_config.tags)
    )
    for ref in parsed.imports:
        print(f"import {ref.url}")
    for index, doc in enumerate(parsed.docs, start=1):
        print(f"# doc {index}")
        for name, value in doc.tags:
            print(f"@{name} {value}".rstrip())


def main() -> None:
    """Invoke the Cyclopts application that powers the `showcase` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
