"""Extract import directives and documentation comments from style-sheets."""

from __future__ import annotations

import posixpath
import re
from urllib.parse import urljoin, urlsplit

from css_showcase.comment_parser import CommentTagParser, normalize_doc

from .models import ImportRef, ParsedContent, RawDoc

IMPORT_PATTERN = re.compile(
    r"""@import\s+(?:url\(\s*)?
        (?:(?P<quote>['"])(?P<quoted>[^'"]+)(?P=quote)|(?P<bare>[^'"()\s;]+))
        \s*\)?(?=\s|;|$)""",
    re.VERBOSE,
)
DOC_PATTERN = re.compile(r"/\*\*\s+[\S\s]+?\s+\*/")
ABSOLUTE_PATH_PATTERN = re.compile(r"^(/|[a-z]+:)", re.IGNORECASE)


def is_absolute_path(path: str) -> bool:
    """Return ``True`` for paths with a leading slash or a ``scheme:`` prefix."""
    return bool(ABSOLUTE_PATH_PATTERN.match(path))


def resolve_url(path: str, base_url: str | None) -> str:
    """Resolve an import ``path`` against the directory of ``base_url``.

    Examples
    --------
    >>> resolve_url("buttons.css", "css/main.css")
    'css/buttons.css'
    >>> resolve_url("../vendor/reset.css", "https://example.com/css/main.css")
    'https://example.com/vendor/reset.css'
    >>> resolve_url("/abs/base.css", "css/main.css")
    '/abs/base.css'
    """
    if is_absolute_path(path) or not base_url:
        return path
    if urlsplit(base_url).scheme and "://" in base_url:
        return urljoin(base_url, path)
    directory = base_url[: base_url.rfind("/") + 1]
    return posixpath.normpath(posixpath.join(directory, path))


def find_imports(content: str, url: str | None = None) -> list[ImportRef]:
    """Return the import directives of ``content`` in source order."""
    refs: list[ImportRef] = []
    for match in IMPORT_PATTERN.finditer(content):
        path = match.group("quoted") or match.group("bare")
        refs.append(ImportRef(path=path, url=resolve_url(path, url)))
    return refs


def find_docs(content: str, parser: CommentTagParser | None = None) -> list[RawDoc]:
    """Return every ``/** ... */`` documentation block parsed into tags."""
    parser = parser or CommentTagParser()
    docs: list[RawDoc] = []
    for block in DOC_PATTERN.findall(content):
        normalized = normalize_doc(block)
        docs.append(RawDoc(content=normalized, tags=parser.parse(normalized)))
    return docs


def parse_file_content(
    content: str, url: str | None = None, parser: CommentTagParser | None = None
) -> ParsedContent:
    """Parse one style-sheet into its imports and documentation comments."""
    return ParsedContent(
        imports=find_imports(content, url), docs=find_docs(content, parser)
    )


__all__ = [
    "find_docs",
    "find_imports",
    "is_absolute_path",
    "parse_file_content",
    "resolve_url",
]
