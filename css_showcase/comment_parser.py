r"""Parse JavaDoc-like documentation comments found in style-sheets.

This module normalises a raw ``/** ... */`` block and splits it into an
ordered list of ``(name, content)`` tags. The first content line becomes the
implicit ``$title`` tag and the text after it the implicit ``$description``;
explicit tags start with ``@name``. Multi-line tags keep their internal
structure with the indentation of their first content line removed.

Example
-------
>>> from css_showcase.comment_parser import normalize_doc, parse_doc
>>> text = normalize_doc("/**\n * Buttons\n *\n * @base button Normal\n */")
>>> parse_doc(text)
[Tag(name='$title', content='Buttons'), Tag(name='base', content='button Normal')]
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from css_showcase.config import TagTable

DOC_BEGIN_PATTERN = re.compile(r"^/\*\*\s?")
LINE_BEGIN_PATTERN = re.compile(r"^ \*\s?")
LINE_END_PATTERN = re.compile(r"\s*(\*/)?\s*$")
TAG_PATTERN = re.compile(r"^\s*@([a-z0-9_-]+)(\s+(.+))?", re.IGNORECASE)
INDENT_PATTERN = re.compile(r"^(\s*)")
LEADING_WHITESPACE_PATTERN = re.compile(r"^\s+", re.MULTILINE)

TITLE_TAG = "$title"
DESCRIPTION_TAG = "$description"


class Tag(typ.NamedTuple):
    """A single documentation tag in declaration order."""

    name: str
    content: str


@dc.dataclass(slots=True)
class _OpenTag:
    """Mutable capture state for the tag currently being read."""

    name: str
    content: str
    is_multiline: bool
    indent: str | None = None

    def append(self, line: str) -> None:
        """Append ``line`` after a line break, stripping the tag indent."""
        if self.indent is None and line:
            self.indent = _line_indent(line)
        if self.indent and line.startswith(self.indent):
            line = line[len(self.indent) :]
        self.content += "\n" + line


def _line_indent(text: str) -> str:
    match = INDENT_PATTERN.match(text)
    return match.group(1) if match else ""


def normalize_doc(raw: str) -> str:
    """Unify line endings and collapse leading whitespace.

    Every run of whitespace at the start of a line (blank lines included) is
    replaced by a single space; the very first line loses that space entirely.
    """
    text = raw.replace("\r\n", "\n").replace("\r", "\n")
    text = LEADING_WHITESPACE_PATTERN.sub(" ", text)
    return text.removeprefix(" ")


class CommentTagParser:
    """Split normalized comment text into tags known to a ``TagTable``."""

    def __init__(self, tags: TagTable | None = None) -> None:
        self.tags = tags or TagTable()

    def parse(self, doc_content: str) -> list[Tag]:
        """Return the tags declared in ``doc_content`` in source order.

        Parameters
        ----------
        doc_content : str
            Comment text, usually produced by :func:`normalize_doc`.

        Returns
        -------
        list[Tag]
            Ordered ``(name, content)`` pairs. Unknown tags and meta tags
            (``$title``/``$description``) with empty content are omitted.
        """
        result: list[Tag] = []
        current = self._open(TITLE_TAG)

        for index, raw_line in enumerate(doc_content.split("\n")):
            begin = LINE_BEGIN_PATTERN if index else DOC_BEGIN_PATTERN
            line = LINE_END_PATTERN.sub("", raw_line, count=1)
            line = begin.sub("", line, count=1)
            match = TAG_PATTERN.match(line)
            if match:
                self._finalize(current, result)
                current = self._open(match.group(1), match.group(3) or "")
            elif current is None:
                continue
            elif current.name == TITLE_TAG:
                if line:
                    current.content = line
                    self._finalize(current, result)
                    current = self._open(DESCRIPTION_TAG)
            elif current.is_multiline:
                current.append(line)
            else:
                self._finalize(current, result)
                current = None

        self._finalize(current, result)
        return result

    def _open(self, name: str, content: str = "") -> _OpenTag | None:
        """Start capturing ``name``; unknown names give an inert context."""
        if not self.tags.is_known(name):
            return None
        is_multiline = self.tags.is_multiline(name)
        indent = None
        if is_multiline and content:
            indent = _line_indent(content)
            content = content[len(indent) :]
        return _OpenTag(name, content, is_multiline, indent)

    @staticmethod
    def _finalize(current: _OpenTag | None, result: list[Tag]) -> None:
        if current is None:
            return
        content = current.content.strip("\n")
        is_meta = current.name.startswith("$")
        if not is_meta or content:
            result.append(Tag(current.name, content))


def parse_doc(doc_content: str, tags: TagTable | None = None) -> list[Tag]:
    """Parse ``doc_content`` with a :class:`CommentTagParser`."""
    return CommentTagParser(tags).parse(doc_content)


__all__ = ["CommentTagParser", "Tag", "normalize_doc", "parse_doc"]
