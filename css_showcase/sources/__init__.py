"""Load style-sheets, follow their imports, and extract documentation comments."""

from .content import (
    find_docs,
    find_imports,
    is_absolute_path,
    parse_file_content,
    resolve_url,
)
from .loaders import AutoLoader, FileSystemLoader, HttpLoader, Loader
from .models import ImportRef, LoadError, ParsedContent, RawDoc, SourceFile
from .resolver import ImportResolver, extract_docs, resolve

__all__ = [
    "AutoLoader",
    "FileSystemLoader",
    "HttpLoader",
    "ImportRef",
    "ImportResolver",
    "LoadError",
    "Loader",
    "ParsedContent",
    "RawDoc",
    "SourceFile",
    "extract_docs",
    "find_docs",
    "find_imports",
    "is_absolute_path",
    "parse_file_content",
    "resolve",
    "resolve_url",
]
