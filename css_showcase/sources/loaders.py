"""Text loaders used by the import resolver.

The resolver only needs "text in, text out": each loader exposes an awaitable
``load_text(url)`` plus a structured ``load_json(url)`` variant and raises
:class:`~css_showcase.sources.models.LoadError` on failure. Blocking reads run
in worker threads so several imports can be fetched at once.

Example
-------
>>> import asyncio
>>> from css_showcase.sources.loaders import FileSystemLoader
>>> asyncio.run(FileSystemLoader().load_text("css/main.css"))  # doctest: +SKIP
'@import "buttons.css";...'
"""

from __future__ import annotations

import abc
import asyncio
import json
import logging
import re
import typing as typ
from pathlib import Path
from urllib.parse import unquote, urlsplit

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from css_showcase._constants import DEFAULT_HTTP_TIMEOUT

from .models import LoadError

logger = logging.getLogger(__name__)

HTTP_URL_PATTERN = re.compile(r"^(https?:)?//", re.IGNORECASE)


class Loader(typ.Protocol):
    """Capability the resolver uses to retrieve style-sheets and resources."""

    async def load_text(self, url: str) -> str:
        """Return the text stored at ``url`` or raise ``LoadError``."""
        ...

    async def load_json(self, url: str) -> typ.Any:  # noqa: ANN401
        """Return the decoded JSON stored at ``url`` or raise ``LoadError``."""
        ...


class _TextLoader(abc.ABC):
    """Shared JSON decoding on top of a blocking ``read`` implementation."""

    @abc.abstractmethod
    def read(self, url: str) -> str:
        """Return the text stored at ``url`` or raise ``LoadError``."""

    async def load_text(self, url: str) -> str:
        logger.debug("Loading %s", url)
        return await asyncio.to_thread(self.read, url)

    async def load_json(self, url: str) -> typ.Any:  # noqa: ANN401
        text = await self.load_text(url)
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise LoadError(url, f"invalid JSON: {exc}") from exc


class FileSystemLoader(_TextLoader):
    """Read style-sheets from disk, relative to ``base_dir`` when given."""

    def __init__(self, base_dir: Path | None = None, *, encoding: str = "utf-8") -> None:
        self.base_dir = base_dir
        self.encoding = encoding

    def resolve_path(self, url: str) -> Path:
        """Map ``url`` (plain path or ``file:`` URL) onto a filesystem path."""
        if url.lower().startswith("file:"):
            path = Path(unquote(urlsplit(url).path))
        else:
            path = Path(url)
        if self.base_dir is not None and not path.is_absolute():
            path = self.base_dir / path
        return path

    def read(self, url: str) -> str:
        """Return the file contents for ``url``."""
        path = self.resolve_path(url)
        try:
            return path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise LoadError(url, exc) from exc


class HttpLoader(_TextLoader):
    """Fetch style-sheets over HTTP(S) with retrying ``requests`` sessions."""

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the loader.

        Parameters
        ----------
        timeout : float, optional
            Per-request timeout in seconds.
        session : requests.Session, optional
            Session to reuse for every request. When omitted a retrying
            session is created and closed around each request.
        """
        self.timeout = timeout
        self._session = session

    def read(self, url: str) -> str:
        """Download ``url`` and return the response body."""
        session = self._session or _build_session()
        try:
            response = session.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.text
        except requests.RequestException as exc:
            raise LoadError(url, exc) from exc
        finally:
            if self._session is None:
                session.close()


class AutoLoader:
    """Route HTTP(S) and protocol-relative URLs to HTTP, the rest to disk."""

    def __init__(
        self,
        *,
        filesystem: FileSystemLoader | None = None,
        http: HttpLoader | None = None,
    ) -> None:
        self.filesystem = filesystem or FileSystemLoader()
        self.http = http or HttpLoader()

    def _route(self, url: str) -> tuple[_TextLoader, str]:
        if HTTP_URL_PATTERN.match(url):
            if url.startswith("//"):
                url = f"https:{url}"
            return self.http, url
        return self.filesystem, url

    async def load_text(self, url: str) -> str:
        """Load ``url`` with the loader matching its transport."""
        loader, target = self._route(url)
        return await loader.load_text(target)

    async def load_json(self, url: str) -> typ.Any:  # noqa: ANN401
        """Load and decode ``url`` with the loader matching its transport."""
        loader, target = self._route(url)
        return await loader.load_json(target)


def _build_session() -> requests.Session:
    """Return a session that retries transient upstream failures."""
    session = requests.Session()
    retry = Retry(
        total=5,
        read=5,
        connect=3,
        backoff_factor=0.5,
        status_forcelist=(500, 502, 503, 504),
        allowed_methods=("GET", "HEAD"),
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


__all__ = ["AutoLoader", "FileSystemLoader", "HttpLoader", "Loader"]
