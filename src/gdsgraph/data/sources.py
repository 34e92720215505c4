"""Table sources: where raw table documents come from.

A source answers ``fetch(path)`` with the parsed JSON document, or ``None``
when the table is not available. Anything that should abort the whole load
is raised as :class:`DataLoadError`.
"""
from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Mapping, Protocol

import httpx

from .errors import DataLoadError, TableNotFoundError
from .json_loader import load_json

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class TableSource(Protocol):
    """Anything that can fetch a table document by relative path."""

    async def fetch(self, path: str) -> object | None:
        ...


class FileTableSource:
    """Reads tables from a directory holding the ``GameData`` tree."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    async def fetch(self, path: str) -> object | None:
        file_path = self.root / path
        try:
            return await asyncio.to_thread(load_json, file_path)
        except TableNotFoundError:
            logger.debug("Table file missing: %s", file_path)
            return None


class HttpTableSource:
    """Fetches tables over HTTP relative to ``base_url``.

    Non-success responses and timeouts count as an unavailable table. Any
    other request failure and undecodable bodies raise DataLoadError. There is
    no retry logic; wrap the source if you need it.
    """

    def __init__(
        self,
        base_url: str,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> "HttpTableSource":
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def fetch(self, path: str) -> object | None:
        if self._client is None:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                return await self._fetch_with(client, path)
        return await self._fetch_with(self._client, path)

    async def _fetch_with(self, client: httpx.AsyncClient, path: str) -> object | None:
        url = self.url_for(path)
        try:
            response = await client.get(url)
        except httpx.TimeoutException:
            logger.warning("Timed out fetching %s", url)
            return None
        except httpx.RequestError as exc:
            raise DataLoadError(f"Unable to fetch {url}: {exc}") from exc

        if not response.is_success:
            logger.debug("Table unavailable (%s): %s", response.status_code, url)
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise DataLoadError(f"Invalid JSON from {url}: {exc}") from exc


class MemoryTableSource:
    """Serves already-parsed documents keyed by path."""

    def __init__(self, documents: Mapping[str, object] | None = None) -> None:
        self.documents: dict[str, object] = dict(documents or {})

    def add(self, path: str, document: object) -> None:
        self.documents[path] = document

    async def fetch(self, path: str) -> object | None:
        document = self.documents.get(path)
        if document is None:
            return None
        # Each fetch yields an independent copy of the document.
        return json.loads(json.dumps(document))
