"""Content resolution service for ``content://`` references.

The OS normally owns this service. Here it is a registry of providers keyed
by URI authority so the bridge can be driven on any platform (and in tests).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, BinaryIO, Protocol

from pix_glance.intent import ResourceReference
from pix_glance.logger import get_logger
from pix_glance.path_utils import abs_path

_logger = get_logger("content")


class OpenableColumns:
    DISPLAY_NAME = "_display_name"
    SIZE = "_size"


class ContentProvider(Protocol):
    def query(self, ref: ResourceReference) -> list[dict[str, Any]] | None: ...

    def open_input_stream(self, ref: ResourceReference) -> BinaryIO | None: ...


class ContentResolver:
    def __init__(self) -> None:
        self._providers: dict[str, ContentProvider] = {}

    def register(self, authority: str, provider: ContentProvider) -> None:
        self._providers[str(authority)] = provider
        _logger.debug("provider registered: %s", authority)

    def unregister(self, authority: str) -> None:
        self._providers.pop(str(authority), None)

    def _provider_for(self, ref: ResourceReference) -> ContentProvider:
        if not ref.is_content:
            raise FileNotFoundError(f"not a content reference: {ref}")
        provider = self._providers.get(ref.authority)
        if provider is None:
            raise FileNotFoundError(f"no content provider for {ref}")
        return provider

    def query(self, ref: ResourceReference) -> list[dict[str, Any]] | None:
        """Metadata rows for ``ref`` (may be None or empty)."""
        return self._provider_for(ref).query(ref)

    def open_input_stream(self, ref: ResourceReference) -> BinaryIO | None:
        return self._provider_for(ref).open_input_stream(ref)


class FileSystemProvider:
    """Serve ``content://<authority>/<relative path>`` from a root directory."""

    def __init__(self, root: str | Path) -> None:
        self.root = abs_path(root)

    def _locate(self, ref: ResourceReference) -> Path:
        rel = ref.path.lstrip("/")
        target = abs_path(self.root / rel)
        if not rel or not target.is_relative_to(self.root):
            raise FileNotFoundError(f"outside provider root: {ref}")
        return target

    def query(self, ref: ResourceReference) -> list[dict[str, Any]] | None:
        target = self._locate(ref)
        if not target.is_file():
            return []
        return [{OpenableColumns.DISPLAY_NAME: target.name, OpenableColumns.SIZE: target.stat().st_size}]

    def open_input_stream(self, ref: ResourceReference) -> BinaryIO | None:
        return open(self._locate(ref), "rb")
