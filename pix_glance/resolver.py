"""Resolve resource references into readable filesystem paths.

``file`` references are returned as-is. ``content`` references are streamed
into a staged copy inside the private cache directory, named after the
provider's display name.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path

from pix_glance.config import BridgeConfig
from pix_glance.content_resolver import ContentResolver, OpenableColumns
from pix_glance.intent import ResourceReference
from pix_glance.logger import get_logger
from pix_glance.path_utils import staged_file_path

_logger = get_logger("resolver")


@dataclass(frozen=True)
class ResolveResult:
    path: str | None = None
    reason: str | None = None

    @classmethod
    def success(cls, path: str) -> ResolveResult:
        return cls(path=str(path))

    @classmethod
    def failure(cls, reason: str) -> ResolveResult:
        return cls(reason=reason)

    @property
    def ok(self) -> bool:
        return self.path is not None


class ReferenceResolver:
    def __init__(self, content_resolver: ContentResolver, config: BridgeConfig | None = None) -> None:
        self._content = content_resolver
        self._config = config or BridgeConfig()

    @property
    def cache_dir(self) -> Path:
        return Path(self._config.cache_dir)

    def resolve(self, ref: ResourceReference) -> ResolveResult:
        if ref.is_file:
            path = ref.path
            if not path:
                return ResolveResult.failure(f"file reference without path: {ref}")
            return ResolveResult.success(path)

        if ref.is_content:
            return self._stage_content(ref)

        return ResolveResult.failure(f"unsupported scheme {ref.scheme!r}: {ref}")

    def display_name(self, ref: ResourceReference) -> str:
        """Display name from the first metadata row, or the default name."""
        default = self._config.default_staged_name
        try:
            rows = self._content.query(ref)
        except Exception as e:
            _logger.debug("display name query failed for %s: %s", ref, e)
            return default
        if not rows:
            return default
        value = rows[0].get(OpenableColumns.DISPLAY_NAME)
        if not isinstance(value, str) or not value.strip():
            return default
        return value

    def _stage_content(self, ref: ResourceReference) -> ResolveResult:
        name = self.display_name(ref)
        try:
            stream = self._content.open_input_stream(ref)
            if stream is None:
                return ResolveResult.failure(f"no input stream for {ref}")

            target = staged_file_path(self.cache_dir, name, self._config.default_staged_name)
            with stream as src:
                target.parent.mkdir(parents=True, exist_ok=True)
                with open(target, "wb") as dst:
                    shutil.copyfileobj(src, dst)
        except Exception as e:
            _logger.exception("staging %s failed: %s", ref, e)
            return ResolveResult.failure(f"staging {ref} failed: {e}")

        _logger.debug("staged %s -> %s", ref, target)
        return ResolveResult.success(str(target))
