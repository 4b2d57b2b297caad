"""Pytest configuration.

A single QCoreApplication is created for the whole session so QObject
signals, slots and QStandardPaths behave the same as in the running bridge.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any

import pytest

_APP: Any | None = None


def pytest_configure(config) -> None:  # noqa: ARG001
    """Ensure a QCoreApplication exists before collecting/running tests."""

    try:
        from PySide6.QtCore import QCoreApplication
    except ImportError:
        return

    global _APP

    app = QCoreApplication.instance()
    if app is None:
        # Keep a strong ref so it isn't GC'd mid-session.
        _APP = QCoreApplication([])
    else:
        _APP = app


def pytest_sessionfinish(session, exitstatus) -> None:  # noqa: ARG001
    try:
        from PySide6.QtCore import QCoreApplication
    except ImportError:
        return

    app = QCoreApplication.instance()
    if app is None:
        return
    app.quit()
    app.processEvents()


class FakeProvider:
    """In-memory content provider: one entry per URI path."""

    def __init__(self) -> None:
        self.rows: dict[str, list[dict[str, Any]] | None] = {}
        self.data: dict[str, bytes] = {}
        self.query_error: Exception | None = None
        self.open_error: Exception | None = None
        self.opened: list[io.BytesIO] = []

    def add(self, path: str, data: bytes, rows: list[dict[str, Any]] | None = None) -> None:
        self.data[path] = data
        self.rows[path] = rows

    def query(self, ref):
        if self.query_error is not None:
            raise self.query_error
        return self.rows.get(ref.path)

    def open_input_stream(self, ref):
        if self.open_error is not None:
            raise self.open_error
        if ref.path not in self.data:
            return None
        stream = io.BytesIO(self.data[ref.path])
        self.opened.append(stream)
        return stream


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    return tmp_path / "cache"


@pytest.fixture
def config(cache_dir: Path):
    from pix_glance.config import BridgeConfig

    return BridgeConfig(cache_dir=cache_dir)


@pytest.fixture
def content(provider: FakeProvider):
    from pix_glance.content_resolver import ContentResolver

    resolver = ContentResolver()
    resolver.register("media", provider)
    return resolver


@pytest.fixture
def resolver(content, config):
    from pix_glance.resolver import ReferenceResolver

    return ReferenceResolver(content, config)
