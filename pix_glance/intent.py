"""Inbound OS intents and the resource references they carry."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from PySide6.QtCore import QUrl

ACTION_VIEW = "android.intent.action.VIEW"
ACTION_SEND = "android.intent.action.SEND"
EXTRA_STREAM = "android.intent.extra.STREAM"

SCHEME_FILE = "file"
SCHEME_CONTENT = "content"


@dataclass(frozen=True)
class ResourceReference:
    """Opaque URI handed over by the OS.

    ``file`` references are direct paths; ``content`` references must be
    streamed through the content resolver.
    """

    uri: str

    @classmethod
    def parse(cls, value: ResourceReference | QUrl | str) -> ResourceReference:
        if isinstance(value, ResourceReference):
            return value
        if isinstance(value, QUrl):
            return cls(value.toString())
        text = str(value)
        # Desktop launchers pass plain paths instead of file:// URIs.
        if os.path.isabs(text):
            return cls(QUrl.fromLocalFile(text).toString())
        return cls(text)

    def _url(self) -> QUrl:
        return QUrl(self.uri)

    @property
    def scheme(self) -> str:
        return self._url().scheme().lower()

    @property
    def authority(self) -> str:
        return self._url().host()

    @property
    def path(self) -> str:
        return self._url().path(QUrl.ComponentFormattingOption.FullyDecoded)

    @property
    def is_file(self) -> bool:
        return self.scheme == SCHEME_FILE

    @property
    def is_content(self) -> bool:
        return self.scheme == SCHEME_CONTENT

    def __str__(self) -> str:
        return self.uri


@dataclass
class Intent:
    action: str | None = None
    data: ResourceReference | None = None
    type: str | None = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def view(cls, uri: ResourceReference | QUrl | str) -> Intent:
        return cls(action=ACTION_VIEW, data=ResourceReference.parse(uri))

    @classmethod
    def send(cls, uri: ResourceReference | QUrl | str, mime_type: str) -> Intent:
        return cls(
            action=ACTION_SEND,
            type=mime_type,
            extras={EXTRA_STREAM: ResourceReference.parse(uri)},
        )

    def stream_extra(self) -> ResourceReference | None:
        """The attached stream reference, or None when absent."""
        value = self.extras.get(EXTRA_STREAM) if self.extras else None
        if value is None:
            return None
        if isinstance(value, (ResourceReference, QUrl, str)):
            return ResourceReference.parse(value)
        return None
