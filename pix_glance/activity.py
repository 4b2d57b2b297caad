"""Intent capture and the runtime-facing query handler.

``ShareActivity`` receives launch/redelivered intents, resolves the image
reference they carry and keeps the resulting path until the runtime asks for
it once over the ``MethodChannel`` (or the ``getSharedData`` slot from QML).
"""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import QObject, Signal, Slot

from pix_glance.channel import ChannelReply, MethodCall, MethodChannel, MethodResult
from pix_glance.config import BridgeConfig
from pix_glance.content_resolver import ContentResolver
from pix_glance.intent import ACTION_SEND, ACTION_VIEW, Intent, ResourceReference
from pix_glance.logger import get_logger
from pix_glance.pending_share import PendingShare
from pix_glance.resolver import ReferenceResolver

_logger = get_logger("activity")

METHOD_GET_SHARED_DATA = "getSharedData"


class ShareActivity(QObject):
    # Emitted after an intent updated the pending share; True if a path is pending.
    sharedDataChanged = Signal(bool)

    def __init__(
        self,
        resolver: ReferenceResolver | None = None,
        config: BridgeConfig | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._config = config or BridgeConfig()
        self._resolver = resolver or ReferenceResolver(ContentResolver(), self._config)
        self._pending = PendingShare()
        self._channel: MethodChannel | None = None

    @property
    def pending(self) -> PendingShare:
        return self._pending

    @property
    def channel(self) -> MethodChannel:
        if self._channel is None:
            return self.configure_channel()
        return self._channel

    # ---- lifecycle ----

    def configure_channel(self) -> MethodChannel:
        channel = MethodChannel(self._config.channel_name)
        channel.set_method_call_handler(self._on_method_call)
        self._channel = channel
        return channel

    def on_create(self, intent: Intent | None) -> None:
        self.handle_intent(intent)

    def on_new_intent(self, intent: Intent | None) -> None:
        self.handle_intent(intent)

    def handle_intent(self, intent: Intent | None) -> None:
        if intent is None:
            return

        if intent.action == ACTION_VIEW:
            if intent.data is not None:
                self._store(intent.data)
            return

        if intent.action == ACTION_SEND:
            mime = intent.type or ""
            if not mime.startswith(self._config.image_mime_prefix):
                _logger.debug("ignoring send of type %r", intent.type)
                return
            ref = intent.stream_extra()
            if ref is not None:
                self._store(ref)
            return

        _logger.debug("ignoring intent action %r", intent.action)

    def _store(self, ref: ResourceReference) -> None:
        result = self._resolver.resolve(ref)
        if not result.ok:
            _logger.warning("could not resolve shared reference: %s", result.reason)
        self._pending.put(result.path)
        self.sharedDataChanged.emit(self._pending.has_pending)

    # ---- query channel ----

    def _on_method_call(self, call: MethodCall, result: MethodResult) -> None:
        if call.method == METHOD_GET_SHARED_DATA:
            result.success(self._pending.take())
        else:
            result.not_implemented()

    def invoke(self, method: str, arguments: Any = None) -> ChannelReply:
        return self.channel.invoke_method(method, arguments)

    @Slot(result="QVariant")  # type: ignore[call-overload]
    def getSharedData(self) -> str | None:
        reply = self.invoke(METHOD_GET_SHARED_DATA)
        return reply.value if reply.is_success else None

    @Slot(str, "QVariant", result="QVariant")  # type: ignore[call-overload]
    def callMethod(self, method: str, arguments: object | None = None) -> dict[str, Any]:
        """QML entry: returns the reply as a plain dict."""
        reply = self.invoke(method, arguments)
        return {
            "kind": reply.kind,
            "value": reply.value,
            "code": reply.error_code,
            "message": reply.error_message,
        }
