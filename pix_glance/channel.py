"""Single-shot request/response channel to the embedded runtime.

The runtime calls ``invoke_method(name, arguments)`` and gets back exactly one
``ChannelReply``. Unknown methods answer ``NOT_IMPLEMENTED`` instead of an
error so older and newer runtimes can talk to the same bridge.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pix_glance.logger import get_logger

_logger = get_logger("channel")

REPLY_SUCCESS = "success"
REPLY_ERROR = "error"
REPLY_NOT_IMPLEMENTED = "notImplemented"


@dataclass(frozen=True)
class MethodCall:
    method: str
    arguments: Any = None


@dataclass(frozen=True)
class ChannelReply:
    kind: str
    value: Any = None
    error_code: str | None = None
    error_message: str | None = None
    error_details: Any = None

    @property
    def is_success(self) -> bool:
        return self.kind == REPLY_SUCCESS

    @property
    def is_not_implemented(self) -> bool:
        return self.kind == REPLY_NOT_IMPLEMENTED


NOT_IMPLEMENTED = ChannelReply(REPLY_NOT_IMPLEMENTED)


class MethodResult:
    """Reply sink handed to a call handler; accepts exactly one reply."""

    def __init__(self) -> None:
        self.reply: ChannelReply | None = None

    def _submit(self, reply: ChannelReply) -> None:
        if self.reply is not None:
            raise RuntimeError("reply already submitted")
        self.reply = reply

    def success(self, value: Any = None) -> None:
        self._submit(ChannelReply(REPLY_SUCCESS, value=value))

    def error(self, code: str, message: str | None = None, details: Any = None) -> None:
        self._submit(ChannelReply(REPLY_ERROR, error_code=code, error_message=message, error_details=details))

    def not_implemented(self) -> None:
        self._submit(NOT_IMPLEMENTED)


MethodCallHandler = Callable[[MethodCall, MethodResult], None]


class MethodChannel:
    def __init__(self, name: str) -> None:
        self.name = name
        self._handler: MethodCallHandler | None = None

    def set_method_call_handler(self, handler: MethodCallHandler | None) -> None:
        self._handler = handler

    def invoke_method(self, method: str, arguments: Any = None) -> ChannelReply:
        handler = self._handler
        if handler is None:
            _logger.debug("%s: no handler for %s", self.name, method)
            return NOT_IMPLEMENTED

        call = MethodCall(str(method), arguments)
        result = MethodResult()
        try:
            handler(call, result)
        except Exception as e:
            _logger.exception("%s: handler failed for %s", self.name, call.method)
            if result.reply is None:
                return ChannelReply(REPLY_ERROR, error_code="error", error_message=str(e))
        return result.reply if result.reply is not None else NOT_IMPLEMENTED
