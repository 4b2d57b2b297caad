"""Bridge between OS share/view intents and an embedded application runtime."""

from pix_glance.activity import ShareActivity
from pix_glance.channel import NOT_IMPLEMENTED, ChannelReply, MethodChannel
from pix_glance.config import BridgeConfig
from pix_glance.content_resolver import ContentResolver, FileSystemProvider, OpenableColumns
from pix_glance.intent import ACTION_SEND, ACTION_VIEW, EXTRA_STREAM, Intent, ResourceReference
from pix_glance.pending_share import PendingShare
from pix_glance.resolver import ReferenceResolver, ResolveResult

__all__ = [
    "ACTION_SEND",
    "ACTION_VIEW",
    "EXTRA_STREAM",
    "NOT_IMPLEMENTED",
    "BridgeConfig",
    "ChannelReply",
    "ContentResolver",
    "FileSystemProvider",
    "Intent",
    "MethodChannel",
    "OpenableColumns",
    "PendingShare",
    "ReferenceResolver",
    "ResolveResult",
    "ResourceReference",
    "ShareActivity",
]
