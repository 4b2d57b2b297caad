"""Command-line launcher.

Builds the launching intent from argv the way a desktop "open with" would,
runs it through ShareActivity and prints what the runtime would receive.
"""

from __future__ import annotations

import argparse
import os
import sys

from PySide6.QtCore import QCoreApplication

from pix_glance.activity import METHOD_GET_SHARED_DATA, ShareActivity
from pix_glance.config import BridgeConfig
from pix_glance.content_resolver import ContentResolver, FileSystemProvider
from pix_glance.intent import Intent
from pix_glance.logger import get_logger
from pix_glance.resolver import ReferenceResolver


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pix-glance", description="Resolve a shared image reference")
    parser.add_argument("--log-level", help="Set log level")
    parser.add_argument("--log-cats", help="Set log categories")
    parser.add_argument("--send", action="store_true", help="Deliver as a send intent instead of view")
    parser.add_argument("--type", dest="mime_type", default="image/*", help="MIME type for --send")
    parser.add_argument(
        "--provider",
        action="append",
        default=[],
        metavar="AUTHORITY=DIR",
        help="Serve content://AUTHORITY/... from DIR (repeatable)",
    )
    parser.add_argument("uri", help="file path, file:// or content:// URI")
    return parser


def _apply_logging_options(args: argparse.Namespace) -> None:
    # Reflected into the environment so get_logger() picks them up.
    if args.log_level:
        os.environ["PIX_GLANCE_LOG_LEVEL"] = args.log_level
    if args.log_cats:
        os.environ["PIX_GLANCE_LOG_CATS"] = args.log_cats


def build_content_resolver(specs: list[str]) -> ContentResolver:
    resolver = ContentResolver()
    for spec in specs:
        authority, sep, root = spec.partition("=")
        if not sep or not authority or not root:
            raise ValueError(f"invalid provider spec: {spec!r}")
        resolver.register(authority, FileSystemProvider(root))
    return resolver


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _apply_logging_options(args)
    logger = get_logger("main")

    app = QCoreApplication.instance() or QCoreApplication([sys.argv[0]])
    app.setApplicationName("pix_glance")

    try:
        content = build_content_resolver(args.provider)
    except ValueError as e:
        parser.error(str(e))

    config = BridgeConfig.from_env()
    activity = ShareActivity(ReferenceResolver(content, config), config)
    activity.configure_channel()

    intent = Intent.send(args.uri, args.mime_type) if args.send else Intent.view(args.uri)
    activity.on_create(intent)

    reply = activity.invoke(METHOD_GET_SHARED_DATA)
    if not reply.is_success or reply.value is None:
        logger.info("no shared data for %s", args.uri)
        return 1
    print(reply.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
