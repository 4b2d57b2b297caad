"""Project logger.

Everything logs through children of the ``pix_glance`` logger, which owns a
single stderr handler. PIX_GLANCE_LOG_LEVEL and PIX_GLANCE_LOG_CATS (comma
separated module suffixes, e.g. ``resolver,channel``) are re-read on every
``setup_logger`` call so ``--log-level``/``--log-cats`` can apply late.
"""

import logging
import os
import sys

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class _CategoryFilter(logging.Filter):
    def __init__(self, allowed: set[str]) -> None:
        super().__init__()
        self.allowed = allowed

    def filter(self, record: logging.LogRecord) -> bool:
        return record.name.rsplit(".", 1)[-1] in self.allowed


def _stderr_handler(logger: logging.Logger) -> logging.StreamHandler:
    for h in logger.handlers:
        if isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr:
            return h
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s: %(message)s", datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    return handler


def setup_logger(level: int = logging.INFO, name: str = "pix_glance") -> logging.Logger:
    logger = logging.getLogger(name)
    env_level = (os.getenv("PIX_GLANCE_LOG_LEVEL") or "").strip().lower()
    logger.setLevel(_LEVELS.get(env_level, level))

    handler = _stderr_handler(logger)
    handler.filters.clear()
    cats = {c.strip() for c in (os.getenv("PIX_GLANCE_LOG_CATS") or "").split(",") if c.strip()}
    if cats:
        handler.addFilter(_CategoryFilter(cats))

    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    base = setup_logger()
    return base if not name else base.getChild(name)
