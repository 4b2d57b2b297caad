"""Bridge configuration.

Values come from the environment (PIX_GLANCE_*), never from a config file:
the bridge keeps no state across process restarts.
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from PySide6.QtCore import QStandardPaths

DEFAULT_CHANNEL = "app.channel.shared.data"
DEFAULT_STAGED_NAME = "temp_image"
IMAGE_MIME_PREFIX = "image/"


def default_cache_dir() -> Path:
    """Application-private cache directory as reported by Qt."""
    location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.CacheLocation)
    if location:
        return Path(location)
    return Path(tempfile.gettempdir()) / "pix_glance"


@dataclass
class BridgeConfig:
    channel_name: str = DEFAULT_CHANNEL
    cache_dir: Path = field(default_factory=default_cache_dir)
    default_staged_name: str = DEFAULT_STAGED_NAME
    image_mime_prefix: str = IMAGE_MIME_PREFIX

    @classmethod
    def from_env(cls) -> BridgeConfig:
        cfg = cls()
        cache_dir = (os.getenv("PIX_GLANCE_CACHE_DIR") or "").strip()
        if cache_dir:
            cfg.cache_dir = Path(cache_dir).expanduser()
        channel = (os.getenv("PIX_GLANCE_CHANNEL") or "").strip()
        if channel:
            cfg.channel_name = channel
        return cfg
