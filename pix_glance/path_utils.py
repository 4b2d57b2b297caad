"""Path helpers for staged files.

Keep this module free of Qt dependencies.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath, PureWindowsPath

_DRIVE_PREFIX_LEN = 2


def _normalize_drive_letter(path_str: str) -> str:
    # Normalize drive letter casing on Windows ("c:\\" -> "C:\\").
    if len(path_str) >= _DRIVE_PREFIX_LEN and path_str[1] == ":":
        return path_str[0].upper() + path_str[1:]
    return path_str


def abs_path(path: str | Path) -> Path:
    """Return an absolute path without requiring that it exists."""
    p = Path(path).expanduser()
    try:
        return p.resolve(strict=False)
    except OSError:
        return p.absolute()


def abs_path_str(path: str | Path) -> str:
    """Absolute, OS-native path string (Windows uses backslashes)."""
    return _normalize_drive_letter(str(abs_path(path)))


def safe_file_name(name: str | None, default: str) -> str:
    """Reduce a provider-supplied display name to a bare file name.

    Both separator styles are stripped so a name like ``..\\x.png`` or
    ``a/b.png`` cannot address anything outside the target directory.
    """
    if not name:
        return default
    candidate = PureWindowsPath(PurePosixPath(str(name)).name).name.strip()
    if candidate in ("", ".", "..") or "\x00" in candidate:
        return default
    return candidate


def staged_file_path(cache_dir: str | Path, display_name: str | None, default: str) -> Path:
    """Destination for a staged copy inside ``cache_dir``."""
    return abs_path(cache_dir) / safe_file_name(display_name, default)
