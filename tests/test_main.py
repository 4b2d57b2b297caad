from __future__ import annotations

from pathlib import Path

import pytest

from pix_glance import main as pg_main
from pix_glance.content_resolver import OpenableColumns
from pix_glance.intent import ResourceReference


@pytest.fixture(autouse=True)
def _cache_env(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("PIX_GLANCE_CACHE_DIR", str(tmp_path / "cache"))
    monkeypatch.delenv("PIX_GLANCE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PIX_GLANCE_LOG_CATS", raising=False)


def test_view_plain_path(capsys):
    rc = pg_main.main(["/storage/emulated/0/img.png"])

    assert rc == 0
    assert capsys.readouterr().out.strip() == "/storage/emulated/0/img.png"


def test_send_content_uri_with_provider(capsys, tmp_path: Path):
    shared = tmp_path / "shared"
    shared.mkdir()
    (shared / "photo.jpg").write_bytes(b"jpeg")

    rc = pg_main.main(
        ["--send", "--type", "image/jpeg", "--provider", f"files={shared}", "content://files/photo.jpg"]
    )

    assert rc == 0
    staged = Path(capsys.readouterr().out.strip())
    assert staged == (tmp_path / "cache" / "photo.jpg").resolve()
    assert staged.read_bytes() == b"jpeg"


def test_send_non_image_prints_nothing(capsys):
    rc = pg_main.main(["--send", "--type", "text/plain", "/storage/a.txt"])

    assert rc == 1
    assert capsys.readouterr().out == ""


def test_invalid_provider_spec_exits():
    with pytest.raises(SystemExit):
        pg_main.main(["--provider", "broken", "content://x/y"])


def test_build_content_resolver_registers_authorities(tmp_path: Path):
    (tmp_path / "p.png").write_bytes(b"png")
    resolver = pg_main.build_content_resolver([f"a={tmp_path}", f"b={tmp_path}"])

    for authority in ("a", "b"):
        ref = ResourceReference(f"content://{authority}/p.png")
        assert resolver.query(ref)[0][OpenableColumns.DISPLAY_NAME] == "p.png"
        with resolver.open_input_stream(ref) as stream:
            assert stream.read() == b"png"
    with pytest.raises(FileNotFoundError):
        resolver.query(ResourceReference("content://c/p.png"))
