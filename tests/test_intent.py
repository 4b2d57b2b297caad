from __future__ import annotations

from PySide6.QtCore import QUrl

from pix_glance.intent import ACTION_SEND, ACTION_VIEW, EXTRA_STREAM, Intent, ResourceReference


def test_content_reference_parts():
    ref = ResourceReference("content://media/external/images/media/12")

    assert ref.is_content
    assert not ref.is_file
    assert ref.authority == "media"
    assert ref.path == "/external/images/media/12"


def test_parse_plain_absolute_path():
    ref = ResourceReference.parse("/storage/emulated/0/img.png")

    assert ref.is_file
    assert ref.path == "/storage/emulated/0/img.png"


def test_parse_accepts_qurl_and_reference():
    ref = ResourceReference.parse(QUrl("content://media/1"))

    assert ref.scheme == "content"
    assert ResourceReference.parse(ref) is ref


def test_scheme_is_case_insensitive():
    assert ResourceReference("FILE:///a.png").is_file


def test_intent_builders():
    view = Intent.view("/storage/a.png")
    assert view.action == ACTION_VIEW
    assert view.data.path == "/storage/a.png"

    send = Intent.send("content://media/1", "image/png")
    assert send.action == ACTION_SEND
    assert send.type == "image/png"
    assert send.stream_extra() == ResourceReference("content://media/1")


def test_stream_extra_coercion():
    assert Intent(action=ACTION_SEND).stream_extra() is None
    assert Intent(action=ACTION_SEND, extras={EXTRA_STREAM: None}).stream_extra() is None
    assert Intent(action=ACTION_SEND, extras={EXTRA_STREAM: b"raw"}).stream_extra() is None
    assert Intent(action=ACTION_SEND, extras={EXTRA_STREAM: "content://media/2"}).stream_extra().authority == "media"
