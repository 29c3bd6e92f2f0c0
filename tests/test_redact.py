from __future__ import annotations

from stardiff._redact import preview_payload


def test_preview_payload_decodes_bytes() -> None:
    assert preview_payload(b'{"stars": 1}') == '{"stars": 1}'


def test_preview_payload_replaces_invalid_utf8() -> None:
    assert preview_payload(b"\xff\xfe") == "��"


def test_preview_payload_truncates_long_strings() -> None:
    preview = preview_payload("x" * 600, max_string=10)

    assert preview.startswith("x" * 10)
    assert preview.endswith("<truncated>")


def test_preview_payload_none() -> None:
    assert preview_payload(None) == "<none>"
