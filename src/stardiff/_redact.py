"""Helpers for safe debug logging.

Record payloads come straight from the host and may be arbitrarily large or
not even text. This module renders them into a bounded, printable preview
before they reach logs or exception messages.
"""

from __future__ import annotations

from typing import Any

from stardiff._constants import MAX_LOGGED_PAYLOAD


def preview_payload(value: Any, *, max_string: int = MAX_LOGGED_PAYLOAD) -> str:
    """Return a truncated, printable rendering of *value*."""
    if value is None:
        return "<none>"

    if isinstance(value, (bytes, bytearray, memoryview)):
        text = bytes(value).decode("utf-8", errors="replace")
    else:
        text = str(value)

    if len(text) > max_string:
        return f"{text[:max_string]}…<truncated>"
    return text
