"""JSON codec for inbound snapshots and outbound notifications."""

from __future__ import annotations

import logging
from enum import StrEnum

from stardiff._redact import preview_payload
from stardiff.exceptions import NotificationEncodeError, SnapshotDecodeError
from stardiff.models.notification import Notification
from stardiff.models.snapshot import Snapshot

_logger = logging.getLogger(__name__)


class OutputFormat(StrEnum):
    """Shape of the serialized notification."""

    TEXT = "text"
    STRUCTURED = "structured"


def decode_snapshot(payload: bytes | bytearray | str) -> Snapshot:
    """Parse a record value into a :class:`Snapshot`.

    Raises :class:`SnapshotDecodeError` when the payload is not valid JSON,
    is not an object, or lacks integer ``stars``/``forks`` in range.
    """
    try:
        return Snapshot.model_validate_json(payload)
    except ValueError as exc:
        preview = preview_payload(payload)
        _logger.debug("Snapshot decode failed payload=%s", preview)
        raise SnapshotDecodeError(f"Invalid snapshot payload: {exc}", payload=preview) from exc


def encode_notification(notification: Notification, output_format: OutputFormat = OutputFormat.TEXT) -> bytes:
    """Serialize *notification* in the requested shape.

    ``TEXT`` yields ``{"result": "<text>"}``; ``STRUCTURED`` yields an object
    carrying only the counters that changed.
    """
    try:
        if output_format == OutputFormat.STRUCTURED:
            return notification.model_dump_json(exclude_none=True).encode("utf-8")
        return notification.to_text_notification().model_dump_json().encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise NotificationEncodeError(f"Could not encode notification: {exc}") from exc
