"""Pydantic models for stardiff records."""

from stardiff.models.notification import Notification, TextNotification
from stardiff.models.snapshot import Snapshot

__all__ = [
    "Notification",
    "Snapshot",
    "TextNotification",
]
