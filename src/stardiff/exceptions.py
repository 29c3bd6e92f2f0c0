"""Custom exception hierarchy for stardiff."""

from __future__ import annotations


class StarDiffError(Exception):
    """Base exception for all stardiff errors."""


class StarDiffConfigError(StarDiffError):
    """Invalid or missing configuration."""


class SnapshotDecodeError(StarDiffError):
    """Input record is not a JSON object with integer ``stars`` and ``forks``."""

    def __init__(self, message: str, *, payload: str = "") -> None:
        self.payload = payload
        super().__init__(message)


class NotificationEncodeError(StarDiffError):
    """Serializing an outgoing notification failed."""


class LifecycleError(StarDiffError):
    """Host wiring misuse (hooks called twice, or out of order).

    These are programming defects, not data problems; callers must not
    retry them.
    """


class AlreadyInitializedError(LifecycleError):
    """The shared accumulator was initialized a second time."""


class NotInitializedError(LifecycleError):
    """The shared accumulator was accessed before initialization."""


class StateLockError(StarDiffError):
    """The accumulator lock is poisoned.

    Raised on every call after an earlier caller failed while holding the
    lock. The stored baseline is left as it was; it is never repaired
    automatically.
    """
