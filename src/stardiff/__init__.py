"""stardiff - Change notifications for repository star and fork counts."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("stardiff")
except PackageNotFoundError:
    __version__ = "0+local"
from stardiff.config import TransformConfig
from stardiff.exceptions import (
    AlreadyInitializedError,
    LifecycleError,
    NotificationEncodeError,
    NotInitializedError,
    SnapshotDecodeError,
    StarDiffConfigError,
    StarDiffError,
    StateLockError,
)
from stardiff.ingestion.codec import OutputFormat, decode_snapshot, encode_notification
from stardiff.models import Notification, Snapshot, TextNotification
from stardiff.state.accumulator import ChangeAccumulator
from stardiff.state.policy import ColdStart, ReportedValue
from stardiff.state.slot import AccumulatorSlot, InitOutcome
from stardiff.transform import ChangeTransform, Record

__all__ = [
    "__version__",
    "AccumulatorSlot",
    "AlreadyInitializedError",
    "ChangeAccumulator",
    "ChangeTransform",
    "ColdStart",
    "InitOutcome",
    "LifecycleError",
    "NotInitializedError",
    "Notification",
    "NotificationEncodeError",
    "OutputFormat",
    "Record",
    "ReportedValue",
    "Snapshot",
    "SnapshotDecodeError",
    "StarDiffConfigError",
    "StarDiffError",
    "StateLockError",
    "TextNotification",
    "TransformConfig",
    "decode_snapshot",
    "encode_notification",
]
