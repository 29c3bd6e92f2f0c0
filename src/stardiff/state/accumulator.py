"""Lock-guarded change accumulator.

Holds the baseline snapshot for one tracked repository and turns each
incoming snapshot into at most one :class:`Notification`.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from stardiff.exceptions import LifecycleError, StateLockError
from stardiff.models.notification import Notification
from stardiff.models.snapshot import Snapshot
from stardiff.state.policy import ColdStart, Decision, ReportedValue, evaluate

if TYPE_CHECKING:
    from stardiff.config import TransformConfig

_logger = logging.getLogger(__name__)


class ChangeAccumulator:
    """Compare-then-set store for the last accepted ``(stars, forks)`` pair.

    The compare and the set of both counters happen under a single lock, so
    concurrent callers sharing one accumulator always see the pair change
    atomically: for any given transition exactly one caller gets the
    notification.

    If an exception escapes while the lock is held the accumulator is
    poisoned and every later call raises :class:`StateLockError`.
    """

    def __init__(
        self,
        *,
        cold_start: ColdStart = ColdStart.SENTINEL,
        reported_value: ReportedValue = ReportedValue.NEW,
        ignore_empty_snapshots: bool = False,
    ) -> None:
        self._lock = threading.Lock()
        self._poisoned = False
        self._updated = False
        self._restored = False
        self._reported_value = reported_value
        self._ignore_empty_snapshots = ignore_empty_snapshots
        self._baseline: Snapshot | None = Snapshot(stars=0, forks=0) if cold_start == ColdStart.ZEROED else None

    @classmethod
    def from_config(cls, config: TransformConfig) -> ChangeAccumulator:
        return cls(
            cold_start=config.cold_start,
            reported_value=config.reported_value,
            ignore_empty_snapshots=config.ignore_empty_snapshots,
        )

    @contextmanager
    def _guard(self) -> Iterator[None]:
        with self._lock:
            if self._poisoned:
                raise StateLockError("accumulator lock poisoned by an earlier failure")
            try:
                yield
            except BaseException:
                self._poisoned = True
                raise

    @property
    def baseline(self) -> Snapshot | None:
        """Current baseline, or ``None`` before the first snapshot is adopted."""
        with self._guard():
            return self._baseline

    @property
    def is_poisoned(self) -> bool:
        return self._poisoned

    def update(self, snapshot: Snapshot) -> Notification | None:
        """Compare *snapshot* against the baseline and move the baseline forward.

        Returns a notification when forks and/or stars changed, ``None``
        otherwise (including on cold start and for ignored empty snapshots).
        """
        with self._guard():
            outcome = evaluate(
                baseline=self._baseline,
                incoming=snapshot,
                reported_value=self._reported_value,
                ignore_empty_snapshots=self._ignore_empty_snapshots,
            )
            self._baseline = outcome.baseline
            self._updated = True

        if outcome.decision == Decision.CHANGED:
            _logger.debug("Snapshot changed stars=%s forks=%s", snapshot.stars, snapshot.forks)
        else:
            _logger.debug("Snapshot %s stars=%s forks=%s", outcome.decision, snapshot.stars, snapshot.forks)
        return outcome.notification

    def seed(self, snapshot: Snapshot) -> None:
        """Overwrite the baseline without producing a notification."""
        with self._guard():
            self._baseline = snapshot
        _logger.debug("Baseline seeded stars=%s forks=%s", snapshot.stars, snapshot.forks)

    def restore(self, snapshot: Snapshot) -> None:
        """Seed the baseline from a replayed prior record.

        Allowed once per accumulator, and only before the first :meth:`update`;
        otherwise raises :class:`LifecycleError` and leaves the baseline as is.
        """
        with self._lock:
            if self._poisoned:
                raise StateLockError("accumulator lock poisoned by an earlier failure")
            if self._restored:
                raise LifecycleError("look-back already applied")
            if self._updated:
                raise LifecycleError("look-back must run before records are processed")
            self._baseline = snapshot
            self._restored = True
        _logger.debug("Baseline restored stars=%s forks=%s", snapshot.stars, snapshot.forks)
