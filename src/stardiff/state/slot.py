"""Initialize-once holder for a shared accumulator.

Several pipeline instances in one process may share a slot. The first
initialization wins; later attempts are reported back to the caller as
:attr:`InitOutcome.ALREADY_INITIALIZED` instead of silently replacing the
accumulator.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from enum import StrEnum

from stardiff.exceptions import NotInitializedError
from stardiff.state.accumulator import ChangeAccumulator


class InitOutcome(StrEnum):
    INITIALIZED = "initialized"
    ALREADY_INITIALIZED = "already_initialized"


class AccumulatorSlot:
    """Holds at most one :class:`ChangeAccumulator` for its whole lifetime."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._accumulator: ChangeAccumulator | None = None

    @property
    def is_initialized(self) -> bool:
        return self._accumulator is not None

    def try_initialize(
        self,
        factory: Callable[[], ChangeAccumulator] = ChangeAccumulator,
    ) -> tuple[InitOutcome, ChangeAccumulator]:
        """Create the accumulator with *factory* unless one already exists.

        The factory is only called on the first successful initialization.
        The returned accumulator is always the one held by the slot.
        """
        with self._lock:
            if self._accumulator is not None:
                return InitOutcome.ALREADY_INITIALIZED, self._accumulator
            self._accumulator = factory()
            return InitOutcome.INITIALIZED, self._accumulator

    def get(self) -> ChangeAccumulator:
        accumulator = self._accumulator
        if accumulator is None:
            raise NotInitializedError("accumulator slot accessed before initialization")
        return accumulator
