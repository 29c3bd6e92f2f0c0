"""Host adapter: per-record filter-map over a shared accumulator.

The hosting pipeline owns record framing and delivery. This module only
needs "here is a record" and answers with zero or one output record that
carries the input's routing key through unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator, Mapping
from dataclasses import dataclass

from stardiff.config import TransformConfig
from stardiff.exceptions import AlreadyInitializedError
from stardiff.ingestion.codec import decode_snapshot, encode_notification
from stardiff.state.accumulator import ChangeAccumulator
from stardiff.state.slot import AccumulatorSlot, InitOutcome

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Record:
    """A keyed record as exchanged with the host."""

    key: bytes | None
    value: bytes


class ChangeTransform:
    """Turn snapshot records into change notification records.

    Parameters
    ----------
    config
        Configuration used when the accumulator is created lazily (i.e. when
        :meth:`init` is never called) and as the base for :meth:`init`
        parameters.
    slot
        Accumulator slot to use. Pass the same slot to several transforms to
        have them share one baseline; by default each transform owns its own.
    """

    def __init__(self, config: TransformConfig | None = None, *, slot: AccumulatorSlot | None = None) -> None:
        self._config = config or TransformConfig()
        self._slot = slot if slot is not None else AccumulatorSlot()

    @property
    def config(self) -> TransformConfig:
        return self._config

    @property
    def slot(self) -> AccumulatorSlot:
        return self._slot

    def _create_accumulator(self) -> ChangeAccumulator:
        return ChangeAccumulator.from_config(self._config)

    def _accumulator(self) -> ChangeAccumulator:
        _outcome, accumulator = self._slot.try_initialize(self._create_accumulator)
        return accumulator

    def init(self, params: Mapping[str, str] | None = None) -> None:
        """One-time startup hook.

        Applies *params* on top of the constructor configuration and creates
        the shared accumulator. Raises :class:`AlreadyInitializedError` if
        the slot already holds one, whether from an earlier ``init`` or from
        records that were processed before this call.
        """
        config = TransformConfig.from_params(params, base=self._config)
        outcome, _ = self._slot.try_initialize(lambda: ChangeAccumulator.from_config(config))
        if outcome == InitOutcome.ALREADY_INITIALIZED:
            raise AlreadyInitializedError("accumulator is already initialized")
        self._config = config
        _logger.info(
            "Change transform initialized format=%s reported=%s cold_start=%s ignore_empty=%s",
            config.output_format,
            config.reported_value,
            config.cold_start,
            config.ignore_empty_snapshots,
        )

    def look_back(self, record: Record) -> None:
        """Seed the baseline from the most recent prior record.

        Emits nothing. Allowed once per shared accumulator, before any
        transform on the same slot has processed a record; otherwise raises
        :class:`LifecycleError`.
        """
        snapshot = decode_snapshot(record.value)
        self._accumulator().restore(snapshot)
        _logger.info("Baseline restored from look-back stars=%s forks=%s", snapshot.stars, snapshot.forks)

    def filter_map(self, record: Record) -> Record | None:
        """Process one record.

        Returns the notification record, or ``None`` when the host should
        drop the input. Decode and encode failures propagate.
        """
        snapshot = decode_snapshot(record.value)
        notification = self._accumulator().update(snapshot)
        if notification is None:
            return None
        return Record(key=record.key, value=encode_notification(notification, self._config.output_format))

    def process(self, records: Iterable[Record]) -> Iterator[Record]:
        """Yield output records for *records*, skipping dropped inputs."""
        for record in records:
            output = self.filter_map(record)
            if output is not None:
                yield output

    async def aprocess(self, records: AsyncIterable[Record]) -> AsyncIterator[Record]:
        """Async variant of :meth:`process` for hosts that deliver records on an event loop."""
        async for record in records:
            output = self.filter_map(record)
            if output is not None:
                yield output
