"""Deterministic change-detection policy.

This module contains *no* payload parsing and holds no state. The
accumulator calls :func:`evaluate` while holding its lock and applies the
returned baseline.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from stardiff.models.notification import Notification
from stardiff.models.snapshot import Snapshot


class ReportedValue(StrEnum):
    """Which value of a changed counter a notification carries."""

    NEW = "new"
    PREVIOUS = "previous"


class ColdStart(StrEnum):
    """Initial posture of a freshly created accumulator."""

    ZEROED = "zeroed"
    SENTINEL = "sentinel"


class Decision(StrEnum):
    IGNORED_EMPTY = "ignored_empty"
    ADOPTED = "adopted"
    CHANGED = "changed"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class Outcome:
    """Result of comparing one snapshot against the baseline."""

    decision: Decision
    baseline: Snapshot | None
    notification: Notification | None = None


def evaluate(
    *,
    baseline: Snapshot | None,
    incoming: Snapshot,
    reported_value: ReportedValue,
    ignore_empty_snapshots: bool,
) -> Outcome:
    """Compare *incoming* against *baseline*.

    Rules, first match wins:
    - empty snapshot (both zero) with ``ignore_empty_snapshots``: keep baseline
    - no baseline yet (cold start): adopt incoming silently
    - forks and/or stars differ: report them, adopt incoming
    - otherwise: nothing to report
    """
    if ignore_empty_snapshots and incoming.is_empty:
        return Outcome(Decision.IGNORED_EMPTY, baseline)

    if baseline is None:
        return Outcome(Decision.ADOPTED, incoming)

    forks_changed = incoming.forks != baseline.forks
    stars_changed = incoming.stars != baseline.stars
    if not forks_changed and not stars_changed:
        return Outcome(Decision.UNCHANGED, baseline)

    source = baseline if reported_value == ReportedValue.PREVIOUS else incoming
    notification = Notification(
        forks=source.forks if forks_changed else None,
        stars=source.stars if stars_changed else None,
    )
    # Unchanged counters already equal the incoming ones, so adopting the
    # whole snapshot leaves them untouched.
    return Outcome(Decision.CHANGED, incoming, notification)
