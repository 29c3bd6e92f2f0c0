"""Outbound notification models.

A :class:`Notification` is the structured form: one optional field per
counter, present only when that counter changed. :class:`TextNotification`
is the single-string form emitted by default.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

from stardiff._constants import FORK_LABEL, STAR_LABEL, TEXT_LINE_SEPARATOR


class Notification(BaseModel):
    """What changed between the baseline and an accepted snapshot."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    forks: int | None = None
    """Reported fork count, or ``None`` when forks did not change."""

    stars: int | None = None
    """Reported star count, or ``None`` when stars did not change."""

    @model_validator(mode="after")
    def _require_change(self) -> Notification:
        if self.forks is None and self.stars is None:
            raise ValueError("a notification must report at least one counter")
        return self

    def to_text(self) -> str:
        """Render as display text, forks listed before stars."""
        lines: list[str] = []
        if self.forks is not None:
            lines.append(f"{FORK_LABEL} {self.forks}")
        if self.stars is not None:
            lines.append(f"{STAR_LABEL} {self.stars}")
        return TEXT_LINE_SEPARATOR.join(lines)

    def to_text_notification(self) -> TextNotification:
        return TextNotification(result=self.to_text())


class TextNotification(BaseModel):
    """Single-string notification payload (``{"result": "..."}``)."""

    model_config = ConfigDict(frozen=True)

    result: str
