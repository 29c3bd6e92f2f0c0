"""Inbound metric snapshot model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from stardiff._constants import U32_MAX


class Snapshot(BaseModel):
    """One observation of a repository's cumulative counters.

    Fields outside ``stars``/``forks`` are ignored. Both counters are
    validated strictly: JSON strings, floats and booleans are rejected
    rather than coerced.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    stars: int = Field(..., ge=0, le=U32_MAX)
    """Cumulative star count."""

    forks: int = Field(..., ge=0, le=U32_MAX)
    """Cumulative fork count."""

    @property
    def is_empty(self) -> bool:
        """Whether both counters are zero."""
        return self.stars == 0 and self.forks == 0
