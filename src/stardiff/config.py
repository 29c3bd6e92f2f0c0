"""Transformer configuration for stardiff."""

from __future__ import annotations

import dataclasses
import logging
import os
from collections.abc import Mapping
from enum import StrEnum
from typing import Any, TypeVar

from stardiff._constants import ENV_PREFIX
from stardiff.exceptions import StarDiffConfigError
from stardiff.ingestion.codec import OutputFormat
from stardiff.state.policy import ColdStart, ReportedValue

_logger = logging.getLogger(__name__)

TEnum = TypeVar("TEnum", bound=StrEnum)

_TRUE_VALUES = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "n", "off"})


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def _to_bool(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise StarDiffConfigError(f"{field_name} must be a boolean; got {value!r}")


def _to_enum(enum_cls: type[TEnum], value: Any, field_name: str) -> TEnum:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise StarDiffConfigError(f"{field_name} must be one of: {choices}; got {value!r}") from None


@dataclasses.dataclass(frozen=True)
class TransformConfig:
    """Transformer configuration.

    Parameters
    ----------
    output_format : OutputFormat
        ``text`` emits ``{"result": "<text>"}``; ``structured`` emits
        ``{"forks": n, "stars": n}`` with unchanged counters omitted.
    reported_value : ReportedValue
        Whether a changed counter is reported with its ``new`` value or the
        ``previous`` (pre-update) one.
    cold_start : ColdStart
        ``sentinel`` adopts the first snapshot silently; ``zeroed`` starts
        from a ``(0, 0)`` baseline, so the first non-zero snapshot notifies.
    ignore_empty_snapshots : bool
        Treat an all-zero snapshot as not-yet-meaningful data: no
        notification and no baseline change.
    """

    output_format: OutputFormat = OutputFormat.TEXT
    reported_value: ReportedValue = ReportedValue.NEW
    cold_start: ColdStart = ColdStart.SENTINEL
    ignore_empty_snapshots: bool = False

    def __post_init__(self) -> None:
        # Accept plain strings from env/params/CLI and normalise them.
        object.__setattr__(self, "output_format", _to_enum(OutputFormat, self.output_format, "output_format"))
        object.__setattr__(self, "reported_value", _to_enum(ReportedValue, self.reported_value, "reported_value"))
        object.__setattr__(self, "cold_start", _to_enum(ColdStart, self.cold_start, "cold_start"))
        object.__setattr__(
            self,
            "ignore_empty_snapshots",
            _to_bool(self.ignore_empty_snapshots, "ignore_empty_snapshots"),
        )

    @classmethod
    def from_env(cls, **overrides: Any) -> TransformConfig:
        """Create configuration from ``STARDIFF_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        for field_name in ("output_format", "reported_value", "cold_start"):
            val = env.get(f"{ENV_PREFIX}{field_name.upper()}")
            if val is not None:
                config_kwargs[field_name] = val

        if "ignore_empty_snapshots" not in overrides:
            config_kwargs["ignore_empty_snapshots"] = _env_bool(
                env.get(f"{ENV_PREFIX}IGNORE_EMPTY_SNAPSHOTS"),
                False,
            )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)

    @classmethod
    def from_params(cls, params: Mapping[str, str] | None, *, base: TransformConfig | None = None) -> TransformConfig:
        """Create configuration from host startup parameters.

        Keys match the field names. Unknown keys are ignored, invalid
        values raise :class:`StarDiffConfigError`. Values not present in
        *params* are taken from *base* (defaults when omitted).
        """
        config = base or cls()
        if not params:
            return config

        known = {field.name for field in dataclasses.fields(cls)}
        changes: dict[str, Any] = {}
        for key, value in params.items():
            if key not in known:
                _logger.debug("Ignoring unknown startup parameter %s", key)
                continue
            changes[key] = value
        return dataclasses.replace(config, **changes)
