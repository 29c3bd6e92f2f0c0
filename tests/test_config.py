from __future__ import annotations

import pytest

from stardiff.config import TransformConfig
from stardiff.exceptions import StarDiffConfigError
from stardiff.ingestion.codec import OutputFormat
from stardiff.state.policy import ColdStart, ReportedValue


def test_defaults() -> None:
    config = TransformConfig()

    assert config.output_format == OutputFormat.TEXT
    assert config.reported_value == ReportedValue.NEW
    assert config.cold_start == ColdStart.SENTINEL
    assert config.ignore_empty_snapshots is False


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STARDIFF_OUTPUT_FORMAT", "Structured")
    monkeypatch.setenv("STARDIFF_COLD_START", "zeroed")
    monkeypatch.setenv("STARDIFF_IGNORE_EMPTY_SNAPSHOTS", "yes")

    config = TransformConfig.from_env(reported_value="previous")

    assert config.output_format == OutputFormat.STRUCTURED
    assert config.cold_start == ColdStart.ZEROED
    assert config.reported_value == ReportedValue.PREVIOUS
    assert config.ignore_empty_snapshots is True


def test_from_env_rejects_unknown_choice(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STARDIFF_REPORTED_VALUE", "latest")

    with pytest.raises(StarDiffConfigError):
        TransformConfig.from_env()


def test_from_params_ignores_unknown_keys() -> None:
    base = TransformConfig(output_format=OutputFormat.STRUCTURED)

    config = TransformConfig.from_params(
        {"ignore_empty_snapshots": "true", "repository": "acme/widgets"},
        base=base,
    )

    assert config.output_format == OutputFormat.STRUCTURED
    assert config.ignore_empty_snapshots is True


def test_from_params_empty_returns_base() -> None:
    base = TransformConfig(cold_start=ColdStart.ZEROED)

    assert TransformConfig.from_params(None, base=base) is base


@pytest.mark.parametrize(("value", "expected"), [("false", False), ("OFF", False), ("1", True), (True, True)])
def test_ignore_empty_snapshots_parsed_from_strings(value: str | bool, expected: bool) -> None:
    config = TransformConfig.from_env(ignore_empty_snapshots=value)

    assert config.ignore_empty_snapshots is expected


def test_from_params_rejects_unparseable_bool() -> None:
    with pytest.raises(StarDiffConfigError):
        TransformConfig.from_params({"ignore_empty_snapshots": "maybe"})
