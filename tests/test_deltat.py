"""Tests for the Delta-T models."""

from __future__ import annotations

import logging

import pytest

from ephemeris_engine import deltat
from ephemeris_engine.constants import (
    DELTAT_OVERRIDE,
    DELTAT_POLYNOMIAL,
    DELTAT_TABLE,
    SECONDS_PER_DAY,
    TIDAL_DEFAULT,
)
from ephemeris_engine.time_utils import julday


def _seconds(year: int, model: str = DELTAT_TABLE, **kwargs: float) -> float:
    return deltat.delta_t(julday(year, 1, 1), model=model, **kwargs) * SECONDS_PER_DAY


def test_table_values() -> None:
    """Tabulated years reproduce the observed values."""

    assert _seconds(1900) == pytest.approx(-2.72, abs=0.05)
    assert _seconds(2000) == pytest.approx(63.83, abs=0.05)
    assert _seconds(2020) == pytest.approx(69.36, abs=0.05)


def test_polynomial_close_to_table() -> None:
    for year in (1850, 1950, 2005):
        assert _seconds(year, DELTAT_POLYNOMIAL) == pytest.approx(_seconds(year), abs=2.0)


def test_continuous_at_table_ends() -> None:
    """The long-term extrapolation is blended into both table ends."""

    for year in (deltat.TABLE_START, deltat.TABLE_END):
        before = deltat._table_seconds(year - 1e-6)
        after = deltat._table_seconds(year + 1e-6)
        assert before == pytest.approx(after, abs=0.01)


def test_warns_once_outside_table(caplog: pytest.LogCaptureFixture,
                                  monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(deltat, '_warned_eras', set())
    with caplog.at_level(logging.WARNING, logger='ephemeris_engine.deltat'):
        deltat._table_seconds(1000.0)
        deltat._table_seconds(900.0)
    messages = [r for r in caplog.records if 'Delta-T' in r.getMessage()]
    assert len(messages) == 1


def test_tidal_adjustment_only_before_1955() -> None:
    assert deltat.tidal_adjustment(2000.0, -23.8946) == 0.0
    assert deltat.tidal_adjustment(1700.0, TIDAL_DEFAULT) == 0.0
    assert deltat.tidal_adjustment(1700.0, -23.8946) != 0.0


def test_override() -> None:
    assert deltat.delta_t(2451545.0, model=DELTAT_OVERRIDE, override=0.001) == 0.001
    with pytest.raises(ValueError):
        deltat.delta_t(2451545.0, model=DELTAT_OVERRIDE)
    with pytest.raises(ValueError):
        deltat.delta_t(2451545.0, model='guess')


def test_ancient_values_follow_stephenson_2016() -> None:
    """Before the table the 2016 spline and its long-term parabola apply."""

    assert _seconds(-1000) == pytest.approx(25398.0, rel=0.005)
    assert _seconds(0) == pytest.approx(10557.0, rel=0.005)
    assert _seconds(500) == pytest.approx(5600.0, rel=0.01)


def test_spline_meets_parabola_at_minus_720() -> None:
    before = deltat._before_table(-720.0 - 1e-6)
    after = deltat._before_table(-720.0 + 1e-6)
    assert before == pytest.approx(after, abs=0.01)


def test_blend_into_table_start() -> None:
    assert _seconds(1600) == pytest.approx(89.4, abs=1.0)
    assert 89.0 < _seconds(1610) < 124.0
    assert _seconds(1620) == pytest.approx(124.0, abs=0.1)


def test_future_extrapolation() -> None:
    assert _seconds(2030) == pytest.approx(69.3, abs=0.5)
    assert _seconds(2100) == pytest.approx(93.0, abs=6.0)
    assert _seconds(2500) == pytest.approx(855.0, rel=0.06)


def test_no_kink_at_table_end() -> None:
    end = deltat.TABLE_END
    slope_before = (deltat._table_seconds(end) - deltat._table_seconds(end - 0.1)) / 0.1
    slope_after = (deltat._table_seconds(end + 0.1) - deltat._table_seconds(end)) / 0.1
    assert slope_before == pytest.approx(slope_after, abs=0.2)
