"""Tests for calendar conversion, time scales and date parsing."""

from __future__ import annotations

import pytest

from ephemeris_engine import time_utils
from ephemeris_engine.constants import SECONDS_PER_DAY
from ephemeris_engine.context import EngineContext
from ephemeris_engine.epoch import TT, UT, Epoch


def test_ensure_leapsecs_sets_spice_ut_model(monkeypatch: pytest.MonkeyPatch) -> None:
    """Leap-second init selects the SPICE UT model before loading the kernel."""

    calls: list[tuple[str, tuple[object, ...]]] = []

    def _set_ut_model(model: str, future: object = None) -> None:
        del future
        calls.append(('set_ut_model', (model,)))

    def _load_lsk(path: str | None = None) -> None:
        calls.append(('load_lsk', (path,)))

    monkeypatch.setattr('julian.set_ut_model', _set_ut_model)
    monkeypatch.setattr('julian.load_lsk', _load_lsk)
    monkeypatch.setattr('ephemeris_engine.time_utils.get_leapsecs_path', lambda: 'dummy.tls')
    monkeypatch.setattr(time_utils, '_leapsecs_loaded', False)

    time_utils._ensure_leapsecs()

    assert calls[0] == ('set_ut_model', ('SPICE',))
    assert calls[1] == ('load_lsk', ('dummy.tls',))
    assert time_utils._leapsecs_loaded


def test_ensure_leapsecs_falls_back_to_bundled(monkeypatch: pytest.MonkeyPatch) -> None:
    paths: list[str | None] = []

    def _load_lsk(path: str | None = None) -> None:
        paths.append(path)
        if path is not None:
            raise OSError('unreadable')

    monkeypatch.setattr('julian.set_ut_model', lambda model, future=None: None)
    monkeypatch.setattr('julian.load_lsk', _load_lsk)
    monkeypatch.setattr('ephemeris_engine.time_utils.get_leapsecs_path', lambda: 'bad.tls')
    monkeypatch.setattr(time_utils, '_leapsecs_loaded', False)

    time_utils._ensure_leapsecs()

    assert paths == ['bad.tls', None]


def test_julday_and_revjul() -> None:
    assert time_utils.julday(2000, 1, 1, 12.0) == 2451545.0
    assert time_utils.julday(1582, 10, 15) == 2299160.5
    assert time_utils.revjul(2451545.0) == (2000, 1, 1, 12.0)
    y, m, d, hour = time_utils.revjul(time_utils.julday(1987, 6, 19, 13.5))
    assert (y, m, d) == (1987, 6, 19)
    assert hour == pytest.approx(13.5)


def test_tt_ut_round_trip(ctx: EngineContext) -> None:
    ut = Epoch.ut(2460400.25)
    tt = time_utils.to_tt(ut, ctx)
    assert tt.scale == TT
    assert (tt.jd - ut.jd) * SECONDS_PER_DAY == pytest.approx(69.2, abs=0.2)
    back = time_utils.to_ut(tt, ctx)
    assert back.scale == UT
    assert back.jd == pytest.approx(ut.jd, abs=1e-10)
    assert time_utils.to_tt(tt, ctx) is tt


def test_override_delta_t(ctx: EngineContext) -> None:
    ctx.set_delta_t_userdef(0.5)
    assert time_utils.to_tt(Epoch.ut(2451545.0), ctx).jd == 2451545.5


def test_utc_to_jd_applies_leap_seconds(ctx: EngineContext) -> None:
    """From 1972 on TT - UTC is 32.184 s plus the accumulated leap seconds."""

    jd_tt, jd_ut = time_utils.utc_to_jd(2017, 1, 1, 0, 0, 0.0, ctx)
    utc = time_utils.julday(2017, 1, 1)
    assert (jd_tt - utc) * SECONDS_PER_DAY == pytest.approx(69.184, abs=0.01)
    assert (jd_tt - jd_ut) * SECONDS_PER_DAY == pytest.approx(ctx.delta_t(jd_ut) * SECONDS_PER_DAY)


def test_jd_to_utc_inverts_utc_to_jd(ctx: EngineContext) -> None:
    jd_tt, _ = time_utils.utc_to_jd(2024, 4, 8, 18, 17, 20.5, ctx)
    y, m, d, h, mi, s = time_utils.jd_to_utc(jd_tt)
    assert (y, m, d, h, mi) == (2024, 4, 8, 18, 17)
    assert s == pytest.approx(20.5, abs=1e-3)


def test_utc_before_1972_is_ut(ctx: EngineContext) -> None:
    jd_tt, jd_ut = time_utils.utc_to_jd(1900, 1, 1, 12, 0, 0.0, ctx)
    assert jd_ut == 2415021.0
    assert jd_tt > jd_ut - 1e-3


def test_parse_date_accepts_iso_z_suffix(ctx: EngineContext) -> None:
    """ISO-8601 trailing Z parses as UTC like the same timestamp without Z."""

    with_z = time_utils.parse_date('2022-08-18T00:01:47Z', ctx)
    without_z = time_utils.parse_date('2022-08-18T00:01:47', ctx)
    assert with_z == without_z
    assert with_z.scale == UT


def test_parse_date_rejects_garbage(ctx: EngineContext) -> None:
    with pytest.raises(ValueError):
        time_utils.parse_date('not a date', ctx)


def test_format_jd() -> None:
    assert time_utils.format_jd(2451545.0) == '2000-01-01 12:00:00.0'
    assert time_utils.format_jd(2451545.5 - 0.01 / SECONDS_PER_DAY) == '2000-01-02 00:00:00.0'
