"""Tests for compute_position: flags, centers, fallback and the error contract."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from ephemeris_engine.constants import (
    BACKEND_SERIES,
    BACKEND_SWEPH,
    EARTH,
    FLG_ASTROMETRIC,
    FLG_BARYCTR,
    FLG_EQUATORIAL,
    FLG_HELCTR,
    FLG_J2000,
    FLG_JPLEPH,
    FLG_NONUT,
    FLG_RADIANS,
    FLG_SERIES,
    FLG_SIDEREAL,
    FLG_SPEED,
    FLG_SWIEPH,
    FLG_TOPOCTR,
    FLG_TRUEPOS,
    FLG_XYZ,
    MARS,
    MEAN_NODE,
    MOON,
    PLUTO,
    SUN,
    VENUS,
)
from ephemeris_engine.context import EngineContext
from ephemeris_engine.epoch import Epoch
from ephemeris_engine.errors import BodyUnsupportedForCenter, FileNotFoundEphemeris
from ephemeris_engine.pipeline import calc, calc_ut, compute_position
from ephemeris_engine.time_utils import to_tt
from ephemeris_engine.transforms.nutation import nutation
from ephemeris_engine.transforms.obliquity import EPS2000, mean_obliquity
from ephemeris_engine.transforms.sidereal import get_ayanamsa
from ephemeris_engine.transforms.vectors import difdeg2n, equatorial_to_ecliptic

# 2024 March equinox, 03:06 UT
EQUINOX_2024_UT = 2460389.6292


def test_sun_at_march_equinox(ctx: EngineContext) -> None:
    """The apparent Sun crosses longitude 0 at the 2024 March equinox."""

    result = calc_ut(EQUINOX_2024_UT, SUN, FLG_SPEED, ctx)
    assert result.ok
    assert result.backend == BACKEND_SERIES
    assert abs(difdeg2n(result.values[0], 0.0)) < 0.003
    assert abs(result.values[1]) < 0.001
    assert result.values[2] == pytest.approx(0.9961, abs=0.001)
    assert result.values[3] == pytest.approx(0.9915, abs=0.01)


def test_equatorial_and_ecliptic_agree_on_distance(ctx: EngineContext) -> None:
    tjd = 2460400.5
    ecl = calc(tjd, MARS, FLG_SPEED, ctx).unwrap()
    equ = calc(tjd, MARS, FLG_SPEED | FLG_EQUATORIAL, ctx).unwrap()
    xyz = calc(tjd, MARS, FLG_SPEED | FLG_XYZ, ctx).unwrap()
    assert equ[2] == pytest.approx(ecl[2])
    assert np.linalg.norm(xyz[:3]) == pytest.approx(ecl[2])
    assert abs(equ[1] - ecl[1]) > 0.1


def test_radians(ctx: EngineContext) -> None:
    deg = calc(2460400.5, MARS, FLG_SPEED, ctx).unwrap()
    rad = calc(2460400.5, MARS, FLG_SPEED | FLG_RADIANS, ctx).unwrap()
    np.testing.assert_allclose(np.degrees(rad[:2]), deg[:2])
    assert rad[2] == deg[2]


def test_speed_zeroed_without_flag(ctx: EngineContext) -> None:
    values = calc(2460400.5, MARS, 0, ctx).unwrap()
    assert values[2] > 0.0
    assert not values[3:].any()


def test_j2000_differs_by_precession(ctx: EngineContext) -> None:
    """Longitudes of date run ahead of J2000 ones by about 50.3 arcsec a year."""

    of_date = calc(2460400.5, SUN, FLG_SPEED, ctx).unwrap()
    j2000 = calc(2460400.5, SUN, FLG_SPEED | FLG_J2000, ctx).unwrap()
    assert difdeg2n(of_date[0], j2000[0]) == pytest.approx(0.3375, abs=0.01)


def test_heliocentric_mars(ctx: EngineContext) -> None:
    values = calc(2460400.5, MARS, FLG_SPEED | FLG_HELCTR, ctx).unwrap()
    assert 1.38 < values[2] < 1.67
    bary = calc(2460400.5, MARS, FLG_SPEED | FLG_BARYCTR, ctx).unwrap()
    assert bary[2] == pytest.approx(values[2], abs=0.02)


def test_truepos_skips_light_time(ctx: EngineContext) -> None:
    apparent = calc(2460400.5, MARS, FLG_SPEED, ctx).unwrap()
    geometric = calc(2460400.5, MARS, FLG_SPEED | FLG_TRUEPOS, ctx).unwrap()
    shift = abs(difdeg2n(apparent[0], geometric[0]))
    assert 0.001 < shift < 0.05


def test_sidereal_longitude(ctx: EngineContext) -> None:
    epoch = Epoch.tt(2460400.5)
    tropical = compute_position(SUN, epoch, FLG_SPEED, ctx).unwrap()
    sidereal = compute_position(SUN, epoch, FLG_SPEED | FLG_SIDEREAL, ctx).unwrap()
    ayanamsa = get_ayanamsa(to_tt(epoch, ctx).jd, ctx)
    assert difdeg2n(tropical[0], sidereal[0]) == pytest.approx(ayanamsa, abs=0.01)


def test_topocentric_moon_parallax(ctx: EngineContext) -> None:
    ctx.set_topo(-0.1276, 51.5072, 11.0)
    geo = calc(2460400.5, MOON, FLG_SPEED, ctx).unwrap()
    topo = calc(2460400.5, MOON, FLG_SPEED | FLG_TOPOCTR, ctx).unwrap()
    separation = abs(difdeg2n(geo[0], topo[0])) + abs(geo[1] - topo[1])
    assert 0.05 < separation < 1.5
    assert topo[2] < geo[2] + 4.3e-5


def test_mean_node_moves_backward(ctx: EngineContext) -> None:
    values = calc(2460400.5, MEAN_NODE, FLG_SPEED, ctx).unwrap()
    assert values[1] == pytest.approx(0.0, abs=1e-9)
    assert values[3] == pytest.approx(-0.053, abs=0.002)


def test_unsupported_center_is_reported(ctx: EngineContext) -> None:
    """A heliocentric Moon fails in the result, and unwrap re-raises."""

    result = calc(2460400.5, MOON, FLG_SPEED | FLG_HELCTR, ctx)
    assert not result.ok
    assert result.error == 'BodyUnsupportedForCenter'
    assert not result.values.any()
    with pytest.raises(BodyUnsupportedForCenter):
        result.unwrap()
    assert calc(2460400.5, EARTH, FLG_SPEED, ctx).error == 'BodyUnsupportedForCenter'


def test_contradictory_flags(ctx: EngineContext) -> None:
    with pytest.raises(ValueError):
        calc(2460400.5, MARS, FLG_HELCTR | FLG_BARYCTR, ctx)
    with pytest.raises(ValueError):
        calc(2460400.5, MARS, FLG_JPLEPH | FLG_SWIEPH, ctx)
    with pytest.raises(ValueError):
        calc(2460400.5, MARS, FLG_TOPOCTR, ctx)
    with pytest.raises(ValueError):
        calc(2460400.5, 25, 0, ctx)


def test_fallback_to_series(caplog: pytest.LogCaptureFixture) -> None:
    """Without files the packed backend falls back and says so."""

    ctx = EngineContext(ephe_path='')
    assert ctx.backend == BACKEND_SWEPH
    with caplog.at_level(logging.WARNING, logger='ephemeris_engine.pipeline'):
        result = calc(2460400.5, MARS, FLG_SPEED, ctx)
    ctx.close()
    assert result.ok
    assert result.backend == BACKEND_SERIES
    assert result.flags & FLG_SERIES
    assert not result.flags & FLG_SWIEPH
    assert result.message.endswith('using closed-form series')
    assert any('falling back' in r.getMessage() for r in caplog.records)


def test_no_fallback_reports_missing_file() -> None:
    ctx = EngineContext(ephe_path='')
    ctx.set_backend(BACKEND_SWEPH, allow_fallback=False)
    result = calc(2460400.5, MARS, FLG_SPEED, ctx)
    ctx.close()
    assert not result.ok
    assert result.error == 'FileNotFoundEphemeris'
    assert result.backend == BACKEND_SWEPH
    with pytest.raises(FileNotFoundEphemeris):
        result.unwrap()


def test_results_are_cached_and_copied(ctx: EngineContext) -> None:
    first = calc(2460400.5, MARS, FLG_SPEED, ctx)
    assert len(ctx.cache) == 1
    first.values[0] = -1.0
    second = calc(2460400.5, MARS, FLG_SPEED, ctx)
    assert second.values[0] > 0.0
    assert ctx.cache.hits >= 1


def test_apparent_venus_meeus_example(ctx: EngineContext) -> None:
    """1992 December 20.0 TD: lambda = 313.08102 deg, beta = -2.08474 deg, 0.910947 AU."""

    values = calc(2448976.5, VENUS, FLG_SPEED, ctx).unwrap()
    assert abs(difdeg2n(values[0], 313.08102)) < 0.003
    assert values[1] == pytest.approx(-2.08474, abs=0.003)
    assert values[2] == pytest.approx(0.910947, abs=2e-5)


def test_apparent_moon_meeus_example(ctx: EngineContext) -> None:
    """1992 April 12.0 TD: apparent lambda = 133.167265 deg, beta = -3.229126 deg."""

    values = calc(2448724.5, MOON, FLG_SPEED, ctx).unwrap()
    assert abs(difdeg2n(values[0], 133.167265)) < 0.003
    assert values[1] == pytest.approx(-3.229126, abs=0.003)


def test_astrometric_pluto_meeus_example(ctx: EngineContext) -> None:
    """1992 October 13.0 TD: astrometric J2000 RA 232.93250 deg, declination -4.45806 deg."""

    flags = FLG_J2000 | FLG_NONUT | FLG_ASTROMETRIC | FLG_EQUATORIAL
    values = calc(2448908.5, PLUTO, flags, ctx).unwrap()
    assert abs(difdeg2n(values[0], 232.93250)) < 0.002
    assert values[1] == pytest.approx(-4.45806, abs=0.002)


@pytest.mark.parametrize('extra', [0, FLG_NONUT, FLG_J2000 | FLG_NONUT])
def test_equatorial_and_ecliptic_frames_agree(ctx: EngineContext, extra: int) -> None:
    """Rotating the equatorial vector by the obliquity in use gives the ecliptic vector."""

    tjd = 2460400.5
    flags = FLG_SPEED | FLG_XYZ | extra
    equ = calc(tjd, MARS, flags | FLG_EQUATORIAL, ctx).unwrap()
    ecl = calc(tjd, MARS, flags, ctx).unwrap()
    if extra & FLG_J2000:
        eps = EPS2000
    else:
        eps = mean_obliquity(tjd, ctx.precession_model)
        if not extra & FLG_NONUT:
            eps += nutation(tjd, ctx.nutation_model)[1]
    np.testing.assert_allclose(equatorial_to_ecliptic(equ, eps), ecl, rtol=0.0, atol=1e-12)


def test_results_do_not_depend_on_call_order(ctx: EngineContext) -> None:
    """A value is the same whatever was computed before it and whether or not it was cached."""

    tjd = 2460400.5
    fresh = EngineContext(ephe_path='')
    fresh.set_backend(BACKEND_SERIES)
    expected = calc(tjd, MARS, FLG_SPEED, fresh).unwrap()
    fresh.close()

    for body, when in ((MOON, tjd + 3.0), (SUN, tjd), (MARS, tjd - 40.0), (VENUS, tjd)):
        calc(when, body, FLG_SPEED | FLG_EQUATORIAL, ctx)
    calc(tjd, MARS, FLG_SPEED | FLG_XYZ, ctx)
    first = calc(tjd, MARS, FLG_SPEED, ctx).unwrap()
    cached = calc(tjd, MARS, FLG_SPEED, ctx).unwrap()
    ctx.cache.clear()
    recomputed = calc(tjd, MARS, FLG_SPEED, ctx).unwrap()
    np.testing.assert_array_equal(first, expected)
    np.testing.assert_array_equal(cached, expected)
    np.testing.assert_array_equal(recomputed, expected)


def test_output_format_is_part_of_the_cache_key(ctx: EngineContext) -> None:
    """Polar and rectangular results of one date are cached separately."""

    polar = calc(2460400.5, MARS, FLG_SPEED, ctx).unwrap()
    xyz = calc(2460400.5, MARS, FLG_SPEED | FLG_XYZ, ctx).unwrap()
    assert len(ctx.cache) == 2
    assert np.linalg.norm(xyz[:3]) == pytest.approx(polar[2])
    np.testing.assert_array_equal(calc(2460400.5, MARS, FLG_SPEED, ctx).unwrap(), polar)
