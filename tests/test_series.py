"""Tests for the closed-form theories (VSOP87, Pluto, lunar series, Kepler orbits)."""

from __future__ import annotations

import math

import numpy as np
import pytest

from ephemeris_engine.constants import (
    AUNIT,
    EARTH,
    JUPITER,
    MARS,
    MEAN_NODE,
    MOON,
    NEPTUNE,
    PLUTO,
    SATURN,
    SUN,
    URANUS,
    VENUS,
)
from ephemeris_engine.errors import BodyNotInFile, DateOutOfRange
from ephemeris_engine.series import (
    SERIES_END,
    SERIES_START,
    THEORY_KEPLER,
    THEORY_PLUTO_MEEUS,
    evaluate_series,
    series_position,
)
from ephemeris_engine.series.kepler import OrbitalElements, elements_position, solve_kepler
from ephemeris_engine.series.lunar_points import mean_node_longitude
from ephemeris_engine.series.moon import moon_ecliptic
from ephemeris_engine.series.pluto import pluto_heliocentric
from ephemeris_engine.series.vsop87_earth import earth_heliocentric
from ephemeris_engine.series.vsop87_planets import planet_heliocentric


def test_earth_heliocentric_meeus_example() -> None:
    """1992 October 13.0 TD: L = 19.9073 deg, B ~ 0, R = 0.99760775 AU."""

    lon, lat, rad = earth_heliocentric(2448908.5)
    assert math.degrees(lon) == pytest.approx(19.9073, abs=1e-3)
    assert abs(math.degrees(lat)) < 1e-3
    assert rad == pytest.approx(0.99760775, abs=1e-5)


def test_moon_meeus_example() -> None:
    """1992 April 12.0 TD: lambda = 133.1627 deg, beta = -3.2291 deg, 368409.7 km."""

    lon, lat, dist = moon_ecliptic(2448724.5)
    assert math.degrees(lon) == pytest.approx(133.162655, abs=1e-3)
    assert math.degrees(lat) == pytest.approx(-3.229126, abs=1e-3)
    assert dist * AUNIT / 1000.0 == pytest.approx(368409.7, abs=5.0)


def test_moon_distance_stays_in_range() -> None:
    for tjd in np.linspace(2460000.5, 2460030.5, 13):
        dist_km = np.linalg.norm(series_position(MOON, tjd)) * AUNIT / 1000.0
        assert 356000.0 < dist_km < 407000.0


def test_mean_node_regresses() -> None:
    """The mean node moves backward about 19.34 degrees per year."""

    start = mean_node_longitude(2451545.0)
    later = mean_node_longitude(2451545.0 + 365.25)
    motion = (later - start + 180.0) % 360.0 - 180.0
    assert motion == pytest.approx(-19.34, abs=0.05)


def test_sun_is_origin_and_earth_near_one_au() -> None:
    state = evaluate_series(EARTH, 2460000.5)
    assert not evaluate_series(SUN, 2460000.5).any()
    assert 0.98 < np.linalg.norm(state[:3]) < 1.02
    assert np.linalg.norm(state[3:]) * 365.25 / (2 * math.pi) == pytest.approx(1.0, abs=0.04)


def test_kepler_earth_close_to_vsop87() -> None:
    vsop = series_position(EARTH, 2460000.5)
    kepler = series_position(EARTH, 2460000.5, THEORY_KEPLER)
    assert np.linalg.norm(vsop - kepler) < 1e-3


def test_theory_mismatch() -> None:
    with pytest.raises(ValueError):
        series_position(MOON, 2460000.5, THEORY_KEPLER)
    with pytest.raises(ValueError):
        series_position(MEAN_NODE, 2460000.5, THEORY_KEPLER)


def test_series_range() -> None:
    evaluate_series(MARS, SERIES_START + 1.0)
    with pytest.raises(DateOutOfRange):
        evaluate_series(MARS, SERIES_END + 1.0)
    with pytest.raises(DateOutOfRange):
        evaluate_series(MARS, SERIES_START - 1.0)


def test_unknown_body() -> None:
    with pytest.raises(BodyNotInFile):
        series_position(12345, 2460000.5)


def test_solve_kepler() -> None:
    for e in (0.0, 0.1, 0.5, 0.95):
        for m in (0.1, 1.0, 3.0, -2.0):
            ecc = solve_kepler(m, e)
            assert ecc - e * math.sin(ecc) == pytest.approx(math.remainder(m, 2 * math.pi), abs=1e-11)


def test_orbital_elements_validation() -> None:
    with pytest.raises(ValueError):
        OrbitalElements(2451545.0, -1.0, 0.1, 0.0, 0.0, 0.0, 0.0)
    with pytest.raises(ValueError):
        OrbitalElements(2451545.0, 1.0, 1.0, 0.0, 0.0, 0.0, 0.0)


def test_circular_elements_keep_radius() -> None:
    """A circular orbit stays at distance a and returns after one period."""

    elements = OrbitalElements(2451545.0, 2.0, 0.0, 10.0, 30.0, 0.0, 0.0)
    period = 360.0 / elements.mean_motion
    start = elements_position(elements, 2451545.0)
    assert np.linalg.norm(start) == pytest.approx(2.0)
    assert np.linalg.norm(elements_position(elements, 2451545.0 + period / 3)) == pytest.approx(2.0)
    np.testing.assert_allclose(elements_position(elements, 2451545.0 + period), start, atol=1e-9)


def test_difference_velocity_is_exact_at_large_julian_days() -> None:
    """The velocity of a circular orbit has the two-body speed to 1e-9."""

    elements = OrbitalElements(2460000.5, 2.0, 0.0, 10.0, 30.0, 0.0, 0.0)
    speed = 2.0 * math.radians(elements.mean_motion)
    state = evaluate_series(SUN, 2460000.5, elements=elements)
    assert np.linalg.norm(state[3:]) == pytest.approx(speed, rel=1e-9)


def test_venus_meeus_example() -> None:
    """1992 December 20.0 TD: L = 26.11428 deg, B = -2.62070 deg, R = 0.724603 AU."""

    lon, lat, rad = planet_heliocentric(VENUS, 2448976.5)
    assert math.degrees(lon) == pytest.approx(26.11428, abs=3e-4)
    assert math.degrees(lat) == pytest.approx(-2.62070, abs=3e-4)
    assert rad == pytest.approx(0.724603, abs=2e-6)


def test_pluto_meeus_example() -> None:
    """1992 October 13.0 TD: l = 232.74009 deg, b = 14.58769 deg, r = 29.711383 AU."""

    lon, lat, rad = pluto_heliocentric(2448908.5)
    assert math.degrees(lon) == pytest.approx(232.74009, abs=2e-4)
    assert math.degrees(lat) == pytest.approx(14.58769, abs=2e-4)
    assert rad == pytest.approx(29.711383, abs=1e-5)


@pytest.mark.parametrize('body', [VENUS, MARS, JUPITER, SATURN, URANUS, NEPTUNE, PLUTO])
def test_planet_series_close_to_mean_orbits(body: int) -> None:
    """The periodic theories stay within the perturbations of the Kepler orbits."""

    tjd = 2460000.5
    series = series_position(body, tjd)
    kepler = series_position(body, tjd, THEORY_KEPLER)
    cos_angle = series @ kepler / np.linalg.norm(series) / np.linalg.norm(kepler)
    assert math.degrees(math.acos(min(cos_angle, 1.0))) < 1.5
    assert np.linalg.norm(series) == pytest.approx(np.linalg.norm(kepler), rel=0.02)


def test_pluto_theory_range() -> None:
    """Outside 1885..2099 Pluto falls back to its mean orbit unless the theory is asked for."""

    tjd = 2415020.5 - 36525.0
    np.testing.assert_array_equal(
        series_position(PLUTO, tjd), series_position(PLUTO, tjd, THEORY_KEPLER)
    )
    with pytest.raises(DateOutOfRange):
        series_position(PLUTO, tjd, THEORY_PLUTO_MEEUS)


def test_outer_planet_velocity_matches_mean_motion() -> None:
    """Jupiter moves about 0.083 deg/day around the Sun."""

    state = evaluate_series(JUPITER, 2460000.5)
    rate = np.linalg.norm(np.cross(state[:3], state[3:])) / np.linalg.norm(state[:3]) ** 2
    assert math.degrees(rate) == pytest.approx(0.0831, abs=0.01)
