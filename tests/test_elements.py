"""Tests for osculating orbital elements and for orbital nodes and apsides."""

from __future__ import annotations

import math

import numpy as np
import pytest

from ephemeris_engine.constants import (
    EARTH,
    FLG_HELCTR,
    FLG_J2000,
    FLG_NONUT,
    FLG_SPEED,
    FLG_TRUEPOS,
    FLG_XYZ,
    MARS,
    MEAN_NODE,
    MOON,
    NODBIT_FOPOINT,
    NODBIT_MEAN,
    NODBIT_OSCU,
    SUN,
)
from ephemeris_engine.context import EngineContext
from ephemeris_engine.elements import (
    compute_orbital_elements,
    elements_from_state,
    nod_aps,
    orbit_points,
    osculating_points,
)
from ephemeris_engine.epoch import Epoch
from ephemeris_engine.pipeline import calc
from ephemeris_engine.series.kepler import GM_SUN, OrbitalElements


def test_circular_orbit() -> None:
    v = math.sqrt(GM_SUN / 2.0)
    result = elements_from_state(np.array([2.0, 0.0, 0.0, 0.0, v, 0.0]), GM_SUN, 2451545.0)
    assert result.ok
    assert result.a == pytest.approx(2.0)
    assert result.e == pytest.approx(0.0, abs=1e-12)
    assert result.i == pytest.approx(0.0)
    assert result.period == pytest.approx(2 * math.pi / math.sqrt(GM_SUN / 8.0))


def test_hyperbolic_orbit_has_no_period() -> None:
    v = 2.0 * math.sqrt(GM_SUN)
    result = elements_from_state(np.array([1.0, 0.0, 0.0, 0.0, v, 0.0]), GM_SUN, 2451545.0)
    assert result.e > 1.0
    assert math.isnan(result.period)
    assert math.isnan(result.mean_anomaly)


def test_registered_body_round_trip(ctx: EngineContext) -> None:
    """Elements of a registered body come back from its computed state."""

    elements = OrbitalElements(2460000.5, 2.77, 0.0785, 10.59, 80.3, 73.5, 20.0)
    body = ctx.register_elements(elements)
    result = compute_orbital_elements(body, Epoch.tt(2460000.5), ctx)
    assert result.ok
    assert result.a == pytest.approx(2.77, rel=1e-6)
    assert result.e == pytest.approx(0.0785, abs=1e-6)
    assert result.i == pytest.approx(10.59, abs=1e-5)
    assert result.node == pytest.approx(80.3, abs=1e-5)
    assert result.peri == pytest.approx(73.5, abs=1e-4)
    assert result.mean_anomaly == pytest.approx(20.0, abs=1e-4)


def test_mars_and_moon(ctx: EngineContext) -> None:
    mars = compute_orbital_elements(MARS, Epoch.tt(2460000.5), ctx)
    assert mars.a == pytest.approx(1.5237, abs=0.001)
    assert mars.e == pytest.approx(0.0934, abs=0.001)
    assert mars.period == pytest.approx(687.0, abs=1.0)
    moon = compute_orbital_elements(MOON, Epoch.tt(2460000.5), ctx)
    assert moon.ok
    assert 0.0024 < moon.a < 0.0028
    assert 0.02 < moon.e < 0.1


def test_failure_is_reported(ctx: EngineContext) -> None:
    result = compute_orbital_elements(SUN, Epoch.tt(2460000.5), ctx)
    assert not result.ok
    assert result.error == 'BodyUnsupportedForCenter'


J2000_HELIO = FLG_HELCTR | FLG_J2000 | FLG_NONUT
EPOCH = 2460000.5


def test_orbit_points_of_an_ellipse() -> None:
    """Perihelion 90 degrees past the node: both nodes lie at the semi-latus rectum."""

    node_hat = np.array([1.0, 0.0, 0.0])
    e_hat = np.array([0.0, 1.0, 0.0])
    asc, desc, peri, aphe = orbit_points(node_hat, e_hat, 2.0, 0.5, 1.5)
    np.testing.assert_allclose(asc, [1.5, 0.0, 0.0])
    np.testing.assert_allclose(desc, [-1.5, 0.0, 0.0])
    np.testing.assert_allclose(peri, [0.0, 1.0, 0.0])
    np.testing.assert_allclose(aphe, [0.0, -3.0, 0.0])
    focus = orbit_points(node_hat, e_hat, 2.0, 0.5, 1.5, fopoint=True)[3]
    np.testing.assert_allclose(focus, [0.0, -2.0, 0.0])


def test_open_orbit_has_no_aphelion() -> None:
    v = 2.0 * math.sqrt(GM_SUN)
    points = osculating_points(np.array([1.0, 0.0, 0.0, 0.0, v, 0.0]), GM_SUN)
    assert np.all(np.isnan(points[3]))
    np.testing.assert_allclose(points[2], [1.0, 0.0, 0.0], atol=1e-12)


def test_osculating_points_of_a_circular_orbit() -> None:
    v = math.sqrt(GM_SUN / 2.0)
    points = osculating_points(np.array([2.0, 0.0, 0.0, 0.0, v, 0.0]), GM_SUN)
    for point in points:
        assert np.linalg.norm(point) == pytest.approx(2.0)


def test_mars_osculating_apsides(ctx: EngineContext) -> None:
    """Heliocentric apsides of Mars sit at a(1-e) and a(1+e)."""

    result = nod_aps(EPOCH, MARS, NODBIT_OSCU, J2000_HELIO, ctx)
    assert result.ok
    assert result.perihelion[2] == pytest.approx(1.5237 * (1 - 0.0934), abs=0.003)
    assert result.aphelion[2] == pytest.approx(1.5237 * (1 + 0.0934), abs=0.003)
    assert result.ascending[0] == pytest.approx(49.5, abs=0.3)
    assert result.ascending[1] == pytest.approx(0.0, abs=1e-9)
    assert result.descending[0] == pytest.approx(229.5, abs=0.3)
    assert result.perihelion[0] == pytest.approx(336.1, abs=0.5)


def test_focal_point_replaces_aphelion(ctx: EngineContext) -> None:
    result = nod_aps(EPOCH, MARS, NODBIT_OSCU | NODBIT_FOPOINT, J2000_HELIO, ctx)
    assert result.aphelion[2] == pytest.approx(2 * 1.5237 * 0.0934, abs=0.003)
    aphelion = nod_aps(EPOCH, MARS, NODBIT_OSCU, J2000_HELIO, ctx).aphelion
    assert result.aphelion[0] == pytest.approx(aphelion[0], abs=1e-9)


def test_mean_and_osculating_nodes_agree_for_mars(ctx: EngineContext) -> None:
    mean = nod_aps(EPOCH, MARS, NODBIT_MEAN, J2000_HELIO, ctx)
    oscu = nod_aps(EPOCH, MARS, NODBIT_OSCU, J2000_HELIO, ctx)
    assert mean.ascending[0] == pytest.approx(oscu.ascending[0], abs=0.5)
    assert mean.perihelion[2] == pytest.approx(oscu.perihelion[2], abs=0.01)


def test_geocentric_points_are_shifted_by_the_earth(ctx: EngineContext) -> None:
    flags = FLG_XYZ | FLG_J2000 | FLG_NONUT
    helio = nod_aps(EPOCH, MARS, NODBIT_OSCU, flags | FLG_HELCTR, ctx)
    geo = nod_aps(EPOCH, MARS, NODBIT_OSCU, flags, ctx)
    earth = calc(EPOCH, EARTH, flags | FLG_HELCTR | FLG_TRUEPOS, ctx).unwrap()[:3]
    np.testing.assert_allclose(geo.perihelion[:3], helio.perihelion[:3] - earth, atol=1e-9)
    np.testing.assert_allclose(geo.ascending[:3], helio.ascending[:3] - earth, atol=1e-9)


def test_sun_stands_for_the_earth_orbit(ctx: EngineContext) -> None:
    sun = nod_aps(EPOCH, SUN, NODBIT_OSCU, J2000_HELIO, ctx)
    earth = nod_aps(EPOCH, EARTH, NODBIT_OSCU, J2000_HELIO, ctx)
    np.testing.assert_allclose(sun.perihelion, earth.perihelion)
    assert sun.perihelion[2] == pytest.approx(0.9833, abs=0.001)


def test_mean_lunar_node(ctx: EngineContext) -> None:
    """The Moon's mean ascending node is the mean node body, moving backward."""

    result = nod_aps(EPOCH, MOON, NODBIT_MEAN, FLG_SPEED | FLG_J2000 | FLG_NONUT, ctx)
    node = calc(EPOCH, MEAN_NODE, FLG_J2000 | FLG_NONUT | FLG_TRUEPOS, ctx).unwrap()
    assert result.ascending[0] == pytest.approx(node[0], abs=1e-6)
    assert result.descending[0] == pytest.approx((node[0] + 180.0) % 360.0, abs=1e-6)
    assert result.ascending[3] == pytest.approx(-0.0529, abs=0.005)
    assert result.perihelion[2] < result.aphelion[2]


def test_no_speeds_without_speed_flag(ctx: EngineContext) -> None:
    result = nod_aps(EPOCH, MARS, NODBIT_OSCU, J2000_HELIO, ctx)
    assert np.all(result.ascending[3:] == 0.0)


def test_invalid_requests(ctx: EngineContext) -> None:
    with pytest.raises(ValueError):
        nod_aps(EPOCH, MARS, 8, ctx=ctx)
    with pytest.raises(ValueError):
        nod_aps(EPOCH, MEAN_NODE, ctx=ctx)
