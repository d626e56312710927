"""Tests for angle helpers, rotations, precession, nutation and frame bias."""

from __future__ import annotations

import math

import numpy as np
import pytest

from ephemeris_engine.constants import (
    BIAS_IAU_2006,
    J2000,
    NUT_IAU_1980,
    NUT_SHORT,
    PREC_IAU_1976,
    PREC_IAU_2006,
)
from ephemeris_engine.transforms.bias import bias_matrix, icrs_to_j2000, j2000_to_icrs
from ephemeris_engine.transforms.nutation import apply_nutation, nutation, nutation_matrix
from ephemeris_engine.transforms.obliquity import EPS2000, mean_obliquity
from ephemeris_engine.transforms.precession import precess_to_date, precess_to_j2000
from ephemeris_engine.transforms.sidereal import gmst_degrees
from ephemeris_engine.transforms.vectors import (
    cart_to_polar,
    degnorm,
    difdeg2n,
    difrad2n,
    ecliptic_to_equatorial,
    equatorial_to_ecliptic,
    polar_to_cart,
    radnorm,
)

STATE = np.array([0.8, -0.55, 0.23, 0.0091, 0.0133, -0.0007])


def test_degnorm_and_difdeg2n() -> None:
    assert degnorm(-30.0) == pytest.approx(330.0)
    assert degnorm(720.0) == 0.0
    assert radnorm(-math.pi / 2) == pytest.approx(1.5 * math.pi)
    assert difdeg2n(10.0, 350.0) == pytest.approx(20.0)
    assert difdeg2n(350.0, 10.0) == pytest.approx(-20.0)
    assert difdeg2n(180.0, 0.0) == pytest.approx(-180.0)
    assert difrad2n(0.1, 2 * math.pi - 0.1) == pytest.approx(0.2)


def test_polar_rectangular_round_trip() -> None:
    """Rectangular -> polar -> rectangular recovers position and velocity."""

    polar = cart_to_polar(STATE)
    assert 0.0 <= polar[0] < 2 * math.pi
    np.testing.assert_allclose(polar_to_cart(polar), STATE, rtol=1e-10, atol=1e-15)


def test_ecliptic_equatorial_round_trip() -> None:
    eps = mean_obliquity(2460000.5)
    there = equatorial_to_ecliptic(STATE, eps)
    np.testing.assert_allclose(ecliptic_to_equatorial(there, eps), STATE, rtol=1e-10)


def test_equatorial_pole_seen_from_ecliptic() -> None:
    """The celestial pole lies at ecliptic latitude 90 - eps, longitude 90."""

    pole = equatorial_to_ecliptic(np.array([0.0, 0.0, 1.0, 0.0, 0.0, 0.0]), EPS2000)
    polar = cart_to_polar(pole)
    assert polar[0] == pytest.approx(math.pi / 2)
    assert polar[1] == pytest.approx(math.pi / 2 - EPS2000)


def test_obliquity_at_j2000() -> None:
    assert mean_obliquity(J2000, PREC_IAU_2006) == pytest.approx(EPS2000, abs=1e-12)
    assert math.degrees(mean_obliquity(J2000, PREC_IAU_1976)) == pytest.approx(23.4392911, abs=1e-6)


@pytest.mark.parametrize('model', [PREC_IAU_2006, PREC_IAU_1976])
def test_precession_round_trip(model: str) -> None:
    tjd = J2000 + 36525.0 * 1.7
    there = precess_to_date(STATE, tjd, model, speed=False)
    np.testing.assert_allclose(precess_to_j2000(there, tjd, model, speed=False), STATE, rtol=1e-10)


def test_precession_of_equinox_over_a_century() -> None:
    """A J2000 ecliptic direction gains about 1.397 degrees of longitude per century."""

    tjd = J2000 + 36525.0
    star = ecliptic_to_equatorial(np.array([1.0, 0.0, 0.0, 0.0, 0.0, 0.0]), EPS2000)
    of_date = precess_to_date(star, tjd, PREC_IAU_2006, speed=False)
    lon = cart_to_polar(equatorial_to_ecliptic(of_date, mean_obliquity(tjd)))[0]
    assert math.degrees(lon) == pytest.approx(1.3970, abs=0.002)


def test_nutation_magnitude() -> None:
    """Nutation in longitude stays within about 17.2 + 1.3 arcseconds."""

    for tjd in (2451545.0, 2455000.0, 2460000.0):
        dpsi, deps = nutation(tjd, NUT_IAU_1980)
        assert abs(math.degrees(dpsi) * 3600) < 19.0
        assert abs(math.degrees(deps) * 3600) < 10.5
        short_dpsi, _ = nutation(tjd, NUT_SHORT)
        assert math.degrees(abs(short_dpsi - dpsi)) * 3600 < 1.0


def test_nutation_matrix_inverse() -> None:
    tjd = 2460000.5
    dpsi, deps = nutation(tjd)
    matrix = nutation_matrix(mean_obliquity(tjd), dpsi, deps)
    true = apply_nutation(STATE, matrix)
    np.testing.assert_allclose(apply_nutation(true, matrix, inverse=True), STATE, rtol=1e-12)


def test_nutation_unknown_model() -> None:
    with pytest.raises(ValueError):
        nutation(J2000, 'iau3000')


def test_frame_bias_is_small_rotation() -> None:
    matrix = bias_matrix(BIAS_IAU_2006)
    np.testing.assert_allclose(matrix @ matrix.T, np.eye(3), atol=1e-15)
    shifted = icrs_to_j2000(STATE)
    assert 0.0 < np.abs(shifted - STATE).max() < 1e-6
    np.testing.assert_allclose(j2000_to_icrs(shifted), STATE, rtol=1e-14)
    with pytest.raises(ValueError):
        bias_matrix('bogus')


def test_gmst_at_j2000() -> None:
    assert gmst_degrees(J2000) == pytest.approx(280.46061837, abs=1e-8)
