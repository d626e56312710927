"""Precession between J2000 and the mean equator/equinox of date.

The equatorial precession angles zeta, z and theta of each model build the
matrix P = R3(-z) R2(theta) R3(-zeta) that takes J2000 mean equatorial
vectors to the mean equator of date; its transpose goes back.
"""

from __future__ import annotations

import numpy as np

from ephemeris_engine.constants import (
    ARCSEC_TO_RAD,
    DAYS_PER_JULIAN_CENTURY,
    J2000,
    PREC_IAU_1976,
    PREC_IAU_2000,
    PREC_IAU_2006,
    PREC_NEWCOMB,
)
from ephemeris_engine.transforms.vectors import apply_matrix, rot_y, rot_z

# Step (days) of the central difference giving the precession rate
_RATE_STEP = 1.0


def _poly(t: float, coeffs: tuple[float, ...]) -> float:
    """Evaluate c0 + c1*t + c2*t^2 + ... by Horner's rule."""
    value = 0.0
    for c in reversed(coeffs):
        value = value * t + c
    return value


# (zeta, z, theta) polynomial coefficients in arcsec, T in Julian centuries from J2000
_ANGLES = {
    PREC_IAU_1976: (
        (0.0, 2306.2181, 0.30188, 0.017998),
        (0.0, 2306.2181, 1.09468, 0.018203),
        (0.0, 2004.3109, -0.42665, -0.041833),
    ),
    PREC_IAU_2000: (
        (2.5976176, 2306.0809506, 0.3019015, 0.0179663, -0.0000327, -0.0000002),
        (-2.5976176, 2306.0803226, 1.0947790, 0.0182273, 0.0000470, -0.0000003),
        (0.0, 2004.1917476, -0.4269353, -0.0418251, -0.0000601, -0.0000001),
    ),
    PREC_IAU_2006: (
        (2.650545, 2306.083227, 0.2988499, 0.01801828, -0.000005971, -0.0000003173),
        (-2.650545, 2306.077181, 1.0927348, 0.01826837, -0.000028596, -0.0000002904),
        (0.0, 2004.191903, -0.4294934, -0.04182264, -0.000007089, -0.0000001274),
    ),
    PREC_NEWCOMB: (
        (0.0, 2305.646, 0.302, 0.018),
        (0.0, 2305.646, 1.093, 0.018),
        (0.0, 2003.829, -0.426, -0.042),
    ),
}

# General precession in longitude (arcsec), T from J2000
_GENERAL_PRECESSION = (0.0, 5028.796195, 1.1054348, 0.00007964, -0.000023857, -0.0000000383)


def precession_angles(tjd: float, model: str = PREC_IAU_2006) -> tuple[float, float, float]:
    """Equatorial precession angles (zeta, z, theta) in radians from J2000 to tjd.

    Raises:
        ValueError: Unknown model.
    """
    coeffs = _ANGLES.get(model)
    if coeffs is None:
        raise ValueError(f'Unknown precession model {model!r}')
    t = (tjd - J2000) / DAYS_PER_JULIAN_CENTURY
    zeta, z, theta = (_poly(t, c) * ARCSEC_TO_RAD for c in coeffs)
    return zeta, z, theta


def precession_matrix(tjd: float, model: str = PREC_IAU_2006) -> np.ndarray:
    """Matrix taking J2000 mean equatorial vectors to the mean equator of tjd."""
    zeta, z, theta = precession_angles(tjd, model)
    return rot_z(-z) @ rot_y(theta) @ rot_z(-zeta)


def precession_matrix_rate(tjd: float, model: str = PREC_IAU_2006) -> np.ndarray:
    """Time derivative (per day) of precession_matrix."""
    ahead = precession_matrix(tjd + _RATE_STEP, model)
    behind = precession_matrix(tjd - _RATE_STEP, model)
    return (ahead - behind) / (2.0 * _RATE_STEP)


def precess_to_date(
    x: np.ndarray, tjd: float, model: str = PREC_IAU_2006, speed: bool = True
) -> np.ndarray:
    """Precess a J2000 equatorial state to the mean equator of tjd.

    Parameters:
        x: 6-element J2000 state.
        tjd: Target epoch (JD TT).
        model: PREC_* constant.
        speed: Add the rotation rate of the frame to the velocity.

    Returns:
        New 6-element state.
    """
    rate = precession_matrix_rate(tjd, model) if speed else None
    return apply_matrix(precession_matrix(tjd, model), x, rate)


def precess_to_j2000(
    x: np.ndarray, tjd: float, model: str = PREC_IAU_2006, speed: bool = True
) -> np.ndarray:
    """Precess a mean-of-date equatorial state at tjd back to J2000."""
    matrix = precession_matrix(tjd, model)
    rate = precession_matrix_rate(tjd, model).T if speed else None
    return apply_matrix(matrix.T, x, rate)


def general_precession(tjd: float) -> float:
    """Accumulated general precession in longitude since J2000, in degrees."""
    t = (tjd - J2000) / DAYS_PER_JULIAN_CENTURY
    return _poly(t, _GENERAL_PRECESSION) / 3600.0
