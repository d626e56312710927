"""Nutation in longitude and obliquity, and the nutation matrix.

IAU 1980 theory (63 terms with the largest amplitudes first in the table;
summed from the smallest up), a four-term short series, or values read
from a JPL file by the caller.
"""

from __future__ import annotations

import math

import numpy as np

from ephemeris_engine.constants import (
    ARCSEC_TO_RAD,
    DAYS_PER_JULIAN_CENTURY,
    DEGTORAD,
    J2000,
    NUT_IAU_1980,
    NUT_JPL,
    NUT_SHORT,
)
from ephemeris_engine.transforms.vectors import apply_matrix, rot_x, rot_z

# Step (days) of the central difference giving the nutation matrix rate
_RATE_STEP = 0.01

# Multipliers of D, M, M', F, Omega; dpsi = (s + s1*T) sin(arg), deps = (c + c1*T) cos(arg),
# amplitudes in 0.0001 arcsec
_IAU1980_TERMS = (
    (0, 0, 0, 0, 1, -171996, -174.2, 92025, 8.9),
    (-2, 0, 0, 2, 2, -13187, -1.6, 5736, -3.1),
    (0, 0, 0, 2, 2, -2274, -0.2, 977, -0.5),
    (0, 0, 0, 0, 2, 2062, 0.2, -895, 0.5),
    (0, 1, 0, 0, 0, 1426, -3.4, 54, -0.1),
    (0, 0, 1, 0, 0, 712, 0.1, -7, 0.0),
    (-2, 1, 0, 2, 2, -517, 1.2, 224, -0.6),
    (0, 0, 0, 2, 1, -386, -0.4, 200, 0.0),
    (0, 0, 1, 2, 2, -301, 0.0, 129, -0.1),
    (-2, -1, 0, 2, 2, 217, -0.5, -95, 0.3),
    (-2, 0, 1, 0, 0, -158, 0.0, 0, 0.0),
    (-2, 0, 0, 2, 1, 129, 0.1, -70, 0.0),
    (0, 0, -1, 2, 2, 123, 0.0, -53, 0.0),
    (2, 0, 0, 0, 0, 63, 0.0, 0, 0.0),
    (0, 0, 1, 0, 1, 63, 0.1, -33, 0.0),
    (2, 0, -1, 2, 2, -59, 0.0, 26, 0.0),
    (0, 0, -1, 0, 1, -58, -0.1, 32, 0.0),
    (0, 0, 1, 2, 1, -51, 0.0, 27, 0.0),
    (-2, 0, 2, 0, 0, 48, 0.0, 0, 0.0),
    (0, 0, -2, 2, 1, 46, 0.0, -24, 0.0),
    (2, 0, 0, 2, 2, -38, 0.0, 16, 0.0),
    (0, 0, 2, 2, 2, -31, 0.0, 13, 0.0),
    (0, 0, 2, 0, 0, 29, 0.0, 0, 0.0),
    (-2, 0, 1, 2, 2, 29, 0.0, -12, 0.0),
    (0, 0, 0, 2, 0, 26, 0.0, 0, 0.0),
    (-2, 0, 0, 2, 0, -22, 0.0, 0, 0.0),
    (0, 0, -1, 2, 1, 21, 0.0, -10, 0.0),
    (0, 2, 0, 0, 0, 17, -0.1, 0, 0.0),
    (2, 0, -1, 0, 1, 16, 0.0, -8, 0.0),
    (-2, 2, 0, 2, 2, -16, 0.1, 7, 0.0),
    (0, 1, 0, 0, 1, -15, 0.0, 9, 0.0),
    (-2, 0, 1, 0, 1, -13, 0.0, 7, 0.0),
    (0, -1, 0, 0, 1, -12, 0.0, 6, 0.0),
    (0, 0, 2, -2, 0, 11, 0.0, 0, 0.0),
    (2, 0, -1, 2, 1, -10, 0.0, 5, 0.0),
    (2, 0, 1, 2, 2, -8, 0.0, 3, 0.0),
    (0, 1, 0, 2, 2, 7, 0.0, -3, 0.0),
    (-2, 1, 1, 0, 0, -7, 0.0, 0, 0.0),
    (0, -1, 0, 2, 2, -7, 0.0, 3, 0.0),
    (2, 0, 0, 2, 1, -7, 0.0, 3, 0.0),
    (2, 0, 1, 0, 0, 6, 0.0, 0, 0.0),
    (-2, 0, 2, 2, 2, 6, 0.0, -3, 0.0),
    (-2, 0, 1, 2, 1, 6, 0.0, -3, 0.0),
    (2, 0, -2, 0, 1, -6, 0.0, 3, 0.0),
    (2, 0, 0, 0, 1, -6, 0.0, 3, 0.0),
    (0, -1, 1, 0, 0, 5, 0.0, 0, 0.0),
    (-2, -1, 0, 2, 1, -5, 0.0, 3, 0.0),
    (-2, 0, 0, 0, 1, -5, 0.0, 3, 0.0),
    (0, 0, 2, 2, 1, -5, 0.0, 3, 0.0),
    (-2, 0, 2, 0, 1, 4, 0.0, 0, 0.0),
    (-2, 1, 0, 2, 1, 4, 0.0, 0, 0.0),
    (0, 0, 1, -2, 0, 4, 0.0, 0, 0.0),
    (-1, 0, 1, 0, 0, -4, 0.0, 0, 0.0),
    (-2, 1, 0, 0, 0, -4, 0.0, 0, 0.0),
    (1, 0, 0, 0, 0, -4, 0.0, 0, 0.0),
    (0, 0, 1, 2, 0, 3, 0.0, 0, 0.0),
    (0, 0, -2, 2, 2, -3, 0.0, 0, 0.0),
    (-1, -1, 1, 0, 0, -3, 0.0, 0, 0.0),
    (0, 1, 1, 0, 0, -3, 0.0, 0, 0.0),
    (0, -1, 1, 2, 2, -3, 0.0, 0, 0.0),
    (2, -1, -1, 2, 2, -3, 0.0, 0, 0.0),
    (0, 0, 3, 2, 2, -3, 0.0, 0, 0.0),
    (2, -1, 0, 2, 2, -3, 0.0, 0, 0.0),
)


def fundamental_arguments(t: float) -> tuple[float, float, float, float, float]:
    """Delaunay arguments D, M, M', F, Omega in radians for T centuries from J2000."""
    d = 297.85036 + 445267.111480 * t - 0.0019142 * t * t + t**3 / 189474.0
    m = 357.52772 + 35999.050340 * t - 0.0001603 * t * t - t**3 / 300000.0
    mm = 134.96298 + 477198.867398 * t + 0.0086972 * t * t + t**3 / 56250.0
    f = 93.27191 + 483202.017538 * t - 0.0036825 * t * t + t**3 / 327270.0
    om = 125.04452 - 1934.136261 * t + 0.0020708 * t * t + t**3 / 450000.0
    return (d * DEGTORAD, m * DEGTORAD, mm * DEGTORAD, f * DEGTORAD, om * DEGTORAD)


def nutation_iau1980(tjd: float) -> tuple[float, float]:
    """IAU 1980 nutation (dpsi, deps) in radians."""
    t = (tjd - J2000) / DAYS_PER_JULIAN_CENTURY
    d, m, mm, f, om = fundamental_arguments(t)
    dpsi = 0.0
    deps = 0.0
    for kd, km, kmm, kf, kom, s, s1, c, c1 in reversed(_IAU1980_TERMS):
        arg = kd * d + km * m + kmm * mm + kf * f + kom * om
        dpsi += (s + s1 * t) * math.sin(arg)
        deps += (c + c1 * t) * math.cos(arg)
    scale = 0.0001 * ARCSEC_TO_RAD
    return (dpsi * scale, deps * scale)


def nutation_short(tjd: float) -> tuple[float, float]:
    """Four-term nutation (dpsi, deps) in radians, accurate to about 0.5 arcsec."""
    t = (tjd - J2000) / DAYS_PER_JULIAN_CENTURY
    om = (125.04452 - 1934.136261 * t) * DEGTORAD
    ls = (280.4665 + 36000.7698 * t) * DEGTORAD
    lm = (218.3165 + 481267.8813 * t) * DEGTORAD
    dpsi = 0.21 * math.sin(2 * om) - 0.23 * math.sin(2 * lm) - 1.32 * math.sin(2 * ls) - 17.20 * math.sin(om)
    deps = -0.09 * math.cos(2 * om) + 0.10 * math.cos(2 * lm) + 0.57 * math.cos(2 * ls) + 9.20 * math.cos(om)
    return (dpsi * ARCSEC_TO_RAD, deps * ARCSEC_TO_RAD)


def nutation(tjd: float, model: str = NUT_IAU_1980) -> tuple[float, float]:
    """Nutation (dpsi, deps) in radians for the chosen theory.

    NUT_JPL is resolved by the caller from the JPL file; here it falls back
    to IAU 1980.

    Raises:
        ValueError: Unknown model.
    """
    if model in (NUT_IAU_1980, NUT_JPL):
        return nutation_iau1980(tjd)
    if model == NUT_SHORT:
        return nutation_short(tjd)
    raise ValueError(f'Unknown nutation model {model!r}')


def nutation_matrix(eps_mean: float, dpsi: float, deps: float) -> np.ndarray:
    """Matrix taking mean-of-date equatorial vectors to the true equator of date."""
    return rot_x(-(eps_mean + deps)) @ rot_z(-dpsi) @ rot_x(eps_mean)


def apply_nutation(
    x: np.ndarray,
    matrix: np.ndarray,
    rate: np.ndarray | None = None,
    inverse: bool = False,
) -> np.ndarray:
    """Rotate a state between mean and true equator of date.

    Parameters:
        x: 6-element state.
        matrix: nutation_matrix of the epoch.
        rate: Time derivative of the matrix (per day), or None.
        inverse: Go from true to mean instead.

    Returns:
        New 6-element state.
    """
    if inverse:
        return apply_matrix(matrix.T, x, None if rate is None else rate.T)
    return apply_matrix(matrix, x, rate)


def nutation_matrix_rate(tjd: float, eps_of, model: str = NUT_IAU_1980) -> np.ndarray:
    """Time derivative (per day) of the nutation matrix by central difference.

    Parameters:
        tjd: Julian day (TT).
        eps_of: Callable returning the mean obliquity (radians) of a Julian day.
        model: Nutation theory.
    """
    ahead = nutation_matrix(eps_of(tjd + _RATE_STEP), *nutation(tjd + _RATE_STEP, model))
    behind = nutation_matrix(eps_of(tjd - _RATE_STEP), *nutation(tjd - _RATE_STEP, model))
    return (ahead - behind) / (2.0 * _RATE_STEP)
