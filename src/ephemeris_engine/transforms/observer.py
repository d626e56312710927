"""Topocentric observer state in the J2000 frame."""

from __future__ import annotations

import math

import cspyce
import numpy as np

from ephemeris_engine.constants import (
    AUNIT,
    DEGTORAD,
    EARTH_OBLATENESS,
    EARTH_RADIUS_M,
    EARTH_ROT_SPEED,
    PREC_IAU_2006,
)
from ephemeris_engine.transforms.nutation import apply_nutation
from ephemeris_engine.transforms.precession import precess_to_j2000
from ephemeris_engine.transforms.sidereal import sidtime

EARTH_RADIUS_KM = EARTH_RADIUS_M / 1000.0
_KM_PER_AU = AUNIT / 1000.0


def geodetic_to_rect(lon_deg: float, lat_deg: float, alt_m: float) -> np.ndarray:
    """Earth-fixed rectangular position (km) of a geodetic location."""
    return np.array(
        cspyce.georec(
            lon_deg * DEGTORAD,
            lat_deg * DEGTORAD,
            alt_m / 1000.0,
            EARTH_RADIUS_KM,
            EARTH_OBLATENESS,
        ),
        dtype=np.float64,
    )


def observer_state(
    lon_deg: float,
    lat_deg: float,
    alt_m: float,
    tjd: float,
    jd_ut: float,
    eps_true: float,
    dpsi: float,
    nut_matrix: np.ndarray | None,
    precession_model: str = PREC_IAU_2006,
) -> np.ndarray:
    """Geocentric state of an observer on the rotating Earth, J2000 equatorial.

    Parameters:
        lon_deg, lat_deg, alt_m: Geodetic location.
        tjd: Julian day (TT) used for precession and nutation.
        jd_ut: Julian day (UT1) used for sidereal time.
        eps_true: True obliquity (radians).
        dpsi: Nutation in longitude (radians).
        nut_matrix: Nutation matrix of tjd, or None to skip nutation.
        precession_model: PREC_* constant.

    Returns:
        6-element state in AU and AU/day.
    """
    fixed = geodetic_to_rect(lon_deg, lat_deg, alt_m)
    gast = sidtime(jd_ut, eps_true, dpsi) * 15.0 * DEGTORAD
    c, s = math.cos(gast), math.sin(gast)
    x = np.zeros(6, dtype=np.float64)
    x[0] = fixed[0] * c - fixed[1] * s
    x[1] = fixed[0] * s + fixed[1] * c
    x[2] = fixed[2]
    x[3] = -EARTH_ROT_SPEED * x[1]
    x[4] = EARTH_ROT_SPEED * x[0]
    x /= _KM_PER_AU
    if nut_matrix is not None:
        x = apply_nutation(x, nut_matrix, inverse=True)
    return precess_to_j2000(x, tjd, precession_model, speed=False)
