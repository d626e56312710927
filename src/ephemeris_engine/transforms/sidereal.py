"""Sidereal time and the ayanamsa (sidereal zodiac offset)."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ephemeris_engine.constants import (
    DAYS_PER_JULIAN_CENTURY,
    DEGTORAD,
    J2000,
    RADTODEG,
    SIDM_DELUCE,
    SIDM_FAGAN_BRADLEY,
    SIDM_KRISHNAMURTI,
    SIDM_LAHIRI,
    SIDM_RAMAN,
    SIDM_USER,
)
from ephemeris_engine.transforms.precession import general_precession
from ephemeris_engine.transforms.vectors import degnorm

if TYPE_CHECKING:
    from ephemeris_engine.context import EngineContext

# Reference epoch (JD TT) and ayanamsa there (degrees) of each predefined mode
AYANAMSA_MODES = {
    SIDM_FAGAN_BRADLEY: (2433282.42346, 24.042044444),
    SIDM_LAHIRI: (2435553.5, 23.250182778 - 0.004658035),
    SIDM_DELUCE: (1721057.5, 0.0),
    SIDM_RAMAN: (2415020.0, 360.0 - 338.98556),
    SIDM_KRISHNAMURTI: (2415020.0, 360.0 - 337.636111),
}

AYANAMSA_NAMES = {
    SIDM_FAGAN_BRADLEY: 'Fagan/Bradley',
    SIDM_LAHIRI: 'Lahiri',
    SIDM_DELUCE: 'De Luce',
    SIDM_RAMAN: 'Raman',
    SIDM_KRISHNAMURTI: 'Krishnamurti',
    SIDM_USER: 'User-defined',
}


def gmst_degrees(jd_ut: float) -> float:
    """Greenwich mean sidereal time in degrees (IAU 1982 expression)."""
    d = jd_ut - J2000
    t = d / DAYS_PER_JULIAN_CENTURY
    theta = 280.46061837 + 360.98564736629 * d + 0.000387933 * t * t - t**3 / 38710000.0
    return degnorm(theta)


def sidtime(jd_ut: float, eps_true: float = 0.0, dpsi: float = 0.0) -> float:
    """Greenwich apparent sidereal time in hours.

    Parameters:
        jd_ut: Julian day (UT1).
        eps_true: True obliquity of date (radians).
        dpsi: Nutation in longitude (radians); zero gives mean sidereal time.

    Returns:
        Sidereal time in [0, 24) hours.
    """
    equation_of_equinoxes = dpsi * math.cos(eps_true) * RADTODEG
    return degnorm(gmst_degrees(jd_ut) + equation_of_equinoxes) / 15.0


def ayanamsa_reference(ctx: EngineContext) -> tuple[float, float]:
    """(t0, ayanamsa at t0) of the context's sidereal mode.

    Raises:
        ValueError: Unknown sidereal mode.
    """
    mode = ctx.sidereal.mode
    if mode == SIDM_USER:
        return (ctx.sidereal.t0, ctx.sidereal.ayan_t0)
    ref = AYANAMSA_MODES.get(mode)
    if ref is None:
        raise ValueError(f'Unknown sidereal mode {mode}')
    return ref


def get_ayanamsa(jd_tt: float, ctx: EngineContext) -> float:
    """Mean ayanamsa in degrees: the reference offset advanced by general precession."""
    t0, ayan_t0 = ayanamsa_reference(ctx)
    return ayan_t0 + general_precession(jd_tt) - general_precession(t0)


def ayanamsa_rate(jd_tt: float) -> float:
    """Rate of the ayanamsa in degrees per day."""
    step = 1.0
    return (general_precession(jd_tt + step) - general_precession(jd_tt - step)) / (2.0 * step)


def local_sidereal_radians(jd_ut: float, lon_deg: float, eps_true: float, dpsi: float) -> float:
    """Local apparent sidereal time in radians at east longitude lon_deg."""
    return degnorm(sidtime(jd_ut, eps_true, dpsi) * 15.0 + lon_deg) * DEGTORAD
