"""Closed-form theories for bodies without binary ephemeris coverage.

evaluate_series returns J2000 equatorial states in AU and AU/day:
heliocentric for the Sun, Earth, planets and user element sets, geocentric
for the Moon and the mean lunar node and apogee. Velocities come from a
symmetric difference of positions.
"""

from __future__ import annotations

import numpy as np

from ephemeris_engine.constants import (
    DAYS_PER_JULIAN_CENTURY,
    EARTH,
    EARTH_MOON_MRAT,
    J2000,
    MEAN_APOG,
    MEAN_NODE,
    MOON,
    MOON_SPEED_INTV,
    PLAN_SPEED_INTV,
    PLUTO,
    PREC_IAU_2006,
    SUN,
)
from ephemeris_engine.errors import BodyNotInFile, DateOutOfRange
from ephemeris_engine.series import kepler, lunar_points, moon, pluto, vsop87_earth, vsop87_planets
from ephemeris_engine.transforms.obliquity import EPS2000, mean_obliquity
from ephemeris_engine.transforms.precession import precession_matrix
from ephemeris_engine.transforms.vectors import polar_to_cart, rot_x

THEORY_VSOP87 = 'vsop87'
THEORY_ELP_MEEUS = 'elp-meeus'
THEORY_KEPLER = 'kepler'
THEORY_MEAN_LUNAR = 'mean-lunar'
THEORY_PLUTO_MEEUS = 'pluto-meeus'

# Span over which the theories are accepted (3000 BC .. AD 3000)
SERIES_START = J2000 - 50.0 * DAYS_PER_JULIAN_CENTURY
SERIES_END = J2000 + 10.0 * DAYS_PER_JULIAN_CENTURY

_DEFAULT_THEORY = {
    SUN: THEORY_VSOP87,
    EARTH: THEORY_VSOP87,
    MOON: THEORY_ELP_MEEUS,
    MEAN_NODE: THEORY_MEAN_LUNAR,
    MEAN_APOG: THEORY_MEAN_LUNAR,
    PLUTO: THEORY_PLUTO_MEEUS,
}
_DEFAULT_THEORY.update(dict.fromkeys(vsop87_planets.VSOP87_PLANETS, THEORY_VSOP87))

SERIES_BODIES = (SUN, EARTH, MOON, MEAN_NODE, MEAN_APOG, *kepler.KEPLER_BODIES)

# J2000 ecliptic -> J2000 equator
_ECL2000_TO_EQU = rot_x(-EPS2000)


def _of_date_to_j2000(lon: float, lat: float, dist: float, tjd: float) -> np.ndarray:
    """Ecliptic-of-date polar position to a J2000 equatorial rectangular position."""
    ecl = polar_to_cart(np.array([lon, lat, dist]))[:3]
    equ = rot_x(-mean_obliquity(tjd, PREC_IAU_2006)) @ ecl
    return precession_matrix(tjd, PREC_IAU_2006).T @ equ


def default_theory(body: int) -> str:
    """Theory used for body when none is requested."""
    return _DEFAULT_THEORY.get(body, THEORY_KEPLER)


def _moon_position(tjd: float) -> np.ndarray:
    return _of_date_to_j2000(*moon.moon_ecliptic(tjd), tjd)


def _earth_position(tjd: float, theory: str) -> np.ndarray:
    if theory == THEORY_KEPLER:
        emb = _ECL2000_TO_EQU @ kepler.planet_position(kepler.EMB, tjd)
        return emb - _moon_position(tjd) / (1.0 + EARTH_MOON_MRAT)
    return _of_date_to_j2000(*vsop87_earth.earth_heliocentric(tjd), tjd)


def series_position(
    body: int,
    tjd: float,
    theory: str | None = None,
    elements: kepler.OrbitalElements | None = None,
) -> np.ndarray:
    """Position (3 components, AU) of body from its closed-form theory.

    Parameters:
        body: Body number.
        tjd: Julian day (TT).
        theory: THEORY_* name, or None for the body's default.
        elements: OrbitalElements for a user-defined body.

    Raises:
        BodyNotInFile: No theory covers the body.
        ValueError: The theory does not apply to the body.
        DateOutOfRange: The Pluto theory was requested outside 1885..2099.
    """
    if elements is not None:
        return _ECL2000_TO_EQU @ kepler.elements_position(elements, tjd)
    requested = theory
    theory = theory or default_theory(body)
    if body == SUN:
        return np.zeros(3)
    if body == EARTH:
        if theory not in (THEORY_VSOP87, THEORY_KEPLER):
            raise ValueError(f'Theory {theory!r} does not apply to the Earth')
        return _earth_position(tjd, theory)
    if body == MOON:
        if theory != THEORY_ELP_MEEUS:
            raise ValueError(f'Theory {theory!r} does not apply to the Moon')
        return _moon_position(tjd)
    if body in (MEAN_NODE, MEAN_APOG):
        if theory != THEORY_MEAN_LUNAR:
            raise ValueError(f'Theory {theory!r} does not apply to lunar points')
        polar = lunar_points.mean_node(tjd) if body == MEAN_NODE else lunar_points.mean_apogee(tjd)
        return _of_date_to_j2000(*polar, tjd)
    if body == PLUTO and theory == THEORY_PLUTO_MEEUS:
        if pluto.pluto_in_range(tjd):
            return _ECL2000_TO_EQU @ polar_to_cart(np.array(pluto.pluto_heliocentric(tjd)))[:3]
        if requested is not None:
            raise DateOutOfRange(f'jd {tjd:.6f} outside the Pluto theory range 1885..2099')
        theory = THEORY_KEPLER
    if body in vsop87_planets.VSOP87_PLANETS and theory == THEORY_VSOP87:
        return _of_date_to_j2000(*vsop87_planets.planet_heliocentric(body, tjd), tjd)
    if body in kepler.KEPLER_BODIES:
        if theory != THEORY_KEPLER:
            raise ValueError(f'Theory {theory!r} does not apply to body {body}')
        return _ECL2000_TO_EQU @ kepler.planet_position(body, tjd)
    raise BodyNotInFile(f'No closed-form theory for body {body}')


def evaluate_series(
    body: int,
    tjd: float,
    theory: str | None = None,
    elements: kepler.OrbitalElements | None = None,
) -> np.ndarray:
    """State of body (6 components, AU and AU/day) from its closed-form theory.

    Raises:
        DateOutOfRange: tjd outside SERIES_START..SERIES_END.
        BodyNotInFile: No theory covers the body.
    """
    if tjd < SERIES_START or tjd > SERIES_END:
        raise DateOutOfRange(
            f'jd {tjd:.6f} outside the closed-form series range {SERIES_START:.1f}..{SERIES_END:.1f}'
        )
    step = MOON_SPEED_INTV if body in (MOON, EARTH) else PLAN_SPEED_INTV
    out = np.zeros(6, dtype=np.float64)
    out[:3] = series_position(body, tjd, theory, elements)
    # tjd +- step is rounded near JD 2.4e6; divide by the actual spacing
    t_ahead, t_behind = tjd + step, tjd - step
    ahead = series_position(body, t_ahead, theory, elements)
    behind = series_position(body, t_behind, theory, elements)
    out[3:] = (ahead - behind) / (t_ahead - t_behind)
    return out
