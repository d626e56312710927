"""Keplerian orbits: mean planetary elements with secular rates, and user-defined element sets.

The planetary elements (Standish, JPL) are referred to the J2000 ecliptic
and equinox and fit the DE ephemerides over 1800..2050 to within a few
arcminutes; outside that span they degrade slowly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from ephemeris_engine.constants import (
    AUNIT,
    DAYS_PER_JULIAN_CENTURY,
    DEGTORAD,
    HELGRAVCONST,
    J2000,
    JUPITER,
    MARS,
    MERCURY,
    NEPTUNE,
    PLUTO,
    SATURN,
    SECONDS_PER_DAY,
    URANUS,
    VENUS,
)
from ephemeris_engine.errors import NumericNonConvergence

# Index used for the Earth-Moon barycenter in the element table
EMB = -1

# a (AU), e, I, L, long. perihelion, long. node (degrees) and their rates per century
_ELEMENTS = {
    MERCURY: (
        (0.38709927, 0.20563593, 7.00497902, 252.25032350, 77.45779628, 48.33076593),
        (0.00000037, 0.00001906, -0.00594749, 149472.67411175, 0.16047689, -0.12534081),
    ),
    VENUS: (
        (0.72333566, 0.00677672, 3.39467605, 181.97909950, 131.60246718, 76.67984255),
        (0.00000390, -0.00004107, -0.00078890, 58517.81538729, 0.00268329, -0.27769418),
    ),
    EMB: (
        (1.00000261, 0.01671123, -0.00001531, 100.46457166, 102.93768193, 0.0),
        (0.00000562, -0.00004392, -0.01294668, 35999.37244981, 0.32327364, 0.0),
    ),
    MARS: (
        (1.52371034, 0.09339410, 1.84969142, -4.55343205, -23.94362959, 49.55953891),
        (0.00001847, 0.00007882, -0.00813131, 19140.30268499, 0.44441088, -0.29257343),
    ),
    JUPITER: (
        (5.20288700, 0.04838624, 1.30439695, 34.39644051, 14.72847983, 100.47390909),
        (-0.00011607, -0.00013253, -0.00183714, 3034.74612775, 0.21252668, 0.20469106),
    ),
    SATURN: (
        (9.53667594, 0.05386179, 2.48599187, 49.95424423, 92.59887831, 113.66242448),
        (-0.00125060, -0.00050991, 0.00193609, 1222.49362201, -0.41897216, -0.28867794),
    ),
    URANUS: (
        (19.18916464, 0.04725744, 0.77263783, 313.23810451, 170.95427630, 74.01692503),
        (-0.00196176, -0.00004397, -0.00242939, 428.48202785, 0.40805281, 0.04240589),
    ),
    NEPTUNE: (
        (30.06992276, 0.00859048, 1.77004347, -55.12002969, 44.96476227, 131.78422574),
        (0.00026291, 0.00005105, 0.00035372, 218.45945325, -0.32241464, -0.00508664),
    ),
    PLUTO: (
        (39.48211675, 0.24882730, 17.14001206, 238.92903833, 224.06891629, 110.30393684),
        (-0.00031596, 0.00005170, 0.00004818, 145.20780515, -0.04062942, -0.01183482),
    ),
}

KEPLER_BODIES = tuple(b for b in _ELEMENTS if b != EMB)

# Heliocentric gravitational parameter in AU^3/day^2
GM_SUN = HELGRAVCONST * SECONDS_PER_DAY**2 / AUNIT**3

# Sun / planet mass ratios (DE431); the Earth entry is the Earth-Moon system
SUN_TO_PLANET_MASS = {
    MERCURY: 6023600.0,
    VENUS: 408523.719,
    EMB: 328900.5614,
    MARS: 3098703.59,
    JUPITER: 1047.348644,
    SATURN: 3497.9018,
    URANUS: 22902.98,
    NEPTUNE: 19412.26,
    PLUTO: 136566000.0,
}

_KEPLER_TOLERANCE = 1e-12
_KEPLER_MAX_ITER = 50


@dataclass(frozen=True)
class OrbitalElements:
    """Osculating or mean Keplerian elements of a body orbiting the Sun.

    Angles in degrees, referred to the J2000 ecliptic and equinox.

    Parameters:
        epoch: Epoch of the elements (JD TT).
        a: Semi-major axis (AU).
        e: Eccentricity (< 1).
        i: Inclination.
        node: Longitude of the ascending node.
        peri: Argument of perihelion.
        mean_anomaly: Mean anomaly at epoch.
        name: Label used in output.
    """

    epoch: float
    a: float
    e: float
    i: float
    node: float
    peri: float
    mean_anomaly: float
    name: str = 'user body'

    def __post_init__(self) -> None:
        if self.a <= 0.0:
            raise ValueError(f'Semi-major axis must be positive, got {self.a}')
        if not 0.0 <= self.e < 1.0:
            raise ValueError(f'Eccentricity must be in [0, 1), got {self.e}')

    @property
    def mean_motion(self) -> float:
        """Mean daily motion in degrees per day."""
        return math.sqrt(GM_SUN / self.a**3) / DEGTORAD


def solve_kepler(mean_anomaly: float, e: float) -> float:
    """Eccentric anomaly (radians) from the mean anomaly (radians) by Newton iteration.

    Raises:
        NumericNonConvergence: No convergence within the iteration budget.
    """
    m = math.remainder(mean_anomaly, 2.0 * math.pi)
    ecc = m + e * math.sin(m) if e < 0.8 else math.pi
    for _ in range(_KEPLER_MAX_ITER):
        delta = (ecc - e * math.sin(ecc) - m) / (1.0 - e * math.cos(ecc))
        ecc -= delta
        if abs(delta) < _KEPLER_TOLERANCE:
            return ecc
    raise NumericNonConvergence(f'Kepler equation did not converge (M={mean_anomaly}, e={e})')


def orbit_position(
    a: float, e: float, incl: float, node: float, peri: float, mean_anomaly: float
) -> np.ndarray:
    """Heliocentric ecliptic position (AU) from elements (angles in radians)."""
    ecc = solve_kepler(mean_anomaly, e)
    xp = a * (math.cos(ecc) - e)
    yp = a * math.sqrt(1.0 - e * e) * math.sin(ecc)
    cw, sw = math.cos(peri), math.sin(peri)
    cn, sn = math.cos(node), math.sin(node)
    ci, si = math.cos(incl), math.sin(incl)
    x = (cw * cn - sw * sn * ci) * xp + (-sw * cn - cw * sn * ci) * yp
    y = (cw * sn + sw * cn * ci) * xp + (-sw * sn + cw * cn * ci) * yp
    z = (sw * si) * xp + (cw * si) * yp
    return np.array([x, y, z])


def mean_elements(body: int, tjd: float) -> tuple[float, float, float, float, float, float]:
    """Mean elements of a planet (or EMB) at tjd.

    Returns:
        (a, e, inclination, node, argument of perihelion, mean anomaly);
        a in AU, angles in radians referred to the J2000 ecliptic.

    Raises:
        KeyError: No mean elements for body.
    """
    base, rates = _ELEMENTS[body]
    t = (tjd - J2000) / DAYS_PER_JULIAN_CENTURY
    a, e, incl, mean_lon, lon_peri, lon_node = (b + r * t for b, r in zip(base, rates))
    return (
        a,
        e,
        incl * DEGTORAD,
        lon_node * DEGTORAD,
        (lon_peri - lon_node) * DEGTORAD,
        (mean_lon - lon_peri) * DEGTORAD,
    )


def planet_position(body: int, tjd: float) -> np.ndarray:
    """Heliocentric J2000 ecliptic position (AU) of a planet (or EMB) from mean elements."""
    return orbit_position(*mean_elements(body, tjd))


def elements_position(elements: OrbitalElements, tjd: float) -> np.ndarray:
    """Heliocentric J2000 ecliptic position (AU) of a user-defined element set at tjd."""
    mean_anomaly = elements.mean_anomaly + elements.mean_motion * (tjd - elements.epoch)
    return orbit_position(
        elements.a,
        elements.e,
        elements.i * DEGTORAD,
        elements.node * DEGTORAD,
        elements.peri * DEGTORAD,
        mean_anomaly * DEGTORAD,
    )
