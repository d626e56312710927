"""Lunar node and apogee: mean values from polynomials, osculating values from the Moon's state."""

from __future__ import annotations

import math

import numpy as np

from ephemeris_engine.constants import (
    AUNIT,
    DAYS_PER_JULIAN_CENTURY,
    DEGTORAD,
    EARTH_MOON_MRAT,
    GEOGCONST,
    J2000,
    SECONDS_PER_DAY,
)

MOON_INCLINATION = 5.1453964 * DEGTORAD
MOON_ECCENTRICITY = 0.054900489
MOON_MEAN_DISTANCE_AU = 384400.0 * 1000.0 / AUNIT

# Gravitational parameter of Earth + Moon in AU^3/day^2
GM_EARTH_MOON = GEOGCONST * (1.0 + 1.0 / EARTH_MOON_MRAT) * SECONDS_PER_DAY**2 / AUNIT**3


def mean_node_longitude(tjd: float) -> float:
    """Longitude of the mean ascending node (degrees, mean equinox of date)."""
    t = (tjd - J2000) / DAYS_PER_JULIAN_CENTURY
    return (
        125.0445479 - 1934.1362891 * t + 0.0020754 * t * t + t**3 / 467441.0 - t**4 / 60616000.0
    ) % 360.0


def mean_perigee_longitude(tjd: float) -> float:
    """Longitude of the mean perigee (degrees, mean equinox of date)."""
    t = (tjd - J2000) / DAYS_PER_JULIAN_CENTURY
    return (
        83.3532465 + 4069.0137287 * t - 0.0103200 * t * t - t**3 / 80053.0 + t**4 / 18999000.0
    ) % 360.0


def mean_node(tjd: float) -> tuple[float, float, float]:
    """Mean node as (longitude rad, latitude rad, distance AU) in the ecliptic of date."""
    return (mean_node_longitude(tjd) * DEGTORAD, 0.0, MOON_MEAN_DISTANCE_AU)


def mean_apogee(tjd: float) -> tuple[float, float, float]:
    """Mean apogee as (longitude rad, latitude rad, distance AU) in the ecliptic of date.

    The apogee lies in the mean lunar orbit, so its latitude follows from
    the inclination and its distance from the node.
    """
    node = mean_node_longitude(tjd) * DEGTORAD
    apogee = (mean_perigee_longitude(tjd) + 180.0) * DEGTORAD
    u = apogee - node
    lat = math.asin(math.sin(MOON_INCLINATION) * math.sin(u))
    lon = node + math.atan2(math.cos(MOON_INCLINATION) * math.sin(u), math.cos(u))
    dist = MOON_MEAN_DISTANCE_AU * (1.0 + MOON_ECCENTRICITY)
    return (lon % (2.0 * math.pi), lat, dist)


def osculating_node(moon: np.ndarray) -> np.ndarray:
    """Ascending node of the osculating lunar orbit.

    Parameters:
        moon: Geocentric ecliptic state of the Moon (AU, AU/day).

    Returns:
        Rectangular ecliptic position (3) of the node at the Moon's distance.
    """
    h = np.cross(moon[:3], moon[3:6])
    direction = np.array([-h[1], h[0], 0.0])
    norm = math.sqrt(float(direction @ direction))
    if norm == 0.0:
        return np.zeros(3)
    r = math.sqrt(float(moon[:3] @ moon[:3]))
    return direction / norm * r


def osculating_apogee(moon: np.ndarray) -> np.ndarray:
    """Apogee of the osculating lunar orbit.

    Parameters:
        moon: Geocentric ecliptic state of the Moon (AU, AU/day).

    Returns:
        Rectangular ecliptic position (3) of the apogee, at distance a(1 + e).
    """
    r_vec = moon[:3]
    v_vec = moon[3:6]
    r = math.sqrt(float(r_vec @ r_vec))
    v2 = float(v_vec @ v_vec)
    h = np.cross(r_vec, v_vec)
    ecc = np.cross(v_vec, h) / GM_EARTH_MOON - r_vec / r
    e = math.sqrt(float(ecc @ ecc))
    semi_major = 1.0 / (2.0 / r - v2 / GM_EARTH_MOON)
    if e == 0.0:
        return np.zeros(3)
    return -ecc / e * semi_major * (1.0 + e)
