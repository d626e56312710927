"""Longitude and node crossings of the Sun, the Moon and the planets.

Each search starts from a mean-motion estimate and refines it by Newton
steps on the body's longitude (or latitude) speed until the remaining
distance is below CROSS_PRECISION. Times are Julian days in TT, or in UT
when ``ut`` is set.
"""

from __future__ import annotations

import logging

import numpy as np

from ephemeris_engine.constants import (
    BODY_NAMES,
    CHIRON,
    FLG_EQUATORIAL,
    FLG_HELCTR,
    FLG_RADIANS,
    FLG_SPEED,
    FLG_XYZ,
    LUNAR_POINTS,
    MOON,
    SUN,
)
from ephemeris_engine.context import EngineContext, get_context
from ephemeris_engine.errors import (
    BodyUnsupportedForCenter,
    NumericNonConvergence,
    SearchNotFound,
)
from ephemeris_engine.pipeline import calc, calc_ut
from ephemeris_engine.transforms.vectors import degnorm, difdeg2n

logger = logging.getLogger(__name__)

CROSS_PRECISION = 1.0 / 3600000.0  # degrees
SUN_MEAN_SPEED = 360.0 / 365.24  # degrees/day
MOON_MEAN_SPEED = 360.0 / 27.32
CHIRON_MEAN_SPEED = 0.01971

MAX_NEWTON_ITER = 60
MAX_NODE_SCAN_DAYS = 30

_OUTPUT_BITS = FLG_EQUATORIAL | FLG_XYZ | FLG_RADIANS


def _ecliptic(jd: float, body: int, flags: int, ctx: EngineContext, ut: bool) -> np.ndarray:
    """Polar ecliptic position and speed in degrees, raising on failure."""
    compute = calc_ut if ut else calc
    return compute(jd, body, (flags & ~_OUTPUT_BITS) | FLG_SPEED, ctx).unwrap()


def _refine_longitude(
    body: int, x2cross: float, jd: float, flags: int, ctx: EngineContext, ut: bool
) -> float:
    for _ in range(MAX_NEWTON_ITER):
        x = _ecliptic(jd, body, flags, ctx, ut)
        dist = difdeg2n(x2cross, x[0])
        jd += dist / x[3]
        if abs(dist) < CROSS_PRECISION:
            return jd
    raise NumericNonConvergence(
        f'Longitude crossing of body {body} over {x2cross} did not converge'
    )


def solcross(
    x2cross: float,
    jd: float,
    flags: int = 0,
    ctx: EngineContext | None = None,
    ut: bool = False,
) -> float:
    """Next time after jd at which the Sun's apparent longitude equals x2cross.

    Parameters:
        x2cross: Ecliptic longitude in degrees.
        jd: Start time.
        flags: Calculation flags (SIDEREAL, J2000, backend bits, ...).
        ctx: Engine context; None uses the default one.
        ut: jd and the result are in UT instead of TT.

    Raises:
        EphemerisError: The position cannot be computed, or the iteration
            does not converge.
    """
    ctx = ctx or get_context()
    x = _ecliptic(jd, SUN, flags, ctx, ut)
    start = jd + degnorm(x2cross - x[0]) / SUN_MEAN_SPEED
    return _refine_longitude(SUN, x2cross, start, flags, ctx, ut)


def mooncross(
    x2cross: float,
    jd: float,
    flags: int = 0,
    ctx: EngineContext | None = None,
    ut: bool = False,
) -> float:
    """Next time after jd at which the Moon's apparent longitude equals x2cross."""
    ctx = ctx or get_context()
    x = _ecliptic(jd, MOON, flags, ctx, ut)
    start = jd + degnorm(x2cross - x[0]) / MOON_MEAN_SPEED
    return _refine_longitude(MOON, x2cross, start, flags, ctx, ut)


def mooncross_node(
    jd: float,
    flags: int = 0,
    ctx: EngineContext | None = None,
    ut: bool = False,
) -> tuple[float, float, float]:
    """Next passage of the Moon through the ecliptic (either node).

    Steps by one day until the latitude changes sign, then refines by Newton
    steps on the latitude speed.

    Returns:
        (time, longitude, latitude) at the crossing, angles in degrees.

    Raises:
        SearchNotFound: No sign change within MAX_NODE_SCAN_DAYS.
    """
    ctx = ctx or get_context()
    lat_start = _ecliptic(jd, MOON, flags, ctx, ut)[1]
    t = jd
    for _ in range(MAX_NODE_SCAN_DAYS):
        t += 1.0
        x = _ecliptic(t, MOON, flags, ctx, ut)
        if (x[1] >= 0.0) != (lat_start >= 0.0):
            break
    else:
        raise SearchNotFound(
            f'No lunar node passage within {MAX_NODE_SCAN_DAYS} days of {jd:.6f}'
        )
    for _ in range(MAX_NEWTON_ITER):
        t -= x[1] / x[4]
        x = _ecliptic(t, MOON, flags, ctx, ut)
        if abs(x[1]) < CROSS_PRECISION:
            return t, float(x[0]), float(x[1])
    raise NumericNonConvergence(f'Lunar node passage after {jd:.6f} did not converge')


def helio_cross(
    body: int,
    x2cross: float,
    jd: float,
    flags: int = 0,
    direction: int = 1,
    ctx: EngineContext | None = None,
    ut: bool = False,
) -> float:
    """Time at which a planet's heliocentric longitude equals x2cross.

    Parameters:
        body: Planet or asteroid number.
        x2cross: Heliocentric ecliptic longitude in degrees.
        jd: Start time.
        flags: Calculation flags; HELCTR is added.
        direction: >= 0 searches forward from jd, < 0 backward.
        ctx: Engine context; None uses the default one.
        ut: jd and the result are in UT instead of TT.

    Raises:
        BodyUnsupportedForCenter: body is the Sun, the Moon or a lunar point.
    """
    if body in (SUN, MOON) or body in LUNAR_POINTS:
        name = BODY_NAMES.get(body, str(body))
        raise BodyUnsupportedForCenter(
            f'Heliocentric crossing not possible for object {body} = {name}'
        )
    ctx = ctx or get_context()
    flags |= FLG_HELCTR
    x = _ecliptic(jd, body, flags, ctx, ut)
    speed = CHIRON_MEAN_SPEED if body == CHIRON else x[3]
    dist = degnorm(x2cross - x[0])
    if direction >= 0:
        start = jd + dist / speed
    else:
        start = jd - (360.0 - dist) / speed
    logger.debug(
        'Heliocentric crossing of body %d over %.4f: first guess %.6f', body, x2cross, start
    )
    return _refine_longitude(body, x2cross, start, flags, ctx, ut)
