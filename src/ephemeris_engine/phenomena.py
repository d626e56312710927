"""Planetary phenomena: phase, elongation, apparent diameter and visual magnitude.

Magnitudes follow Mallama and Hilton (2018) for the planets, Allen and
Samaha for the Moon; bodies without a photometric model get NaN.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import cspyce
import numpy as np

from ephemeris_engine.constants import (
    AUNIT,
    DAYS_PER_JULIAN_CENTURY,
    EARTH_RADIUS_M,
    FLG_EPHMASK,
    FLG_J2000,
    FLG_NOABERR,
    FLG_NOGDEFL,
    FLG_NONUT,
    FLG_TOPOCTR,
    FLG_TRUEPOS,
    FLG_XYZ,
    J2000,
    JUPITER,
    LUNAR_POINTS,
    MARS,
    MERCURY,
    MOON,
    NEPTUNE,
    PLUTO,
    RADTODEG,
    SATURN,
    SUN,
    URANUS,
    VENUS,
)
from ephemeris_engine.context import EngineContext, get_context
from ephemeris_engine.epoch import Epoch
from ephemeris_engine.errors import EphemerisError
from ephemeris_engine.pipeline import calc
from ephemeris_engine.search.riseset import BODY_DIAMETER_M
from ephemeris_engine.time_utils import to_tt
from ephemeris_engine.transforms.vectors import cart_to_polar

logger = logging.getLogger(__name__)

_ALLOWED_FLAGS = (
    FLG_EPHMASK | FLG_TRUEPOS | FLG_J2000 | FLG_NONUT | FLG_NOGDEFL | FLG_NOABERR | FLG_TOPOCTR
)

SUN_MAGNITUDE = -26.86  # at the mean distance
PLUTO_MAGNITUDE = -1.00  # at 1 AU from Sun and Earth, phase angle 0

# Neptune brightened by 0.11 mag between these dates
_NEPTUNE_FADE_START = 2444239.5
_NEPTUNE_FADE_END = 2451544.5


@dataclass
class PhenoResult:
    """Phenomena of a body seen from the Earth (or the observer).

    Parameters:
        ok: True when the values are valid.
        error: Error kind on failure, else None.
        message: Diagnostic text.
        phase_angle: Sun-body-Earth angle in degrees.
        phase: Illuminated fraction of the disc.
        elongation: Angular distance from the Sun in degrees.
        apparent_diameter: Diameter of the disc in degrees.
        magnitude: Apparent visual magnitude (NaN when unknown).
        horizontal_parallax: Moon only, in degrees; zero for other bodies.
    """

    ok: bool
    error: str | None = None
    message: str = ''
    phase_angle: float = 0.0
    phase: float = 0.0
    elongation: float = 0.0
    apparent_diameter: float = 0.0
    magnitude: float = math.nan
    horizontal_parallax: float = 0.0


def apparent_diameter(body: int, dist_au: float) -> float:
    """Apparent diameter of body's disc in degrees; 180 from inside the body."""
    diameter = BODY_DIAMETER_M.get(body, 0.0)
    if dist_au * AUNIT < diameter / 2.0:
        return 180.0
    return 2.0 * math.asin(diameter / 2.0 / AUNIT / dist_au) * RADTODEG


def _saturn_ring_tilt(tjd: float, geo: np.ndarray, helio: np.ndarray) -> float:
    """Sine of the ring-plane latitude, averaged between Earth and Sun."""
    t = (tjd - J2000) / DAYS_PER_JULIAN_CENTURY
    incl = math.radians(28.075216 - 0.012998 * t + 0.000004 * t * t)
    node = math.radians(169.508470 + 1.394681 * t + 0.000412 * t * t)

    def sin_b(polar: np.ndarray) -> float:
        lon, lat = polar[0], polar[1]
        in_ring_plane = math.sin(incl) * math.cos(lat) * math.sin(lon - node)
        return in_ring_plane - math.cos(incl) * math.sin(lat)

    return abs(math.sin((math.asin(sin_b(geo)) + math.asin(sin_b(helio))) / 2.0))


def magnitude(
    body: int,
    tjd: float,
    phase_angle: float,
    r: float,
    delta: float,
    diameter: float = 0.0,
    geo: np.ndarray | None = None,
    helio: np.ndarray | None = None,
) -> float:
    """Apparent visual magnitude.

    Parameters:
        body: Body number.
        tjd: Julian day (TT).
        phase_angle: Phase angle in degrees.
        r: Distance from the Sun (AU).
        delta: Distance from the observer (AU).
        diameter: Apparent diameter in degrees (the Sun only).
        geo, helio: Geocentric and heliocentric ecliptic polar positions
            in radians (Saturn only).

    Returns:
        Magnitude, or NaN for a body without a photometric model.
    """
    a = phase_angle
    if body == SUN:
        mean_diameter = 2.0 * math.asin(BODY_DIAMETER_M[SUN] / 2.0 / AUNIT) * RADTODEG
        return SUN_MAGNITUDE - 2.5 * math.log10((diameter / mean_diameter) ** 2)
    distance = 5.0 * math.log10(r * delta)
    if body == MOON:
        if a <= 147.1385465:
            mag = -21.62 + 0.026 * abs(a) + 4e-9 * a**4
        else:
            mag = -4.5444 - 2.5 * math.log10((180.0 - a) ** 3)
        return mag + 5.0 * math.log10(r * delta * AUNIT / EARTH_RADIUS_M)
    if body == MERCURY:
        mag = (
            -0.613
            + 6.3280e-02 * a
            - 1.6336e-03 * a**2
            + 3.3644e-05 * a**3
            - 3.4265e-07 * a**4
            + 1.6893e-09 * a**5
            - 3.0334e-12 * a**6
        )
    elif body == VENUS:
        if a <= 163.7:
            mag = -4.384 - 1.044e-03 * a + 3.687e-04 * a**2 - 2.814e-06 * a**3 + 8.938e-09 * a**4
        else:
            mag = 236.05828 - 2.81914 * a + 8.39034e-03 * a**2
        if a > 179.0:
            logger.warning('Venus magnitude at phase angle %.1f is outside the model range', a)
    elif body == MARS:
        if a <= 50.0:
            mag = -1.601 + 0.02267 * a - 0.0001302 * a**2
        else:
            mag = -0.367 - 0.02573 * a + 0.0003445 * a**2
    elif body == JUPITER:
        mag = -9.395 - 3.7e-04 * a + 6.16e-04 * a**2
    elif body == SATURN:
        if geo is None or helio is None:
            raise ValueError('Saturn magnitude needs the geocentric and heliocentric positions')
        sin_b = _saturn_ring_tilt(tjd, geo, helio)
        mag = -8.914 - 1.825 * sin_b + 0.026 * a - 0.378 * sin_b * math.exp(-2.25 * a)
    elif body == URANUS:
        # mean sub-Earth latitude effect
        mag = -7.110 + 6.587e-3 * a + 1.045e-4 * a**2 - 0.05
    elif body == NEPTUNE:
        if tjd < _NEPTUNE_FADE_START:
            mag = -6.89
        elif tjd <= _NEPTUNE_FADE_END:
            mag = -6.89 - 0.0055 * (tjd - _NEPTUNE_FADE_START) / 365.25
        else:
            mag = -7.00
    elif body == PLUTO:
        mag = PLUTO_MAGNITUDE
    else:
        return math.nan
    return mag + distance


def _geocentric(tjd: float, body: int, iflag: int, ctx: EngineContext) -> np.ndarray:
    return calc(tjd, body, iflag, ctx).unwrap()[:3]


def _pheno(jd_tt: float, body: int, flags: int, ctx: EngineContext) -> PhenoResult:
    iflag = (flags & _ALLOWED_FLAGS) | FLG_XYZ
    geo = _geocentric(jd_tt, body, iflag, ctx)
    delta = float(np.linalg.norm(geo))
    result = PhenoResult(True)
    result.apparent_diameter = apparent_diameter(body, delta)
    if body in LUNAR_POINTS:
        result.phase = 1.0
        return result
    if body == SUN:
        result.phase = 1.0
        result.magnitude = magnitude(SUN, jd_tt, 0.0, 0.0, delta, result.apparent_diameter)
        return result

    sun = _geocentric(jd_tt, SUN, iflag, ctx)
    helio = geo - sun
    r = float(np.linalg.norm(helio))
    result.phase_angle = cspyce.vsep(geo, helio) * RADTODEG
    result.phase = (1.0 + math.cos(math.radians(result.phase_angle))) / 2.0
    result.elongation = cspyce.vsep(geo, sun) * RADTODEG
    result.magnitude = magnitude(
        body,
        jd_tt,
        result.phase_angle,
        r,
        delta,
        geo=cart_to_polar(geo),
        helio=cart_to_polar(helio),
    )
    if body == MOON:
        if flags & FLG_TOPOCTR:
            center = _geocentric(jd_tt, MOON, iflag & ~FLG_TOPOCTR, ctx)
            result.horizontal_parallax = cspyce.vsep(geo, center) * RADTODEG
        else:
            result.horizontal_parallax = math.asin(EARTH_RADIUS_M / (delta * AUNIT)) * RADTODEG
    return result


def pheno(
    jd_tt: float, body: int, flags: int = 0, ctx: EngineContext | None = None
) -> PhenoResult:
    """Phase, elongation, apparent diameter, magnitude and parallax of body.

    Positions are taken in ecliptic coordinates of the frame the flags
    select; only the backend, TRUEPOS, J2000, NONUT, NOGDEFL, NOABERR and
    TOPOCTR bits are honored. With FLG_TOPOCTR the Moon's parallax is the
    angle between its topocentric and geocentric directions.

    Parameters:
        jd_tt: Julian day (TT).
        body: Body number.
        flags: Calculation flags.
        ctx: Engine context; None uses the default one.

    Returns:
        PhenoResult; on an engine error ok is False and error names the kind.
    """
    ctx = ctx or get_context()
    try:
        result = _pheno(jd_tt, body, flags, ctx)
    except EphemerisError as exc:
        return PhenoResult(False, error=exc.kind, message=str(exc))
    logger.debug(
        'Phenomena of body %d at %.6f: phase %.4f, magnitude %.2f',
        body,
        jd_tt,
        result.phase,
        result.magnitude,
    )
    return result


def pheno_ut(
    jd_ut: float, body: int, flags: int = 0, ctx: EngineContext | None = None
) -> PhenoResult:
    """pheno at a Julian day in Universal Time."""
    ctx = ctx or get_context()
    return pheno(to_tt(Epoch.ut(jd_ut), ctx).jd, body, flags, ctx)
