"""Rising, setting and meridian transits seen from the context's observer."""

from __future__ import annotations

import logging
import math

from ephemeris_engine.constants import (
    AUNIT,
    BIT_DISC_BOTTOM,
    BIT_DISC_CENTER,
    BIT_NO_REFRACTION,
    CALC_ITRANSIT,
    CALC_MTRANSIT,
    CALC_RISE,
    CALC_SET,
    DEGTORAD,
    EARTH,
    FLG_EQUATORIAL,
    FLG_RADIANS,
    FLG_SPEED,
    FLG_TOPOCTR,
    FLG_XYZ,
    JUPITER,
    MARS,
    MERCURY,
    MOON,
    NEPTUNE,
    NUT_IAU_1980,
    NUT_JPL,
    PLUTO,
    RADTODEG,
    SATURN,
    SUN,
    URANUS,
    VENUS,
)
from ephemeris_engine.context import EngineContext, GeoPosition, get_context
from ephemeris_engine.epoch import Epoch
from ephemeris_engine.pipeline import calc_ut
from ephemeris_engine.search.engine import find_root
from ephemeris_engine.time_utils import to_tt
from ephemeris_engine.transforms.nutation import nutation
from ephemeris_engine.transforms.obliquity import mean_obliquity
from ephemeris_engine.transforms.sidereal import local_sidereal_radians
from ephemeris_engine.transforms.vectors import difdeg2n

logger = logging.getLogger(__name__)

# Body diameters in meters
BODY_DIAMETER_M = {
    SUN: 1392000000.0,
    MOON: 3475000.0,
    MERCURY: 2439400.0 * 2,
    VENUS: 6051800.0 * 2,
    MARS: 3389500.0 * 2,
    JUPITER: 69911000.0 * 2,
    SATURN: 58232000.0 * 2,
    URANUS: 25362000.0 * 2,
    NEPTUNE: 24622000.0 * 2,
    PLUTO: 1188300.0 * 2,
    EARTH: 6371008.4 * 2,
}

STANDARD_PRESSURE = 1013.25  # hPa
STANDARD_TEMPERATURE = 10.0  # Celsius

SAMPLE_STEP = 2.0 / 24.0  # days
SEARCH_WINDOW = 1.25  # days; longer than the Moon's 24h50m return to the horizon
TIME_TOLERANCE = 1.0 / 86400.0 / 10.0

_EVENT_BITS = CALC_RISE | CALC_SET | CALC_MTRANSIT | CALC_ITRANSIT


def refraction(
    alt_deg: float, atpress: float = STANDARD_PRESSURE, attemp: float = STANDARD_TEMPERATURE
) -> float:
    """Refraction in degrees at an apparent altitude (Bennett), scaled to the air conditions."""
    h = max(alt_deg, -1.0)
    minutes = 1.0 / math.tan((h + 7.31 / (h + 4.4)) * DEGTORAD)
    return minutes / 60.0 * (atpress / 1010.0) * (283.0 / (273.0 + attemp))


def apparent_radius(body: int, dist_au: float) -> float:
    """Apparent radius of body's disc in degrees at distance dist_au."""
    diameter = BODY_DIAMETER_M.get(body, 0.0)
    if diameter == 0.0 or dist_au <= 0.0:
        return 0.0
    return math.asin(min(1.0, diameter / 2.0 / AUNIT / dist_au)) * RADTODEG


def horizontal(
    jd_ut: float, body: int, flags: int, ctx: EngineContext
) -> tuple[float, float, float]:
    """Topocentric true altitude, hour angle (degrees) and distance (AU) of body.

    Raises:
        EphemerisError: The position cannot be computed.
    """
    topo = ctx.topo
    flags = (flags & ~(FLG_XYZ | FLG_RADIANS | FLG_SPEED)) | FLG_EQUATORIAL | FLG_TOPOCTR
    ra, dec, dist = calc_ut(jd_ut, body, flags, ctx).unwrap()[:3]
    tjd = to_tt(Epoch.ut(jd_ut), ctx).jd
    model = NUT_IAU_1980 if ctx.nutation_model == NUT_JPL else ctx.nutation_model
    dpsi, deps = nutation(tjd, model)
    eps_true = mean_obliquity(tjd, ctx.precession_model) + deps
    lst = local_sidereal_radians(jd_ut, topo.lon_deg, eps_true, dpsi) * RADTODEG
    ha = difdeg2n(lst, ra)
    lat = topo.lat_deg * DEGTORAD
    dec_r = dec * DEGTORAD
    cos_ha = math.cos(ha * DEGTORAD)
    sin_alt = math.sin(lat) * math.sin(dec_r) + math.cos(lat) * math.cos(dec_r) * cos_ha
    alt = math.asin(max(-1.0, min(1.0, sin_alt))) * RADTODEG
    return alt, ha, float(dist)


def horizon_offset(
    body: int,
    dist: float,
    rsmi: int = 0,
    atpress: float = STANDARD_PRESSURE,
    attemp: float = STANDARD_TEMPERATURE,
) -> float:
    """Degrees the body center lies above the horizon at the event (negative: below)."""
    rdi = 0.0
    if not rsmi & BIT_DISC_CENTER:
        rdi = apparent_radius(body, dist)
    if rsmi & BIT_DISC_BOTTOM:
        rdi = -rdi
    if not rsmi & BIT_NO_REFRACTION:
        rdi += refraction(0.0, atpress, attemp)
    return -rdi


def rise_trans(
    jd_ut: float,
    body: int,
    rsmi: int = CALC_RISE,
    location: GeoPosition | None = None,
    ctx: EngineContext | None = None,
    flags: int = 0,
    atpress: float = STANDARD_PRESSURE,
    attemp: float = STANDARD_TEMPERATURE,
    horizon_height: float = 0.0,
    backward: bool = False,
) -> float:
    """Next rising, setting or meridian transit of body after jd_ut.

    Parameters:
        jd_ut: Start of the search (JD UT).
        body: Body number.
        rsmi: One of CALC_RISE, CALC_SET, CALC_MTRANSIT, CALC_ITRANSIT,
            optionally ORed with BIT_DISC_CENTER, BIT_DISC_BOTTOM and
            BIT_NO_REFRACTION.
        location: Observer for this search; the context's own observer
            and cache are left as they were.
        ctx: Engine context; None uses the default one.
        flags: Calculation flags (backend bits).
        atpress: Air pressure (hPa) for refraction.
        attemp: Air temperature (Celsius) for refraction.
        horizon_height: Altitude of the local horizon in degrees.
        backward: Search for the previous event instead.

    Returns:
        Time of the event (JD UT).

    Raises:
        SearchNotFound: No such event within a day and a quarter (for
            instance a circumpolar body that never sets).
        ValueError: No observer location, or rsmi does not name exactly
            one event kind.
    """
    ctx = ctx or get_context()
    if location is not None and location != ctx.topo:
        with ctx.observer_at(location):
            return _rise_trans(
                jd_ut, body, rsmi, ctx, flags, atpress, attemp, horizon_height, backward
            )
    return _rise_trans(jd_ut, body, rsmi, ctx, flags, atpress, attemp, horizon_height, backward)


def _rise_trans(
    jd_ut: float,
    body: int,
    rsmi: int,
    ctx: EngineContext,
    flags: int,
    atpress: float,
    attemp: float,
    horizon_height: float,
    backward: bool,
) -> float:
    if ctx.topo is None:
        raise ValueError('rise_trans requires an observer location')
    kind = rsmi & _EVENT_BITS
    if kind not in (CALC_RISE, CALC_SET, CALC_MTRANSIT, CALC_ITRANSIT):
        raise ValueError(f'rsmi must name exactly one event kind, got {rsmi}')
    end = jd_ut - SEARCH_WINDOW if backward else jd_ut + SEARCH_WINDOW

    if kind in (CALC_MTRANSIT, CALC_ITRANSIT):
        target = 0.0 if kind == CALC_MTRANSIT else 180.0

        def f(t: float) -> float:
            return difdeg2n(horizontal(t, body, flags, ctx)[1], target)

        # hour angle grows with time; the wrap at the opposite meridian falls
        return find_root(f, jd_ut, end, tol=TIME_TOLERANCE, step=SAMPLE_STEP, rising=True)

    def g(t: float) -> float:
        alt, _, dist = horizontal(t, body, flags, ctx)
        return alt - horizon_height - horizon_offset(body, dist, rsmi, atpress, attemp)

    event = find_root(
        g, jd_ut, end, tol=TIME_TOLERANCE, step=SAMPLE_STEP, rising=kind == CALC_RISE
    )
    logger.debug('Body %d %s at %.6f', body, 'rises' if kind == CALC_RISE else 'sets', event)
    return event
