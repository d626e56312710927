"""Global solar and lunar eclipse searches.

Candidate syzygies come from the mean lunation series (Meeus); those whose
argument of latitude is too far from a node are skipped. The instant of
maximum is the minimum of an angular distance found with find_extremum,
and the eclipse is classified from the shadow geometry at that instant.
Input and output times are Julian days in UT.

Local circumstances add the contact times of each phase, where the shadow
axis meets the Earth, and whether an observer can see the Moon.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

import cspyce
import numpy as np

from ephemeris_engine.constants import (
    AUNIT,
    CALC_RISE,
    CALC_SET,
    DEGTORAD,
    EARTH_OBLATENESS,
    ECL_1ST_VISIBLE,
    ECL_2ND_VISIBLE,
    ECL_3RD_VISIBLE,
    ECL_4TH_VISIBLE,
    ECL_ALLTYPES_LUNAR,
    ECL_ALLTYPES_SOLAR,
    ECL_ANNULAR,
    ECL_ANNULAR_TOTAL,
    ECL_CENTRAL,
    ECL_MAX_VISIBLE,
    ECL_NONCENTRAL,
    ECL_PARTIAL,
    ECL_PENUMBBEG_VISIBLE,
    ECL_PENUMBEND_VISIBLE,
    ECL_PENUMBRAL,
    ECL_TOTAL,
    ECL_VISIBLE,
    FLG_EPHMASK,
    FLG_EQUATORIAL,
    FLG_XYZ,
    J2000,
    MOON,
    MOON_DIAMETER_M,
    NUT_IAU_1980,
    NUT_JPL,
    RADTODEG,
    SUN,
    SUN_DIAMETER_M,
    SYNODIC_MONTH,
)
from ephemeris_engine.context import EngineContext, GeoPosition, get_context
from ephemeris_engine.epoch import Epoch
from ephemeris_engine.errors import SearchNotFound
from ephemeris_engine.pipeline import calc
from ephemeris_engine.search.engine import find_extremum, find_root
from ephemeris_engine.search.riseset import horizon_offset, horizontal, rise_trans
from ephemeris_engine.time_utils import to_tt, to_ut
from ephemeris_engine.transforms.nutation import nutation
from ephemeris_engine.transforms.obliquity import mean_obliquity
from ephemeris_engine.transforms.observer import EARTH_RADIUS_KM
from ephemeris_engine.transforms.sidereal import sidtime
from ephemeris_engine.transforms.vectors import degnorm, rot_z

logger = logging.getLogger(__name__)

RMOON = MOON_DIAMETER_M / 2.0 / AUNIT
RSUN = SUN_DIAMETER_M / 2.0 / AUNIT
REARTH = 6378140.0 / AUNIT
EARTH_FLATTENING_FACTOR = 0.998340  # parallax reduction for the shadow radii
SHADOW_ENLARGEMENT = 1.02  # atmosphere enlarges the Earth's shadow by 1/50

MAX_LUNATIONS = 1300  # about a century
NODE_LIMIT = 21.0  # degrees of argument of latitude from a node
MAXIMUM_TOLERANCE = 1e-6  # days
_REFINE_HALF_WIDTH = 1.0
_REFINE_STEP = 0.25
CONTACT_WINDOW = 0.25  # days; longer than half the longest penumbral eclipse
CONTACT_STEP = 1.0 / 96.0
CONTACT_TOLERANCE = 1e-6  # days
MAX_LOCAL_ECLIPSES = 200

_KM_PER_AU = AUNIT / 1000.0


@dataclass
class Eclipse:
    """A found eclipse.

    Parameters:
        tmax: Instant of greatest eclipse (JD UT).
        flags: ECL_* type bits.
        attributes: Named magnitudes and geometry (see the search functions).
        contacts: Named contact times (JD UT) of the phases that occur.
    """

    tmax: float
    flags: int
    attributes: dict[str, float] = field(default_factory=dict)
    contacts: dict[str, float] = field(default_factory=dict)


def _mean_syzygy(k: float) -> tuple[float, float]:
    """Approximate JDE of lunation k (integer: new moon, +0.5: full moon) and its F in degrees."""
    t = k / 1236.85
    t2, t3, t4 = t * t, t * t * t, t**4
    f = degnorm(160.7108 + 390.67050274 * k - 0.0016341 * t2 - 0.00000227 * t3 + 0.000000011 * t4)
    jde = 2451550.09765 + SYNODIC_MONTH * k + 0.0001337 * t2 - 0.000000150 * t3 + 0.00000000073 * t4
    m = degnorm(2.5534 + 29.10535669 * k - 0.0000218 * t2 - 0.00000011 * t3) * DEGTORAD
    mm = degnorm(201.5643 + 385.81693528 * k + 0.1017438 * t2 + 0.00001239 * t3) * DEGTORAD
    e = 1.0 - 0.002516 * t - 0.0000074 * t2
    jde += -0.4075 * math.sin(mm) + 0.1721 * e * math.sin(m)
    return jde, f


def _near_node(f: float) -> bool:
    ff = f - 180.0 if f > 180.0 else f
    return not NODE_LIMIT < ff < 180.0 - NODE_LIMIT


def _vectors(tjd: float, flags: int, ctx: EngineContext) -> tuple[np.ndarray, np.ndarray]:
    """Geocentric apparent equatorial positions (AU) of the Sun and the Moon."""
    iflag = (flags & FLG_EPHMASK) | FLG_EQUATORIAL | FLG_XYZ
    sun = calc(tjd, SUN, iflag, ctx).unwrap()[:3]
    moon = calc(tjd, MOON, iflag, ctx).unwrap()[:3]
    return sun, moon


def _not_after_start(tmax_ut: float, jd_ut: float, backward: bool) -> bool:
    if backward:
        return tmax_ut >= jd_ut - 0.0001
    return tmax_ut <= jd_ut + 0.0001


def _first_lunation(tjd: float, backward: bool) -> int:
    direction = -1 if backward else 1
    return int((tjd - J2000) / 365.2425 * 12.3685) - direction


def _solar_type_mask(ecl_type: int) -> int:
    if ecl_type == ECL_PARTIAL | ECL_CENTRAL:
        raise ValueError('Central partial eclipses do not exist')
    if ecl_type == ECL_ANNULAR_TOTAL | ECL_NONCENTRAL:
        raise ValueError('Non-central hybrid (annular-total) eclipses do not exist')
    if ecl_type == 0:
        ecl_type = ECL_ALLTYPES_SOLAR
    if ecl_type in (ECL_TOTAL, ECL_ANNULAR, ECL_ANNULAR_TOTAL):
        ecl_type |= ECL_NONCENTRAL | ECL_CENTRAL
    if ecl_type == ECL_PARTIAL:
        ecl_type |= ECL_NONCENTRAL
    return ecl_type


def _solar_accepted(found: int, wanted: int) -> bool:
    if found & ECL_NONCENTRAL and not wanted & ECL_NONCENTRAL:
        return False
    if found & ECL_CENTRAL and not wanted & ECL_CENTRAL:
        return False
    if found & ECL_ANNULAR and not wanted & ECL_ANNULAR:
        return False
    if found & ECL_PARTIAL and not wanted & ECL_PARTIAL:
        return False
    if found & ECL_ANNULAR_TOTAL and not wanted & ECL_ANNULAR_TOTAL:
        return False
    if found & ECL_TOTAL and not wanted & (ECL_TOTAL | ECL_ANNULAR_TOTAL):
        return False
    return True


def solar_geometry(sun: np.ndarray, moon: np.ndarray) -> tuple[int, dict[str, float]]:
    """Classify a solar eclipse from geocentric Sun and Moon positions (AU).

    The fundamental plane passes through the Earth's center perpendicular
    to the Sun-Moon axis.

    Returns:
        (ECL_* flags, attributes); flags are 0 when the penumbra misses the
        Earth. Attributes: gamma (axis distance from the Earth's center in
        Earth radii), magnitude, umbra_radius and penumbra_radius (Earth
        radii, in the fundamental plane; umbra negative when the vertex of
        the umbral cone lies before the plane).
    """
    axis = moon - sun
    dsm = math.sqrt(float(axis @ axis))
    axis = axis / dsm
    z_moon = float(moon @ axis)
    dz = -z_moon
    gamma = math.sqrt(max(0.0, float(moon @ moon) - z_moon * z_moon))
    ru = RMOON - dz * (RSUN - RMOON) / dsm
    rp = RMOON + dz * (RSUN + RMOON) / dsm
    attrs = {
        'gamma': gamma / REARTH,
        'umbra_radius': ru / REARTH,
        'penumbra_radius': rp / REARTH,
    }
    if gamma < REARTH:
        # the umbra at the surface point nearest the Moon
        dz_surface = dz - math.sqrt(REARTH * REARTH - gamma * gamma)
        ru_surface = RMOON - dz_surface * (RSUN - RMOON) / dsm
        if ru_surface > 0.0:
            flags = ECL_ANNULAR_TOTAL if ru < 0.0 else ECL_TOTAL
        else:
            flags = ECL_ANNULAR
        flags |= ECL_CENTRAL
    elif gamma < REARTH + abs(ru):
        flags = (ECL_TOTAL if ru > 0.0 else ECL_ANNULAR) | ECL_NONCENTRAL
    elif gamma < REARTH + rp:
        flags = ECL_PARTIAL | ECL_NONCENTRAL
    else:
        return 0, attrs
    if flags & ECL_PARTIAL:
        big_p = rp / REARTH
        big_u = -ru / REARTH
        attrs['magnitude'] = (1.0 + big_p - gamma / REARTH) / (big_p + big_u)
    else:
        moon_radius = math.asin(RMOON / math.sqrt(float(moon @ moon)))
        sun_radius = math.asin(RSUN / math.sqrt(float(sun @ sun)))
        attrs['magnitude'] = moon_radius / sun_radius
    return flags, attrs


def sol_eclipse_when_glob(
    jd_ut: float,
    ecl_type: int = 0,
    backward: bool = False,
    flags: int = 0,
    ctx: EngineContext | None = None,
) -> Eclipse:
    """Next (or previous) solar eclipse anywhere on Earth.

    Parameters:
        jd_ut: Start of the search (JD UT).
        ecl_type: ECL_* bits of the wanted types; 0 accepts every type.
        backward: Search backward in time.
        flags: Calculation flags (only the backend bits are used).
        ctx: Engine context; None uses the default one.

    Returns:
        Eclipse with tmax, type flags and the attributes of solar_geometry
        plus ``separation`` (degrees between the centers at maximum).

    Raises:
        SearchNotFound: No eclipse of the wanted type within MAX_LUNATIONS.
        ValueError: Impossible type combination.
    """
    ctx = ctx or get_context()
    wanted = _solar_type_mask(ecl_type)
    direction = -1 if backward else 1
    tjd_start = to_tt(Epoch.ut(jd_ut), ctx).jd
    k = _first_lunation(tjd_start, backward)
    for _ in range(MAX_LUNATIONS):
        k += direction
        jde, f = _mean_syzygy(float(k))
        if not _near_node(f):
            continue

        def separation(t: float) -> float:
            sun, moon = _vectors(t, flags, ctx)
            rmoon = math.asin(RMOON / math.sqrt(float(moon @ moon))) * RADTODEG
            rsun = math.asin(RSUN / math.sqrt(float(sun @ sun))) * RADTODEG
            return cspyce.vsep(sun, moon) * RADTODEG - rmoon - rsun

        tmax, _ = find_extremum(
            separation,
            jde - _REFINE_HALF_WIDTH,
            jde + _REFINE_HALF_WIDTH,
            step=_REFINE_STEP,
            tol=MAXIMUM_TOLERANCE,
        )
        tmax_ut = to_ut(Epoch.tt(tmax), ctx).jd
        if _not_after_start(tmax_ut, jd_ut, backward):
            continue
        sun, moon = _vectors(tmax, flags, ctx)
        found, attrs = solar_geometry(sun, moon)
        if not found or not _solar_accepted(found, wanted):
            continue
        attrs['separation'] = cspyce.vsep(sun, moon) * RADTODEG
        logger.debug('Solar eclipse at %.6f UT, flags %d', tmax_ut, found)
        return Eclipse(tmax_ut, found, attrs)
    raise SearchNotFound(f'No solar eclipse of type {ecl_type} within {MAX_LUNATIONS} lunations')


@dataclass
class EclipsePlace:
    """Place of greatest solar eclipse at one instant.

    Parameters:
        flags: ECL_* type bits; 0 when no eclipse is in progress.
        lon_deg: Geographic longitude, east positive.
        lat_deg: Geodetic latitude.
        attributes: Local circumstances at the place (see local_solar_attributes).
    """

    flags: int
    lon_deg: float
    lat_deg: float
    attributes: dict[str, float] = field(default_factory=dict)


def disc_obscuration(sun_radius: float, moon_radius: float, separation: float) -> float:
    """Fraction of the solar disc's area covered by the Moon (all angles in one unit)."""
    rs, rm, d = sun_radius, moon_radius, separation
    if d >= rs + rm:
        return 0.0
    if d <= abs(rm - rs):
        return 1.0 if rm >= rs else (rm / rs) ** 2
    sun_part = rs * rs * math.acos((d * d + rs * rs - rm * rm) / (2.0 * d * rs))
    moon_part = rm * rm * math.acos((d * d + rm * rm - rs * rs) / (2.0 * d * rm))
    kite = 0.5 * math.sqrt((-d + rs + rm) * (d + rs - rm) * (d - rs + rm) * (d + rs + rm))
    return (sun_part + moon_part - kite) / (math.pi * rs * rs)


def local_solar_attributes(
    sun: np.ndarray, moon: np.ndarray, observer: np.ndarray
) -> dict[str, float]:
    """Solar eclipse circumstances seen from observer (all vectors geocentric, AU).

    Returns:
        magnitude (fraction of the solar diameter covered), ratio (lunar to
        solar diameter), obscuration (fraction of the disc's area),
        separation (degrees between the centers) and core_shadow_diameter
        (km across the umbra at the observer; negative for the antumbra).
    """
    s = sun - observer
    m = moon - observer
    rs = math.asin(RSUN / math.sqrt(float(s @ s)))
    rm = math.asin(RMOON / math.sqrt(float(m @ m)))
    sep = cspyce.vsep(s, m)
    axis = moon - sun
    dsm = math.sqrt(float(axis @ axis))
    dz = float((observer - moon) @ axis) / dsm
    core = RMOON - dz * (RSUN - RMOON) / dsm
    return {
        'magnitude': (rs + rm - sep) / (2.0 * rs),
        'ratio': rm / rs,
        'obscuration': disc_obscuration(rs, rm, sep),
        'separation': sep * RADTODEG,
        'core_shadow_diameter': 2.0 * core * _KM_PER_AU,
    }


def _earth_fixed_rotation(jd_ut: float, tjd: float, ctx: EngineContext) -> np.ndarray:
    """Matrix from the true equator of date to Earth-fixed axes."""
    model = NUT_IAU_1980 if ctx.nutation_model == NUT_JPL else ctx.nutation_model
    dpsi, deps = nutation(tjd, model)
    eps_true = mean_obliquity(tjd, ctx.precession_model) + deps
    return rot_z(sidtime(jd_ut, eps_true, dpsi) * 15.0 * DEGTORAD)


def sol_eclipse_where(
    jd_ut: float, flags: int = 0, ctx: EngineContext | None = None
) -> EclipsePlace:
    """Where on Earth a solar eclipse is greatest at jd_ut.

    For a central eclipse this is where the shadow axis meets the
    ellipsoid; otherwise it is the surface point nearest the axis.

    Parameters:
        jd_ut: Instant (JD UT), usually the tmax of sol_eclipse_when_glob.
        flags: Calculation flags (only the backend bits are used).
        ctx: Engine context; None uses the default one.

    Returns:
        EclipsePlace with the type flags of solar_geometry and the
        attributes of local_solar_attributes at the place.
    """
    ctx = ctx or get_context()
    tjd = to_tt(Epoch.ut(jd_ut), ctx).jd
    sun, moon = _vectors(tjd, flags, ctx)
    found, _ = solar_geometry(sun, moon)
    fixed = _earth_fixed_rotation(jd_ut, tjd, ctx)
    moon_km = fixed @ moon * _KM_PER_AU
    axis = fixed @ (moon - sun)
    axis /= math.sqrt(float(axis @ axis))
    a = EARTH_RADIUS_KM
    c = a * (1.0 - EARTH_OBLATENESS)
    point, hit = cspyce.surfpt(moon_km, axis, a, a, c)
    if not hit:
        point, _ = cspyce.npedln(a, a, c, moon_km, axis)
    lon, lat, _ = cspyce.recgeo(point, a, EARTH_OBLATENESS)
    observer = fixed.T @ np.asarray(point, dtype=np.float64) / _KM_PER_AU
    attrs = local_solar_attributes(sun, moon, observer)
    logger.debug(
        'Solar eclipse at %.6f greatest at lon %.3f lat %.3f', jd_ut, lon * RADTODEG, lat * RADTODEG
    )
    return EclipsePlace(found, lon * RADTODEG, lat * RADTODEG, attrs)


def _shadow_radii(sun: np.ndarray, moon: np.ndarray) -> tuple[float, float, float]:
    """Angular radii (radians) of the umbra, the penumbra and the Moon."""
    dm = math.sqrt(float(moon @ moon))
    ds = math.sqrt(float(sun @ sun))
    moon_parallax = math.asin(REARTH / dm) * EARTH_FLATTENING_FACTOR
    sun_parallax = math.asin(REARTH / ds)
    sun_radius = math.asin(RSUN / ds)
    umbra = SHADOW_ENLARGEMENT * (moon_parallax + sun_parallax - sun_radius)
    penumbra = SHADOW_ENLARGEMENT * (moon_parallax + sun_parallax + sun_radius)
    return umbra, penumbra, math.asin(RMOON / dm)


def lunar_geometry(sun: np.ndarray, moon: np.ndarray) -> tuple[int, dict[str, float]]:
    """Classify a lunar eclipse from geocentric Sun and Moon positions (AU).

    Shadow radii follow the classical rule: parallaxes of Moon and Sun
    combined with the Sun's radius, enlarged by SHADOW_ENLARGEMENT.

    Returns:
        (ECL_* flags, attributes); flags are 0 when the Moon misses the
        penumbra. Attributes: umbral_magnitude, penumbral_magnitude,
        distance (degrees of the Moon's center from the shadow axis).
    """
    umbra, penumbra, moon_radius = _shadow_radii(sun, moon)
    dist = cspyce.vsep(-sun, moon)
    umag = (umbra + moon_radius - dist) / (2.0 * moon_radius)
    pmag = (penumbra + moon_radius - dist) / (2.0 * moon_radius)
    attrs = {
        'umbral_magnitude': umag,
        'penumbral_magnitude': pmag,
        'distance': dist * RADTODEG,
    }
    if umag >= 1.0:
        return ECL_TOTAL, attrs
    if umag > 0.0:
        return ECL_PARTIAL, attrs
    if pmag > 0.0:
        return ECL_PENUMBRAL, attrs
    return 0, attrs


LUNAR_PHASES = ('penumbral', 'partial', 'total')


def _contact_gap(t: float, phase: str, flags: int, ctx: EngineContext) -> float:
    """Degrees the Moon's center lies beyond the contact distance of phase."""
    sun, moon = _vectors(t, flags, ctx)
    umbra, penumbra, moon_radius = _shadow_radii(sun, moon)
    if phase == 'penumbral':
        limit = penumbra + moon_radius
    elif phase == 'partial':
        limit = umbra + moon_radius
    else:
        limit = umbra - moon_radius
    return (cspyce.vsep(-sun, moon) - limit) * RADTODEG


def _lunar_contacts(tmax: float, flags: int, ctx: EngineContext) -> dict[str, float]:
    """Begin and end (JD UT) of each phase of the lunar eclipse greatest at tmax (TT)."""
    contacts = {}
    for phase in LUNAR_PHASES:

        def gap(t: float, phase: str = phase) -> float:
            return _contact_gap(t, phase, flags, ctx)

        if gap(tmax) >= 0.0:
            break
        for name, end in (('begin', tmax - CONTACT_WINDOW), ('end', tmax + CONTACT_WINDOW)):
            t = find_root(gap, tmax, end, tol=CONTACT_TOLERANCE, step=CONTACT_STEP)
            contacts[f'{phase}_{name}'] = to_ut(Epoch.tt(t), ctx).jd
    return contacts


def lun_eclipse_when(
    jd_ut: float,
    ecl_type: int = 0,
    backward: bool = False,
    flags: int = 0,
    ctx: EngineContext | None = None,
) -> Eclipse:
    """Next (or previous) lunar eclipse.

    Parameters:
        jd_ut: Start of the search (JD UT).
        ecl_type: ECL_TOTAL, ECL_PARTIAL and/or ECL_PENUMBRAL; 0 accepts all.
        backward: Search backward in time.
        flags: Calculation flags (only the backend bits are used).
        ctx: Engine context; None uses the default one.

    Returns:
        Eclipse with tmax, type flags, the attributes of lunar_geometry
        and the contacts ``penumbral_begin`` and ``penumbral_end``, then
        ``partial_*`` and ``total_*`` when those phases occur.

    Raises:
        SearchNotFound: No eclipse of the wanted type within MAX_LUNATIONS.
    """
    ctx = ctx or get_context()
    wanted = ecl_type or ECL_ALLTYPES_LUNAR
    direction = -1 if backward else 1
    tjd_start = to_tt(Epoch.ut(jd_ut), ctx).jd
    k = _first_lunation(tjd_start, backward)
    for _ in range(MAX_LUNATIONS):
        k += direction
        jde, f = _mean_syzygy(k + 0.5)
        if not _near_node(f):
            continue

        def shadow_distance(t: float) -> float:
            sun, moon = _vectors(t, flags, ctx)
            return cspyce.vsep(-sun, moon) * RADTODEG

        tmax, _ = find_extremum(
            shadow_distance,
            jde - _REFINE_HALF_WIDTH,
            jde + _REFINE_HALF_WIDTH,
            step=_REFINE_STEP,
            tol=MAXIMUM_TOLERANCE,
        )
        tmax_ut = to_ut(Epoch.tt(tmax), ctx).jd
        if _not_after_start(tmax_ut, jd_ut, backward):
            continue
        found, attrs = lunar_geometry(*_vectors(tmax, flags, ctx))
        if not found & wanted:
            continue
        logger.debug('Lunar eclipse at %.6f UT, flags %d', tmax_ut, found)
        return Eclipse(tmax_ut, found, attrs, _lunar_contacts(tmax, flags, ctx))
    raise SearchNotFound(f'No lunar eclipse of type {ecl_type} within {MAX_LUNATIONS} lunations')


# contact name and the visibility bit it sets
_CONTACT_VISIBILITY = (
    ('partial_begin', ECL_1ST_VISIBLE),
    ('total_begin', ECL_2ND_VISIBLE),
    ('total_end', ECL_3RD_VISIBLE),
    ('partial_end', ECL_4TH_VISIBLE),
    ('penumbral_begin', ECL_PENUMBBEG_VISIBLE),
    ('penumbral_end', ECL_PENUMBEND_VISIBLE),
)


def _moon_altitude(jd_ut: float, flags: int, ctx: EngineContext) -> tuple[float, bool]:
    """Altitude of the Moon's center (degrees) and whether its upper limb is up."""
    alt, _, dist = horizontal(jd_ut, MOON, flags & FLG_EPHMASK, ctx)
    return alt, alt > horizon_offset(MOON, dist)


def _lunar_visibility(ecl: Eclipse, location: GeoPosition, flags: int, ctx: EngineContext) -> int:
    with ctx.observer_at(location):
        alt, up = _moon_altitude(ecl.tmax, flags, ctx)
        visible = ECL_MAX_VISIBLE if up else 0
        for name, bit in _CONTACT_VISIBILITY:
            if name in ecl.contacts and _moon_altitude(ecl.contacts[name], flags, ctx)[1]:
                visible |= bit
    ecl.attributes['moon_altitude'] = alt
    return visible


def lun_eclipse_when_loc(
    jd_ut: float,
    location: GeoPosition,
    ecl_type: int = 0,
    backward: bool = False,
    flags: int = 0,
    ctx: EngineContext | None = None,
) -> Eclipse:
    """Next (or previous) lunar eclipse that can be seen from location.

    An eclipse counts as seen when the Moon's upper limb is above the
    refracted horizon at maximum or at any contact.

    Parameters:
        jd_ut: Start of the search (JD UT).
        location: Observer.
        ecl_type: ECL_TOTAL, ECL_PARTIAL and/or ECL_PENUMBRAL; 0 accepts all.
        backward: Search backward in time.
        flags: Calculation flags (only the backend bits are used).
        ctx: Engine context; None uses the default one. Its own observer
            and cache are left as they were.

    Returns:
        Eclipse as from lun_eclipse_when, with ECL_VISIBLE plus
        ECL_MAX_VISIBLE and ECL_*_VISIBLE bits for the visible instants,
        the attribute ``moon_altitude`` (degrees at maximum) and the
        contacts ``moonrise`` and ``moonset`` when the Moon rises or sets
        while the eclipse is in progress.

    Raises:
        SearchNotFound: No visible eclipse of the wanted type among the
            next MAX_LOCAL_ECLIPSES eclipses.
    """
    ctx = ctx or get_context()
    start = jd_ut
    for _ in range(MAX_LOCAL_ECLIPSES):
        ecl = lun_eclipse_when(start, ecl_type, backward, flags, ctx)
        start = ecl.tmax
        visible = _lunar_visibility(ecl, location, flags, ctx)
        if not visible:
            logger.debug('Lunar eclipse at %.6f UT is not visible from %s', ecl.tmax, location)
            continue
        ecl.flags |= ECL_VISIBLE | visible
        first = min(ecl.contacts.values(), default=ecl.tmax)
        last = max(ecl.contacts.values(), default=ecl.tmax)
        for kind, name in ((CALC_RISE, 'moonrise'), (CALC_SET, 'moonset')):
            try:
                event = rise_trans(first, MOON, kind, location, ctx, flags & FLG_EPHMASK)
            except SearchNotFound:
                continue
            if event <= last:
                ecl.contacts[name] = event
        return ecl
    raise SearchNotFound(
        f'No lunar eclipse of type {ecl_type} visible from {location} '
        f'among the next {MAX_LOCAL_ECLIPSES}'
    )
