"""Apparent-place pipeline: raw ephemeris states to the requested output coordinates.

compute_position runs its stages in a fixed order:

1. raw J2000 state of the body from its position source,
2. light-time,
3. shift to the requested center,
4. aberration,
5. light deflection by the Sun,
6. frame bias and precession to the equinox of date,
7. nutation,
8. output plane, coordinate type, units and sidereal zodiac.

Each stage maps a StateVector to a new StateVector; its Frame tag records
what has been applied so far. Calculation flags switch stages off
independently.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

import numpy as np

from ephemeris_engine.constants import (
    BACKEND_JPL,
    BACKEND_SERIES,
    BACKEND_SPK,
    BACKEND_SWEPH,
    BIAS_NONE,
    EARTH,
    FLG_BARYCTR,
    FLG_EPHMASK,
    FLG_EQUATORIAL,
    FLG_HELCTR,
    FLG_ICRS,
    FLG_J2000,
    FLG_JPLEPH,
    FLG_NOABERR,
    FLG_NOGDEFL,
    FLG_NONUT,
    FLG_RADIANS,
    FLG_SERIES,
    FLG_SIDEREAL,
    FLG_SPEED,
    FLG_SWIEPH,
    FLG_TOPOCTR,
    FLG_TRUEPOS,
    FLG_XYZ,
    LUNAR_POINTS,
    MOON,
    NUT_IAU_1980,
    NUT_JPL,
    RADTODEG,
    SUN,
)
from ephemeris_engine.context import EngineContext, get_context
from ephemeris_engine.epoch import Epoch
from ephemeris_engine.errors import (
    BodyNotInFile,
    BodyUnsupportedForCenter,
    DateOutOfRange,
    EphemerisError,
    FileNotFoundEphemeris,
)
from ephemeris_engine.sources import ORIGIN_BARY, ORIGIN_GEO, jpl_handle, source_for
from ephemeris_engine.time_utils import to_tt, to_ut
from ephemeris_engine.transforms.apparent import aberration, deflection, light_time
from ephemeris_engine.transforms.bias import icrs_to_j2000
from ephemeris_engine.transforms.nutation import (
    apply_nutation,
    nutation,
    nutation_matrix,
    nutation_matrix_rate,
)
from ephemeris_engine.transforms.obliquity import EPS2000, mean_obliquity
from ephemeris_engine.transforms.observer import observer_state
from ephemeris_engine.transforms.precession import precess_to_date
from ephemeris_engine.transforms.sidereal import ayanamsa_rate, get_ayanamsa
from ephemeris_engine.transforms.vectors import (
    apply_matrix,
    cart_to_polar,
    equatorial_to_ecliptic,
    rot_z,
)

logger = logging.getLogger(__name__)

CENTER_BARY = ORIGIN_BARY
CENTER_GEO = ORIGIN_GEO
CENTER_HELIO = 'heliocentric'
CENTER_TOPO = 'topocentric'

EQUINOX_ICRS = 'ICRS'
EQUINOX_J2000 = 'J2000'
EQUINOX_MEAN = 'mean of date'
EQUINOX_TRUE = 'true of date'

PLANE_EQUATORIAL = 'equatorial'
PLANE_ECLIPTIC = 'ecliptic'

LIGHT_TIME = 'light-time'
ABERRATION = 'aberration'
DEFLECTION = 'deflection'

_BACKEND_OF_FLAG = {
    FLG_JPLEPH: BACKEND_JPL,
    FLG_SWIEPH: BACKEND_SWEPH,
    FLG_SERIES: BACKEND_SERIES,
}

_FLAG_OF_BACKEND = {
    BACKEND_JPL: FLG_JPLEPH,
    BACKEND_SWEPH: FLG_SWIEPH,
    BACKEND_SERIES: FLG_SERIES,
    BACKEND_SPK: FLG_JPLEPH,
}


@dataclass(frozen=True)
class Frame:
    """Reference frame tag of a state vector.

    Parameters:
        center: CENTER_* origin of the vector.
        equinox: EQUINOX_* equator/equinox the axes are tied to.
        plane: PLANE_* fundamental plane.
        corrections: Apparent-place corrections already applied, in order.
    """

    center: str
    equinox: str = EQUINOX_J2000
    plane: str = PLANE_EQUATORIAL
    corrections: tuple[str, ...] = ()


@dataclass(frozen=True)
class StateVector:
    """Rectangular 6-element state (AU, AU/day) with its frame."""

    x: np.ndarray
    frame: Frame

    def evolve(self, x: np.ndarray, **changes) -> StateVector:
        """New StateVector holding x with frame fields replaced by changes."""
        return StateVector(np.asarray(x, dtype=np.float64), replace(self.frame, **changes))

    def corrected(self, x: np.ndarray, correction: str) -> StateVector:
        """New StateVector holding x with correction appended to the frame's list."""
        return self.evolve(x, corrections=self.frame.corrections + (correction,))


@dataclass
class CalcResult:
    """Outcome of a position calculation.

    ``values`` always holds six numbers: longitude, latitude, distance and
    their speeds (or x, y, z and velocities with FLG_XYZ). On failure they
    are zero, ``ok`` is False and ``error`` names the EphemerisError kind.

    Parameters:
        ok: True when values are valid.
        values: Six output values.
        flags: Flags actually honored (the backend bit reflects any fallback).
        backend: BACKEND_* that produced the values.
        error: Error kind on failure, else None.
        message: Diagnostic text (also set on a successful fallback).
        exception: The caught error, re-raised by unwrap().
    """

    ok: bool
    values: np.ndarray = field(default_factory=lambda: np.zeros(6, dtype=np.float64))
    flags: int = 0
    backend: str = ''
    error: str | None = None
    message: str = ''
    exception: EphemerisError | None = field(default=None, repr=False, compare=False)

    @classmethod
    def failure(cls, exc: EphemerisError, flags: int, backend: str = '') -> CalcResult:
        """Zero-filled result for a caught engine error."""
        return cls(
            False, flags=flags, backend=backend, error=exc.kind, message=str(exc), exception=exc
        )

    def unwrap(self) -> np.ndarray:
        """Values of a successful result; re-raises the caught error otherwise."""
        if not self.ok:
            raise self.exception
        return self.values


@dataclass
class _Orientation:
    """Earth orientation quantities of one instant."""

    eps_mean: float
    dpsi: float = 0.0
    deps: float = 0.0
    matrix: np.ndarray | None = None
    rate: np.ndarray | None = None

    @property
    def eps_true(self) -> float:
        return self.eps_mean + self.deps


def backend_from_flags(flags: int, ctx: EngineContext) -> str:
    """Backend selected by the ephemeris bits of flags, or the context's backend.

    Raises:
        ValueError: More than one ephemeris bit is set.
    """
    bits = flags & FLG_EPHMASK
    if bits == 0:
        return ctx.backend
    if bits not in _BACKEND_OF_FLAG:
        raise ValueError(f'Conflicting ephemeris flags {bits}')
    backend = _BACKEND_OF_FLAG[bits]
    # the JPL bit also selects SPICE kernels when the context is set up for them
    if backend == BACKEND_JPL and ctx.backend == BACKEND_SPK:
        return BACKEND_SPK
    return backend


def _check_flags(body: int, flags: int, ctx: EngineContext) -> None:
    if flags & FLG_HELCTR and flags & FLG_BARYCTR:
        raise ValueError('HELCTR and BARYCTR are mutually exclusive')
    if flags & FLG_TOPOCTR and flags & (FLG_HELCTR | FLG_BARYCTR):
        raise ValueError('TOPOCTR cannot be combined with HELCTR or BARYCTR')
    if flags & FLG_TOPOCTR and ctx.topo is None:
        raise ValueError('TOPOCTR requires an observer location (EngineContext.set_topo)')
    if not isinstance(body, (int, np.integer)):
        raise ValueError(f'Body must be an integer, got {body!r}')


def _center_of(flags: int) -> str:
    if flags & FLG_HELCTR:
        return CENTER_HELIO
    if flags & FLG_BARYCTR:
        return CENTER_BARY
    if flags & FLG_TOPOCTR:
        return CENTER_TOPO
    return CENTER_GEO


def _check_center(body: int, center: str) -> None:
    if center == CENTER_HELIO and (body in (SUN, MOON) or body in LUNAR_POINTS):
        raise BodyUnsupportedForCenter(f'Body {body} has no heliocentric position')
    if center == CENTER_BARY and body in LUNAR_POINTS:
        raise BodyUnsupportedForCenter(f'Body {body} has no barycentric position')
    if center in (CENTER_GEO, CENTER_TOPO) and body == EARTH:
        raise BodyUnsupportedForCenter('The Earth has no geocentric position')


def _orientation(tjd: float, flags: int, backend: str, ctx: EngineContext) -> _Orientation:
    def eps_of(t: float) -> float:
        return mean_obliquity(t, ctx.precession_model)

    orient = _Orientation(eps_of(tjd))
    if flags & (FLG_NONUT | FLG_J2000):
        return orient
    model = ctx.nutation_model
    if model == NUT_JPL and backend == BACKEND_JPL:
        try:
            orient.dpsi, orient.deps = jpl_handle(ctx).nutation(tjd)
        except BodyNotInFile:
            logger.debug('JPL file carries no nutation; using IAU 1980')
            orient.dpsi, orient.deps = nutation(tjd, NUT_IAU_1980)
    else:
        orient.dpsi, orient.deps = nutation(tjd, model)
    orient.matrix = nutation_matrix(orient.eps_mean, orient.dpsi, orient.deps)
    if flags & FLG_SPEED:
        rate_model = NUT_IAU_1980 if model == NUT_JPL else model
        orient.rate = nutation_matrix_rate(tjd, eps_of, rate_model)
    return orient


def _observer(
    center: str, tjd: float, jd_ut: float, backend: str, orient: _Orientation, ctx: EngineContext
) -> np.ndarray:
    """Raw-frame state of the chosen center at tjd."""
    if center == CENTER_BARY:
        return np.zeros(6, dtype=np.float64)
    if center == CENTER_HELIO:
        return source_for(SUN, backend, ctx).state(tjd)
    earth = source_for(EARTH, backend, ctx).state(tjd)
    if center == CENTER_TOPO:
        topo = ctx.topo
        earth = earth + observer_state(
            topo.lon_deg,
            topo.lat_deg,
            topo.alt_m,
            tjd,
            jd_ut,
            orient.eps_true,
            orient.dpsi,
            orient.matrix,
            ctx.precession_model,
        )
    return earth


def _apparent_state(
    body: int, tjd: float, jd_ut: float, flags: int, backend: str, ctx: EngineContext
) -> tuple[StateVector, _Orientation]:
    """Stages 1 to 7: the observer-relative state in the equator of date (or J2000)."""
    center = _center_of(flags)
    _check_center(body, center)
    speed = bool(flags & FLG_SPEED)
    source = source_for(body, backend, ctx)
    orient = _orientation(tjd, flags, backend, ctx)
    observer = _observer(center, tjd, jd_ut, backend, orient, ctx)
    icrs = source.is_icrs(tjd)
    equinox = EQUINOX_ICRS if icrs else EQUINOX_J2000

    if source.origin == ORIGIN_GEO:
        # nodes and apsides are directions fixed to the Earth's center
        sv = StateVector(source.state(tjd), Frame(CENTER_GEO, equinox))
        dt = 0.0
    else:
        if flags & FLG_TRUEPOS:
            body_state, dt = source.state(tjd), 0.0
            sv = StateVector(body_state - observer, Frame(center, equinox))
        else:
            body_state, dt = light_time(source.state, observer, tjd)
            frame = Frame(center, equinox, corrections=(LIGHT_TIME,))
            sv = StateVector(body_state - observer, frame)

        apparent = center in (CENTER_GEO, CENTER_TOPO) and not flags & FLG_TRUEPOS
        if apparent and not flags & FLG_NOABERR:
            sv = sv.corrected(aberration(sv.x, observer[3:6], speed), ABERRATION)
        if apparent and not flags & FLG_NOGDEFL and body not in (SUN, MOON):
            sun = source_for(SUN, backend, ctx).state(tjd)
            sv = sv.corrected(deflection(sv.x, observer, sun, dt, speed), DEFLECTION)

    if icrs and not flags & FLG_ICRS and ctx.bias_model != BIAS_NONE:
        sv = sv.evolve(icrs_to_j2000(sv.x, ctx.bias_model), equinox=EQUINOX_J2000)
    if flags & FLG_J2000:
        return sv, orient
    sv = sv.evolve(precess_to_date(sv.x, tjd, ctx.precession_model, speed), equinox=EQUINOX_MEAN)
    if orient.matrix is not None:
        sv = sv.evolve(apply_nutation(sv.x, orient.matrix, orient.rate), equinox=EQUINOX_TRUE)
    return sv, orient


def _output(
    sv: StateVector, tjd: float, flags: int, orient: _Orientation, ctx: EngineContext
) -> np.ndarray:
    """Stage 8: plane, coordinate type, sidereal zodiac and units."""
    x = sv.x
    if not flags & FLG_EQUATORIAL:
        if sv.frame.equinox == EQUINOX_J2000:
            eps = EPS2000
        elif sv.frame.equinox == EQUINOX_MEAN:
            eps = orient.eps_mean
        else:
            eps = orient.eps_true
        sv = sv.evolve(equatorial_to_ecliptic(sv.x, eps), plane=PLANE_ECLIPTIC)
        x = sv.x
        if flags & FLG_SIDEREAL:
            # sidereal longitudes are counted from the mean equinox
            ayan = get_ayanamsa(tjd, ctx) + orient.dpsi * RADTODEG
            dayan = ayanamsa_rate(tjd)
            x = apply_matrix(rot_z(ayan / RADTODEG), x)
            x[3] += dayan / RADTODEG * x[1]
            x[4] -= dayan / RADTODEG * x[0]
    if flags & FLG_XYZ:
        out = np.array(x, dtype=np.float64, copy=True)
    else:
        out = cart_to_polar(x)
        if not flags & FLG_RADIANS:
            out[0] *= RADTODEG
            out[1] *= RADTODEG
            out[3] *= RADTODEG
            out[4] *= RADTODEG
    if not flags & FLG_SPEED:
        out[3:] = 0.0
    return out


def _compute(
    body: int, tjd: float, jd_ut: float, flags: int, backend: str, ctx: EngineContext
) -> np.ndarray:
    key = (body, tjd, flags & ~FLG_EPHMASK, backend)
    cached = ctx.cache.get(key)
    if cached is not None:
        logger.debug('Cache hit for body %d at %.6f', body, tjd)
        return cached
    sv, orient = _apparent_state(body, tjd, jd_ut, flags, backend, ctx)
    values = _output(sv, tjd, flags, orient, ctx)
    ctx.cache.put(key, values)
    return values


def compute_position(
    body: int, epoch: Epoch, flags: int = FLG_SPEED, ctx: EngineContext | None = None
) -> CalcResult:
    """Position of body at epoch.

    Parameters:
        body: Body number (constants.SUN .. VESTA, AST_OFFSET + n, or a
            registered element set).
        epoch: Instant in UT or TT.
        flags: Bitwise OR of FLG_* constants.
        ctx: Engine context; None uses the default one.

    Returns:
        CalcResult. Engine errors (missing files, dates out of range,
        unsupported centers) are reported in the result, not raised.

    Raises:
        ValueError: Invalid body number or contradictory flags.
    """
    ctx = ctx or get_context()
    _check_flags(body, flags, ctx)
    body = int(body)
    backend = backend_from_flags(flags, ctx)
    out_flags = (flags & ~FLG_EPHMASK) | _FLAG_OF_BACKEND[backend]
    tjd = to_tt(epoch, ctx).jd
    jd_ut = to_ut(epoch, ctx).jd
    try:
        values = _compute(body, tjd, jd_ut, flags, backend, ctx)
        return CalcResult(True, values, out_flags, backend)
    except (FileNotFoundEphemeris, DateOutOfRange) as e:
        if not ctx.allow_fallback or backend == BACKEND_SERIES:
            return CalcResult.failure(e, out_flags, backend)
        logger.warning('%s; falling back to closed-form series', e)
        fallback_flags = (flags & ~FLG_EPHMASK) | FLG_SERIES
        try:
            values = _compute(body, tjd, jd_ut, fallback_flags, BACKEND_SERIES, ctx)
        except EphemerisError as e2:
            return CalcResult.failure(e2, fallback_flags, BACKEND_SERIES)
        return CalcResult(
            True, values, fallback_flags, BACKEND_SERIES, message=f'{e}; using closed-form series'
        )
    except EphemerisError as e:
        return CalcResult.failure(e, out_flags, backend)


def calc(
    jd_tt: float, body: int, flags: int = FLG_SPEED, ctx: EngineContext | None = None
) -> CalcResult:
    """Position of body at a Julian day in Terrestrial Time."""
    return compute_position(body, Epoch.tt(jd_tt), flags, ctx)


def calc_ut(
    jd_ut: float, body: int, flags: int = FLG_SPEED, ctx: EngineContext | None = None
) -> CalcResult:
    """Position of body at a Julian day in Universal Time."""
    return compute_position(body, Epoch.ut(jd_ut), flags, ctx)
