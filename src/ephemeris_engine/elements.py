"""Osculating orbital elements, and nodes and apsides of planetary and lunar orbits."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

import numpy as np

from ephemeris_engine.constants import (
    EARTH,
    EARTH_MOON_MRAT,
    FLG_BARYCTR,
    FLG_EPHMASK,
    FLG_EQUATORIAL,
    FLG_HELCTR,
    FLG_J2000,
    FLG_NONUT,
    FLG_RADIANS,
    FLG_SPEED,
    FLG_TRUEPOS,
    FLG_XYZ,
    LUNAR_POINTS,
    MEAN_APOG,
    MEAN_NODE,
    MOON,
    NODBIT_FOPOINT,
    NODBIT_MEAN,
    NODBIT_OSCU,
    NODBIT_OSCU_BAR,
    NUT_IAU_1980,
    NUT_JPL,
    RADTODEG,
    SUN,
)
from ephemeris_engine.context import EngineContext, get_context
from ephemeris_engine.epoch import Epoch
from ephemeris_engine.errors import EphemerisError
from ephemeris_engine.pipeline import calc, compute_position
from ephemeris_engine.series import kepler
from ephemeris_engine.series.kepler import GM_SUN
from ephemeris_engine.series.lunar_points import (
    GM_EARTH_MOON,
    MOON_ECCENTRICITY,
    MOON_MEAN_DISTANCE_AU,
)
from ephemeris_engine.time_utils import to_tt
from ephemeris_engine.transforms.nutation import apply_nutation, nutation, nutation_matrix
from ephemeris_engine.transforms.obliquity import EPS2000, mean_obliquity
from ephemeris_engine.transforms.precession import precess_to_date
from ephemeris_engine.transforms.vectors import (
    cart_to_polar,
    ecliptic_to_equatorial,
    equatorial_to_ecliptic,
    radnorm,
)

logger = logging.getLogger(__name__)

# geometric J2000 ecliptic rectangular state
_STATE_FLAGS = FLG_XYZ | FLG_SPEED | FLG_J2000 | FLG_NONUT | FLG_TRUEPOS
_POSITION_FLAGS = FLG_XYZ | FLG_J2000 | FLG_NONUT | FLG_TRUEPOS

NODE_CALC_INTV = 0.0001  # days; scaled by the distance for planets


@dataclass
class ElementsResult:
    """Osculating elements referred to the J2000 ecliptic and equinox.

    Angles are in degrees, distances in AU, times in days. The Moon's
    elements are geocentric, every other body's heliocentric. For open
    orbits (e >= 1) the anomalies, period and aphelion are NaN.
    """

    ok: bool
    error: str | None = None
    message: str = ''
    epoch: float = 0.0
    a: float = 0.0
    e: float = 0.0
    i: float = 0.0
    node: float = 0.0
    peri: float = 0.0
    lon_peri: float = 0.0
    mean_anomaly: float = 0.0
    true_anomaly: float = 0.0
    eccentric_anomaly: float = 0.0
    mean_longitude: float = 0.0
    mean_motion: float = 0.0
    period: float = 0.0
    perihelion_distance: float = 0.0
    aphelion_distance: float = 0.0
    perihelion_time: float = 0.0


def elements_from_state(state: np.ndarray, mu: float, tjd: float) -> ElementsResult:
    """Two-body elements of an ecliptic state.

    Parameters:
        state: 6-element ecliptic state (AU, AU/day) relative to the central body.
        mu: Gravitational parameter of the central body (AU^3/day^2).
        tjd: Epoch of the state (JD TT).

    Returns:
        ElementsResult with ok True.
    """
    r_vec = np.asarray(state[:3], dtype=np.float64)
    v_vec = np.asarray(state[3:6], dtype=np.float64)
    r = math.sqrt(float(r_vec @ r_vec))
    v2 = float(v_vec @ v_vec)
    h = np.cross(r_vec, v_vec)
    hn = math.sqrt(float(h @ h))
    ecc = np.cross(v_vec, h) / mu - r_vec / r
    e = math.sqrt(float(ecc @ ecc))
    a = 1.0 / (2.0 / r - v2 / mu)
    incl = math.acos(max(-1.0, min(1.0, h[2] / hn)))

    # ascending node direction; undefined in the reference plane, where x is used
    node_vec = np.array([-h[1], h[0], 0.0])
    nn = math.sqrt(float(node_vec @ node_vec))
    node_hat = node_vec / nn if nn > 1e-15 else np.array([1.0, 0.0, 0.0])
    node = math.atan2(node_hat[1], node_hat[0])
    h_hat = h / hn
    if e > 1e-12:
        e_hat = ecc / e
    else:
        e_hat = node_hat
    peri = math.atan2(float(np.cross(node_hat, e_hat) @ h_hat), float(node_hat @ e_hat))
    true_anom = math.atan2(float(np.cross(e_hat, r_vec) @ h_hat), float(e_hat @ r_vec))

    result = ElementsResult(True, epoch=tjd)
    result.a = a
    result.e = e
    result.i = incl * RADTODEG
    result.node = radnorm(node) * RADTODEG
    result.peri = radnorm(peri) * RADTODEG
    result.lon_peri = radnorm(node + peri) * RADTODEG
    result.true_anomaly = radnorm(true_anom) * RADTODEG
    result.perihelion_distance = a * (1.0 - e)
    if e >= 1.0:
        nan = float('nan')
        result.eccentric_anomaly = result.mean_anomaly = result.mean_longitude = nan
        result.mean_motion = result.period = result.aphelion_distance = nan
        result.perihelion_time = nan
        return result

    ecc_anom = math.atan2(math.sqrt(1.0 - e * e) * math.sin(true_anom), e + math.cos(true_anom))
    mean_anom = ecc_anom - e * math.sin(ecc_anom)
    motion = math.sqrt(mu / a**3)
    result.eccentric_anomaly = radnorm(ecc_anom) * RADTODEG
    result.mean_anomaly = radnorm(mean_anom) * RADTODEG
    result.mean_longitude = radnorm(node + peri + mean_anom) * RADTODEG
    result.mean_motion = motion * RADTODEG
    result.period = 2.0 * math.pi / motion
    result.aphelion_distance = a * (1.0 + e)
    # most recent perihelion passage
    result.perihelion_time = tjd - radnorm(mean_anom) / motion
    return result


def compute_orbital_elements(
    body: int, epoch: Epoch, ctx: EngineContext | None = None
) -> ElementsResult:
    """Osculating elements of body at epoch.

    The state is taken geometrically (no light-time or aberration) in the
    J2000 frame, heliocentric for planets and asteroids and geocentric for
    the Moon.

    Parameters:
        body: Body number.
        epoch: Instant (UT or TT).
        ctx: Engine context; None uses the default one.

    Returns:
        ElementsResult; on failure ok is False and error names the kind.
    """
    ctx = ctx or get_context()
    if body == MOON:
        flags, mu = _STATE_FLAGS, GM_EARTH_MOON
    else:
        flags, mu = _STATE_FLAGS | FLG_HELCTR, GM_SUN
    pos = compute_position(body, epoch, flags, ctx)
    if not pos.ok:
        return ElementsResult(False, error=pos.error, message=pos.message)
    tjd = to_tt(epoch, ctx).jd
    elements = elements_from_state(pos.values, mu, tjd)
    elements.message = pos.message
    logger.debug('Elements of body %d at %.6f: a=%.6f e=%.6f', body, tjd, elements.a, elements.e)
    return elements


def _zero_state() -> np.ndarray:
    return np.zeros(6, dtype=np.float64)


@dataclass
class NodesApsidesResult:
    """Nodes and apsides of an orbit.

    Each point holds six values in the coordinates the flags ask for
    (longitude, latitude, distance and their speeds by default). With
    NODBIT_FOPOINT ``aphelion`` holds the second focus of the ellipse;
    for open orbits it is NaN.
    """

    ok: bool
    error: str | None = None
    message: str = ''
    ascending: np.ndarray = field(default_factory=_zero_state)
    descending: np.ndarray = field(default_factory=_zero_state)
    perihelion: np.ndarray = field(default_factory=_zero_state)
    aphelion: np.ndarray = field(default_factory=_zero_state)


def orbit_points(
    node_hat: np.ndarray, e_hat: np.ndarray, a: float, e: float, p: float, fopoint: bool = False
) -> list[np.ndarray]:
    """Ascending node, descending node, perihelion and aphelion of a conic.

    Parameters:
        node_hat: Unit vector toward the ascending node.
        e_hat: Unit vector toward the perihelion.
        a: Semi-major axis (negative for hyperbolas).
        e: Eccentricity.
        p: Semi-latus rectum.
        fopoint: Give the second focus instead of the aphelion.

    Returns:
        Four positions relative to the focus; points the orbit never
        reaches are NaN.
    """
    nan = np.full(3, np.nan)
    # e * cos(true anomaly) at the ascending node
    e_cos = e * float(e_hat @ node_hat)
    asc = node_hat * p / (1.0 + e_cos) if 1.0 + e_cos > 0.0 else nan
    desc = -node_hat * p / (1.0 - e_cos) if 1.0 - e_cos > 0.0 else nan
    peri = e_hat * p / (1.0 + e)
    if e >= 1.0:
        aphe = nan
    elif fopoint:
        aphe = -e_hat * 2.0 * a * e
    else:
        aphe = -e_hat * a * (1.0 + e)
    return [asc, desc, peri, aphe]


def osculating_points(state: np.ndarray, mu: float, fopoint: bool = False) -> list[np.ndarray]:
    """orbit_points of the two-body orbit through a state (AU, AU/day)."""
    r_vec = np.asarray(state[:3], dtype=np.float64)
    v_vec = np.asarray(state[3:6], dtype=np.float64)
    r = math.sqrt(float(r_vec @ r_vec))
    h = np.cross(r_vec, v_vec)
    hn = math.sqrt(float(h @ h))
    ecc = np.cross(v_vec, h) / mu - r_vec / r
    e = math.sqrt(float(ecc @ ecc))
    a = 1.0 / (2.0 / r - float(v_vec @ v_vec) / mu)
    node_vec = np.array([-h[1], h[0], 0.0])
    nn = math.sqrt(float(node_vec @ node_vec))
    node_hat = node_vec / nn if nn > 1e-15 else np.array([1.0, 0.0, 0.0])
    e_hat = ecc / e if e > 1e-12 else node_hat
    return orbit_points(node_hat, e_hat, a, e, hn * hn / mu, fopoint)


def _mean_planet_points(body: int, tjd: float, fopoint: bool) -> list[np.ndarray]:
    a, e, incl, node, peri, _ = kepler.mean_elements(kepler.EMB if body == EARTH else body, tjd)
    cn, sn = math.cos(node), math.sin(node)
    cw, sw = math.cos(peri), math.sin(peri)
    ci, si = math.cos(incl), math.sin(incl)
    node_hat = np.array([cn, sn, 0.0])
    e_hat = np.array([cw * cn - sw * sn * ci, cw * sn + sw * cn * ci, sw * si])
    return orbit_points(node_hat, e_hat, a, e, a * (1.0 - e * e), fopoint)


def _mean_lunar_points(
    tjd: float, iflag: int, fopoint: bool, ctx: EngineContext
) -> list[np.ndarray]:
    node = calc(tjd, MEAN_NODE, iflag, ctx).unwrap()[:3]
    apogee = calc(tjd, MEAN_APOG, iflag, ctx).unwrap()[:3]
    node_hat = node / math.sqrt(float(node @ node))
    e_hat = -apogee / math.sqrt(float(apogee @ apogee))
    a, e = MOON_MEAN_DISTANCE_AU, MOON_ECCENTRICITY
    return orbit_points(node_hat, e_hat, a, e, a * (1.0 - e * e), fopoint)


def _planet_mu(body: int) -> float:
    ratio = kepler.SUN_TO_PLANET_MASS.get(kepler.EMB if body == EARTH else body)
    return GM_SUN * (1.0 + 1.0 / ratio) if ratio else GM_SUN


def _to_output_frame(x: np.ndarray, tjd: float, flags: int, ctx: EngineContext) -> np.ndarray:
    """J2000 ecliptic state to the plane and equinox named by flags."""
    if flags & FLG_J2000 and not flags & FLG_EQUATORIAL:
        return x
    equ = ecliptic_to_equatorial(x, EPS2000)
    eps = EPS2000
    if not flags & FLG_J2000:
        equ = precess_to_date(equ, tjd, ctx.precession_model, speed=False)
        eps = mean_obliquity(tjd, ctx.precession_model)
        if not flags & FLG_NONUT:
            model = NUT_IAU_1980 if ctx.nutation_model == NUT_JPL else ctx.nutation_model
            dpsi, deps = nutation(tjd, model)
            equ = apply_nutation(equ, nutation_matrix(eps, dpsi, deps))
            eps += deps
    if flags & FLG_EQUATORIAL:
        return equ
    return equatorial_to_ecliptic(equ, eps)


class _NodesApsides:
    """Evaluates the four orbit points of one body, relative to the output center."""

    def __init__(self, body: int, method: int, flags: int, ctx: EngineContext) -> None:
        self.body = body
        self.flags = flags
        self.ctx = ctx
        self.fopoint = bool(method & NODBIT_FOPOINT)
        base = method & ~NODBIT_FOPOINT or NODBIT_MEAN
        if not base & (NODBIT_MEAN | NODBIT_OSCU | NODBIT_OSCU_BAR):
            raise ValueError(f'Invalid nodes/apsides method {method}')
        has_mean = body == MOON or body == EARTH or body in kepler.KEPLER_BODIES
        self.mean = bool(base & NODBIT_MEAN) and has_mean
        self.barycentric = not self.mean and bool(base & NODBIT_OSCU_BAR) and body != MOON
        self.iflag = (flags & FLG_EPHMASK) | _POSITION_FLAGS
        if body == MOON:
            self.origin = EARTH
        elif self.barycentric:
            self.origin = None
        else:
            self.origin = SUN
        if flags & FLG_HELCTR:
            self.center = SUN
        elif flags & FLG_BARYCTR:
            self.center = None
        else:
            self.center = EARTH

    def _barycentric(self, body: int | None, tjd: float) -> np.ndarray:
        if body is None:
            return np.zeros(3)
        return calc(tjd, body, self.iflag | FLG_BARYCTR, self.ctx).unwrap()[:3]

    def _state(self, tjd: float) -> np.ndarray:
        iflag = self.iflag | FLG_SPEED
        if self.body != MOON:
            iflag |= FLG_BARYCTR if self.barycentric else FLG_HELCTR
        state = calc(tjd, self.body, iflag, self.ctx).unwrap().copy()
        if self.body == EARTH:
            # the Earth-Moon barycenter moves on the Keplerian orbit
            moon = calc(tjd, MOON, self.iflag | FLG_SPEED, self.ctx).unwrap()
            state += moon / (EARTH_MOON_MRAT + 1.0)
        return state

    def step(self, tjd: float) -> float:
        """Time step of the speed difference."""
        if self.body == MOON:
            return NODE_CALC_INTV
        x = self._state(tjd)[:3]
        return NODE_CALC_INTV * 10.0 * math.sqrt(float(x @ x))

    def points(self, tjd: float) -> list[np.ndarray]:
        """The four points relative to the output center, J2000 ecliptic."""
        if self.mean and self.body == MOON:
            points = _mean_lunar_points(tjd, self.iflag, self.fopoint, self.ctx)
        elif self.mean:
            points = _mean_planet_points(self.body, tjd, self.fopoint)
        else:
            mu = GM_EARTH_MOON if self.body == MOON else _planet_mu(self.body)
            points = osculating_points(self._state(tjd), mu, self.fopoint)
        if self.origin != self.center:
            shift = self._barycentric(self.origin, tjd) - self._barycentric(self.center, tjd)
            points = [p + shift for p in points]
        return points

    def output(
        self, tjd: float, points: list[np.ndarray], speeds: list[np.ndarray]
    ) -> list[np.ndarray]:
        out = []
        for p, v in zip(points, speeds):
            x = _to_output_frame(np.concatenate([p, v]), tjd, self.flags, self.ctx)
            if not self.flags & FLG_XYZ:
                x = cart_to_polar(x)
                if not self.flags & FLG_RADIANS:
                    x[[0, 1, 3, 4]] *= RADTODEG
            if not self.flags & FLG_SPEED:
                x[3:] = 0.0
            out.append(x)
        return out


def nod_aps(
    jd_tt: float,
    body: int,
    method: int = NODBIT_MEAN,
    flags: int = FLG_SPEED,
    ctx: EngineContext | None = None,
) -> NodesApsidesResult:
    """Nodes and apsides of a planet's or the Moon's orbit.

    Mean points come from the mean elements (the mean lunar node and apogee
    for the Moon); bodies without mean elements use the osculating orbit.
    Osculating points come from the heliocentric (NODBIT_OSCU) or
    barycentric (NODBIT_OSCU_BAR) two-body orbit through the geometric
    state; the Moon's orbit is always geocentric. Points are geocentric
    unless FLG_HELCTR or FLG_BARYCTR names another center, and speeds are
    differences over a short interval.

    Parameters:
        jd_tt: Julian day (TT).
        body: Body number; the Sun stands for the Earth's orbit.
        method: NODBIT_MEAN, NODBIT_OSCU or NODBIT_OSCU_BAR, optionally
            ORed with NODBIT_FOPOINT; 0 means NODBIT_MEAN.
        flags: FLG_* bits selecting backend, center, frame and output form.
        ctx: Engine context; None uses the default one.

    Returns:
        NodesApsidesResult; on an engine error ok is False and error names
        the kind.

    Raises:
        ValueError: Invalid method, or a body without an orbit of its own.
    """
    ctx = ctx or get_context()
    if body == SUN:
        body = EARTH
    if body in LUNAR_POINTS:
        raise ValueError(f'Body {body} has no orbit of its own')
    orbit = _NodesApsides(body, method, flags, ctx)
    try:
        points = orbit.points(jd_tt)
        speeds = [np.zeros(3)] * 4
        if flags & FLG_SPEED:
            dt = orbit.step(jd_tt)
            ahead = orbit.points(jd_tt + dt)
            behind = orbit.points(jd_tt - dt)
            speeds = [(pa - pb) / (2.0 * dt) for pa, pb in zip(ahead, behind)]
        asc, desc, peri, aphe = orbit.output(jd_tt, points, speeds)
    except EphemerisError as exc:
        return NodesApsidesResult(False, error=exc.kind, message=str(exc))
    logger.debug('Nodes and apsides of body %d at %.6f (method %d)', body, jd_tt, method)
    return NodesApsidesResult(True, ascending=asc, descending=desc, perihelion=peri, aphelion=aphe)


def nod_aps_ut(
    jd_ut: float,
    body: int,
    method: int = NODBIT_MEAN,
    flags: int = FLG_SPEED,
    ctx: EngineContext | None = None,
) -> NodesApsidesResult:
    """nod_aps at a Julian day in Universal Time."""
    ctx = ctx or get_context()
    return nod_aps(to_tt(Epoch.ut(jd_ut), ctx).jd, body, method, flags, ctx)
