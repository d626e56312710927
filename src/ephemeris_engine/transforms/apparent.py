"""Light-time iteration, relativistic aberration and light deflection by the Sun.

All vectors are J2000 equatorial, AU and AU/day. Observer-relative vectors
point from the observer to the body.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

import numpy as np

from ephemeris_engine.constants import (
    AUNIT,
    CLIGHT,
    CLIGHT_AU_PER_DAY,
    DEFL_SPEED_INTV,
    HELGRAVCONST,
    LIGHTTIME_AUNIT,
    LIGHTTIME_MAX_ITER,
    LIGHTTIME_TOLERANCE,
    PLAN_SPEED_INTV,
    SUN_RADIUS_AU,
)

logger = logging.getLogger(__name__)

# Fraction of the solar mass inside radius r (in solar radii), r = 1.00, 0.99, ..., 0.00
_MEFF = (
    1.000000, 0.999979, 0.999940, 0.999881, 0.999811, 0.999724, 0.999622, 0.999497,
    0.999354, 0.999192, 0.999000, 0.998786, 0.998535, 0.998242, 0.997919, 0.997571,
    0.997198, 0.996792, 0.996316, 0.995791, 0.995226, 0.994625, 0.993991, 0.993326,
    0.992598, 0.991770, 0.990873, 0.989919, 0.988912, 0.987856, 0.986755, 0.985610,
    0.984398, 0.982986, 0.981437, 0.979779, 0.978024, 0.976182, 0.974256, 0.972253,
    0.970174, 0.968024, 0.965594, 0.962797, 0.959758, 0.956515, 0.953088, 0.949495,
    0.945741, 0.941838, 0.937790, 0.933563, 0.928668, 0.923288, 0.917527, 0.911432,
    0.905035, 0.898353, 0.891022, 0.882940, 0.874312, 0.865206, 0.855423, 0.844619,
    0.833074, 0.820876, 0.808031, 0.793962, 0.778931, 0.763021, 0.745815, 0.727557,
    0.708234, 0.687583, 0.665741, 0.642597, 0.618252, 0.592586, 0.565747, 0.537697,
    0.508554, 0.478420, 0.447322, 0.415454, 0.382892, 0.349955, 0.316691, 0.283565,
    0.250431, 0.218327, 0.186794, 0.156287, 0.128421, 0.102237, 0.077393, 0.054833,
    0.036361, 0.020953, 0.009645, 0.002767, 0.000000,
)  # fmt: skip
_MEFF_STEP = 0.01

# 2 GM_sun / c^2 in AU
_SCHWARZSCHILD_AU = 2.0 * HELGRAVCONST / CLIGHT / CLIGHT / AUNIT


def meff(r: float) -> float:
    """Effective deflecting mass for a ray passing r solar radii from the Sun's center.

    Linear interpolation in the tabulated mass distribution; 0 at the center,
    1 at or beyond the limb.
    """
    if r <= 0.0:
        return 0.0
    if r >= 1.0:
        return 1.0
    # table index i holds r = 1 - i*step; find the first entry not above r
    i = min(int((1.0 - r) / _MEFF_STEP), len(_MEFF) - 2)
    r_hi = 1.0 - i * _MEFF_STEP
    if r > r_hi:
        i -= 1
        r_hi = 1.0 - i * _MEFF_STEP
    r_lo = r_hi - _MEFF_STEP
    f = (r - r_hi) / (r_lo - r_hi)
    return _MEFF[i] + f * (_MEFF[i + 1] - _MEFF[i])


def light_time(
    state_at: Callable[[float], np.ndarray],
    observer: np.ndarray,
    tjd: float,
    max_iter: int = LIGHTTIME_MAX_ITER,
    tolerance: float = LIGHTTIME_TOLERANCE,
) -> tuple[np.ndarray, float]:
    """Iterate the light travel time from a body to an observer.

    Parameters:
        state_at: Callable returning the body's barycentric state at a Julian day.
        observer: Observer's barycentric state at tjd.
        tjd: Observation instant (JD TT).
        max_iter: Iteration cap.
        tolerance: Convergence threshold on the light time (days).

    Returns:
        (body state at tjd - light time, light time in days). The velocity is
        scaled by the rate of change of the retarded time.
    """
    body = state_at(tjd)
    dt = 0.0
    for _ in range(max_iter):
        rel = body[:3] - observer[:3]
        dt_new = math.sqrt(float(rel @ rel)) * LIGHTTIME_AUNIT
        body = state_at(tjd - dt_new)
        if abs(dt_new - dt) < tolerance:
            dt = dt_new
            break
        dt = dt_new
    rel = body[:3] - observer[:3]
    dist = math.sqrt(float(rel @ rel))
    out = np.array(body, dtype=np.float64, copy=True)
    if dist > 0.0:
        dtau = float(rel @ (body[3:6] - observer[3:6])) / dist * LIGHTTIME_AUNIT
        out[3:6] = body[3:6] * (1.0 - dtau)
    return out, dt


def _aberrate_position(u: np.ndarray, v: np.ndarray) -> np.ndarray:
    ru = math.sqrt(float(u @ u))
    if ru < 1e-15:
        return u.copy()
    v2 = float(v @ v)
    b_1 = math.sqrt(1.0 - v2)
    f1 = float(u @ v) / ru
    f2 = 1.0 + f1 / (1.0 + b_1)
    return (b_1 * u + f2 * ru * v) / (1.0 + f1)


def aberration(x: np.ndarray, observer_velocity: np.ndarray, speed: bool = True) -> np.ndarray:
    """Relativistic aberration of an observer-relative state.

    Parameters:
        x: 6-element observer-to-body state (AU, AU/day).
        observer_velocity: Observer's barycentric velocity (AU/day).
        speed: Correct the velocity as well (finite difference over
            PLAN_SPEED_INTV).

    Returns:
        New 6-element state.
    """
    v = np.asarray(observer_velocity[:3], dtype=np.float64) / CLIGHT_AU_PER_DAY
    out = np.array(x, dtype=np.float64, copy=True)
    out[:3] = _aberrate_position(x[:3], v)
    if speed:
        u = x[:3] - PLAN_SPEED_INTV * x[3:6]
        shifted = _aberrate_position(u, v)
        out[3:6] += ((out[:3] - x[:3]) - (shifted - u)) / PLAN_SPEED_INTV
    return out


def _deflect_position(
    xx: np.ndarray, earth: np.ndarray, sun_now: np.ndarray, sun_retarded: np.ndarray
) -> np.ndarray:
    """Deflected position of observer-relative vector xx (positions only)."""
    u = xx[:3]
    e = earth[:3] - sun_now[:3]
    q = xx[:3] + earth[:3] - sun_retarded[:3]
    ru = math.sqrt(float(u @ u))
    rq = math.sqrt(float(q @ q))
    re = math.sqrt(float(e @ e))
    if ru < 1e-15 or rq < 1e-15 or re < 1e-15:
        return u.copy()
    u = u / ru
    q = q / rq
    e = e / re
    uq = float(u @ q)
    ue = float(u @ e)
    qe = float(q @ e)
    sina = math.sqrt(max(0.0, 1.0 - ue * ue))
    sin_sunr = SUN_RADIUS_AU / re
    meff_fact = meff(sina / sin_sunr) if sina < sin_sunr else 1.0
    g1 = _SCHWARZSCHILD_AU * meff_fact / re
    g2 = 1.0 + qe
    return ru * (u + g1 / g2 * (uq * e - ue * q))


def deflection(
    x: np.ndarray,
    observer: np.ndarray,
    sun: np.ndarray,
    light_time_days: float,
    speed: bool = True,
) -> np.ndarray:
    """Gravitational light deflection by the Sun.

    Parameters:
        x: 6-element observer-to-body state.
        observer: Observer's barycentric state.
        sun: Sun's barycentric state at the observation instant.
        light_time_days: Light time from the body (the Sun is moved back by it).
        speed: Correct the velocity by a finite difference over DEFL_SPEED_INTV.

    Returns:
        New 6-element state.
    """
    sun_retarded = sun.copy()
    sun_retarded[:3] = sun[:3] - light_time_days * sun[3:6]
    out = np.array(x, dtype=np.float64, copy=True)
    out[:3] = _deflect_position(x, observer, sun, sun_retarded)
    if speed:
        dtsp = -DEFL_SPEED_INTV
        x2 = x.copy()
        x2[:3] = x[:3] - dtsp * x[3:6]
        obs2 = observer.copy()
        obs2[:3] = observer[:3] - dtsp * observer[3:6]
        sun2 = sun.copy()
        sun2[:3] = sun[:3] - dtsp * sun[3:6]
        sun_ret2 = sun_retarded.copy()
        sun_ret2[:3] = sun_retarded[:3] - dtsp * sun[3:6]
        deflected2 = _deflect_position(x2, obs2, sun2, sun_ret2)
        out[3:6] += ((out[:3] - x[:3]) - (deflected2 - x2[:3])) / dtsp
    return out
