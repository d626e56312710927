"""Angle normalization, polar/rectangular conversion and axis rotations.

Six-element vectors hold position then velocity. Polar vectors are
(longitude, latitude, distance) in radians and AU with rates per day.
"""

from __future__ import annotations

import math

import numpy as np

from ephemeris_engine.constants import TWOPI


def degnorm(x: float) -> float:
    """Normalize an angle in degrees to [0, 360)."""
    y = math.fmod(x, 360.0)
    if abs(y) < 1e-13:
        y = 0.0
    if y < 0.0:
        y += 360.0
    if y >= 360.0:
        y -= 360.0
    return y


def radnorm(x: float) -> float:
    """Normalize an angle in radians to [0, 2*pi)."""
    y = math.fmod(x, TWOPI)
    if abs(y) < 1e-13:
        y = 0.0
    if y < 0.0:
        y += TWOPI
    if y >= TWOPI:
        y -= TWOPI
    return y


def difdeg2n(p1: float, p2: float) -> float:
    """Signed difference p1 - p2 in degrees, reduced to [-180, 180)."""
    dif = degnorm(p1 - p2)
    if dif >= 180.0:
        return dif - 360.0
    return dif


def difrad2n(p1: float, p2: float) -> float:
    """Signed difference p1 - p2 in radians, reduced to [-pi, pi)."""
    dif = radnorm(p1 - p2)
    if dif >= math.pi:
        return dif - TWOPI
    return dif


def cart_to_polar(x: np.ndarray) -> np.ndarray:
    """Rectangular state to polar state (longitude, latitude, distance + rates).

    Parameters:
        x: 6-element rectangular state (a 3-element vector is also accepted;
            rates are then zero).

    Returns:
        6-element polar state; angles in radians, longitude in [0, 2*pi).
    """
    x = np.asarray(x, dtype=np.float64)
    out = np.zeros(6, dtype=np.float64)
    px, py, pz = x[0], x[1], x[2]
    rxy2 = px * px + py * py
    r = math.sqrt(rxy2 + pz * pz)
    if r == 0.0:
        return out
    rxy = math.sqrt(rxy2)
    out[0] = radnorm(math.atan2(py, px)) if rxy2 > 0.0 else 0.0
    out[1] = math.atan2(pz, rxy)
    out[2] = r
    if x.shape[0] < 6:
        return out
    vx, vy, vz = x[3], x[4], x[5]
    out[5] = (px * vx + py * vy + pz * vz) / r
    if rxy2 == 0.0:
        # on the pole: longitude rate undefined, latitude rate from the z-axis motion
        out[3] = 0.0
        out[4] = math.sqrt(vx * vx + vy * vy) / r * (1.0 if pz < 0.0 else -1.0)
        return out
    out[3] = (px * vy - py * vx) / rxy2
    out[4] = (vz * rxy2 - pz * (px * vx + py * vy)) / (r * r * rxy)
    return out


def polar_to_cart(p: np.ndarray) -> np.ndarray:
    """Polar state (longitude, latitude, distance + rates) to rectangular state."""
    p = np.asarray(p, dtype=np.float64)
    out = np.zeros(6, dtype=np.float64)
    lon, lat, r = p[0], p[1], p[2]
    cl, sl = math.cos(lon), math.sin(lon)
    cb, sb = math.cos(lat), math.sin(lat)
    out[0] = r * cb * cl
    out[1] = r * cb * sl
    out[2] = r * sb
    if p.shape[0] < 6:
        return out
    dl, db, dr = p[3], p[4], p[5]
    out[3] = dr * cb * cl - r * sb * cl * db - r * cb * sl * dl
    out[4] = dr * cb * sl - r * sb * sl * db + r * cb * cl * dl
    out[5] = dr * sb + r * cb * db
    return out


def rot_x(angle: float) -> np.ndarray:
    """Frame rotation about the x axis by angle (radians)."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, s], [0.0, -s, c]])


def rot_y(angle: float) -> np.ndarray:
    """Frame rotation about the y axis by angle (radians)."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, 0.0, -s], [0.0, 1.0, 0.0], [s, 0.0, c]])


def rot_z(angle: float) -> np.ndarray:
    """Frame rotation about the z axis by angle (radians)."""
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, s, 0.0], [-s, c, 0.0], [0.0, 0.0, 1.0]])


def apply_matrix(matrix: np.ndarray, x: np.ndarray, dmatrix: np.ndarray | None = None) -> np.ndarray:
    """Rotate a 6-element state.

    Parameters:
        matrix: 3x3 rotation.
        x: 6-element state.
        dmatrix: Time derivative of matrix (per day); adds the frame rotation
            rate to the velocity when given.

    Returns:
        New 6-element state.
    """
    x = np.asarray(x, dtype=np.float64)
    out = np.empty(6, dtype=np.float64)
    out[:3] = matrix @ x[:3]
    out[3:] = matrix @ x[3:6]
    if dmatrix is not None:
        out[3:] += dmatrix @ x[:3]
    return out


def coortf(x: np.ndarray, eps: float) -> np.ndarray:
    """Rotate about the x axis by eps (equatorial -> ecliptic for +eps).

    Applies to both position and velocity halves of a 6-element state.
    """
    return apply_matrix(rot_x(eps), x)


def equatorial_to_ecliptic(x: np.ndarray, eps: float) -> np.ndarray:
    """Equatorial rectangular state to ecliptic, obliquity eps in radians."""
    return coortf(x, eps)


def ecliptic_to_equatorial(x: np.ndarray, eps: float) -> np.ndarray:
    """Ecliptic rectangular state to equatorial, obliquity eps in radians."""
    return coortf(x, -eps)
