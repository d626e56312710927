"""Chebyshev series evaluation (Clenshaw recurrence) and ephemeris segments."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np


def echeb(x: float, coef: Sequence[float], ncf: int) -> float:
    """Evaluate a Chebyshev series at x in [-1, 1].

    Parameters:
        x: Normalized argument.
        coef: Coefficients c0..c(n-1).
        ncf: Number of coefficients to use.

    Returns:
        c0/2 + sum of c_j T_j(x) for j >= 1.
    """
    x2 = x * 2.0
    br = 0.0
    brp2 = 0.0
    brpp = 0.0
    for j in range(ncf - 1, -1, -1):
        brp2 = brpp
        brpp = br
        br = x2 * brpp - brp2 + coef[j]
    return (br - brp2) * 0.5


def edcheb(x: float, coef: Sequence[float], ncf: int) -> float:
    """Evaluate the derivative (with respect to x) of a Chebyshev series.

    Parameters:
        x: Normalized argument.
        coef: Coefficients c0..c(n-1).
        ncf: Number of coefficients to use.

    Returns:
        d/dx of echeb(x, coef, ncf).
    """
    x2 = x * 2.0
    bf = 0.0
    bj = 0.0
    xjp2 = 0.0
    xjpl = 0.0
    bjp2 = 0.0
    bjpl = 0.0
    for j in range(ncf - 1, 0, -1):
        dj = float(j + j)
        xj = coef[j] * dj + xjp2
        bj = x2 * bjpl - bjp2 + xj
        bf = bjp2
        bjp2 = bjpl
        bjpl = bj
        xjp2 = xjpl
        xjpl = xj
    return (bj - bf) * 0.5


@dataclass
class Segment:
    """One time-bounded set of Chebyshev coefficients for a body.

    Parameters:
        body: Internal body index of the owning file.
        t0: Segment start (JD TT).
        t1: Segment end (JD TT).
        coef: Array of shape (ncomp, ncoef), one row per coordinate.
        ncf: Number of coefficients evaluated per coordinate.
        c0_halved: True when the series convention weights c0 by one half
            (packed SE1 files); False for the full-weight JPL convention.
        source: Path of the file the segment was read from.
    """

    body: int
    t0: float
    t1: float
    coef: np.ndarray
    ncf: int
    c0_halved: bool = True
    source: str = ''

    def contains(self, tjd: float) -> bool:
        """True if tjd lies in [t0, t1]."""
        return self.t0 <= tjd <= self.t1

    def normalized(self, tjd: float) -> float:
        """Chebyshev argument of tjd: 2*(t - t0)/(t1 - t0) - 1."""
        return 2.0 * (tjd - self.t0) / (self.t1 - self.t0) - 1.0


def evaluate(segment: Segment, tjd: float, speed: bool = True) -> np.ndarray:
    """Evaluate a segment at tjd.

    Parameters:
        segment: Segment covering tjd.
        tjd: Julian day (TT).
        speed: Also compute the time derivative.

    Returns:
        Array of 2*ncomp values: positions, then rates per day (zero when
        speed is False).
    """
    x = segment.normalized(tjd)
    ncomp = segment.coef.shape[0]
    out = np.zeros(2 * ncomp, dtype=np.float64)
    scale = 2.0 / (segment.t1 - segment.t0)
    for i in range(ncomp):
        row = segment.coef[i]
        out[i] = echeb(x, row, segment.ncf)
        if not segment.c0_halved:
            out[i] += 0.5 * row[0]
        if speed:
            out[ncomp + i] = edcheb(x, row, segment.ncf) * scale
    return out
