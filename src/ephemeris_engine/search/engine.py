"""Bracket-and-refine searches over a scalar function of time.

find_root samples f at a fixed step, looks for a sign change (or a slope
reversal whose extremum reaches zero) and refines by bisection.
find_extremum brackets a sampled extremum and refines it by successive
parabolic interpolation, bisecting whenever the bracket stalls. Both scan
from t0 toward t1, which may lie on either side of t0, and report the first
event met in that direction.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

from ephemeris_engine.errors import NumericNonConvergence, SearchNotFound

logger = logging.getLogger(__name__)

SearchFunction = Callable[[float], float]

DEFAULT_MAX_ITER = 100


def _check_arguments(t0: float, t1: float, step: float, tol: float) -> None:
    if step <= 0.0:
        raise ValueError(f'Step must be positive, got {step}')
    if tol <= 0.0:
        raise ValueError(f'Tolerance must be positive, got {tol}')
    if t0 == t1:
        raise ValueError('Empty search window')


def _samples(t0: float, t1: float, step: float):
    """Yield sample times from t0 to t1 inclusive, stepping toward t1."""
    direction = 1.0 if t1 > t0 else -1.0
    n = int(math.ceil(abs(t1 - t0) / step))
    for i in range(n):
        yield t0 + direction * i * step
    yield t1


def bisect(
    f: SearchFunction,
    a: float,
    b: float,
    tol: float,
    max_iter: int = DEFAULT_MAX_ITER,
    fa: float | None = None,
) -> float:
    """Root of f between a and b, where f(a) and f(b) differ in sign.

    Raises:
        NumericNonConvergence: The bracket is still wider than tol after
            max_iter halvings.
    """
    if fa is None:
        fa = f(a)
    for _ in range(max_iter):
        if abs(b - a) <= tol:
            return 0.5 * (a + b)
        m = 0.5 * (a + b)
        fm = f(m)
        if fm == 0.0:
            return m
        if (fm < 0.0) == (fa < 0.0):
            a, fa = m, fm
        else:
            b = m
    if abs(b - a) <= tol:
        return 0.5 * (a + b)
    raise NumericNonConvergence(
        f'Bisection did not reach {tol:g} within {max_iter} iterations (bracket {a:.8f}..{b:.8f})'
    )


def _vertex(
    t0: float, t1: float, t2: float, y0: float, y1: float, y2: float
) -> tuple[float, float]:
    """Abscissa and value of the parabola through three points."""
    d1 = (y1 - y0) / (t1 - t0)
    d2 = (y2 - y1) / (t2 - t1)
    c = (d2 - d1) / (t2 - t0)
    if c == 0.0:
        return t1, y1
    b = d1 - c * (t0 + t1)
    tv = -b / (2.0 * c)
    yv = y0 + d1 * (tv - t0) + c * (tv - t0) * (tv - t1)
    return tv, yv


def _crosses(y0: float, y1: float, rising: bool | None) -> bool:
    if rising is None:
        return (y0 < 0.0) != (y1 < 0.0)
    if rising:
        return y0 < 0.0 <= y1
    return y0 >= 0.0 > y1


def find_root(
    f: SearchFunction,
    t0: float,
    t1: float,
    tol: float = 1e-8,
    step: float = 1.0 / 12.0,
    max_iter: int = DEFAULT_MAX_ITER,
    rising: bool | None = None,
    near_zero: float = 0.0,
) -> float:
    """First zero of f met when scanning from t0 toward t1.

    Parameters:
        f: Scalar function of time.
        t0: Start of the search window.
        t1: End of the search window (before t0 for a backward search).
        tol: Width (in time) to which the root is refined.
        step: Coarse sampling step; must be short enough that f cannot
            change sign twice within it.
        max_iter: Iteration cap of the refinement.
        rising: True accepts only upward crossings, False only downward
            crossings, None both.
        near_zero: An extremum whose magnitude is at most near_zero counts
            as a touching root when f has no sign change around it.

    Returns:
        Time of the root.

    Raises:
        SearchNotFound: No root in the window.
        NumericNonConvergence: Refinement exhausted max_iter.
        ValueError: Non-positive step or tolerance, or empty window.
    """
    _check_arguments(t0, t1, step, tol)
    forward = t1 > t0
    prev: list[tuple[float, float]] = []
    for t in _samples(t0, t1, step):
        y = f(t)
        if len(prev) == 1 and prev[0][1] == 0.0:
            # a zero at t0 takes its direction from the next sample
            if _zero_matches(y, rising, earlier=not forward):
                return prev[0][0]
        if y == 0.0:
            if not prev:
                if rising is None:
                    return t
            elif _zero_matches(prev[-1][1], rising, earlier=forward):
                return t
        elif prev:
            tp, yp = prev[-1]
            # crossing direction is judged in time order, not scan order
            ya, yb = (yp, y) if forward else (y, yp)
            if yp != 0.0 and _crosses(ya, yb, rising):
                return bisect(f, tp, t, tol, max_iter, fa=yp)
        if len(prev) == 2:
            root = _tangent_root(f, prev[0], prev[1], (t, y), tol, max_iter, rising, near_zero)
            if root is not None:
                return root
            prev.pop(0)
        prev.append((t, y))
    raise SearchNotFound(f'No root between {t0:.6f} and {t1:.6f}')


def _zero_matches(y_other: float, rising: bool | None, earlier: bool) -> bool:
    """Whether a sample that is exactly zero has the requested direction.

    y_other is the neighbouring sample; earlier tells whether it precedes the
    zero in time.
    """
    if rising is None:
        return True
    if y_other == 0.0:
        return False
    return (y_other < 0.0) == (rising == earlier)


def _tangent_root(
    f: SearchFunction,
    s0: tuple[float, float],
    s1: tuple[float, float],
    s2: tuple[float, float],
    tol: float,
    max_iter: int,
    rising: bool | None,
    near_zero: float,
) -> float | None:
    """Root hidden between three same-signed samples by an extremum reaching zero."""
    (ta, ya), (tb, yb), (tc, yc) = s0, s1, s2
    negative = ya < 0.0
    if (yb < 0.0) != negative or (yc < 0.0) != negative:
        return None
    if not (abs(yb) < abs(ya) and abs(yb) < abs(yc)):
        return None
    _, yv = _vertex(ta, tb, tc, ya, yb, yc)
    if (yv < 0.0) == negative and abs(yv) > near_zero:
        return None
    try:
        t_ext, y_ext = find_extremum(
            f, ta, tc, step=abs(tc - ta) / 4.0, tol=tol, maximum=negative, max_iter=max_iter
        )
    except SearchNotFound:
        return None
    if (y_ext < 0.0) == negative:
        if abs(y_ext) <= near_zero:
            logger.debug('Touching root at %.8f (extremum %.3g)', t_ext, y_ext)
            return t_ext
        return None
    # two roots straddle the extremum; the one on the ta side is met first
    forward = tc > ta
    first_rising = negative if forward else not negative
    if rising is None or rising == first_rising:
        return bisect(f, ta, t_ext, tol, max_iter, fa=ya)
    return bisect(f, tc, t_ext, tol, max_iter, fa=yc)


def find_extremum(
    f: SearchFunction,
    t0: float,
    t1: float,
    step: float,
    tol: float = 1e-8,
    maximum: bool = False,
    max_iter: int = DEFAULT_MAX_ITER,
) -> tuple[float, float]:
    """Interior extremum of f in [t0, t1].

    The window is sampled at step; the best interior sample and its two
    neighbours form the initial bracket, which successive parabolic
    interpolation shrinks until it is narrower than tol. A parabola step
    that would leave the bracket, or any step once the bracket has not
    halved over two steps, is replaced by a bisection of the larger half.

    Parameters:
        f: Scalar function of time.
        t0, t1: Search window (either order).
        step: Initial sampling step.
        tol: Width (in time) to which the extremum is refined.
        maximum: Look for a maximum instead of a minimum.
        max_iter: Iteration cap of the refinement.

    Returns:
        (time, value) of the extremum.

    Raises:
        SearchNotFound: The best sample lies at the window edge.
        NumericNonConvergence: Refinement exhausted max_iter.
    """
    _check_arguments(t0, t1, step, tol)
    sign = -1.0 if maximum else 1.0

    def g(t: float) -> float:
        return sign * f(t)

    lo, hi = min(t0, t1), max(t0, t1)
    times = list(_samples(lo, hi, step))
    values = [g(t) for t in times]
    i = min(range(len(values)), key=values.__getitem__)
    if i == 0 or i == len(values) - 1:
        raise SearchNotFound(f'No interior extremum between {lo:.6f} and {hi:.6f}')
    a, b, c = times[i - 1], times[i], times[i + 1]
    ga, gb, gc = values[i - 1], values[i], values[i + 1]
    widths: list[float] = []
    for _ in range(max_iter):
        width = c - a
        if width <= tol:
            return b, sign * gb
        x, _ = _vertex(a, b, c, ga, gb, gc)
        # a bracket that did not halve over two steps is bisected instead
        stalled = len(widths) >= 2 and width > 0.5 * widths[-2]
        widths.append(width)
        if stalled or not a < x < c or abs(x - b) < 0.25 * tol:
            x = 0.5 * (a + b) if b - a > c - b else 0.5 * (b + c)
        gx = g(x)
        if gx < gb:
            if x < b:
                c, gc = b, gb
            else:
                a, ga = b, gb
            b, gb = x, gx
        else:
            if x < b:
                a, ga = x, gx
            else:
                c, gc = x, gx
    raise NumericNonConvergence(
        f'Extremum search did not reach {tol:g} within {max_iter} iterations'
    )
