"""Tests for the generic root and extremum searches."""

from __future__ import annotations

import math

import pytest

from ephemeris_engine.errors import NumericNonConvergence, SearchNotFound
from ephemeris_engine.search.engine import bisect, find_extremum, find_root


def test_simple_root() -> None:
    assert find_root(lambda t: t - 2.3, 0.0, 5.0, step=0.5) == pytest.approx(2.3, abs=1e-8)


def test_direction_filters() -> None:
    """sin falls through zero at pi and rises at 2 pi."""

    assert find_root(math.sin, 0.5, 10.0, step=0.25) == pytest.approx(math.pi, abs=1e-8)
    assert find_root(math.sin, 0.5, 10.0, step=0.25, rising=True) == pytest.approx(
        2 * math.pi, abs=1e-8
    )
    assert find_root(math.sin, 0.5, 10.0, step=0.25, rising=False) == pytest.approx(
        math.pi, abs=1e-8
    )


def test_backward_scan() -> None:
    """Scanning backward finds the latest root first; direction is judged in time order."""

    assert find_root(math.sin, 10.0, 0.5, step=0.25) == pytest.approx(3 * math.pi, abs=1e-8)
    assert find_root(math.sin, 10.0, 0.5, step=0.25, rising=True) == pytest.approx(
        2 * math.pi, abs=1e-8
    )


def test_exact_zero_at_start() -> None:
    """A zero sitting on t0 is returned exactly, with its direction checked."""

    assert find_root(lambda t: t - 1.0, 1.0, 3.0, step=0.5) == 1.0
    assert find_root(lambda t: t - 1.0, 1.0, 3.0, step=0.5, rising=True) == 1.0
    with pytest.raises(SearchNotFound):
        find_root(lambda t: t - 1.0, 1.0, 3.0, step=0.5, rising=False)


def test_exact_zero_on_backward_sample() -> None:
    """Scanning backward, a zero on a sample is returned before any bracket forms."""

    assert find_root(lambda t: t - 1.0, 2.0, 0.0, step=0.5) == 1.0
    assert find_root(lambda t: t - 1.0, 2.0, 0.0, step=0.5, rising=True) == 1.0
    assert find_root(lambda t: 1.0 - t, 2.0, 0.0, step=0.5, rising=False) == 1.0
    with pytest.raises(SearchNotFound):
        find_root(lambda t: t - 1.0, 2.0, 0.0, step=0.5, rising=False)


def test_touching_root() -> None:
    def touching(t: float) -> float:
        return (t - 2.0) ** 2

    root = find_root(touching, 0.0, 4.0, step=0.3, near_zero=1e-6)
    assert root == pytest.approx(2.0, abs=1e-4)


def test_close_roots_inside_one_step() -> None:
    """Two roots 0.02 apart are found although no sample falls between them."""

    def dip(t: float) -> float:
        return (t - 2.0) ** 2 - 1e-4

    assert find_root(dip, 0.0, 4.0, step=0.3) == pytest.approx(1.99, abs=1e-8)
    assert find_root(dip, 0.0, 4.0, step=0.3, rising=True) == pytest.approx(2.01, abs=1e-8)


def test_no_root() -> None:
    with pytest.raises(SearchNotFound):
        find_root(lambda t: (t - 2.0) ** 2 + 0.01, 0.0, 4.0, step=0.3)


@pytest.mark.parametrize(
    ('t1', 'step', 'tol'),
    [(1.0, 0.0, 1e-8), (1.0, 0.1, 0.0), (0.0, 0.1, 1e-8)],
)
def test_invalid_arguments(t1: float, step: float, tol: float) -> None:
    with pytest.raises(ValueError):
        find_root(math.sin, 0.0, t1, tol=tol, step=step)


def test_extrema() -> None:
    t, y = find_extremum(math.cos, 2.0, 4.5, step=0.25)
    assert t == pytest.approx(math.pi, abs=1e-6)
    assert y == pytest.approx(-1.0)
    t, y = find_extremum(math.sin, 0.0, 3.0, step=0.25, maximum=True)
    assert t == pytest.approx(math.pi / 2, abs=1e-6)
    assert y == pytest.approx(1.0)


def test_extremum_asymmetric_function() -> None:
    """A skewed minimum converges despite one-sided parabolic steps."""

    def skewed(t: float) -> float:
        return math.exp(t - 1.0) - t

    t, _ = find_extremum(skewed, -3.0, 4.0, step=0.5, tol=1e-7)
    assert t == pytest.approx(1.0, abs=1e-5)


def test_extremum_at_edge() -> None:
    with pytest.raises(SearchNotFound):
        find_extremum(lambda t: t, 0.0, 1.0, step=0.1)


def test_bisect() -> None:
    def cubic(t: float) -> float:
        return t**3 - 2.0

    assert bisect(cubic, 0.0, 2.0, 1e-12) == pytest.approx(2.0 ** (1.0 / 3.0), abs=1e-11)
    with pytest.raises(NumericNonConvergence):
        bisect(cubic, 0.0, 2.0, 1e-12, max_iter=3)
