"""Tests for phase, elongation, apparent diameter and magnitude."""

from __future__ import annotations

import math

import pytest

from ephemeris_engine.constants import EARTH, JUPITER, MEAN_NODE, MOON, NEPTUNE, SATURN, SUN, VENUS
from ephemeris_engine.context import EngineContext
from ephemeris_engine.phenomena import apparent_diameter, magnitude, pheno, pheno_ut


def test_sun_at_perihelion(ctx: EngineContext) -> None:
    """2024 January 3: the Sun is 0.9833 AU away, slightly brighter than average."""

    result = pheno(2460312.53, SUN, ctx=ctx)
    assert result.ok
    assert result.phase == 1.0
    assert result.apparent_diameter == pytest.approx(0.5421, abs=0.0005)
    assert result.magnitude == pytest.approx(-26.897, abs=0.005)


def test_full_moon(ctx: EngineContext) -> None:
    """At the lunar eclipse of 2025 March 14 the Moon is fully lit."""

    result = pheno_ut(2460748.7908, MOON, ctx=ctx)
    assert result.phase_angle < 1.5
    assert result.phase > 0.9998
    assert result.elongation > 178.0
    assert result.magnitude == pytest.approx(-12.75, abs=0.2)
    assert 0.9 < result.horizontal_parallax < 1.02
    assert result.apparent_diameter == pytest.approx(
        2.0 * result.horizontal_parallax * 1737.5 / 6378.1366, rel=1e-3
    )


def test_venus_at_greatest_elongation(ctx: EngineContext) -> None:
    """2023 June 4: Venus stands 45.4 degrees east of the Sun and is half lit."""

    result = pheno_ut(2460099.5, VENUS, ctx=ctx)
    assert result.elongation == pytest.approx(45.4, abs=0.3)
    assert result.phase == pytest.approx(0.5, abs=0.04)
    assert result.phase_angle == pytest.approx(90.0, abs=5.0)
    assert -4.8 < result.magnitude < -4.2


def test_jupiter_at_opposition(ctx: EngineContext) -> None:
    result = pheno_ut(2460251.71, JUPITER, ctx=ctx)
    assert result.phase_angle < 1.5
    assert result.elongation > 178.0
    assert result.magnitude == pytest.approx(-2.9, abs=0.1)
    assert result.apparent_diameter * 3600.0 == pytest.approx(48.8, abs=1.0)


def test_saturn_has_a_magnitude(ctx: EngineContext) -> None:
    result = pheno(2460200.5, SATURN, ctx=ctx)
    assert 0.0 < result.magnitude < 1.0


def test_lunar_point_has_no_magnitude(ctx: EngineContext) -> None:
    result = pheno(2460000.5, MEAN_NODE, ctx=ctx)
    assert result.ok
    assert result.phase == 1.0
    assert math.isnan(result.magnitude)


def test_failure_is_reported(ctx: EngineContext) -> None:
    result = pheno(2460000.5, EARTH, ctx=ctx)
    assert not result.ok
    assert result.error == 'BodyUnsupportedForCenter'


def test_neptune_magnitude_brightens_between_1980_and_2000() -> None:
    assert magnitude(NEPTUNE, 2440000.5, 1.0, 1.0, 1.0) == pytest.approx(-6.89)
    assert magnitude(NEPTUNE, 2460000.5, 1.0, 1.0, 1.0) == pytest.approx(-7.00)
    middle = magnitude(NEPTUNE, 2447892.0, 1.0, 1.0, 1.0)
    assert -7.00 < middle < -6.89


def test_saturn_magnitude_needs_positions() -> None:
    with pytest.raises(ValueError):
        magnitude(SATURN, 2460000.5, 5.0, 9.5, 9.0)


def test_diameter_from_inside_the_body() -> None:
    assert apparent_diameter(EARTH, 1e-6) == 180.0
    assert apparent_diameter(MEAN_NODE, 1.0) == 0.0
