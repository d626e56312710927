"""Tests for Sun, Moon and heliocentric longitude crossings."""

from __future__ import annotations

import pytest

from ephemeris_engine.constants import FLG_HELCTR, MARS, MOON, SUN
from ephemeris_engine.context import EngineContext
from ephemeris_engine.errors import BodyUnsupportedForCenter
from ephemeris_engine.pipeline import calc, calc_ut
from ephemeris_engine.search.crossings import helio_cross, mooncross, mooncross_node, solcross
from ephemeris_engine.transforms.vectors import difdeg2n

MINUTE = 1.0 / 1440.0


def test_march_equinox_2024(ctx: EngineContext) -> None:
    """The Sun reaches longitude 0 on 2024-03-20 at 03:06 UT."""

    t = solcross(0.0, 2460377.5, ctx=ctx, ut=True)
    assert t == pytest.approx(2460389.6292, abs=MINUTE)


def test_solcross_tt_matches_longitude(ctx: EngineContext) -> None:
    t = solcross(90.0, 2460377.5, ctx=ctx)
    assert abs(difdeg2n(calc(t, SUN, 0, ctx).unwrap()[0], 90.0)) < 1e-5
    assert 2460377.5 < t < 2460377.5 + 366.0


def test_mooncross(ctx: EngineContext) -> None:
    start = 2460400.5
    t = mooncross(123.4, start, ctx=ctx, ut=True)
    assert start < t < start + 27.4
    assert abs(difdeg2n(calc_ut(t, MOON, 0, ctx).unwrap()[0], 123.4)) < 1e-5


def test_mooncross_node(ctx: EngineContext) -> None:
    start = 2460400.5
    t, lon, lat = mooncross_node(start, ctx=ctx, ut=True)
    assert start < t < start + 14.0
    assert abs(lat) < 1e-5
    position = calc_ut(t, MOON, 0, ctx).unwrap()
    assert position[0] == pytest.approx(lon)
    assert abs(position[1]) < 1e-5


def test_helio_cross_forward_and_backward(ctx: EngineContext) -> None:
    start = 2460400.5
    later = helio_cross(MARS, 180.0, start, ctx=ctx)
    earlier = helio_cross(MARS, 180.0, start, direction=-1, ctx=ctx)
    assert earlier < start < later
    assert later - earlier == pytest.approx(687.0, abs=5.0)
    for t in (earlier, later):
        lon = calc(t, MARS, FLG_HELCTR, ctx).unwrap()[0]
        assert abs(difdeg2n(lon, 180.0)) < 0.01


def test_helio_cross_rejects_sun_and_moon(ctx: EngineContext) -> None:
    with pytest.raises(BodyUnsupportedForCenter):
        helio_cross(SUN, 10.0, 2460400.5, ctx=ctx)
    with pytest.raises(BodyUnsupportedForCenter):
        helio_cross(MOON, 10.0, 2460400.5, ctx=ctx)
