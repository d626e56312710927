"""Tests for the eclipse searches, shadow geometry and local circumstances."""

from __future__ import annotations

import math

import numpy as np
import pytest

from ephemeris_engine.constants import (
    ECL_1ST_VISIBLE,
    ECL_4TH_VISIBLE,
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
)
from ephemeris_engine.context import EngineContext, GeoPosition
from ephemeris_engine.search.eclipses import (
    REARTH,
    disc_obscuration,
    lun_eclipse_when,
    lun_eclipse_when_loc,
    lunar_geometry,
    sol_eclipse_when_glob,
    sol_eclipse_where,
    solar_geometry,
)

MINUTE = 1.0 / 1440.0
SUN_AT_1AU = np.array([1.0, 0.0, 0.0])


def _moon_toward_sun(dist: float, offset: float = 0.0) -> np.ndarray:
    return np.array([dist, offset, 0.0])


def _moon_opposite_sun(dist: float, angle_deg: float) -> np.ndarray:
    angle = math.radians(angle_deg)
    return dist * np.array([-math.cos(angle), math.sin(angle), 0.0])


def test_total_solar_eclipse_2024(ctx: EngineContext) -> None:
    """2024 April 8: total, central, greatest eclipse at 18:17 UT."""

    ecl = sol_eclipse_when_glob(2460377.5, ctx=ctx)
    assert ecl.flags == ECL_TOTAL | ECL_CENTRAL
    assert ecl.tmax == pytest.approx(2460409.2620, abs=MINUTE)
    assert ecl.attributes['gamma'] == pytest.approx(0.343, abs=0.02)
    assert ecl.attributes['magnitude'] > 1.0
    # at maximum the axis passes gamma Earth radii from the center, which
    # at the Moon's distance of about 360000 km subtends 0.35 deg
    assert ecl.attributes['separation'] == pytest.approx(0.348, abs=0.01)


def test_annular_filter(ctx: EngineContext) -> None:
    """Asking for annular eclipses skips April and finds 2024 October 2."""

    ecl = sol_eclipse_when_glob(2460377.5, ECL_ANNULAR, ctx=ctx)
    assert ecl.flags & ECL_ANNULAR
    assert ecl.tmax == pytest.approx(2460586.281, abs=0.01)


def test_backward_solar_search(ctx: EngineContext) -> None:
    """Before 2024 April 1 the last solar eclipse is the annular one of 2023 October 14."""

    ecl = sol_eclipse_when_glob(2460401.5, backward=True, ctx=ctx)
    assert ecl.flags == ECL_ANNULAR | ECL_CENTRAL
    assert ecl.tmax == pytest.approx(2460232.25, abs=0.01)


def test_impossible_solar_types(ctx: EngineContext) -> None:
    with pytest.raises(ValueError):
        sol_eclipse_when_glob(2460377.5, ECL_PARTIAL | ECL_CENTRAL, ctx=ctx)
    with pytest.raises(ValueError):
        sol_eclipse_when_glob(2460377.5, ECL_ANNULAR_TOTAL | ECL_NONCENTRAL, ctx=ctx)


def test_total_lunar_eclipse_2025(ctx: EngineContext) -> None:
    """2025 March 14: total lunar eclipse, greatest at 06:59 UT."""

    ecl = lun_eclipse_when(2460735.5, ctx=ctx)
    assert ecl.flags == ECL_TOTAL
    assert ecl.tmax == pytest.approx(2460748.7908, abs=3 * MINUTE)
    assert ecl.attributes['umbral_magnitude'] == pytest.approx(1.18, abs=0.03)


def test_lunar_type_filter(ctx: EngineContext) -> None:
    """Three umbral eclipses are skipped before the penumbral one of 2027 February 20."""

    ecl = lun_eclipse_when(2460735.5, ECL_PENUMBRAL, ctx=ctx)
    assert ecl.flags == ECL_PENUMBRAL
    assert ecl.tmax == pytest.approx(2461457.47, abs=0.02)
    assert ecl.attributes['umbral_magnitude'] < 0.0 < ecl.attributes['penumbral_magnitude']


@pytest.mark.parametrize(
    ('dist', 'expected'),
    [
        (0.00257, ECL_ANNULAR | ECL_CENTRAL),
        (0.00240, ECL_TOTAL | ECL_CENTRAL),
        (0.002517, ECL_ANNULAR_TOTAL | ECL_CENTRAL),
    ],
)
def test_central_solar_geometry(dist: float, expected: int) -> None:
    flags, attrs = solar_geometry(SUN_AT_1AU, _moon_toward_sun(dist))
    assert flags == expected
    assert attrs['gamma'] == pytest.approx(0.0, abs=1e-12)


def test_partial_and_missed_solar_geometry() -> None:
    flags, attrs = solar_geometry(SUN_AT_1AU, _moon_toward_sun(0.00257, 1.3 * REARTH))
    assert flags == ECL_PARTIAL | ECL_NONCENTRAL
    assert 0.0 < attrs['magnitude'] < 1.0
    flags, _ = solar_geometry(SUN_AT_1AU, _moon_toward_sun(0.00257, 2.0 * REARTH))
    assert flags == 0


@pytest.mark.parametrize(
    ('angle', 'expected'),
    [(0.0, ECL_TOTAL), (0.8, ECL_PARTIAL), (1.2, ECL_PENUMBRAL), (2.0, 0)],
)
def test_lunar_geometry(angle: float, expected: int) -> None:
    flags, attrs = lunar_geometry(SUN_AT_1AU, _moon_opposite_sun(0.00257, angle))
    assert flags == expected
    assert attrs['distance'] == pytest.approx(angle, abs=1e-9)


NEW_YORK = GeoPosition(-74.0, 40.7, 10.0)
DELHI = GeoPosition(77.2, 28.6, 216.0)
BERLIN = GeoPosition(13.4, 52.5, 34.0)


def test_lunar_contacts_2025(ctx: EngineContext) -> None:
    """Contacts of 2025 March 14: P1 03:57, U1 05:10, U2 06:26, U3 07:31, U4 08:48, P4 10:00 UT."""

    contacts = lun_eclipse_when(2460735.5, ctx=ctx).contacts
    assert contacts['penumbral_begin'] == pytest.approx(2460748.66491, abs=4 * MINUTE)
    assert contacts['partial_begin'] == pytest.approx(2460748.71500, abs=3 * MINUTE)
    assert contacts['total_begin'] == pytest.approx(2460748.76813, abs=3 * MINUTE)
    assert contacts['total_end'] == pytest.approx(2460748.81350, abs=3 * MINUTE)
    assert contacts['partial_end'] == pytest.approx(2460748.86657, abs=3 * MINUTE)
    assert contacts['penumbral_end'] == pytest.approx(2460748.91677, abs=4 * MINUTE)


def test_penumbral_eclipse_has_no_umbral_contacts(ctx: EngineContext) -> None:
    ecl = lun_eclipse_when(2460735.5, ECL_PENUMBRAL, ctx=ctx)
    assert set(ecl.contacts) == {'penumbral_begin', 'penumbral_end'}
    assert ecl.contacts['penumbral_begin'] < ecl.tmax < ecl.contacts['penumbral_end']


def test_lunar_eclipse_seen_whole_from_new_york(ctx: EngineContext) -> None:
    ecl = lun_eclipse_when_loc(2460735.5, NEW_YORK, ctx=ctx)
    assert ecl.tmax == pytest.approx(2460748.7908, abs=3 * MINUTE)
    assert ecl.flags & ECL_TOTAL
    for bit in (ECL_VISIBLE, ECL_MAX_VISIBLE, ECL_1ST_VISIBLE, ECL_4TH_VISIBLE):
        assert ecl.flags & bit
    assert ecl.flags & ECL_PENUMBBEG_VISIBLE
    assert ecl.flags & ECL_PENUMBEND_VISIBLE
    assert ecl.attributes['moon_altitude'] > 20.0
    assert 'moonrise' not in ecl.contacts
    assert 'moonset' not in ecl.contacts


def test_invisible_lunar_eclipse_is_skipped(ctx: EngineContext) -> None:
    """March 2025 happens below Delhi's horizon; the next one, 2025 September 7, does not."""

    ecl = lun_eclipse_when_loc(2460735.5, DELHI, ctx=ctx)
    assert ecl.tmax == pytest.approx(2460926.2582, abs=3 * MINUTE)
    assert ecl.flags & ECL_VISIBLE
    assert ecl.flags & ECL_MAX_VISIBLE


def test_moon_rises_eclipsed_over_berlin(ctx: EngineContext) -> None:
    """On 2025 September 7 the Moon rises in Berlin during totality."""

    ecl = lun_eclipse_when_loc(2460900.5, BERLIN, ctx=ctx)
    assert ecl.tmax == pytest.approx(2460926.2582, abs=3 * MINUTE)
    assert ecl.flags & ECL_MAX_VISIBLE
    assert not ecl.flags & ECL_1ST_VISIBLE
    assert ecl.contacts['partial_begin'] < ecl.contacts['moonrise'] < ecl.tmax


def test_search_leaves_the_context_observer_alone(ctx: EngineContext) -> None:
    lun_eclipse_when_loc(2460735.5, NEW_YORK, ctx=ctx)
    assert ctx.topo is None


def test_total_solar_eclipse_2024_where(ctx: EngineContext) -> None:
    """Greatest eclipse of 2024 April 8 lies at 25.3 N, 104.1 W.

    The umbra is 197 km wide along the ground there, somewhat less across
    the axis.
    """

    place = sol_eclipse_where(2460409.2620, ctx=ctx)
    assert place.flags == ECL_TOTAL | ECL_CENTRAL
    assert place.lat_deg == pytest.approx(25.3, abs=0.7)
    assert place.lon_deg == pytest.approx(-104.1, abs=0.7)
    assert place.attributes['core_shadow_diameter'] == pytest.approx(188.0, abs=15.0)
    assert place.attributes['magnitude'] > 1.0
    assert place.attributes['obscuration'] == 1.0
    assert place.attributes['ratio'] == pytest.approx(1.057, abs=0.01)


def test_partial_solar_eclipse_where(ctx: EngineContext) -> None:
    """2025 March 29: the axis misses the Earth; greatest eclipse near 61 N, 77 W."""

    place = sol_eclipse_where(2460763.9496, ctx=ctx)
    assert place.flags == ECL_PARTIAL | ECL_NONCENTRAL
    assert place.lat_deg == pytest.approx(61.1, abs=2.0)
    assert place.lon_deg == pytest.approx(-77.1, abs=4.0)
    assert place.attributes['magnitude'] == pytest.approx(0.94, abs=0.05)
    assert 0.0 < place.attributes['obscuration'] < 1.0


@pytest.mark.parametrize(
    ('moon_radius', 'separation', 'expected'),
    [(1.0, 0.0, 1.0), (0.5, 0.0, 0.25), (1.0, 2.0, 0.0), (1.0, 1.0, 0.391002)],
)
def test_disc_obscuration(moon_radius: float, separation: float, expected: float) -> None:
    assert disc_obscuration(1.0, moon_radius, separation) == pytest.approx(expected, abs=1e-6)
