"""Single entry point for event searches, returning result objects instead of raising."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from ephemeris_engine.constants import (
    CALC_ITRANSIT,
    CALC_MTRANSIT,
    CALC_RISE,
    CALC_SET,
    MOON,
    SUN,
)
from ephemeris_engine.context import EngineContext, GeoPosition, get_context
from ephemeris_engine.epoch import Epoch
from ephemeris_engine.errors import EphemerisError
from ephemeris_engine.search import crossings, eclipses, riseset
from ephemeris_engine.time_utils import to_tt, to_ut

logger = logging.getLogger(__name__)

_RISE_KINDS = {
    'rise': CALC_RISE,
    'set': CALC_SET,
    'upper-transit': CALC_MTRANSIT,
    'lower-transit': CALC_ITRANSIT,
}

EVENT_KINDS = (
    'solar-eclipse',
    'lunar-eclipse',
    *_RISE_KINDS,
    'sun-crossing',
    'moon-crossing',
    'moon-node',
    'helio-crossing',
)


@dataclass
class EventResult:
    """Outcome of find_event.

    Attributes:
        ok: True when an event was found.
        error: Error kind name (e.g. 'SearchNotFound') when ok is False.
        message: Human-readable diagnostic.
        times: Named event instants as JD UT ('max' and the contacts for
            eclipses, 'event' for everything else).
        flags: ECL_* type bits for eclipses, else 0.
        attributes: Magnitudes, longitudes and other event quantities; a
            solar eclipse gives the place of greatest eclipse as longitude
            and latitude.
    """

    ok: bool
    error: str | None = None
    message: str = ''
    times: dict[str, float] = field(default_factory=dict)
    flags: int = 0
    attributes: dict[str, float] = field(default_factory=dict)


def _search(
    kind: str,
    body: int,
    jd_ut: float,
    location: GeoPosition | None,
    backward: bool,
    ctx: EngineContext,
    options: dict[str, Any],
) -> EventResult:
    flags = int(options.get('flags', 0))
    if kind == 'solar-eclipse':
        ecl = eclipses.sol_eclipse_when_glob(
            jd_ut, options.get('ecl_type', 0), backward, flags, ctx
        )
        place = eclipses.sol_eclipse_where(ecl.tmax, flags, ctx)
        attributes = {**ecl.attributes, 'longitude': place.lon_deg, 'latitude': place.lat_deg}
        return EventResult(True, times={'max': ecl.tmax}, flags=ecl.flags, attributes=attributes)
    if kind == 'lunar-eclipse':
        ecl_type = options.get('ecl_type', 0)
        if location is None:
            ecl = eclipses.lun_eclipse_when(jd_ut, ecl_type, backward, flags, ctx)
        else:
            ecl = eclipses.lun_eclipse_when_loc(jd_ut, location, ecl_type, backward, flags, ctx)
        return EventResult(
            True,
            times={'max': ecl.tmax, **ecl.contacts},
            flags=ecl.flags,
            attributes=ecl.attributes,
        )
    if kind in _RISE_KINDS:
        rsmi = _RISE_KINDS[kind] | int(options.get('disc', 0))
        t = riseset.rise_trans(
            jd_ut,
            body,
            rsmi,
            location=location,
            ctx=ctx,
            flags=flags,
            atpress=options.get('atpress', riseset.STANDARD_PRESSURE),
            attemp=options.get('attemp', riseset.STANDARD_TEMPERATURE),
            horizon_height=options.get('horizon_height', 0.0),
            backward=backward,
        )
        return EventResult(True, times={'event': t})
    if kind == 'moon-node':
        t, lon, lat = crossings.mooncross_node(jd_ut, flags, ctx, ut=True)
        return EventResult(
            True, times={'event': t}, attributes={'longitude': lon, 'latitude': lat}
        )
    if 'longitude' not in options:
        raise ValueError(f'Event kind {kind!r} requires a longitude option')
    lon = float(options['longitude'])
    if kind == 'sun-crossing':
        t = crossings.solcross(lon, jd_ut, flags, ctx, ut=True)
    elif kind == 'moon-crossing':
        t = crossings.mooncross(lon, jd_ut, flags, ctx, ut=True)
    else:
        t = crossings.helio_cross(body, lon, jd_ut, flags, -1 if backward else 1, ctx, ut=True)
    return EventResult(True, times={'event': t}, attributes={'longitude': lon})


def find_event(
    kind: str,
    body: int,
    start: Epoch,
    location: GeoPosition | None = None,
    direction: int = 1,
    ctx: EngineContext | None = None,
    **options: Any,
) -> EventResult:
    """Find the next (or previous) event of a kind.

    Parameters:
        kind: One of EVENT_KINDS.
        body: Body number (ignored for eclipses and for the Sun and Moon
            crossings, which imply their body).
        start: Start of the search, UT or TT.
        location: Observer for rise, set and transits; replaces the
            context's observer. For lunar eclipses it restricts the search
            to eclipses seen from there.
        direction: >= 0 searches forward, < 0 backward (eclipses, rise/set
            and heliocentric crossings).
        ctx: Engine context; None uses the default one.
        **options: ``flags`` (calculation flags), ``ecl_type`` (ECL_* bits),
            ``longitude`` (degrees, for the crossing kinds), ``disc``
            (BIT_DISC_* and BIT_NO_REFRACTION bits), ``atpress``,
            ``attemp`` and ``horizon_height`` (rise and set).

    Returns:
        EventResult. SearchNotFound and other engine errors are reported in
        the result, not raised.

    Raises:
        ValueError: Unknown kind, missing option or invalid argument.
    """
    if kind not in EVENT_KINDS:
        raise ValueError(f'Unknown event kind {kind!r}; expected one of {EVENT_KINDS}')
    ctx = ctx or get_context()
    if kind == 'sun-crossing':
        body = SUN
    elif kind in ('moon-crossing', 'moon-node'):
        body = MOON
    jd_ut = to_ut(start, ctx).jd
    try:
        result = _search(kind, body, jd_ut, location, direction < 0, ctx, options)
    except EphemerisError as e:
        logger.debug('%s search for body %d from %.6f: %s', kind, body, jd_ut, e)
        return EventResult(False, error=e.kind, message=str(e))
    for name, t in list(result.times.items()):
        result.attributes[f'{name}_tt'] = to_tt(Epoch.ut(t), ctx).jd
    return result
