"""Position sources: one capability object per body and backend.

A source answers ``state(tjd)`` with the body's raw J2000 equatorial state
(AU, AU/day) before any apparent-place correction. ``origin`` says what
that state is relative to:

- ORIGIN_BARY: solar-system barycenter (binary backends); for the series
  backend the Sun stands in for the barycenter.
- ORIGIN_GEO: Earth's center (lunar nodes and apsides).

Sources are built once per (body, backend) by source_for() and cached on
the context, so per-body branching happens a single time.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

from ephemeris_engine.constants import (
    AST_OFFSET,
    BACKEND_JPL,
    BACKEND_SERIES,
    BACKEND_SPK,
    BACKEND_SWEPH,
    CERES,
    CHIRON,
    EARTH,
    FICT_OFFSET,
    JUNO,
    JUPITER,
    LUNAR_POINTS,
    MARS,
    MEAN_APOG,
    MEAN_NODE,
    MERCURY,
    MOON,
    NEPTUNE,
    PALLAS,
    PHOLUS,
    PLUTO,
    PREC_IAU_2006,
    SATURN,
    SUN,
    SYMMETRIC_SPEED_INTV,
    TRUE_NODE,
    URANUS,
    VENUS,
    VESTA,
)
from ephemeris_engine.errors import BodyNotInFile, FileNotFoundEphemeris
from ephemeris_engine.files import filenames, jpl, spk
from ephemeris_engine.files.filenames import find_file, gen_filename
from ephemeris_engine.files.jpl import JplFile
from ephemeris_engine.files.sweph import FLG_EMBHEL, FLG_HELIO, SwephFile
from ephemeris_engine.series import evaluate_series, lunar_points
from ephemeris_engine.transforms.obliquity import mean_obliquity
from ephemeris_engine.transforms.precession import precess_to_date, precess_to_j2000
from ephemeris_engine.transforms.vectors import ecliptic_to_equatorial, equatorial_to_ecliptic

if TYPE_CHECKING:
    from ephemeris_engine.context import EngineContext

logger = logging.getLogger(__name__)

ORIGIN_BARY = 'barycentric'
ORIGIN_GEO = 'geocentric'

_SEI_OF_BODY = {
    MERCURY: filenames.SEI_MERCURY,
    VENUS: filenames.SEI_VENUS,
    MARS: filenames.SEI_MARS,
    JUPITER: filenames.SEI_JUPITER,
    SATURN: filenames.SEI_SATURN,
    URANUS: filenames.SEI_URANUS,
    NEPTUNE: filenames.SEI_NEPTUNE,
    PLUTO: filenames.SEI_PLUTO,
    CHIRON: filenames.SEI_CHIRON,
    PHOLUS: filenames.SEI_PHOLUS,
    CERES: filenames.SEI_CERES,
    PALLAS: filenames.SEI_PALLAS,
    JUNO: filenames.SEI_JUNO,
    VESTA: filenames.SEI_VESTA,
}

_JPL_OF_BODY = {
    SUN: jpl.J_SUN,
    MOON: jpl.J_MOON,
    EARTH: jpl.J_EARTH,
    MERCURY: jpl.J_MERCURY,
    VENUS: jpl.J_VENUS,
    MARS: jpl.J_MARS,
    JUPITER: jpl.J_JUPITER,
    SATURN: jpl.J_SATURN,
    URANUS: jpl.J_URANUS,
    NEPTUNE: jpl.J_NEPTUNE,
    PLUTO: jpl.J_PLUTO,
}

# Planets are served through their system barycenters (NAIF ids 1..9)
_NAIF_OF_BODY = {
    SUN: spk.NAIF_SUN,
    MOON: spk.NAIF_MOON,
    EARTH: spk.NAIF_EARTH,
    MERCURY: 1,
    VENUS: 2,
    MARS: 4,
    JUPITER: 5,
    SATURN: 6,
    URANUS: 7,
    NEPTUNE: 8,
    PLUTO: 9,
}


class PositionSource:
    """Raw states of one body."""

    origin = ORIGIN_BARY

    def __init__(self, body: int, ctx: EngineContext) -> None:
        self.body = body
        self.ctx = ctx

    def state(self, tjd: float) -> np.ndarray:
        """Raw J2000 equatorial state at tjd (TT)."""
        raise NotImplementedError

    def is_icrs(self, tjd: float) -> bool:
        """True when states at tjd are referred to the ICRS and need the frame bias."""
        return False


# -- packed SE1 files ------------------------------------------------------


def _sweph_file(ctx: EngineContext, tjd: float, sei: int) -> SwephFile:
    name = gen_filename(tjd, sei)
    path = find_file(name, ctx.ephe_path)
    return ctx.get_file(str(path), SwephFile.open)


def _sweph_raw(ctx: EngineContext, tjd: float, sei: int) -> tuple[np.ndarray, SwephFile]:
    handle = _sweph_file(ctx, tjd, sei)
    key = filenames.SEI_ANYBODY if sei > AST_OFFSET else sei
    return handle.state(key, tjd), handle


def sweph_sun_bary(ctx: EngineContext, tjd: float) -> np.ndarray:
    """Barycentric Sun from the planet file."""
    emb, _ = _sweph_raw(ctx, tjd, filenames.SEI_EMB)
    raw, handle = _sweph_raw(ctx, tjd, filenames.SEI_SUNBARY)
    if handle.body(filenames.SEI_SUNBARY).iflg & FLG_EMBHEL:
        return emb - raw
    return raw


def sweph_earth_bary(ctx: EngineContext, tjd: float) -> np.ndarray:
    """Barycentric Earth from the EMB and the geocentric Moon."""
    emb, handle = _sweph_raw(ctx, tjd, filenames.SEI_EMB)
    geomoon, _ = _sweph_raw(ctx, tjd, filenames.SEI_MOON)
    return emb - geomoon / (handle.ratme + 1.0)


class SwephSource(PositionSource):
    """Body read from packed SE1 files along the ephemeris path."""

    def __init__(self, body: int, ctx: EngineContext) -> None:
        super().__init__(body, ctx)
        if body in (SUN, EARTH, MOON):
            self.sei = None
        elif body > AST_OFFSET:
            self.sei = body
        elif body in _SEI_OF_BODY:
            self.sei = _SEI_OF_BODY[body]
        else:
            raise BodyNotInFile(f'Body {body} has no packed ephemeris data')

    def is_icrs(self, tjd: float) -> bool:
        return _planet_file_de(self.ctx, tjd) >= 403

    def state(self, tjd: float) -> np.ndarray:
        ctx = self.ctx
        if self.body == SUN:
            out = sweph_sun_bary(ctx, tjd)
        elif self.body == EARTH:
            out = sweph_earth_bary(ctx, tjd)
        elif self.body == MOON:
            geomoon, _ = _sweph_raw(ctx, tjd, filenames.SEI_MOON)
            out = sweph_earth_bary(ctx, tjd) + geomoon
        else:
            raw, handle = _sweph_raw(ctx, tjd, self.sei)
            key = filenames.SEI_ANYBODY if self.sei > AST_OFFSET else self.sei
            out = raw
            if handle.body(key).iflg & FLG_HELIO:
                out = raw + sweph_sun_bary(ctx, tjd)
        return out


def _planet_file_de(ctx: EngineContext, tjd: float) -> int:
    try:
        return _sweph_file(ctx, tjd, filenames.SEI_EMB).de_number
    except FileNotFoundEphemeris:
        return 0


# -- JPL and SPK -----------------------------------------------------------


def jpl_handle(ctx: EngineContext) -> JplFile:
    """Open (once) the context's JPL file, searched along the ephemeris path."""
    name = ctx.jpl_file
    path = Path(name)
    if not path.is_absolute():
        path = find_file(name, ctx.ephe_path)
    return ctx.get_file(str(path), JplFile.open)


class JplSource(PositionSource):
    """Body read from a JPL DE file."""

    def __init__(self, body: int, ctx: EngineContext) -> None:
        super().__init__(body, ctx)
        if body not in _JPL_OF_BODY:
            raise BodyNotInFile(f'Body {body} is not carried by JPL files')
        self.jpl_body = _JPL_OF_BODY[body]

    def is_icrs(self, tjd: float) -> bool:
        return jpl_handle(self.ctx).de_number >= 403

    def state(self, tjd: float) -> np.ndarray:
        return jpl_handle(self.ctx).state(tjd, self.jpl_body)


class SpkSource(PositionSource):
    """Body read from SPICE kernels through cspyce."""

    def __init__(self, body: int, ctx: EngineContext) -> None:
        super().__init__(body, ctx)
        if body not in _NAIF_OF_BODY:
            raise BodyNotInFile(f'Body {body} has no NAIF mapping')
        self.naif_id = _NAIF_OF_BODY[body]

    def is_icrs(self, tjd: float) -> bool:
        return True

    def state(self, tjd: float) -> np.ndarray:
        name = self.ctx.jpl_file
        path = Path(name)
        if not path.is_absolute():
            path = find_file(name, self.ctx.ephe_path)
        backend = self.ctx.get_file(str(path), spk.SpkBackend.open)
        return backend.state(self.naif_id, tjd)


# -- closed-form series ----------------------------------------------------


class SeriesSource(PositionSource):
    """Body from a closed-form theory; the Sun is the origin."""

    def state(self, tjd: float) -> np.ndarray:
        elements = self.ctx.user_bodies.get(self.body)
        if self.body == MOON:
            return evaluate_series(EARTH, tjd) + evaluate_series(MOON, tjd)
        return evaluate_series(self.body, tjd, elements=elements)


# -- nodes and apsides -----------------------------------------------------


class DerivedSource(PositionSource):
    """Lunar node or apogee derived from the Moon's orbit (geocentric)."""

    origin = ORIGIN_GEO

    def __init__(
        self, body: int, ctx: EngineContext, moon: PositionSource, earth: PositionSource
    ) -> None:
        super().__init__(body, ctx)
        self.moon = moon
        self.earth = earth

    def is_icrs(self, tjd: float) -> bool:
        return self.body not in (MEAN_NODE, MEAN_APOG) and self.moon.is_icrs(tjd)

    def _osculating(self, tjd: float) -> np.ndarray:
        geo = self.moon.state(tjd) - self.earth.state(tjd)
        eps = mean_obliquity(tjd, PREC_IAU_2006)
        ecl = equatorial_to_ecliptic(precess_to_date(geo, tjd, PREC_IAU_2006), eps)
        if self.body == TRUE_NODE:
            point = lunar_points.osculating_node(ecl)
        else:
            point = lunar_points.osculating_apogee(ecl)
        out = np.zeros(6, dtype=np.float64)
        out[:3] = point
        equ = ecliptic_to_equatorial(out, eps)
        return precess_to_j2000(equ, tjd, PREC_IAU_2006, speed=False)

    def state(self, tjd: float) -> np.ndarray:
        if self.body in (MEAN_NODE, MEAN_APOG):
            return evaluate_series(self.body, tjd)
        step = SYMMETRIC_SPEED_INTV
        out = self._osculating(tjd)
        t_ahead, t_behind = tjd + step, tjd - step
        ahead = self._osculating(t_ahead)
        behind = self._osculating(t_behind)
        out[3:] = (ahead[:3] - behind[:3]) / (t_ahead - t_behind)
        return out


# -- selection ------------------------------------------------------------

_SOURCE_CLASSES = {
    BACKEND_SWEPH: SwephSource,
    BACKEND_JPL: JplSource,
    BACKEND_SPK: SpkSource,
    BACKEND_SERIES: SeriesSource,
}


def source_for(body: int, backend: str, ctx: EngineContext) -> PositionSource:
    """Return the (cached) source serving body from backend.

    User element bodies are always served by the series source; lunar points
    derive from the Moon and Earth of the same backend.

    Raises:
        BodyNotInFile: The backend cannot serve the body.
        ValueError: Unknown body number.
    """
    key = (body, backend)
    cached = ctx.sources.get(key)
    if cached is not None:
        return cached
    if body in LUNAR_POINTS:
        source: PositionSource = DerivedSource(
            body, ctx, source_for(MOON, backend, ctx), source_for(EARTH, backend, ctx)
        )
    elif body >= FICT_OFFSET and body < AST_OFFSET:
        if body not in ctx.user_bodies:
            raise ValueError(f'No element set registered for body {body}')
        source = SeriesSource(body, ctx)
    elif body < 0 or (body > VESTA and body < FICT_OFFSET):
        raise ValueError(f'Unknown body number {body}')
    else:
        source = _SOURCE_CLASSES[backend](body, ctx)
    logger.debug('Position source for body %d from %s: %s', body, backend, type(source).__name__)
    ctx.sources[key] = source
    return source

