"""Engine context: explicit configuration, open ephemeris files and the state cache.

Every public entry point takes an optional ``ctx``; when omitted the
module-level default context from get_context() is used. Separate contexts
share nothing, so independent searches may run on separate threads as long
as each owns its context.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Callable, Hashable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from ephemeris_engine import deltat
from ephemeris_engine.config import get_ephe_path, get_jpl_file
from ephemeris_engine.constants import (
    BACKEND_JPL,
    BACKEND_SERIES,
    BACKEND_SPK,
    BACKEND_SWEPH,
    BIAS_DEFAULT,
    DELTAT_OVERRIDE,
    DELTAT_TABLE,
    FICT_OFFSET,
    NUT_DEFAULT,
    PREC_DEFAULT,
    SIDM_FAGAN_BRADLEY,
    TIDAL_AUTOMATIC,
    TIDAL_BY_DE_NUMBER,
    TIDAL_DEFAULT,
)
from ephemeris_engine.series.kepler import OrbitalElements

logger = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 256
_BACKENDS = (BACKEND_SWEPH, BACKEND_JPL, BACKEND_SERIES, BACKEND_SPK)


@dataclass
class GeoPosition:
    """Geographic observer location.

    Parameters:
        lon_deg: Longitude in degrees, east positive.
        lat_deg: Geodetic latitude in degrees.
        alt_m: Height above the ellipsoid in meters.
    """

    lon_deg: float = 0.0
    lat_deg: float = 0.0
    alt_m: float = 0.0


@dataclass
class SiderealMode:
    """Sidereal zodiac definition.

    Parameters:
        mode: SIDM_* constant.
        t0: Reference epoch (JD TT) for SIDM_USER.
        ayan_t0: Ayanamsa at t0 in degrees for SIDM_USER.
    """

    mode: int = SIDM_FAGAN_BRADLEY
    t0: float = 0.0
    ayan_t0: float = 0.0


class StateCache:
    """Bounded LRU memo of computed positions keyed by call parameters.

    Values are stored as numpy arrays and copied on the way in and out, so a
    caller modifying a returned array cannot alter later results.
    """

    def __init__(self, maxsize: int = DEFAULT_CACHE_SIZE) -> None:
        self.maxsize = maxsize
        self._data: OrderedDict[Hashable, np.ndarray] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def get(self, key: Hashable) -> np.ndarray | None:
        """Return a copy of the cached array for key, or None."""
        value = self._data.get(key)
        if value is None:
            self.misses += 1
            return None
        self._data.move_to_end(key)
        self.hits += 1
        return value.copy()

    def put(self, key: Hashable, value: np.ndarray) -> None:
        """Store a copy of value under key, evicting the oldest entry when full."""
        self._data[key] = np.array(value, dtype=np.float64, copy=True)
        self._data.move_to_end(key)
        while len(self._data) > self.maxsize:
            self._data.popitem(last=False)

    def clear(self) -> None:
        """Drop all entries."""
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)


@dataclass
class EngineContext:
    """Process configuration plus owned resources (open files, cache).

    Mutate only through the set_* methods; each clears the state cache so no
    stale result survives a configuration change.
    """

    ephe_path: str = field(default_factory=get_ephe_path)
    jpl_file: str = field(default_factory=get_jpl_file)
    backend: str = BACKEND_SWEPH
    allow_fallback: bool = True
    sidereal: SiderealMode = field(default_factory=SiderealMode)
    tid_acc: float = TIDAL_AUTOMATIC
    delta_t_model: str = DELTAT_TABLE
    delta_t_userdef: float | None = None
    precession_model: str = PREC_DEFAULT
    nutation_model: str = NUT_DEFAULT
    bias_model: str = BIAS_DEFAULT
    topo: GeoPosition | None = None
    user_bodies: dict[int, OrbitalElements] = field(default_factory=dict)
    cache: StateCache = field(default_factory=StateCache)
    _files: dict[str, Any] = field(default_factory=dict, repr=False)
    sources: dict[tuple[int, str], Any] = field(default_factory=dict, repr=False)

    # -- setters ---------------------------------------------------------

    def set_ephe_path(self, path: str) -> None:
        """Set the ephemeris search path and close files opened from the old one."""
        self.close()
        self.ephe_path = path
        self.cache.clear()

    def set_jpl_file(self, name: str) -> None:
        """Set the JPL ephemeris file name."""
        self.close()
        self.jpl_file = name
        self.cache.clear()

    def set_backend(self, backend: str, allow_fallback: bool = True) -> None:
        """Select the position backend (sweph, jpl, series, spk).

        Parameters:
            backend: BACKEND_* constant.
            allow_fallback: Fall back to the series backend when files are
                missing or do not cover the date.

        Raises:
            ValueError: Unknown backend.
        """
        if backend not in _BACKENDS:
            raise ValueError(f'Unknown backend {backend!r}; expected one of {_BACKENDS}')
        self.backend = backend
        self.allow_fallback = allow_fallback
        self.cache.clear()

    def set_sidereal_mode(self, mode: int, t0: float = 0.0, ayan_t0: float = 0.0) -> None:
        """Select the sidereal zodiac (t0 and ayan_t0 only matter for SIDM_USER)."""
        self.sidereal = SiderealMode(mode, t0, ayan_t0)
        self.cache.clear()

    def set_tid_acc(self, tid_acc: float) -> None:
        """Set the lunar tidal acceleration (arcsec/cy^2); TIDAL_AUTOMATIC follows the file."""
        self.tid_acc = tid_acc
        self.cache.clear()

    def set_delta_t_userdef(self, value_days: float | None) -> None:
        """Override Delta-T with a constant (days); None restores the table model."""
        self.delta_t_userdef = value_days
        self.delta_t_model = DELTAT_OVERRIDE if value_days is not None else DELTAT_TABLE
        self.cache.clear()

    def set_delta_t_model(self, model: str) -> None:
        """Select the Delta-T model (table, polynomial, override)."""
        self.delta_t_model = model
        self.cache.clear()

    def set_models(
        self,
        precession: str | None = None,
        nutation: str | None = None,
        bias: str | None = None,
    ) -> None:
        """Select precession, nutation and frame-bias models; None keeps the current one."""
        if precession is not None:
            self.precession_model = precession
        if nutation is not None:
            self.nutation_model = nutation
        if bias is not None:
            self.bias_model = bias
        self.cache.clear()

    def set_topo(self, lon_deg: float, lat_deg: float, alt_m: float = 0.0) -> None:
        """Set the observer location used by topocentric positions and rise/set."""
        self.topo = GeoPosition(lon_deg, lat_deg, alt_m)
        self.cache.clear()

    @contextmanager
    def observer_at(self, location: GeoPosition) -> Iterator[EngineContext]:
        """Use location as the observer inside a with block.

        The caller's observer and cache are restored on exit; results for the
        temporary observer go to a cache of their own.
        """
        saved_topo, saved_cache = self.topo, self.cache
        self.topo = location
        self.cache = StateCache(saved_cache.maxsize)
        try:
            yield self
        finally:
            self.topo, self.cache = saved_topo, saved_cache

    def register_elements(self, elements: OrbitalElements) -> int:
        """Register a user-defined element set and return its body number."""
        body = FICT_OFFSET + len(self.user_bodies)
        while body in self.user_bodies:
            body += 1
        self.user_bodies[body] = elements
        self.cache.clear()
        return body

    # -- derived values --------------------------------------------------

    def tidal_acceleration(self) -> float:
        """Resolve the effective tidal acceleration.

        TIDAL_AUTOMATIC follows the DE number of the JPL file when the JPL
        backend is selected, and the default otherwise.
        """
        if self.tid_acc != TIDAL_AUTOMATIC:
            return self.tid_acc
        if self.backend == BACKEND_JPL:
            for handle in self._files.values():
                de_number = getattr(handle, 'de_number', None)
                if de_number in TIDAL_BY_DE_NUMBER:
                    return TIDAL_BY_DE_NUMBER[de_number]
        return TIDAL_DEFAULT

    def delta_t(self, jd_ut: float) -> float:
        """Delta-T in days for this context's model."""
        return deltat.delta_t(
            jd_ut,
            model=self.delta_t_model,
            tid_acc=self.tidal_acceleration(),
            override=self.delta_t_userdef,
        )

    # -- owned files -----------------------------------------------------

    def get_file(self, path: str, opener: Callable[[str], Any]) -> Any:
        """Return the open handle for path, opening it with opener on first use.

        Parameters:
            path: Absolute file path (the registry key).
            opener: Callable returning an open handle; may raise.

        Returns:
            The open handle.
        """
        handle = self._files.get(path)
        if handle is None:
            handle = opener(path)
            logger.debug('Opened ephemeris file %s', path)
            self._files[path] = handle
        return handle

    def open_files(self) -> list[str]:
        """Paths of the files currently held open."""
        return list(self._files)

    def close(self) -> None:
        """Close every owned file and clear the cache."""
        for path, handle in self._files.items():
            close = getattr(handle, 'close', None)
            if close is not None:
                close()
            logger.debug('Closed ephemeris file %s', path)
        self._files.clear()
        self.sources.clear()
        self.cache.clear()


# Module-level default context
_default_context: EngineContext | None = None


def get_context() -> EngineContext:
    """Return the process-wide default EngineContext (created on first use)."""
    global _default_context
    if _default_context is None:
        _default_context = EngineContext()
    return _default_context


def reset_context() -> EngineContext:
    """Close the default context and replace it with a fresh one."""
    global _default_context
    if _default_context is not None:
        _default_context.close()
    _default_context = EngineContext()
    return _default_context
