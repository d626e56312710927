"""SPICE SPK backend: barycentric states from NAIF kernels through cspyce."""

from __future__ import annotations

import logging

import cspyce
import numpy as np

from ephemeris_engine.constants import AUNIT, J2000, SECONDS_PER_DAY
from ephemeris_engine.errors import BodyNotInFile, DateOutOfRange, FileNotFoundEphemeris

logger = logging.getLogger(__name__)

# NAIF ids of the bodies this backend serves
NAIF_SSB = 0
NAIF_SUN = 10
NAIF_MOON = 301
NAIF_EARTH = 399
NAIF_EMB = 3

_KM_PER_AU = AUNIT / 1000.0


class SpkBackend:
    """Kernel set loaded into the cspyce kernel pool.

    cspyce keeps one process-wide kernel pool; every SpkBackend furnishes its
    kernels into it, so two backends with conflicting kernels should not be
    used in the same process.
    """

    def __init__(self, kernels: list[str]) -> None:
        self.kernels = list(kernels)
        self._loaded = False

    @classmethod
    def open(cls, path: str) -> SpkBackend:
        """Load one kernel (or a meta-kernel) from path.

        Raises:
            FileNotFoundEphemeris: cspyce cannot load the file.
        """
        backend = cls([path])
        backend.load()
        return backend

    def load(self) -> None:
        """Furnish the kernels (once)."""
        if self._loaded:
            return
        for path in self.kernels:
            try:
                cspyce.furnsh(path)
            except Exception as e:
                raise FileNotFoundEphemeris(f'Cannot load SPICE kernel {path}: {e}') from e
            logger.debug('Loaded SPICE kernel %s', path)
        self._loaded = True

    def close(self) -> None:
        """Unload the kernels from the pool."""
        if not self._loaded:
            return
        for path in self.kernels:
            cspyce.unload(path)
        self._loaded = False

    def state(self, naif_id: int, tjd: float) -> np.ndarray:
        """Barycentric J2000 state of a NAIF body in AU and AU/day.

        Parameters:
            naif_id: NAIF integer id.
            tjd: Julian day (TDB).

        Returns:
            6-element array.

        Raises:
            DateOutOfRange: Kernels do not cover tjd for the body.
        """
        if naif_id == NAIF_SSB:
            return np.zeros(6, dtype=np.float64)
        et = (tjd - J2000) * SECONDS_PER_DAY
        try:
            pv = cspyce.spkssb(naif_id, et, 'J2000')
        except Exception as e:
            message = str(e)
            if 'SPKINSUFFDATA' in message or 'insufficient' in message.lower():
                raise DateOutOfRange(f'No SPK data for body {naif_id} at jd {tjd:.6f}') from e
            raise BodyNotInFile(f'SPK lookup failed for body {naif_id}: {message}') from e
        out = np.array(pv, dtype=np.float64) / _KM_PER_AU
        out[3:] *= SECONDS_PER_DAY
        return out
