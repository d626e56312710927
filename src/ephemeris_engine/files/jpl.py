"""Reader for JPL DE binary ephemeris files (fixed-length Chebyshev records).

Layout: record 0 is the header (titles, constant names, start/end/step,
constant count, AU, Earth/Moon mass ratio, coefficient pointers, DE number),
record 1 holds the constant values, and every following record covers one
``step`` of days with coefficient blocks for 13 bodies. The byte order is
detected from the step length, which must be a small positive number.
"""

from __future__ import annotations

import logging
import math
import os
import struct
from pathlib import Path
from typing import BinaryIO

import numpy as np

from ephemeris_engine.errors import (
    BodyNotInFile,
    CorruptHeader,
    DateOutOfRange,
    FileNotFoundEphemeris,
)
from ephemeris_engine.files.chebyshev import Segment, evaluate

logger = logging.getLogger(__name__)

# Body indices in a DE file
J_MERCURY = 0
J_VENUS = 1
J_EARTH = 2
J_MARS = 3
J_JUPITER = 4
J_SATURN = 5
J_URANUS = 6
J_NEPTUNE = 7
J_PLUTO = 8
J_MOON = 9
J_SUN = 10
J_SBARY = 11
J_EMB = 12
J_NUT = 13
J_LIB = 14

# Coefficient block for each body index (block 2 holds the EMB)
_BLOCK_OF_BODY = {
    J_MERCURY: 0,
    J_VENUS: 1,
    J_EMB: 2,
    J_MARS: 3,
    J_JUPITER: 4,
    J_SATURN: 5,
    J_URANUS: 6,
    J_NEPTUNE: 7,
    J_PLUTO: 8,
    J_MOON: 9,
    J_SUN: 10,
    J_NUT: 11,
    J_LIB: 12,
}
NUTATION_BLOCK = 11
N_BLOCKS = 13

_TITLE_BYTES = 3 * 84
_CNAME_BYTES = 400 * 6
_HEADER_FMT = '3didd36ii3i'

# Plausible start/end Julian days of any DE file
_EARLIEST_START = -5583942.0
_LATEST_END = 9025909.0


class JplFile:
    """Open JPL DE file.

    Attributes:
        path: File path.
        title: Header title lines joined with newlines.
        start, end, step: Coverage and record length in days.
        au_km: Astronomical unit in km.
        emrat: Earth/Moon mass ratio.
        de_number: Ephemeris number (e.g. 441).
        ipt: 13 x 3 pointers (1-based start, coefficient count, sub-intervals).
        constants: Header constants by name.
    """

    def __init__(self, path: str, fh: BinaryIO) -> None:
        self.path = path
        self._fh: BinaryIO | None = fh
        self.byteorder = '<'
        self.title = ''
        self.start = 0.0
        self.end = 0.0
        self.step = 0.0
        self.au_km = 0.0
        self.emrat = 0.0
        self.de_number = 0
        self.ipt: list[list[int]] = []
        self.constants: dict[str, float] = {}
        self.ksize = 0
        self.record_bytes = 0
        self.ncoeffs = 0
        self._record_index = -1
        self._record: np.ndarray | None = None
        self._segments: dict[int, Segment] = {}

    @classmethod
    def open(cls, path: str) -> JplFile:
        """Open and validate a DE file.

        Parameters:
            path: File path.

        Returns:
            Open JplFile.

        Raises:
            FileNotFoundEphemeris: File does not exist.
            CorruptHeader: Header, record size or file length is invalid.
        """
        if not Path(path).is_file():
            raise FileNotFoundEphemeris(f'JPL file not found: {path}')
        fh = open(path, 'rb')
        handle = cls(path, fh)
        try:
            handle._read_header()
        except (struct.error, CorruptHeader):
            fh.close()
            raise
        return handle

    def close(self) -> None:
        """Close the underlying file."""
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def _read_header(self) -> None:
        assert self._fh is not None
        fh = self._fh
        raw = fh.read(_TITLE_BYTES + _CNAME_BYTES + struct.calcsize('<' + _HEADER_FMT))
        if len(raw) < _TITLE_BYTES + _CNAME_BYTES + struct.calcsize('<' + _HEADER_FMT):
            raise CorruptHeader(f'JPL file {self.path} is too short for a header')
        self.title = '\n'.join(
            raw[i * 84 : (i + 1) * 84].decode('ascii', 'replace').rstrip()
            for i in range(3)
        )
        names_raw = raw[_TITLE_BYTES : _TITLE_BYTES + _CNAME_BYTES]
        body = raw[_TITLE_BYTES + _CNAME_BYTES :]
        fields = None
        for order in ('<', '>'):
            candidate = struct.unpack(order + _HEADER_FMT, body)
            if 1.0 <= candidate[2] <= 200.0:
                self.byteorder = order
                fields = candidate
                break
        if fields is None:
            raise CorruptHeader(f'JPL file {self.path}: cannot determine byte order')
        self.start, self.end, self.step = fields[0], fields[1], fields[2]
        ncon = fields[3]
        self.au_km = fields[4]
        self.emrat = fields[5]
        flat_ipt = list(fields[6:42])
        self.de_number = int(fields[42])
        flat_ipt.extend(fields[43:46])
        self.ipt = [flat_ipt[i * 3 : i * 3 + 3] for i in range(N_BLOCKS)]
        if self.start < _EARLIEST_START or self.end > _LATEST_END or self.end <= self.start:
            raise CorruptHeader(
                f'JPL file {self.path}: implausible coverage {self.start}..{self.end}'
            )
        self.ksize = self._record_size()
        self.record_bytes = self.ksize * 4
        self.ncoeffs = self.ksize // 2
        self._check_length()
        names = [
            names_raw[i * 6 : (i + 1) * 6].decode('ascii', 'replace').strip()
            for i in range(min(max(ncon, 0), 400))
        ]
        fh.seek(self.record_bytes)
        values_raw = fh.read(8 * len(names))
        values = struct.unpack(f'{self.byteorder}{len(names)}d', values_raw)
        self.constants = dict(zip(names, values))
        logger.debug(
            'JPL file %s: DE%d, %.1f..%.1f, step %.1f, byte order %s',
            self.path,
            self.de_number,
            self.start,
            self.end,
            self.step,
            self.byteorder,
        )

    def _record_size(self) -> int:
        """Record size in 4-byte words, derived from the block with the largest pointer."""
        kmx = 0
        khi = 0
        for i in range(N_BLOCKS):
            if self.ipt[i][0] > kmx:
                kmx = self.ipt[i][0]
                khi = i + 1
        nd = 2 if khi == NUTATION_BLOCK + 1 else 3
        last = self.ipt[khi - 1]
        ksize = (last[0] + nd * last[1] * last[2] - 1) * 2
        # DE102 quirk: record padded beyond the last block
        if ksize == 1546:
            ksize = 1652
        if ksize < 1000 or ksize > 5000:
            raise CorruptHeader(f'JPL file {self.path}: record size {ksize} out of range')
        return ksize

    def _check_length(self) -> None:
        nseg = int((self.end - self.start) / self.step)
        nb = 0
        for i in range(N_BLOCKS):
            k = 2 if i == NUTATION_BLOCK else 3
            nb += self.ipt[i][1] * self.ipt[i][2] * k * nseg
        nb = (nb + 2 * nseg) * 8 + 2 * self.record_bytes
        assert self._fh is not None
        flen = os.fstat(self._fh.fileno()).st_size
        if flen != nb and flen - nb != self.record_bytes:
            raise CorruptHeader(
                f'JPL file {self.path} is mutilated: length {flen}, expected {nb}'
            )

    def _read_record(self, nr: int) -> np.ndarray:
        if nr == self._record_index and self._record is not None:
            return self._record
        if self._fh is None:
            raise CorruptHeader(f'JPL file {self.path} is closed')
        self._fh.seek(nr * self.record_bytes)
        raw = self._fh.read(self.ncoeffs * 8)
        if len(raw) < self.ncoeffs * 8:
            raise DateOutOfRange(f'JPL file {self.path}: record {nr} beyond end of file')
        self._record = np.frombuffer(raw, dtype=f'{self.byteorder}f8').astype(np.float64)
        self._record_index = nr
        return self._record

    def load_segment(self, body: int, et: float) -> Segment:
        """Return the Chebyshev sub-interval of body covering et.

        Parameters:
            body: J_* index with its own coefficient block (not J_EARTH/J_SBARY).
            et: Julian day (TDB).

        Returns:
            Segment with full-weight c0 coefficients, positions in km.

        Raises:
            DateOutOfRange: et outside the file.
            BodyNotInFile: Body has no block, or the block is empty.
        """
        if et < self.start or et > self.end:
            raise DateOutOfRange(
                f'jd {et:.6f} outside JPL file range {self.start:.1f}..{self.end:.1f}'
            )
        block = _BLOCK_OF_BODY.get(body)
        if block is None:
            raise BodyNotInFile(f'JPL file has no coefficient block for body {body}')
        ptr, ncf, na = self.ipt[block]
        if ncf == 0 or na == 0:
            raise BodyNotInFile(f'JPL file {self.path} carries no data for body {body}')
        cached = self._segments.get(body)
        if cached is not None and cached.contains(et):
            return cached
        nr = int((et - self.start) / self.step) + 2
        if et == self.end:
            nr -= 1
        buf = self._read_record(nr)
        rec_start = buf[0]
        t = (et - rec_start) / self.step
        t = min(max(t, 0.0), 1.0)
        dt1 = math.floor(t)
        ni = int(na * t - dt1)
        ncm = 2 if block == NUTATION_BLOCK else 3
        sub = self.step / na
        first = ptr - 1 + ni * ncm * ncf
        coef = np.array(buf[first : first + ncm * ncf], dtype=np.float64).reshape(ncm, ncf)
        segment = Segment(
            body=body,
            t0=rec_start + ni * sub,
            t1=rec_start + (ni + 1) * sub,
            coef=coef,
            ncf=ncf,
            c0_halved=False,
            source=self.path,
        )
        self._segments[body] = segment
        return segment

    def _raw(self, body: int, et: float) -> np.ndarray:
        segment = self.load_segment(body, et)
        return evaluate(segment, et)

    def state(self, et: float, body: int) -> np.ndarray:
        """Barycentric J2000 state of body in AU and AU/day.

        Parameters:
            et: Julian day (TDB).
            body: J_* index (planets, J_EARTH, J_MOON, J_SUN, J_SBARY, J_EMB).

        Returns:
            6-element array.
        """
        if body == J_SBARY:
            return np.zeros(6, dtype=np.float64)
        if body in (J_EARTH, J_MOON):
            emb = self._raw(J_EMB, et)
            geomoon = self._raw(J_MOON, et)
            earth = emb - geomoon / (1.0 + self.emrat)
            result = earth + geomoon if body == J_MOON else earth
        elif body in (J_NUT, J_LIB):
            raise BodyNotInFile(f'body {body} is not a position; use nutation()/librations()')
        else:
            result = self._raw(body, et)
        return result / self.au_km

    def pleph(self, et: float, target: int, center: int) -> np.ndarray:
        """State of target relative to center in AU and AU/day (J2000 equator).

        Parameters:
            et: Julian day (TDB).
            target: J_* index of the target.
            center: J_* index of the center.

        Returns:
            6-element array.
        """
        if target == J_MOON and center == J_EARTH:
            return self._raw(J_MOON, et) / self.au_km
        if target == J_EARTH and center == J_MOON:
            return -self._raw(J_MOON, et) / self.au_km
        return self.state(et, target) - self.state(et, center)

    def nutation(self, et: float) -> tuple[float, float]:
        """Nutation in longitude and obliquity (radians) from the file.

        Raises:
            BodyNotInFile: File has no nutation block.
        """
        values = self._raw(J_NUT, et)
        return (float(values[0]), float(values[1]))

    def librations(self, et: float) -> np.ndarray:
        """Lunar libration angles and rates (radians, radians/day)."""
        return self._raw(J_LIB, et)
