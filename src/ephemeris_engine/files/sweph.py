"""Reader for packed SE1 ephemeris files.

An SE1 file starts with three text lines (version, file name, copyright;
asteroid files add an orbital-elements line), followed by a binary header
written in the byte order of the machine that produced it. A 4-byte test
word (0x00616263) tells which order that was.

Binary header, in order:

- file length (must equal the real length), DE number, start and end JD,
- body count (a count above 256 means body ids are 4 bytes wide), body ids,
- 30-byte asteroid name (asteroid files only), 4-byte CRC,
- five constants: c, AU, heliocentric gravitational constant, Earth/Moon
  mass ratio, Sun radius,
- per body: index offset, flags, coefficient count, rmax*1000, start, end,
  segment length, orbital-plane elements and, with the ELLIPSE flag, a
  reference ellipse of 2*ncoe doubles.

Each segment is addressed by a 3-byte pointer in the body's index. A
segment stores, per coordinate, a size header and the coefficients as
4/3/2/1-byte, half-byte and quarter-byte scaled integers.
"""

from __future__ import annotations

import logging
import math
import os
import re
import struct
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

import numpy as np

from ephemeris_engine.constants import AST_OFFSET, TWOPI
from ephemeris_engine.errors import (
    BodyNotInFile,
    CorruptHeader,
    DateOutOfRange,
    FileNotFoundEphemeris,
)
from ephemeris_engine.files.chebyshev import Segment, evaluate
from ephemeris_engine.files.filenames import SEI_ANYBODY, SEI_MOON

logger = logging.getLogger(__name__)

ENDIAN_TEST_WORD = 0x616263
MAX_BODIES_PER_FILE = 20
ASTEROID_NAME_BYTES = 30

# Per-body flags
FLG_HELIO = 1
FLG_ROTATE = 2
FLG_ELLIPSE = 4
FLG_EMBHEL = 8

# Sine/cosine of the J2000 obliquity
SEPS2000 = 0.39777715572793088
CEPS2000 = 0.91748206215761929


@dataclass
class PlanetData:
    """Header record of one body in a packed file."""

    ibdy: int
    lndx0: int
    iflg: int
    ncoe: int
    rmax: float
    tfstart: float
    tfend: float
    dseg: float
    nndx: int
    telem: float
    prot: float
    dprot: float
    qrot: float
    dqrot: float
    peri: float
    dperi: float
    refep: np.ndarray | None = None


class SwephFile:
    """Open packed SE1 ephemeris file.

    Attributes:
        path: File path.
        version: File format version from the first text line.
        de_number: Number of the JPL ephemeris the file was fitted to.
        start, end: Coverage (JD TT).
        bodies: PlanetData by internal index (SEI_ANYBODY for a numbered
            minor planet file).
        clight, aunit, helgravconst, ratme, sunradius: Header constants.
        asteroid_name: Name line of an asteroid file, '' otherwise.
    """

    def __init__(self, path: str, fh: BinaryIO, any_asteroid: bool) -> None:
        self.path = path
        self._fh: BinaryIO | None = fh
        self.any_asteroid = any_asteroid
        self.byteorder = 'little'
        self.version = 0
        self.de_number = 0
        self.start = 0.0
        self.end = 0.0
        self.bodies: dict[int, PlanetData] = {}
        self.body_ids: list[int] = []
        self.clight = 0.0
        self.aunit = 0.0
        self.helgravconst = 0.0
        self.ratme = 0.0
        self.sunradius = 0.0
        self.asteroid_name = ''
        self._segments: dict[int, Segment] = {}

    @classmethod
    def open(cls, path: str, any_asteroid: bool | None = None) -> SwephFile:
        """Open and validate a packed file.

        Parameters:
            path: File path.
            any_asteroid: True for single numbered-minor-planet files; None
                infers it from an 'astN' parent directory.

        Returns:
            Open SwephFile.

        Raises:
            FileNotFoundEphemeris: File does not exist.
            CorruptHeader: Header fails validation.
        """
        p = Path(path)
        if not p.is_file():
            raise FileNotFoundEphemeris(f'Ephemeris file not found: {path}')
        if any_asteroid is None:
            any_asteroid = re.fullmatch(r'ast\d+', p.parent.name) is not None
        fh = open(path, 'rb')
        handle = cls(path, fh, any_asteroid)
        try:
            handle._read_header()
        except (struct.error, CorruptHeader, EOFError) as e:
            fh.close()
            if isinstance(e, CorruptHeader):
                raise
            raise CorruptHeader(f'File damaged: {path}: {e}') from e
        logger.debug(
            'Packed file %s: DE%d, %.1f..%.1f, bodies %s',
            path,
            handle.de_number,
            handle.start,
            handle.end,
            handle.body_ids,
        )
        return handle

    def close(self) -> None:
        """Close the underlying file."""
        if self._fh is not None:
            self._fh.close()
            self._fh = None

    # -- low-level reads -------------------------------------------------

    def _read(self, size: int) -> bytes:
        assert self._fh is not None
        data = self._fh.read(size)
        if len(data) < size:
            raise EOFError(f'cannot read {size} bytes from {self.path}')
        return data

    def _int(self, size: int) -> int:
        return int.from_bytes(self._read(size), self.byteorder, signed=False)

    def _double(self) -> float:
        fmt = '<d' if self.byteorder == 'little' else '>d'
        return struct.unpack(fmt, self._read(8))[0]

    def _text_line(self) -> str:
        assert self._fh is not None
        line = self._fh.readline(256)
        if not line.endswith(b'\r\n'):
            raise CorruptHeader(f'File damaged: {self.path}: bad text header line')
        return line.decode('latin-1').rstrip('\r\n')

    # -- header ------------------------------------------------------------

    def _read_header(self) -> None:
        assert self._fh is not None
        version_line = self._text_line()
        match = re.search(r'\d+', version_line)
        if match is None:
            raise CorruptHeader(f'File damaged: {self.path}: no version number')
        self.version = int(match.group(0))
        self._text_line()  # file name
        self._text_line()  # copyright
        if self.any_asteroid:
            self.asteroid_name = self._text_line().strip()
        test = self._read(4)
        if int.from_bytes(test, 'little') == ENDIAN_TEST_WORD:
            self.byteorder = 'little'
        elif int.from_bytes(test, 'big') == ENDIAN_TEST_WORD:
            self.byteorder = 'big'
        else:
            raise CorruptHeader(f'File damaged: {self.path}: incorrect endian test value')
        length = self._int(4)
        actual = os.fstat(self._fh.fileno()).st_size
        if length != actual:
            raise CorruptHeader(
                f'File damaged: {self.path}: header length {length}, file length {actual}'
            )
        self.de_number = self._int(4)
        self.start = self._double()
        self.end = self._double()
        nplan = self._int(2)
        id_bytes = 2
        if nplan > 256:
            id_bytes = 4
            nplan %= 256
        if nplan < 1 or nplan > MAX_BODIES_PER_FILE:
            raise CorruptHeader(f'File damaged: {self.path}: invalid body count {nplan}')
        self.body_ids = [self._int(id_bytes) for _ in range(nplan)]
        if self.any_asteroid:
            raw_name = self._read(ASTEROID_NAME_BYTES)
            name = raw_name.split(b'\0', 1)[0].decode('latin-1').strip()
            if name:
                self.asteroid_name = name
        self._read(4)  # CRC, not verified
        self.clight = self._double()
        self.aunit = self._double()
        self.helgravconst = self._double()
        self.ratme = self._double()
        self.sunradius = self._double()
        for ibdy in self.body_ids:
            lndx0 = self._int(4)
            iflg = self._int(1)
            ncoe = self._int(1)
            rmax = self._int(4) / 1000.0
            d = [self._double() for _ in range(10)]
            refep = None
            if iflg & FLG_ELLIPSE:
                refep = np.array([self._double() for _ in range(2 * ncoe)], dtype=np.float64)
            if d[2] <= 0.0:
                raise CorruptHeader(f'File damaged: {self.path}: body {ibdy} has segment length {d[2]}')
            data = PlanetData(
                ibdy=ibdy,
                lndx0=lndx0,
                iflg=iflg,
                ncoe=ncoe,
                rmax=rmax,
                tfstart=d[0],
                tfend=d[1],
                dseg=d[2],
                nndx=int((d[1] - d[0] + 0.1) / d[2]),
                telem=d[3],
                prot=d[4],
                dprot=d[5],
                qrot=d[6],
                dqrot=d[7],
                peri=d[8],
                dperi=d[9],
                refep=refep,
            )
            key = SEI_ANYBODY if ibdy >= AST_OFFSET else ibdy
            self.bodies[key] = data

    # -- segments ------------------------------------------------------------

    def has_body(self, ipli: int) -> bool:
        """True if the file carries internal body ipli."""
        return ipli in self.bodies

    def body(self, ipli: int) -> PlanetData:
        """Header record of internal body ipli.

        Raises:
            BodyNotInFile: The file does not carry the body.
        """
        data = self.bodies.get(ipli)
        if data is None:
            raise BodyNotInFile(f'{self.path} carries no data for body index {ipli}')
        return data

    def load_segment(self, ipli: int, tjd: float) -> Segment:
        """Return the unpacked, rotated segment of body ipli covering tjd.

        The most recent segment per body is kept; a request outside it reads
        the adjacent segment from the file.

        Raises:
            BodyNotInFile: The file does not carry the body.
            DateOutOfRange: tjd outside the body's coverage.
            CorruptHeader: Segment data inconsistent with the header.
        """
        pdp = self.body(ipli)
        if tjd < pdp.tfstart or tjd > pdp.tfend:
            raise DateOutOfRange(
                f'jd {tjd:.6f} outside {self.path} range {pdp.tfstart:.1f}..{pdp.tfend:.1f}'
            )
        cached = self._segments.get(ipli)
        if cached is not None and cached.t0 <= tjd < cached.t1:
            return cached
        iseg = int((tjd - pdp.tfstart) / pdp.dseg)
        if iseg >= pdp.nndx:
            iseg = pdp.nndx - 1
        tseg0 = pdp.tfstart + iseg * pdp.dseg
        coef = self._unpack_segment(pdp, iseg)
        ncf = pdp.ncoe
        if pdp.iflg & FLG_ROTATE:
            coef, ncf = rotate_back(pdp, coef, tseg0 + pdp.dseg / 2.0, ipli == SEI_MOON)
        segment = Segment(
            body=ipli,
            t0=tseg0,
            t1=tseg0 + pdp.dseg,
            coef=coef,
            ncf=ncf,
            c0_halved=True,
            source=self.path,
        )
        self._segments[ipli] = segment
        logger.debug('Loaded segment %d of body %d from %s', iseg, ipli, self.path)
        return segment

    def _unpack_segment(self, pdp: PlanetData, iseg: int) -> np.ndarray:
        if self._fh is None:
            raise CorruptHeader(f'{self.path} is closed')
        self._fh.seek(pdp.lndx0 + iseg * 3)
        fpos = self._int(3)
        self._fh.seek(fpos)
        coef = np.zeros((3, pdp.ncoe), dtype=np.float64)
        for icoord in range(3):
            c0 = self._int(1)
            c1 = self._int(1)
            if c0 & 128:
                c2 = self._int(1)
                c3 = self._int(1)
                nsize = [c1 // 16, c1 % 16, c2 // 16, c2 % 16, c3 // 16, c3 % 16]
            else:
                nsize = [c0 // 16, c0 % 16, c1 // 16, c1 % 16]
            nco = sum(nsize)
            if nco > pdp.ncoe:
                raise CorruptHeader(
                    f'Error in ephemeris file {self.path}: {nco} coefficients instead of {pdp.ncoe}'
                )
            values = unpack_coefficients(self._read, nsize, pdp.rmax, self.byteorder)
            coef[icoord, : len(values)] = values
        return coef

    def state(self, ipli: int, tjd: float) -> np.ndarray:
        """Raw J2000 equatorial state of body ipli as stored in the file.

        Planets flagged HELIO are heliocentric, the Moon is geocentric, and
        everything else barycentric; the caller combines them.

        Returns:
            6-element array in AU and AU/day.
        """
        return evaluate(self.load_segment(ipli, tjd), tjd)


def unpack_coefficients(
    read: Callable[[int], bytes], nsize: list[int], rmax: float, byteorder: str = 'little'
) -> list[float]:
    """Decode one coordinate's packed coefficients.

    Parameters:
        read: Callable returning the next n bytes of the file.
        nsize: Coefficient counts per group: 4, 3, 2, 1 bytes each, then
            half-byte and quarter-byte groups.
        rmax: Scale of the body (max distance); coefficients are multiples of
            rmax / 2e9. Byte groups divide by 1e9 before scaling, sub-byte
            groups after; the order fixes the rounding of each value.
        byteorder: 'little' or 'big', the file byte order.

    Returns:
        Decoded coefficients in file order.
    """
    out: list[float] = []
    for i, count in enumerate(nsize):
        if count == 0:
            continue
        if i < 4:
            nbytes = 4 - i
            raw = read(nbytes * count)
            for m in range(count):
                v = int.from_bytes(raw[m * nbytes : (m + 1) * nbytes], byteorder)
                out.append(_signed_magnitude(v, 1) / 1e9 * rmax / 2.0)
        elif i == 4:
            nbytes = (count + 1) // 2
            raw = read(nbytes)
            done = 0
            for m in range(nbytes):
                v = raw[m]
                o = 16
                for _ in range(2):
                    if done >= count:
                        break
                    out.append(_signed_magnitude(v, o) * rmax / 2.0 / 1e9)
                    v %= o
                    o //= 16
                    done += 1
        else:
            nbytes = (count + 3) // 4
            raw = read(nbytes)
            done = 0
            for m in range(nbytes):
                v = raw[m]
                o = 64
                for _ in range(4):
                    if done >= count:
                        break
                    out.append(_signed_magnitude(v, o) * rmax / 2.0 / 1e9)
                    v %= o
                    o //= 4
                    done += 1
    return out


def _signed_magnitude(v: int, o: int) -> float:
    """Value of the field of v whose lowest bit is o; that bit is the sign."""
    if v & o:
        return -float((v + o) // o // 2)
    return float(v // o // 2)


def rotate_back(
    pdp: PlanetData, coef: np.ndarray, tmid: float, is_moon: bool
) -> tuple[np.ndarray, int]:
    """Rotate orbital-plane coefficients to the J2000 equator.

    Adds the reference ellipse first when the body carries one. For the Moon
    the orbital plane is referred to the J2000 ecliptic and gets an extra
    ecliptic-to-equator rotation.

    Parameters:
        pdp: Body header.
        coef: Array (3, ncoe) of orbital-plane coefficients.
        tmid: Segment midpoint (JD).
        is_moon: True for the Moon.

    Returns:
        (rotated coefficients, number of coefficients to evaluate).
    """
    nco = pdp.ncoe
    tdiff = (tmid - pdp.telem) / 365250.0
    if is_moon:
        dn = pdp.prot + tdiff * pdp.dprot
        dn -= math.trunc(dn / TWOPI) * TWOPI
        qav = (pdp.qrot + tdiff * pdp.dqrot) * math.cos(dn)
        pav = (pdp.qrot + tdiff * pdp.dqrot) * math.sin(dn)
    else:
        qav = pdp.qrot + tdiff * pdp.dqrot
        pav = pdp.prot + tdiff * pdp.dprot
    x = coef.T.copy()  # (nco, 3)
    if pdp.iflg & FLG_ELLIPSE and pdp.refep is not None:
        refepx = pdp.refep[:nco]
        refepy = pdp.refep[nco : 2 * nco]
        omtild = pdp.peri + tdiff * pdp.dperi
        omtild -= math.trunc(omtild / TWOPI) * TWOPI
        com = math.cos(omtild)
        som = math.sin(omtild)
        x[:, 0] = coef[0] + com * refepx - som * refepy
        x[:, 1] = coef[1] + com * refepy + som * refepx
    cosih2 = 1.0 / (1.0 + qav * qav + pav * pav)
    uiz = np.array([2.0 * pav * cosih2, -2.0 * qav * cosih2, (1.0 - qav * qav - pav * pav) * cosih2])
    uix = np.array([(1.0 + qav * qav - pav * pav) * cosih2, 2.0 * qav * pav * cosih2, -2.0 * pav * cosih2])
    uiy = np.array([2.0 * qav * pav * cosih2, (1.0 - qav * qav + pav * pav) * cosih2, 2.0 * qav * cosih2])
    rotated = np.zeros((3, nco), dtype=np.float64)
    neval = nco
    for i in range(nco):
        xrot = x[i, 0] * uix[0] + x[i, 1] * uiy[0] + x[i, 2] * uiz[0]
        yrot = x[i, 0] * uix[1] + x[i, 1] * uiy[1] + x[i, 2] * uiz[1]
        zrot = x[i, 0] * uix[2] + x[i, 1] * uiy[2] + x[i, 2] * uiz[2]
        if abs(xrot) + abs(yrot) + abs(zrot) >= 1e-14:
            neval = i
        rotated[0, i] = xrot
        if is_moon:
            rotated[1, i] = CEPS2000 * yrot - SEPS2000 * zrot
            rotated[2, i] = SEPS2000 * yrot + CEPS2000 * zrot
        else:
            rotated[1, i] = yrot
            rotated[2, i] = zrot
    return rotated, neval
