"""Shared fixtures: engine contexts and synthetic binary ephemeris files."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from pathlib import Path

import pytest

from ephemeris_engine.constants import BACKEND_SERIES
from ephemeris_engine.context import EngineContext
from ephemeris_engine.files import jpl
from ephemeris_engine.files.sweph import ENDIAN_TEST_WORD

# -- JPL DE layout ---------------------------------------------------------

JPL_NCF = 14
JPL_AU_KM = 149597870.7
JPL_EMRAT = 81.30056907
JPL_DE_NUMBER = 405
JPL_START = 2451536.5
JPL_STEP = 32.0
JPL_RECORDS = 3
JPL_END = JPL_START + JPL_STEP * JPL_RECORDS


def jpl_pointers() -> list[list[int]]:
    """(start, coefficient count, sub-intervals) of every block, 1-based starts."""
    ipt = []
    ptr = 3
    for block in range(jpl.N_BLOCKS):
        ncomp = 2 if block == jpl.NUTATION_BLOCK else 3
        ipt.append([ptr, JPL_NCF, 1])
        ptr += ncomp * JPL_NCF
    return ipt


def jpl_coefficients(block: int, comp: int) -> tuple[float, float]:
    """Constant and linear Chebyshev coefficients (km, or radians for nutation)."""
    if block == jpl.NUTATION_BLOCK:
        return 1e-5 * (comp + 1), 0.0
    return (block + 1) * 1e7 + comp * 1e6, 1e5 * (comp + 1)


def write_jpl(path: Path, byteorder: str = '<', truncate: int = 0) -> Path:
    """Write a DE405-style file whose bodies move linearly within each record.

    Parameters:
        path: Output file.
        byteorder: '<' or '>'.
        truncate: Bytes to drop from the end (to produce a mutilated file).
    """
    ipt = jpl_pointers()
    last = ipt[-1]
    ncoeffs = last[0] + 3 * last[1] * last[2] - 1
    record_bytes = ncoeffs * 8

    titles = b''.join(t.ljust(84) for t in (b'JPL synthetic DE405', b'Start', b'Final'))
    names = ['AU', 'EMRAT', 'DENUM']
    cnames = b''.join(n.encode('ascii').ljust(6) for n in names).ljust(400 * 6)
    flat = [v for row in ipt[:12] for v in row]
    header = titles + cnames + struct.pack(
        byteorder + '3didd36ii3i',
        JPL_START,
        JPL_END,
        JPL_STEP,
        len(names),
        JPL_AU_KM,
        JPL_EMRAT,
        *flat,
        JPL_DE_NUMBER,
        *ipt[12],
    )
    out = bytearray(header.ljust(record_bytes, b'\0'))
    constants = struct.pack(byteorder + '3d', JPL_AU_KM, JPL_EMRAT, float(JPL_DE_NUMBER))
    out += constants.ljust(record_bytes, b'\0')
    for rec in range(JPL_RECORDS):
        values = [0.0] * ncoeffs
        values[0] = JPL_START + rec * JPL_STEP
        values[1] = values[0] + JPL_STEP
        for block, (ptr, ncf, _) in enumerate(ipt):
            ncomp = 2 if block == jpl.NUTATION_BLOCK else 3
            for comp in range(ncomp):
                c0, c1 = jpl_coefficients(block, comp)
                values[ptr - 1 + comp * ncf] = c0
                values[ptr - 1 + comp * ncf + 1] = c1
        out += struct.pack(f'{byteorder}{ncoeffs}d', *values)
    if truncate:
        del out[-truncate:]
    path.write_bytes(bytes(out))
    return path


# -- packed SE1 layout -------------------------------------------------------

SE1_START = 2451545.0
SE1_DSEG = 32.0
SE1_NSEG = 4
SE1_END = SE1_START + SE1_DSEG * SE1_NSEG
SE1_RMAX = 10.0
SE1_SCALE = SE1_RMAX / 2.0 / 1e9
# Chebyshev coefficients (AU) of x, y, z; c0 carries half weight
SE1_COEFFICIENTS = (
    (3.0, 0.2, 0.01),
    (-2.0, 0.1, 0.0),
    (0.5, -0.05, 0.0),
)


def _encode(k: int) -> int:
    """Packed integer of coefficient multiple k (even: positive, odd: negative)."""
    return 2 * k if k >= 0 else 2 * -k - 1


def _se1_header(byteorder: str, body: int, lndx0: int, length: int) -> bytes:
    order = 'little' if byteorder == '<' else 'big'
    out = bytearray(b'SWISSEPH 2\r\nsepl_18.se1\r\nsynthetic test file\r\n')
    out += ENDIAN_TEST_WORD.to_bytes(4, order)
    out += length.to_bytes(4, order)
    out += (431).to_bytes(4, order)
    out += struct.pack(byteorder + '2d', SE1_START, SE1_END)
    out += (1).to_bytes(2, order)
    out += body.to_bytes(2, order)
    out += (0).to_bytes(4, order)  # CRC
    out += struct.pack(byteorder + '5d', 299792.458, 1.49597870691e11, 1.32712440017987e20,
                       81.30056, 0.004652)
    ncoe = len(SE1_COEFFICIENTS[0])
    out += lndx0.to_bytes(4, order)
    out += (0).to_bytes(1, order)  # no rotation, no reference ellipse
    out += ncoe.to_bytes(1, order)
    out += int(SE1_RMAX * 1000).to_bytes(4, order)
    out += struct.pack(
        byteorder + '10d', SE1_START, SE1_END, SE1_DSEG, SE1_START, 0, 0, 0, 0, 0, 0
    )
    return bytes(out)


def write_se1(path: Path, byteorder: str = '<', body: int = 4, bad_length: bool = False) -> Path:
    """Write a packed file with one body whose segments all hold SE1_COEFFICIENTS."""
    order = 'little' if byteorder == '<' else 'big'
    ncoe = len(SE1_COEFFICIENTS[0])
    lndx0 = len(_se1_header(byteorder, body, 0, 0))
    segment = bytearray()
    for coeffs in SE1_COEFFICIENTS:
        segment += bytes([ncoe * 16, 0])  # all coefficients as 4-byte integers
        for c in coeffs:
            segment += _encode(round(c / SE1_SCALE)).to_bytes(4, order)
    data_start = lndx0 + 3 * SE1_NSEG
    index = b''.join(
        (data_start + i * len(segment)).to_bytes(3, order) for i in range(SE1_NSEG)
    )
    length = data_start + SE1_NSEG * len(segment)
    header = _se1_header(byteorder, body, lndx0, length + (1 if bad_length else 0))
    path.write_bytes(header + index + bytes(segment) * SE1_NSEG)
    return path


# -- contexts ----------------------------------------------------------------


@pytest.fixture
def ctx() -> Iterator[EngineContext]:
    """Fresh context on the closed-form series, closed after the test."""
    context = EngineContext(ephe_path='')
    context.set_backend(BACKEND_SERIES)
    yield context
    context.close()


@pytest.fixture(params=['<', '>'], ids=['little', 'big'])
def byteorder(request: pytest.FixtureRequest) -> str:
    """Both file byte orders."""
    return request.param
