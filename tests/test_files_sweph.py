"""Tests for packed SE1 files: coefficient unpacking, headers and segment evaluation."""

from __future__ import annotations

import io
from pathlib import Path

import numpy as np
import pytest

from conftest import SE1_COEFFICIENTS, SE1_DSEG, SE1_END, SE1_SCALE, SE1_START, write_se1
from ephemeris_engine.errors import BodyNotInFile, CorruptHeader, DateOutOfRange
from ephemeris_engine.files.chebyshev import Segment, echeb, edcheb, evaluate
from ephemeris_engine.files.filenames import SEI_MARS, SEI_VENUS
from ephemeris_engine.files.sweph import SwephFile, unpack_coefficients


def test_unpack_four_byte_values() -> None:
    """Even integers are positive, odd ones negative."""

    raw = (20).to_bytes(4, 'little') + (7).to_bytes(4, 'little')
    values = unpack_coefficients(io.BytesIO(raw).read, [2, 0, 0, 0], 2.0)
    assert values == pytest.approx([10 * 1e-9, -4 * 1e-9])


def test_unpack_big_endian() -> None:
    raw = (20).to_bytes(4, 'big')
    values = unpack_coefficients(io.BytesIO(raw).read, [1, 0, 0, 0], 2.0, 'big')
    assert values == pytest.approx([10 * 1e-9])


def test_unpack_half_and_quarter_bytes() -> None:
    """Half-byte pairs and quarter-byte quadruples share one byte each."""

    half = unpack_coefficients(io.BytesIO(bytes([0x65])).read, [0, 0, 0, 0, 2, 0], 2.0)
    assert half == pytest.approx([3e-9, -3e-9])
    quarter = unpack_coefficients(io.BytesIO(bytes([0x9C])).read, [0, 0, 0, 0, 0, 4], 2.0)
    assert quarter == pytest.approx([1e-9, -1e-9, -2e-9, 0.0])


def test_unpack_mixed_widths() -> None:
    raw = (4).to_bytes(3, 'little') + (3).to_bytes(1, 'little')
    values = unpack_coefficients(io.BytesIO(raw).read, [0, 1, 0, 1], 2.0)
    assert values == pytest.approx([2e-9, -2e-9])


def test_unpack_keeps_operation_order() -> None:
    """Values are bit-identical to the file format's scaling order."""

    rmax = 1.5237
    raw = (123456788).to_bytes(4, 'little') + (987654321).to_bytes(4, 'little') + bytes([0x9C])
    values = unpack_coefficients(io.BytesIO(raw).read, [2, 0, 0, 0, 0, 2], rmax)
    assert values[0] == 61728394 / 1e9 * rmax / 2.0
    assert values[1] == -(493827161 / 1e9 * rmax / 2.0)
    assert values[2] == 1 * rmax / 2.0 / 1e9
    assert values[3] == -(1 * rmax / 2.0 / 1e9)


def test_chebyshev_series_and_derivative() -> None:
    """T0/2 + T1 + T2 at x = 0.5 and its derivative 1 + 4x."""

    coef = [2.0, 1.0, 1.0]
    assert echeb(0.5, coef, 3) == pytest.approx(1.0 + 0.5 + (2 * 0.25 - 1.0))
    assert edcheb(0.5, coef, 3) == pytest.approx(1.0 + 4 * 0.5)


def test_segment_evaluation_scales_rate() -> None:
    segment = Segment(0, 10.0, 14.0, np.array([[0.0, 1.0]]), 2, c0_halved=False)
    out = evaluate(segment, 13.0)
    assert out[0] == pytest.approx(0.5)
    assert out[1] == pytest.approx(0.5)


def test_header(tmp_path: Path, byteorder: str) -> None:
    handle = SwephFile.open(str(write_se1(tmp_path / 'sepl_18.se1', byteorder)))
    try:
        assert handle.byteorder == ('little' if byteorder == '<' else 'big')
        assert handle.de_number == 431
        assert handle.start == SE1_START
        assert handle.end == SE1_END
        assert handle.body_ids == [SEI_MARS]
        assert handle.has_body(SEI_MARS)
        assert handle.body(SEI_MARS).nndx == 4
    finally:
        handle.close()


def test_state_at_segment_midpoint(tmp_path: Path, byteorder: str) -> None:
    """Packed series carry half-weight c0: position c0/2 - c2, rate c1 * 2 / dseg."""

    handle = SwephFile.open(str(write_se1(tmp_path / 'sepl_18.se1', byteorder)))
    tjd = SE1_START + 2.5 * SE1_DSEG
    state = handle.state(SEI_MARS, tjd)
    handle.close()
    for comp, (c0, c1, c2) in enumerate(SE1_COEFFICIENTS):
        assert state[comp] == pytest.approx(c0 / 2.0 - c2, abs=2 * SE1_SCALE)
        assert state[3 + comp] == pytest.approx(c1 * 2.0 / SE1_DSEG, abs=1e-8)


def test_last_instant_uses_last_segment(tmp_path: Path) -> None:
    handle = SwephFile.open(str(write_se1(tmp_path / 'sepl_18.se1')))
    state = handle.state(SEI_MARS, SE1_END)
    handle.close()
    c0, c1, c2 = SE1_COEFFICIENTS[0]
    assert state[0] == pytest.approx(c0 / 2.0 + c1 + c2, abs=2 * SE1_SCALE)


def test_errors(tmp_path: Path) -> None:
    handle = SwephFile.open(str(write_se1(tmp_path / 'sepl_18.se1')))
    with pytest.raises(BodyNotInFile):
        handle.state(SEI_VENUS, SE1_START + 1.0)
    with pytest.raises(DateOutOfRange):
        handle.state(SEI_MARS, SE1_END + 1.0)
    handle.close()


def test_length_mismatch_is_corrupt(tmp_path: Path) -> None:
    path = write_se1(tmp_path / 'sepl_18.se1', bad_length=True)
    with pytest.raises(CorruptHeader):
        SwephFile.open(str(path))


def test_bad_endian_word(tmp_path: Path) -> None:
    path = write_se1(tmp_path / 'sepl_18.se1')
    data = bytearray(path.read_bytes())
    marker = data.index(b'\r\n', data.index(b'synthetic')) + 2
    data[marker : marker + 4] = b'\xff\xff\xff\xff'
    path.write_bytes(bytes(data))
    with pytest.raises(CorruptHeader):
        SwephFile.open(str(path))
