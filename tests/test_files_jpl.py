"""Tests for the JPL DE file reader on synthetic files in both byte orders."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from conftest import (
    JPL_AU_KM,
    JPL_DE_NUMBER,
    JPL_EMRAT,
    JPL_END,
    JPL_START,
    JPL_STEP,
    jpl_coefficients,
    write_jpl,
)
from ephemeris_engine.errors import CorruptHeader, DateOutOfRange, FileNotFoundEphemeris
from ephemeris_engine.files import jpl
from ephemeris_engine.files.jpl import JplFile


def test_header_fields(tmp_path: Path, byteorder: str) -> None:
    """Coverage, constants and DE number decode in either byte order."""

    handle = JplFile.open(str(write_jpl(tmp_path / 'de405.eph', byteorder)))
    try:
        assert handle.byteorder == byteorder
        assert handle.start == JPL_START
        assert handle.end == JPL_END
        assert handle.step == JPL_STEP
        assert handle.de_number == JPL_DE_NUMBER
        assert handle.au_km == pytest.approx(JPL_AU_KM)
        assert handle.emrat == pytest.approx(JPL_EMRAT)
        assert handle.constants['DENUM'] == JPL_DE_NUMBER
        assert handle.title.startswith('JPL synthetic DE405')
    finally:
        handle.close()


def test_state_at_record_midpoint(tmp_path: Path, byteorder: str) -> None:
    """At the middle of a record the position is c0 and the rate c1 * 2 / step."""

    handle = JplFile.open(str(write_jpl(tmp_path / 'de405.eph', byteorder)))
    et = JPL_START + JPL_STEP * 1.5
    state = handle.state(et, jpl.J_MARS)
    handle.close()
    block = jpl.J_MARS
    for comp in range(3):
        c0, c1 = jpl_coefficients(block, comp)
        assert state[comp] == pytest.approx(c0 / JPL_AU_KM, rel=1e-12)
        assert state[3 + comp] == pytest.approx(c1 * 2.0 / JPL_STEP / JPL_AU_KM, rel=1e-12)


def test_earth_from_emb_and_moon(tmp_path: Path) -> None:
    """The Earth is the EMB minus the geocentric Moon scaled by 1/(1+EMRAT)."""

    handle = JplFile.open(str(write_jpl(tmp_path / 'de405.eph')))
    et = JPL_START + 10.0
    emb = handle.state(et, jpl.J_EMB)
    geomoon = handle.pleph(et, jpl.J_MOON, jpl.J_EARTH)
    earth = handle.state(et, jpl.J_EARTH)
    moon = handle.state(et, jpl.J_MOON)
    handle.close()
    np.testing.assert_allclose(earth, emb - geomoon / (1.0 + JPL_EMRAT), rtol=1e-12)
    np.testing.assert_allclose(moon - earth, geomoon, rtol=1e-12)


def test_nutation_block(tmp_path: Path) -> None:
    """Nutation angles come from the two-component block."""

    handle = JplFile.open(str(write_jpl(tmp_path / 'de405.eph')))
    dpsi, deps = handle.nutation(JPL_START + 40.0)
    handle.close()
    assert dpsi == pytest.approx(1e-5)
    assert deps == pytest.approx(2e-5)


def test_solar_system_barycenter_is_origin(tmp_path: Path) -> None:
    handle = JplFile.open(str(write_jpl(tmp_path / 'de405.eph')))
    assert not handle.state(JPL_START + 1.0, jpl.J_SBARY).any()
    handle.close()


def test_date_out_of_range(tmp_path: Path) -> None:
    handle = JplFile.open(str(write_jpl(tmp_path / 'de405.eph')))
    with pytest.raises(DateOutOfRange):
        handle.state(JPL_END + 1.0, jpl.J_MARS)
    with pytest.raises(DateOutOfRange):
        handle.state(JPL_START - 1.0, jpl.J_MARS)
    handle.close()


def test_mutilated_file(tmp_path: Path) -> None:
    """A file whose length disagrees with its header is rejected."""

    path = write_jpl(tmp_path / 'de405.eph', truncate=100)
    with pytest.raises(CorruptHeader):
        JplFile.open(str(path))


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundEphemeris):
        JplFile.open(str(tmp_path / 'nope.eph'))
