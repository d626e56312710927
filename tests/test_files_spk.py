"""Tests for the SPICE SPK backend with the cspyce kernel pool patched out."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from ephemeris_engine.constants import AUNIT, BACKEND_SPK, J2000, MARS, SECONDS_PER_DAY
from ephemeris_engine.context import EngineContext
from ephemeris_engine.errors import BodyNotInFile, DateOutOfRange, FileNotFoundEphemeris
from ephemeris_engine.files import spk
from ephemeris_engine.files.spk import SpkBackend
from ephemeris_engine.sources import source_for

KM_PER_AU = AUNIT / 1000.0


def _fake_spkssb(naif_id: int, et: float, frame: str) -> list[float]:
    if naif_id == 999:
        raise RuntimeError('SPICE(SPKINSUFFDATA) -- Insufficient ephemeris data')
    if naif_id == 12345:
        raise RuntimeError('SPICE(IDCODENOTFOUND)')
    assert frame == 'J2000'
    return [KM_PER_AU, 2 * KM_PER_AU, et, 1.0, 0.0, 0.0]


def test_state_units(monkeypatch: pytest.MonkeyPatch) -> None:
    """Kilometres become AU and km/s become AU/day; the epoch becomes ET seconds."""

    loaded: list[str] = []
    monkeypatch.setattr('cspyce.furnsh', loaded.append)
    monkeypatch.setattr('cspyce.spkssb', _fake_spkssb)
    backend = SpkBackend.open('de440.bsp')
    assert loaded == ['de440.bsp']
    state = backend.state(spk.NAIF_EARTH, J2000 + 1.0)
    assert state[0] == pytest.approx(1.0)
    assert state[1] == pytest.approx(2.0)
    assert state[2] == pytest.approx(SECONDS_PER_DAY / KM_PER_AU)
    assert state[3] == pytest.approx(SECONDS_PER_DAY / KM_PER_AU)
    assert not backend.state(spk.NAIF_SSB, J2000).any()


def test_lookup_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr('cspyce.furnsh', lambda path: None)
    monkeypatch.setattr('cspyce.spkssb', _fake_spkssb)
    backend = SpkBackend.open('de440.bsp')
    with pytest.raises(DateOutOfRange):
        backend.state(999, J2000)
    with pytest.raises(BodyNotInFile):
        backend.state(12345, J2000)


def test_unloadable_kernel(monkeypatch: pytest.MonkeyPatch) -> None:
    def furnsh(path: str) -> None:
        raise OSError('SPICE(NOSUCHFILE)')

    monkeypatch.setattr('cspyce.furnsh', furnsh)
    with pytest.raises(FileNotFoundEphemeris):
        SpkBackend.open('missing.bsp')


def test_close_unloads_once(monkeypatch: pytest.MonkeyPatch) -> None:
    unloaded: list[str] = []
    monkeypatch.setattr('cspyce.furnsh', lambda path: None)
    monkeypatch.setattr('cspyce.unload', unloaded.append)
    backend = SpkBackend.open('de440.bsp')
    backend.close()
    backend.close()
    assert unloaded == ['de440.bsp']


def test_context_owns_kernel(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """The SPK backend resolves its kernel on the path and the context closes it."""

    kernel = tmp_path / 'de440.bsp'
    kernel.touch()
    unloaded: list[str] = []
    monkeypatch.setattr('cspyce.furnsh', lambda path: None)
    monkeypatch.setattr('cspyce.unload', unloaded.append)
    monkeypatch.setattr('cspyce.spkssb', _fake_spkssb)
    ctx = EngineContext(ephe_path=str(tmp_path))
    ctx.set_jpl_file('de440.bsp')
    state = source_for(MARS, BACKEND_SPK, ctx).state(J2000)
    np.testing.assert_allclose(state[:2], [1.0, 2.0])
    ctx.close()
    assert unloaded == [str(kernel)]
