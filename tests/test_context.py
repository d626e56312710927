"""Tests for EngineContext setters, the state cache and file ownership."""

from __future__ import annotations

import numpy as np
import pytest

from ephemeris_engine import context as context_module
from ephemeris_engine.constants import (
    BACKEND_JPL,
    BACKEND_SERIES,
    DELTAT_OVERRIDE,
    DELTAT_TABLE,
    FICT_OFFSET,
    SIDM_LAHIRI,
    TIDAL_DE200,
    TIDAL_DEFAULT,
)
from ephemeris_engine.context import EngineContext, StateCache, get_context, reset_context
from ephemeris_engine.series.kepler import OrbitalElements


class _Handle:
    def __init__(self, path: str) -> None:
        self.path = path
        self.closed = False
        self.de_number = 200

    def close(self) -> None:
        self.closed = True


def test_cache_copies_values() -> None:
    cache = StateCache()
    value = np.arange(6, dtype=np.float64)
    cache.put('k', value)
    value[0] = 99.0
    first = cache.get('k')
    assert first is not None
    assert first[0] == 0.0
    first[1] = 99.0
    second = cache.get('k')
    assert second is not None
    assert second[1] == 1.0
    assert cache.get('missing') is None
    assert (cache.hits, cache.misses) == (2, 1)


def test_cache_evicts_least_recently_used() -> None:
    cache = StateCache(maxsize=2)
    cache.put('a', np.zeros(6))
    cache.put('b', np.ones(6))
    cache.get('a')
    cache.put('c', np.ones(6))
    assert len(cache) == 2
    assert cache.get('b') is None
    assert cache.get('a') is not None


@pytest.mark.parametrize(
    'change',
    [
        lambda c: c.set_ephe_path('/elsewhere'),
        lambda c: c.set_backend(BACKEND_SERIES),
        lambda c: c.set_sidereal_mode(SIDM_LAHIRI),
        lambda c: c.set_tid_acc(TIDAL_DE200),
        lambda c: c.set_delta_t_model(DELTAT_TABLE),
        lambda c: c.set_models(nutation='short'),
        lambda c: c.set_topo(10.0, 50.0),
        lambda c: c.set_jpl_file('de440.eph'),
        lambda c: c.set_delta_t_userdef(0.0008),
        lambda c: c.register_elements(OrbitalElements(2451545.0, 2.0, 0.1, 1.0, 2.0, 3.0, 4.0)),
    ],
)
def test_setters_clear_cache(change) -> None:
    ctx = EngineContext(ephe_path='')
    ctx.cache.put('k', np.zeros(6))
    change(ctx)
    assert len(ctx.cache) == 0


def test_set_backend_rejects_unknown() -> None:
    ctx = EngineContext(ephe_path='')
    with pytest.raises(ValueError):
        ctx.set_backend('astrolabe')


def test_delta_t_override() -> None:
    ctx = EngineContext(ephe_path='')
    ctx.set_delta_t_userdef(0.001)
    assert ctx.delta_t_model == DELTAT_OVERRIDE
    assert ctx.delta_t(2451545.0) == 0.001
    ctx.set_delta_t_userdef(None)
    assert ctx.delta_t_model == DELTAT_TABLE


def test_tidal_acceleration_follows_jpl_file() -> None:
    ctx = EngineContext(ephe_path='')
    assert ctx.tidal_acceleration() == TIDAL_DEFAULT
    ctx.set_backend(BACKEND_JPL)
    ctx.get_file('/x/de200.eph', _Handle)
    assert ctx.tidal_acceleration() == TIDAL_DE200
    ctx.set_tid_acc(-25.0)
    assert ctx.tidal_acceleration() == -25.0


def test_files_opened_once_and_closed() -> None:
    ctx = EngineContext(ephe_path='')
    opened: list[str] = []

    def opener(path: str) -> _Handle:
        opened.append(path)
        return _Handle(path)

    first = ctx.get_file('/x/a.se1', opener)
    assert ctx.get_file('/x/a.se1', opener) is first
    assert opened == ['/x/a.se1']
    assert ctx.open_files() == ['/x/a.se1']
    ctx.close()
    assert first.closed
    assert ctx.open_files() == []


def test_register_elements_numbers() -> None:
    ctx = EngineContext(ephe_path='')
    elements = OrbitalElements(2451545.0, 2.7, 0.08, 10.6, 80.3, 73.6, 95.9, name='Ceres-like')
    first = ctx.register_elements(elements)
    second = ctx.register_elements(elements)
    assert first == FICT_OFFSET
    assert second == FICT_OFFSET + 1
    assert ctx.user_bodies[first] is elements


def test_default_context(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(context_module, '_default_context', None)
    ctx = get_context()
    assert get_context() is ctx
    fresh = reset_context()
    assert fresh is not ctx
    assert get_context() is fresh
