"""Ephemeris engine: body positions from binary ephemeris files and series, plus event searches.

Public entry points:
    calc / calc_ut: position of a body at an instant (see pipeline).
    compute_orbital_elements: osculating heliocentric elements.
    nod_aps / nod_aps_ut: nodes and apsides of planetary and lunar orbits.
    pheno / pheno_ut: phase, elongation, apparent diameter and magnitude.
    find_event: eclipses, rise/set, longitude and node crossings.
    EngineContext / get_context: explicit process configuration.
"""

from __future__ import annotations

from ephemeris_engine.context import EngineContext, get_context
from ephemeris_engine.elements import (
    NodesApsidesResult,
    compute_orbital_elements,
    nod_aps,
    nod_aps_ut,
)
from ephemeris_engine.epoch import Epoch
from ephemeris_engine.phenomena import PhenoResult, pheno, pheno_ut
from ephemeris_engine.pipeline import CalcResult, calc, calc_ut, compute_position
from ephemeris_engine.search.events import EventResult, find_event

__all__ = [
    'CalcResult',
    'EngineContext',
    'Epoch',
    'EventResult',
    'NodesApsidesResult',
    'PhenoResult',
    'calc',
    'calc_ut',
    'compute_orbital_elements',
    'compute_position',
    'find_event',
    'get_context',
    'nod_aps',
    'nod_aps_ut',
    'pheno',
    'pheno_ut',
]

__version__ = '0.1.0'
