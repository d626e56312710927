"""Packed ephemeris file names and lookup along the ephemeris search path.

Planet, Moon and main-asteroid files each cover 600 years and are named
after the first century they contain: ``sepl_18.se1`` holds 1800..2399,
``seplm06.se1`` holds 600 BC..1 BC. Numbered minor planets have one file
each under ``astN/`` where N is the number divided by 1000.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

from ephemeris_engine.config import split_ephe_path
from ephemeris_engine.constants import AST_OFFSET
from ephemeris_engine.errors import FileNotFoundEphemeris
from ephemeris_engine.time_utils import revjul

logger = logging.getLogger(__name__)

# Internal body indices of packed files
SEI_EMB = 0
SEI_EARTH = 0
SEI_SUN = 0
SEI_MOON = 1
SEI_MERCURY = 2
SEI_VENUS = 3
SEI_MARS = 4
SEI_JUPITER = 5
SEI_SATURN = 6
SEI_URANUS = 7
SEI_NEPTUNE = 8
SEI_PLUTO = 9
SEI_SUNBARY = 10
SEI_ANYBODY = 13
SEI_CHIRON = 14
SEI_PHOLUS = 15
SEI_CERES = 16
SEI_PALLAS = 17
SEI_JUNO = 18
SEI_VESTA = 19

CENTURIES_PER_FILE = 6
FILE_SUFFIX = 'se1'

_PLANET_FILE_BODIES = (
    SEI_EMB,
    SEI_MERCURY,
    SEI_VENUS,
    SEI_MARS,
    SEI_JUPITER,
    SEI_SATURN,
    SEI_URANUS,
    SEI_NEPTUNE,
    SEI_PLUTO,
    SEI_SUNBARY,
)
_ASTEROID_FILE_BODIES = (SEI_CHIRON, SEI_PHOLUS, SEI_CERES, SEI_PALLAS, SEI_JUNO, SEI_VESTA)


def file_century(tjd: float) -> int:
    """First century of the 600-year file containing tjd (negative for BC)."""
    year = revjul(tjd)[0]
    icty = math.trunc(year / 100)
    if year < 0 and year % 100 != 0:
        icty -= 1
    while icty % CENTURIES_PER_FILE != 0:
        icty -= 1
    return icty


def gen_filename(tjd: float, ipli: int) -> str:
    """File name holding internal body ipli at tjd.

    Parameters:
        tjd: Julian day.
        ipli: SEI_* index, or AST_OFFSET + n for numbered minor planet n.

    Returns:
        Relative file name, e.g. 'sepl_18.se1' or 'ast0/se00433.se1'.
    """
    if ipli > AST_OFFSET:
        num = ipli - AST_OFFSET
        if num > 99999:
            return f'ast{num // 1000}/s{num:06d}.{FILE_SUFFIX}'
        return f'ast{num // 1000}/se{num:05d}.{FILE_SUFFIX}'
    if ipli == SEI_MOON:
        prefix = 'semo'
    elif ipli in _ASTEROID_FILE_BODIES:
        prefix = 'seas'
    else:
        prefix = 'sepl'
    icty = file_century(tjd)
    if icty < 0:
        return f'{prefix}m{abs(icty):02d}.{FILE_SUFFIX}'
    return f'{prefix}_{icty:02d}.{FILE_SUFFIX}'


def find_file(name: str, ephe_path: str | None = None) -> Path:
    """Locate a file along the ephemeris search path.

    Parameters:
        name: Relative file name.
        ephe_path: Search path string; None uses the EPHE_PATH default.

    Returns:
        Path of the first match.

    Raises:
        FileNotFoundEphemeris: No directory on the path holds the file.
    """
    dirs = split_ephe_path(ephe_path)
    for base in dirs:
        candidate = base / name
        if candidate.is_file():
            return candidate
    searched = ', '.join(str(d) for d in dirs) or '(empty path)'
    raise FileNotFoundEphemeris(f'{name} not found in ephemeris path: {searched}')
