"""Configuration: ephemeris search path and default file names from environment."""

import os
from pathlib import Path

# Env var overrides with sensible defaults.
DEFAULT_EPHE_PATH = './ephe:/usr/share/ephe'
DEFAULT_JPL_FILE = 'de441.eph'


def get_ephe_path() -> str:
    """Return the ephemeris file search path (EPHE_PATH env var or default).

    Returns:
        Path string; several directories are separated by os.pathsep.
    """
    return os.environ.get('EPHE_PATH', DEFAULT_EPHE_PATH)


def split_ephe_path(path: str | None = None) -> list[Path]:
    """Split an ephemeris search path into its directories.

    Parameters:
        path: Search path string; None uses get_ephe_path().

    Returns:
        List of directories in search order (empty entries dropped).
    """
    if path is None:
        path = get_ephe_path()
    # Accept ';' too so Windows-style paths from config files work anywhere.
    parts = path.replace(';', os.pathsep).split(os.pathsep)
    return [Path(p) for p in parts if p.strip()]


def get_jpl_file() -> str:
    """Return the default JPL ephemeris file name (EPHEMERIS_ENGINE_JPL_FILE or default).

    Returns:
        File name, resolved against the ephemeris path when opened.
    """
    return os.environ.get('EPHEMERIS_ENGINE_JPL_FILE', DEFAULT_JPL_FILE)


def get_leapsecs_path() -> str | None:
    """Return path to a NAIF LSK leap seconds file for rms-julian, if configured.

    Prefers JULIAN_LEAPSECS, then a .tls file in the first ephemeris directory
    that has one.

    Returns:
        Path string, or None to use the rms-julian bundled LSK.
    """
    path = os.environ.get('JULIAN_LEAPSECS', '').strip()
    if path:
        return path
    for base in split_ephe_path():
        for name in ('naif0012.tls', 'naif0011.tls', 'leapseconds.tls'):
            p = base / name
            if p.exists():
                return str(p)
    return None
