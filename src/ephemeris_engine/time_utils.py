"""Time scale conversion: calendar dates, UTC, UT1 and TT via rms-julian and Delta-T."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import julian

from ephemeris_engine.config import get_leapsecs_path
from ephemeris_engine.constants import J2000, JD_AT_DAY0, SECONDS_PER_DAY
from ephemeris_engine.epoch import TT, UT, Epoch

if TYPE_CHECKING:
    from ephemeris_engine.context import EngineContext

logger = logging.getLogger(__name__)

# First year with leap-second UTC; earlier civil times are taken as UT1.
FIRST_LEAP_SECOND_YEAR = 1972

# Leap seconds loaded once at first use.
_leapsecs_loaded = False


def _ensure_leapsecs() -> None:
    """Load the leap seconds kernel for rms-julian if not already loaded.

    Falls back to rms-julian's bundled LSK when no file is configured or the
    configured file cannot be read.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    julian.set_ut_model('SPICE')
    path = get_leapsecs_path()
    if path is not None:
        try:
            julian.load_lsk(path)
            _leapsecs_loaded = True
            return
        except (OSError, KeyError, ValueError) as e:
            logger.info('Leap seconds from %s not used (%s); using rms-julian bundled LSK.', path, e)
    julian.load_lsk()
    _leapsecs_loaded = True


def tdb_minus_tt(jd: float) -> float:
    """Periodic TDB - TT difference in seconds (Fairhead & Bretagnon, two terms)."""
    g = math.radians(357.53 + 0.98560028 * (jd - J2000))
    return 0.001657 * math.sin(g) + 0.000014 * math.sin(2.0 * g)


def julday(year: int, month: int, day: int, hour: float = 0.0) -> float:
    """Julian day of a calendar date (Julian calendar before the Gregorian reform).

    Parameters:
        year, month, day: Calendar date.
        hour: Decimal hours since midnight.

    Returns:
        Julian day number.
    """
    return JD_AT_DAY0 + int(julian.day_from_ymd(year, month, day)) + hour / 24.0


def revjul(jd: float) -> tuple[int, int, int, float]:
    """Calendar date and decimal hour of a Julian day (inverse of julday).

    Parameters:
        jd: Julian day number.

    Returns:
        (year, month, day, hour).
    """
    offset = jd - JD_AT_DAY0
    day = math.floor(offset)
    y, m, d = julian.ymd_from_day(day)
    return (int(y), int(m), int(d), (offset - day) * 24.0)


def delta_t(jd_ut: float, ctx: EngineContext) -> float:
    """Delta-T in days for the context's model, tidal acceleration and override."""
    return ctx.delta_t(jd_ut)


def to_tt(epoch: Epoch, ctx: EngineContext) -> Epoch:
    """Convert an epoch to Terrestrial Time.

    Parameters:
        epoch: Input epoch (UT or TT).
        ctx: Engine context supplying the Delta-T model.

    Returns:
        Epoch in TT; TT input is returned unchanged.
    """
    if epoch.scale == TT:
        return epoch
    return Epoch(epoch.jd + ctx.delta_t(epoch.jd), TT)


def to_ut(epoch: Epoch, ctx: EngineContext) -> Epoch:
    """Convert an epoch to Universal Time (UT1).

    Delta-T is a function of UT, so the inversion iterates until the
    round trip through to_tt reproduces the input.

    Parameters:
        epoch: Input epoch (UT or TT).
        ctx: Engine context supplying the Delta-T model.

    Returns:
        Epoch in UT; UT input is returned unchanged.
    """
    if epoch.scale == UT:
        return epoch
    jd_ut = epoch.jd - ctx.delta_t(epoch.jd)
    for _ in range(4):
        jd_next = epoch.jd - ctx.delta_t(jd_ut)
        if abs(jd_next - jd_ut) < 1e-12:
            jd_ut = jd_next
            break
        jd_ut = jd_next
    return Epoch(jd_ut, UT)


def utc_to_jd(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: float,
    ctx: EngineContext,
) -> tuple[float, float]:
    """Convert a UTC calendar instant to (TT, UT1) Julian days.

    From 1972 on, leap seconds are applied through rms-julian and UT1 is
    derived from TT with Delta-T. Before 1972 the input is taken as UT1 and
    TT is derived from it, so Delta-T is applied exactly once either way.

    Parameters:
        year, month, day, hour, minute, second: UTC calendar instant.
        ctx: Engine context supplying the Delta-T model.

    Returns:
        (jd_tt, jd_ut1).
    """
    sec = hour * 3600.0 + minute * 60.0 + second
    if year < FIRST_LEAP_SECOND_YEAR:
        jd_ut = julday(year, month, day) + sec / SECONDS_PER_DAY
        return (to_tt(Epoch.ut(jd_ut), ctx).jd, jd_ut)
    _ensure_leapsecs()
    day_num = int(julian.day_from_ymd(year, month, day))
    tai = float(julian.tai_from_day_sec(day_num, sec))
    tdb = float(julian.tdb_from_tai(tai))
    jd_tdb = J2000 + tdb / SECONDS_PER_DAY
    jd_tt = jd_tdb - tdb_minus_tt(jd_tdb) / SECONDS_PER_DAY
    return (jd_tt, to_ut(Epoch.tt(jd_tt), ctx).jd)


def jd_to_utc(jd_tt: float) -> tuple[int, int, int, int, int, float]:
    """Convert a TT Julian day to a UTC calendar instant (inverse of utc_to_jd).

    Parameters:
        jd_tt: Julian day in TT (only used from 1972 on).

    Returns:
        (year, month, day, hour, minute, second).
    """
    _ensure_leapsecs()
    tdb = (jd_tt - J2000) * SECONDS_PER_DAY + tdb_minus_tt(jd_tt)
    tai = float(julian.tai_from_tdb(tdb))
    day_num, sec = julian.day_sec_from_tai(tai)
    y, m, d = julian.ymd_from_day(int(day_num))
    h, mi, s = julian.hms_from_sec(float(sec))
    return (int(y), int(m), int(d), int(h), int(mi), float(s))


def format_jd(jd: float) -> str:
    """Format a Julian day as 'YYYY-MM-DD HH:MM:SS.s' (no time scale conversion)."""
    y, m, d, hour = revjul(jd)
    total = round(hour * 3600.0, 1)
    if total >= SECONDS_PER_DAY:
        y, m, d, _ = revjul(jd + 0.5 / SECONDS_PER_DAY)
        total = 0.0
    h = int(total // 3600)
    mi = int((total - h * 3600) // 60)
    s = total - h * 3600 - mi * 60
    return f'{y:04d}-{m:02d}-{d:02d} {h:02d}:{mi:02d}:{s:04.1f}'


def parse_date(string: str, ctx: EngineContext) -> Epoch:
    """Parse a UTC date/time string (any format rms-julian accepts) into a UT epoch.

    Parameters:
        string: Date/time string, e.g. '2024-04-08T18:00' or '2024-04-08 18:00:00Z'.
        ctx: Engine context supplying the Delta-T model.

    Raises:
        ValueError: The string cannot be parsed.
    """
    _ensure_leapsecs()
    stripped = string.strip()
    if stripped.endswith(('Z', 'z')):
        stripped = stripped[:-1]
    try:
        day, sec = julian.day_sec_from_string(stripped)[:2]
    except (ValueError, TypeError, LookupError, OSError) as e:
        raise ValueError(f'Unrecognized date {string!r}') from e
    y, m, d = julian.ymd_from_day(int(day))
    h, mi, s = julian.hms_from_sec(float(sec))
    _, jd_ut = utc_to_jd(int(y), int(m), int(d), int(h), int(mi), float(s), ctx)
    return Epoch.ut(jd_ut)
