"""Delta-T (TT - UT1) models: observation table, polynomial fits, user override.

Three models are available:

``table``
    Yearly values 1620..2028 (observed through 2023, extrapolated after)
    interpolated with a fourth-order Bessel formula. Before the table the
    Stephenson-Morrison-Hohenkerk (2016) spline is used back to -720 and
    their long-term parabola before that; the spline is blended into the
    table over 1600..1620. After the table a parabola with the long-term
    tidal acceleration continues the last tabulated value and slope. A
    warning is logged the first time a date outside the table is requested.

``polynomial``
    The Espenak-Meeus piecewise polynomials, defined for all of history.

``override``
    A constant supplied by the caller.

All models return days. The values for dates before 1955 are adjusted for
the lunar tidal acceleration of the ephemeris in use.
"""

from __future__ import annotations

import logging

from ephemeris_engine.constants import (
    DELTAT_OVERRIDE,
    DELTAT_POLYNOMIAL,
    DELTAT_TABLE,
    SECONDS_PER_DAY,
    TIDAL_DEFAULT,
)

logger = logging.getLogger(__name__)

TABLE_START = 1620
TABLE_END = 2028  # last tabulated year

# Delta-T at the start of each year 1620 .. 2028, in units of 0.01 s.
_DT_YEARLY = (
    # 1620 - 1659
    12400, 11900, 11500, 11000, 10600, 10200, 9800, 9500, 9100, 8800,
    8500, 8200, 7900, 7700, 7400, 7200, 7000, 6700, 6500, 6300,
    6200, 6000, 5800, 5700, 5500, 5400, 5300, 5100, 5000, 4900,
    4800, 4700, 4600, 4500, 4400, 4300, 4200, 4100, 4000, 3800,
    # 1660 - 1699
    3700, 3600, 3500, 3400, 3300, 3200, 3100, 3000, 2800, 2700,
    2600, 2500, 2400, 2300, 2200, 2100, 2000, 1900, 1800, 1700,
    1600, 1500, 1400, 1400, 1300, 1200, 1200, 1100, 1100, 1000,
    1000, 1000, 900, 900, 900, 900, 900, 900, 900, 900,
    # 1700 - 1739
    900, 900, 900, 900, 900, 900, 900, 900, 1000, 1000,
    1000, 1000, 1000, 1000, 1000, 1000, 1000, 1100, 1100, 1100,
    1100, 1100, 1100, 1100, 1100, 1100, 1100, 1100, 1100, 1100,
    1100, 1100, 1100, 1100, 1200, 1200, 1200, 1200, 1200, 1200,
    # 1740 - 1779
    1200, 1200, 1200, 1200, 1300, 1300, 1300, 1300, 1300, 1300,
    1300, 1400, 1400, 1400, 1400, 1400, 1400, 1400, 1500, 1500,
    1500, 1500, 1500, 1500, 1500, 1600, 1600, 1600, 1600, 1600,
    1600, 1600, 1600, 1600, 1600, 1700, 1700, 1700, 1700, 1700,
    # 1780 - 1819
    1700, 1700, 1700, 1700, 1700, 1700, 1700, 1700, 1700, 1700,
    1700, 1700, 1600, 1600, 1600, 1600, 1500, 1500, 1400, 1400,
    1370, 1340, 1310, 1290, 1270, 1260, 1250, 1250, 1250, 1250,
    1250, 1250, 1250, 1250, 1250, 1250, 1250, 1240, 1230, 1220,
    # 1820 - 1859
    1200, 1170, 1140, 1110, 1060, 1020, 960, 910, 860, 800,
    750, 700, 660, 630, 600, 580, 570, 560, 560, 560,
    570, 580, 590, 610, 620, 630, 650, 660, 680, 690,
    710, 720, 730, 740, 750, 760, 770, 770, 780, 780,
    # 1860 - 1899
    788, 782, 754, 697, 640, 602, 541, 410, 292, 182,
    161, 10, -102, -128, -269, -324, -364, -454, -471, -511,
    -540, -542, -520, -546, -546, -579, -563, -564, -580, -566,
    -587, -601, -619, -664, -644, -647, -609, -576, -466, -374,
    # 1900 - 1939
    -272, -154, -2, 124, 264, 386, 537, 614, 775, 913,
    1046, 1153, 1336, 1465, 1601, 1720, 1824, 1906, 2025, 2095,
    2116, 2225, 2241, 2303, 2349, 2362, 2386, 2449, 2434, 2408,
    2402, 2400, 2387, 2395, 2386, 2393, 2373, 2392, 2396, 2402,
    # 1940 - 1979
    2433, 2483, 2530, 2570, 2624, 2677, 2728, 2778, 2825, 2871,
    2915, 2957, 2997, 3036, 3072, 3107, 3135, 3168, 3218, 3268,
    3315, 3359, 3400, 3447, 3503, 3573, 3654, 3743, 3829, 3920,
    4018, 4117, 4223, 4337, 4449, 4548, 4646, 4752, 4853, 4959,
    # 1980 - 2019
    5054, 5138, 5217, 5296, 5379, 5434, 5487, 5532, 5582, 5630,
    5686, 5757, 5831, 5912, 5998, 6078, 6163, 6229, 6297, 6347,
    6383, 6409, 6430, 6447, 6457, 6469, 6485, 6515, 6546, 6578,
    6607, 6632, 6660, 6691, 6728, 6764, 6810, 6859, 6897, 6922,
    # 2020 - 2028
    6936, 6936, 6929, 6920, 6917, 6915, 6915, 6920, 6925,
)

# Stephenson, Morrison & Hohenkerk (2016) cubic spline segments before the
# table: (first year, last year, a, b, c, d) with
# dt = a + b*t + c*t^2 + d*t^3 and t the fraction of the segment.
_SPLINE_2016 = (
    (-720.0, 400.0, 20550.593, -21268.478, 11863.418, -4541.129),
    (400.0, 1000.0, 6604.404, -5981.266, -505.093, 1349.609),
    (1000.0, 1500.0, 1467.654, -2452.187, 2460.927, -1183.759),
    (1500.0, 1600.0, 292.635, -216.322, -43.614, 56.681),
    (1600.0, 1650.0, 89.380, -66.754, 31.607, -10.497),
)

# Years over which the spline is blended into the first table value.
_BLEND_START = 1600.0

# Long-term tidal acceleration of the rotation, 32.5 s/cy^2, per year^2.
_LONG_TERM_ACCEL = 32.5e-4

_warned_eras: set[str] = set()


def year_from_jd(jd: float) -> float:
    """Decimal year for a Julian day (Julian-year approximation)."""
    return 2000.0 + (jd - 2451544.5) / 365.25


def _long_term_parabola(year: float) -> float:
    """Morrison/Stephenson long-term parabola (seconds)."""
    u = (year - 1820.0) / 100.0
    return -20.0 + 32.0 * u * u


def _long_term_2016(year: float) -> float:
    """Stephenson-Morrison-Hohenkerk (2016) long-term parabola (seconds)."""
    u = (year - 1825.0) / 100.0
    return -320.0 + 32.5 * u * u


def _before_table(year: float) -> float:
    """Delta-T in seconds before 1620 (Stephenson et al. 2016)."""
    if year < _SPLINE_2016[0][0]:
        # offset makes the parabola meet the spline at -720
        return _long_term_2016(year) - 179.7337208
    for segment in _SPLINE_2016:
        if year < segment[1]:
            break
    ybeg, yend, a, b, c, d = segment
    t = (year - ybeg) / (yend - ybeg)
    return a + t * (b + t * (c + t * d))


def _after_table(year: float) -> float:
    """Parabola continuing the last tabulated value and slope (seconds)."""
    x = year - TABLE_END
    end = _DT_YEARLY[-1] / 100.0
    slope = (_DT_YEARLY[-1] - _DT_YEARLY[-2]) / 100.0
    return end + slope * x + _LONG_TERM_ACCEL * x * x


def _bessel(year: float) -> float:
    """Fourth-order Bessel interpolation in the yearly table (seconds)."""
    iy = int(year)
    k = iy - TABLE_START
    p = year - iy
    last = len(_DT_YEARLY) - 1
    d = [_DT_YEARLY[min(max(k + i - 2, 0), last)] / 100.0 for i in range(6)]
    d1 = [d[i + 1] - d[i] for i in range(5)]
    d2 = [d1[i + 1] - d1[i] for i in range(4)]
    d3 = [d2[i + 1] - d2[i] for i in range(3)]
    d4 = [d3[i + 1] - d3[i] for i in range(2)]
    ans = d[2] + p * d1[2]
    ans += p * (p - 1.0) / 4.0 * (d2[1] + d2[2])
    ans += p * (p - 1.0) * (p - 0.5) / 6.0 * d3[1]
    ans += (p + 1.0) * p * (p - 1.0) * (p - 2.0) / 48.0 * (d4[0] + d4[1])
    return ans


def _warn_outside(era: str, year: float) -> None:
    if era in _warned_eras:
        return
    _warned_eras.add(era)
    logger.warning(
        'Delta-T for year %.1f lies %s the observed table (%d..%d); '
        'extrapolated value has reduced precision.',
        year,
        era,
        TABLE_START,
        TABLE_END,
    )


def _table_seconds(year: float) -> float:
    """Table model in seconds, before tidal adjustment."""
    if year < TABLE_START:
        _warn_outside('before', year)
        ans = _before_table(year)
        if year > _BLEND_START:
            gap = _DT_YEARLY[0] / 100.0 - _before_table(TABLE_START)
            ans += gap * (year - _BLEND_START) / (TABLE_START - _BLEND_START)
        return ans
    if year < TABLE_END:
        return _bessel(year)
    if year > TABLE_END:
        _warn_outside('after', year)
    return _after_table(year)


def espenak_meeus(year: float) -> float:
    """Espenak-Meeus piecewise polynomial Delta-T in seconds.

    Parameters:
        year: Decimal year.

    Returns:
        Delta-T in seconds.
    """
    y = year
    if y < -500.0:
        return _long_term_parabola(y)
    if y < 500.0:
        u = y / 100.0
        return (
            10583.6
            - 1014.41 * u
            + 33.78311 * u**2
            - 5.952053 * u**3
            - 0.1798452 * u**4
            + 0.022174192 * u**5
            + 0.0090316521 * u**6
        )
    if y < 1600.0:
        u = (y - 1000.0) / 100.0
        return (
            1574.2
            - 556.01 * u
            + 71.23472 * u**2
            + 0.319781 * u**3
            - 0.8503463 * u**4
            - 0.005050998 * u**5
            + 0.0083572073 * u**6
        )
    if y < 1700.0:
        t = y - 1600.0
        return 120.0 - 0.9808 * t - 0.01532 * t**2 + t**3 / 7129.0
    if y < 1800.0:
        t = y - 1700.0
        return 8.83 + 0.1603 * t - 0.0059285 * t**2 + 0.00013336 * t**3 - t**4 / 1174000.0
    if y < 1860.0:
        t = y - 1800.0
        return (
            13.72
            - 0.332447 * t
            + 0.0068612 * t**2
            + 0.0041116 * t**3
            - 0.00037436 * t**4
            + 0.0000121272 * t**5
            - 0.0000001699 * t**6
            + 0.000000000875 * t**7
        )
    if y < 1900.0:
        t = y - 1860.0
        return (
            7.62
            + 0.5737 * t
            - 0.251754 * t**2
            + 0.01680668 * t**3
            - 0.0004473624 * t**4
            + t**5 / 233174.0
        )
    if y < 1920.0:
        t = y - 1900.0
        return -2.79 + 1.494119 * t - 0.0598939 * t**2 + 0.0061966 * t**3 - 0.000197 * t**4
    if y < 1941.0:
        t = y - 1920.0
        return 21.20 + 0.84493 * t - 0.076100 * t**2 + 0.0020936 * t**3
    if y < 1961.0:
        t = y - 1950.0
        return 29.07 + 0.407 * t - t**2 / 233.0 + t**3 / 2547.0
    if y < 1986.0:
        t = y - 1975.0
        return 45.45 + 1.067 * t - t**2 / 260.0 - t**3 / 718.0
    if y < 2005.0:
        t = y - 2000.0
        return (
            63.86
            + 0.3345 * t
            - 0.060374 * t**2
            + 0.0017275 * t**3
            + 0.000651814 * t**4
            + 0.00002373599 * t**5
        )
    if y < 2050.0:
        t = y - 2000.0
        return 62.92 + 0.32217 * t + 0.005589 * t**2
    if y < 2150.0:
        return _long_term_parabola(y) - 0.5628 * (2150.0 - y)
    return _long_term_parabola(y)


def tidal_adjustment(year: float, tid_acc: float) -> float:
    """Correction in seconds for a tidal acceleration different from the default.

    Only dates before 1955 are affected; later values come from observed UT.

    Parameters:
        year: Decimal year.
        tid_acc: Tidal acceleration of the Moon in arcsec/cy^2.

    Returns:
        Seconds to add to Delta-T.
    """
    if year >= 1955.0:
        return 0.0
    b = (year - 1820.0) / 100.0
    return -0.91072 * (tid_acc - TIDAL_DEFAULT) / 100.0 * b * b


def delta_t(
    jd_ut: float,
    model: str = DELTAT_TABLE,
    tid_acc: float = TIDAL_DEFAULT,
    override: float | None = None,
) -> float:
    """Return Delta-T (TT - UT1) in days.

    Parameters:
        jd_ut: Julian day in UT.
        model: DELTAT_TABLE, DELTAT_POLYNOMIAL, or DELTAT_OVERRIDE.
        tid_acc: Tidal acceleration (arcsec/cy^2) of the ephemeris in use.
        override: Constant Delta-T in days, required for DELTAT_OVERRIDE.

    Returns:
        Delta-T in days.

    Raises:
        ValueError: Unknown model, or override model without a value.
    """
    if model == DELTAT_OVERRIDE:
        if override is None:
            raise ValueError('Delta-T override model requires an override value')
        return float(override)
    year = year_from_jd(jd_ut)
    if model == DELTAT_TABLE:
        seconds = _table_seconds(year)
    elif model == DELTAT_POLYNOMIAL:
        seconds = espenak_meeus(year)
    else:
        raise ValueError(f'Unknown Delta-T model {model!r}')
    seconds += tidal_adjustment(year, tid_acc)
    return seconds / SECONDS_PER_DAY
