"""Mean obliquity of the ecliptic for each precession model."""

from __future__ import annotations

from ephemeris_engine.constants import (
    ARCSEC_TO_RAD,
    DAYS_PER_JULIAN_CENTURY,
    J2000,
    PREC_IAU_1976,
    PREC_IAU_2000,
    PREC_IAU_2006,
    PREC_NEWCOMB,
)

# Obliquity at J2000 (IAU 2006), radians
EPS2000 = 84381.406 * ARCSEC_TO_RAD


def mean_obliquity(tjd: float, model: str = PREC_IAU_2006) -> float:
    """Mean obliquity of date in radians.

    Parameters:
        tjd: Julian day (TT).
        model: PREC_* constant; obliquity polynomials follow the precession
            model so that the two stay consistent.

    Returns:
        Obliquity in radians.

    Raises:
        ValueError: Unknown model.
    """
    t = (tjd - J2000) / DAYS_PER_JULIAN_CENTURY
    if model == PREC_IAU_2006:
        seconds = (
            84381.406
            + (
                -46.836769
                + (-0.0001831 + (0.00200340 + (-0.000000576 - 0.0000000434 * t) * t) * t) * t
            )
            * t
        )
    elif model == PREC_IAU_2000:
        seconds = 84381.448 + (-46.84024 + (-0.00059 + 0.001813 * t) * t) * t
    elif model in (PREC_IAU_1976, PREC_NEWCOMB):
        seconds = 84381.448 + (-46.8150 + (-0.00059 + 0.001813 * t) * t) * t
    else:
        raise ValueError(f'Unknown precession model {model!r}')
    return seconds * ARCSEC_TO_RAD
