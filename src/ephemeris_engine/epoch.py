"""Epoch value type: a Julian day tagged with its time scale."""

from __future__ import annotations

from dataclasses import dataclass

UT = 'UT'
TT = 'TT'
_SCALES = (UT, TT)


@dataclass(frozen=True)
class Epoch:
    """Instant as (Julian day, time scale).

    Parameters:
        jd: Julian day number.
        scale: 'UT' (UT1) or 'TT' (Terrestrial Time; TDB is not distinguished).
    """

    jd: float
    scale: str = TT

    def __post_init__(self) -> None:
        if self.scale not in _SCALES:
            raise ValueError(f'Invalid time scale {self.scale!r}; expected one of {_SCALES}')

    @classmethod
    def tt(cls, jd: float) -> Epoch:
        """Epoch in Terrestrial Time."""
        return cls(float(jd), TT)

    @classmethod
    def ut(cls, jd: float) -> Epoch:
        """Epoch in Universal Time (UT1)."""
        return cls(float(jd), UT)

    def shifted(self, days: float) -> Epoch:
        """Return the epoch moved by ``days`` in the same scale."""
        return Epoch(self.jd + days, self.scale)
