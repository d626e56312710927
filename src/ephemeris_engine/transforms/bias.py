"""Frame bias between the ICRS and the J2000 dynamical equator and equinox."""

from __future__ import annotations

import numpy as np

from ephemeris_engine.constants import BIAS_IAU_2000, BIAS_IAU_2006, BIAS_NONE
from ephemeris_engine.transforms.vectors import apply_matrix

_RB_IAU2006 = np.array(
    [
        [0.99999999999999412, 0.00000007078368695, -0.00000008056214212],
        [-0.00000007078368961, 0.99999999999999700, -0.00000003306427981],
        [0.00000008056213978, 0.00000003306428553, 0.99999999999999634],
    ]
)
_RB_IAU2000 = np.array(
    [
        [0.9999999999999942, 0.0000000707827948, -0.0000000805621738],
        [-0.0000000707827974, 0.9999999999999969, -0.0000000330604088],
        [0.0000000805621715, 0.0000000330604145, 0.9999999999999962],
    ]
)


def bias_matrix(model: str = BIAS_IAU_2006) -> np.ndarray:
    """Matrix taking ICRS vectors to the J2000 mean equator and equinox.

    Raises:
        ValueError: Unknown model.
    """
    if model == BIAS_IAU_2006:
        return _RB_IAU2006.T
    if model == BIAS_IAU_2000:
        return _RB_IAU2000.T
    if model == BIAS_NONE:
        return np.eye(3)
    raise ValueError(f'Unknown frame bias model {model!r}')


def icrs_to_j2000(x: np.ndarray, model: str = BIAS_IAU_2006) -> np.ndarray:
    """Apply the frame bias to a 6-element ICRS state."""
    return apply_matrix(bias_matrix(model), x)


def j2000_to_icrs(x: np.ndarray, model: str = BIAS_IAU_2006) -> np.ndarray:
    """Remove the frame bias from a 6-element J2000 state."""
    return apply_matrix(bias_matrix(model).T, x)
