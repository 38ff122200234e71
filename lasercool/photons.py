"""Numbers of photons an atom scatters from the cooling beams in one step."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

import numpy as np

from lasercool.transition import AtomicTransition

_MIN_LAMBDA = 1.0e-5


def total_photons_scattered(transition: AtomicTransition, excited: float, timestep: float) -> float:
    """Mean number of photons scattered from all beams in one timestep."""
    return timestep * transition.gamma() * excited


def expected_photons_scattered(
    rates: Sequence[float], masks: Sequence[bool], total: float
) -> List[float]:
    """Share the total scattered photons between beams in proportion to their rates.

    Slots not in use are left as NaN. Raises ValueError if rates and masks differ in length.
    """
    pairs = list(zip(rates, masks, strict=True))
    sum_rates = sum(rate for rate, filled in pairs if filled)
    return [rate / sum_rates * total if filled else math.nan for rate, filled in pairs]


def actual_photons_scattered(
    expected: Sequence[float],
    fluctuations: bool = True,
    rng: Optional[np.random.Generator] = None,
) -> List[float]:
    """Photons actually scattered from each beam.

    With fluctuations, each number is drawn from a Poisson distribution whose mean is
    the expected number; very small or NaN means give zero. Without, the expected
    numbers are returned unchanged.
    """
    if not fluctuations:
        return [float(value) for value in expected]
    if rng is None:
        rng = np.random.default_rng()
    return [
        0.0 if math.isnan(lam) or lam <= _MIN_LAMBDA else float(rng.poisson(lam))
        for lam in expected
    ]


def total_scattered(actual: Sequence[float]) -> int:
    """Total photons scattered from all beams, truncated to a non-negative integer."""
    total = sum(actual)
    if math.isnan(total) or total <= 0.0:
        return 0
    return int(total)