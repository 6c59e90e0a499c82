"""Fire spread rule for a single cell.

The rule is evaluated against the previous tick only. It has no failure
modes: probabilities above 1 always ignite, and probabilities below 0 never do.
"""

import math
from typing import Iterable, Protocol

from .cell import CellType, is_absorbing, vegetation_factor
from .params import SimParams

# Strength of the wind bonus applied to the spread probability
WIND_COEFFICIENT = 0.1


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1), e.g. ``random.Random``."""

    def random(self) -> float: ...


def bearing(x: int, y: int, nx: int, ny: int) -> float:
    """Angle in degrees (-180..180) from cell (x, y) to cell (nx, ny)."""
    return math.degrees(math.atan2(ny - y, nx - x))


def directional_influence(w_direction: float, angle: float) -> float:
    """
    Weight how well the wind bearing lines up with a neighbour's bearing.

    Args:
        w_direction: Wind bearing in degrees
        angle: Bearing to the burning neighbour in degrees

    Returns:
        1.0 when the bearings coincide and 0.0 when they are opposite.
        Angles are not normalised first, so a wind bearing near 360 paired
        with a negative neighbour bearing can give values above 1.0.
    """
    angle_diff = abs(w_direction - angle)
    angle_diff = min(angle_diff, 360.0 - angle_diff)
    return 1.0 - angle_diff / 180.0


def spread_probability(cell: CellType, angle: float, params: SimParams) -> float:
    """
    Probability that a burning neighbour at ``angle`` ignites ``cell``.

    The result is not clamped to [0, 1].
    """
    influence = directional_influence(params.w_direction, angle)
    wind_bonus = 1.0 + WIND_COEFFICIENT * params.w_speed * influence
    return params.p * vegetation_factor(cell) * wind_bonus


def next_state(
    current: CellType,
    burning_bearings: Iterable[float],
    params: SimParams,
    rng: RandomSource,
) -> CellType:
    """
    Calculate the state of a cell at the next tick.

    Args:
        current: State of the cell at this tick
        burning_bearings: Bearings to each burning neighbour, in neighbour
            enumeration order
        params: Simulation parameters
        rng: Source of uniform random values

    Returns:
        The cell's state at the next tick
    """
    if current == CellType.Burning:
        return CellType.Burned
    if is_absorbing(current):
        return current

    # First neighbour that ignites the cell wins
    for angle in burning_bearings:
        if rng.random() < spread_probability(current, angle, params):
            return CellType.Burning

    if rng.random() < params.pstart:
        return CellType.Burning

    return current
