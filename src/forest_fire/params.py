"""Simulation parameters."""

from dataclasses import dataclass

DEFAULT_GRID_SIZE = 256


@dataclass(frozen=True)
class SimParams:
    """Parameters fixed for the whole run.

    Ranges are nominal only. Apart from ``water_ratio``, which the
    initializer checks, values are fed straight into the spread arithmetic.

    Attributes:
        p: Base spread probability from a burning neighbour (0-1)
        pstart: Spontaneous ignition probability per tick (0-1)
        w_speed: Wind speed scalar (0-1)
        w_direction: Wind bearing in degrees (0-360)
        water_ratio: Fraction of cells turned to water at start (0-1)
    """

    p: float = 0.8
    pstart: float = 0.01
    w_speed: float = 0.5
    w_direction: float = 30.0
    water_ratio: float = 0.175
