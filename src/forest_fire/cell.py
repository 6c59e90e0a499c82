"""Cell states for the forest fire cellular automaton."""

from enum import IntEnum


class CellType(IntEnum):
    """Possible states of a grid cell.

    The integer values are what the grid stores in its numpy buffers.
    """
    NormalForest = 0
    DryGrass = 1
    DenseTrees = 2
    Water = 3
    Burning = 4
    Burned = 5


# How readily each vegetation type catches fire
VEGETATION_FACTOR = {
    CellType.NormalForest: 1.0,
    CellType.DryGrass: 1.5,
    CellType.DenseTrees: 0.5,
}

ABSORBING = frozenset({CellType.Water, CellType.Burned})


def is_flammable(cell: CellType) -> bool:
    """Check if a cell can catch fire (any vegetation type)."""
    return cell in VEGETATION_FACTOR


def is_absorbing(cell: CellType) -> bool:
    """Check if a cell never leaves its current state."""
    return cell in ABSORBING


def vegetation_factor(cell: CellType) -> float:
    """
    Get the flammability multiplier of a vegetation cell.

    Args:
        cell: A vegetation CellType

    Returns:
        Multiplier applied to the base spread probability

    Raises:
        ValueError: If the cell is not vegetation
    """
    try:
        return VEGETATION_FACTOR[cell]
    except KeyError:
        raise ValueError(f"{CellType(cell).name} has no vegetation factor") from None
