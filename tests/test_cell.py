"""Unit tests for cell states and vegetation factors."""

import pytest

from forest_fire.cell import (
    CellType,
    VEGETATION_FACTOR,
    is_absorbing,
    is_flammable,
    vegetation_factor,
)


class TestCellType:
    """Test cases for CellType enum."""

    def test_cell_types_exist(self):
        """Test that exactly the six expected states exist."""
        assert [cell.name for cell in CellType] == [
            "NormalForest",
            "DryGrass",
            "DenseTrees",
            "Water",
            "Burning",
            "Burned",
        ]

    def test_cell_type_values(self):
        """Test that values are consecutive from zero."""
        assert [cell.value for cell in CellType] == list(range(6))


class TestVegetation:
    """Test cases for vegetation helpers."""

    def test_vegetation_factors(self):
        assert vegetation_factor(CellType.NormalForest) == 1.0
        assert vegetation_factor(CellType.DryGrass) == 1.5
        assert vegetation_factor(CellType.DenseTrees) == 0.5

    @pytest.mark.parametrize("cell", [CellType.Water, CellType.Burning, CellType.Burned])
    def test_no_factor_for_non_vegetation(self, cell):
        with pytest.raises(ValueError):
            vegetation_factor(cell)

    def test_flammable_cells(self):
        assert {cell for cell in CellType if is_flammable(cell)} == set(VEGETATION_FACTOR)

    def test_absorbing_cells(self):
        assert {cell for cell in CellType if is_absorbing(cell)} == {
            CellType.Water,
            CellType.Burned,
        }
