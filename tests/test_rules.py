"""Unit tests for the per-cell fire spread rule."""

import pytest

from forest_fire.cell import CellType
from forest_fire.params import SimParams
from forest_fire.rules import (
    bearing,
    directional_influence,
    next_state,
    spread_probability,
)


class TestGeometry:
    """Test cases for bearings and wind influence."""

    @pytest.mark.parametrize(
        "neighbor, expected",
        [
            ((1, 0), 0.0),
            ((0, 1), 90.0),
            ((-1, 0), 180.0),
            ((0, -1), -90.0),
            ((1, 1), 45.0),
            ((-1, -1), -135.0),
        ],
    )
    def test_bearing(self, neighbor, expected):
        assert bearing(5, 5, 5 + neighbor[0], 5 + neighbor[1]) == pytest.approx(expected)

    def test_influence_aligned(self):
        assert directional_influence(45.0, 45.0) == pytest.approx(1.0)

    def test_influence_opposite(self):
        assert directional_influence(0.0, 180.0) == pytest.approx(0.0)

    def test_influence_perpendicular(self):
        assert directional_influence(90.0, 0.0) == pytest.approx(0.5)

    def test_influence_not_normalised(self):
        """A wind bearing of 360 against a bearing of -135 exceeds 1."""
        assert directional_influence(360.0, -135.0) == pytest.approx(1.75)

    def test_influence_wraps_around(self):
        """350 degrees and -10 degrees point the same way."""
        assert directional_influence(350.0, -10.0) == pytest.approx(1.0)
        assert directional_influence(10.0, -10.0) == pytest.approx(1.0 - 20.0 / 180.0)


class TestSpreadProbability:
    """Test cases for the adjusted spread probability."""

    def test_no_wind(self):
        params = SimParams(p=0.4, w_speed=0.0)
        assert spread_probability(CellType.NormalForest, 0.0, params) == pytest.approx(0.4)
        assert spread_probability(CellType.DryGrass, 0.0, params) == pytest.approx(0.6)
        assert spread_probability(CellType.DenseTrees, 0.0, params) == pytest.approx(0.2)

    def test_wind_bonus(self):
        params = SimParams(p=0.5, w_speed=1.0, w_direction=90.0)
        assert spread_probability(CellType.NormalForest, 90.0, params) == pytest.approx(0.55)
        assert spread_probability(CellType.NormalForest, -90.0, params) == pytest.approx(0.5)

    def test_not_clamped(self):
        params = SimParams(p=1.0, w_speed=1.0, w_direction=0.0)
        assert spread_probability(CellType.DryGrass, 0.0, params) == pytest.approx(1.65)


class TestNextState:
    """Test cases for the full transition rule."""

    def test_burning_burns_out(self, scripted):
        rng = scripted([])
        assert next_state(CellType.Burning, [0.0], SimParams(), rng) == CellType.Burned
        assert rng.calls == 0

    @pytest.mark.parametrize("cell", [CellType.Water, CellType.Burned])
    def test_absorbing_unchanged(self, scripted, cell):
        rng = scripted([])
        params = SimParams(p=1.0, pstart=1.0)
        assert next_state(cell, [0.0, 90.0], params, rng) == cell
        assert rng.calls == 0

    def test_first_neighbor_wins(self, scripted):
        rng = scripted([0.1, 0.1, 0.1])
        params = SimParams(p=0.5, pstart=0.0, w_speed=0.0)
        assert next_state(CellType.NormalForest, [0.0, 45.0, 90.0], params, rng) == CellType.Burning
        assert rng.calls == 1

    def test_one_draw_per_neighbor_then_spontaneous(self, scripted):
        rng = scripted([0.9, 0.9, 0.005])
        params = SimParams(p=0.5, pstart=0.01, w_speed=0.0)
        assert next_state(CellType.NormalForest, [0.0, 45.0], params, rng) == CellType.Burning
        assert rng.calls == 3

    def test_unchanged_without_ignition(self, scripted):
        rng = scripted([0.9, 0.5])
        params = SimParams(p=0.5, pstart=0.01, w_speed=0.0)
        assert next_state(CellType.DenseTrees, [0.0], params, rng) == CellType.DenseTrees
        assert rng.calls == 2

    def test_vegetation_changes_outcome(self, scripted):
        params = SimParams(p=0.5, pstart=0.0, w_speed=0.0)
        # 0.6 < 0.5 * 1.5 but not < 0.5 * 0.5
        assert next_state(CellType.DryGrass, [0.0], params, scripted([0.6, 0.9])) == CellType.Burning
        assert next_state(CellType.DenseTrees, [0.0], params, scripted([0.6, 0.9])) == CellType.DenseTrees

    def test_saturated_probability_always_ignites(self, scripted):
        params = SimParams(p=1.0, pstart=0.0, w_speed=1.0, w_direction=0.0)
        rng = scripted([0.999999])
        assert next_state(CellType.DryGrass, [0.0], params, rng) == CellType.Burning
