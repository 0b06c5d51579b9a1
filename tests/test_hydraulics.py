"""
Unit tests for pipe hydraulics and friction factor correlations.
"""

import math

import pytest

from pipeloss_core.errors import InputValidationError
from pipeloss_core.models import FlowRegime, PipeMaterial, Reference
from pipeloss_core.pipe.friction import (
    calc_ft_fully_turbulent,
    churchill_friction_factor,
    resolve_ft,
    swamee_jain_friction_factor,
)
from pipeloss_core.pipe.hydraulics import (
    calc_elevation_loss,
    calc_flow_area,
    calc_reynolds,
    calc_straight_pipe_loss,
    calc_velocity,
    classify_flow,
)
from pipeloss_core.units import GRAVITY


class TestFlowGeometry:
    """Test flow area, velocity and Reynolds number."""

    def test_flow_area(self):
        assert calc_flow_area(52.5) == pytest.approx(math.pi * 0.02625**2)

    def test_velocity(self):
        area = calc_flow_area(52.5)
        assert calc_velocity(10.0 / 3600.0, area) == pytest.approx(1.2832, abs=1e-3)

    def test_velocity_zero_area(self):
        with pytest.raises(InputValidationError):
            calc_velocity(0.001, 0.0)

    def test_reynolds(self):
        re = calc_reynolds(998.21, 1.2832, 0.0525, 1.002e-3)
        assert re == pytest.approx(67_100, rel=2e-3)

    def test_reynolds_zero_viscosity(self):
        with pytest.raises(InputValidationError):
            calc_reynolds(998.0, 1.0, 0.05, 0.0)


class TestFlowRegime:
    """Test regime boundaries."""

    @pytest.mark.parametrize("re,regime", [
        (500.0, FlowRegime.LAMINAR),
        (2099.9, FlowRegime.LAMINAR),
        (2100.0, FlowRegime.TRANSITIONAL),
        (3999.9, FlowRegime.TRANSITIONAL),
        (4000.0, FlowRegime.TURBULENT),
        (1e6, FlowRegime.TURBULENT),
    ])
    def test_boundaries(self, re, regime):
        assert classify_flow(re) == regime


class TestLosses:
    """Test straight-pipe and elevation losses."""

    def test_darcy_weisbach(self):
        dp = calc_straight_pipe_loss(0.02, 50.0, 50.0, 1000.0, 2.0)
        # f·(L/D)·ρV²/2 = 0.02 × 1000 × 2000
        assert dp == pytest.approx(40_000.0)

    def test_zero_length(self):
        assert calc_straight_pipe_loss(0.02, 0.0, 50.0, 1000.0, 2.0) == 0.0

    def test_elevation_sign(self):
        assert calc_elevation_loss(1000.0, 5.0) == pytest.approx(1000.0 * GRAVITY * 5.0)
        assert calc_elevation_loss(1000.0, -5.0) < 0


class TestChurchill:
    """Test the Churchill all-regime correlation."""

    def test_laminar_limit(self):
        result = churchill_friction_factor(1000.0, 0.046, 52.5)
        assert result.f == pytest.approx(64.0 / 1000.0, rel=1e-4)

    def test_turbulent_matches_swamee_jain(self):
        churchill = churchill_friction_factor(1e5, 0.046, 52.5)
        swamee = swamee_jain_friction_factor(1e5, 0.046, 52.5)
        assert churchill.f == pytest.approx(swamee.f, rel=0.03)

    def test_method_tags(self):
        assert churchill_friction_factor(1e5, 0.046, 52.5).method == "churchill"
        assert swamee_jain_friction_factor(1e5, 0.046, 52.5).method == "swamee-jain"

    def test_continuous_through_transition(self):
        f_values = [churchill_friction_factor(re, 0.046, 52.5).f for re in (2000, 2500, 3000, 3500, 4500)]
        assert all(0.02 < f < 0.06 for f in f_values)

    def test_smooth_pipe(self):
        """Zero roughness is allowed for the Darcy factor."""
        assert churchill_friction_factor(1e5, 0.0, 52.5).f > 0

    def test_non_positive_reynolds(self):
        with pytest.raises(InputValidationError):
            churchill_friction_factor(0.0, 0.046, 52.5)
        with pytest.raises(InputValidationError):
            swamee_jain_friction_factor(-1.0, 0.046, 52.5)


class TestFullyTurbulent:
    """Test f_T for fitting K values."""

    def test_von_karman(self):
        result = calc_ft_fully_turbulent(0.046, 52.5)
        assert result.f == pytest.approx(0.0190, abs=2e-4)
        assert result.method == "von-karman"

    def test_requires_positive_inputs(self):
        with pytest.raises(InputValidationError):
            calc_ft_fully_turbulent(0.0, 52.5)
        with pytest.raises(InputValidationError):
            calc_ft_fully_turbulent(0.046, 0.0)

    def test_table_wins(self, pipe_2in, carbon_steel):
        result = resolve_ft(pipe_2in, carbon_steel, {"2": 0.019})
        assert result.f == 0.019
        assert result.method == "ft-table"

    def test_fallback_when_size_missing(self, pipe_2in, carbon_steel):
        result = resolve_ft(pipe_2in, carbon_steel, {"3": 0.018})
        assert result.method == "von-karman"

    def test_fallback_needs_roughness(self, pipe_2in):
        smooth = PipeMaterial("pvc", "PVC", 0.0, Reference(source="test"))
        with pytest.raises(InputValidationError):
            resolve_ft(pipe_2in, smooth)
