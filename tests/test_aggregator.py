"""
Tests for series system aggregation.
"""

import dataclasses

import pytest

from pipeloss_core.errors import ConsistencyError, InputValidationError
from pipeloss_core.models import FittingRequest, SegmentInput, SystemInput
from pipeloss_core.system.aggregator import calc_system_pressure_drop
from pipeloss_core.system.segment import calc_segment_pressure_drop
from pipeloss_core.units import GRAVITY


@pytest.fixture
def make_segment(pipe_2in, carbon_steel, water_20c):
    def _make(length_m=20.0, elevation_m=0.0, fittings=(), fluid=None, flow_m3h=10.0):
        return SegmentInput(
            pipe=pipe_2in,
            material=carbon_steel,
            fluid=fluid or water_20c,
            flow_rate_m3s=flow_m3h / 3600.0,
            length_m=length_m,
            elevation_m=elevation_m,
            fittings=fittings,
        )
    return _make


class TestEmptySystem:
    """Test the empty system."""

    def test_all_zero(self, crane_catalog):
        result = calc_system_pressure_drop(SystemInput(), crane_catalog)
        assert result.segment_results == ()
        assert result.dp_total == 0.0
        assert result.head_total_m == 0.0
        assert result.references == ()
        assert result.warnings == ()


class TestAggregation:
    """Test totals across segments."""

    def test_single_segment_equivalence(self, make_segment, crane_catalog):
        segment = make_segment(elevation_m=3.0, fittings=(FittingRequest("gate_valve"),))
        direct = calc_segment_pressure_drop(segment, crane_catalog)
        system = calc_system_pressure_drop(SystemInput([segment]), crane_catalog)

        assert system.segment_results[0].velocity_m_s == direct.velocity_m_s
        assert system.dp_total == pytest.approx(direct.dp_total)
        assert system.head_total_m == pytest.approx(direct.head_total_m)

    def test_sums(self, make_segment, crane_catalog):
        segments = [
            make_segment(length_m=30.0, elevation_m=2.0, fittings=(FittingRequest("elbow_90_lr_welded", 2),)),
            make_segment(length_m=15.0, elevation_m=-1.0, fittings=(FittingRequest("globe_valve"),)),
        ]
        result = calc_system_pressure_drop(SystemInput(segments), crane_catalog)
        parts = result.segment_results

        assert result.dp_friction_total == pytest.approx(sum(p.dp_friction for p in parts))
        assert result.dp_fittings_total == pytest.approx(sum(p.dp_fittings for p in parts))
        assert result.dp_elevation_total == pytest.approx(sum(p.dp_elevation for p in parts))
        assert result.dp_total == pytest.approx(
            result.dp_friction_total + result.dp_fittings_total + result.dp_elevation_total
        )
        assert result.head_elevation_total_m == pytest.approx(1.0)
        assert result.head_total_m == pytest.approx(result.dp_total / (998.21 * GRAVITY))

    def test_references_deduplicated(self, make_segment, crane_catalog):
        elbows = (FittingRequest("elbow_90_lr_welded", 4),)
        result = calc_system_pressure_drop(
            SystemInput([make_segment(fittings=elbows), make_segment(fittings=elbows)]),
            crane_catalog,
        )
        keys = [r.key for r in result.references]
        assert len(keys) == len(set(keys))
        # material roughness (A-23) and elbow L/D are distinct Crane citations
        assert [r.source for r in result.references] == [
            "Churchill, S.W., 1977", "IAPWS-IF97", "Crane TP-410", "Crane TP-410",
        ]
        assert len(result.segment_results[0].references) + len(result.segment_results[1].references) == 8

    def test_warnings_deduplicated(self, make_segment, crane_catalog):
        result = calc_system_pressure_drop(
            SystemInput([make_segment(flow_m3h=1.0), make_segment(flow_m3h=1.0)]),
            crane_catalog,
        )
        keys = [w.message_key for w in result.warnings]
        assert keys.count("warn.low_velocity") == 1
        assert len(result.segment_results[1].warnings) >= 1


class TestFluidConsistency:
    """Test the single-fluid check on series segments."""

    def test_density_mismatch_rejected(self, make_segment, water_20c, crane_catalog):
        heavy = dataclasses.replace(water_20c, density=water_20c.density * 1.02)
        segments = [make_segment(), make_segment(), make_segment(fluid=heavy)]

        with pytest.raises(ConsistencyError) as excinfo:
            calc_system_pressure_drop(SystemInput(segments), crane_catalog)

        assert excinfo.value.segment_index == 2
        assert excinfo.value.deviation_pct == pytest.approx(2.0)
        assert "Segment 2" in str(excinfo.value)

    def test_within_tolerance(self, make_segment, water_20c, crane_catalog):
        close = dataclasses.replace(water_20c, density=water_20c.density * 1.005)
        result = calc_system_pressure_drop(SystemInput([make_segment(), make_segment(fluid=close)]), crane_catalog)
        assert len(result.segment_results) == 2

    def test_checked_before_computing(self, make_segment, water_20c, crane_catalog):
        """An unknown fitting in segment 0 does not mask the density error."""
        light = dataclasses.replace(water_20c, density=900.0)
        segments = [
            make_segment(fittings=(FittingRequest("butterfly_valve"),)),
            make_segment(fluid=light),
        ]
        with pytest.raises(ConsistencyError):
            calc_system_pressure_drop(SystemInput(segments), crane_catalog)

    @pytest.mark.parametrize("density", [0.0, -998.0])
    def test_non_positive_density_rejected(self, water_20c, density):
        with pytest.raises(InputValidationError):
            dataclasses.replace(water_20c, density=density)

    def test_zero_viscosity_rejected(self, water_20c):
        with pytest.raises(InputValidationError):
            dataclasses.replace(water_20c, viscosity=0.0)
