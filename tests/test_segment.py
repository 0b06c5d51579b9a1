"""
Tests for single-segment pressure drop.
"""

import pytest

from pipeloss_core.errors import FittingNotFoundError, InputValidationError
from pipeloss_core.models import FittingRequest, FlowRegime, SegmentInput
from pipeloss_core.system.segment import calc_segment_pressure_drop
from pipeloss_core.units import GRAVITY


@pytest.fixture
def example_segment(pipe_2in, carbon_steel, water_20c):
    """2" Sch 40, new steel, 20°C water, 10 m³/h, 50 m, +5 m, 4 LR elbows."""
    return SegmentInput(
        pipe=pipe_2in,
        material=carbon_steel,
        fluid=water_20c,
        flow_rate_m3s=10.0 / 3600.0,
        length_m=50.0,
        elevation_m=5.0,
        fittings=(FittingRequest("elbow_90_lr_welded", quantity=4),),
    )


class TestWorkedExample:
    """Test the 2-inch water line end to end."""

    def test_velocity_and_reynolds(self, example_segment, crane_catalog):
        result = calc_segment_pressure_drop(example_segment, crane_catalog)
        assert result.velocity_m_s == pytest.approx(1.283, abs=1e-3)
        assert result.reynolds == pytest.approx(67_100, rel=2e-3)
        assert result.flow_regime == FlowRegime.TURBULENT
        assert result.friction_factor_method == "churchill"

    def test_elevation_loss(self, example_segment, crane_catalog):
        result = calc_segment_pressure_drop(example_segment, crane_catalog)
        assert result.dp_elevation == pytest.approx(998.21 * GRAVITY * 5.0)
        assert result.head_elevation_m == 5.0

    def test_totals(self, example_segment, crane_catalog):
        result = calc_segment_pressure_drop(example_segment, crane_catalog)
        assert result.dp_total == result.dp_friction + result.dp_fittings + result.dp_elevation
        assert result.head_total_m == pytest.approx(result.dp_total / (998.21 * GRAVITY))
        assert result.head_total_m > 5.0

    def test_fittings_use_table_ft(self, example_segment, crane_catalog):
        result = calc_segment_pressure_drop(example_segment, crane_catalog)
        (elbows,) = result.fitting_details
        assert elbows.k_value == pytest.approx(0.019 * 14)
        assert elbows.quantity == 4
        assert result.dp_fittings == pytest.approx(elbows.dp_pa)

    def test_references(self, example_segment, crane_catalog):
        result = calc_segment_pressure_drop(example_segment, crane_catalog)
        sources = [r.source for r in result.references]
        assert sources == ["Churchill, S.W., 1977", "IAPWS-IF97", "Crane TP-410", "Crane TP-410"]

    def test_nominal_case_has_no_warnings(self, example_segment, crane_catalog):
        assert calc_segment_pressure_drop(example_segment, crane_catalog).warnings == ()

    def test_darby_catalog(self, example_segment, darby_catalog):
        result = calc_segment_pressure_drop(example_segment, darby_catalog)
        assert result.fitting_details[0].k_value > 0
        assert result.dp_total == result.dp_friction + result.dp_fittings + result.dp_elevation


class TestSegmentEdgeCases:
    """Test edge cases and failures."""

    def test_downhill(self, example_segment, crane_catalog):
        segment = SegmentInput(
            pipe=example_segment.pipe,
            material=example_segment.material,
            fluid=example_segment.fluid,
            flow_rate_m3s=example_segment.flow_rate_m3s,
            length_m=50.0,
            elevation_m=-5.0,
        )
        result = calc_segment_pressure_drop(segment, crane_catalog)
        assert result.dp_elevation < 0
        assert result.head_elevation_m == -5.0
        assert result.dp_fittings == 0.0

    def test_zero_length(self, example_segment, crane_catalog):
        segment = SegmentInput(
            pipe=example_segment.pipe,
            material=example_segment.material,
            fluid=example_segment.fluid,
            flow_rate_m3s=example_segment.flow_rate_m3s,
            length_m=0.0,
        )
        result = calc_segment_pressure_drop(segment, crane_catalog)
        assert result.dp_friction == 0.0
        assert result.dp_total == 0.0

    def test_zero_flow(self, example_segment, crane_catalog):
        segment = SegmentInput(
            pipe=example_segment.pipe,
            material=example_segment.material,
            fluid=example_segment.fluid,
            flow_rate_m3s=0.0,
            length_m=10.0,
        )
        with pytest.raises(InputValidationError):
            calc_segment_pressure_drop(segment, crane_catalog)

    def test_negative_flow_rejected_on_input(self, example_segment):
        with pytest.raises(InputValidationError):
            SegmentInput(
                pipe=example_segment.pipe,
                material=example_segment.material,
                fluid=example_segment.fluid,
                flow_rate_m3s=-1.0,
                length_m=10.0,
            )

    def test_unknown_fitting(self, example_segment, crane_catalog):
        segment = SegmentInput(
            pipe=example_segment.pipe,
            material=example_segment.material,
            fluid=example_segment.fluid,
            flow_rate_m3s=example_segment.flow_rate_m3s,
            length_m=10.0,
            fittings=[FittingRequest("butterfly_valve")],
        )
        with pytest.raises(FittingNotFoundError):
            calc_segment_pressure_drop(segment, crane_catalog)

    def test_low_flow_warns(self, example_segment, crane_catalog):
        segment = SegmentInput(
            pipe=example_segment.pipe,
            material=example_segment.material,
            fluid=example_segment.fluid,
            flow_rate_m3s=1.0 / 3600.0,
            length_m=50.0,
        )
        keys = [w.message_key for w in calc_segment_pressure_drop(segment, crane_catalog).warnings]
        assert "warn.low_velocity" in keys

    def test_to_dict(self, example_segment, crane_catalog):
        data = calc_segment_pressure_drop(example_segment, crane_catalog).to_dict()
        assert data["flow_regime"] == "turbulent"
        assert data["fitting_details"][0]["method"] == "crane_ld"
        assert data["dp_total"] == pytest.approx(
            data["dp_friction"] + data["dp_fittings"] + data["dp_elevation"]
        )
