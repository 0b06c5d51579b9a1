"""
Tests for value object validation and serialization.
"""

import json

import pytest

from pipeloss_core.errors import (
    ConsistencyError,
    FittingNotFoundError,
    InputValidationError,
    PipeLossError,
    RangeError,
)
from pipeloss_core.models import (
    CalcWarning,
    FittingRequest,
    PipeMaterial,
    PipeSpec,
    Reference,
    SegmentInput,
    Severity,
    SystemInput,
    SystemResult,
)
from pipeloss_core.route.models import (
    ElbowConnection,
    PipeRoute,
    Point3D,
    RouteConversionConfig,
    RouteNode,
)
from pipeloss_core.route.conversion import analyze_route
from pipeloss_core.system.aggregator import calc_system_pressure_drop


class TestValidation:
    """Test __post_init__ validation."""

    def test_negative_diameter(self):
        with pytest.raises(InputValidationError):
            PipeSpec("ASME B36.10M", "2", 60.3, 3.91, -1.0)

    def test_negative_roughness(self):
        with pytest.raises(InputValidationError):
            PipeMaterial("x", "x", -0.01, Reference(source="test"))

    def test_negative_quantity(self):
        with pytest.raises(InputValidationError):
            FittingRequest("gate_valve", quantity=-1)

    def test_negative_length(self, pipe_2in, carbon_steel, water_20c):
        with pytest.raises(InputValidationError):
            SegmentInput(pipe_2in, carbon_steel, water_20c, flow_rate_m3s=0.001, length_m=-1.0)

    def test_fittings_frozen_to_tuple(self, pipe_2in, carbon_steel, water_20c):
        segment = SegmentInput(
            pipe_2in, carbon_steel, water_20c, 0.001, 10.0, fittings=[FittingRequest("exit")]
        )
        assert isinstance(segment.fittings, tuple)
        assert isinstance(SystemInput([segment]).segments, tuple)

    def test_pipe_derived_diameters(self, pipe_2in):
        assert pipe_2in.id_m == pytest.approx(0.0525)
        assert pipe_2in.id_inch == pytest.approx(52.5 / 25.4)


class TestErrors:
    """Test the error family."""

    @pytest.mark.parametrize("error", [
        InputValidationError("bad"),
        RangeError("out of range"),
        FittingNotFoundError("valve"),
        ConsistencyError(1, 2.0, 1.0),
    ])
    def test_common_base(self, error):
        assert isinstance(error, PipeLossError)

    def test_value_error_compatible(self):
        with pytest.raises(ValueError):
            raise RangeError("T=150 outside table")


class TestSerialization:
    """Test to_dict / from_dict."""

    def test_reference_omits_missing(self):
        assert Reference(source="Darby, 2001").to_dict() == {"source": "Darby, 2001"}

    def test_fitting_request_from_dict_defaults(self):
        assert FittingRequest.from_dict({"fitting_id": "exit"}) == FittingRequest("exit")

    def test_warning_to_dict(self):
        warning = CalcWarning(Severity.INFO, "velocity", "warn.low_velocity", {"v": 0.3})
        assert warning.to_dict()["severity"] == "info"
        assert "warn.low_velocity" in str(warning)

    def test_empty_system_result(self):
        data = SystemResult.empty().to_dict()
        assert data["dp_total"] == 0.0
        assert data["segment_results"] == []

    def test_system_result_is_json(self, pipe_2in, carbon_steel, water_20c, crane_catalog):
        segment = SegmentInput(
            pipe_2in, carbon_steel, water_20c, 10.0 / 3600.0, 50.0, 5.0,
            fittings=(FittingRequest("elbow_90_lr_welded", 4), FittingRequest("gate_valve", cv_override=90.0)),
        )
        data = calc_system_pressure_drop(SystemInput([segment]), crane_catalog).to_dict()
        assert json.loads(json.dumps(data)) == data

    def test_route_from_dict(self):
        route = PipeRoute(nodes=(
            RouteNode("a", Point3D(0, 0, 0), (FittingRequest("entrance_sharp"),)),
            RouteNode("b", Point3D(5, 0, 1.5)),
        ))
        assert PipeRoute.from_dict(route.to_dict()) == route

    def test_route_analysis_is_json(self):
        route = PipeRoute.from_points([(0, 0, 0), (10, 0, 0), (10, 10, 0)])
        data = analyze_route(route).to_dict()
        assert json.loads(json.dumps(data)) == data
        assert data["straight_runs"][1]["direction"] == pytest.approx([0.0, 1.0, 0.0])

    def test_conversion_config(self):
        config = RouteConversionConfig.from_dict({"connection": "threaded", "angle_tolerance": 10.0})
        assert config.connection == ElbowConnection.THREADED
        assert config.use_90_long_radius is True
        assert RouteConversionConfig.from_dict(config.to_dict()) == config
