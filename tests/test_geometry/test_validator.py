"""Tests for survey point validation."""
import math
from types import MappingProxyType

import numpy as np
import pytest

from tin_surface.errors import InsufficientPointsError, TINError
from tin_surface.geometry.validator import coerce_point, validate_points
from tin_surface.model.point import SurveyPoint


class TestCoercePoint:
    def test_tuple(self):
        assert coerce_point((1, 2, 3)) == SurveyPoint(1.0, 2.0, 3.0)

    def test_mapping(self):
        assert coerce_point({"x": 1.5, "y": 2.5, "z": 3.5}) == SurveyPoint(1.5, 2.5, 3.5)

    def test_read_only_mapping(self):
        p = coerce_point(MappingProxyType({"x": 1.0, "y": 2.0, "z": 3.0}))
        assert p == SurveyPoint(1.0, 2.0, 3.0)

    def test_survey_point(self):
        p = SurveyPoint(4.0, 5.0, 6.0)
        assert coerce_point(p) == p

    def test_numpy_scalars(self):
        p = coerce_point(np.array([1.0, 2.0, 3.0]))
        assert p == SurveyPoint(1.0, 2.0, 3.0)
        assert type(p.x) is float

    @pytest.mark.parametrize("candidate", [
        (1.0, 2.0, math.nan),
        (math.inf, 0.0, 0.0),
        (0.0, -math.inf, 0.0),
        ("1", 2.0, 3.0),
        (True, 2.0, 3.0),
        (1.0, 2.0),
        (1.0, 2.0, 3.0, 4.0),
        {"x": 1.0, "y": 2.0},
        None,
        "123",
    ])
    def test_rejects_invalid(self, candidate):
        assert coerce_point(candidate) is None


class TestValidatePoints:
    def test_filters_and_keeps_order(self):
        raw = [
            (0, 0, 0),
            (1, 0, math.nan),
            {"x": 1, "y": 1, "z": 2},
            ("a", 1, 2),
            SurveyPoint(0, 1, 1),
            None,
        ]
        valid = validate_points(raw)
        assert valid == [
            SurveyPoint(0.0, 0.0, 0.0),
            SurveyPoint(1.0, 1.0, 2.0),
            SurveyPoint(0.0, 1.0, 1.0),
        ]

    def test_mapping_proxy_points_are_filtered_not_fatal(self):
        raw = [
            MappingProxyType({"x": 0.0, "y": 0.0, "z": 0.0}),
            MappingProxyType({"x": 1.0, "y": 1.0}),
            (1, 0, 0),
            (0, 1, 0),
        ]
        valid = validate_points(raw)
        assert valid == [
            SurveyPoint(0.0, 0.0, 0.0),
            SurveyPoint(1.0, 0.0, 0.0),
            SurveyPoint(0.0, 1.0, 0.0),
        ]

    def test_keeps_duplicates(self):
        valid = validate_points([(0, 0, 0), (0, 0, 0), (1, 1, 1)])
        assert len(valid) == 3

    def test_accepts_generator(self):
        valid = validate_points((i, i * 2, i * 3) for i in range(4))
        assert len(valid) == 4

    def test_too_few_valid_points(self):
        with pytest.raises(InsufficientPointsError) as info:
            validate_points([(0, 0, 0), (1, 1, 1), (2, 2, math.nan)])
        assert info.value.valid_count == 2
        assert info.value.total_count == 3

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_points([])
        assert issubclass(InsufficientPointsError, TINError)
