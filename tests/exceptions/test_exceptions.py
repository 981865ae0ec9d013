"""Tests for the Cohesion Peek exception hierarchy."""

from pathlib import Path

import pytest

from cohesion_peek.exceptions import (
    AggregationError,
    AnalysisError,
    CohesionPeekError,
    ComputationError,
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
    ParsingError,
    PreconditionError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "error, parent",
        [
            (InvalidPathError(Path("x"), "missing"), ConfigurationError),
            (InvalidConfigError("workers", 0, "too small"), ConfigurationError),
            (PreconditionError(Path("out")), ConfigurationError),
            (ParsingError(Path("a.py"), "bad"), AnalysisError),
            (ComputationError("LCOM", "boom"), AnalysisError),
            (AggregationError("empty"), AnalysisError),
        ],
    )
    def test_all_are_cohesion_peek_errors(self, error, parent):
        assert isinstance(error, parent)
        assert isinstance(error, CohesionPeekError)


class TestMessages:
    def test_details_appended(self):
        error = CohesionPeekError("Something failed", details={"file": "a.py"})
        assert str(error) == "Something failed (file=a.py)"

    def test_details_stored_as_text(self):
        error = ComputationError("OCC", "boom", missing=2)
        assert error.details == {"metric": "OCC", "reason": "boom", "missing": "2"}
        assert str(error) == "Metric OCC failed (metric=OCC, reason=boom, missing=2)"

    def test_plain_message(self):
        assert str(CohesionPeekError("Something failed")) == "Something failed"

    def test_precondition(self):
        error = PreconditionError(Path("/tmp/out"))
        assert error.message == "Directory/file already exists: /tmp/out"
        assert error.path == Path("/tmp/out")

    def test_computation_missing_count(self):
        error = ComputationError("OCC", "no score for A", missing=3)
        assert error.message == "Metric OCC failed"
        assert error.details["missing"] == "3"
        assert "missing" not in ComputationError("OCC", "boom").details

    def test_aggregation_source(self):
        error = AggregationError("bad value", source=Path("M1.xml"))
        assert error.message == "Cannot aggregate scores: bad value"
        assert error.details["source"] == "M1.xml"

    def test_invalid_config_fields(self):
        error = InvalidConfigError("badge_style", "square", "must be 'round' or 'flat'")
        assert (error.key, error.value) == ("badge_style", "square")
        assert "badge_style" in str(error)
