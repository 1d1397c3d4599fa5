"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings
    - has_warning() method
    - Dimension and per-section timing lookup
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pygauss.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


class TestResultConstruction:
    """Result can be created with any payload type."""

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "test"},
            timing={"total_seconds": 0.01},
            backend_name="cpu_gauss",
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "test"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_gauss"

    def test_timing_none(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert result.timing is None

    def test_timing_with_breakdown(self):
        result = Result(
            params=FakeParams(1.0),
            info={},
            timing={"total_seconds": 1.0, "pivot_search": 0.2, "row_elimination": 0.7},
            backend_name="cpu_gauss_parallel",
        )
        assert result.timing["row_elimination"] == 0.7


class TestDefaults:

    def test_warnings_default_empty(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)


class TestImmutability:

    def test_cannot_reassign_params(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(2.0)

    def test_cannot_reassign_backend_name(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "other"


class TestHasWarning:

    def test_substring_match(self):
        result = Result(
            params=FakeParams(1.0),
            info={},
            timing=None,
            backend_name="cpu_verify",
            warnings=("Verification failed for index = 3: 1.0 != 2.0",),
        )
        assert result.has_warning("index = 3")
        assert not result.has_warning("index = 4")

    def test_no_warnings(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert not result.has_warning("anything")


class TestDimensionAndTiming:

    def test_n_defaults_to_none(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert result.n is None

    def test_n_recorded(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu", n=16)
        assert result.n == 16

    def test_seconds_by_section(self):
        result = Result(
            params=FakeParams(1.0),
            info={},
            timing={"total_seconds": 2.0, "back_substitution": 0.5},
            backend_name="cpu_gauss",
        )
        assert result.seconds() == 2.0
        assert result.seconds("back_substitution") == 0.5
        assert result.seconds("pivot_search") == 0.0

    def test_seconds_untimed(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        assert result.seconds() == 0.0
