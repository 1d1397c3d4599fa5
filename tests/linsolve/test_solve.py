"""
End-to-end tests for solve(): small hand-checked systems, backend
selection, overwrite semantics and agreement with a reference solver.
"""

import warnings

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import linalg

from pygauss import solve, verify
from pygauss.core.capabilities import CAPABILITY_MATERIALIZED
from pygauss.core.exceptions import SingularMatrixError, ValidationError, VerificationWarning
from pygauss.linsolve import SystemDesign
from pygauss.linsolve.solvers import PARALLEL_THRESHOLD


# ═══════════════════════════════════════════════════════════════════════
# Hand-checked systems
# ═══════════════════════════════════════════════════════════════════════


class TestSmallSystems:

    def test_one_by_one(self):
        result = solve([[5.0]], [10.0])
        assert_allclose(result.x, [2.0])
        check = result.verify()
        assert check.passed
        assert check.ratios[0] == 1.0

    def test_swap_required(self):
        result = solve([[0.0, 1.0], [1.0, 0.0]], [3.0, 4.0])
        np.testing.assert_array_equal(result.x, [4.0, 3.0])
        assert result.n_swaps == 1
        np.testing.assert_array_equal(result.permutation, [1, 0])

    def test_singular_first_column(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            solve([[0.0, 0.0], [0.0, 1.0]], [1.0, 1.0])
        assert exc_info.value.column == 0

    def test_singular_message(self):
        with pytest.raises(SingularMatrixError, match="singular"):
            solve(np.ones((3, 3)), np.ones(3))

    def test_identity(self):
        b = np.array([1.5, -2.0, 3.25])
        result = solve(np.eye(3), b)
        np.testing.assert_array_equal(result.x, b)
        assert result.n_swaps == 0

    def test_pivot_magnitudes_recorded(self):
        result = solve([[1.0, 2.0], [3.0, 4.0]], [5.0, 6.0])
        assert result.pivot_magnitudes[0] == 3.0
        assert result.pivot_magnitudes.shape == (2,)


# ═══════════════════════════════════════════════════════════════════════
# Accuracy
# ═══════════════════════════════════════════════════════════════════════


class TestAccuracy:

    def test_recovers_known_solution(self, dominant_system):
        A, b, x_true = dominant_system
        result = solve(A, b)
        assert_allclose(result.x, x_true, rtol=1e-10)

    @pytest.mark.parametrize("backend", ['cpu', 'cpu_parallel'])
    def test_matches_scipy(self, general_system, backend):
        A, b = general_system
        result = solve(A, b, backend=backend, n_workers=None if backend == 'cpu_parallel' else 1)
        assert_allclose(result.x, linalg.solve(A, b), rtol=1e-8, atol=1e-10)

    def test_seeded_system_verifies(self):
        design = SystemDesign.from_seed(411, 64, kind='diagonally_dominant')
        result = solve(design)
        assert result.verify().passed

    def test_caller_arrays_untouched(self, general_system):
        A, b = general_system
        A0, b0 = A.copy(), b.copy()
        solve(A, b)
        np.testing.assert_array_equal(A, A0)
        np.testing.assert_array_equal(b, b0)


# ═══════════════════════════════════════════════════════════════════════
# Serial vs parallel
# ═══════════════════════════════════════════════════════════════════════


class TestSerialParallelAgreement:

    def test_small_seeded_system(self):
        design = SystemDesign.from_seed(7, 3, kind='diagonally_dominant')
        serial = solve(design, backend='cpu')
        parallel = solve(design, backend='cpu_parallel', n_workers=2, grain=1)
        assert_allclose(serial.x, parallel.x, rtol=1e-12)
        np.testing.assert_array_equal(serial.permutation, parallel.permutation)

    @pytest.mark.parametrize("n_workers", [2, 3, 8])
    def test_same_pivots_any_worker_count(self, general_system, n_workers):
        A, b = general_system
        serial = solve(A, b, backend='cpu')
        parallel = solve(A, b, backend='cpu_parallel', n_workers=n_workers, grain=1)
        np.testing.assert_array_equal(serial.permutation, parallel.permutation)
        assert_allclose(serial.x, parallel.x, rtol=1e-12, atol=1e-14)

    def test_parallel_singular(self):
        with pytest.raises(SingularMatrixError):
            solve(np.zeros((40, 40)), np.ones(40), backend='cpu_parallel', n_workers=4, grain=1)


# ═══════════════════════════════════════════════════════════════════════
# Backend selection
# ═══════════════════════════════════════════════════════════════════════


class TestBackendSelection:

    def test_cpu_name(self):
        result = solve(np.eye(2), np.ones(2), backend='cpu')
        assert result.backend_name == 'cpu_gauss'
        assert result.info['n_workers'] == 1

    def test_parallel_name(self):
        result = solve(np.eye(2), np.ones(2), backend='cpu_parallel', n_workers=3)
        assert result.backend_name == 'cpu_gauss_parallel'
        assert result.info['n_workers'] == 3

    def test_auto_small_is_serial(self):
        result = solve(np.eye(4), np.ones(4), n_workers=4)
        assert result.backend_name == 'cpu_gauss'

    def test_auto_large_is_parallel(self):
        n = PARALLEL_THRESHOLD
        A = np.eye(n) * 2.0
        result = solve(A, np.ones(n), n_workers=2)
        assert result.backend_name == 'cpu_gauss_parallel'
        assert_allclose(result.x, 0.5)

    def test_auto_single_worker_is_serial(self):
        n = PARALLEL_THRESHOLD
        result = solve(np.eye(n), np.ones(n), n_workers=1)
        assert result.backend_name == 'cpu_gauss'

    def test_cpu_rejects_workers(self):
        with pytest.raises(ValidationError, match="serial"):
            solve(np.eye(2), np.ones(2), backend='cpu', n_workers=4)

    @pytest.mark.parametrize("n_workers", [0, -1, 2.5])
    def test_invalid_workers(self, n_workers):
        with pytest.raises(ValidationError, match="n_workers"):
            solve(np.eye(2), np.ones(2), backend='cpu_parallel', n_workers=n_workers)

    def test_invalid_grain(self):
        with pytest.raises(ValidationError, match="grain"):
            solve(np.eye(2), np.ones(2), backend='cpu_parallel', n_workers=2, grain=0)

    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown backend"):
            solve(np.eye(2), np.ones(2), backend='gpu')

    def test_timing_sections(self):
        result = solve(np.eye(3), np.ones(3))
        assert {'total_seconds', 'forward_elimination', 'back_substitution'} <= set(result.timing)


# ═══════════════════════════════════════════════════════════════════════
# Inputs and overwrite
# ═══════════════════════════════════════════════════════════════════════


class TestInputs:

    def test_b_required(self):
        with pytest.raises(ValueError, match="b required"):
            solve(np.eye(2))

    def test_b_with_design_rejected(self):
        design = SystemDesign.from_arrays(np.eye(2), np.ones(2))
        with pytest.raises(ValueError, match="b must be None"):
            solve(design, np.ones(2))

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError):
            solve([[1.0, np.inf], [0.0, 1.0]], [1.0, 1.0])


class TestOverwrite:

    def test_overwrite_consumes_inputs(self, general_system):
        A, b = general_system
        A_work, b_work = A.copy(), b.copy()
        result = solve(A_work, b_work, overwrite=True)
        assert result.info['consumed']
        assert not np.array_equal(A_work, A)
        assert_allclose(result.x, linalg.solve(A, b), rtol=1e-8, atol=1e-10)

    def test_consumed_arrays_cannot_verify(self):
        A = np.array([[2.0, 1.0], [4.0, 3.0]])
        b = np.array([3.0, 7.0])
        result = solve(A, b, overwrite=True)
        with pytest.raises(ValidationError, match="consumed"):
            result.verify()

    def test_consumed_seeded_design_regenerates(self):
        design = SystemDesign.from_seed(411, 32, kind='diagonally_dominant')
        result = solve(design, overwrite=True)
        assert result.info['consumed']
        assert result.verify().passed

    def test_copy_mode_verifies_from_design(self, dominant_system):
        A, b, _ = dominant_system
        result = solve(A, b)
        assert not result.info['consumed']
        assert result.verify().passed

    def test_standalone_verify_with_copy(self, dominant_system):
        A, b, _ = dominant_system
        result = solve(A.copy(), b.copy(), overwrite=True)
        with warnings.catch_warnings():
            warnings.simplefilter("error", VerificationWarning)
            assert verify(A, b, result.x).passed


class TestConsumedDesign:
    """A design solved with overwrite=True no longer holds its system."""

    def test_seeded_design_resolved_after_overwrite(self):
        design = SystemDesign.from_seed(3, 5, kind='diagonally_dominant')
        first = solve(design, overwrite=True)
        assert design.consumed
        second = solve(design)
        assert_allclose(second.x, first.x, rtol=1e-12)
        original = design.regenerate()
        assert_allclose(second.x, linalg.solve(original.A, original.b), rtol=1e-10)
        assert second.verify().passed

    def test_array_design_rejected_after_overwrite(self):
        design = SystemDesign.from_arrays(np.array([[2.0, 1.0], [4.0, 3.0]]), np.array([3.0, 7.0]))
        solve(design, overwrite=True)
        with pytest.raises(ValidationError, match="consumed"):
            solve(design)

    def test_earlier_solution_cannot_verify_after_overwrite(self):
        design = SystemDesign.from_arrays(np.array([[2.0, 1.0], [4.0, 3.0]]), np.array([3.0, 7.0]))
        earlier = solve(design)
        assert not design.consumed
        solve(design, overwrite=True)
        with pytest.raises(ValidationError, match="consumed"):
            earlier.verify()

    def test_verify_regenerates_consumed_seeded_design(self):
        design = SystemDesign.from_seed(411, 16, kind='diagonally_dominant')
        result = solve(design, overwrite=True)
        with warnings.catch_warnings():
            warnings.simplefilter("error", VerificationWarning)
            assert verify(design, None, result.x).passed

    def test_singular_overwrite_still_marks_consumed(self):
        design = SystemDesign.from_arrays(np.ones((3, 3)), np.ones(3))
        with pytest.raises(SingularMatrixError):
            solve(design, overwrite=True)
        assert design.consumed
        assert not design.supports(CAPABILITY_MATERIALIZED)

    def test_copy_solve_leaves_design_intact(self, dominant_system):
        A, b, _ = dominant_system
        design = SystemDesign.from_arrays(A, b)
        solve(design)
        assert not design.consumed
        assert design.supports(CAPABILITY_MATERIALIZED)

    def test_verify_by_band_name(self):
        result = solve(np.eye(2), np.ones(2))
        assert result.verify(band='fp64_relaxed').info['band'] == 'fp64_relaxed'


# ═══════════════════════════════════════════════════════════════════════
# Reporting
# ═══════════════════════════════════════════════════════════════════════


class TestReporting:

    def test_summary(self):
        result = solve([[0.0, 1.0], [1.0, 0.0]], [3.0, 4.0])
        text = result.summary()
        assert "Dimension: 2" in text
        assert "Row swaps: 1" in text
        assert "Backend: cpu_gauss" in text

    def test_repr(self):
        result = solve(np.eye(2), np.ones(2), backend='cpu')
        assert repr(result) == "GaussSolution(n=2, backend='cpu_gauss', n_swaps=0)"

    def test_verification_repr(self):
        check = solve(np.eye(2), np.ones(2)).verify()
        assert repr(check) == "VerificationSolution(n=2, passed=True, n_failed=0)"
