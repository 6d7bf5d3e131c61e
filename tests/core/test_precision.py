"""
Tests for precision constants and tolerance tiers.
"""

import numpy as np
import pytest

from densematrix.core.precision import (
    ACCUMULATOR_DTYPE,
    EPSILON_32,
    EPSILON_64,
    STORAGE_DTYPE,
    is_close,
    machine_epsilon,
)
from densematrix.core.tolerances import FP32, FP64, ToleranceTier, select_tolerance


class TestPrecision:

    def test_storage_is_single_precision(self):
        assert np.dtype(STORAGE_DTYPE) == np.float32
        assert np.dtype(ACCUMULATOR_DTYPE) == np.float64

    def test_epsilons(self):
        assert EPSILON_32 == machine_epsilon(np.float32)
        assert EPSILON_64 == machine_epsilon(np.float64)
        assert EPSILON_32 > EPSILON_64

    def test_default_epsilon_is_storage(self):
        assert machine_epsilon() == EPSILON_32

    def test_is_close_scalar(self):
        assert is_close(1.0, 1.0 + 1e-6, rtol=1e-4, atol=0.0)
        assert not is_close(1.0, 1.1, rtol=1e-4, atol=0.0)

    def test_is_close_array(self):
        a = np.array([1.0, 2.0], dtype=np.float32)
        b = np.array([1.0, 2.5], dtype=np.float32)
        np.testing.assert_array_equal(is_close(a, b, rtol=1e-4, atol=1e-5), [True, False])


class TestTolerances:

    def test_tiers_are_frozen(self):
        with pytest.raises(AttributeError):
            FP32.rtol = 1.0

    def test_fp32_looser_than_fp64(self):
        assert FP32.rtol > FP64.rtol
        assert FP32.atol > FP64.atol

    def test_select_tolerance(self):
        assert select_tolerance(np.float32) is FP32
        assert select_tolerance(np.float64) is FP64

    def test_tier_type(self):
        assert isinstance(FP32, ToleranceTier)
        assert FP32.name == 'fp32'
