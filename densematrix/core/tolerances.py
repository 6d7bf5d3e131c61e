"""
Tolerance tiers for numerical comparison.

Defines precision expectations for the two dtypes the library touches:
- FP32: entries as stored, results of multiplication and inversion
- FP64: determinants, accumulated in double precision

Used by Matrix.allclose and by the test suite.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Single precision storage: products and inverses drift in the 5th digit
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision entries, products and inverses',
)

# Double precision accumulation
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision determinant accumulation',
)


def select_tolerance(dtype: np.dtype | type) -> ToleranceTier:
    """Select the tolerance tier matching a floating dtype."""
    if np.dtype(dtype).itemsize >= 8:
        return FP64
    return FP32
