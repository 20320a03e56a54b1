"""
Pytest configuration and shared fixtures for numkit tests.
"""

import math

import pytest

from numkit import random as nk_random
from numkit.complex import Complex


@pytest.fixture
def nonzero_complex_values() -> list[Complex]:
    """Non-zero values covering every quadrant and both axes."""
    return [
        Complex(3, 4),
        Complex(-1.5, 2.25),
        Complex(-0.75, -8),
        Complex(6, -0.5),
        Complex(2, 0),
        Complex(-2, 0),
        Complex(0, 7),
        Complex(0, -0.125),
        Complex(1e-3, 1e-3),
    ]


@pytest.fixture
def real_values() -> list[float]:
    """Assorted finite reals including signed zeros and large magnitudes."""
    return [0.0, -0.0, 1.0, -1.0, 2.5, -17.25, 1e-8, 1e8, math.pi]


@pytest.fixture
def angles() -> list[float]:
    """Finite angles in radians, inside and outside (-pi, pi]."""
    return [0.0, 0.3, -1.2, math.pi / 2, math.pi, -math.pi / 3, 7.5, -42.0]


@pytest.fixture
def seeded():
    """Seed the module generator and return a factory that reseeds it."""

    def _seed(seed: int = 1234) -> None:
        nk_random.set_seed(seed)

    _seed()
    return _seed
