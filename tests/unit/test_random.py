"""
Unit tests for the numkit random helpers.
"""

import math

import pytest

from numkit import random as nk_random
from numkit.complex import Complex


class TestSeeding:
    """Tests for reproducibility."""

    def test_same_seed_same_sequence(self, seeded):
        """Reseeding replays the same draws."""
        first = [nk_random.random() for _ in range(5)]
        seeded()
        second = [nk_random.random() for _ in range(5)]
        assert first == second

    def test_different_seed_differs(self, seeded):
        """Different seeds give different draws."""
        first = nk_random.random()
        seeded(99)
        assert nk_random.random() != first


class TestRanges:
    """Tests for output ranges."""

    def test_random_in_unit_interval(self, seeded):
        """random() stays in [0, 1)."""
        for _ in range(200):
            assert 0.0 <= nk_random.random() < 1.0

    def test_uniform_bounds(self, seeded):
        """uniform(a, b) stays in [a, b]."""
        for _ in range(200):
            assert -2.0 <= nk_random.uniform(-2.0, 3.0) <= 3.0

    def test_random_int_inclusive(self, seeded):
        """random_int covers both endpoints."""
        draws = {nk_random.random_int(1, 3) for _ in range(300)}
        assert draws == {1, 2, 3}

    def test_random_angle(self, seeded):
        """random_angle stays in [0, 2*pi)."""
        for _ in range(200):
            assert 0.0 <= nk_random.random_angle() < math.tau

    def test_random_unit_complex(self, seeded):
        """random_unit_complex lies on the unit circle."""
        for _ in range(50):
            z = nk_random.random_unit_complex()
            assert isinstance(z, Complex)
            assert z.magnitude == pytest.approx(1.0, abs=1e-12)
