"""
numkit Random Module.

Uniform random helpers backed by a single module-level generator. This is
the only stateful part of numkit; nothing in scalar_math or complex uses it.
"""

from __future__ import annotations

import random as _random

from numkit import scalar_math as sm
from numkit.complex import Complex

# Global random generator
_rng = _random.Random()


def set_seed(seed: int) -> None:
    """Set random seed for reproducibility."""
    _rng.seed(seed)


def random() -> float:
    """Return random float in [0, 1)."""
    return _rng.random()


def uniform(a: float, b: float) -> float:
    """Return random value from uniform distribution [a, b]."""
    return _rng.uniform(a, b)


def random_int(a: int, b: int) -> int:
    """Return random integer in [a, b] inclusive."""
    return _rng.randint(a, b)


def random_angle() -> float:
    """Return random angle in [0, 2*pi)."""
    return _rng.random() * sm.TAU


def random_unit_complex() -> Complex:
    """Return a unit-magnitude complex value at a random angle."""
    return Complex.cis(random_angle())


__all__ = [
    "set_seed",
    "random",
    "uniform",
    "random_int",
    "random_angle",
    "random_unit_complex",
]
