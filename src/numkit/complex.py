"""
numkit Complex Numbers.

An immutable ``a + bi`` value type with rectangular and polar constructors,
arithmetic operators, and exponentials/powers computed through the polar
(log-exp) identities on the principal branch.

Degenerate inputs follow IEEE float semantics: dividing by a zero value
gives NaN/inf parts, the logarithm of zero has a real part of -inf, and
nothing here raises for them.
"""

from __future__ import annotations

import logging
import math as _math
import numbers
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

import numpy as np

from numkit import scalar_math as sm

logger = logging.getLogger(__name__)

Operand = Union["Complex", int, float, complex]


def _coerce(value: object) -> Optional[Complex]:
    """Convert a real or complex operand to Complex, or None if unsupported."""
    if isinstance(value, Complex):
        return value
    if isinstance(value, numbers.Real):
        return Complex(float(value), 0.0)
    if isinstance(value, numbers.Complex):
        return Complex(float(value.real), float(value.imag))
    return None


@dataclass(frozen=True, slots=True, eq=False)
class Complex:
    """
    A complex number ``real + imag*i``.

    Attributes:
        real: Real part
        imag: Imaginary part

    Both parts are stored as floats and may be NaN or infinite. Equality is
    tolerance based (see ``equals``), so instances are not hashable.

    Examples:
        >>> Complex(3, 4).magnitude
        5.0
        >>> str(Complex(1, -2))
        '1.0-2.0i'
    """

    real: float = 0.0
    imag: float = 0.0

    ZERO: ClassVar[Complex]
    ONE: ClassVar[Complex]
    I: ClassVar[Complex]
    INFINITY: ClassVar[Complex]

    def __post_init__(self) -> None:
        object.__setattr__(self, "real", float(self.real))
        object.__setattr__(self, "imag", float(self.imag))

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_real(cls, r: float) -> Complex:
        """Complex value with imaginary part 0."""
        return cls(r, 0.0)

    @classmethod
    def from_polar(cls, r: float, theta: float) -> Complex:
        """Complex value ``r*cos(theta) + i*r*sin(theta)``."""
        return cls(r * sm.cos(theta), r * sm.sin(theta))

    @classmethod
    def cis(cls, theta: float) -> Complex:
        """Unit value ``cos(theta) + i*sin(theta)`` (Euler's formula)."""
        return cls(sm.cos(theta), sm.sin(theta))

    @classmethod
    def from_numpy(cls, value: np.complexfloating) -> Complex:
        """Build from a numpy complex scalar."""
        return cls(float(np.real(value)), float(np.imag(value)))

    def to_numpy(self) -> np.complex128:
        """Convert to a numpy complex128 scalar."""
        return np.complex128(complex(self.real, self.imag))

    def copy(self) -> Complex:
        """Return an equal value. Instances are immutable, so this is self."""
        return self

    # -------------------------------------------------------------------------
    # Derived properties
    # -------------------------------------------------------------------------

    @property
    def magnitude(self) -> float:
        """Distance from the origin, sqrt(real^2 + imag^2)."""
        return _math.hypot(self.real, self.imag)

    @property
    def angle(self) -> float:
        """Argument atan2(imag, real) in (-pi, pi]; 0 for the zero value."""
        return sm.atan2(self.imag, self.real)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: Complex) -> Complex:
        return Complex(self.real + other.real, self.imag + other.imag)

    def sub(self, other: Complex) -> Complex:
        return Complex(self.real - other.real, self.imag - other.imag)

    def mult(self, other: Complex) -> Complex:
        return Complex(
            self.real * other.real - self.imag * other.imag,
            self.real * other.imag + self.imag * other.real,
        )

    def div(self, other: Complex) -> Complex:
        """
        Divide by other via the conjugate: (self * conj(other)) / |other|^2.

        A zero divisor is not guarded; the parts come out NaN or infinite
        exactly as float division defines them.
        """
        denominator = other.real * other.real + other.imag * other.imag
        if denominator == 0.0:
            logger.debug("Complex division by zero value: %s / %s", self, other)
        numerator = self.mult(other.conj())
        return Complex(
            sm.divide(numerator.real, denominator),
            sm.divide(numerator.imag, denominator),
        )

    def conj(self) -> Complex:
        """Complex conjugate."""
        return Complex(self.real, -self.imag)

    def scale(self, k: float) -> Complex:
        """Multiply both parts by the real scalar k."""
        return Complex(self.real * k, self.imag * k)

    def negate(self) -> Complex:
        return Complex(-self.real, -self.imag)

    # -------------------------------------------------------------------------
    # Exponentials and powers
    # -------------------------------------------------------------------------

    def exp(self) -> Complex:
        """e^self = e^real * (cos(imag) + i*sin(imag))."""
        return Complex.cis(self.imag).scale(sm.exp(self.real))

    def log(self) -> Complex:
        """Principal natural logarithm (ln|self|, angle(self))."""
        return Complex(sm.ln(self.magnitude), self.angle)

    def pow(self, n: float) -> Complex:
        """
        Principal-branch power via polar form (De Moivre).

        Computes ``from_polar(|self|**n, angle*n)``. For non-integer n this
        is the natural extension of De Moivre's theorem, not a full
        multi-valued complex power.
        """
        return Complex.from_polar(sm.pow(self.magnitude, n), self.angle * n)

    def pow_c(self, w: Operand) -> Complex:
        """Generalized power self**w = exp(w * log(self)) on the principal branch."""
        exponent = _coerce(w)
        if exponent is None:
            raise TypeError(f"unsupported exponent type: {type(w).__name__}")
        return exponent.mult(self.log()).exp()

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def equals(self, other: Operand, tolerance: float = sm.DEFAULT_TOLERANCE) -> bool:
        """True when both parts differ by at most tolerance."""
        value = _coerce(other)
        if value is None:
            return False
        return sm.approx_eq(self.real, value.real, tolerance) and sm.approx_eq(
            self.imag, value.imag, tolerance
        )

    def __eq__(self, other: object) -> bool:
        if _coerce(other) is None:
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    # -------------------------------------------------------------------------
    # Operator sugar
    # -------------------------------------------------------------------------

    def __add__(self, other: Operand) -> Complex:
        value = _coerce(other)
        return NotImplemented if value is None else self.add(value)

    def __radd__(self, other: Operand) -> Complex:
        value = _coerce(other)
        return NotImplemented if value is None else value.add(self)

    def __sub__(self, other: Operand) -> Complex:
        value = _coerce(other)
        return NotImplemented if value is None else self.sub(value)

    def __rsub__(self, other: Operand) -> Complex:
        value = _coerce(other)
        return NotImplemented if value is None else value.sub(self)

    def __mul__(self, other: Operand) -> Complex:
        value = _coerce(other)
        return NotImplemented if value is None else self.mult(value)

    def __rmul__(self, other: Operand) -> Complex:
        value = _coerce(other)
        return NotImplemented if value is None else value.mult(self)

    def __truediv__(self, other: Operand) -> Complex:
        value = _coerce(other)
        return NotImplemented if value is None else self.div(value)

    def __rtruediv__(self, other: Operand) -> Complex:
        value = _coerce(other)
        return NotImplemented if value is None else value.div(self)

    def __pow__(self, exponent: Operand) -> Complex:
        if isinstance(exponent, numbers.Real):
            return self.pow(exponent)
        if _coerce(exponent) is None:
            return NotImplemented
        return self.pow_c(exponent)

    def __rpow__(self, base: Operand) -> Complex:
        value = _coerce(base)
        return NotImplemented if value is None else value.pow_c(self)

    def __neg__(self) -> Complex:
        return self.negate()

    def __abs__(self) -> float:
        return self.magnitude

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __str__(self) -> str:
        sign = "-" if self.imag < 0 else "+"
        return f"{self.real}{sign}{abs(self.imag)}i"


# =============================================================================
# Constants
# =============================================================================

ZERO = Complex(0.0, 0.0)
ONE = Complex(1.0, 0.0)
I = Complex(0.0, 1.0)
INFINITY = Complex(sm.INF, sm.INF)

Complex.ZERO = ZERO
Complex.ONE = ONE
Complex.I = I
Complex.INFINITY = INFINITY


def cis(theta: float) -> Complex:
    """Unit complex value at angle theta."""
    return Complex.cis(theta)


def exp(z: Union[Complex, float]) -> Complex:
    """
    Complex exponential.

    A real argument theta is taken as a pure rotation and gives
    ``cis(theta)``, a unit-magnitude value. A Complex argument gives
    ``e^real * cis(imag)``.
    """
    if isinstance(z, numbers.Real):
        return Complex.cis(z)
    value = _coerce(z)
    if value is None:
        raise TypeError(f"unsupported argument type: {type(z).__name__}")
    return value.exp()


__all__ = ["Complex", "ZERO", "ONE", "I", "INFINITY", "cis", "exp"]
