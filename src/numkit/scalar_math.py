"""
numkit Scalar Math.

Stateless scalar functions used directly by callers and by the complex type:
- Trigonometry, including a by-name dispatcher with reciprocal functions
- Powers, exponentials and logarithms
- Interpolation, clamping and wrapping
- Number theory
- Scientific notation helpers

Host primitives are numpy ufuncs evaluated with floating-point warnings
silenced, so domain errors and poles come back as NaN or +/-inf the way
IEEE-754 arithmetic defines them instead of raising. The one deliberate
exception is ``trig``, which fails on reciprocal poles.
"""

from __future__ import annotations

import builtins
import logging
import math as _math
from collections.abc import Iterable, Sequence
from numbers import Integral, Real
from typing import Final, Union

import numpy as np

from numkit.utils.errors import (
    InvalidArgumentError,
    NegativeArgumentError,
    UndefinedOperationError,
    UnrecognizedFunctionError,
)

logger = logging.getLogger(__name__)

Number = Union[int, float]

# =============================================================================
# Constants
# =============================================================================

PI: Final[float] = _math.pi
E: Final[float] = _math.e
TAU: Final[float] = _math.tau
INF: Final[float] = float("inf")
NAN: Final[float] = float("nan")

DEFAULT_TOLERANCE: Final[float] = 1e-10

TRIG_FUNCTIONS: Final[tuple[str, ...]] = (
    "sin", "cos", "tan", "csc", "sec", "cot",
    "asin", "acos", "atan", "acsc", "asec", "acot",
)


def _host(ufunc: np.ufunc, *args: Number) -> float:
    """Evaluate a numpy ufunc on scalars with IEEE semantics and return a float."""
    with np.errstate(all="ignore"):
        return float(ufunc(*(float(a) for a in args)))


def _require_int(value: object, function: str) -> int:
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise InvalidArgumentError(f"expected an integer, got {value!r}", function=function)


# =============================================================================
# Comparison
# =============================================================================

def approx_eq(a: float, b: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Return True when |a - b| <= tolerance."""
    return builtins.abs(a - b) <= tolerance


def sign(x: float) -> int:
    """Return sign of x: -1, 0, or 1."""
    if x > 0:
        return 1
    elif x < 0:
        return -1
    return 0


def min(*args) -> Number:
    """Return minimum value of the arguments or of a single iterable."""
    if len(args) == 1 and isinstance(args[0], Iterable):
        values = list(args[0])
        return INF if not values else builtins.min(values)
    return builtins.min(args)


def max(*args) -> Number:
    """Return maximum value of the arguments or of a single iterable."""
    if len(args) == 1 and isinstance(args[0], Iterable):
        values = list(args[0])
        return -INF if not values else builtins.max(values)
    return builtins.max(args)


# =============================================================================
# Trigonometry
# =============================================================================

def sin(x: float) -> float:
    """Sine of x (radians)."""
    return _host(np.sin, x)


def cos(x: float) -> float:
    """Cosine of x (radians)."""
    return _host(np.cos, x)


def tan(x: float) -> float:
    """Tangent of x (radians)."""
    return _host(np.tan, x)


def asin(x: float) -> float:
    """Arc sine in radians, NaN outside [-1, 1]."""
    return _host(np.arcsin, x)


def acos(x: float) -> float:
    """Arc cosine in radians, NaN outside [-1, 1]."""
    return _host(np.arccos, x)


def atan(x: float) -> float:
    """Arc tangent in radians."""
    return _host(np.arctan, x)


def atan2(y: float, x: float) -> float:
    """Arc tangent of y/x in radians, handling quadrants."""
    return _host(np.arctan2, y, x)


def sinh(x: float) -> float:
    """Hyperbolic sine."""
    return _host(np.sinh, x)


def cosh(x: float) -> float:
    """Hyperbolic cosine."""
    return _host(np.cosh, x)


def tanh(x: float) -> float:
    """Hyperbolic tangent."""
    return _host(np.tanh, x)


def deg_to_rad(x: float) -> float:
    """Convert degrees to radians."""
    return _host(np.deg2rad, x)


def rad_to_deg(x: float) -> float:
    """Convert radians to degrees."""
    return _host(np.rad2deg, x)


def _undefined(function: str, argument: float, denominator: float) -> UndefinedOperationError:
    logger.debug("trig(%r) undefined at %r: denominator %r", function, argument, denominator)
    return UndefinedOperationError(function, argument, denominator)


def trig(kind: str, angle: float, tolerance: float = DEFAULT_TOLERANCE) -> float:
    """
    Evaluate a trigonometric function selected by name.

    Names are matched case-insensitively against ``TRIG_FUNCTIONS``. The
    reciprocal functions and the inverse reciprocals check their
    denominator against ``tolerance`` and fail instead of returning an
    infinite or huge value.

    Args:
        kind: Function name, e.g. ``"sin"``, ``"CSC"``, ``"acot"``
        angle: Angle in radians, or the ratio for inverse functions
        tolerance: Denominators with magnitude at or below this are treated as zero

    Returns:
        The function value

    Raises:
        UndefinedOperationError: If a reciprocal's denominator is zero within tolerance
        UnrecognizedFunctionError: If ``kind`` is not a known function name

    Examples:
        >>> trig("sin", 0.0)
        0.0
        >>> trig("sec", 0.0)
        1.0
    """
    if not isinstance(kind, str):
        raise UnrecognizedFunctionError(kind, list(TRIG_FUNCTIONS))
    name = kind.strip().lower()

    if name == "sin":
        return sin(angle)
    if name == "cos":
        return cos(angle)
    if name == "asin":
        return asin(angle)
    if name == "acos":
        return acos(angle)
    if name == "atan":
        return atan(angle)

    if name in ("tan", "sec"):
        c = cos(angle)
        if approx_eq(c, 0.0, tolerance):
            raise _undefined(name, angle, c)
        return sin(angle) / c if name == "tan" else 1.0 / c

    if name in ("csc", "cot"):
        s = sin(angle)
        if approx_eq(s, 0.0, tolerance):
            raise _undefined(name, angle, s)
        return 1.0 / s if name == "csc" else cos(angle) / s

    if name == "acot" and approx_eq(angle, 0.0, tolerance):
        return PI / 2

    if name in ("acsc", "asec", "acot"):
        if approx_eq(angle, 0.0, tolerance):
            raise _undefined(name, angle, angle)
        inverse = {"acsc": asin, "asec": acos, "acot": atan}[name]
        return inverse(1.0 / angle)

    logger.debug("trig: unrecognized function name %r", kind)
    raise UnrecognizedFunctionError(kind, list(TRIG_FUNCTIONS))


# =============================================================================
# Powers and Logarithms
# =============================================================================

def divide(a: float, b: float) -> float:
    """IEEE float division: x/0 is +/-inf and 0/0 is NaN."""
    return _host(np.divide, a, b)


def sqrt(x: float) -> float:
    """Square root, NaN for negative x."""
    return _host(np.sqrt, x)


def cbrt(x: float) -> float:
    """Real cube root, keeping the sign of x."""
    return _host(np.cbrt, x)


def pow(base: float, exponent: float) -> float:
    """Power function; NaN for a negative base with a fractional exponent."""
    return _host(np.power, base, exponent)


def exp(x: float) -> float:
    """Exponential e^x, +inf on overflow."""
    return _host(np.exp, x)


def ln(x: float) -> float:
    """Natural logarithm; -inf at 0 and NaN for negative x."""
    return _host(np.log, x)


def log2(x: float) -> float:
    """Base-2 logarithm."""
    return _host(np.log2, x)


def log10(x: float) -> float:
    """Base-10 logarithm."""
    return _host(np.log10, x)


def log(value: float, base: float = E) -> float:
    """
    Logarithm of value in the given base, by change of base ln(value)/ln(base).

    Bases 2, 10 and e go straight to their dedicated primitives so exact
    powers give exact answers.
    """
    if base == 2:
        return log2(value)
    if base == 10:
        return log10(value)
    if base == E:
        return ln(value)
    return divide(ln(value), ln(base))


def hypot(*args: float) -> float:
    """Euclidean distance from origin."""
    return _math.hypot(*args)


# =============================================================================
# Interpolation and Ranges
# =============================================================================

def clamp(value: float, low: float, high: float) -> float:
    """Clamp value between low and high."""
    return low if value < low else (high if value > high else value)


def clamp01(value: float) -> float:
    """Clamp value to [0, 1]."""
    return clamp(value, 0.0, 1.0)


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b by factor t."""
    return a + (b - a) * t


def inverse_lerp(a: float, b: float, value: float) -> float:
    """Return t such that lerp(a, b, t) == value."""
    return divide(value - a, b - a)


def map_range(
    value: float,
    in_min: float,
    in_max: float,
    out_min: float,
    out_max: float,
) -> float:
    """Map value from [in_min, in_max] onto [out_min, out_max] linearly."""
    return lerp(out_min, out_max, inverse_lerp(in_min, in_max, value))


def mod(a: float, n: float) -> float:
    """Floored modulo; the result takes the sign of n. NaN when n is 0."""
    return _host(np.mod, a, n)


def wrap(value: float, low: float, high: float) -> float:
    """Wrap value into the half-open interval [low, high)."""
    result = low + mod(value - low, high - low)
    # a tiny negative offset can round up to a full period
    if result >= high:
        return low
    return result


# =============================================================================
# Number Theory
# =============================================================================

def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm, always non-negative."""
    a = _require_int(a, "gcd")
    b = _require_int(b, "gcd")
    while b:
        a, b = b, a % b
    return builtins.abs(a)


def lcm(a: int, b: int) -> int:
    """Least common multiple, always non-negative; 0 if either argument is 0."""
    a = _require_int(a, "lcm")
    b = _require_int(b, "lcm")
    if a == 0 or b == 0:
        return 0
    return builtins.abs(a * b) // gcd(a, b)


def factorial(n: int) -> int:
    """
    Factorial of n.

    Raises:
        NegativeArgumentError: If n < 0
        InvalidArgumentError: If n is not a whole number
    """
    n = _require_int(n, "factorial")
    if n < 0:
        logger.debug("factorial: negative argument %d", n)
        raise NegativeArgumentError(f"negative argument {n}", function="factorial")
    return _math.factorial(n)


def multiply_binomials(a: Sequence[Number], b: Sequence[Number]) -> list[Number]:
    """
    Multiply two binomials (a0*x + a1)(b0*x + b1).

    Args:
        a: Coefficients ``[a0, a1]``
        b: Coefficients ``[b0, b1]``

    Returns:
        Quadratic coefficients ``[a0*b0, a0*b1 + a1*b0, a1*b1]``

    Raises:
        InvalidArgumentError: If either argument is not exactly two numbers

    Examples:
        >>> multiply_binomials([1, 2], [1, 3])
        [1, 5, 6]
    """
    for binomial in (a, b):
        if (
            isinstance(binomial, (str, bytes))
            or not isinstance(binomial, Sequence)
            or len(binomial) != 2
            or not all(isinstance(c, Real) for c in binomial)
        ):
            raise InvalidArgumentError(
                f"binomial must be two numeric coefficients, got {binomial!r}",
                function="multiply_binomials",
            )
    a0, a1 = a
    b0, b1 = b
    return [a0 * b0, a0 * b1 + a1 * b0, a1 * b1]


# =============================================================================
# Scientific Notation
# =============================================================================

def to_scientific_notation(value: float) -> tuple[float, int]:
    """
    Split value into (mantissa, exponent) with 1 <= |mantissa| < 10.

    Zero maps to ``(0.0, 0)``.

    Raises:
        InvalidArgumentError: If value is NaN, infinite or too large for a float

    Examples:
        >>> to_scientific_notation(1500.0)
        (1.5, 3)
    """
    try:
        value = float(value)
    except OverflowError as err:
        raise InvalidArgumentError(
            f"cannot express {value!r} in scientific notation",
            function="to_scientific_notation",
        ) from err
    if value == 0.0:
        return (0.0, 0)
    if not _math.isfinite(value):
        raise InvalidArgumentError(
            f"cannot express {value!r} in scientific notation",
            function="to_scientific_notation",
        )

    exponent = _math.floor(_math.log10(builtins.abs(value)))
    if exponent < -300:
        # 10.0 ** exponent underflows to 0 near the subnormal range
        mantissa = (value * 1e300) / 10.0 ** (exponent + 300)
    else:
        mantissa = value / 10.0 ** exponent

    # log10 rounding can leave the mantissa one decade off
    if builtins.abs(mantissa) >= 10.0:
        mantissa /= 10.0
        exponent += 1
    elif builtins.abs(mantissa) < 1.0:
        mantissa *= 10.0
        exponent -= 1
    return (mantissa, exponent)


def from_scientific_notation(notation: Sequence[Number]) -> float:
    """Inverse of to_scientific_notation: mantissa * 10**exponent."""
    if isinstance(notation, (str, bytes)) or not isinstance(notation, Sequence) or len(notation) != 2:
        raise InvalidArgumentError(
            f"expected (mantissa, exponent), got {notation!r}",
            function="from_scientific_notation",
        )
    mantissa, exponent = notation
    if exponent < -300:
        return (float(mantissa) * pow(10.0, exponent + 300)) * 1e-300
    return float(mantissa) * pow(10.0, exponent)


def is_valid_scientific_notation(notation: Sequence[Number]) -> bool:
    """
    Check that notation is a (mantissa, exponent) pair in normalized form.

    The mantissa must satisfy 1 <= |mantissa| < 10 and the exponent must be
    a whole number. ``(0, 0)`` is accepted as the representation of zero.
    """
    if isinstance(notation, (str, bytes)) or not isinstance(notation, Sequence) or len(notation) != 2:
        return False
    mantissa, exponent = notation
    if not isinstance(mantissa, Real) or not isinstance(exponent, Real):
        return False
    if mantissa == 0 and exponent == 0:
        return True
    if not 1.0 <= builtins.abs(mantissa) < 10.0:
        return False
    return isinstance(exponent, Integral) or float(exponent).is_integer()


__all__ = [
    "PI", "E", "TAU", "INF", "NAN", "DEFAULT_TOLERANCE", "TRIG_FUNCTIONS",
    "approx_eq", "sign", "min", "max",
    "sin", "cos", "tan", "asin", "acos", "atan", "atan2",
    "sinh", "cosh", "tanh", "deg_to_rad", "rad_to_deg", "trig",
    "divide", "sqrt", "cbrt", "pow", "exp", "ln", "log2", "log10", "log", "hypot",
    "clamp", "clamp01", "lerp", "inverse_lerp", "map_range", "mod", "wrap",
    "gcd", "lcm", "factorial", "multiply_binomials",
    "to_scientific_notation", "from_scientific_notation", "is_valid_scientific_notation",
]
