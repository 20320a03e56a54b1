"""
numkit - Scalar math helpers and an immutable complex-number type.

The scalar functions live in ``numkit.scalar_math``; the complex type and
its constants are re-exported here.
"""

from numkit import scalar_math
from numkit.complex import I, INFINITY, ONE, ZERO, Complex
from numkit.utils.errors import (
    InvalidArgumentError,
    NegativeArgumentError,
    NumKitError,
    UndefinedOperationError,
    UnrecognizedFunctionError,
)

__version__ = "0.1.0"
__all__ = [
    "Complex",
    "ZERO",
    "ONE",
    "I",
    "INFINITY",
    "scalar_math",
    "NumKitError",
    "InvalidArgumentError",
    "NegativeArgumentError",
    "UnrecognizedFunctionError",
    "UndefinedOperationError",
]
