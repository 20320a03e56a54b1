"""
numkit Utilities Package.

Error taxonomy shared by the scalar and complex modules.
"""

from numkit.utils.errors import (
    InvalidArgumentError,
    NegativeArgumentError,
    NumKitError,
    UndefinedOperationError,
    UnrecognizedFunctionError,
)

__all__ = [
    "NumKitError",
    "InvalidArgumentError",
    "NegativeArgumentError",
    "UnrecognizedFunctionError",
    "UndefinedOperationError",
]
