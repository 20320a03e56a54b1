"""
Error types for numkit.

Numeric-degenerate results (division by a zero complex value, logarithm of
zero) are reported through IEEE NaN/inf and never raise. The classes here
cover the cases that must fail loudly.
"""

from typing import Optional


class NumKitError(Exception):
    """Base exception for all numkit errors."""

    def __init__(self, message: str, function: Optional[str] = None) -> None:
        self.message = message
        self.function = function
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.function:
            return f"{self.function}: {self.message}"
        return self.message


class InvalidArgumentError(NumKitError, ValueError):
    """Raised when an argument is malformed or outside the accepted domain."""

    pass


class NegativeArgumentError(InvalidArgumentError):
    """Raised when a function defined only for non-negative input gets n < 0."""

    pass


class UnrecognizedFunctionError(InvalidArgumentError):
    """
    Raised when a dispatch tag does not name a known function.

    Attributes:
        name: The tag that was passed in
        known: Tags that would have been accepted
    """

    def __init__(self, name: object, known: Optional[list[str]] = None) -> None:
        self.name = name
        self.known = known or []
        message = f"unrecognized function name {name!r}"
        if self.known:
            message += f" (expected one of: {', '.join(self.known)})"
        super().__init__(message, function="trig")


class UndefinedOperationError(NumKitError, ArithmeticError):
    """
    Raised when a reciprocal function is evaluated at a zero denominator.

    Attributes:
        argument: The input that hit the pole
        denominator: The denominator value that fell within tolerance of zero
    """

    def __init__(self, function: str, argument: float, denominator: float) -> None:
        self.argument = argument
        self.denominator = denominator
        super().__init__(
            f"undefined at {argument!r} (denominator {denominator!r} is zero within tolerance)",
            function=function,
        )
