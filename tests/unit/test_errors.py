"""
Unit tests for the numkit error taxonomy.
"""

import pytest

from numkit import (
    InvalidArgumentError,
    NegativeArgumentError,
    NumKitError,
    UndefinedOperationError,
    UnrecognizedFunctionError,
)


class TestHierarchy:
    """Tests for exception base classes."""

    def test_all_derive_from_base(self):
        """Every error is a NumKitError."""
        for cls in (
            InvalidArgumentError,
            NegativeArgumentError,
            UnrecognizedFunctionError,
            UndefinedOperationError,
        ):
            assert issubclass(cls, NumKitError)

    def test_invalid_argument_is_value_error(self):
        """Invalid-argument errors are ValueErrors."""
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(NegativeArgumentError, InvalidArgumentError)
        assert issubclass(UnrecognizedFunctionError, InvalidArgumentError)

    def test_undefined_is_arithmetic_error(self):
        """Undefined operations are ArithmeticErrors, not ValueErrors."""
        assert issubclass(UndefinedOperationError, ArithmeticError)
        assert not issubclass(UndefinedOperationError, ValueError)


class TestMessages:
    """Tests for message formatting."""

    def test_function_prefix(self):
        """The function name prefixes the message."""
        error = InvalidArgumentError("bad input", function="gcd")
        assert str(error) == "gcd: bad input"
        assert error.message == "bad input"

    def test_no_function(self):
        """Without a function the message stands alone."""
        assert str(NumKitError("oops")) == "oops"

    def test_unrecognized_lists_known_names(self):
        """Known names are listed in the message."""
        error = UnrecognizedFunctionError("foo", ["sin", "cos"])
        assert error.name == "foo"
        assert "sin, cos" in str(error)

    def test_undefined_fields(self):
        """Undefined errors carry function, argument and denominator."""
        error = UndefinedOperationError("sec", 1.5707963267948966, 6.1e-17)
        assert error.function == "sec"
        assert error.argument == 1.5707963267948966
        assert error.denominator == 6.1e-17

    def test_catchable_as_base(self):
        """Callers can catch the base class."""
        with pytest.raises(NumKitError):
            raise NegativeArgumentError("negative argument -1", function="factorial")
