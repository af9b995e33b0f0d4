"""Error types: dual struct+exception for Result and raise-based code.

The struct variants are the payloads carried by `Err`; each converts to an
exception with `to_exception()` for callers that prefer to raise, and each
exception converts back with `to_struct()`.
"""

from __future__ import annotations

import msgspec

__all__ = [
    'DivisionByZero',
    'DivisionByZeroError',
    'FerrumError',
    'IndexOutOfBounds',
    'IndexOutOfBoundsError',
    'IntegerOverflow',
    'IntegerOverflowError',
    'OutOfDomain',
    'OutOfDomainError',
]


class FerrumError(Exception):
    """Base class for the exception variants below."""


# --- Arithmetic Errors ---


class DivisionByZero(msgspec.Struct, frozen=True, gc=False):
    """Divisor was zero - struct variant for Result[T, DivisionByZero]."""

    @property
    def message(self) -> str:
        return 'Division by zero'

    def __str__(self) -> str:
        return self.message

    def to_exception(self) -> DivisionByZeroError:
        """Convert to exception for raise-based code."""
        return DivisionByZeroError()


class DivisionByZeroError(FerrumError):
    """Divisor was zero - exception variant."""

    def __init__(self) -> None:
        super().__init__('Division by zero')

    def to_struct(self) -> DivisionByZero:
        """Convert to struct for Result-based code."""
        return DivisionByZero()


class IntegerOverflow(msgspec.Struct, frozen=True, gc=False):
    """Result left the representable range - struct variant for Result[T, IntegerOverflow]."""

    operation: str | None = None

    @property
    def message(self) -> str:
        if self.operation:
            return f'Integer overflow in {self.operation}'
        return 'Integer overflow'

    def __str__(self) -> str:
        return self.message

    def to_exception(self) -> IntegerOverflowError:
        """Convert to exception for raise-based code."""
        return IntegerOverflowError(self.operation)


class IntegerOverflowError(FerrumError):
    """Result left the representable range - exception variant."""

    def __init__(self, operation: str | None = None) -> None:
        self.operation = operation
        super().__init__(IntegerOverflow(operation).message)

    def to_struct(self) -> IntegerOverflow:
        """Convert to struct for Result-based code."""
        return IntegerOverflow(self.operation)


class OutOfDomain(msgspec.Struct, frozen=True, gc=False):
    """Operand outside the domain of a function (e.g. sqrt of a negative).

    Struct variant for Result[T, OutOfDomain].
    """

    operation: str
    value: int

    @property
    def message(self) -> str:
        return f'{self.value} is outside the domain of {self.operation}'

    def __str__(self) -> str:
        return self.message

    def to_exception(self) -> OutOfDomainError:
        """Convert to exception for raise-based code."""
        return OutOfDomainError(self.operation, self.value)


class OutOfDomainError(FerrumError):
    """Operand outside the domain of a function - exception variant."""

    def __init__(self, operation: str, value: int) -> None:
        self.operation = operation
        self.value = value
        super().__init__(OutOfDomain(operation, value).message)

    def to_struct(self) -> OutOfDomain:
        """Convert to struct for Result-based code."""
        return OutOfDomain(self.operation, self.value)


# --- Collection Errors ---


class IndexOutOfBounds(msgspec.Struct, frozen=True, gc=False):
    """Index outside [0, size) - struct variant for Result[T, IndexOutOfBounds]."""

    index: int
    size: int

    @property
    def message(self) -> str:
        return f'Index {self.index} is out of bounds for size {self.size}'

    def __str__(self) -> str:
        return self.message

    def to_exception(self) -> IndexOutOfBoundsError:
        """Convert to exception for raise-based code."""
        return IndexOutOfBoundsError(self.index, self.size)


class IndexOutOfBoundsError(FerrumError, IndexError):
    """Index outside [0, size) - exception variant."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(IndexOutOfBounds(index, size).message)

    def to_struct(self) -> IndexOutOfBounds:
        """Convert to struct for Result-based code."""
        return IndexOutOfBounds(self.index, self.size)
