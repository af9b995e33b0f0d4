"""Checked 64-bit signed integer.

Every arithmetic operation comes in up to three families:

- ``wrapping_*``: result reduced modulo 2**64 and reinterpreted as signed.
- ``saturating_*``: result clamped to [MIN_VALUE, MAX_VALUE].
- ``checked_*``: ``Ok(Integer)`` with the exact result, or ``Err(IntegerOverflow)``.

Division and remainder return a Result in every family, since division by zero
has neither a wrapped nor a saturated interpretation.

Example:
    ```python
    from ferrum import Integer

    Integer.maximum().saturating_add(Integer(1))   # Integer(value=9223372036854775807)
    Integer.maximum().checked_add(Integer(1))      # Err(error=IntegerOverflow(operation='add'))
    Integer(10).checked_div(Integer(0))            # Err(error=DivisionByZero())
    ```
"""

from __future__ import annotations

import math
from collections.abc import Callable

import msgspec

from ferrum.errors import DivisionByZero, IntegerOverflow, OutOfDomain
from ferrum.primitives.ordering import Ordering
from ferrum.types.result import Err, Ok, Result

__all__ = ['BITS', 'MAX_VALUE', 'MIN_VALUE', 'Integer']

BITS = 64
MAX_VALUE = (1 << (BITS - 1)) - 1
MIN_VALUE = -(1 << (BITS - 1))

_MASK = (1 << BITS) - 1

type DivResult = Result[Integer, DivisionByZero | IntegerOverflow]


def _wrap(n: int) -> int:
    n &= _MASK
    return n - (1 << BITS) if n > MAX_VALUE else n


def _saturate(n: int) -> int:
    return max(MIN_VALUE, min(MAX_VALUE, n))


def _checked(n: int, operation: str) -> Result[Integer, IntegerOverflow]:
    if MIN_VALUE <= n <= MAX_VALUE:
        return Ok(Integer(n))
    return Err(IntegerOverflow(operation))


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _exact_pow(base: int, exp: int) -> int | None:
    """Return base**exp, or None when it certainly leaves the 64-bit range."""
    if base in (-1, 0, 1) or exp <= BITS:
        return base**exp
    return None


class Integer(msgspec.Struct, frozen=True, order=True, gc=False):
    """Immutable signed 64-bit integer with explicit overflow policy.

    Operands are always Integer; convert plain ints with `Integer.of`.
    Shift amounts and exponents are plain non-negative ints.

    Constructing an Integer from a value outside [MIN_VALUE, MAX_VALUE] or
    from a non-int raises immediately.

    Attributes:
        value: The wrapped int.
    """

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            msg = f'Integer requires an int, got {type(self.value).__name__}'
            raise TypeError(msg)
        if not MIN_VALUE <= self.value <= MAX_VALUE:
            msg = f'{self.value} is outside the {BITS}-bit signed range'
            raise ValueError(msg)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    # --- Construction ---

    @classmethod
    def of(cls, value: int) -> Integer:
        """Create an Integer from a plain int.

        Raises:
            ValueError: If value is outside the representable range.
        """
        return cls(value)

    @classmethod
    def maximum(cls) -> Integer:
        """Largest representable value (2**63 - 1)."""
        return cls(MAX_VALUE)

    @classmethod
    def minimum(cls) -> Integer:
        """Smallest representable value (-2**63)."""
        return cls(MIN_VALUE)

    @classmethod
    def zero(cls) -> Integer:
        return cls(0)

    # --- Wrapping family ---

    def wrapping_add(self, other: Integer) -> Integer:
        return Integer(_wrap(self.value + other.value))

    def wrapping_sub(self, other: Integer) -> Integer:
        return Integer(_wrap(self.value - other.value))

    def wrapping_mul(self, other: Integer) -> Integer:
        return Integer(_wrap(self.value * other.value))

    def wrapping_neg(self) -> Integer:
        """Negate; the minimum value wraps to itself."""
        return Integer(_wrap(-self.value))

    def wrapping_abs(self) -> Integer:
        """Absolute value; the minimum value wraps to itself."""
        return Integer(_wrap(abs(self.value)))

    def wrapping_pow(self, exp: int) -> Integer:
        """Raise to a non-negative power modulo 2**64.

        Raises:
            ValueError: If exp is negative.
        """
        _require_exponent(exp)
        return Integer(_wrap(pow(self.value, exp, 1 << BITS)))

    def wrapping_shl(self, bits: int) -> Integer:
        """Shift left by ``bits % 64``, discarding bits shifted out."""
        return Integer(_wrap(self.value << (bits & (BITS - 1))))

    def wrapping_shr(self, bits: int) -> Integer:
        """Arithmetic shift right by ``bits % 64``."""
        return Integer(self.value >> (bits & (BITS - 1)))

    # --- Saturating family ---

    def saturating_add(self, other: Integer) -> Integer:
        return Integer(_saturate(self.value + other.value))

    def saturating_sub(self, other: Integer) -> Integer:
        return Integer(_saturate(self.value - other.value))

    def saturating_mul(self, other: Integer) -> Integer:
        return Integer(_saturate(self.value * other.value))

    def saturating_neg(self) -> Integer:
        return Integer(_saturate(-self.value))

    def saturating_abs(self) -> Integer:
        return Integer(_saturate(abs(self.value)))

    def saturating_pow(self, exp: int) -> Integer:
        """Raise to a non-negative power, clamping to the range.

        Raises:
            ValueError: If exp is negative.
        """
        _require_exponent(exp)
        exact = _exact_pow(self.value, exp)
        if exact is not None:
            return Integer(_saturate(exact))
        if self.value < 0 and exp % 2 == 1:
            return Integer(MIN_VALUE)
        return Integer(MAX_VALUE)

    # --- Checked family ---

    def checked_add(self, other: Integer) -> Result[Integer, IntegerOverflow]:
        return _checked(self.value + other.value, 'add')

    def checked_sub(self, other: Integer) -> Result[Integer, IntegerOverflow]:
        return _checked(self.value - other.value, 'sub')

    def checked_mul(self, other: Integer) -> Result[Integer, IntegerOverflow]:
        return _checked(self.value * other.value, 'mul')

    def checked_neg(self) -> Result[Integer, IntegerOverflow]:
        return _checked(-self.value, 'neg')

    def checked_abs(self) -> Result[Integer, IntegerOverflow]:
        return _checked(abs(self.value), 'abs')

    def checked_pow(self, exp: int) -> Result[Integer, IntegerOverflow]:
        """Raise to a non-negative power, failing on overflow.

        Raises:
            ValueError: If exp is negative.
        """
        _require_exponent(exp)
        exact = _exact_pow(self.value, exp)
        if exact is None:
            return Err(IntegerOverflow('pow'))
        return _checked(exact, 'pow')

    def checked_shl(self, bits: int) -> Result[Integer, IntegerOverflow]:
        """Shift left, failing when bits is outside [0, 64)."""
        if not 0 <= bits < BITS:
            return Err(IntegerOverflow('shl'))
        return Ok(self.wrapping_shl(bits))

    def checked_shr(self, bits: int) -> Result[Integer, IntegerOverflow]:
        """Arithmetic shift right, failing when bits is outside [0, 64)."""
        if not 0 <= bits < BITS:
            return Err(IntegerOverflow('shr'))
        return Ok(self.wrapping_shr(bits))

    def abs(self) -> Result[Integer, IntegerOverflow]:
        """Absolute value; Err for the minimum value, whose magnitude is unrepresentable."""
        return self.checked_abs()

    def abs_diff(self, other: Integer) -> Result[Integer, IntegerOverflow]:
        """Absolute difference; Err when it exceeds the maximum value."""
        return _checked(abs(self.value - other.value), 'abs_diff')

    # --- Division ---

    def checked_div(self, other: Integer) -> DivResult:
        """Divide, truncating toward zero.

        Returns:
            Err(DivisionByZero) for a zero divisor, Err(IntegerOverflow) for
            minimum / -1, otherwise Ok(quotient).
        """
        if other.value == 0:
            return Err(DivisionByZero())
        return _checked(_trunc_div(self.value, other.value), 'div')

    def wrapping_div(self, other: Integer) -> Result[Integer, DivisionByZero]:
        """Divide, truncating toward zero; minimum / -1 wraps to minimum."""
        if other.value == 0:
            return Err(DivisionByZero())
        return Ok(Integer(_wrap(_trunc_div(self.value, other.value))))

    def saturating_div(self, other: Integer) -> Result[Integer, DivisionByZero]:
        """Divide, truncating toward zero; minimum / -1 clamps to maximum."""
        if other.value == 0:
            return Err(DivisionByZero())
        return Ok(Integer(_saturate(_trunc_div(self.value, other.value))))

    def checked_rem(self, other: Integer) -> Result[Integer, DivisionByZero]:
        """Remainder of truncating division; takes the sign of self."""
        if other.value == 0:
            return Err(DivisionByZero())
        return Ok(Integer(self.value - other.value * _trunc_div(self.value, other.value)))

    def wrapping_rem(self, other: Integer) -> Result[Integer, DivisionByZero]:
        # the exact remainder always fits, so only the zero divisor can fail
        return self.checked_rem(other)

    def div_floor(self, other: Integer) -> DivResult:
        """Divide, rounding toward negative infinity."""
        if other.value == 0:
            return Err(DivisionByZero())
        return _checked(self.value // other.value, 'div_floor')

    def div_ceil(self, other: Integer) -> DivResult:
        """Divide, rounding toward positive infinity."""
        if other.value == 0:
            return Err(DivisionByZero())
        return _checked(-(-self.value // other.value), 'div_ceil')

    def div_euclid(self, other: Integer) -> DivResult:
        """Euclidean quotient: the q for which self = q * other + r with 0 <= r < |other|."""
        if other.value == 0:
            return Err(DivisionByZero())
        q = _trunc_div(self.value, other.value)
        if self.value - q * other.value < 0:
            q = q - 1 if other.value > 0 else q + 1
        return _checked(q, 'div_euclid')

    def rem_euclid(self, other: Integer) -> Result[Integer, DivisionByZero]:
        """Euclidean remainder, always in [0, |other|)."""
        if other.value == 0:
            return Err(DivisionByZero())
        return Ok(Integer(self.value % abs(other.value)))

    # --- Comparison ---

    def cmp(self, other: Integer) -> Ordering:
        """Three-way comparison."""
        if self.value < other.value:
            return Ordering.LESS
        if self.value > other.value:
            return Ordering.GREATER
        return Ordering.EQUAL

    def eq(self, other: Integer) -> bool:
        return self.cmp(other).is_eq()

    def ne(self, other: Integer) -> bool:
        return self.cmp(other).is_ne()

    def lt(self, other: Integer) -> bool:
        return self.cmp(other).is_lt()

    def le(self, other: Integer) -> bool:
        return self.cmp(other).is_le()

    def gt(self, other: Integer) -> bool:
        return self.cmp(other).is_gt()

    def ge(self, other: Integer) -> bool:
        return self.cmp(other).is_ge()

    def min(self, other: Integer) -> Integer:
        return self if self.cmp(other).is_le() else other

    def max(self, other: Integer) -> Integer:
        return self if self.cmp(other).is_ge() else other

    def clamp(self, lo: Integer, hi: Integer) -> Integer:
        """Restrict to [lo, hi].

        Raises:
            ValueError: If lo is greater than hi.
        """
        if lo.gt(hi):
            msg = f'clamp bounds are inverted: {lo.value} > {hi.value}'
            raise ValueError(msg)
        return self.max(lo).min(hi)

    # --- Inspection ---

    def signum(self) -> Integer:
        """-1, 0 or 1 according to the sign."""
        return Integer(self.cmp(Integer(0)).value)

    def is_positive(self) -> bool:
        return self.value > 0

    def is_negative(self) -> bool:
        return self.value < 0

    def is_zero(self) -> bool:
        return self.value == 0

    def is_even(self) -> bool:
        return self.value % 2 == 0

    def is_odd(self) -> bool:
        return self.value % 2 != 0

    def is_multiple_of(self, other: Integer) -> bool:
        """Return True if self is an exact multiple of other.

        Zero is the only multiple of zero.
        """
        if other.value == 0:
            return self.value == 0
        return self.value % other.value == 0

    # --- Roots and logarithms ---

    def isqrt(self) -> Result[Integer, OutOfDomain]:
        """Floor of the square root; Err for negative values."""
        if self.value < 0:
            return Err(OutOfDomain('isqrt', self.value))
        return Ok(Integer(math.isqrt(self.value)))

    def log2(self) -> Result[Integer, OutOfDomain]:
        """Floor of the base-2 logarithm; Err for values <= 0."""
        if self.value <= 0:
            return Err(OutOfDomain('log2', self.value))
        return Ok(Integer(self.value.bit_length() - 1))

    def log10(self) -> Result[Integer, OutOfDomain]:
        """Floor of the base-10 logarithm; Err for values <= 0."""
        if self.value <= 0:
            return Err(OutOfDomain('log10', self.value))
        return Ok(Integer(len(str(self.value)) - 1))

    def log(self, base: Integer) -> Result[Integer, OutOfDomain]:
        """Floor of the logarithm in an integer base >= 2.

        Returns:
            Err(OutOfDomain) naming the offending operand when self <= 0 or
            base < 2.
        """
        if self.value <= 0:
            return Err(OutOfDomain('log', self.value))
        if base.value < 2:
            return Err(OutOfDomain('log', base.value))
        exponent = 0
        remaining = self.value
        while remaining >= base.value:
            remaining //= base.value
            exponent += 1
        return Ok(Integer(exponent))

    # --- Bitwise ---

    def and_(self, other: Integer) -> Integer:
        return Integer(self.value & other.value)

    def or_(self, other: Integer) -> Integer:
        return Integer(self.value | other.value)

    def xor(self, other: Integer) -> Integer:
        return Integer(self.value ^ other.value)

    def not_(self) -> Integer:
        return Integer(~self.value)

    def count_ones(self) -> int:
        """Number of set bits in the two's complement representation."""
        return (self.value & _MASK).bit_count()

    def leading_zeros(self) -> int:
        return BITS - (self.value & _MASK).bit_length()

    def trailing_zeros(self) -> int:
        if self.value == 0:
            return BITS
        return (self.value & -self.value).bit_length() - 1

    # --- Conversion ---

    def map(self, f: Callable[[int], int]) -> Integer:
        """Apply f to the wrapped int.

        Raises:
            ValueError: If f returns a value outside the range.
        """
        return Integer(f(self.value))

    def to_int(self) -> int:
        return self.value

    def to_float(self) -> float:
        return float(self.value)


def _require_exponent(exp: int) -> None:
    if exp < 0:
        msg = f'exponent must be non-negative, got {exp}'
        raise ValueError(msg)
