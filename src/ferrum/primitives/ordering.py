"""Three-way comparison token returned by Integer.cmp and used by Sequence.sort_by."""

from __future__ import annotations

from enum import Enum

__all__ = ['Ordering']


class Ordering(Enum):
    """Result of comparing two values."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, left: object, right: object) -> Ordering:
        """Compare two values with their natural ordering.

        Args:
            left: Left-hand operand.
            right: Right-hand operand, of a type comparable with left.

        Returns:
            LESS, EQUAL or GREATER.
        """
        if left < right:  # type: ignore[operator]
            return cls.LESS
        if left > right:  # type: ignore[operator]
            return cls.GREATER
        return cls.EQUAL

    def is_lt(self) -> bool:
        return self is Ordering.LESS

    def is_le(self) -> bool:
        return self is not Ordering.GREATER

    def is_eq(self) -> bool:
        return self is Ordering.EQUAL

    def is_ne(self) -> bool:
        return self is not Ordering.EQUAL

    def is_ge(self) -> bool:
        return self is not Ordering.LESS

    def is_gt(self) -> bool:
        return self is Ordering.GREATER

    def reverse(self) -> Ordering:
        """Swap LESS and GREATER; EQUAL is unchanged."""
        return Ordering(-self.value)

    def then(self, other: Ordering) -> Ordering:
        """Chain comparisons: return self unless it is EQUAL, else other."""
        return other if self is Ordering.EQUAL else self
