"""Pair: an immutable two-element value, produced by Sequence.zip."""

from __future__ import annotations

import msgspec

__all__ = ['Pair']


class Pair[A, B](msgspec.Struct, frozen=True, gc=False):
    """Two values of possibly different types.

    Examples:
        >>> Pair.of(1, 'a').swap()
        Pair(first='a', second=1)
    """

    first: A
    second: B

    @classmethod
    def of(cls, first: A, second: B) -> Pair[A, B]:
        return cls(first, second)

    def swap(self) -> Pair[B, A]:
        return Pair(self.second, self.first)

    def to_tuple(self) -> tuple[A, B]:
        return (self.first, self.second)
