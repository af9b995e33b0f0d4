"""Set: an immutable collection of unique values, built on Sequence.

A Set is a de-duplicating view over a backing Sequence rather than a hash
table: iteration follows first-insertion order and uniqueness is
re-established after every construction, so `Set.of(1, 2, 2).add(1)` is
still `{1, 2}` in that order.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from ferrum.collections.sequence import Sequence, unique_items
from ferrum.primitives.integer import Integer
from ferrum.types.option import Option

__all__ = ['Set']


@dataclass(slots=True, frozen=True)
class Set[T]:
    """Immutable collection of T with no two value-equal elements.

    Equality is order-independent: two Sets are equal when they hold the
    same elements, whatever the insertion order.

    Attributes:
        values: The backing Sequence, already de-duplicated.
    """

    values: Sequence[T]

    def __post_init__(self) -> None:
        if not isinstance(self.values, Sequence):
            msg = f'Set requires a Sequence, got {type(self.values).__name__}; use Set.of_array()'
            raise TypeError(msg)
        object.__setattr__(self, 'values', Sequence(unique_items(self.values.items)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return self.eq(other)

    def __hash__(self) -> int:
        return hash(frozenset(self.values.items))

    def __str__(self) -> str:
        if self.values.is_empty():
            return 'Set<>'
        return f'Set<{type(self.values.items[0]).__name__}>'

    def __iter__(self) -> Iterator[T]:
        return iter(self.values.items)

    def __len__(self) -> int:
        return self.values.size()

    def __contains__(self, value: object) -> bool:
        return value in self.values.items

    # --- Construction ---

    @classmethod
    def of(cls, *values: T) -> Set[T]:
        return cls(Sequence(values))

    @classmethod
    def of_array(cls, values: Iterable[T]) -> Set[T]:
        return cls(Sequence.of_array(values))

    @classmethod
    def new(cls) -> Set[T]:
        return cls(Sequence.new())

    def clear(self) -> Set[T]:
        return Set.new()

    # --- Query ---

    def size(self) -> int:
        return self.values.size()

    def len(self) -> Integer:
        return self.values.len()

    def is_empty(self) -> bool:
        return self.values.is_empty()

    def contains(self, value: T) -> bool:
        return self.values.contains(value)

    def any(self, predicate: Callable[[T], bool]) -> bool:
        return self.values.any(predicate)

    def all(self, predicate: Callable[[T], bool]) -> bool:
        return self.values.all(predicate)

    def eq(self, other: Set[T]) -> bool:
        """Order-independent equality: same size and mutual containment."""
        return self.size() == other.size() and self.values.all(other.contains)

    # --- Edits that may introduce repeats ---

    def add(self, value: T) -> Set[T]:
        return Set(self.values.add(value))

    def map[U](self, f: Callable[[T], U]) -> Set[U]:
        """Map every element; elements that map to equal values merge."""
        return Set(self.values.map(f))

    def flat_map[U](self, f: Callable[[T], Iterable[U]]) -> Set[U]:
        return Set(self.values.flat_map(f))

    def filter_map[U](self, f: Callable[[T], Option[U]]) -> Set[U]:
        return Set(self.values.filter_map(f))

    def flatten(self) -> Set[Any]:
        return Set(self.values.flatten())

    def append(self, other: Set[T]) -> Set[T]:
        """Union, keeping self's order followed by other's new elements."""
        return Set(self.values.append(other.values))

    def union(self, other: Set[T]) -> Set[T]:
        return self.append(other)

    # --- Edits that only remove ---

    def remove(self, value: T) -> Set[T]:
        return Set(self.values.remove(value))

    def filter(self, predicate: Callable[[T], bool]) -> Set[T]:
        return Set(self.values.filter(predicate))

    # --- Set algebra ---

    def difference(self, other: Set[T]) -> Set[T]:
        """Elements of self that are not in other."""
        return self.filter(lambda value: not other.contains(value))

    def intersection(self, other: Set[T]) -> Set[T]:
        """Elements of self that are also in other, in self's order."""
        return self.filter(other.contains)

    def symmetric_difference(self, other: Set[T]) -> Set[T]:
        """Elements in exactly one of the two Sets."""
        return self.difference(other).append(other.difference(self))

    def is_disjoint(self, other: Set[T]) -> bool:
        return self.intersection(other).is_empty()

    def is_subset(self, other: Set[T]) -> bool:
        return self.intersection(other).eq(self)

    def is_superset(self, other: Set[T]) -> bool:
        return self.intersection(other).eq(other)

    # --- Consumption ---

    def fold[U](self, f: Callable[[U, T], U], initial: U) -> U:
        return self.values.fold(f, initial)

    def for_each(self, f: Callable[[T], Any]) -> None:
        self.values.for_each(f)

    def iter(self) -> Iterator[T]:
        return self.values.iter()

    def to_array(self) -> list[T]:
        return self.values.to_array()

    def to_sequence(self) -> Sequence[T]:
        return self.values
