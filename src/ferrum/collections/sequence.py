"""Sequence: an immutable, ordered, index-addressable collection.

Every operation that looks like a mutation returns a new Sequence and leaves
the receiver untouched. Positional lookups report failure through Result
(`IndexOutOfBounds`) or absence through Option, never by raising.

Example:
    ```python
    from ferrum import Sequence

    seq = Sequence.of(3, 1, 2, 3)
    seq.filter(lambda x: x > 1).map(str)   # Sequence(items=('3', '2', '3'))
    seq.get(7)                             # Err(error=IndexOutOfBounds(index=7, size=4))
    seq.unique().to_array()                # [3, 1, 2]
    ```
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any

import msgspec

from ferrum.collections.pair import Pair
from ferrum.errors import IndexOutOfBounds
from ferrum.primitives.integer import Integer
from ferrum.primitives.ordering import Ordering
from ferrum.types.option import Nothing, Option, Some
from ferrum.types.result import Err, Ok, Result

if TYPE_CHECKING:
    from ferrum.collections.set import Set

__all__ = ['Sequence']


def unique_items[T](items: Iterable[T]) -> tuple[T, ...]:
    """Drop value-equal repeats, keeping the first occurrence of each.

    Hashable items are tracked in a set and unhashable ones in a list. An item
    is a repeat if it matches anything kept so far in either, so the result
    agrees with a plain pairwise ``in`` check.
    """
    seen: set[Any] = set()
    seen_unhashable: list[Any] = []
    kept: list[T] = []
    for item in items:
        try:
            if item in seen or (seen_unhashable and item in seen_unhashable):
                continue
            seen.add(item)
        except TypeError:
            if item in seen_unhashable or any(item == other for other in seen):
                continue
            seen_unhashable.append(item)
        kept.append(item)
    return tuple(kept)


def _spread(item: Any) -> Iterable[Any]:
    # one level only; text and bytes are values, not collections
    if isinstance(item, Iterable) and not isinstance(item, str | bytes | bytearray):
        return item
    return (item,)


class Sequence[T](msgspec.Struct, frozen=True):
    """Immutable ordered collection of T; duplicates allowed.

    Equality is element-wise and order-dependent. Build instances with
    `of`, `of_array` or `new`; the backing store must be a tuple.

    Attributes:
        items: The elements, in order.
    """

    items: tuple[T, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            msg = f'Sequence requires a tuple, got {type(self.items).__name__}; use Sequence.of_array()'
            raise TypeError(msg)

    def __str__(self) -> str:
        if not self.items:
            return 'Sequence<>'
        return f'Sequence<{type(self.items[0]).__name__}>'

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, value: object) -> bool:
        return value in self.items

    # --- Construction ---

    @classmethod
    def of(cls, *values: T) -> Sequence[T]:
        """Create a Sequence from the given arguments, in order."""
        return cls(values)

    @classmethod
    def of_array(cls, values: Iterable[T]) -> Sequence[T]:
        """Create a Sequence from a finite iterable, copying it."""
        return cls(tuple(values))

    @classmethod
    def new(cls) -> Sequence[T]:
        """Create an empty Sequence."""
        return cls(())

    def clear(self) -> Sequence[T]:
        return Sequence.new()

    # --- Query ---

    def size(self) -> int:
        return len(self.items)

    def len(self) -> Integer:
        return Integer(len(self.items))

    def is_empty(self) -> bool:
        return not self.items

    def contains(self, value: T) -> bool:
        """Return True if any element is value-equal to value."""
        return value in self.items

    def get(self, index: int) -> Result[T, IndexOutOfBounds]:
        """Return the element at index.

        Negative indices are out of bounds; there is no wraparound.

        Returns:
            Ok(element), or Err(IndexOutOfBounds) carrying the index and size.
        """
        if not 0 <= index < len(self.items):
            return Err(IndexOutOfBounds(index, len(self.items)))
        return Ok(self.items[index])

    def first(self) -> Option[T]:
        return Some(self.items[0]) if self.items else Nothing

    def last(self) -> Option[T]:
        return Some(self.items[-1]) if self.items else Nothing

    def find(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return the first element satisfying the predicate."""
        for item in self.items:
            if predicate(item):
                return Some(item)
        return Nothing

    def find_map[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Return the first Some produced by f, stopping there."""
        for item in self.items:
            mapped = f(item)
            if isinstance(mapped, Some):
                return mapped
        return Nothing

    def index_of(self, value: T) -> Option[int]:
        """Return the index of the first element equal to value."""
        for index, item in enumerate(self.items):
            if item == value:
                return Some(index)
        return Nothing

    def any(self, predicate: Callable[[T], bool]) -> bool:
        """Return True as soon as one element satisfies the predicate."""
        return any(predicate(item) for item in self.items)

    def all(self, predicate: Callable[[T], bool]) -> bool:
        """Return False as soon as one element fails the predicate."""
        return all(predicate(item) for item in self.items)

    def eq(self, other: Sequence[T]) -> bool:
        """Element-wise equality, including order."""
        return self.items == other.items

    # --- Positional edits ---

    def add(self, value: T) -> Sequence[T]:
        """Return a new Sequence with value appended."""
        return Sequence((*self.items, value))

    def insert_at(self, index: int, value: T) -> Result[Sequence[T], IndexOutOfBounds]:
        """Insert value before index; index == size appends.

        Returns:
            Ok(new Sequence), or Err(IndexOutOfBounds) if index is outside [0, size].
        """
        if not 0 <= index <= len(self.items):
            return Err(IndexOutOfBounds(index, len(self.items)))
        return Ok(Sequence((*self.items[:index], value, *self.items[index:])))

    def remove(self, value: T) -> Sequence[T]:
        """Return a new Sequence without any element equal to value.

        All matches are removed; use remove_at to drop a single position.
        Matching is the same identity-then-equality test as `contains`.
        """
        return Sequence(tuple(item for item in self.items if not (item is value or item == value)))

    def remove_at(self, index: int) -> Result[Sequence[T], IndexOutOfBounds]:
        """Remove the element at index."""
        if not 0 <= index < len(self.items):
            return Err(IndexOutOfBounds(index, len(self.items)))
        return Ok(Sequence(self.items[:index] + self.items[index + 1 :]))

    def swap(self, first: int, second: int) -> Result[Sequence[T], IndexOutOfBounds]:
        """Exchange the elements at two positions.

        Returns:
            Ok(new Sequence), or Err(IndexOutOfBounds) for the first bad index.
        """
        size = len(self.items)
        for index in (first, second):
            if not 0 <= index < size:
                return Err(IndexOutOfBounds(index, size))
        items = list(self.items)
        items[first], items[second] = items[second], items[first]
        return Ok(Sequence(tuple(items)))

    def append(self, other: Sequence[T]) -> Sequence[T]:
        """Concatenate: self's elements, then other's."""
        return Sequence(self.items + other.items)

    # --- Transforms ---

    def filter(self, predicate: Callable[[T], bool]) -> Sequence[T]:
        return Sequence(tuple(item for item in self.items if predicate(item)))

    def map[U](self, f: Callable[[T], U]) -> Sequence[U]:
        return Sequence(tuple(f(item) for item in self.items))

    def flat_map[U](self, f: Callable[[T], Iterable[U]]) -> Sequence[U]:
        """Map each element to a collection and concatenate the results in order."""
        return self.map(f).flatten()

    def flatten(self) -> Sequence[Any]:
        """Flatten one level of nested collections.

        Nested Sequences, Sets, lists, tuples and other iterables are spread
        in order; strings, bytes and non-iterables are kept as elements.
        """
        return Sequence(tuple(sub for item in self.items for sub in _spread(item)))

    def filter_map[U](self, f: Callable[[T], Option[U]]) -> Sequence[U]:
        """Map each element to an Option and keep the Some values, in order."""
        kept: list[U] = []
        for item in self.items:
            mapped = f(item)
            if isinstance(mapped, Some):
                kept.append(mapped.value)
        return Sequence(tuple(kept))

    def fold[U](self, f: Callable[[U, T], U], initial: U) -> U:
        """Left fold: f(...f(f(initial, x0), x1)..., xn)."""
        return functools.reduce(f, self.items, initial)

    def unique(self) -> Sequence[T]:
        """Drop value-equal repeats, keeping first occurrences in order."""
        return Sequence(unique_items(self.items))

    def reverse(self) -> Sequence[T]:
        return Sequence(self.items[::-1])

    def take(self, count: int) -> Sequence[T]:
        """First count elements; a negative count takes nothing."""
        return Sequence(self.items[: max(count, 0)])

    def skip(self, count: int) -> Sequence[T]:
        """All but the first count elements; a negative count skips nothing."""
        return Sequence(self.items[max(count, 0) :])

    def truncate(self, size: int) -> Sequence[T]:
        return self.take(size)

    def take_while(self, predicate: Callable[[T], bool]) -> Sequence[T]:
        return Sequence(self.items[: self._prefix_length(predicate)])

    def skip_while(self, predicate: Callable[[T], bool]) -> Sequence[T]:
        return Sequence(self.items[self._prefix_length(predicate) :])

    def _prefix_length(self, predicate: Callable[[T], bool]) -> int:
        for index, item in enumerate(self.items):
            if not predicate(item):
                return index
        return len(self.items)

    def resize(self, size: int, fill: T) -> Sequence[T]:
        """Truncate or pad with fill to exactly size elements (negative means 0)."""
        size = max(size, 0)
        if size <= len(self.items):
            return Sequence(self.items[:size])
        return Sequence(self.items + (fill,) * (size - len(self.items)))

    def windows(self, size: int) -> Sequence[Sequence[T]]:
        """Overlapping windows of the given size.

        `Sequence.of(1, 2, 3).windows(2)` yields `[1, 2]`, `[2, 3]`. A size
        larger than the Sequence, or not positive, yields no windows.
        """
        if size <= 0 or size > len(self.items):
            return Sequence.new()
        return Sequence(
            tuple(Sequence(self.items[i : i + size]) for i in range(len(self.items) - size + 1))
        )

    def zip[U](self, other: Sequence[U]) -> Sequence[Pair[T, U]]:
        """Pair up elements positionally; stops at the shorter Sequence."""
        return Sequence(tuple(Pair(a, b) for a, b in zip(self.items, other.items, strict=False)))

    def sort(self) -> Sequence[T]:
        """Sort by natural ordering.

        Raises:
            TypeError: If the elements are not mutually comparable.
        """
        return Sequence(tuple(sorted(self.items)))  # type: ignore[type-var]

    def sort_by(self, comparator: Callable[[T, T], Ordering]) -> Sequence[T]:
        """Stable sort using a three-way comparator such as Integer.cmp."""
        key = functools.cmp_to_key(lambda a, b: comparator(a, b).value)
        return Sequence(tuple(sorted(self.items, key=key)))

    # --- Consumption ---

    def for_each(self, f: Callable[[T], Any]) -> None:
        """Call f on each element in order, for its side effects."""
        for item in self.items:
            f(item)

    def iter(self) -> Iterator[T]:
        return iter(self.items)

    def to_array(self) -> list[T]:
        """Materialize the elements into a fresh list."""
        return list(self.items)

    def to_set(self) -> Set[T]:
        """Convert to a Set, dropping repeats."""
        from ferrum.collections.set import Set

        return Set.of_array(self.items)
