"""Option type: Some[T] | Nothing for values that may be absent."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from ferrum.types.propagate import Propagate

if TYPE_CHECKING:
    from ferrum.types.result import Err, Ok

__all__ = ['Nothing', 'NothingType', 'Option', 'Some', 'from_nullable']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Present variant of Option containing a value of type T.

    Examples:
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(3).filter(lambda x: x > 5)
        NothingType()
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        """Return True if the contained value satisfies the predicate."""
        return predicate(self.value)

    def is_none_or(self, predicate: Callable[[T], bool]) -> bool:
        """Return the predicate applied to the contained value."""
        return predicate(self.value)

    def match[U](self, on_some: Callable[[T], U], on_none: Callable[[], U]) -> U:  # noqa: ARG002
        """Eliminate the option by calling on_some with the contained value.

        Args:
            on_some: Called with the value when present.
            on_none: Called with no arguments when absent (unused here).

        Returns:
            Whatever on_some returns.
        """
        return on_some(self.value)

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value, never calling the fallback."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Apply f to the contained value; the default is unused."""
        return f(self.value)

    def map_or_else[U](self, default: Callable[[], U], f: Callable[[T], U]) -> U:  # noqa: ARG002
        """Apply f to the contained value; the default factory is unused."""
        return f(self.value)

    def inspect(self, f: Callable[[T], Any]) -> Some[T]:
        """Call f with the contained value for its side effect and return self."""
        f(self.value)
        return self

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if the predicate holds for the value, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.
        """
        if predicate(self.value):
            return self
        return Nothing

    def ok_or[E](self, _err: E) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from ferrum.types.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, _f: Callable[[], E]) -> Ok[T]:
        """Convert to Result, returning Ok(value) without calling the factory."""
        from ferrum.types.result import Ok

        return Ok(self.value)

    def and_[U](self, other: Some[U] | NothingType) -> Some[U] | NothingType:
        """Return other, since self is Some."""
        return other

    def or_(self, _other: Some[T] | NothingType) -> Some[T]:
        """Return self, since self is Some."""
        return self

    def zip[U](self, other: Some[U] | NothingType) -> Some[tuple[T, U]] | NothingType:
        """Combine two Some values into a tuple.

        If both are Some, returns Some((self.value, other.value)).
        If other is Nothing, returns Nothing.
        """
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing

    def flatten[U](self: Some[Some[U] | NothingType]) -> Some[U] | NothingType:
        """Flatten one level of nesting: Option[Option[T]] into Option[T].

        A Some holding a plain value is returned unchanged.
        """
        if isinstance(self.value, Some | NothingType):
            return self.value
        return self  # type: ignore[return-value]

    def bail(self) -> T:
        """Return the contained value.

        The counterpart of Rust's ? operator; only Nothing escapes.
        """
        return self.value


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Absent variant of Option.

    Use the `Nothing` constant rather than instantiating directly. All
    instances compare and hash equal.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def is_some_and(self, _predicate: Callable[[Any], bool]) -> bool:
        """Return False without calling the predicate."""
        return False

    def is_none_or(self, _predicate: Callable[[Any], bool]) -> bool:
        """Return True without calling the predicate."""
        return True

    def match[U](self, on_some: Callable[[Any], U], on_none: Callable[[], U]) -> U:  # noqa: ARG002
        """Eliminate the option by calling on_none."""
        return on_none()

    def unwrap(self) -> NoReturn:
        """Raise, since Nothing holds no value.

        Only call this where absence has already been ruled out.

        Raises:
            RuntimeError: Always.
        """
        raise RuntimeError('Called unwrap on Nothing')

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            RuntimeError: Always, with the custom message.
        """
        raise RuntimeError(msg)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value."""
        return f()

    def map(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing without calling f."""
        return self

    def map_or[U](self, default: U, _f: Callable[[Any], U]) -> U:
        """Return the default without calling f."""
        return default

    def map_or_else[U](self, default: Callable[[], U], _f: Callable[[Any], U]) -> U:
        """Return the computed default without calling f."""
        return default()

    def inspect(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return self without calling f."""
        return self

    def and_then(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing without calling f."""
        return self

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Return the Option produced by the recovery function."""
        return f()

    def filter(self, _predicate: Callable[[Any], bool]) -> NothingType:
        """Return Nothing without calling the predicate."""
        return self

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err)."""
        from ferrum.types.result import Err

        return Err(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error lazily."""
        from ferrum.types.result import Err

        return Err(f())

    def and_(self, _other: Some[Any] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def or_[T](self, other: Some[T] | NothingType) -> Some[T] | NothingType:
        """Return other since self is Nothing."""
        return other

    def zip(self, _other: Some[Any] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def flatten(self) -> NothingType:
        """Return Nothing; there is nothing to flatten."""
        return self

    def bail(self) -> NoReturn:
        """Raise Propagate so an enclosing @result function returns Nothing.

        Raises:
            Propagate: Always, carrying Nothing.
        """
        raise Propagate(self)


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def from_nullable[T](value: T | None) -> Option[T]:
    """Adapt a platform value that uses None for absence into an Option.

    Examples:
        >>> from_nullable({'a': 1}.get('a'))
        Some(value=1)
        >>> from_nullable({'a': 1}.get('b'))
        NothingType()
    """
    if value is None:
        return Nothing
    return Some(value)
