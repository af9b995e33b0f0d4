"""Propagate exception for the .bail() early-return mechanism."""

from typing import Any


class Propagate(Exception):  # noqa: N818
    """Raised by .bail() to carry an Err or Nothing up the call stack.

    Caught by the @result decorator, which returns the carried value.
    Not an error in itself, hence no "Error" suffix.
    """

    __slots__ = ('_value',)

    def __init__(self, value: Any) -> None:
        self._value = value
        super().__init__(f'Propagate({value!r})')

    @property
    def value(self) -> Any:
        """The Err or Nothing being propagated."""
        return self._value
