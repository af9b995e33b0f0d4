"""@result decorator for catching Propagate raised by .bail()."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import wrapt

from ferrum.types.propagate import Propagate

__all__ = ['result']

_logger = logging.getLogger(__name__)


def result[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Decorator that turns .bail() on an Err or Nothing into an early return.

    When the wrapped function calls .bail() on an Err (or Nothing), the
    Propagate exception is caught and the carried Err (or Nothing) is
    returned. This gives Rust's ? operator semantics.

    Args:
        func: The function to wrap. Must return a Result or an Option.

    Returns:
        A wrapped function that returns the propagated value instead of raising.

    Example:
        ```python
        @result
        def average(total: Integer, count: Integer) -> Result[Integer, DivisionByZero]:
            return Ok(total.checked_div(count).bail())
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, R],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> R:
        try:
            return wrapped(*args, **kwargs)
        except Propagate as p:
            _logger.debug('early return from %s: %r', wrapped.__qualname__, p.value)
            return p.value

    return wrapper(func)
