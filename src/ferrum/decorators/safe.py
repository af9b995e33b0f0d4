"""@safe decorator for adapting exception-raising callables into Results."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, overload

import wrapt

from ferrum.types.result import Err, Ok

__all__ = ['safe']

_logger = logging.getLogger(__name__)


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe[**P, T, E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[E]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Err.

    Wraps a function so that it returns Ok(value) on success and
    Err(exception) if one of the given exceptions is raised. Anything else
    propagates unchanged.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, KeyError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function that returns Result[T, E] instead of T.

    Example:
        ```python
        @safe(exceptions=(ValueError,))
        def parse(text: str) -> int:
            return int(text)

        parse('12')   # Ok(value=12)
        parse('x')    # Err(error=ValueError(...))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[Any] | Err[Any]:
        try:
            return Ok(wrapped(*args, **kwargs))
        except catch as e:
            _logger.debug('%s raised %r, returning Err', wrapped.__qualname__, e)
            return Err(e)

    if func is not None:
        return wrapper(func)
    return wrapper
