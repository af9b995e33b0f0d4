"""Tests for the @safe and @result decorators."""

from __future__ import annotations

import logging

import pytest

from ferrum import DivisionByZero, Err, Integer, Nothing, Ok, Option, Result, Sequence, Some, result, safe


class TestSafe:
    """Tests for @safe."""

    def test_success_returns_ok(self) -> None:
        @safe
        def parse(text: str) -> int:
            return int(text)

        assert parse('12') == Ok(12)

    def test_exception_returns_err(self) -> None:
        @safe
        def parse(text: str) -> int:
            return int(text)

        outcome = parse('twelve')
        assert outcome.is_err()
        assert isinstance(outcome.unwrap_err(), ValueError)

    def test_specific_exceptions(self) -> None:
        @safe(exceptions=(KeyError,))
        def lookup(key: str) -> int:
            return {'a': 1}[key]

        assert lookup('a') == Ok(1)
        assert isinstance(lookup('b').unwrap_err(), KeyError)

    def test_other_exceptions_propagate(self) -> None:
        @safe(exceptions=(KeyError,))
        def broken() -> int:
            raise TypeError('not caught')

        with pytest.raises(TypeError, match='not caught'):
            broken()

    def test_preserves_metadata(self) -> None:
        @safe
        def documented() -> None:
            """Docstring survives wrapping."""

        assert documented.__name__ == 'documented'
        assert documented.__doc__ == 'Docstring survives wrapping.'

    def test_works_on_methods(self) -> None:
        class Parser:
            base = 10

            @safe
            def parse(self, text: str) -> int:
                return int(text, self.base)

        assert Parser().parse('ff').is_err()
        assert Parser().parse('42') == Ok(42)

    def test_logs_caught_exception_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        @safe
        def fail() -> None:
            raise ValueError('boom')

        with caplog.at_level(logging.DEBUG, logger='ferrum.decorators.safe'):
            fail()

        assert any('returning Err' in record.getMessage() for record in caplog.records)


class TestResultDecorator:
    """Tests for @result and early return through .bail()."""

    def test_ok_path_runs_to_completion(self) -> None:
        @result
        def average(total: Integer, count: Integer) -> Result[Integer, DivisionByZero]:
            return Ok(total.checked_div(count).bail())

        assert average(Integer(10), Integer(2)) == Ok(Integer(5))

    def test_err_returns_early(self) -> None:
        reached: list[str] = []

        @result
        def average(total: Integer, count: Integer) -> Result[Integer, DivisionByZero]:
            quotient = total.checked_div(count).bail()
            reached.append('after bail')
            return Ok(quotient)

        assert average(Integer(10), Integer(0)) == Err(DivisionByZero())
        assert reached == []

    def test_nothing_returns_early(self) -> None:
        @result
        def second_plus_first(seq: Sequence[int]) -> Option[int]:
            return Some(seq.get(1).ok().bail() + seq.first().bail())

        assert second_plus_first(Sequence.of(1, 2)) == Some(3)
        assert second_plus_first(Sequence.of(1)) is Nothing

    def test_other_exceptions_propagate(self) -> None:
        @result
        def broken() -> Result[int, str]:
            raise KeyError('missing')

        with pytest.raises(KeyError):
            broken()

    def test_preserves_metadata(self) -> None:
        @result
        def documented() -> Result[int, str]:
            """Docstring survives wrapping."""
            return Ok(1)

        assert documented.__name__ == 'documented'
        assert documented.__doc__ == 'Docstring survives wrapping.'

    def test_composes_with_safe(self) -> None:
        @safe(exceptions=(ValueError,))
        def parse(text: str) -> int:
            return int(text)

        @result
        def parse_sum(a: str, b: str) -> Result[int, ValueError]:
            return Ok(parse(a).bail() + parse(b).bail())

        assert parse_sum('1', '2') == Ok(3)
        assert isinstance(parse_sum('1', 'x').unwrap_err(), ValueError)
