"""Outcome types: Result, Ok, Err, Option, Some, Nothing."""

from ferrum.types.option import Nothing, NothingType, Option, Some, from_nullable
from ferrum.types.propagate import Propagate
from ferrum.types.result import Err, Ok, Result, collect

__all__ = [
    'Err',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Propagate',
    'Result',
    'Some',
    'collect',
    'from_nullable',
]
