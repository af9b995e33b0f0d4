"""ferrum: safe, immutable value and collection primitives for Python 3.13+.

Explicit outcome types replace None and exception-driven control flow,
an immutable collection engine is built on top of them, and a checked
64-bit Integer reports overflow and division by zero through Result.

Flat imports (preferred):
    from ferrum import Result, Ok, Err, Option, Some, Nothing
    from ferrum import Integer, Ordering, Sequence, Set, Pair

Submodule imports (for organization):
    from ferrum.types import Result, Option
    from ferrum.primitives import Integer
    from ferrum.collections import Sequence, Set
    from ferrum.errors import IndexOutOfBounds
"""

# Configuration
from ferrum._config import FerrumConfig, get_config, init

# Collections
from ferrum.collections import Pair, Sequence, Set

# Decorators
from ferrum.decorators import result, safe

# Errors
from ferrum.errors import (
    DivisionByZero,
    DivisionByZeroError,
    FerrumError,
    IndexOutOfBounds,
    IndexOutOfBoundsError,
    IntegerOverflow,
    IntegerOverflowError,
    OutOfDomain,
    OutOfDomainError,
)

# Primitives
from ferrum.primitives import Integer, Ordering

# Types
from ferrum.types import (
    Err,
    Nothing,
    NothingType,
    Ok,
    Option,
    Propagate,
    Result,
    Some,
    collect,
    from_nullable,
)

__all__ = [
    # Errors
    'DivisionByZero',
    'DivisionByZeroError',
    # Result types
    'Err',
    'FerrumConfig',
    'FerrumError',
    'IndexOutOfBounds',
    'IndexOutOfBoundsError',
    # Primitives
    'Integer',
    'IntegerOverflow',
    'IntegerOverflowError',
    # Option types
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Ordering',
    'OutOfDomain',
    'OutOfDomainError',
    # Collections
    'Pair',
    # Propagation
    'Propagate',
    'Result',
    'Sequence',
    'Set',
    'Some',
    'collect',
    'from_nullable',
    # Configuration
    'get_config',
    'init',
    # Decorators
    'result',
    'safe',
]
