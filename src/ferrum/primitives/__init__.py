"""Value primitives: the checked Integer and its Ordering token."""

from ferrum.primitives.integer import BITS, MAX_VALUE, MIN_VALUE, Integer
from ferrum.primitives.ordering import Ordering

__all__ = ['BITS', 'MAX_VALUE', 'MIN_VALUE', 'Integer', 'Ordering']
