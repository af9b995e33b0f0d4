"""Immutable collections: Sequence, Set and Pair."""

from ferrum.collections.pair import Pair
from ferrum.collections.sequence import Sequence
from ferrum.collections.set import Set

__all__ = ['Pair', 'Sequence', 'Set']
