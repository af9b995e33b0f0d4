"""Decorators bridging raise-based code and Result-based code."""

from ferrum.decorators.result import result
from ferrum.decorators.safe import safe

__all__ = ['result', 'safe']
