"""
Safety Module

Numeric coercion with default recovery and exception capture.
"""

from .coerce import to_number, format_number
from .wrapper import safe_execute, CallResult

__all__ = [
    'to_number',
    'format_number',
    'safe_execute',
    'CallResult',
]
