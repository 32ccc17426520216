"""
Aggregate Functions

Functions that fold a list into a count, flag, string or augmented list.
"""

from .count_short_words import count_short_words
from .all_rgb import all_rgb
from .make_math import make_math
from .inject_positive import inject_positive

__all__ = [
    'count_short_words',
    'all_rgb',
    'make_math',
    'inject_positive',
]
