"""
Transform Functions

List-to-list functions. Each function is in a separate file.
"""

from .book_end import book_end_list
from .triple_numbers import triple_numbers
from .strings_to_integers import strings_to_integers
from .remove_dollars import remove_dollars
from .shout_if_exclaiming import shout_if_exclaiming

__all__ = [
    'book_end_list',
    'triple_numbers',
    'strings_to_integers',
    'remove_dollars',
    'shout_if_exclaiming',
]
