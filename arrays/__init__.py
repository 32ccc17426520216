"""
Arrays - Small List Transformations

Pure, independent functions over a single list of numbers or strings.
Each function lives in its own module and is also available under its
original camelCase name.
"""

from .transforms import (
    book_end_list,
    triple_numbers,
    strings_to_integers,
    remove_dollars,
    shout_if_exclaiming,
)
from .aggregates import (
    count_short_words,
    all_rgb,
    make_math,
    inject_positive,
)
from .discovery import get_function, check_examples

# Original names
bookEndList = book_end_list
tripleNumbers = triple_numbers
stringsToIntegers = strings_to_integers
removeDollars = remove_dollars
shoutIfExclaiming = shout_if_exclaiming
countShortWords = count_short_words
allRGB = all_rgb
makeMath = make_math
injectPositive = inject_positive

__all__ = [
    # Transforms
    'book_end_list',
    'triple_numbers',
    'strings_to_integers',
    'remove_dollars',
    'shout_if_exclaiming',
    # Aggregates
    'count_short_words',
    'all_rgb',
    'make_math',
    'inject_positive',
    # Original names
    'bookEndList',
    'tripleNumbers',
    'stringsToIntegers',
    'removeDollars',
    'shoutIfExclaiming',
    'countShortWords',
    'allRGB',
    'makeMath',
    'injectPositive',
    # Discovery
    'get_function',
    'check_examples',
]
