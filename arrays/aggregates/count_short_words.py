"""
Function: count_short_words

Count words shorter than 4 letters.
"""

from typing import Sequence

SHORT_WORD_LIMIT = 4


def count_short_words(words: Sequence[str]) -> int:
    """
    Number of words that are LESS THAN 4 letters long.

    Length is counted in code points, so a character outside the BMP is one letter.
    """
    total = 0
    for word in words:
        if len(word) < SHORT_WORD_LIMIT:
            total += 1
    return total


__function_meta__ = {
    "name": "count_short_words",
    "category": "aggregates",
    "description": "Count words shorter than 4 letters",
    "examples": [
        {"input": ["a", "abcd", "ab"], "output": 2},
        {"input": ["the", "cat", "sat", "quietly"], "output": 3},
        {"input": [], "output": 0},
    ],
    "tags": ["list", "string", "count"]
}
