"""
Function: strings_to_integers

Convert strings to numbers, 0 for anything not numeric.
"""

from typing import List, Sequence

from ..safety.coerce import Number, to_number


def strings_to_integers(strings: Sequence[str]) -> List[Number]:
    """
    Convert each string to a number.

    Decimal strings keep their fraction ("3.5" -> 3.5). Strings that are
    not numbers become 0.

    Args:
        strings: Strings to convert

    Returns:
        Numbers in the same order
    """
    return [to_number(text) for text in strings]


__function_meta__ = {
    "name": "strings_to_integers",
    "category": "transforms",
    "description": "Parse strings as numbers, 0 when not numeric",
    "examples": [
        {"input": ["1", "2", "3"], "output": [1, 2, 3]},
        {"input": ["42", "abc", "", "3.5"], "output": [42, 0, 0, 3.5]},
    ],
    "tags": ["list", "string", "number", "parse"]
}
