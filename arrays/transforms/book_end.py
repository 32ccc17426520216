"""
Function: book_end_list

Keep only the first and last number of a list.
"""

from typing import List, Sequence

from ..safety.coerce import Number


def book_end_list(numbers: Sequence[Number]) -> List[Number]:
    """
    Return a new list with just the first and last number.

    An empty list gives an empty list; a single element shows up twice.

    Args:
        numbers: Numbers to take the ends from

    Returns:
        [first, last] or []
    """
    if not numbers:
        return []
    return [numbers[0], numbers[-1]]


__function_meta__ = {
    "name": "book_end_list",
    "category": "transforms",
    "description": "First and last number of a list",
    "examples": [
        {"input": [1, 2, 3], "output": [1, 3]},
        {"input": [7], "output": [7, 7]},
        {"input": [], "output": []},
    ],
    "tags": ["list", "number", "ends"]
}
