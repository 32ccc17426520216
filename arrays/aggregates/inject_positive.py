"""
Function: inject_positive

Insert the sum of the non-negative numbers after the first negative one.
"""

from typing import List, Sequence

from ..safety.coerce import Number


def inject_positive(values: Sequence[Number]) -> List[Number]:
    """
    Copy the numbers, inserting the running sum of the non-negative numbers
    right after the FIRST negative number.

    Without a negative number the sum is appended at the end instead.
    The sum is inserted exactly once.

    [1, 9, -5, 7] -> [1, 9, -5, 10, 7]
    [1, 9, 7] -> [1, 9, 7, 17]
    [] -> [0]

    Args:
        values: Numbers to copy

    Returns:
        New list with the sum injected
    """
    result: List[Number] = []
    total = 0
    injected = False

    for value in values:
        result.append(value)
        if value >= 0:
            total += value
        elif value < 0 and not injected:
            result.append(total)
            injected = True

    if not injected:
        result.append(total)
    return result


__function_meta__ = {
    "name": "inject_positive",
    "category": "aggregates",
    "description": "Insert the sum of non-negative numbers after the first negative one",
    "examples": [
        {"input": [1, 9, -5, 7], "output": [1, 9, -5, 10, 7]},
        {"input": [1, 9, 7], "output": [1, 9, 7, 17]},
        {"input": [3, -2], "output": [3, -2, 3]},
        {"input": [], "output": [0]},
    ],
    "tags": ["list", "number", "sum"]
}
