"""
Function: triple_numbers

Multiply every number by 3.
"""

from typing import List, Sequence

from ..safety.coerce import Number


def triple_numbers(numbers: Sequence[Number]) -> List[Number]:
    """Return a new list where each number has been tripled."""
    return [num * 3 for num in numbers]


__function_meta__ = {
    "name": "triple_numbers",
    "category": "transforms",
    "description": "Triple every number in a list",
    "examples": [
        {"input": [1, 2, 3], "output": [3, 6, 9]},
        {"input": [-1.5, 0], "output": [-4.5, 0]},
        {"input": [], "output": []},
    ],
    "tags": ["list", "number", "map"]
}
