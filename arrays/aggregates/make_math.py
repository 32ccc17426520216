"""
Function: make_math

Render the addition of a list of numbers.
"""

import operator
from functools import reduce
from typing import Sequence

from ..safety.coerce import Number, format_number


def make_math(addends: Sequence[Number]) -> str:
    """
    Produce the numbers being added together along with their sum.

    [1, 2, 3] -> "6=1+2+3", [] -> "0=0".

    Args:
        addends: Numbers to add

    Returns:
        "<sum>=<a0>+<a1>+..."
    """
    if not addends:
        return "0=0"
    # Plain left-to-right addition, no compensated summation
    total = reduce(operator.add, addends, 0)
    return f"{format_number(total)}=" + "+".join(format_number(num) for num in addends)


__function_meta__ = {
    "name": "make_math",
    "category": "aggregates",
    "description": "Render a sum as '<sum>=<a0>+<a1>+...'",
    "examples": [
        {"input": [1, 2, 3], "output": "6=1+2+3"},
        {"input": [4], "output": "4=4"},
        {"input": [1.5, -2], "output": "-0.5=1.5+-2"},
        {"input": [], "output": "0=0"},
    ],
    "tags": ["list", "number", "sum", "format"]
}
