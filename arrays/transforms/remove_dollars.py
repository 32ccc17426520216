"""
Function: remove_dollars

Convert dollar amounts to numbers.
"""

from typing import List, Sequence

from ..safety.coerce import Number, to_number

CURRENCY_SYMBOL = "$"


def remove_dollars(amounts: Sequence[str]) -> List[Number]:
    """
    Convert amounts to numbers, dropping a leading "$".

    Only one leading symbol is removed, so "$$5" is not a number.
    Anything that does not parse becomes 0.

    Args:
        amounts: Amounts like "$5", "10", "$"

    Returns:
        Numbers in the same order
    """
    result = []
    for amount in amounts:
        if amount.startswith(CURRENCY_SYMBOL):
            amount = amount[len(CURRENCY_SYMBOL):]
        result.append(to_number(amount))
    return result


__function_meta__ = {
    "name": "remove_dollars",
    "category": "transforms",
    "description": "Strip a leading $ and parse as number, 0 when not numeric",
    "examples": [
        {"input": ["$1", "$2", "3"], "output": [1, 2, 3]},
        {"input": ["$5", "$", "10", "$abc"], "output": [5, 0, 10, 0]},
    ],
    "tags": ["list", "string", "number", "dollar", "price"]
}
