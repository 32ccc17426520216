"""
Function: all_rgb

Check that every color is red, green or blue.
"""

from typing import Sequence

RGB_COLORS = frozenset(["red", "green", "blue"])


def all_rgb(colors: Sequence[str]) -> bool:
    """
    True if ALL the colors are exactly 'red', 'green' or 'blue'.

    Matching is case-sensitive. An empty list is all RGB.
    """
    return all(color in RGB_COLORS for color in colors)


__function_meta__ = {
    "name": "all_rgb",
    "category": "aggregates",
    "description": "True when every color is red, green or blue",
    "examples": [
        {"input": [], "output": True},
        {"input": ["red", "blue"], "output": True},
        {"input": ["red", "purple"], "output": False},
        {"input": ["Red"], "output": False},
    ],
    "tags": ["list", "string", "color", "predicate"]
}
