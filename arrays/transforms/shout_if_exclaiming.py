"""
Function: shout_if_exclaiming

Upper-case exclamations and drop questions.
"""

from typing import List, Sequence


def shout_if_exclaiming(messages: Sequence[str]) -> List[str]:
    """
    Return the messages with every "!" message upper-cased and every
    "?" message removed.

    Empty messages end in neither and are kept as they are.

    Args:
        messages: Messages to process

    Returns:
        Remaining messages in their original order
    """
    shouted = [
        message.upper() if message.endswith("!") else message
        for message in messages
    ]
    return [message for message in shouted if not message.endswith("?")]


__function_meta__ = {
    "name": "shout_if_exclaiming",
    "category": "transforms",
    "description": "Upper-case messages ending in !, remove messages ending in ?",
    "examples": [
        {"input": ["hi!", "bye?", "ok"], "output": ["HI!", "ok"]},
        {"input": ["", "what?"], "output": [""]},
    ],
    "tags": ["list", "string", "filter"]
}
