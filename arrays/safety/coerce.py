"""
Numeric Coercion

Best-effort conversion between strings and numbers.

`to_number` never fails: anything that is not a numeric literal becomes the
default (0). `format_number` renders a number the way a plain number-to-string
conversion would, without grouping or padding.
"""

import logging
import math
import re
from decimal import Decimal
from typing import Any, Union

logger = logging.getLogger(__name__)

Number = Union[int, float]

# Characters ignored around a numeric literal
_WHITESPACE = (" \t\n\r\v\f\xa0\ufeff\u1680\u2000\u2001\u2002\u2003\u2004\u2005"
               "\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000")

_DECIMAL = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')
_INFINITY = re.compile(r'([+-]?)Infinity')
# Prefixed integers, digits restricted to each base
_RADIX = [
    (re.compile(r'0[xX]([0-9a-fA-F]+)'), 16),
    (re.compile(r'0[oO]([0-7]+)'), 8),
    (re.compile(r'0[bB]([01]+)'), 2),
]

# Outside this range numbers are rendered with an exponent
_EXPONENT_HIGH = 1e21
_EXPONENT_LOW = 1e-6


def to_number(text: Any, default: Number = 0) -> Number:
    """
    Coerce a string to a number, returning `default` when it is not numeric.

    Handles:
    - Surrounding whitespace ("  42 " -> 42), blank strings (-> 0)
    - Decimal literals with sign, fraction and exponent ("-1.5e3" -> -1500.0)
    - Infinity literals ("-Infinity" -> -inf)
    - Prefixed integers ("0x1f" -> 31, "0b101" -> 5, "0o17" -> 15)

    Integral literals without fraction or exponent come back as int,
    everything else as float.

    Args:
        text: String to coerce
        default: Value returned when the string is not a number

    Returns:
        Parsed number or default
    """
    if isinstance(text, bool):
        return int(text)
    if isinstance(text, (int, float)):
        return text
    if not isinstance(text, str):
        logger.debug(f"Cannot coerce {type(text).__name__} to number, using {default}")
        return default

    literal = text.strip(_WHITESPACE)
    if not literal:
        return 0

    if _DECIMAL.fullmatch(literal):
        if any(ch in literal for ch in '.eE'):
            return float(literal)
        try:
            return int(literal)
        except ValueError:
            # Too many digits for int(); keep the magnitude as a float
            return float(literal)

    match = _INFINITY.fullmatch(literal)
    if match:
        return -math.inf if match.group(1) == '-' else math.inf

    for pattern, base in _RADIX:
        match = pattern.fullmatch(literal)
        if match:
            return int(match.group(1), base)

    logger.debug(f"Not a number: {text!r}, using {default}")
    return default


def format_number(value: Number) -> str:
    """
    Render a number in its default decimal form.

    6.0 -> "6", 0.5 -> "0.5", 1e21 -> "1e+21", 1e-7 -> "1e-7",
    inf -> "Infinity", nan -> "NaN".
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        if abs(value) < _EXPONENT_HIGH:
            return str(value)
        try:
            value = float(value)
        except OverflowError:
            value = math.inf if value > 0 else -math.inf

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    if value == 0:
        return "0"

    text = repr(value)
    magnitude = abs(value)

    if magnitude >= _EXPONENT_HIGH or magnitude < _EXPONENT_LOW:
        mantissa, _, exponent = text.partition('e')
        if mantissa.endswith('.0'):
            mantissa = mantissa[:-2]
        power = int(exponent)
        sign = '+' if power > 0 else '-'
        return f"{mantissa}e{sign}{abs(power)}"

    text = format(Decimal(text), 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text

