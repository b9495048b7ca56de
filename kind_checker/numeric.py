"""Number and integer recognition with a strict/loose mode.

Strict mode accepts only values already tagged 'Number'. Loose mode also
accepts strings matching the numeric-literal grammar:

    [+-] digits | [+-] [digits] . digits, then optional e[+-]digits

Integer recognition reuses that grammar and adds a whole-value check, so
the two can never disagree about what a numeric string is.
"""

import decimal
import math
import numbers

from kind_checker.core.grammar import NUMBER_PATTERN
from kind_checker.core.tags import internal_tag
from kind_checker.primitives import is_string


def is_numeric_literal(text: object) -> bool:
    """True if `text` is a string spelling a number, e.g. '-1.5e3' or '.5'."""
    return is_string(text) and NUMBER_PATTERN.fullmatch(text) is not None


def is_integral_literal(text: object) -> bool:
    """True if `text` is a numeric literal whose double value is finite and whole.

    '1.0', '150e-1' and '1e-400' (which rounds to 0) are whole; '0.5' and
    '1e400' (which overflows) are not.
    """
    if not is_numeric_literal(text):
        return False
    number = float(text)
    return math.isfinite(number) and number.is_integer()


def _is_whole(value: object) -> bool:
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, numbers.Rational):
        return value.denominator == 1
    if isinstance(value, decimal.Decimal):
        return value.is_finite() and value == value.to_integral_value()
    return math.isfinite(value) and math.floor(value) == value


def is_number(value: object, strict: bool = False) -> bool:
    """True for numeric values; in loose mode also for numeric strings.

    NaN and infinities count as numbers: this classifies, it does not
    validate ranges.
    """
    if internal_tag(value) == 'Number':
        return True
    if strict:
        return False
    return is_numeric_literal(value)


def is_integer(value: object, strict: bool = False) -> bool:
    """True for finite whole numbers; in loose mode also for whole numeric strings."""
    if is_number(value, strict=True):
        return _is_whole(value)
    if not strict and is_string(value):
        return is_integral_literal(value)
    return False
