"""kind-checker — Total predicates answering "what kind of value is this?".

Primitive kinds follow JavaScript's typeof / Object.prototype.toString
model (see kind_checker.core.tags); textual formats cover colour literals
and IPv4 addresses.

    >>> from kind_checker import ColourFormat, is_colour, is_integer
    >>> is_integer('42'), is_integer('42', strict=True)
    (True, False)
    >>> is_colour('#fff', ColourFormat.HEX)
    True
"""

from kind_checker.colours import detect_colour_format, is_colour
from kind_checker.core.tags import internal_tag, runtime_type
from kind_checker.core.types import UNDEFINED, ColourFormat, Symbol, ValueKind
from kind_checker.kinds import kinds_of
from kind_checker.network import is_ipv4
from kind_checker.numeric import is_integer, is_integral_literal, is_number, is_numeric_literal
from kind_checker.primitives import (
    is_array,
    is_boolean,
    is_date,
    is_function,
    is_object,
    is_regexp,
    is_string,
    is_symbol,
    is_undefined,
)

__all__ = [
    'UNDEFINED',
    'ColourFormat',
    'Symbol',
    'ValueKind',
    'detect_colour_format',
    'internal_tag',
    'is_array',
    'is_boolean',
    'is_colour',
    'is_date',
    'is_function',
    'is_integer',
    'is_integral_literal',
    'is_ipv4',
    'is_number',
    'is_numeric_literal',
    'is_object',
    'is_regexp',
    'is_string',
    'is_symbol',
    'is_undefined',
    'kinds_of',
    'runtime_type',
]
