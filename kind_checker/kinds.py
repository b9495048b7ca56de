"""Summarise every ValueKind a value satisfies."""

from collections.abc import Callable

from kind_checker.core.types import ValueKind
from kind_checker.numeric import is_integer, is_number
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

_PREDICATES: dict[ValueKind, Callable[[object], bool]] = {
    ValueKind.UNDEFINED: is_undefined,
    ValueKind.STRING: is_string,
    ValueKind.BOOLEAN: is_boolean,
    ValueKind.OBJECT: is_object,
    ValueKind.FUNCTION: is_function,
    ValueKind.SYMBOL: is_symbol,
    ValueKind.DATE: is_date,
    ValueKind.REGEXP: is_regexp,
    ValueKind.ARRAY: is_array,
}


def kinds_of(value: object, strict: bool = False) -> frozenset[ValueKind]:
    """Return the kinds `value` satisfies; `strict` applies to NUMBER and INTEGER.

    >>> sorted(k.value for k in kinds_of('42'))
    ['integer', 'number', 'string']
    >>> sorted(k.value for k in kinds_of('42', strict=True))
    ['string']
    """
    kinds = {kind for kind, predicate in _PREDICATES.items() if predicate(value)}
    if is_number(value, strict=strict):
        kinds.add(ValueKind.NUMBER)
    if is_integer(value, strict=strict):
        kinds.add(ValueKind.INTEGER)
    return frozenset(kinds)
