"""Leaf classifiers over the runtime type and internal tag of a value.

Every predicate is total: any value, including None and UNDEFINED, has an
answer and nothing raises.
"""

from kind_checker.core.tags import internal_tag, runtime_type


def is_undefined(value: object) -> bool:
    return runtime_type(value) == 'undefined'


def is_string(value: object) -> bool:
    return internal_tag(value) == 'String'


def is_boolean(value: object) -> bool:
    return internal_tag(value) == 'Boolean'


def is_object(value: object) -> bool:
    """True for any non-None value whose runtime type is 'object'."""
    return runtime_type(value) == 'object' and value is not None


def is_function(value: object) -> bool:
    """True for functions, methods and classes, and for callable instances
    such as functools.partial objects.
    """
    return runtime_type(value) == 'function' or (is_object(value) and internal_tag(value) == 'Function')


def is_symbol(value: object) -> bool:
    """True for Symbol tokens and enum members (ColourFormat included)."""
    return runtime_type(value) == 'symbol' or internal_tag(value) == 'Symbol'


def is_date(value: object) -> bool:
    return internal_tag(value) == 'Date'


def is_regexp(value: object) -> bool:
    return internal_tag(value) == 'RegExp'


def is_array(value: object) -> bool:
    return internal_tag(value) == 'Array'
