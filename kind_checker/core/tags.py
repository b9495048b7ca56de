"""Runtime type and internal tag of arbitrary Python values.

`runtime_type` mirrors JavaScript's `typeof`; `internal_tag` mirrors
`Object.prototype.toString` without the `[object ...]` wrapper. Python has
no builtin for either, so both keep an explicit check per concrete
representation. Order matters: bool is an int subclass, and str/int enums
are enum members.
"""

import datetime
import decimal
import enum
import inspect
import numbers
import re

import numpy as np

from kind_checker.core.types import UNDEFINED, Symbol


def _is_bool(value: object) -> bool:
    return isinstance(value, (bool, np.bool_))


def _is_number(value: object) -> bool:
    if _is_bool(value):
        return False
    return isinstance(value, (numbers.Real, decimal.Decimal))


def runtime_type(value: object) -> str:
    """Return the `typeof` name: undefined, object, boolean, number, string, symbol or function."""
    if value is UNDEFINED:
        return 'undefined'
    if value is None:
        return 'object'
    if _is_bool(value):
        return 'boolean'
    if _is_number(value):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, Symbol):
        return 'symbol'
    if inspect.isroutine(value) or inspect.isclass(value):
        return 'function'
    return 'object'


def internal_tag(value: object) -> str:
    """Return the canonical tag name, e.g. 'String', 'Number', 'Date', 'Null'."""
    if value is UNDEFINED:
        return 'Undefined'
    if value is None:
        return 'Null'
    if _is_bool(value):
        return 'Boolean'
    if isinstance(value, str):
        return 'String'
    if _is_number(value):
        return 'Number'
    if isinstance(value, (Symbol, enum.Enum)):
        return 'Symbol'
    if isinstance(value, (datetime.date, np.datetime64)):
        return 'Date'
    if isinstance(value, re.Pattern):
        return 'RegExp'
    if isinstance(value, (list, tuple, np.ndarray)):
        return 'Array'
    if callable(value):
        return 'Function'
    return 'Object'
