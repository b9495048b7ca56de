"""Tests for kind_checker.core.tags — typeof / toString mapping."""

import copy
import datetime
import enum
import pickle
import re
from decimal import Decimal
from fractions import Fraction

import numpy as np
from kind_checker.core.tags import internal_tag, runtime_type
from kind_checker.core.types import UNDEFINED, ColourFormat, Symbol, _Undefined


class _Colour(enum.IntEnum):
    RED = 1


class _Name(str, enum.Enum):
    ALICE = 'alice'


class TestRuntimeType:
    def test_undefined(self):
        assert runtime_type(UNDEFINED) == 'undefined'

    def test_none_is_object(self):
        assert runtime_type(None) == 'object'

    def test_booleans(self):
        assert runtime_type(True) == 'boolean'
        assert runtime_type(np.bool_(False)) == 'boolean'

    def test_numbers(self):
        assert runtime_type(1) == 'number'
        assert runtime_type(1.5) == 'number'
        assert runtime_type(np.float64(2)) == 'number'
        assert runtime_type(Decimal('1.1')) == 'number'

    def test_string(self):
        assert runtime_type('') == 'string'

    def test_symbol(self):
        assert runtime_type(Symbol('x')) == 'symbol'

    def test_functions(self):
        assert runtime_type(len) == 'function'
        assert runtime_type(lambda: None) == 'function'
        assert runtime_type(int) == 'function'
        assert runtime_type('abc'.upper) == 'function'

    def test_everything_else_is_object(self):
        assert runtime_type({}) == 'object'
        assert runtime_type([]) == 'object'
        assert runtime_type(datetime.date(2024, 1, 1)) == 'object'
        assert runtime_type(re.compile('a')) == 'object'
        assert runtime_type(ColourFormat.HEX) == 'object'


class TestInternalTag:
    def test_undefined_and_null(self):
        assert internal_tag(UNDEFINED) == 'Undefined'
        assert internal_tag(None) == 'Null'

    def test_bool_is_not_number(self):
        assert internal_tag(True) == 'Boolean'
        assert internal_tag(np.bool_(True)) == 'Boolean'

    def test_numbers(self):
        values = [0, -3, 2.5, float('nan'), float('inf'), np.int8(1), np.float32(1.5), Decimal('1'),
                  Fraction(1, 3)]
        for value in values:
            assert internal_tag(value) == 'Number', value

    def test_enum_subclasses_keep_their_value_tag(self):
        assert internal_tag(_Colour.RED) == 'Number'
        assert internal_tag(_Name.ALICE) == 'String'

    def test_symbols(self):
        assert internal_tag(Symbol()) == 'Symbol'
        assert internal_tag(ColourFormat.RGB) == 'Symbol'

    def test_dates(self):
        assert internal_tag(datetime.date(2024, 1, 1)) == 'Date'
        assert internal_tag(datetime.datetime(2024, 1, 1, 12)) == 'Date'
        assert internal_tag(np.datetime64('2024-01-01')) == 'Date'

    def test_regexp(self):
        assert internal_tag(re.compile(r'\d+')) == 'RegExp'

    def test_arrays(self):
        assert internal_tag([]) == 'Array'
        assert internal_tag((1, 2)) == 'Array'
        assert internal_tag(np.zeros(3)) == 'Array'

    def test_function(self):
        assert internal_tag(print) == 'Function'

    def test_object_fallback(self):
        assert internal_tag({}) == 'Object'
        assert internal_tag(object()) == 'Object'
        assert internal_tag(b'bytes') == 'Object'


class TestUndefinedSentinel:
    def test_singleton(self):
        assert _Undefined() is UNDEFINED

    def test_falsy(self):
        assert not UNDEFINED

    def test_repr(self):
        assert repr(UNDEFINED) == 'UNDEFINED'

    def test_survives_copy_and_pickle(self):
        assert copy.copy(UNDEFINED) is UNDEFINED
        assert copy.deepcopy(UNDEFINED) is UNDEFINED
        assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED


class TestSymbol:
    def test_unique(self):
        assert Symbol('a') != Symbol('a')

    def test_equal_to_itself(self):
        s = Symbol('a')
        assert s == s

    def test_repr(self):
        assert repr(Symbol('tag')) == 'Symbol(tag)'
