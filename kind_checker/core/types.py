"""Shared types for kind-checker: sentinels, kind/format enums, ColourPattern."""

from __future__ import annotations

import enum
import re
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kind_checker.core.config import Config


class _Undefined:
    """The single `undefined` value. Distinct from None, which plays `null`."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'UNDEFINED'

    def __reduce__(self) -> str:
        return 'UNDEFINED'


UNDEFINED = _Undefined()


class Symbol:
    """An opaque unique token. Equal only to itself."""

    __slots__ = ('description',)

    def __init__(self, description: str = ''):
        self.description = description

    def __repr__(self) -> str:
        return f'Symbol({self.description})'


class ValueKind(enum.Enum):
    """Every classification a value can satisfy. Kinds overlap."""

    UNDEFINED = 'undefined'
    STRING = 'string'
    BOOLEAN = 'boolean'
    NUMBER = 'number'
    INTEGER = 'integer'
    OBJECT = 'object'
    FUNCTION = 'function'
    SYMBOL = 'symbol'
    DATE = 'date'
    REGEXP = 'regexp'
    ARRAY = 'array'


class ColourFormat(enum.Enum):
    """Supported textual colour grammars.

    Members are identity tokens: `ColourFormat.HEX != 'hex'`, so a format
    selector can never collide with user data.
    """

    HEX = enum.auto()
    RGB = enum.auto()
    RGBA = enum.auto()
    HSL = enum.auto()
    HSLA = enum.auto()


class ColourPattern:
    """A self-registering colour grammar.

    Usage in a format module:

        pattern = ColourPattern(ColourFormat.HEX, help='#rgb or #rrggbb')

        @pattern.grammar
        def grammar(config):
            return r'#[0-9a-f]{3}(?:[0-9a-f]{3})?'
    """

    def __init__(self, format: ColourFormat, help: str = '', flags: int = 0):
        self.format = format
        self.help = help
        self.flags = flags
        self._grammar_fn: Callable[[Config], str] | None = None

    def grammar(self, fn: Callable[[Config], str]) -> Callable[[Config], str]:
        """Decorator to register the grammar builder."""
        self._grammar_fn = fn
        return fn

    def compile(self, config: Config) -> re.Pattern[str]:
        """Compile the grammar for a whole-string match under `config`."""
        if self._grammar_fn is None:
            raise RuntimeError(f'Colour format {self.format.name} has no grammar')
        return re.compile(self._grammar_fn(config), self.flags | re.ASCII)
