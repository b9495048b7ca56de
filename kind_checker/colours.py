"""Colour literal classification: hex, rgb, rgba, hsl and hsla.

is_colour(value, types) tests `value` against the selected formats and is
True if any of them matches. The selector is normalised three ways:

  ColourFormat or str      a one-element selection
  list/tuple/set/frozenset used as given
  anything else            all five formats

Entries that are not ColourFormat members are dropped without error. A
plain string such as 'hex' is never a format, so it can never match.

Examples:
    is_colour('#A5B412')                                  -> True
    is_colour('rgb(121, 23, 5)', ColourFormat.HEX)        -> False
    is_colour('hsla(210, 12%, 5%, 0.5)', [ColourFormat.HSL, ColourFormat.HSLA]) -> True
"""

import logging

from kind_checker import registry
from kind_checker.core.types import ColourFormat
from kind_checker.primitives import is_string

logger = logging.getLogger(__name__)

_COLLECTIONS = (list, tuple, set, frozenset)


def _normalise_selector(types: object) -> list:
    if isinstance(types, (ColourFormat, str)):
        return [types]
    if isinstance(types, _COLLECTIONS):
        return list(types)
    return list(ColourFormat)


def is_colour(value: object, types: object = None) -> bool:
    """True if `value` is a colour literal in at least one selected format."""
    if not is_string(value):
        return False

    matched = False
    for fmt in _normalise_selector(types):
        pattern = registry.lookup(fmt)
        if pattern is None:
            logger.debug('Ignoring unrecognised colour format selector %r', fmt)
            continue
        if pattern.fullmatch(value) is not None:
            matched = True
            break
    return matched


def detect_colour_format(value: object) -> ColourFormat | None:
    """Return the first format (in ColourFormat order) that `value` matches."""
    if not is_string(value):
        return None
    for fmt, pattern in registry.all_formats().items():
        if pattern.fullmatch(value) is not None:
            return fmt
    return None
