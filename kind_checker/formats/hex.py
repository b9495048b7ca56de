"""Hex colour: '#' followed by exactly 3 or 6 hex digits, any case.

Four, five, seven or eight digits are rejected; there is no alpha form.

Examples: #FFF, #ffffff, #A5B412
"""

import re

from kind_checker.core.types import ColourFormat, ColourPattern

pattern = ColourPattern(ColourFormat.HEX, help='#rgb or #rrggbb', flags=re.IGNORECASE)


@pattern.grammar
def grammar(config) -> str:
    return r'#[0-9a-f]{3}(?:[0-9a-f]{3})?'
