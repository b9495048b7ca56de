"""rgb(r, g, b) with each channel an integer 0-255.

Whitespace is allowed around channels and commas. No leading zeros,
no percentages, no alpha.

Example: rgb(121, 23, 5)
"""

from kind_checker.core.grammar import BYTE, SEP
from kind_checker.core.types import ColourFormat, ColourPattern

pattern = ColourPattern(ColourFormat.RGB, help='rgb() with three 0-255 channels')


@pattern.grammar
def grammar(config) -> str:
    return rf'rgb\(\s*{BYTE}(?:{SEP}{BYTE}){{2}}\s*\)'
