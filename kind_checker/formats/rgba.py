"""rgba(r, g, b, a): three 0-255 channels and an alpha in [0, 1].

The 'rgb(' prefix is accepted too, as long as the alpha term is present.
Alpha is 0, 1, 1.0, or a one-digit fraction (.5 or 0.5).

Example: rgba(123, 51, 1, 0.2)
"""

from kind_checker.core.grammar import ALPHA, BYTE, SEP
from kind_checker.core.types import ColourFormat, ColourPattern

pattern = ColourPattern(ColourFormat.RGBA, help='rgba() with three 0-255 channels and an alpha')


@pattern.grammar
def grammar(config) -> str:
    return rf'rgba?\(\s*{BYTE}(?:{SEP}{BYTE}){{2}}{SEP}{ALPHA}\s*\)'
