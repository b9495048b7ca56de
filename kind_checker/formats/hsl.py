"""hsl(h, s%, l%): hue 0-360, saturation and lightness 0-100%.

Percentages take at most one decimal digit (12.5%). With
KIND_CHECKER_LEGACY_HSLA set, the historical grammar is used instead,
which also lets through values such as 100.5%.

Example: hsl(320, 50%, 100%)
"""

from kind_checker.core.grammar import HUE, LEGACY_HSL_PERCENT, PERCENT, SEP
from kind_checker.core.types import ColourFormat, ColourPattern

pattern = ColourPattern(ColourFormat.HSL, help='hsl() with hue 0-360 and two 0-100 percentages')


@pattern.grammar
def grammar(config) -> str:
    percent = LEGACY_HSL_PERCENT if config.legacy_hsla else PERCENT
    return rf'hsl\(\s*{HUE}(?:{SEP}{percent}%){{2}}\s*\)'
