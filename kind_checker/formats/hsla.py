"""hsla(h, s%, l%[, a]): hsl with an optional alpha term.

Unlike rgba, the alpha is optional here. Percentages follow the hsl
grammar (see hsl.py, including the KIND_CHECKER_LEGACY_HSLA switch).

Examples: hsla(210, 12%, 5%, 0.5), hsla(210, 12%, 5%)
"""

from kind_checker.core.grammar import ALPHA, HUE, LEGACY_HSLA_PERCENT, PERCENT, SEP
from kind_checker.core.types import ColourFormat, ColourPattern

pattern = ColourPattern(ColourFormat.HSLA, help='hsla() with hue, two percentages and optional alpha')


@pattern.grammar
def grammar(config) -> str:
    percent = LEGACY_HSLA_PERCENT if config.legacy_hsla else PERCENT
    return rf'hsla\(\s*{HUE}(?:{SEP}{percent}%){{2}}(?:{SEP}{ALPHA})?\s*\)'
