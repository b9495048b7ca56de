"""Regular-grammar fragments shared by the numeric, colour and IPv4 matchers.

Fragments are plain strings so they can be composed; every compiled pattern
is used with `fullmatch` and compiled with re.ASCII (`\\d` is 0-9 only).
None of the fragments nests unbounded quantifiers, so matching stays linear.
"""

import re

# 0-255, no leading zeros
BYTE = r'(?:2(?:[0-4]\d|5[0-5])|1\d{2}|[1-9]?\d)'

# 0-360
HUE = r'(?:3(?:60|[0-5]\d)|[12]\d{2}|[1-9]?\d)'

# 0-100 with at most one decimal digit; 100 only as 100 or 100.0
PERCENT = r'(?:100(?:\.0)?|[1-9]?\d(?:\.\d)?)'

# Historical percentage terms, kept for KIND_CHECKER_LEGACY_HSLA
LEGACY_HSL_PERCENT = r'(?:(?:100|[1-9]?\d)(?:\.\d)?)'
LEGACY_HSLA_PERCENT = r'(?:(?:100(?:\.0)?|[1-9]?\d)(?:\.\d)?)'

# 0, 1, 1.0, 0.d or .d
ALPHA = r'(?:0|1(?:\.0)?|0?\.\d)'

# optional whitespace, comma, optional whitespace
SEP = r'\s*,\s*'

NUMBER = r'[-+]?(?:\d+|\d*\.\d+)(?:e[-+]?\d+)?'

NUMBER_PATTERN = re.compile(NUMBER, re.IGNORECASE | re.ASCII)
IPV4_PATTERN = re.compile(rf'{BYTE}(?:\.{BYTE}){{3}}', re.ASCII)
