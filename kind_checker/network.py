"""IPv4 dotted-quad recognition.

Four dot-separated octets 0-255, no leading zeros except '0' itself. No
CIDR suffix, no surrounding whitespace, no octal or hex octets.
"""

from kind_checker.core.grammar import IPV4_PATTERN
from kind_checker.primitives import is_string


def is_ipv4(value: object) -> bool:
    return is_string(value) and IPV4_PATTERN.fullmatch(value) is not None
