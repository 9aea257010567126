"""Conversion helpers for textual machine words."""

import re

_ULONG_MAX = 2**64 - 1
_WORD_MASK = 0xFFFFFFFF

# Leading C whitespace, an optional sign, then the longest run of binary digits.
_BINARY_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)([01]*)")


def binary_to_int(text: str) -> int:
    """Parse a binary numeral into an unsigned 32-bit value.

    Leading whitespace and a sign are accepted, parsing stops at the first
    character that is not a binary digit, and text without digits gives 0.
    A negative numeral wraps around as an unsigned value would.
    """
    match = _BINARY_PREFIX.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits, 2)
    if value > _ULONG_MAX:
        value = _ULONG_MAX
    elif sign == "-":
        value = -value & _ULONG_MAX
    return value & _WORD_MASK