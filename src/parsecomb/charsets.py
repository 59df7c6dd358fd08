"""Character sets used by the primitive matchers.

All sets are frozensets for O(1) membership testing and safe sharing.

Usage:
    from parsecomb.charsets import DIGITS

    if char in DIGITS:
        ...
"""

# ASCII decimal digits only; str.isdigit() also accepts superscripts
DIGITS: frozenset[str] = frozenset("0123456789")

# Space, tab, newline, carriage return, vertical tab
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\v")
