# SPDX-License-Identifier: MIT
"""Dot-separated identifiers used by pre-release and build metadata.

Pre-release precedence (SemVer 2.0.0, rule 11):
- identifiers are compared left to right
- numeric identifiers compare as integers and sort below alphanumeric ones
- alphanumeric identifiers compare by code point
- a shorter identifier list sorts first when all shared positions are equal
"""

from __future__ import annotations

import re

from .config import NumericIdentifierRule

# One or more [0-9A-Za-z-] groups joined by dots, no empty groups
IDENTIFIERS_PATTERN = re.compile(r"(?:[0-9A-Za-z-]+\.)*[0-9A-Za-z-]+")


def is_valid_identifiers(text: str) -> bool:
    """Check if text is a non-empty, dot-separated identifier list.

    Examples:
        >>> is_valid_identifiers("alpha.1")
        True
        >>> is_valid_identifiers("alpha..1")
        False
    """
    if not isinstance(text, str):
        return False
    return IDENTIFIERS_PATTERN.fullmatch(text) is not None


def _is_digits(part: str) -> bool:
    return part.isascii() and part.isdigit()


def is_numeric_identifier(
    part: str, rule: NumericIdentifierRule = NumericIdentifierRule.REFERENCE
) -> bool:
    """Return True if a pre-release identifier compares as an integer.

    Examples:
        >>> is_numeric_identifier("01")
        True
        >>> is_numeric_identifier("01", NumericIdentifierRule.STRICT)
        False
        >>> is_numeric_identifier("007")
        False
    """
    if not _is_digits(part):
        return False
    if rule is NumericIdentifierRule.STRICT:
        return part == "0" or not part.startswith("0")
    return not part.startswith("00")


def _compare_numeric(n1: str, n2: str) -> int:
    # Compare digit strings by magnitude so arbitrarily long identifiers
    # never go through int()
    n1 = n1.lstrip("0") or "0"
    n2 = n2.lstrip("0") or "0"
    key1, key2 = (len(n1), n1), (len(n2), n2)
    if key1 == key2:
        return 0
    return -1 if key1 < key2 else 1


def compare_identifier(
    p1: str, p2: str, rule: NumericIdentifierRule = NumericIdentifierRule.REFERENCE
) -> int:
    """Compare two single pre-release identifiers.

    Returns:
        -1, 0 or 1
    """
    is_num1 = is_numeric_identifier(p1, rule)
    is_num2 = is_numeric_identifier(p2, rule)

    if is_num1 and is_num2:
        return _compare_numeric(p1, p2)
    if is_num1:
        # Numeric < alphanumeric
        return -1
    if is_num2:
        return 1
    if p1 == p2:
        return 0
    return -1 if p1 < p2 else 1


def compare_prerelease(
    pre1: str, pre2: str, rule: NumericIdentifierRule = NumericIdentifierRule.REFERENCE
) -> int:
    """Compare two pre-release strings.

    An empty string means "no pre-release", which has higher precedence
    than any pre-release (1.0.0 > 1.0.0-alpha).

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1
    if not pre2:
        return -1

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        result = compare_identifier(p1, p2, rule)
        if result:
            return result

    # All shared identifiers equal - the longer list has higher precedence
    if len(parts1) != len(parts2):
        return -1 if len(parts1) < len(parts2) else 1

    return 0
