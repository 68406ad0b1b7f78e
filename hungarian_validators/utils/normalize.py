"""
Input normalisation helpers.

The two identifier types are cleaned differently: TAJ numbers may contain
separators anywhere (``111-111 110``), whereas a tax number only has its
surrounding whitespace removed, so embedded separators make it fail the
format check.
"""

import re

_NON_DIGIT_REGEX = re.compile(r"[^0-9]")


def clean_numeric_input(value: str) -> str:
    """
    Remove every character that is not an ASCII digit.

    Parameters
    ----------
    value: str
        Raw user input.

    Returns
    -------
    str
        The digits of *value* in their original order.
    """
    return _NON_DIGIT_REGEX.sub("", value)


def trim_input(value: str) -> str:
    """Strip leading and trailing whitespace only."""
    return value.strip()


def is_ascii_digits(value: str, length: int) -> bool:
    """Return ``True`` if *value* consists of exactly *length* ASCII digits."""
    return len(value) == length and re.fullmatch(r"[0-9]+", value) is not None


def to_digits(value: str) -> list[int]:
    return [int(ch) for ch in value]
