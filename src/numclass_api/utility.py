# -----------------------------------------------------------------------------
#  Utility functions
# -----------------------------------------------------------------------------

from __future__ import annotations

import re

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
_MAX_DIGITS = 19

_STRICT_INT = re.compile(r"[+-]?[0-9]+", re.ASCII)


class UserInputError(Exception):
    pass


class InvalidNumberError(UserInputError):
    """Raised when a raw value is not an acceptable machine integer."""

    def __init__(self, raw: str, reason: str = "not an integer"):
        super().__init__(f"Invalid input: {raw!r} ({reason}).")
        self.raw = raw
        self.reason = reason


def _token(name: str) -> str:
    return re.sub(r"[^A-Za-z0-9]+", "_", name).upper().strip("_")


def parse_int_strict(raw: str | None, *, allow_negative: bool = True,
                     lo: int = INT64_MIN, hi: int = INT64_MAX) -> int:
    """
    Parse a query value as a signed machine integer.

    Accepts an optional sign followed by ASCII digits only; int() alone would
    also take surrounding whitespace and underscores, so the shape is checked
    first. Raises InvalidNumberError on anything else.
    """
    s = "" if raw is None else str(raw)
    if not _STRICT_INT.fullmatch(s):
        raise InvalidNumberError(s)
    sign = -1 if s[0] == "-" else 1
    digits = s.lstrip("+-").lstrip("0") or "0"
    # a 64-bit value has at most 19 digits; longer strings would also hit
    # int()'s conversion limit
    if len(digits) > _MAX_DIGITS:
        raise InvalidNumberError(s, "out of range")
    try:
        n = sign * int(digits)
    except ValueError:
        raise InvalidNumberError(s) from None
    if not lo <= n <= hi:
        raise InvalidNumberError(s, "out of range")
    if n < 0 and not allow_negative:
        raise InvalidNumberError(s, "negative numbers are not supported")
    return n


def dec_digits(n: int) -> int:
    """Exact decimal digit count of |n| by repeated division; 0 has one digit."""
    n = abs(n)
    if n == 0:
        return 1
    count = 0
    while n:
        n //= 10
        count += 1
    return count


def digits_of(n: int) -> list[int]:
    """Decimal digits of |n|, most significant first."""
    n = abs(n)
    if n == 0:
        return [0]
    out: list[int] = []
    while n:
        n, d = divmod(n, 10)
        out.append(d)
    out.reverse()
    return out


def digit_sum(n: int) -> int:
    """
    Calculate the sum of digits of n.
    Args: n (int): The number.

    Returns: int: The sum of the absolute value digits.
    """
    n = abs(n)
    total = 0
    while n:
        n, d = divmod(n, 10)
        total += d
    return total


def parity(n: int) -> str:
    """
    Returns the parity tag of a number ("even" or "odd"); sign does not matter.
    """
    if n % 2 == 0:
        return "even"
    return "odd"
