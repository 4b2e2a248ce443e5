# -----------------------------------------------------------------------------
#  digit_based.py
#  Digit based test functions
# -----------------------------------------------------------------------------

from __future__ import annotations

from numclass_api.registry import classifier
from numclass_api.utility import dec_digits, digits_of

CATEGORY = "Digit-based"


def is_armstrong(n: int) -> bool:
    """
    True iff n equals the sum of its decimal digits, each raised to the number
    of digits. Callers pass n >= 0; negative input is answered with False.
    0 counts as a one-digit Armstrong number.
    """
    if n < 0:
        return False
    power = dec_digits(n)
    return n == sum(d ** power for d in digits_of(n))


@classifier(
    label="Armstrong number",
    description="Sum of digits^k where k is the digit count (also called a narcissistic number).",
    oeis="A005188",
    category=CATEGORY,
    tag="armstrong",
)
def is_armstrong_number(n: int) -> tuple[bool, str | None]:
    """
    Check if n is an Armstrong (narcissistic) number.
    Returns (True, details) if so, else (False, None).
    """
    if not is_armstrong(n):
        return False, None
    power = dec_digits(n)
    terms = " + ".join(f"{d}^{power}" for d in digits_of(n))
    return True, f"{n} = {terms} = {n}"

