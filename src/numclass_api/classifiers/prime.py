# -----------------------------------------------------------------------------
#  prime.py
#  Prime test functions
# -----------------------------------------------------------------------------

from __future__ import annotations

from sympy import isprime

from numclass_api.registry import classifier

CATEGORY = "Primes and Prime-related Numbers"

# Above this bound trial division is too slow for a request; sympy's test is
# deterministic for every 64-bit integer and gives the same answer.
TRIAL_DIVISION_LIMIT = 10**12


def smallest_factor(n: int) -> int | None:
    """
    Smallest divisor d of n with 1 < d and d*d <= n, or None if there is none.
    Uses a 6k±1 wheel; the bound is checked with integers only.
    """
    if n < 4:  # noqa: PLR2004
        return None
    for p in (2, 3):
        if n % p == 0:
            return p
    i = 5
    while i * i <= n:
        if n % i == 0:
            return i
        if n % (i + 2) == 0:
            return i + 2
        i += 6
    return None


def is_prime(n: int) -> bool:
    """True iff n > 1 and no integer i with i*i <= n divides n."""
    if n <= 1:
        return False
    if n > TRIAL_DIVISION_LIMIT:
        return bool(isprime(n))
    return smallest_factor(n) is None


@classifier(
    label="Prime number",
    description="Greater than 1 with no positive divisors other than 1 and itself.",
    oeis="A000040",
    category=CATEGORY,
)
def is_prime_number(n: int) -> tuple[bool, str | None]:
    if not is_prime(n):
        if n > 1 and n <= TRIAL_DIVISION_LIMIT:
            p = smallest_factor(n)
            return False, f"{n} = {p} × {n // p}"
        return False, None
    if n <= 3:  # noqa: PLR2004
        return True, f"{n} is prime."
    return True, f"{n} has no divisor d with 1 < d and d² ≤ {n}."
