# -----------------------------------------------------------------------------
#  arithmetic_divisor.py
#  Divisor-based test functions
# -----------------------------------------------------------------------------

from __future__ import annotations

from sympy import divisor_sigma

from numclass_api.registry import classifier

CATEGORY = "Arithmetic and Divisor-based"

# Above this bound the divisor scan is replaced by σ(n) from sympy's factorization.
DIVISOR_SCAN_LIMIT = 10**10


def proper_divisors(n: int) -> list[int]:
    """Sorted proper divisors of n (n >= 2), found in pairs (i, n // i) with i*i <= n."""
    small = [1]
    large: list[int] = []
    i = 2
    while i * i <= n:
        if n % i == 0:
            small.append(i)
            j = n // i
            if j != i:
                large.append(j)
        i += 1
    return small + large[::-1]


def proper_divisor_sum(n: int) -> int:
    """
    Sum of the positive divisors of n that are smaller than n; 0 for n <= 1.
    A square root divisor is counted once.
    """
    if n <= 1:
        return 0
    if n > DIVISOR_SCAN_LIMIT:
        return int(divisor_sigma(n)) - n
    total = 1
    i = 2
    while i * i <= n:
        if n % i == 0:
            total += i
            j = n // i
            if j != i:
                total += j
        i += 1
    return total


def is_perfect(n: int) -> bool:
    return n > 1 and proper_divisor_sum(n) == n


@classifier(
    label="Perfect number",
    description="A positive integer equal to the sum of its proper divisors.",
    oeis="A000396",
    category=CATEGORY,
)
def is_perfect_number(n: int) -> tuple[bool, str | None]:
    """
    Check if n is a perfect number.
    Example: 28 = 1 + 2 + 4 + 7 + 14
    """
    if not is_perfect(n):
        return False, None

    # For small n, give the explicit sum of divisors.
    if n <= DIVISOR_SCAN_LIMIT:
        proof = " + ".join(map(str, proper_divisors(n))) + f" = {n}"
        return True, f"Sum of proper divisors: {proof}."
    return True, f"Sum of proper divisors equals n (σ(n) = 2n); {n} is a perfect number."
