"""Self-contained exponential used by the normal density.

``exp_approx`` never calls into ``math.exp``: the integer part of the argument
goes through exact repeated squaring of ``E`` and the fractional part through a
truncated Taylor series, so the whole table build stays a pure numeric
computation with a tunable error.
"""

import math

EXP_ACCURACY = 1e-6
E = 2.718281828459045


def int_pow(x: float, n: int) -> float:
    """Compute ``x ** n`` for a non-negative integer ``n`` in O(log n) multiplications."""
    p = 1.0
    while n > 0:
        if n & 1:
            p *= x
        x *= x
        n >>= 1
    return p


def exp_approx(x: float, accuracy: float = EXP_ACCURACY) -> float:
    """
    Approximate ``e ** x`` for any finite ``x``.

    Args:
        x: Exponent.
        accuracy: Series terms are summed while they exceed this value.

    Returns:
        The approximation. Arguments too large for the float range give ``inf``
        (or ``0.0`` when negative) rather than raising.
    """
    if math.isinf(x):
        return 0.0 if x < 0 else x

    negative = x < 0
    x = -x if negative else x

    # exp(x) = exp(n) * exp(f) with n the integer part and f in [0, 1)
    n = int(x)
    f = x - n

    total = 0.0
    term = 1.0
    k = 1
    while term > accuracy:
        total += term
        term *= f / k
        k += 1

    result = int_pow(E, n) * total
    if negative:
        return 1.0 / result
    return result
