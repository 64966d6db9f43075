"""Greatest common divisor and least common multiple problems."""

from functools import reduce
from math import gcd

MOD = 1_000_000_007


def _check_digits(digits):
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"not a decimal digit string: {digits!r}")


def lcm_and_gcd(a, b):
    """Return ``(lcm, gcd)`` of two integers."""
    g = gcd(a, b)
    if g == 0:
        raise ValueError("lcm and gcd are undefined when both numbers are zero")
    return abs(a * b) // g, g


def lcm_of_range(n):
    """Return the least common multiple of 1, 2, ..., n."""
    composite = bytearray(max(n + 1, 2))
    result = 1
    for i in range(2, n + 1):
        if composite[i]:
            continue
        for j in range(i * i, n + 1, i):
            composite[j] = 1
        power = i
        while power * i <= n:
            power *= i
        result *= power
    return result


def product_power_gcd(values):
    """Return (product of values) ** gcd(values), modulo 1e9+7."""
    values = list(values)
    if not values:
        raise ValueError("at least one value is required")
    product = 1
    for value in values:
        product = product * value % MOD
    exponent = reduce(gcd, values)
    return pow(product, exponent, MOD)


def gcd_with_big(a, digits):
    """Return gcd(a, N) where N is given as a decimal digit string."""
    if a <= 0:
        raise ValueError("a must be a positive integer")
    _check_digits(digits)
    remainder = 0
    for ch in digits:
        remainder = (remainder * 10 + int(ch)) % a
    return gcd(a, remainder)


def repeat_by_gcd(a, x, y):
    """Return the decimal form of ``a`` written gcd(x, y) times in a row."""
    return str(a) * gcd(x, y)


def _half_toward_zero(value):
    return -((-value) // 2) if value < 0 else value // 2


def can_split_range(n, m):
    """Tell whether 1..n splits into two coprime sums whose difference is m."""
    total = n * (n + 1) // 2
    x = _half_toward_zero(total + m)
    y = x - m
    return gcd(x, y) == 1 and x + y == total


def smallest_common_multiple_with_digits(x, y, z, n):
    """Return the smallest n-digit common multiple of x, y and z, or None."""
    if min(x, y, z) <= 0:
        raise ValueError("x, y and z must be positive")
    if n < 1:
        raise ValueError("n must be at least 1")
    step = x * y // gcd(x, y)
    step = step * z // gcd(step, z)
    lowest = 10 ** (n - 1)
    limit = lowest * 10
    quotient = lowest // step
    if step > limit:
        return None
    if quotient * step == lowest:
        return lowest
    if (quotient + 1) * step < limit:
        return (quotient + 1) * step
    return None