"""Modular arithmetic problems."""

from math import comb, gcd, isqrt

MOD = 1_000_000_007


def _check_digits(digits):
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"not a decimal digit string: {digits!r}")


def _check_modulus(m):
    if m <= 0:
        raise ValueError("modulus must be positive")


def power_mod(x, y, p):
    """Return x ** y modulo p; an exponent of zero always gives 1."""
    _check_modulus(p)
    if y < 0:
        raise ValueError("exponent must not be negative")
    if y == 0:
        return 1
    return pow(x, y, p)


def evaluate_polynomial(coefficients, x):
    """Evaluate a polynomial, highest degree first, modulo 1e9+7."""
    total = 0
    for coefficient in coefficients:
        total = (total * x + coefficient) % MOD
    return total


def multiply_mod(a, b, c):
    """Return a * b modulo c, working through the decimal digits of b."""
    _check_modulus(c)
    if b < 0:
        raise ValueError("b must not be negative")
    result = 0
    if b == 0:
        return result
    for ch in str(b):
        result = (10 * result % c + int(ch) * a % c) % c
    return result


def mod_inverse(a, m):
    """Return the inverse of a modulo m in [0, m), or None if there is none."""
    _check_modulus(m)
    if m == 1 or gcd(a, m) != 1:
        return None
    return pow(a, -1, m)


def sum_of_remainders(n, k):
    """Return the sum of i % k for i = 1..n."""
    if k <= 0:
        raise ValueError("k must be positive")
    if n < 0:
        raise ValueError("n must not be negative")
    cycles = n // k
    rest = n - cycles * k
    return cycles * k * (k - 1) // 2 + rest * (rest + 1) // 2


def remainder_sum_equals(n, k):
    """Tell whether the sum of i % k for i = 1..n equals k."""
    return sum_of_remainders(n, k) == k


def big_mod(digits, m):
    """Return N modulo m where N is given as a decimal digit string."""
    _check_digits(digits)
    _check_modulus(m)
    remainder = 0
    for ch in digits:
        remainder = (remainder * 10 + int(ch)) % m
    return remainder


def big_power_mod(digits, b, p):
    """Return N ** b modulo p where N is given as a decimal digit string."""
    return power_mod(big_mod(digits, p), b, p) % p


def count_equal_remainder_moduli(values):
    """Count the moduli that leave every value with the same remainder."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("at least one value is required")
    spread = ordered[-1] - ordered[0]
    divisors = set()
    for i in range(1, isqrt(spread) + 1):
        if spread % i == 0:
            divisors.update((i, spread // i))
    return sum(1 for d in divisors if len({v % d for v in ordered}) == 1)


def binomial_mod(n, k):
    """Return C(n, k) modulo 1e9+7."""
    if k == 0 or k == n:
        return 1
    if n < 0 or k < 0 or k > n:
        raise ValueError("need 0 <= k <= n")
    return comb(n, k) % MOD