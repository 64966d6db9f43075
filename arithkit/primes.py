"""Prime numbers, factorisation and sieve problems."""

from itertools import groupby
from math import gcd, isqrt

PERFECT_LIMIT = 10**12


def _check_positive(n):
    if n < 1:
        raise ValueError("n must be a positive integer")


def _is_prime(n):
    if n < 2:
        return False
    return all(n % i for i in range(2, isqrt(n) + 1))


def _sieve(n):
    """Return a bytearray whose entry i is 1 when i is prime, for 0..n."""
    flags = bytearray([1]) * (max(n, 1) + 1)
    flags[0] = flags[1] = 0
    for i in range(2, isqrt(n) + 1 if n > 0 else 0):
        if flags[i]:
            flags[i * i :: i] = bytes(len(range(i * i, n + 1, i)))
    return flags[: n + 1] if n >= 0 else bytearray()


def prime_factors(n):
    """Return the prime factors of n in ascending order, with repetition."""
    _check_positive(n)
    factors = []
    i = 2
    while i * i <= n:
        while n % i == 0:
            factors.append(i)
            n //= i
        i += 1
    if n > 1:
        factors.append(n)
    return factors


def largest_prime_factor(n):
    """Return the largest prime factor of n; 1 for n == 1."""
    factors = prime_factors(n)
    return factors[-1] if factors else n


def primes_up_to(n):
    """Return all primes p with p <= n."""
    if n < 2:
        return []
    return [i for i, flag in enumerate(_sieve(n)) if flag]


def smallest_prime_factors(n):
    """Return [1, spf(2), ..., spf(n)], the smallest prime factor of each number."""
    _check_positive(n)
    spf = [0] * (n + 1)
    for i in range(2, n + 1):
        if spf[i] == 0:
            spf[i] = i
            for j in range(2 * i, n + 1, i):
                if spf[j] == 0:
                    spf[j] = i
    return [1] + spf[2:]


def primes_in_range(m, n):
    """Return the primes p with m <= p <= n."""
    return [p for p in primes_up_to(n) if p >= m]


def goldbach_pair(n):
    """Return the pair (p, n - p) of primes with the smallest p, or None."""
    for p in primes_up_to(n // 2):
        if _is_prime(n - p):
            return p, n - p
    return None


def is_product_of_three_distinct_primes(n):
    """Tell whether n is found to have exactly three distinct, unrepeated prime factors.

    The scan stops at the first prime that divides n more than once or once a
    fourth prime factor has been counted.
    """
    count = 0
    i = 2
    while n > 1:
        if n % i == 0:
            n //= i
            if n % i == 0:
                break
            count += 1
        if count > 3:
            break
        i += 1
    return count == 3


def factorial_prime_exponent(n, p):
    """Return the exponent of p in n!."""
    if p < 2:
        raise ValueError("p must be at least 2")
    if n < 0:
        raise ValueError("n must not be negative")
    total = 0
    power = p
    while power <= n:
        total += n // power
        power *= p
    return total


def factor_exponents(n):
    """Return the factorisation of n as a list of (prime, exponent) pairs."""
    return [(p, len(list(group))) for p, group in groupby(prime_factors(n))]


def digit_sum(n):
    """Return the sum of the decimal digits of n."""
    return sum(int(ch) for ch in str(abs(n)))


def is_smith_number(n):
    """Tell whether composite n has the digit sum of its prime factors' digits."""
    if n < 4 or _is_prime(n):
        return False
    return digit_sum(n) == sum(digit_sum(p) for p in prime_factors(n))


def is_perfect_number(n):
    """Tell whether n is an even perfect number not above 1e12."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n % 2 or n > PERFECT_LIMIT:
        return False
    total = 1 + sum(i + n // i for i in range(2, isqrt(n) + 1) if n % i == 0)
    return n == total


def kth_prime_factor(n, k):
    """Return the k-th prime factor of n counted with repetition, or None."""
    if k < 1:
        raise ValueError("k must be at least 1")
    factors = prime_factors(n)
    return factors[k - 1] if k <= len(factors) else None


def prime_squares(n):
    """Return the squares of primes that do not exceed n."""
    if n < 0:
        raise ValueError("n must not be negative")
    return [p * p for p in primes_up_to(isqrt(n))]


def count_prime_squares(n):
    """Count the squares of primes that do not exceed n."""
    if n < 0:
        raise ValueError("n must not be negative")
    return len(primes_up_to(isqrt(n)))


def count_prime_squares_from(low, n):
    """Count the squares p*p <= n of primes p with p >= low."""
    if n < 0:
        raise ValueError("n must not be negative")
    return sum(1 for p in primes_up_to(isqrt(n)) if p >= low)


def count_divisible(m, n, a, b):
    """Count the integers in [m, n] divisible by a or by b."""
    if a <= 0 or b <= 0:
        raise ValueError("a and b must be positive")
    both = a * b // gcd(a, b)

    def upto(t):
        return t // a + t // b - t // both

    return upto(n) - upto(m - 1)