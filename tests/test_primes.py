import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from arithkit.primes import (
    count_divisible,
    count_prime_squares,
    count_prime_squares_from,
    digit_sum,
    factor_exponents,
    factorial_prime_exponent,
    goldbach_pair,
    is_perfect_number,
    is_product_of_three_distinct_primes,
    is_smith_number,
    kth_prime_factor,
    largest_prime_factor,
    prime_factors,
    prime_squares,
    primes_in_range,
    primes_up_to,
    smallest_prime_factors,
)

PRIMES = set(primes_up_to(2000))


def test_prime_factors_multiply_back_and_are_prime():
    for n in range(2, 500):
        factors = prime_factors(n)
        assert math.prod(factors) == n
        assert factors == sorted(factors)
        assert all(f in PRIMES for f in factors)


def test_prime_factors_of_one_is_empty():
    assert prime_factors(1) == []


def test_prime_factors_rejects_zero():
    with pytest.raises(ValueError):
        prime_factors(0)


def test_largest_prime_factor_matches_factorisation():
    for n in range(2, 500):
        assert largest_prime_factor(n) == max(prime_factors(n))
    assert largest_prime_factor(1) == 1


def test_primes_up_to_agrees_with_factorisation():
    primes = set(primes_up_to(300))
    for i in range(2, 301):
        assert (i in primes) == (prime_factors(i) == [i])
    assert primes_up_to(1) == []


def test_smallest_prime_factors_matches_factorisation():
    spf = smallest_prime_factors(200)
    assert len(spf) == 200
    assert spf[0] == 1
    for i in range(2, 201):
        assert spf[i - 1] == prime_factors(i)[0]


def test_primes_in_range_is_a_window_of_primes():
    for m, n in [(1, 50), (10, 100), (97, 97), (50, 10)]:
        assert primes_in_range(m, n) == [p for p in primes_up_to(n) if p >= m]


def test_goldbach_pair_is_minimal_prime_split():
    for n in range(4, 400, 2):
        p, q = goldbach_pair(n)
        assert p + q == n
        assert p in PRIMES and q in PRIMES
        assert p <= q
        assert not any(r in PRIMES and (n - r) in PRIMES for r in range(2, p))


def test_goldbach_pair_missing():
    assert goldbach_pair(3) is None


def test_three_distinct_primes_matches_exponents():
    for n in range(1, 1000):
        exponents = factor_exponents(n)
        expected = len(exponents) == 3 and all(e == 1 for _, e in exponents)
        assert is_product_of_three_distinct_primes(n) == expected


def test_three_distinct_primes_stops_at_repeated_prime():
    assert is_product_of_three_distinct_primes(2 * 3 * 5 * 7 * 7)
    assert not is_product_of_three_distinct_primes(2 * 2 * 3 * 5)


@pytest.mark.parametrize("n", range(0, 30))
@pytest.mark.parametrize("p", [2, 3, 5, 7])
def test_factorial_prime_exponent_counts_factor(n, p):
    count = prime_factors(math.factorial(n)).count(p) if n > 1 else 0
    assert factorial_prime_exponent(n, p) == count


def test_factorial_prime_exponent_rejects_bad_prime():
    with pytest.raises(ValueError):
        factorial_prime_exponent(10, 1)


def test_factor_exponents_reconstructs_number():
    for n in range(1, 500):
        pairs = factor_exponents(n)
        assert math.prod(p**e for p, e in pairs) == n
        primes = [p for p, _ in pairs]
        assert primes == sorted(set(primes))


@given(st.integers(min_value=0, max_value=10**18))
def test_digit_sum_is_congruent_mod_nine(n):
    assert digit_sum(n) % 9 == n % 9
    assert 0 <= digit_sum(n) <= 9 * len(str(n))


def test_smith_numbers():
    assert all(is_smith_number(n) for n in (4, 22, 27, 58, 85))
    assert not any(is_smith_number(p) for p in primes_up_to(200))
    assert not any(is_smith_number(n) for n in (0, 1, 2, 3))


def test_smith_consistent_with_digit_sums():
    for n in range(4, 400):
        if n in PRIMES:
            continue
        factor_digits = sum(digit_sum(p) for p in prime_factors(n))
        assert is_smith_number(n) == (digit_sum(n) == factor_digits)


def test_perfect_numbers_below_ten_thousand():
    assert [n for n in range(1, 10000) if is_perfect_number(n)] == [6, 28, 496, 8128]


def test_perfect_number_limits():
    assert not is_perfect_number(10**12 + 2)
    assert not is_perfect_number(0)
    with pytest.raises(ValueError):
        is_perfect_number(-6)


def test_kth_prime_factor():
    for n in range(2, 300):
        factors = prime_factors(n)
        for k, factor in enumerate(factors, start=1):
            assert kth_prime_factor(n, k) == factor
        assert kth_prime_factor(n, len(factors) + 1) is None
    assert kth_prime_factor(1, 1) is None


def test_kth_prime_factor_rejects_zero_k():
    with pytest.raises(ValueError):
        kth_prime_factor(12, 0)


def test_prime_squares_are_squares_of_primes_within_bound():
    for n in range(0, 500):
        squares = prime_squares(n)
        assert len(squares) == count_prime_squares(n)
        for s in squares:
            root = math.isqrt(s)
            assert root * root == s
            assert root in PRIMES
            assert s <= n
        assert squares == sorted(squares)


def test_count_prime_squares_from_lower_bound():
    for n in range(0, 2000, 37):
        assert count_prime_squares_from(2, n) == count_prime_squares(n)
        for low in (3, 5, 10):
            assert count_prime_squares_from(low, n) == sum(
                1 for s in prime_squares(n) if math.isqrt(s) >= low
            )


@given(
    st.integers(min_value=0, max_value=300),
    st.integers(min_value=0, max_value=300),
    st.integers(min_value=1, max_value=40),
    st.integers(min_value=1, max_value=40),
)
def test_count_divisible_matches_enumeration(m, n, a, b):
    expected = sum(1 for i in range(m, n + 1) if i % a == 0 or i % b == 0)
    if m <= n:
        assert count_divisible(m, n, a, b) == expected


def test_count_divisible_rejects_zero_divisor():
    with pytest.raises(ValueError):
        count_divisible(1, 10, 0, 3)