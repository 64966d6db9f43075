# arithkit

arithkit is a small collection of number theory and combinatorics functions with no
dependencies outside the Python standard library. Invalid arguments raise `ValueError`;
functions that may find no answer return `None`.

## Installation

```
pip install arithkit
```

## Modules

### `arithkit.gcd_lcm`

- `lcm_and_gcd(a, b)`: the pair `(lcm, gcd)`; both zero raises `ValueError`.
- `lcm_of_range(n)`: the least common multiple of `1..n`.
- `product_power_gcd(values)`: the product of the values raised to their gcd, modulo 1e9+7.
- `gcd_with_big(a, digits)`: gcd of `a` and a number given as a decimal digit string.
- `repeat_by_gcd(a, x, y)`: the decimal form of `a` repeated `gcd(x, y)` times.
- `can_split_range(n, m)`: whether `1..n` splits into two coprime sums differing by `m`.
- `smallest_common_multiple_with_digits(x, y, z, n)`: the smallest `n`-digit common
  multiple of `x`, `y` and `z`, or `None`.

### `arithkit.modulo`

- `power_mod(x, y, p)`, `multiply_mod(a, b, c)`, `mod_inverse(a, m)` (`None` if none exists).
- `evaluate_polynomial(coefficients, x)`: coefficients highest degree first, modulo 1e9+7.
- `sum_of_remainders(n, k)` and `remainder_sum_equals(n, k)`: the sum of `i % k` for `i = 1..n`.
- `big_mod(digits, m)` and `big_power_mod(digits, b, p)`: for numbers given as digit strings.
- `count_equal_remainder_moduli(values)`: how many moduli leave every value with the same remainder.
- `binomial_mod(n, k)`: `C(n, k)` modulo 1e9+7.

### `arithkit.bignum`

Operations on non-negative integers given as decimal digit strings:

- `add(a, b)`: the sum; leading zeros of the longer input are kept.
- `subtract(a, b)`: `|a - b|`, padded with zeros to the length of the longer input.
- `multiply(a, b)`: the product, without leading zeros.

### `arithkit.primes`

- Factorisation: `prime_factors`, `largest_prime_factor`, `factor_exponents`,
  `kth_prime_factor` (`None` if `n` has fewer than `k` prime factors).
- Sieves: `primes_up_to`, `primes_in_range`, `smallest_prime_factors`.
- Prime squares: `prime_squares`, `count_prime_squares`, `count_prime_squares_from`.
- Other checks: `goldbach_pair` (`None` if no pair), `is_product_of_three_distinct_primes`,
  `is_smith_number`, `is_perfect_number` (even numbers up to 1e12), `digit_sum`,
  `factorial_prime_exponent`, `count_divisible`.

### `arithkit.generate`

Generators yielding tuples in lexicographic order:

- `permutations(n)`: the permutations of `1..n`.
- `binary_strings(n)`: the strings of `n` bits as tuples of `0` and `1`.
- `combinations(n, k)`: the `k`-element subsets of `1..n`.

## Example

```python
from arithkit.gcd_lcm import lcm_and_gcd
from arithkit.modulo import power_mod, binomial_mod
from arithkit.bignum import add, multiply
from arithkit.primes import prime_factors, primes_up_to
from arithkit.generate import combinations

lcm_and_gcd(12, 18)          # (36, 6)
power_mod(2, 10, 1000)       # 24
binomial_mod(5, 2)           # 10
add("999", "1")              # "1000"
multiply("12", "34")         # "408"
prime_factors(60)            # [2, 2, 3, 5]
primes_up_to(10)             # [2, 3, 5, 7]
list(combinations(4, 2))     # [(1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4)]
```

## What it does not do

arithkit is a library of functions only. It has no command-line program and does not
read problems from standard input or print answers; call the functions from Python.

## Running the tests

```
pip install -e ".[test]"
pytest
```