"""Number theory, modular arithmetic, digit-string arithmetic and combinatorial generation."""

__version__ = "0.1.0"
__all__ = ["bignum", "gcd_lcm", "generate", "modulo", "primes"]