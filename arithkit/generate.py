"""Lexicographic generation of permutations, binary strings and combinations."""


def _check_non_negative(**values):
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative")


def permutations(n):
    """Yield the permutations of 1..n as tuples, in lexicographic order."""
    _check_non_negative(n=n)
    return _permutations(n)


def _permutations(n):
    items = list(range(1, n + 1))
    while True:
        yield tuple(items)
        i = n - 2
        while i >= 0 and items[i] > items[i + 1]:
            i -= 1
        if i < 0:
            return
        j = n - 1
        while items[j] < items[i]:
            j -= 1
        items[i], items[j] = items[j], items[i]
        items[i + 1 :] = reversed(items[i + 1 :])


def binary_strings(n):
    """Yield the binary strings of length n as tuples of 0 and 1, in order."""
    _check_non_negative(n=n)
    return _binary_strings(n)


def _binary_strings(n):
    bits = [0] * n
    while True:
        yield tuple(bits)
        i = n - 1
        while i >= 0 and bits[i]:
            bits[i] = 0
            i -= 1
        if i < 0:
            return
        bits[i] = 1


def combinations(n, k):
    """Yield the k-element subsets of 1..n as tuples, in lexicographic order."""
    _check_non_negative(n=n, k=k)
    if k > n:
        return iter(())
    return _combinations(n, k)


def _combinations(n, k):
    items = list(range(1, k + 1))
    while True:
        yield tuple(items)
        i = k - 1
        while i >= 0 and items[i] == n - k + i + 1:
            i -= 1
        if i < 0:
            return
        items[i] += 1
        items[i + 1 :] = range(items[i] + 1, items[i] + k - i)