"""Arithmetic on non-negative integers written as decimal digit strings."""


def _digits(number, width=0):
    if not number or not (number.isascii() and number.isdigit()):
        raise ValueError(f"not a decimal digit string: {number!r}")
    return [int(ch) for ch in number.rjust(width, "0")]


def _join(digits):
    return "".join(map(str, digits))


def subtract(a, b):
    """Return |a - b|, padded with zeros to the length of the longer input."""
    width = max(len(a), len(b))
    x, y = _digits(a, width), _digits(b, width)
    larger, smaller = (x, y) if x >= y else (y, x)
    result = []
    borrow = 0
    for top, bottom in zip(reversed(larger), reversed(smaller)):
        top -= borrow
        if top < bottom:
            result.append(top + 10 - bottom)
            borrow = 1
        else:
            result.append(top - bottom)
            borrow = 0
    return _join(reversed(result))


def add(a, b):
    """Return a + b; leading zeros of the longer input are kept."""
    width = max(len(a), len(b))
    x, y = _digits(a, width), _digits(b, width)
    result = []
    carry = 0
    for da, db in zip(reversed(x), reversed(y)):
        carry, digit = divmod(da + db + carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    return _join(reversed(result))


def multiply(a, b):
    """Return a * b without leading zeros."""
    x, y = _digits(a), _digits(b)
    result = [0] * (len(x) + len(y) + 1)
    for i, da in enumerate(reversed(x)):
        if da == 0:
            continue
        carry = 0
        for j, db in enumerate(reversed(y)):
            carry, result[i + j] = divmod(result[i + j] + da * db + carry, 10)
        position = i + len(y)
        while carry:
            carry, result[position] = divmod(result[position] + carry, 10)
            position += 1
    return _join(reversed(result)).lstrip("0") or "0"