"""Integer puzzles: palindromic numbers, digit reversal and Roman numerals."""

from __future__ import annotations

import math

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def is_palindrome_number(x: int) -> bool:
    """Tell whether the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def is_palindrome_number_by_halves(x: int) -> bool:
    """Compare digits pairwise from both ends using powers of ten.

    This approach is only reliable for numbers of up to three digits; on
    longer palindromes the divisor shrinks to zero and ZeroDivisionError is
    raised.
    """
    if x < 0:
        return False
    if x < 10:
        return True

    low = 1
    high = 10 ** math.ceil(math.log10(x))
    if high == 100:
        return x % 10 == x // 10

    scale = 1
    even_length = high % 2 == 0

    while True:
        low *= 10
        high //= 10
        if even_length:
            if low * 10 == high:
                left = x // high
                right = x % low
                if scale != 1:
                    left %= 10
                    right //= scale
                return left == right
        elif high == low:
            return True

        left = x // high
        right = x % low
        if scale != 1:
            if left != 0:
                left %= 10
            if right != 0:
                right //= scale

        if left != right:
            return False

        scale *= 10


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign.

    Returns 0 when the result does not fit in a signed 32-bit integer.
    """
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if not _INT32_MIN <= result <= _INT32_MAX:
        return 0
    return result


def roman_to_int(s: str) -> int:
    """Sum a Roman numeral, reading a smaller symbol before a larger one as a difference.

    Unknown characters count as zero. After a subtractive pair the smaller
    symbol stays the reference for what follows.
    """
    total = 0
    previous = 0
    for symbol in s:
        current = _ROMAN_VALUES.get(symbol, 0)
        if current > previous and previous != 0:
            total += current - previous
        else:
            total += previous
            previous = current
    return total + previous