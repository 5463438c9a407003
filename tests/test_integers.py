import pytest

from algokata.integers import (
    is_palindrome_number,
    is_palindrome_number_by_halves,
    reverse_integer,
    roman_to_int,
)


@pytest.mark.parametrize("x", [121, 11, 1001])
def test_fast_palindromes(x):
    assert is_palindrome_number(x) is True


@pytest.mark.parametrize("x", [-121, -1, -12321])
def test_fast_negative_is_not_palindrome(x):
    assert is_palindrome_number(x) is False


@pytest.mark.parametrize("x", [10, 20, 1230, 100000])
def test_fast_trailing_zero_is_not_palindrome(x):
    assert is_palindrome_number(x) is False


@pytest.mark.parametrize("half", ["1", "12", "907", "4321"])
def test_fast_mirrored_digits(half):
    assert is_palindrome_number(int(half + half[::-1])) is True
    assert is_palindrome_number(int(half + half[-2::-1])) is True


@pytest.mark.parametrize("x", range(10))
def test_single_digits_are_palindromes(x):
    assert is_palindrome_number(x) is True
    assert is_palindrome_number_by_halves(x) is True


def test_by_halves_examples():
    assert is_palindrome_number_by_halves(11) is True
    assert is_palindrome_number_by_halves(121) is True
    assert is_palindrome_number_by_halves(10) is False


def test_by_halves_negative():
    assert is_palindrome_number_by_halves(-11) is False


def test_by_halves_agrees_with_fast_up_to_three_digits():
    mismatches = [
        x for x in range(1000)
        if is_palindrome_number_by_halves(x) != is_palindrome_number(x)
    ]
    assert mismatches == []


@pytest.mark.parametrize("x", [1001, 1221])
def test_by_halves_fails_on_four_digit_palindromes(x):
    with pytest.raises(ZeroDivisionError):
        is_palindrome_number_by_halves(x)


def test_by_halves_rejects_four_digit_mismatch():
    assert is_palindrome_number_by_halves(1234) is False


@pytest.mark.parametrize("x", [123456, 1, 12, 987654321 // 10, 2147447412])
def test_reverse_twice_is_identity(x):
    assert reverse_integer(reverse_integer(x)) == x


@pytest.mark.parametrize("x", [123456, 7, 1200, 102030])
def test_reverse_is_sign_symmetric(x):
    assert reverse_integer(-x) == -reverse_integer(x)


def test_reverse_drops_trailing_zeros():
    assert reverse_integer(1200) == reverse_integer(12)
    assert reverse_integer(-500) == reverse_integer(-5)


def test_reverse_zero():
    assert reverse_integer(0) == 0


@pytest.mark.parametrize("x", [-12345612312312, 9000000009, 1000000003, -1000000003])
def test_reverse_overflow_gives_zero(x):
    assert reverse_integer(x) == 0


def test_reverse_just_within_range():
    largest = 2**31 - 1
    assert reverse_integer(reverse_integer(7463847412 // 10)) == 7463847412 // 10
    assert reverse_integer(int(str(largest)[::-1])) == largest


@pytest.mark.parametrize(
    "symbol, value",
    [("I", 1), ("V", 5), ("X", 10), ("L", 50), ("C", 100), ("D", 500), ("M", 1000)],
)
def test_roman_single_symbols(symbol, value):
    assert roman_to_int(symbol) == value


def test_roman_worked_example():
    assert roman_to_int("XXXVIII") == 38


@pytest.mark.parametrize("n", range(1, 6))
def test_roman_repeated_ones(n):
    assert roman_to_int("I" * n) == n


@pytest.mark.parametrize("numeral", ["III", "XXXIII", "XXXVIII", "MDCLXVI", "MMXXV"])
def test_roman_additive_numerals_sum_their_symbols(numeral):
    assert roman_to_int(numeral) == sum(roman_to_int(ch) for ch in numeral)


def test_roman_empty_is_zero():
    assert roman_to_int("") == 0


def test_roman_unknown_symbols_count_as_zero():
    assert roman_to_int("X?V") == roman_to_int("XV")


def test_roman_subtractive_pair_keeps_smaller_symbol_as_reference():
    assert roman_to_int("XIV") == roman_to_int("XV")
    assert roman_to_int("IV") == roman_to_int("V")