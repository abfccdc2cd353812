import pytest

from algokit.numbers import (
    add_digits,
    is_palindrome_number,
    is_perfect_number,
    roman_to_int,
)

_ROMAN_TABLE = [
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
]


def _to_roman(n):
    parts = []
    for value, symbol in _ROMAN_TABLE:
        count, n = divmod(n, value)
        parts.append(symbol * count)
    return "".join(parts)


@pytest.mark.parametrize("x", [0, 7, 121, 1221, 12321])
def test_palindrome_numbers(x):
    assert is_palindrome_number(x)


@pytest.mark.parametrize("x", [10, 123, 1231, 100])
def test_non_palindrome_numbers(x):
    assert not is_palindrome_number(x)


@pytest.mark.parametrize("x", [-1, -121, -7])
def test_negative_numbers_are_not_palindromes(x):
    assert not is_palindrome_number(x)


@pytest.mark.parametrize("n", range(1, 200))
def test_mirrored_digits_form_palindrome(n):
    text = str(n)
    assert is_palindrome_number(int(text + text[::-1]))


@pytest.mark.parametrize("symbol, value", [("I", 1), ("V", 5), ("X", 10), ("L", 50), ("C", 100), ("D", 500), ("M", 1000)])
def test_single_symbols(symbol, value):
    assert roman_to_int(symbol) == value


def test_roman_round_trip():
    for n in range(1, 4000):
        assert roman_to_int(_to_roman(n)) == n


def test_roman_worked_example():
    assert roman_to_int("MCMXCIV") == 1994


def test_roman_repeated_symbols_add():
    for k in range(1, 4):
        assert roman_to_int("M" * k) == 1000 * k


def test_roman_empty_is_zero():
    assert roman_to_int("") == 0


@pytest.mark.parametrize("x", range(10))
def test_add_digits_single_digit_unchanged(x):
    assert add_digits(x) == x


@pytest.mark.parametrize("x", [10, 38, 99, 12345, 987654321, 10**12 + 7])
def test_add_digits_is_digital_root(x):
    result = add_digits(x)
    assert 1 <= result <= 9
    assert result % 9 == x % 9


@pytest.mark.parametrize("x", [5, 38, 1234])
def test_add_digits_negative_keeps_sign(x):
    assert add_digits(-x) == -add_digits(x)


@pytest.mark.parametrize("num", [6, 28, 496, 8128])
def test_perfect_numbers(num):
    assert is_perfect_number(num)


@pytest.mark.parametrize("num", [1, 2, 12, 27, 100, 8127])
def test_non_perfect_numbers(num):
    assert not is_perfect_number(num)