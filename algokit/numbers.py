"""Small number puzzles: digit palindromes, Roman numerals, digital roots, perfect numbers."""

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
    """Return True if the decimal digits of ``x`` read the same both ways.

    Negative numbers are never palindromes.
    """
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer.

    A symbol followed by a larger one is read as a subtractive pair.
    Characters that are not Roman symbols count as zero.
    """
    values = [_ROMAN_VALUES.get(symbol, 0) for symbol in s]
    total = 0
    i = 0
    while i < len(values):
        first = values[i]
        second = values[i + 1] if i + 1 < len(values) else 0
        if first < second:
            total += second - first
            i += 2
        else:
            total += first
            i += 1
    return total


def add_digits(x: int) -> int:
    """Repeatedly sum the digits of ``x`` until a single digit remains.

    The sign of a negative number is kept.
    """
    sign = -1 if x < 0 else 1
    value = abs(x)
    while value >= 10:
        quotient, remainder = divmod(value, 10)
        value = quotient + remainder
    return sign * value


def is_perfect_number(num: int) -> bool:
    """Return True if ``num`` equals the sum of its divisors smaller than itself."""
    return sum(i for i in range(1, num) if num % i == 0) == num