"""String puzzles: palindromes, reversals, anagrams, compression and merging."""

from collections import Counter
from itertools import groupby, zip_longest

_VOWELS = frozenset("aeiouAEIOU")


def _is_letter(c: str) -> bool:
    return c.isascii() and c.isalpha()


def is_palindrome(s: str) -> bool:
    """Return True if the ASCII letters and digits of ``s`` form a palindrome, ignoring case."""
    kept = [c for c in s.lower() if c.isascii() and c.isalnum()]
    return kept == kept[::-1]


def reverse_words(s: str) -> str:
    """Reverse the order of space-separated words, collapsing runs of spaces."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` is a rearrangement of ``s``."""
    return sorted(s) == sorted(t)


def reverse_string(chars: list) -> None:
    """Reverse a list of characters in place."""
    chars.reverse()


def reverse_vowels(s: str) -> str:
    """Swap vowels inward from both ends, leaving other characters in place."""
    chars = list(s)

    def at(k: int) -> str:
        return chars[k] if 0 <= k < len(chars) else ""

    i, j = 0, len(chars) - 1
    while i < j:
        if not _is_letter(at(i)):
            i += 1
        if not _is_letter(at(j)):
            j -= 1
        else:
            if at(i) not in _VOWELS:
                i += 1
            if at(j) not in _VOWELS:
                j -= 1
            if at(i) in _VOWELS and at(j) in _VOWELS:
                chars[i], chars[j] = chars[j], chars[i]
                i += 1
                j -= 1
    return "".join(chars)


def first_unique_char(s: str) -> int:
    """Return the index of the first character that occurs once, or -1."""
    counts = Counter(s)
    return next((i for i, c in enumerate(s) if counts[c] == 1), -1)


def compress(chars: list) -> int:
    """Run-length compress a list of characters in place and return its new length.

    Each run becomes its character followed by the run length's digits when
    the run is longer than one.
    """
    result = []
    for char, run in groupby(chars):
        count = sum(1 for _ in run)
        result.append(char)
        if count > 1:
            result.extend(str(count))
    chars[:] = result
    return len(result)


def _expand(s: str, lo: int, hi: int) -> int:
    count = 0
    while lo >= 0 and hi < len(s) and s[lo] == s[hi]:
        count += 1
        lo -= 1
        hi += 1
    return count


def count_palindromic_substrings(s: str) -> int:
    """Count the palindromic substrings of ``s``, by position."""
    return sum(_expand(s, i, i) + _expand(s, i, i + 1) for i in range(len(s)))


def _is_palindrome_span(s: str, lo: int, hi: int) -> bool:
    segment = s[lo:hi + 1]
    return segment == segment[::-1]


def valid_palindrome(s: str) -> bool:
    """Return True if ``s`` is a palindrome after deleting at most one character."""
    i, j = 0, len(s) - 1
    while i < j:
        if s[i] != s[j]:
            return _is_palindrome_span(s, i + 1, j) or _is_palindrome_span(s, i, j - 1)
        i += 1
        j -= 1
    return True


def reverse_only_letters(s: str) -> str:
    """Reverse the ASCII letters of ``s`` while other characters keep their places."""
    letters = [c for c in s if _is_letter(c)]
    return "".join(letters.pop() if _is_letter(c) else c for c in s)


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave two strings, appending the rest of the longer one."""
    return "".join(a + b for a, b in zip_longest(word1, word2, fillvalue=""))


def remove_occurrences(s: str, part: str) -> str:
    """Repeatedly remove the leftmost occurrence of ``part`` until none remains."""
    if not part:
        raise ValueError("part must not be empty")
    while part in s:
        s = s.replace(part, "", 1)
    return s