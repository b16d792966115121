"""String exercises: parsing, comparing and rearranging text."""

from __future__ import annotations

import re
import string
from collections import Counter
from collections.abc import MutableSequence, Sequence

_INT32_MAX = 2**31 - 1
_INT32_MIN = -(2**31)

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_VOWELS = frozenset("AEIOUaeiou")
_ALNUM = frozenset(string.ascii_lowercase + string.digits)
_LOWERCASE = frozenset(string.ascii_lowercase)

_ENCODED_LETTER = re.compile(r"([0-9]{2})#|([0-9])")
_ATOI_PREFIX = re.compile(r"[ \t]*([+-]?)([0-9]*)")


def _require_lowercase(*texts: str) -> None:
    for text in texts:
        bad = set(text) - _LOWERCASE
        if bad:
            raise ValueError(
                f"expected only letters a-z, got {''.join(sorted(bad))!r}"
            )


def defang_ip_addr(address: str) -> str:
    """Replace every '.' in an address with '[.]'."""
    return "".join("[.]" if ch == "." else ch for ch in address)


def is_palindrome(s: str) -> bool:
    """Tell whether s reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [ch for ch in s.lower() if ch in _ALNUM]
    return cleaned == cleaned[::-1]


def freq_alphabets(s: str) -> str:
    """Decode '1'..'9' as 'a'..'i' and '10#'..'26#' as 'j'..'z'."""
    letters = []
    position = 0
    for match in _ENCODED_LETTER.finditer(s):
        if match.start() != position:
            raise ValueError(f"unexpected character at position {position} in {s!r}")
        number = int(match.group(1) or match.group(2))
        if not 1 <= number <= 26:
            raise ValueError(f"code {number} does not name a letter")
        letters.append(chr(ord("a") + number - 1))
        position = match.end()
    if position != len(s):
        raise ValueError(f"unexpected character at position {position} in {s!r}")
    return "".join(letters)


def sort_string(s: str) -> str:
    """Take letters in rising then falling order, repeatedly, until all are used."""
    _require_lowercase(s)
    counter = Counter(s)
    ascending = sorted(counter)
    descending = ascending[::-1]
    result: list[str] = []
    while len(result) < len(s):
        for order in (ascending, descending):
            for letter in order:
                if counter[letter] > 0:
                    result.append(letter)
                    counter[letter] -= 1
    return "".join(result)


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer; unknown symbols count as zero."""
    total = 0
    last = 0
    for symbol in reversed(s):
        value = _ROMAN_VALUES.get(symbol, 0)
        if value >= last:
            total += value
            last = value
        else:
            total -= value
    return total


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by all strings."""
    if not strs:
        raise ValueError("at least one string is required")
    length = 0
    for chars in zip(*strs):
        if len(set(chars)) != 1:
            break
        length += 1
    return strs[0][:length]


def is_isomorphic(s: str, t: str) -> bool:
    """Tell whether characters of s map one-to-one onto characters of t."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for a, b in zip(s, t):
        if a not in forward and b not in backward:
            forward[a] = b
            backward[b] = a
        elif forward.get(a) != b or backward.get(b) != a:
            return False
    return True


def divide_string(s: str, k: int, fill: str) -> list[str]:
    """Split s into groups of k characters, padding the last group with fill."""
    if k < 1:
        raise ValueError("group size must be positive")
    if len(fill) != 1:
        raise ValueError("fill must be a single character")
    return [s[start:start + k].ljust(k, fill) for start in range(0, len(s), k)]


def is_anagram(s: str, t: str) -> bool:
    """Tell whether t is a rearrangement of s (letters a-z only)."""
    if len(s) != len(t):
        return False
    _require_lowercase(s, t)
    return Counter(s) == Counter(t)


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels in s, leaving other characters in place."""
    chars = list(s)
    positions = [i for i, ch in enumerate(chars) if ch in _VOWELS]
    vowels = [chars[i] for i in positions]
    for i, vowel in zip(positions, reversed(vowels)):
        chars[i] = vowel
    return "".join(chars)


def can_construct(ransom_note: str, magazine: str) -> bool:
    """Tell whether the note can be cut out of the magazine's letters."""
    _require_lowercase(ransom_note, magazine)
    available = Counter(magazine)
    available.subtract(ransom_note)
    return all(count >= 0 for count in available.values())


def first_uniq_char(s: str) -> int:
    """Return the index of the first letter that occurs once, or -1."""
    _require_lowercase(s)
    counter = Counter(s)
    return next((i for i, ch in enumerate(s) if counter[ch] == 1), -1)


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word."""
    return len(s.rstrip(" ").rpartition(" ")[2])


def my_atoi(s: str) -> int:
    """Parse a leading signed integer, clamped to the 32-bit range."""
    match = _ATOI_PREFIX.match(s)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    if sign == "-":
        value = -value
    return max(_INT32_MIN, min(_INT32_MAX, value))


def reverse_string(s: MutableSequence) -> None:
    """Reverse a mutable sequence in place."""
    s[:] = s[::-1]