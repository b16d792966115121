"""Number exercises: sequences, conversions and bit counting."""

from __future__ import annotations

from itertools import pairwise

_BASE = 7


def _ones(value: int) -> int:
    return bin(value).count("1")


def divisor_game(n: int) -> bool:
    """Tell whether the first player wins the divisor game starting at n."""
    return n % 2 == 0


def generate(num_rows: int) -> list[list[int]]:
    """Return the rows of Pascal's triangle; the first row is always present."""
    rows = [[1]]
    for _ in range(num_rows - 1):
        previous = rows[-1]
        rows.append([1, *(a + b for a, b in pairwise(previous)), 1])
    return rows


def number_of_steps(num: int) -> int:
    """Count the halvings and decrements that bring num down to zero."""
    if num <= 0:
        return 0
    return num.bit_length() - 1 + _ones(num)


def kth_character(k: int) -> str:
    """Return the k-th character (1-based) of the letter-shifting string game."""
    if k < 1:
        raise ValueError("k must be at least 1")
    return chr(ord("a") + _ones(k - 1))


def read_binary_watch(turned_on: int) -> list[str]:
    """Return every time a binary watch can show with turned_on lit LEDs."""
    return [
        f"{hour}:{minute:02d}"
        for hour in range(12)
        for minute in range(60)
        if _ones(hour) + _ones(minute) == turned_on
    ]


def fizz_buzz(n: int) -> list[str]:
    """Return the FizzBuzz sequence for 1..n."""
    return [
        ("Fizz" if i % 3 == 0 else "") + ("Buzz" if i % 5 == 0 else "") or str(i)
        for i in range(1, n + 1)
    ]


def convert_to_base7(num: int) -> str:
    """Return num written in base 7."""
    if num == 0:
        return "0"
    remaining = abs(num)
    digits: list[str] = []
    while remaining:
        remaining, digit = divmod(remaining, _BASE)
        digits.append(str(digit))
    sign = "-" if num < 0 else ""
    return sign + "".join(reversed(digits))


def climb_stairs(n: int) -> int:
    """Count the ways to climb n steps taking one or two at a time."""
    if n < 0:
        return 0
    current, following = 1, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def is_palindrome_number(x: int) -> bool:
    """Tell whether x reads the same backwards; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]