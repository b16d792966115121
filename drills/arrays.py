"""Array exercises: sums, searches and in-place rearrangements of integer lists."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import accumulate, pairwise
from operator import xor


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from any number of buy/sell rounds."""
    if not prices:
        raise ValueError("at least one price is required")
    return sum(max(0, later - earlier) for earlier, later in pairwise(prices))


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears an odd number of times (XOR of all values)."""
    return reduce(xor, nums, 0)


def running_sum(nums: list[int]) -> list[int]:
    """Replace each element with the sum up to it, in place, and return the list."""
    nums[:] = accumulate(nums)
    return nums


def min_operations(logs: Iterable[str]) -> int:
    """Return how deep the folder is after following the crawler's log."""
    depth = 0
    for entry in logs:
        if entry == "../":
            depth = max(0, depth - 1)
        elif entry != "./":
            depth += 1
    return depth


def maximum_wealth(accounts: Iterable[Iterable[int]]) -> int:
    """Return the largest total across customers, never below zero."""
    return max([0, *(sum(account) for account in accounts)])


def majority_element(nums: Sequence[int]) -> int:
    """Return the element occupying the middle of the sorted values."""
    if not nums:
        raise ValueError("at least one number is required")
    return sorted(nums)[len(nums) // 2]


def rotate(nums: list[int], k: int) -> None:
    """Rotate the list to the right by k steps, in place."""
    if not nums:
        raise ValueError("cannot rotate an empty list")
    if k < 0:
        raise ValueError("rotation must not be negative")
    split = len(nums) - k % len(nums)
    nums[:] = nums[split:] + nums[:split]


def two_sum(nums: Iterable[int], target: int) -> list[int]:
    """Return the indices of two values adding up to target, or an empty list."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen[value] = index
    return []


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Tell whether any value occurs more than once."""
    return len(set(nums)) != len(nums)


def contains_nearby_duplicate(nums: Iterable[int], k: int) -> bool:
    """Tell whether equal values occur at most k positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        previous = last_seen.get(value)
        if previous is not None and index - previous <= k:
            return True
        last_seen[value] = index
    return False


def remove_element(nums: list[int], val: int) -> int:
    """Move values other than val to the front, in place, and return their count."""
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def move_zeroes(nums: list[int]) -> None:
    """Move zeros to the end in place, keeping the order of the other values."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def intersect(nums1: Iterable[int], nums2: Iterable[int]) -> list[int]:
    """Return the common values, with multiplicity, in ascending order."""
    return sorted((Counter(nums1) & Counter(nums2)).elements())


def array_pair_sum(nums: Iterable[int]) -> int:
    """Return the largest sum of pair minimums over a pairing of the values."""
    return sum(sorted(nums)[::2])


def plus_one(digits: list[int]) -> list[int]:
    """Add one to a number stored as decimal digits, in place, and return it."""
    if not digits:
        raise ValueError("at least one digit is required")
    for position in reversed(range(len(digits))):
        if digits[position] < 9:
            digits[position] += 1
            return digits
        digits[position] = 0
    digits.insert(0, 1)
    return digits