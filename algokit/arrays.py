"""Array puzzles over lists of integers and time strings."""

import math
from collections import Counter
from itertools import accumulate, groupby, pairwise
from operator import mul

_MINUTES_PER_DAY = 1440


def remove_duplicates(nums: list) -> int:
    """Compact a sorted list in place so its first ``k`` items are distinct; return ``k``."""
    if not nums:
        return 0
    k = 1
    for value in nums[1:]:
        if value != nums[k - 1]:
            nums[k] = value
            k += 1
    return k


def max_subarray(nums: list) -> int:
    """Return the largest sum of a non-empty contiguous slice."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def rotate(nums: list, k: int) -> None:
    """Rotate a list to the right by ``k`` steps in place."""
    if k < 0:
        raise ValueError("k must not be negative")
    if not nums or k == 0:
        return
    split = len(nums) - k % len(nums)
    nums[:] = nums[split:] + nums[:split]


def product_except_self(nums: list) -> list:
    """Return, for each position, the product of all the other items."""
    if not nums:
        return []
    prefix = list(accumulate(nums[:-1], mul, initial=1))
    suffix = list(accumulate(reversed(nums[1:]), mul, initial=1))[::-1]
    return [p * s for p, s in zip(prefix, suffix)]


def missing_number(nums: list) -> int:
    """Return the number from ``0..len(nums)`` that is missing from ``nums``."""
    ordered = sorted(nums)
    return next((i for i, value in enumerate(ordered) if value != i), len(nums))


def move_zeroes(nums: list) -> None:
    """Move all zeros to the end in place, keeping the order of the other items."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def increasing_triplet(nums: list) -> bool:
    """Return True if some i < j < k has nums[i] < nums[j] < nums[k]."""
    first = second = math.inf
    for x in nums:
        if x < first:
            first = x
        if first < x < second:
            second = x
        if x > second:
            return True
    return False


def find_max_consecutive_ones(nums: list) -> int:
    """Return the length of the longest run of ones."""
    return max((sum(1 for _ in run) for value, run in groupby(nums) if value == 1), default=0)


def find_pairs(nums: list, k: int) -> int:
    """Count distinct value pairs ``(a, a + k)`` drawn from different positions."""
    counts = Counter(nums)
    if k < 0:
        return 0
    if k == 0:
        return sum(1 for count in counts.values() if count > 1)
    return sum(1 for value in counts if value + k in counts)


def find_min_difference(time_points: list) -> int:
    """Return the smallest gap in minutes between any two ``HH:MM`` clock times."""
    if not time_points:
        raise ValueError("time_points must not be empty")
    minutes = sorted(int(t[:2]) * 60 + int(t[3:5]) for t in time_points)
    wrap = minutes[0] + _MINUTES_PER_DAY - minutes[-1]
    return min([wrap, *(b - a for a, b in pairwise(minutes))])


def kids_with_candies(candies: list, extra_candies: int) -> list:
    """For each kid, say whether the extra candies would give them the most."""
    most = max(candies, default=0)
    return [count + extra_candies >= most for count in candies]