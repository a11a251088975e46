"""Array and number problems: pair sums, trapped water, quick select and ranges."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Callable, MutableSequence, Optional, Sequence

_Partition = Callable[[MutableSequence[int], int, int], int]


def two_sum(nums: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """Return the indices of the first pair adding up to ``target``, or ``None``."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen[value] = index
    return None


def two_sum_last_pair(nums: Sequence[int], target: int) -> Optional[tuple[int, int]]:
    """Return the last pair adding up to ``target`` as (later index, earlier index).

    Each value waits for the complement it needs; a value that completes a
    pair does not wait for one itself. ``None`` when no pair is found.
    """
    wanted: dict[int, int] = {}
    result: Optional[tuple[int, int]] = None
    for index, value in enumerate(nums):
        if value in wanted:
            result = (index, wanted[value])
        else:
            wanted[target - value] = index
    return result


def trap(heights: Sequence[int]) -> int:
    """Return the water held between the bars, walking in from both ends."""
    if not heights:
        raise ValueError("heights must not be empty")
    total = 0
    left, right = 0, len(heights) - 1
    max_left, max_right = heights[left], heights[right]
    while left < right:
        total += min(max_left, max_right) - min(heights[left], heights[right])
        if max_left <= max_right:
            left += 1
            max_left = max(max_left, heights[left])
        else:
            right -= 1
            max_right = max(max_right, heights[right])
    return total


def _partition_first(nums: MutableSequence[int], low: int, high: int) -> int:
    pivot = nums[low]
    i, j = low, high
    while i < j:
        while i < high and nums[i] <= pivot:
            i += 1
        while j > low and nums[j] > pivot:
            j -= 1
        if i < j:
            nums[i], nums[j] = nums[j], nums[i]
    nums[low], nums[j] = nums[j], nums[low]
    return j


def _partition_last(nums: MutableSequence[int], low: int, high: int) -> int:
    pivot = nums[high]
    i = low
    for j in range(low, high):
        if nums[j] < pivot:
            nums[i], nums[j] = nums[j], nums[i]
            i += 1
    nums[i], nums[high] = nums[high], nums[i]
    return i


def _sort_range(
    nums: MutableSequence[int], low: int, high: int, partition: _Partition
) -> None:
    while low < high:
        p = partition(nums, low, high)
        if p - low < high - p:
            _sort_range(nums, low, p - 1, partition)
            low = p + 1
        else:
            _sort_range(nums, p + 1, high, partition)
            high = p - 1


def quick_sort_first_pivot(nums: MutableSequence[int]) -> MutableSequence[int]:
    """Sort ``nums`` in place around the first item of each range and return it."""
    _sort_range(nums, 0, len(nums) - 1, _partition_first)
    return nums


def quick_sort_last_pivot(nums: MutableSequence[int]) -> MutableSequence[int]:
    """Sort ``nums`` in place around the last item of each range and return it."""
    _sort_range(nums, 0, len(nums) - 1, _partition_last)
    return nums


def quick_sort_range(
    nums: MutableSequence[int], low: int, high: int
) -> MutableSequence[int]:
    """Sort ``nums[low..high]`` in place, both bounds included, and return ``nums``."""
    if high - low < 1:
        return nums
    if low < 0 or high >= len(nums):
        raise IndexError(f"range {low}..{high} is out of bounds")
    _sort_range(nums, low, high, _partition_last)
    return nums


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the ``k``-th largest value by repeated partitioning of a copy."""
    items = list(nums)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must be between 1 and {len(items)}")
    target = len(items) - k
    low, high = 0, len(items) - 1
    while True:
        p = _partition_last(items, low, high)
        if p == target:
            return items[p]
        if p < target:
            low = p + 1
        else:
            high = p - 1


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of ``target`` in sorted ``nums``, or (-1, -1)."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return -1, -1
    return first, bisect_right(nums, target) - 1


def is_palindrome_number(x: int) -> bool:
    """Tell whether ``x`` reads the same backwards; negatives and multiples of 10 do not."""
    if x < 0 or x % 10 == 0:
        return False
    digits = str(x)
    return digits == digits[::-1]