"""Integer puzzles: Fibonacci numbers, stair climbing, GCD, lone elements and gaps."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = ["fib", "climb_stairs", "gcd", "single_number", "maximum_gap"]


def fib(n: int) -> int:
    """Return the n-th Fibonacci number; any n <= 1 is returned unchanged."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` steps taking one or two at a time."""
    if n <= 1:
        return 1
    first, second = 1, 1
    for _ in range(n - 1):
        first, second = second, first + second
    return second


def _truncated_remainder(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend, as with truncating division."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm, using truncating remainders."""
    while b != 0:
        a, b = b, _truncated_remainder(a, b)
    return a


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once where every other value appears three times."""
    ones = twos = 0
    for num in nums:
        ones = (ones ^ num) & ~twos
        twos = (twos ^ num) & ~ones
    return ones


def maximum_gap(nums: Sequence[int]) -> int:
    """Largest difference between successive values in sorted order, in linear time."""
    count = len(nums)
    if count < 2:
        return 0

    low, high = min(nums), max(nums)
    if low == high:
        return 0

    bucket_size = max(1, (high - low) // (count - 1))
    bucket_count = (high - low) // bucket_size + 1
    buckets: list[tuple[int, int] | None] = [None] * bucket_count

    for num in nums:
        index = (num - low) // bucket_size
        bucket = buckets[index]
        if bucket is None:
            buckets[index] = (num, num)
        else:
            buckets[index] = (min(bucket[0], num), max(bucket[1], num))

    widest = 0
    previous_max = low
    for bucket in buckets:
        if bucket is None:
            continue
        bucket_min, bucket_max = bucket
        widest = max(widest, bucket_min - previous_max)
        previous_max = bucket_max
    return widest