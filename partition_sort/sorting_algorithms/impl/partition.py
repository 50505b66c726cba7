from collections.abc import Sequence
from functools import cache
from math import factorial

from ..SortingAlgorithm import SortingAlgorithm


def swap(arr: list, i: int, j: int) -> None:
    arr[i], arr[j] = arr[j], arr[i]


def partition(arr: list, left: int, right: int) -> int:
    # arr[left] is the pivot until the final swap
    i, j = left, right
    while i < j:
        while i < j and arr[j] >= arr[left]:
            j -= 1
        while i < j and arr[i] <= arr[left]:
            i += 1
        swap(arr, i, j)
    swap(arr, i, left)
    return i


def partition_all(arr: list) -> int:
    return partition(arr, 0, len(arr) - 1)


@cache
def _no_separator_total(N: int) -> int:
    return factorial(N) - partition_total(N) if N else 1


@cache
def partition_total(N: int) -> int:
    "Number of permutations of N with at least one element already at its pivot position"
    if N <= 1:
        return 1
    # split on the leftmost separator: the prefix before it has none of its own
    return sum(_no_separator_total(k) * factorial(N - 1 - k) for k in range(N))


def is_partitioned(arr: Sequence[int], i: int) -> bool:
    if not 0 <= i < len(arr):
        return False
    pivot = arr[i]
    return all(arr[j] <= pivot for j in range(i)) and all(arr[j] >= pivot for j in range(i + 1, len(arr)))


algorithm = SortingAlgorithm(
    "partition",
    partition_all,
    9,
    output_total=partition_total,
    validator=is_partitioned,
)
