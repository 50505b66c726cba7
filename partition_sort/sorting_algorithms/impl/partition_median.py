from ..SortingAlgorithm import SortingAlgorithm
from .partition import is_partitioned, partition, partition_total, swap


def median_three(arr: list, left: int, mid: int, right: int) -> int:
    # with distinct values the median is less than exactly one of the other two, with ties any index may come back
    if (arr[left] < arr[mid]) ^ (arr[left] < arr[right]):
        return left
    if (arr[mid] < arr[left]) ^ (arr[mid] < arr[right]):
        return mid
    return right


def partition_median(arr: list, left: int, right: int) -> int:
    med = median_three(arr, left, (left + right) // 2, right)
    swap(arr, left, med)
    return partition(arr, left, right)


def partition_median_all(arr: list) -> int:
    return partition_median(arr, 0, len(arr) - 1)


algorithm = SortingAlgorithm(
    "median-of-three partition",
    partition_median_all,
    9,
    output_total=partition_total,
    validator=is_partitioned,
)
