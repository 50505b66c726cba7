from ..SortingAlgorithm import SortingAlgorithm
from .partition_median import partition_median


def quick_sort_median(arr: list, left: int, right: int) -> None:
    if left >= right:
        return
    pivot = partition_median(arr, left, right)
    quick_sort_median(arr, left, pivot - 1)
    quick_sort_median(arr, pivot + 1, right)


def quick_sort_median_all(arr: list) -> None:
    quick_sort_median(arr, 0, len(arr) - 1)


algorithm = SortingAlgorithm("quick sort (median pivot)", quick_sort_median_all, 9)
