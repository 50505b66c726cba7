from ..SortingAlgorithm import SortingAlgorithm
from .partition import partition


def quick_sort(arr: list, left: int, right: int) -> None:
    if left >= right:
        return
    pivot = partition(arr, left, right)
    quick_sort(arr, left, pivot - 1)
    quick_sort(arr, pivot + 1, right)


def quick_sort_all(arr: list) -> None:
    quick_sort(arr, 0, len(arr) - 1)


algorithm = SortingAlgorithm("quick sort", quick_sort_all, 9)
