from ..SortingAlgorithm import SortingAlgorithm
from .partition import partition
from .quick_sort import quick_sort


def quick_sort_tail_call(arr: list, left: int, right: int) -> None:
    """Recurse only into the shorter side and loop over the longer one,
    so a recursive call never gets more than half of the current range."""
    while left < right:
        pivot = partition(arr, left, right)
        if pivot - left < right - pivot:
            quick_sort(arr, left, pivot - 1)
            left = pivot + 1
        else:
            quick_sort(arr, pivot + 1, right)
            right = pivot - 1


def quick_sort_tail_call_all(arr: list) -> None:
    quick_sort_tail_call(arr, 0, len(arr) - 1)


algorithm = SortingAlgorithm("quick sort (tail call)", quick_sort_tail_call_all, 9)
