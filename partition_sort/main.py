from .Config import *
from .heaps import Heap
from .print_util import format_list, print_heap
from .sorting_algorithms.impl.quick_sort import quick_sort
from .sorting_algorithms.impl.quick_sort_median import quick_sort_median
from .sorting_algorithms.impl.quick_sort_tail_call import quick_sort_tail_call


def sort_demo() -> None:
    for name, func in (
        ("quick sort", quick_sort),
        ("quick sort (median pivot)", quick_sort_median),
        ("quick sort (tail call)", quick_sort_tail_call),
    ):
        nums = list(DEMO_NUMS)
        print(f"before {name}: nums = {format_list(nums)}")
        func(nums, 0, len(nums) - 1)
        print(f"after {name}:  nums = {format_list(nums)}")


def heap_demo() -> None:
    max_heap = Heap(max_heap=True)
    print("\nThe following steps use a max heap")
    for val in DEMO_HEAP_PUSHES:
        max_heap.push(val)
        print(f"\nafter pushing {val}")
        print_heap(max_heap)

    print(f"\ntop of the heap is {max_heap.peek()}")

    while not max_heap.is_empty():
        val = max_heap.pop()
        print(f"\nafter popping {val}")
        print_heap(max_heap)

    print(f"\nheap size is {len(max_heap)}, empty: {max_heap.is_empty()}")

    min_heap = Heap(DEMO_HEAP_PUSHES)
    print("\nmin heap built from a list")
    print_heap(min_heap)


if __name__ == "__main__":
    sort_demo()
    heap_demo()
