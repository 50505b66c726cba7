"This module operates with Min-Heap, or Max-Heap when `max_heap` is set"
from collections.abc import Iterable, Sequence
from operator import gt, lt
from typing import Any


def _higher(max_heap: bool):
    return gt if max_heap else lt


def is_heap(arr: Sequence, max_heap: bool = False) -> bool:
    higher = _higher(max_heap)
    for i in range(1, len(arr)):
        if higher(arr[i], arr[(i - 1) >> 1]):
            return False
    return True


def push_down(arr: list, k: int, n: int, max_heap: bool = False) -> None:
    higher = _higher(max_heap)
    while 2 * k + 1 < n:
        j = 2 * k + 1
        if j + 1 < n and higher(arr[j + 1], arr[j]):
            j += 1
        if higher(arr[j], arr[k]):
            arr[k], arr[j] = arr[j], arr[k]
            k = j
        else:
            break


def push_up(arr: list, k: int, max_heap: bool = False) -> None:
    higher = _higher(max_heap)
    while k > 0:
        p = (k - 1) >> 1
        if not higher(arr[k], arr[p]):
            break
        arr[k], arr[p] = arr[p], arr[k]
        k = p


def heapify(arr: list, max_heap: bool = False) -> None:
    for i in range(len(arr) // 2 - 1, -1, -1):
        push_down(arr, i, len(arr), max_heap)


class Heap:
    __slots__ = ["arr", "max_heap"]

    def __init__(self, items: Iterable = (), max_heap: bool = False) -> None:
        self.max_heap = max_heap
        self.arr = list(items)
        heapify(self.arr, max_heap)

    def __len__(self) -> int:
        return len(self.arr)

    def is_empty(self) -> bool:
        return not self.arr

    def push(self, val: Any) -> None:
        self.arr.append(val)
        push_up(self.arr, len(self.arr) - 1, self.max_heap)

    def peek(self) -> Any:
        if not self.arr:
            raise IndexError("peek from an empty heap")
        return self.arr[0]

    def pop(self) -> Any:
        if not self.arr:
            raise IndexError("pop from an empty heap")
        arr = self.arr
        arr[0], arr[-1] = arr[-1], arr[0]
        val = arr.pop()
        push_down(arr, 0, len(arr), self.max_heap)
        return val

    def to_list(self) -> list:
        return list(self.arr)


if __name__ == "__main__":
    for max_heap in (False, True):
        heap = Heap([1, 3, 2, 5, 4], max_heap)
        if not is_heap(heap.to_list(), max_heap):
            print("Heap property is broken!")
            quit(-1)
        print([heap.pop() for _ in range(len(heap))])
