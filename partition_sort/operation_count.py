from collections.abc import Callable, Sequence
from itertools import islice
from random import Random
from time import thread_time
from typing import NamedTuple, Optional

import numpy as np

from .Config import *
from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm


class InvalidSortingAlgorithmError(Exception):
    def __init__(self, name: str, val_array: Sequence[int]) -> None:
        super().__init__(f"Invalid sorting algorithm: `{name}` gave a wrong result for {list(val_array)}")


class IdxVal(NamedTuple):
    idx: int
    val: int


def cmp_to_key(cmp: Callable[[IdxVal, IdxVal], int]) -> type:
    "Same as functools.cmp_to_key, but the wrapped IdxVal is guaranteed to be reachable as `obj`"

    class Key:
        __slots__ = ["obj"]

        def __init__(self, obj: IdxVal) -> None:
            self.obj = obj

        def __lt__(self, other: "Key") -> bool:
            return cmp(self.obj, other.obj) < 0

        def __gt__(self, other: "Key") -> bool:
            return cmp(self.obj, other.obj) > 0

        def __le__(self, other: "Key") -> bool:
            return cmp(self.obj, other.obj) <= 0

        def __ge__(self, other: "Key") -> bool:
            return cmp(self.obj, other.obj) >= 0

        def __eq__(self, other: "Key") -> bool:
            return cmp(self.obj, other.obj) == 0

        __hash__ = None

    return Key


def count_operations(sorting_algorithm: SortingAlgorithm, val_array: Sequence[int]) -> int:
    operation_cnt = 0

    def cmp(x: IdxVal, y: IdxVal) -> int:
        nonlocal operation_cnt
        # an element compared with itself tells nothing
        if x.idx != y.idx:
            operation_cnt += 1
        return 1 if x.val > y.val else -1 if x.val < y.val else 0

    key = cmp_to_key(cmp)
    idx_array = [key(IdxVal(i, x)) for i, x in enumerate(val_array)]
    ret = sorting_algorithm.func(idx_array)
    if not sorting_algorithm.validator([x.obj.val for x in idx_array], ret):
        raise InvalidSortingAlgorithmError(sorting_algorithm.name, val_array)
    return operation_cnt


def operation_cnts(sorting_algorithm: SortingAlgorithm, N: int, callback: Optional[Callable[[int, int], None]] = None) -> np.ndarray:
    do_sample = N > sorting_algorithm.max_N
    if do_sample:
        TOTAL = MAX_SAMPLE_CNT
        val_arrays = islice(sorting_algorithm.sampler(N, Random(SAMPLE_SEED)), MAX_SAMPLE_CNT)
    else:
        TOTAL = sorting_algorithm.input_total(N)
        val_arrays = sorting_algorithm.generator(N)
    if callback is not None:
        callback(0, TOTAL)
    cnts = []
    start_time = thread_time()
    for I, val_array in enumerate(val_arrays):
        cnts.append(count_operations(sorting_algorithm, val_array))
        if callback is not None:
            callback(I + 1, TOTAL)
        if do_sample and int((thread_time() - start_time) * 1000) >= MAX_SAMPLE_TIME_MS:
            break
    return np.array(cnts, dtype=np.int64)


if __name__ == "__main__":
    from .sorting_algorithms.sorting_algorithms import sorting_algorithms

    for sorting_algorithm in sorting_algorithms:
        data = operation_cnts(sorting_algorithm, 6)
        print(f"{sorting_algorithm.name}: best {data.min()}, worst {data.max()}, avg {data.mean():.2f}")
