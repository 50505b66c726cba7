from collections.abc import Callable, Generator, Iterable, MutableSequence, Sequence
from itertools import permutations
from math import factorial
from random import Random
from typing import Any, NamedTuple, Optional


def _sampler(N: int, r: Random) -> Generator[list[int], None, None]:
    arr = list(range(N))
    while True:
        r.shuffle(arr)
        yield arr


def _is_identity(arr: Sequence[int], _) -> bool:
    return all(i == v for i, v in enumerate(arr))


class SortingAlgorithm(NamedTuple):
    name: str
    func: Callable[[MutableSequence], Optional[Any]]
    max_N: int
    generator: Callable[[int], Iterable[Sequence[int]]] = lambda n: permutations(range(n))
    input_total: Callable[[int], int] = factorial
    output_total: Callable[[int], int] = lambda _: 1
    sampler: Callable[[int, Random], Generator[Sequence[int], None, None]] = _sampler
    validator: Callable[[Sequence[int], Optional[Any]], bool] = _is_identity
