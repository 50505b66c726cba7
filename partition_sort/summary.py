from collections.abc import Callable
from math import log2, nan
from typing import Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from .Config import *
from .operation_count import operation_cnts
from .sorting_algorithms.SortingAlgorithm import SortingAlgorithm
from .sorting_algorithms.sorting_algorithms import sorting_algorithms

COLUMNS = ["Algorithm", "||Input||", "||Output||", "Lower Bound", "Best", "Worst", "Average", "Ratio"]


def summary_row(sorting_algorithm: SortingAlgorithm, N: int, data: np.ndarray) -> dict:
    input_total = sorting_algorithm.input_total(N)
    output_total = sorting_algorithm.output_total(N)
    lower_bound = log2(input_total) - log2(output_total)
    avg = float(data.mean())
    return {
        "Algorithm": sorting_algorithm.name,
        "||Input||": input_total,
        "||Output||": output_total,
        "Lower Bound": round(lower_bound, 2),
        "Best": int(data.min()),
        "Worst": int(data.max()),
        "Average": round(avg, 2),
        # nothing to decide when every input maps to the same output
        "Ratio": nan if input_total <= output_total else round(avg / lower_bound, 3),
    }


def summarize(N: int, get_cnts: Optional[Callable[[int, int], np.ndarray]] = None, show_progress: bool = False) -> pd.DataFrame:
    if get_cnts is None:
        get_cnts = lambda i, N: operation_cnts(sorting_algorithms[i], N)
    rows = [summary_row(sorting_algorithms[i], N, get_cnts(i, N)) for i in tqdm(range(len(sorting_algorithms)), disable=not show_progress)]
    return pd.DataFrame(rows, columns=COLUMNS)


if __name__ == "__main__":
    print(summarize(INPUT_N, show_progress=True).to_string(index=False))
