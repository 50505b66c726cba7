from collections.abc import Sequence

from .heaps import Heap


def format_list(arr: Sequence) -> str:
    return "[" + ", ".join(map(str, arr)) + "]"


def heap_tree_lines(arr: Sequence) -> list[str]:
    "One line per level, every node centered above its children"
    if not arr:
        return ["(empty)"]
    depth = len(arr).bit_length()
    cell = max(len(str(x)) for x in arr) + 1
    lines = []
    for level in range(depth):
        start = (1 << level) - 1
        end = min((start << 1) + 1, len(arr))
        width = cell << (depth - 1 - level)
        lines.append("".join(str(x).center(width) for x in arr[start:end]).rstrip())
    return lines


def print_heap(heap: Heap) -> None:
    print(f"heap as array: {format_list(heap.to_list())}")
    print("heap as tree:")
    for line in heap_tree_lines(heap.to_list()):
        print(line)
