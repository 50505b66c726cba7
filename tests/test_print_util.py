from partition_sort.heaps import Heap
from partition_sort.print_util import format_list, heap_tree_lines, print_heap


def test_format_list():
    assert format_list([0, 1, 2]) == "[0, 1, 2]"
    assert format_list([]) == "[]"


def test_heap_tree_lines_levels():
    lines = heap_tree_lines([5, 4, 2, 1, 3])
    assert [line.split() for line in lines] == [["5"], ["4", "2"], ["1", "3"]]


def test_heap_tree_lines_children_below_parent():
    lines = heap_tree_lines([1, 2, 3])
    assert lines[0].index("1") > lines[1].index("2")
    assert lines[0].index("1") < lines[1].index("3")


def test_heap_tree_lines_empty():
    assert heap_tree_lines([]) == ["(empty)"]


def test_print_heap(capsys):
    print_heap(Heap([1, 3, 2], max_heap=True))
    out = capsys.readouterr().out
    assert "heap as array: [3, 1, 2]" in out
    assert "heap as tree:" in out
