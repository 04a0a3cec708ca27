import pytest

from algoshelf.max_heap import MaxHeap, heap_sort, heapify, percolate_down

VALUES = (4, 14, 34, 15, 5, 12, 46, 19, 17, 11, 17)


def _is_max_heap(items):
    return all(items[(i - 1) // 2] >= items[i] for i in range(1, len(items)))


@pytest.fixture
def filled_heap():
    heap = MaxHeap()
    for value in VALUES:
        heap.insert(value)
    return heap


def test_sizes_grow_with_inserts():
    heap = MaxHeap()
    heap.insert(4)
    assert len(heap) == 1
    heap.insert(14)
    assert len(heap) == 2
    heap.insert(34)
    assert len(heap) == 3


def test_filled_heap_size_and_max(filled_heap):
    assert len(filled_heap) == 11
    assert filled_heap.peek() == 46
    assert _is_max_heap(filled_heap.elements())


def test_remove_then_extract_in_order(filled_heap):
    assert filled_heap.remove_at(1) == 19
    assert len(filled_heap) == 10
    assert _is_max_heap(filled_heap.elements())

    assert filled_heap.extract_max() == 46
    assert len(filled_heap) == 9
    assert filled_heap.extract_max() == 34
    assert len(filled_heap) == 8
    for expected in (17, 17, 15, 14, 12, 11, 5):
        assert filled_heap.extract_max() == expected
    assert len(filled_heap) == 1
    assert filled_heap.extract_max() == 4
    assert len(filled_heap) == 0
    assert filled_heap.is_empty()


def test_remove_last_position(filled_heap):
    last = filled_heap.elements()[-1]
    assert filled_heap.remove_at(len(filled_heap) - 1) == last
    assert len(filled_heap) == 10
    assert _is_max_heap(filled_heap.elements())


def test_remove_keeps_heap_valid_everywhere(filled_heap):
    removed = []
    while len(filled_heap) > 1:
        removed.append(filled_heap.remove_at(len(filled_heap) // 2))
        items = filled_heap.elements()
        assert all(items[(i - 1) // 2] >= items[i] for i in range(1, len(items)))
    assert len(filled_heap) == 1
    assert sorted(removed + filled_heap.elements()) == sorted(VALUES)


def test_insert_beyond_capacity_raises():
    heap = MaxHeap(2)
    heap.insert(1)
    heap.insert(2)
    with pytest.raises(IndexError):
        heap.insert(3)


def test_empty_heap_errors():
    heap = MaxHeap()
    with pytest.raises(IndexError):
        heap.peek()
    with pytest.raises(IndexError):
        heap.extract_max()


def test_remove_at_out_of_range(filled_heap):
    with pytest.raises(IndexError):
        filled_heap.remove_at(11)
    with pytest.raises(IndexError):
        filled_heap.remove_at(-1)


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        MaxHeap(0)


def test_heap_sort_source_case():
    to_sort = [10, 123, 43, 17, 13, 9, 422, 2477, 18, 53]
    heap_sort(to_sort)
    assert to_sort == [9, 10, 13, 17, 18, 43, 53, 123, 422, 2477]


def test_heap_sort_duplicates_and_edges():
    numbers = [3, 1, 3, -2, 0, 1]
    heap_sort(numbers)
    assert numbers == [-2, 0, 1, 1, 3, 3]
    empty = []
    heap_sort(empty)
    assert empty == []
    single = [7]
    heap_sort(single)
    assert single == [7]


def test_heapify_builds_valid_heap():
    numbers = [10, 123, 43, 17, 13, 9, 422, 2477, 18, 53]
    heapify(numbers)
    assert _is_max_heap(numbers)
    assert numbers[0] == 2477
    assert sorted(numbers) == [9, 10, 13, 17, 18, 43, 53, 123, 422, 2477]


def test_percolate_down_moves_root():
    numbers = [1, 5, 3]
    percolate_down(numbers, 3, 0)
    assert numbers == [5, 1, 3]


def test_percolate_down_respects_count():
    numbers = [1, 5, 3]
    percolate_down(numbers, 1, 0)
    assert numbers == [1, 5, 3]