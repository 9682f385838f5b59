from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar('T')


class InvalidCapacityError(ValueError):
    pass


class EmptyHeapError(IndexError):
    pass


def _greater(a, b, key: Optional[Callable] = None) -> bool:
    if key is None:
        return a > b
    return key(a) > key(b)


def percolate_up(heap: list, index: int, key: Optional[Callable] = None) -> None:
    """Move heap[index] toward the root while it beats its parent.

    Equal priorities stay put, so earlier inserts keep the higher slot.
    """
    while index > 0:
        parent = (index - 1) // 2
        if not _greater(heap[index], heap[parent], key):
            break
        heap[index], heap[parent] = heap[parent], heap[index]
        index = parent


def percolate_down(heap: list, index: int, size: int, key: Optional[Callable] = None) -> None:
    """Move heap[index] toward the leaves while a child beats it.

    Only the first `size` slots are considered. When both children have the
    same priority the left one is chosen.
    """
    while True:
        left = 2 * index + 1
        if left >= size:
            break
        best = left
        right = left + 1
        if right < size and _greater(heap[right], heap[left], key):
            best = right
        if not _greater(heap[best], heap[index], key):
            break
        heap[index], heap[best] = heap[best], heap[index]
        index = best


class PriorityHeap(Generic[T]):
    """Array-backed max-heap: the element with the highest priority comes out first.

    Elements are compared with `>`, or through `key` when one is given. The
    backing list doubles when an insert finds it full and never shrinks.
    """

    def __init__(self, capacity: int, key: Optional[Callable[[T], object]] = None) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidCapacityError("capacity must be a positive integer")
        self._data: List[Optional[T]] = [None] * capacity
        self._size = 0
        self._key = key

    def insert(self, value: T) -> None:
        if self._size == len(self._data):
            self._grow(len(self._data) * 2)
        self._data[self._size] = value
        percolate_up(self._data, self._size, self._key)
        self._size += 1

    def remove_best(self) -> T:
        if self._size == 0:
            raise EmptyHeapError("remove_best from empty heap")
        best = self._data[0]
        last = self._size - 1
        self._data[0] = self._data[last]
        self._data[last] = None
        self._size = last
        percolate_down(self._data, 0, self._size, self._key)
        return best

    def peek_best(self) -> T:
        if self._size == 0:
            raise EmptyHeapError("peek_best from empty heap")
        return self._data[0]

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def capacity(self) -> int:
        return len(self._data)

    def clear(self) -> None:
        for i in range(self._size):
            self._data[i] = None
        self._size = 0

    def copy(self) -> 'PriorityHeap[T]':
        clone: PriorityHeap[T] = PriorityHeap(len(self._data), self._key)
        clone._data = self._data.copy()
        clone._size = self._size
        return clone

    @staticmethod
    def from_iterable(values: Iterable[T], key: Optional[Callable[[T], object]] = None) -> 'PriorityHeap[T]':
        """Build a heap from any iterable in linear time.

        Note: the values are copied; the input is left untouched.
        """
        items = list(values)
        heap: PriorityHeap[T] = PriorityHeap(max(len(items), 1), key)
        heap._data[:len(items)] = items
        heap._size = len(items)
        for i in range(len(items) // 2 - 1, -1, -1):
            percolate_down(heap._data, i, heap._size, key)
        return heap

    def render(self) -> str:
        return ", ".join(str(self._data[i]) for i in range(self._size))

    def _grow(self, new_cap: int) -> None:
        new_data: List[Optional[T]] = [None] * new_cap
        for i in range(self._size):
            new_data[i] = self._data[i]
        self._data = new_data

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"PriorityHeap({self._data[:self._size]})"

    def __str__(self) -> str:
        return self.render()

    def __iter__(self) -> Iterator[T]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            yield heap_copy.remove_best()
