"""
Array-backed binary max-heap over signed 64-bit integers.

Features:
- Growable numpy storage, doubling its capacity whenever an insert would overflow it
- Bulk build with a single bottom-up (Floyd) pass after all values are loaded
- Destructive in-place heap sort, which leaves the heap empty
- Structured outcomes: empty-heap and unreadable-source conditions are raised
  as exceptions, nothing is printed from here
"""

import operator
from typing import Iterable, List

import numpy as np
from jaxtyping import Int

from int_maxheap.Integer_Source import read_integers
from int_maxheap.errors import EmptyHeapError
from .max_heapq import heapify_max, is_max_heap, sift_down, sift_up

DEFAULT_INITIAL_CAPACITY = 20
INT64_INFO = np.iinfo(np.int64)


class MaxHeap:
    def __init__(self, initial_capacity: int = DEFAULT_INITIAL_CAPACITY):
        """
        Construct an empty heap.

        Args:
            - initial_capacity: Number of slots allocated up front, must be >= 1.
        """
        initial_capacity = operator.index(initial_capacity)
        if initial_capacity < 1:
            raise ValueError(f"initial_capacity must be at least 1, got {initial_capacity}")

        self._storage: Int[np.ndarray, "capacity"] = np.zeros(initial_capacity, dtype=np.int64)
        self._size = 0

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._storage)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self) -> str:
        return f"MaxHeap(size={self._size}, capacity={self.capacity})"

    @staticmethod
    def _check_value(value) -> int:
        # booleans are ints to operator.index, but never meaningful heap keys
        if isinstance(value, bool):
            raise TypeError(f"heap values must be integers, got {value!r}")
        value = operator.index(value)
        if not INT64_INFO.min <= value <= INT64_INFO.max:
            raise OverflowError(
                f"value {value} is outside the 64-bit range [{INT64_INFO.min}, {INT64_INFO.max}]"
            )
        return value

    def _ensure_capacity(self) -> None:
        if self._size < len(self._storage):
            return
        grown = np.zeros(2 * len(self._storage), dtype=np.int64)
        grown[: self._size] = self._storage[: self._size]
        self._storage = grown

    def insert(self, value: int) -> None:
        """
        Add `value`, then sift it up until it is no greater than its parent.
        """
        value = self._check_value(value)
        self._ensure_capacity()

        self._storage[self._size] = value
        sift_up(self._storage, self._size)
        self._size += 1

    def delete_max(self) -> int:
        """
        Remove and return the largest element.

        Raises:
            - EmptyHeapError: the heap holds no elements; nothing is changed.
        """
        if self._size == 0:
            raise EmptyHeapError("delete_max")

        max_value = int(self._storage[0])

        # move the last live element to the root
        self._size -= 1
        self._storage[0] = self._storage[self._size]
        sift_down(self._storage, 0, self._size)

        return max_value

    def build_heap(self, values: Iterable[int]) -> int:
        """
        Discard the current contents and build a heap from `values`.

        All values are loaded first, then one bottom-up pass restores the
        heap property. The heap is reset before `values` is consumed, so if
        consuming or validating it raises, the heap is left empty.

        Returns:
            - the number of values loaded
        """
        self._size = 0
        values = [self._check_value(value) for value in values]

        for value in values:
            self._ensure_capacity()
            self._storage[self._size] = value
            self._size += 1

        heapify_max(self._storage, self._size)
        return self._size

    def build_heap_from_file(self, path: str) -> int:
        """
        Discard the current contents and build a heap from the whitespace
        separated integers stored in the text file at `path`.

        Raises:
            - SourceUnavailableError: the file cannot be opened or read. The
              reset happens before the read attempt, so the heap is left empty.
        """
        self._size = 0
        return self.build_heap(read_integers(path))

    def heap_sort(self) -> List[int]:
        """
        Sort all elements into ascending order in place and return them.
        The heap is considered destroyed afterwards: its size is reset to 0.

        Raises:
            - EmptyHeapError: the heap holds no elements; no sort is performed.
        """
        if self._size == 0:
            raise EmptyHeapError("heap_sort")

        original_size = self._size
        for last in range(original_size - 1, 0, -1):
            # the root is the max of heap[:last+1], park it at its final slot
            self._storage[0], self._storage[last] = self._storage[last], self._storage[0]
            self._size -= 1
            sift_down(self._storage, 0, self._size)

        self._size = 0
        return self._storage[:original_size].tolist()

    def snapshot(self) -> List[int]:
        """
        Return the live elements in storage (heap) order, without mutating anything.

        Raises:
            - EmptyHeapError: the heap holds no elements.
        """
        if self._size == 0:
            raise EmptyHeapError("snapshot")
        return self._storage[: self._size].tolist()

    def is_valid(self) -> bool:
        return is_max_heap(self._storage, self._size)
