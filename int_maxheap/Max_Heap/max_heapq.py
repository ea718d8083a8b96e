"""
Max-heap primitives over a fixed storage array and an explicit live size.

Unlike Python's built-in heapq module, which works on a whole list and
natively provides a min-heap, these helpers take the number of live
elements as an argument, so the storage may carry spare capacity past
`size` (and heap sort can shrink the logical range in place).

Children of index i live at 2i+1 and 2i+2, the parent of i at (i-1)//2.

Usage:

sift_up(heap, index)             # moves heap[index] up towards the root
sift_down(heap, index, size)     # moves heap[index] down within heap[:size]
heapify_max(heap, size)          # Floyd's bottom-up build over heap[:size], O(size)
is_max_heap(heap, size)          # checks the heap property over heap[:size]
"""

from typing import MutableSequence, Sequence


def sift_up(heap: MutableSequence[int], index: int) -> None:
    """Swap heap[index] with its parent while it is strictly greater."""
    while index > 0:
        parent = (index - 1) // 2
        if heap[index] <= heap[parent]:
            break
        heap[index], heap[parent] = heap[parent], heap[index]
        index = parent


def sift_down(heap: MutableSequence[int], index: int, size: int) -> None:
    """
    Swap heap[index] with its larger child while that child is strictly greater.
    Only heap[:size] is considered live.
    """
    while True:
        largest = index
        left = 2 * index + 1
        right = left + 1

        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right

        if largest == index:
            return

        heap[index], heap[largest] = heap[largest], heap[index]
        index = largest


def heapify_max(heap: MutableSequence[int], size: int) -> None:
    """Transform heap[:size] into a max-heap, in-place, in O(size) time."""
    for index in range(size // 2 - 1, -1, -1):
        sift_down(heap, index, size)


def is_max_heap(heap: Sequence[int], size: int) -> bool:
    for child in range(1, size):
        if heap[(child - 1) // 2] < heap[child]:
            return False
    return True
