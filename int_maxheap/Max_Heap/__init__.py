from .max_heap import MaxHeap, DEFAULT_INITIAL_CAPACITY
from .max_heapq import (
    sift_up,
    sift_down,
    heapify_max,
    is_max_heap
)

__all__ = [
    "MaxHeap",
    "DEFAULT_INITIAL_CAPACITY",
    "sift_up",
    "sift_down",
    "heapify_max",
    "is_max_heap"
]
