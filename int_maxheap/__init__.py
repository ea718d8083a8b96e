from .errors import (
    HeapError,
    EmptyHeapError,
    SourceUnavailableError,
    MalformedInputError
)
from .Max_Heap import MaxHeap

__all__ = [
    "HeapError",
    "EmptyHeapError",
    "SourceUnavailableError",
    "MalformedInputError",
    "MaxHeap"
]
