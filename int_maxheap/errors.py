class HeapError(Exception):
    """
    Base class for every error reported by the heap and its collaborators.
    """


class EmptyHeapError(HeapError):
    """
    Raised by delete_max, heap_sort and snapshot when the heap holds no elements.
    """
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation}: heap is empty")


class SourceUnavailableError(HeapError):
    """
    Raised when an integer source cannot be opened or read.
    """
    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        message = f"integer source unavailable: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class MalformedInputError(HeapError):
    """
    Raised by the menu when a line that should hold an integer does not.
    """
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"expected an integer, got {text!r}")
