from .menu import HeapMenu, main, parse_int

__all__ = [
    "HeapMenu",
    "main",
    "parse_int"
]
