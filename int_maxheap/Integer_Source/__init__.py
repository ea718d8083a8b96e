from .integer_source import iter_integers, read_integers

__all__ = [
    "iter_integers",
    "read_integers"
]
