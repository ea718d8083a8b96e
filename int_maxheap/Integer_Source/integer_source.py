"""
Reads integers from whitespace-separated text.

Reading stops at the first token that is not a plain decimal integer, or
that does not fit in a signed 64-bit slot; integers read before it are kept.
"""

import os
import io
import regex as re
from typing import Iterator, List, TextIO, Union

from int_maxheap.errors import SourceUnavailableError

INT_TOKEN_PAT = re.compile(r"[+-]?[0-9]+")
TOKEN_PAT = re.compile(r"\S+")
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def iter_integers(stream: TextIO) -> Iterator[int]:
    """
    Yield the integers of a text stream, line by line, in the order they appear.
    """
    for line in stream:
        for match in TOKEN_PAT.finditer(line):
            token = match.group()
            if INT_TOKEN_PAT.fullmatch(token) is None:
                return
            value = int(token)
            if not INT64_MIN <= value <= INT64_MAX:
                return
            yield value


def read_integers(path: Union[str, os.PathLike]) -> List[int]:
    """
    Read all leading integers from the text file at `path`.

    Args:
        - path: Path to a UTF-8 text file of whitespace-separated integers.

    Returns:
        - the integers, in file order

    Raises:
        - SourceUnavailableError: the file cannot be opened or decoded.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailableError(os.fspath(path), str(e)) from e

    return list(iter_integers(io.StringIO(text)))
