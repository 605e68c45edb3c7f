"""Rail Fence transposition.

Characters are written along a zig-zag path over ``rails`` rows and read off
row by row. Every character takes part, including spaces and punctuation.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

_MARK = object()


def _zigzag(length: int, rails: int) -> Iterator[int]:
    rail = 0
    direction = 1
    for _ in range(length):
        yield rail
        rail += direction
        if rail == 0 or rail == rails - 1:
            direction = -direction


def _in_range(text: str, rails: int) -> bool:
    return 2 <= rails < len(text)


def encode(text: str, rails: int) -> str:
    if not _in_range(text, rails):
        return text
    fence: List[List[str]] = [[] for _ in range(rails)]
    for ch, rail in zip(text, _zigzag(len(text), rails)):
        fence[rail].append(ch)
    return "".join("".join(row) for row in fence)


def decode(text: str, rails: int) -> str:
    if not _in_range(text, rails):
        return text
    length = len(text)
    fence: List[List[Optional[object]]] = [[None] * length for _ in range(rails)]

    for col, rail in enumerate(_zigzag(length, rails)):
        fence[rail][col] = _MARK

    chars = iter(text)
    for row in fence:
        for col, cell in enumerate(row):
            if cell is _MARK:
                row[col] = next(chars)

    return "".join(
        str(fence[rail][col]) for col, rail in enumerate(_zigzag(length, rails))
    )


def grid(text: str, rails: int, blank: str = " ") -> List[List[str]]:
    """The encoded fence as rows of cells, ``blank`` where nothing was written.

    Rail counts that leave the text unchanged give a single row.
    """
    if rails < 1:
        return []
    if not _in_range(text, rails):
        return [list(text)]
    fence = [[blank] * len(text) for _ in range(rails)]
    for col, rail in enumerate(_zigzag(len(text), rails)):
        fence[rail][col] = text[col]
    return fence
