"""Playfair digraph substitution over a 5x5 key square.

I and J share a cell. Plaintext is reduced to uppercase letters and split into
pairs; a repeated letter inside a pair, or a lone final letter, is padded with
the filler ``X``.
"""

from __future__ import annotations

from typing import List, Tuple

from cipherlab.encryption.alphabet import letters_only

SIZE = 5
FILLER = "X"
SQUARE_ALPHABET = "ABCDEFGHIKLMNOPQRSTUVWXYZ"

Matrix = Tuple[Tuple[str, ...], ...]


def _merge_j(ch: str) -> str:
    return "I" if ch == "J" else ch


def build_matrix(keyword: str | None) -> Matrix:
    used: List[str] = []
    for ch in letters_only(keyword or "") + SQUARE_ALPHABET:
        ch = _merge_j(ch)
        if ch not in used:
            used.append(ch)
    return tuple(tuple(used[row * SIZE:(row + 1) * SIZE]) for row in range(SIZE))


def locate(matrix: Matrix, letter: str) -> Tuple[int, int]:
    target = _merge_j(letter.upper())
    for row, cells in enumerate(matrix):
        for col, cell in enumerate(cells):
            if cell == target:
                return row, col
    raise ValueError(f"{letter!r} is not in the Playfair square")


def prepare_digraphs(text: str) -> List[str]:
    normalized = letters_only(text)
    digraphs: List[str] = []
    i = 0
    while i < len(normalized):
        if i == len(normalized) - 1:
            digraphs.append(normalized[i] + FILLER)
            break
        if normalized[i] == normalized[i + 1]:
            digraphs.append(normalized[i] + FILLER)
            i += 1
        else:
            digraphs.append(normalized[i:i + 2])
            i += 2
    return digraphs


def split_pairs(text: str) -> List[str]:
    normalized = letters_only(text)
    if len(normalized) % 2:
        normalized += FILLER
    return [normalized[i:i + 2] for i in range(0, len(normalized), 2)]


def substitute(matrix: Matrix, digraph: str, step: int) -> str:
    row1, col1 = locate(matrix, digraph[0])
    row2, col2 = locate(matrix, digraph[1])
    if row1 == row2:
        return matrix[row1][(col1 + step) % SIZE] + matrix[row2][(col2 + step) % SIZE]
    if col1 == col2:
        return matrix[(row1 + step) % SIZE][col1] + matrix[(row2 + step) % SIZE][col2]
    # rectangle: swap columns, same for both directions
    return matrix[row1][col2] + matrix[row2][col1]


def encode(text: str, keyword: str | None) -> str:
    if not letters_only(keyword or ""):
        return text
    matrix = build_matrix(keyword)
    return "".join(substitute(matrix, pair, 1) for pair in prepare_digraphs(text))


def decode(text: str, keyword: str | None) -> str:
    if not letters_only(keyword or ""):
        return text
    matrix = build_matrix(keyword)
    return "".join(substitute(matrix, pair, -1) for pair in split_pairs(text))
