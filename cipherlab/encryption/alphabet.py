"""Letter primitives shared by the classical ciphers.

Only ASCII letters are transformed; every other character is passed through
untouched so callers can keep spacing and punctuation in place.
"""

from __future__ import annotations

import re
import string

ALPHABET_SIZE = 26

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def is_letter(ch: str) -> bool:
    return len(ch) == 1 and ch in string.ascii_letters


def is_upper(ch: str) -> bool:
    return ch in string.ascii_uppercase


def position(ch: str) -> int:
    """Zero-based alphabet index of ``ch`` regardless of case."""
    return ord(ch.upper()) - ord("A")


def letter_at(index: int, upper: bool = True) -> str:
    base = "A" if upper else "a"
    return chr(ord(base) + index % ALPHABET_SIZE)


def shift_letter(ch: str, amount: int) -> str:
    if not is_letter(ch):
        return ch
    shifted = ((position(ch) + amount) % ALPHABET_SIZE + ALPHABET_SIZE) % ALPHABET_SIZE
    return letter_at(shifted, is_upper(ch))


def reflect_letter(ch: str) -> str:
    if not is_letter(ch):
        return ch
    return letter_at(ALPHABET_SIZE - 1 - position(ch), is_upper(ch))


def letters_only(text: str) -> str:
    return "".join(ch for ch in text if is_letter(ch)).upper()


def parse_int(raw: str | int | None, default: int) -> int:
    """Read a leading integer from free text.

    Trailing characters are ignored (``"3 rails"`` gives 3). When nothing
    parses, or the parsed value is zero, ``default`` is returned.
    """
    if isinstance(raw, int):
        return raw or default
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if not match:
        return default
    return int(match.group(1)) or default
