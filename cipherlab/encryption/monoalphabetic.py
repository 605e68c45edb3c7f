from __future__ import annotations

from cipherlab.encryption.alphabet import reflect_letter, shift_letter


def caesar_encode(text: str, shift: int) -> str:
    return "".join(shift_letter(ch, shift) for ch in text)


def caesar_decode(text: str, shift: int) -> str:
    return caesar_encode(text, -shift)


def atbash(text: str) -> str:
    """Mirror every letter (A<->Z, b<->y). Applying it twice is a no-op."""
    return "".join(reflect_letter(ch) for ch in text)
