from __future__ import annotations

from typing import List

from cipherlab.encryption.alphabet import is_letter, letters_only, position, shift_letter


def normalize_keyword(keyword: str | None) -> str:
    return letters_only(keyword or "")


def _apply(text: str, keyword: str | None, direction: int) -> str:
    normalized = normalize_keyword(keyword)
    if not normalized:
        return text

    result: List[str] = []
    key_index = 0
    for ch in text:
        if is_letter(ch):
            shift = position(normalized[key_index % len(normalized)])
            result.append(shift_letter(ch, direction * shift))
            key_index += 1
        else:
            result.append(ch)
    return "".join(result)


def encode(text: str, keyword: str | None) -> str:
    return _apply(text, keyword, 1)


def decode(text: str, keyword: str | None) -> str:
    return _apply(text, keyword, -1)
