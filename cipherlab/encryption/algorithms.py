from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from cipherlab.encryption import monoalphabetic, playfair, rail_fence, sdes, vigenere
from cipherlab.encryption.alphabet import letter_at, parse_int


@dataclass(frozen=True)
class CipherInfo:
    slug: str
    name: str
    category: str


class CipherAlgorithm(ABC):
    info: CipherInfo
    description: str = ""
    requires_key: bool = False
    key_input_type: str = "text"
    default_key: str = ""
    key_label_en: str = "Key"
    key_label_ru: str = "Ключ"
    key_hint_en: str = ""
    key_hint_ru: str = ""

    def get_key_label(self, lang: str) -> str:
        return self.key_label_ru if lang == "ru" else self.key_label_en

    def get_key_hint(self, lang: str) -> str:
        return self.key_hint_ru if lang == "ru" else self.key_hint_en

    @abstractmethod
    def encrypt(self, plaintext: str, key: Optional[str] = None) -> str:
        raise NotImplementedError

    @abstractmethod
    def decrypt(self, ciphertext: str, key: Optional[str] = None) -> str:
        raise NotImplementedError

    def steps(self, plaintext: str, key: Optional[str] = None) -> List[str]:
        return []

    def visualize(self, text: str, key: Optional[str] = None) -> Any:
        return None

    def to_dict(self, lang: str = "en") -> Dict[str, Any]:
        return {
            "slug": self.info.slug,
            "name": self.info.name,
            "category": self.info.category,
            "description": self.description,
            "requires_key": self.requires_key,
            "key_input_type": self.key_input_type,
            "default_key": self.default_key,
            "key_label": self.get_key_label(lang),
            "key_hint": self.get_key_hint(lang),
        }


class CaesarCipher(CipherAlgorithm):
    info = CipherInfo("caesar", "Caesar Cipher", "classical")
    description = "Shifts each letter by a fixed number of positions in the alphabet."
    requires_key = True
    key_input_type = "number"
    default_key = "3"
    key_label_en = "Shift value"
    key_label_ru = "Сдвиг"
    key_hint_en = "Use an integer shift from 0 to 25, e.g. 3"
    key_hint_ru = "Введите целое число от 0 до 25, например 3"

    def _parse_key(self, key: Optional[str]) -> int:
        return parse_int(key, 0)

    def encrypt(self, plaintext: str, key: Optional[str] = None) -> str:
        return monoalphabetic.caesar_encode(plaintext, self._parse_key(key))

    def decrypt(self, ciphertext: str, key: Optional[str] = None) -> str:
        return monoalphabetic.caesar_decode(ciphertext, self._parse_key(key))

    def steps(self, plaintext: str, key: Optional[str] = None) -> List[str]:
        shift = self._parse_key(key)
        return [
            f"Step 1: Convert each letter by shifting {shift} positions in the alphabet.",
            f"Example: 'A' → '{letter_at(shift)}'",
        ]


class AtbashCipher(CipherAlgorithm):
    info = CipherInfo("atbash", "Atbash Cipher", "classical")
    description = (
        "Substitutes each letter with its reverse position in the alphabet"
        " (A→Z, B→Y, etc)."
    )
    key_input_type = "none"

    def encrypt(self, plaintext: str, key: Optional[str] = None) -> str:
        return monoalphabetic.atbash(plaintext)

    def decrypt(self, ciphertext: str, key: Optional[str] = None) -> str:
        return monoalphabetic.atbash(ciphertext)

    def steps(self, plaintext: str, key: Optional[str] = None) -> List[str]:
        return [
            "Step 1: Replace each letter with its mirror position in the alphabet.",
            "Example: 'A' → 'Z', 'B' → 'Y', etc.",
        ]


class VigenereCipher(CipherAlgorithm):
    info = CipherInfo("vigenere", "Vigenère Cipher", "classical")
    description = (
        "Uses a keyword to determine shift values, making it more secure than"
        " Caesar cipher."
    )
    requires_key = True
    default_key = "KEY"
    key_label_en = "Keyword"
    key_label_ru = "Ключевое слово"
    key_hint_en = "Letters only, e.g. SECURITY"
    key_hint_ru = "Только буквы, например SECURITY"

    def encrypt(self, plaintext: str, key: Optional[str] = None) -> str:
        return vigenere.encode(plaintext, key)

    def decrypt(self, ciphertext: str, key: Optional[str] = None) -> str:
        return vigenere.decode(ciphertext, key)

    def steps(self, plaintext: str, key: Optional[str] = None) -> List[str]:
        keyword = (key or "").upper()
        return [
            "Step 1: For each letter in plaintext, use the corresponding letter"
            " in the key to determine shift.",
            f"Step 2: Key '{keyword}' repeats as needed to match plaintext length.",
            "Example: Plaintext 'A' with key letter 'K' (shift 10) → 'K'",
        ]


class RailFenceCipher(CipherAlgorithm):
    info = CipherInfo("railfence", "Rail Fence Cipher", "classical")
    description = (
        "A transposition cipher that arranges plaintext in a zigzag pattern"
        " across \"rails\"."
    )
    requires_key = True
    key_input_type = "number"
    default_key = "3"
    key_label_en = "Rails"
    key_label_ru = "Количество рельсов"
    key_hint_en = "Number of rails from 2 to 10"
    key_hint_ru = "Количество рельсов от 2 до 10"

    def _parse_key(self, key: Optional[str]) -> int:
        return parse_int(key, 3)

    def encrypt(self, plaintext: str, key: Optional[str] = None) -> str:
        return rail_fence.encode(plaintext, self._parse_key(key))

    def decrypt(self, ciphertext: str, key: Optional[str] = None) -> str:
        return rail_fence.decode(ciphertext, self._parse_key(key))

    def steps(self, plaintext: str, key: Optional[str] = None) -> List[str]:
        rails = self._parse_key(key)
        return [
            f"Step 1: Write text in zigzag pattern across {rails} rails.",
            "Step 2: Read off each rail from top to bottom.",
        ]

    def visualize(self, text: str, key: Optional[str] = None) -> List[List[str]]:
        return rail_fence.grid(text, self._parse_key(key))


class PlayfairCipher(CipherAlgorithm):
    info = CipherInfo("playfair", "Playfair Cipher", "classical")
    description = "Encrypts pairs of letters using a 5×5 grid derived from a keyword."
    requires_key = True
    default_key = "KEYWORD"
    key_label_en = "Keyword"
    key_label_ru = "Ключевое слово"
    key_hint_en = "Letters only; I and J share a cell"
    key_hint_ru = "Только буквы; I и J занимают одну клетку"

    def encrypt(self, plaintext: str, key: Optional[str] = None) -> str:
        return playfair.encode(plaintext, key)

    def decrypt(self, ciphertext: str, key: Optional[str] = None) -> str:
        return playfair.decode(ciphertext, key)

    def steps(self, plaintext: str, key: Optional[str] = None) -> List[str]:
        keyword = (key or "").upper()
        return [
            f"Step 1: Create 5x5 matrix from key '{keyword}' (I/J share position).",
            "Step 2: Split plaintext into digraphs (pairs of letters).",
            "Step 3: Apply Playfair rules: same row → shift right, same column"
            " → shift down, otherwise → swap columns.",
        ]

    def visualize(self, text: str, key: Optional[str] = None) -> List[List[str]]:
        return [list(row) for row in playfair.build_matrix(key)]


class SdesCipher(CipherAlgorithm):
    info = CipherInfo("sdes", "Simplified DES", "modern")
    description = (
        "A two-round Feistel cipher on 8-bit blocks with subkeys derived from a"
        " 10-bit key."
    )
    requires_key = True
    key_input_type = "binary"
    key_label_en = "10-bit key"
    key_label_ru = "10-битный ключ"
    key_hint_en = "Exactly 10 binary digits, e.g. 1010000010"
    key_hint_ru = "Ровно 10 двоичных цифр, например 1010000010"

    def encrypt(self, plaintext: str, key: Optional[str] = None) -> str:
        schedule = sdes.generate_keys(key)
        return sdes.format_bits(sdes.encrypt(plaintext, schedule.k1, schedule.k2))

    def decrypt(self, ciphertext: str, key: Optional[str] = None) -> str:
        schedule = sdes.generate_keys(key)
        return sdes.format_bits(sdes.decrypt(ciphertext, schedule.k1, schedule.k2))

    def steps(self, plaintext: str, key: Optional[str] = None) -> List[str]:
        schedule = sdes.generate_keys(key)
        lines = [
            f"Key Generation: P10 = {sdes.format_bits(schedule.permuted_key)},"
            f" K1 = {sdes.format_bits(schedule.k1)}, K2 = {sdes.format_bits(schedule.k2)}"
        ]
        for step in sdes.encrypt_steps(plaintext, schedule.k1, schedule.k2):
            lines.append(f"{step.name}: {sdes.format_bits(step.bits)}")
        return lines

    def visualize(self, text: str, key: Optional[str] = None) -> Dict[str, Any]:
        schedule = sdes.generate_keys(key)
        return {
            "tables": {name: list(table) for name, table in sdes.TABLES.items()},
            "k1": sdes.format_bits(schedule.k1),
            "k2": sdes.format_bits(schedule.k2),
        }


def get_algorithms() -> Dict[str, CipherAlgorithm]:
    algorithms: List[CipherAlgorithm] = [
        CaesarCipher(),
        AtbashCipher(),
        VigenereCipher(),
        RailFenceCipher(),
        PlayfairCipher(),
        SdesCipher(),
    ]
    return {algo.info.slug: algo for algo in algorithms}


ALGORITHMS = get_algorithms()
