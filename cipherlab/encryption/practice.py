"""Practice notes and offline challenges for the classical ciphers."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from cipherlab.encryption import monoalphabetic, playfair, rail_fence, vigenere
from cipherlab.encryption.alphabet import letters_only, parse_int

DIFFICULTIES = ("easy", "medium", "hard")


@dataclass(frozen=True)
class PracticeMaterial:
    title_en: str
    title_ru: str
    description_en: str
    description_ru: str
    code: str

    def title(self, lang: str) -> str:
        return self.title_ru if lang == "ru" else self.title_en

    def description(self, lang: str) -> str:
        return self.description_ru if lang == "ru" else self.description_en


PRACTICE_MATERIALS: Dict[str, PracticeMaterial] = {
    "caesar": PracticeMaterial(
        title_en="Shift letters with modular arithmetic",
        title_ru="Сдвиг букв по модулю 26",
        description_en=(
            "Each letter moves a fixed number of places along the alphabet and"
            " wraps around after Z. Decryption is the same shift in the other"
            " direction; spaces and punctuation are left alone."
        ),
        description_ru=(
            "Каждая буква сдвигается на фиксированное число позиций по алфавиту"
            " с переходом через Z. Расшифрование выполняет тот же сдвиг в"
            " обратную сторону; пробелы и знаки препинания не меняются."
        ),
        code="""def caesar(text: str, shift: int) -> str:\n    out = []\n    for ch in text:\n        if ch.isascii() and ch.isalpha():\n            base = ord('A') if ch.isupper() else ord('a')\n            out.append(chr((ord(ch) - base + shift) % 26 + base))\n        else:\n            out.append(ch)\n    return ''.join(out)\n\n\nprint(caesar("HELLO", 3))   # KHOOR\nprint(caesar("KHOOR", -3))  # HELLO""",
    ),
    "atbash": PracticeMaterial(
        title_en="Mirror the alphabet",
        title_ru="Зеркальный алфавит",
        description_en=(
            "Atbash maps A to Z, B to Y and so on. It has no key, and applying"
            " it twice returns the original text."
        ),
        description_ru=(
            "Атбаш заменяет A на Z, B на Y и так далее. Ключа нет, а повторное"
            " применение возвращает исходный текст."
        ),
        code="""def atbash(text: str) -> str:\n    out = []\n    for ch in text:\n        if ch.isascii() and ch.isalpha():\n            base = ord('A') if ch.isupper() else ord('a')\n            out.append(chr(base + 25 - (ord(ch) - base)))\n        else:\n            out.append(ch)\n    return ''.join(out)\n\n\nprint(atbash("HELLO"))  # SVOOL""",
    ),
    "vigenere": PracticeMaterial(
        title_en="Shift by a repeating keyword",
        title_ru="Сдвиг по повторяющемуся ключевому слову",
        description_en=(
            "Every letter of the message is shifted by the alphabet position of"
            " the next keyword letter. Only letters consume the keyword, so"
            " spaces do not change the alignment."
        ),
        description_ru=(
            "Каждая буква сообщения сдвигается на номер очередной буквы"
            " ключевого слова. Ключ расходуется только на буквы, поэтому"
            " пробелы не сбивают выравнивание."
        ),
        code="""def vigenere(text: str, keyword: str, sign: int = 1) -> str:\n    key = [ord(c) - ord('A') for c in keyword.upper() if 'A' <= c <= 'Z']\n    out, i = [], 0\n    for ch in text:\n        if ch.isascii() and ch.isalpha():\n            base = ord('A') if ch.isupper() else ord('a')\n            out.append(chr((ord(ch) - base + sign * key[i % len(key)]) % 26 + base))\n            i += 1\n        else:\n            out.append(ch)\n    return ''.join(out)\n\n\nprint(vigenere("HELLO", "KEY"))      # RIJVS\nprint(vigenere("RIJVS", "KEY", -1))  # HELLO""",
    ),
    "railfence": PracticeMaterial(
        title_en="Write in a zigzag, read by rows",
        title_ru="Запись зигзагом, чтение по строкам",
        description_en=(
            "The message is written diagonally down and up across a number of"
            " rails, then each rail is read from left to right. No letter"
            " changes, only the order."
        ),
        description_ru=(
            "Сообщение записывается по диагонали вниз и вверх по нескольким"
            " рельсам, затем каждый рельс читается слева направо. Буквы не"
            " меняются, меняется только порядок."
        ),
        code="""def rail_fence(text: str, rails: int) -> str:\n    rows = [''] * rails\n    rail, step = 0, 1\n    for ch in text:\n        rows[rail] += ch\n        rail += step\n        if rail in (0, rails - 1):\n            step = -step\n    return ''.join(rows)\n\n\nprint(rail_fence("HELLOWORLD", 3))  # HOLELWRDLO""",
    ),
    "playfair": PracticeMaterial(
        title_en="Encrypt letter pairs with a key square",
        title_ru="Шифрование пар букв по ключевому квадрату",
        description_en=(
            "A 5x5 square is filled with the keyword and the rest of the"
            " alphabet (I and J share a cell). Pairs in the same row move"
            " right, pairs in the same column move down, and other pairs swap"
            " columns."
        ),
        description_ru=(
            "Квадрат 5x5 заполняется ключевым словом и остатком алфавита"
            " (I и J в одной клетке). Пары в одной строке сдвигаются вправо,"
            " в одном столбце вниз, остальные меняются столбцами."
        ),
        code="""def square(keyword: str) -> list:\n    seen = []\n    for ch in keyword.upper() + 'ABCDEFGHIKLMNOPQRSTUVWXYZ':\n        ch = 'I' if ch == 'J' else ch\n        if ch.isalpha() and ch not in seen:\n            seen.append(ch)\n    return [seen[i:i + 5] for i in range(0, 25, 5)]\n\n\nfor row in square("PLAYFAIR"):\n    print(' '.join(row))""",
    ),
    "sdes": PracticeMaterial(
        title_en="Two Feistel rounds on eight bits",
        title_ru="Два раунда Фейстеля на восьми битах",
        description_en=(
            "S-DES derives two 8-bit subkeys from a 10-bit key, then runs an"
            " initial permutation, a round with K1, a swap, a round with K2 and"
            " the inverse permutation."
        ),
        description_ru=(
            "S-DES получает два 8-битных подключа из 10-битного ключа, затем"
            " выполняет начальную перестановку, раунд с K1, обмен половин,"
            " раунд с K2 и обратную перестановку."
        ),
        code="""from cipherlab.encryption import sdes\n\nkeys = sdes.generate_keys("1010000010")\nblock = sdes.encrypt("01110010", keys.k1, keys.k2)\nprint(sdes.format_bits(block))  # 01110111""",
    ),
}


_PHRASES: Dict[str, List[str]] = {
    "easy": ["HELLO", "SECRET", "CIPHER", "ATTACK", "PUZZLE", "CASTLE"],
    "medium": [
        "MEET ME AT NOON",
        "THE KEY IS HIDDEN",
        "SEND MORE TROOPS",
        "KNOWLEDGE IS POWER",
    ],
    "hard": [
        "THE QUICK BROWN FOX JUMPS OVER THE LAZY DOG",
        "ATTACK THE EAST WALL AT DAWN",
        "NEVER TRUST A CIPHER YOU CANNOT BREAK",
        "CRYPTOGRAPHY IS THE ART OF WRITING SECRETS",
    ],
}

_KEYWORDS: Dict[str, List[str]] = {
    "easy": ["KEY", "SUN", "CAT"],
    "medium": ["LEMON", "CRYPTO", "SHADOW"],
    "hard": ["MONARCHY", "PLAYFAIR", "LABYRINTH"],
}


PUBLIC_FIELDS = ("slug", "difficulty", "ciphertext", "key", "hint")


@dataclass(frozen=True)
class Challenge:
    slug: str
    difficulty: str
    plaintext: str
    ciphertext: str
    key: str
    hint: str
    solution: str

    def to_dict(self) -> Dict[str, Any]:
        """The fields a client may see; the answer is left out."""
        return {name: getattr(self, name) for name in PUBLIC_FIELDS}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Challenge":
        fields = {name: data[name] for name in PUBLIC_FIELDS}
        solution = solve(fields["slug"], fields["ciphertext"], fields["key"])
        return cls(plaintext=solution, solution=solution, **fields)


@dataclass(frozen=True)
class ChallengeFeedback:
    is_correct: bool
    feedback_key: str


def _caesar(text: str, difficulty: str, rng: random.Random) -> Dict[str, str]:
    shift = rng.randint(1, 25)
    return {
        "key": str(shift),
        "ciphertext": monoalphabetic.caesar_encode(text, shift),
        "solution": text,
        "hint": (
            f"Shift each letter back by {shift} places."
            if difficulty == "easy"
            else "Shift each letter by the key amount in the alphabet."
        ),
    }


def _atbash(text: str, difficulty: str, rng: random.Random) -> Dict[str, str]:
    return {
        "key": "",
        "ciphertext": monoalphabetic.atbash(text),
        "solution": text,
        "hint": "A becomes Z, B becomes Y: the alphabet is read backwards.",
    }


def _vigenere(text: str, difficulty: str, rng: random.Random) -> Dict[str, str]:
    keyword = rng.choice(_KEYWORDS[difficulty])
    return {
        "key": keyword,
        "ciphertext": vigenere.encode(text, keyword),
        "solution": text,
        "hint": (
            f"Subtract the letters of '{keyword}' in turn; spaces do not use up"
            " a key letter."
        ),
    }


def _railfence(text: str, difficulty: str, rng: random.Random) -> Dict[str, str]:
    rails = rng.randint(2, min(4, len(text) - 1))
    return {
        "key": str(rails),
        "ciphertext": rail_fence.encode(text, rails),
        "solution": text,
        "hint": (
            f"Draw a zigzag over {rails} rails, fill each rail with the"
            " ciphertext in order, then read along the zigzag."
        ),
    }


def _playfair(text: str, difficulty: str, rng: random.Random) -> Dict[str, str]:
    keyword = rng.choice(_KEYWORDS[difficulty])
    ciphertext = playfair.encode(text, keyword)
    return {
        "key": keyword,
        "ciphertext": ciphertext,
        "solution": playfair.decode(ciphertext, keyword),
        "hint": (
            f"Build the 5x5 square from '{keyword}' and undo each pair; an X"
            " may have been inserted between doubled letters or at the end."
        ),
    }


_GENERATORS: Dict[str, Callable[[str, str, random.Random], Dict[str, str]]] = {
    "caesar": _caesar,
    "atbash": _atbash,
    "vigenere": _vigenere,
    "railfence": _railfence,
    "playfair": _playfair,
}

CHALLENGE_SLUGS = tuple(_GENERATORS)

_SOLVERS: Dict[str, Callable[[str, str], str]] = {
    "caesar": lambda text, key: monoalphabetic.caesar_decode(text, parse_int(key, 0)),
    "atbash": lambda text, key: monoalphabetic.atbash(text),
    "vigenere": vigenere.decode,
    "railfence": lambda text, key: rail_fence.decode(text, parse_int(key, 3)),
    "playfair": playfair.decode,
}


def solve(slug: str, ciphertext: str, key: str) -> str:
    if slug not in _SOLVERS:
        raise KeyError(f"No practice challenges for: {slug}")
    return _SOLVERS[slug](ciphertext, key)


def generate_challenge(
    slug: str, difficulty: str = "medium", rng: Optional[random.Random] = None
) -> Challenge:
    if slug not in _GENERATORS:
        raise KeyError(f"No practice challenges for: {slug}")
    if difficulty not in DIFFICULTIES:
        raise ValueError(f"Unknown difficulty: {difficulty}")
    rng = rng or random.Random()
    plaintext = rng.choice(_PHRASES[difficulty])
    generated = _GENERATORS[slug](plaintext, difficulty, rng)
    return Challenge(
        slug=slug,
        difficulty=difficulty,
        plaintext=plaintext,
        ciphertext=generated["ciphertext"],
        key=generated["key"],
        hint=generated["hint"],
        solution=generated["solution"],
    )


def _normalize(value: str) -> str:
    return value.strip().upper()


def check_answer(challenge: Challenge, answer: str) -> ChallengeFeedback:
    if challenge.slug == "playfair":
        given = letters_only(answer)
        accepted = {letters_only(challenge.solution), letters_only(challenge.plaintext)}
        # any answer that enciphers back to the challenge also counts
        if given and playfair.encode(given, challenge.key) == challenge.ciphertext:
            accepted.add(given)
    else:
        given = _normalize(answer)
        accepted = {_normalize(challenge.solution), _normalize(challenge.plaintext)}
    is_correct = bool(given) and given in accepted
    return ChallengeFeedback(
        is_correct=is_correct,
        feedback_key="challenge_correct" if is_correct else "challenge_incorrect",
    )
