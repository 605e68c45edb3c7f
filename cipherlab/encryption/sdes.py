"""Simplified DES: a two-round Feistel network over 8-bit blocks.

Bit vectors are tuples of 0/1 ints. Permutation tables are 1-based, as they
are usually printed. The network is IP, fK1, SW, fK2, IP^-1; there is no swap
after the second round.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple

Bits = Tuple[int, ...]

KEY_BITS = 10
BLOCK_BITS = 8

P10 = (3, 5, 2, 7, 4, 10, 1, 9, 8, 6)
P8 = (6, 3, 7, 4, 8, 5, 10, 9)
P4 = (2, 4, 3, 1)
IP = (2, 6, 3, 1, 4, 8, 5, 7)
IP_INV = (4, 1, 3, 5, 7, 2, 8, 6)
EP = (4, 1, 2, 3, 2, 3, 4, 1)

S0 = (
    (1, 0, 3, 2),
    (3, 2, 1, 0),
    (0, 2, 1, 3),
    (3, 1, 3, 2),
)
S1 = (
    (0, 1, 2, 3),
    (2, 0, 1, 3),
    (3, 0, 1, 0),
    (2, 1, 0, 3),
)

TABLES = {
    "P10": P10,
    "P8": P8,
    "P4": P4,
    "IP": IP,
    "IP_INV": IP_INV,
    "EP": EP,
}


class SdesValidationError(ValueError):
    """Raised when a key or block is not a binary string of the right width."""


@dataclass(frozen=True)
class KeySchedule:
    permuted_key: Bits
    k1: Bits
    k2: Bits


@dataclass(frozen=True)
class Step:
    name: str
    bits: Bits


def parse_bits(raw: str | None, length: int, role: str = "Input") -> Bits:
    if not raw:
        raise SdesValidationError(f"Please enter {'a key' if role == 'Key' else 'input text'}")
    if not re.fullmatch(rf"[01]{{{length}}}", raw):
        raise SdesValidationError(
            f"{role} must be {length} bits of binary (0s and 1s only)"
        )
    return tuple(int(bit) for bit in raw)


def format_bits(bits: Sequence[int]) -> str:
    return "".join(str(bit) for bit in bits)


def permute(bits: Bits, table: Sequence[int]) -> Bits:
    return tuple(bits[i - 1] for i in table)


def left_shift(bits: Bits, shifts: int) -> Bits:
    return bits[shifts:] + bits[:shifts]


def xor(left: Bits, right: Bits) -> Bits:
    return tuple(a ^ b for a, b in zip(left, right))


def sbox_lookup(bits: Bits, sbox: Tuple[Tuple[int, ...], ...]) -> Bits:
    row = (bits[0] << 1) | bits[3]
    col = (bits[1] << 1) | bits[2]
    value = sbox[row][col]
    return (value >> 1) & 1, value & 1


def _require(bits: Bits, length: int, role: str) -> Bits:
    bits = tuple(bits)
    if len(bits) != length or any(bit not in (0, 1) for bit in bits):
        raise SdesValidationError(f"{role} must be {length} bits")
    return bits


def generate_keys(key: str | Bits | None) -> KeySchedule:
    """Derive K1 and K2 from a 10-bit key.

    K1 is P8 of the P10 halves rotated left once; K2 rotates those halves two
    more places before P8.
    """
    if key is None or isinstance(key, str):
        bits = parse_bits(key, KEY_BITS, "Key")
    else:
        bits = _require(key, KEY_BITS, "Key")
    permuted = permute(bits, P10)
    left, right = permuted[:5], permuted[5:]

    left, right = left_shift(left, 1), left_shift(right, 1)
    k1 = permute(left + right, P8)

    left, right = left_shift(left, 2), left_shift(right, 2)
    k2 = permute(left + right, P8)
    return KeySchedule(permuted, k1, k2)


def round_function(left: Bits, right: Bits, subkey: Bits) -> Tuple[Bits, Bits]:
    mixed = xor(permute(right, EP), subkey)
    substituted = sbox_lookup(mixed[:4], S0) + sbox_lookup(mixed[4:], S1)
    return xor(left, permute(substituted, P4)), right


def _network(block: Bits, first: Bits, second: Bits) -> List[Step]:
    steps: List[Step] = []
    permuted = permute(block, IP)
    steps.append(Step("Initial Permutation", permuted))

    left, right = round_function(permuted[:4], permuted[4:], first)
    steps.append(Step("Round 1", left + right))

    left, right = right, left
    steps.append(Step("Swap", left + right))

    left, right = round_function(left, right, second)
    steps.append(Step("Round 2", left + right))

    steps.append(Step("Final Permutation", permute(left + right, IP_INV)))
    return steps


def _block(value: str | Bits | None, role: str) -> Bits:
    if value is None or isinstance(value, str):
        return parse_bits(value, BLOCK_BITS, role)
    return _require(value, BLOCK_BITS, role)


def encrypt_steps(plaintext: str | Bits, k1: Bits, k2: Bits) -> List[Step]:
    block = _block(plaintext, "Input")
    return _network(block, _require(k1, BLOCK_BITS, "K1"), _require(k2, BLOCK_BITS, "K2"))


def encrypt(plaintext: str | Bits, k1: Bits, k2: Bits) -> Bits:
    return encrypt_steps(plaintext, k1, k2)[-1].bits


def decrypt(ciphertext: str | Bits, k1: Bits, k2: Bits) -> Bits:
    # running the same network with the subkeys swapped undoes encrypt()
    block = _block(ciphertext, "Ciphertext")
    steps = _network(block, _require(k2, BLOCK_BITS, "K2"), _require(k1, BLOCK_BITS, "K1"))
    return steps[-1].bits
