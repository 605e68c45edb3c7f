from __future__ import annotations

import logging
import random
from typing import Any, Dict, Iterable, List, Optional, Sequence

from cipherlab.encryption import sdes
from cipherlab.encryption.algorithms import ALGORITHMS, CipherAlgorithm
from cipherlab.encryption.practice import (
    PRACTICE_MATERIALS,
    Challenge,
    ChallengeFeedback,
    PracticeMaterial,
    check_answer,
    generate_challenge,
)

logger = logging.getLogger(__name__)


class EncryptionService:
    def __init__(
        self,
        algorithms: Dict[str, CipherAlgorithm] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._algorithms = algorithms or ALGORITHMS
        self._rng = rng or random.Random()

    def get_algorithm(self, slug: str) -> CipherAlgorithm:
        if slug not in self._algorithms:
            raise KeyError(f"Unknown algorithm: {slug}")
        return self._algorithms[slug]

    def all_algorithms(self) -> Iterable[CipherAlgorithm]:
        return self._algorithms.values()

    def categories(self) -> Dict[str, List[CipherAlgorithm]]:
        categories: Dict[str, List[CipherAlgorithm]] = {}
        for algorithm in self._algorithms.values():
            categories.setdefault(algorithm.info.category, []).append(algorithm)
        return categories

    def get_practice_material(self, slug: str) -> PracticeMaterial | None:
        return PRACTICE_MATERIALS.get(slug)

    def encrypt(self, slug: str, plaintext: str, key: Optional[str] = None) -> str:
        algorithm = self.get_algorithm(slug)
        logger.debug("encrypt with %s (%d chars)", slug, len(plaintext))
        return algorithm.encrypt(plaintext, key)

    def decrypt(self, slug: str, ciphertext: str, key: Optional[str] = None) -> str:
        algorithm = self.get_algorithm(slug)
        logger.debug("decrypt with %s (%d chars)", slug, len(ciphertext))
        return algorithm.decrypt(ciphertext, key)

    def explain(self, slug: str, plaintext: str, key: Optional[str] = None) -> List[str]:
        return self.get_algorithm(slug).steps(plaintext, key)

    def visualize(self, slug: str, text: str, key: Optional[str] = None) -> Any:
        return self.get_algorithm(slug).visualize(text, key)

    def generate_sdes_keys(self, key: Optional[str]) -> sdes.KeySchedule:
        schedule = sdes.generate_keys(key)
        logger.info("generated S-DES subkeys")
        return schedule

    def sdes_encrypt(
        self, plaintext: Optional[str], k1: Sequence[int], k2: Sequence[int]
    ) -> List[sdes.Step]:
        return sdes.encrypt_steps(plaintext, tuple(k1), tuple(k2))

    def sdes_decrypt(
        self, ciphertext: Optional[str], k1: Sequence[int], k2: Sequence[int]
    ) -> str:
        return sdes.format_bits(sdes.decrypt(ciphertext, tuple(k1), tuple(k2)))

    def new_challenge(self, slug: str, difficulty: str = "medium") -> Challenge:
        challenge = generate_challenge(slug, difficulty, self._rng)
        logger.info("new %s challenge for %s", difficulty, slug)
        return challenge

    def check_challenge(self, challenge: Challenge, answer: str) -> ChallengeFeedback:
        return check_answer(challenge, answer)
