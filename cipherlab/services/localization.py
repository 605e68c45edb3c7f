from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass
class Localization:
    translations: Dict[str, Dict[str, str]]

    def gettext(self, key: str, lang: str) -> str:
        default_lang = "en"
        lang = lang if lang in {"en", "ru"} else default_lang
        if key in self.translations and lang in self.translations[key]:
            return self.translations[key][lang]
        return self.translations.get(key, {}).get(default_lang, key)


TRANSLATIONS = Localization(
    translations={
        "app_title": {"en": "CipherLab", "ru": "Лаборатория шифров"},
        "unknown_algorithm": {
            "en": "Unknown algorithm.",
            "ru": "Неизвестный алгоритм.",
        },
        "input_required": {
            "en": "Please enter your message.",
            "ru": "Введите сообщение.",
        },
        "sdes_keys_required": {
            "en": "Please generate keys first",
            "ru": "Сначала сгенерируйте ключи",
        },
        "challenge_missing": {
            "en": "Start a challenge before submitting an answer.",
            "ru": "Сначала получите задание, затем отправьте ответ.",
        },
        "challenge_correct": {
            "en": "Great job! Your solution is correct.",
            "ru": "Отлично! Ваше решение верно.",
        },
        "challenge_incorrect": {
            "en": "Your solution doesn't match the expected answer. Try again.",
            "ru": "Ваше решение не совпадает с ожидаемым ответом. Попробуйте ещё раз.",
        },
    }
)
