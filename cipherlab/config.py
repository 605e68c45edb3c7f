import os
from typing import Optional


def _optional_int(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    if raw in (None, ""):
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key")
    DEFAULT_LANGUAGE = os.environ.get("CIPHERLAB_DEFAULT_LANGUAGE", "en")
    LOG_LEVEL = os.environ.get("CIPHERLAB_LOG_LEVEL", "INFO").upper()
    CHALLENGE_SEED = _optional_int("CIPHERLAB_CHALLENGE_SEED")


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret-key"
    CHALLENGE_SEED = 1234


def get_config():
    env = os.environ.get("FLASK_ENV", "development").lower()
    if env == "testing":
        return TestingConfig()
    return Config()
