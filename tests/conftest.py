import pytest

from cipherlab import create_app
from cipherlab.config import TestingConfig


@pytest.fixture
def app():
    return create_app(TestingConfig())


@pytest.fixture
def client(app):
    return app.test_client()
