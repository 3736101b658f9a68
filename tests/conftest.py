# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from talord.core.domain.lexicon import load_lexicon
from talord.core.use_cases.name_number import NameNumber
from talord.main import create_app
from talord.shared.logging_setup import init_logging


@pytest.fixture(scope="session", autouse=True)
def _configure_logging():
    """Route log events to stderr before any test captures output."""
    init_logging()


@pytest.fixture(scope="session")
def lexicon():
    """The bundled Danish lexicon card."""
    return load_lexicon()


@pytest.fixture
def use_case(lexicon):
    return NameNumber(lexicon=lexicon, max_batch_size=5)


@pytest.fixture(scope="module")
def client():
    """HTTP client bound to a freshly built application."""
    return TestClient(create_app())
