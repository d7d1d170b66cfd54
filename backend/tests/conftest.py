"""Shared fixtures for the regexform test suite."""

import pytest

from regexform import configure_logging
from regexform.config import Settings
from regexform.validators import ValidationEngine


@pytest.fixture(scope="session", autouse=True)
def _logging() -> None:
    configure_logging(Settings(DEBUG=True, LOG_LEVEL="info"))


@pytest.fixture
def engine() -> ValidationEngine:
    return ValidationEngine()


@pytest.fixture
def valid_record() -> dict[str, str]:
    return {"name": "Juan Perez", "email": "juan@mail.com", "password": "Abcdef1!"}
