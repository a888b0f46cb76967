# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar configuración y datos de prueba.
# --------------------------------------------------------------

import logging
from typing import Iterator

import pytest

# Escenario de referencia: clave ASCII de 32 bytes y nonce de 12 bytes.
SCENARIO_KEY = b"12345678901234567890123456789012"
SCENARIO_NONCE = bytes([246, 231, 118, 136, 232, 16, 173, 214, 11, 241, 220, 114])
SCENARIO_NONCE_TEXT = "[246,231,118,136,232,16,173,214,11,241,220,114]"


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch) -> Iterator[None]:
    """Limpia la configuración y abarata Argon2id para cada prueba.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    for name in ("ENCRYPTOR_SUFFIX", "ENCRYPTOR_LOG_FILE", "ENCRYPTOR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("ENCRYPTOR_KDF_TIME_COST", "1")
    monkeypatch.setenv("ENCRYPTOR_KDF_MEMORY_COST", "8")
    monkeypatch.setenv("ENCRYPTOR_KDF_PARALLELISM", "1")
    # La CLI deja handlers propios; se restauran para que caplog vea los registros
    logger = logging.getLogger("encryptor")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    yield


@pytest.fixture
def key() -> bytes:
    return SCENARIO_KEY


@pytest.fixture
def nonce() -> bytes:
    return SCENARIO_NONCE
