# --------------------------------------------------------------
# File: test_config.py
# Description: Pruebas de la lectura de configuración desde el entorno.
# --------------------------------------------------------------

import logging

import pytest

from encryptor import config
from encryptor.errors import ConfigurationError
from encryptor.logging_config import setup_logger


@pytest.mark.parametrize(
    "value, expected",
    [
        ("debug", "DEBUG"),
        (" warning ", "WARNING"),
        ("verbose", "INFO"),  # desconocido: vuelve al valor por defecto
        ("", "INFO"),
    ],
)
def test_log_level_from_env(monkeypatch, value, expected):
    """Comprueba la normalización del nivel de log y su valor por defecto.

    Returns:
        None: La aserción compara el nivel resultante.
    """
    monkeypatch.setenv("ENCRYPTOR_LOG_LEVEL", value)
    assert config.log_level() == expected


def test_setup_logger_with_unknown_level(monkeypatch):
    """setup_logger no falla con un nivel desconocido en el entorno.

    Returns:
        None: La aserción revisa el nivel efectivo del logger.
    """
    monkeypatch.setenv("ENCRYPTOR_LOG_LEVEL", "verbose")
    logger = setup_logger("encryptor.test_config")
    assert logger.level == logging.INFO


@pytest.mark.parametrize(
    "name, value",
    [
        ("ENCRYPTOR_KDF_MEMORY_COST", "64MB"),
        ("ENCRYPTOR_KDF_TIME_COST", "1.5"),
        ("ENCRYPTOR_KDF_TIME_COST", "0"),
        ("ENCRYPTOR_KDF_MEMORY_COST", "4"),
        ("ENCRYPTOR_KDF_PARALLELISM", "300"),
    ],
)
def test_kdf_params_rejects_bad_env(monkeypatch, name, value):
    """Valores no enteros o fuera de límites producen ConfigurationError.

    Returns:
        None: Se espera la excepción tipada.
    """
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError) as excinfo:
        config.kdf_params()
    assert isinstance(excinfo.value, ValueError)
