# --------------------------------------------------------------
# File: config.py
# Description: Configuración leída de variables de entorno y de `.env`.
# --------------------------------------------------------------
"""Parámetros configurables de la herramienta.

Los valores se leen en cada llamada para que un cambio de entorno (por
ejemplo en las pruebas) tenga efecto sin recargar el módulo.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from encryptor.errors import ConfigurationError
from encryptor.models import KdfParams

load_dotenv()

DEFAULT_SUFFIX = ".enc"
DEFAULT_LOG_LEVEL = "INFO"


def encrypted_suffix() -> str:
    """Sufijo que se añade al nombre de los archivos cifrados."""

    suffix = os.getenv("ENCRYPTOR_SUFFIX", DEFAULT_SUFFIX) or DEFAULT_SUFFIX
    return suffix if suffix.startswith(".") else f".{suffix}"


def log_level() -> str:
    """Nivel de log; un nombre desconocido vuelve a `DEFAULT_LOG_LEVEL`."""

    level = os.getenv("ENCRYPTOR_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    # getLevelName devuelve un entero solo para niveles registrados
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


def log_file() -> Optional[str]:
    return os.getenv("ENCRYPTOR_LOG_FILE") or None


def kdf_params() -> KdfParams:
    """Parámetros Argon2id por defecto del formato protegido.

    Raises:
        ConfigurationError: Si alguna variable no es un entero o queda fuera
        de los límites admitidos.

    """

    defaults = KdfParams()
    try:
        return KdfParams(
            time_cost=int(os.getenv("ENCRYPTOR_KDF_TIME_COST", defaults.time_cost)),
            memory_cost=int(os.getenv("ENCRYPTOR_KDF_MEMORY_COST", defaults.memory_cost)),
            parallelism=int(os.getenv("ENCRYPTOR_KDF_PARALLELISM", defaults.parallelism)),
        )
    except ValueError as exc:
        raise ConfigurationError(
            "Parámetros ENCRYPTOR_KDF_* inválidos: deben ser enteros dentro de los límites de Argon2id."
        ) from exc
