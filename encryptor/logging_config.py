# --------------------------------------------------------------
# File: logging_config.py
# Description: Configuración de loggers de consola y archivo.
# --------------------------------------------------------------
"""Loggers de la CLI y de las operaciones sobre rutas."""

import logging
import sys
from pathlib import Path
from typing import Optional

from encryptor import config

FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = "encryptor",
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Configura un logger con salida a stderr y, opcionalmente, a archivo.

    Args:
        name (str): Nombre del logger.
        level (Optional[str]): Nivel; por defecto `ENCRYPTOR_LOG_LEVEL`.
        log_file (Optional[str]): Archivo de log; por defecto `ENCRYPTOR_LOG_FILE`.

    Returns:
        logging.Logger: Logger listo para usar.

    """

    level = level or config.log_level()
    log_file = log_file or config.log_file()

    logger = logging.getLogger(name)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = False

    formatter = logging.Formatter(FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
