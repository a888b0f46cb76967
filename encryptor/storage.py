# --------------------------------------------------------------
# File: storage.py
# Description: Lectura y escritura atómica de archivos binarios.
# --------------------------------------------------------------
"""Funciones auxiliares de entrada/salida para los archivos cifrados."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Union

__all__ = ["read_bytes", "write_bytes_atomic"]

PathLike = Union[str, os.PathLike]


def _ensure_parent_dir(path: Path) -> None:
    """Garantiza que exista el directorio padre del archivo de destino."""

    path.parent.mkdir(parents=True, exist_ok=True)


def read_bytes(path: PathLike) -> bytes:
    """Lee el archivo completo en memoria."""

    with open(path, "rb") as handler:
        return handler.read()


def write_bytes_atomic(path: PathLike, data: bytes) -> Path:
    """Escribe `data` en `path` de forma atómica.

    Los bytes se vuelcan primero a un temporal en el mismo directorio y se
    mueven con `os.replace`; si algo falla, el temporal se elimina y el destino
    queda intacto.

    Args:
        path (PathLike): Ruta final del archivo.
        data (bytes): Contenido a persistir.

    Returns:
        Path: Ruta escrita.

    """

    target = Path(path)
    _ensure_parent_dir(target)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "wb") as handler:
            handler.write(data)
            handler.flush()
            os.fsync(handler.fileno())
        os.replace(tmp_name, target)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
    return target
