# --------------------------------------------------------------
# File: container.py
# Description: Formato en disco de los archivos cifrados.
# --------------------------------------------------------------
"""Codificación del contenedor cifrado.

Formato por defecto: el archivo es exactamente ``ciphertext ‖ tag``, sin
cabecera, sin número mágico y sin nonce. El nonce lo conserva el usuario.

Formato protegido (opcional, incompatible con el anterior)::

    magic "AEF1" (4) | version u8 | salt (16) | nonce (12)
    | time_cost u32 BE | memory_cost u32 BE | parallelism u8 | ciphertext ‖ tag

La cabecera completa se autentica como AAD.
"""

from __future__ import annotations

import struct
from typing import Tuple

from encryptor.errors import MalformedContainer
from encryptor.models import TAG_SIZE, KdfParams, ProtectedHeader, SealedPayload

__all__ = [
    "MAGIC",
    "VERSION",
    "HEADER_SIZE",
    "encode",
    "decode",
    "encode_protected",
    "decode_protected",
]

MAGIC = b"AEF1"
VERSION = 1
_HEADER = struct.Struct(">4sB16s12sIIB")
HEADER_SIZE = _HEADER.size


def encode(sealed: SealedPayload) -> bytes:
    """Devuelve los bytes que se persisten: la carga sellada sin cambios."""

    return sealed.data


def decode(data: bytes) -> SealedPayload:
    """Interpreta un archivo cifrado como carga sellada.

    Args:
        data (bytes): Contenido leído del archivo `.enc`.

    Returns:
        SealedPayload: Los mismos bytes, como `ciphertext ‖ tag`.

    Raises:
        MalformedContainer: Si el archivo no alcanza a contener la etiqueta.

    """

    if len(data) < TAG_SIZE:
        raise MalformedContainer(
            f"Archivo truncado: {len(data)} bytes, mínimo {TAG_SIZE}."
        )
    return SealedPayload(data=bytes(data))


def pack_header(header: ProtectedHeader) -> bytes:
    """Serializa la cabecera del formato protegido (también usada como AAD)."""

    return _HEADER.pack(
        MAGIC,
        VERSION,
        header.salt,
        header.nonce,
        header.kdf.time_cost,
        header.kdf.memory_cost,
        header.kdf.parallelism,
    )


def encode_protected(header: ProtectedHeader, sealed: SealedPayload) -> bytes:
    """Antepone la cabecera protegida a la carga sellada."""

    return pack_header(header) + sealed.data


def decode_protected(data: bytes) -> Tuple[ProtectedHeader, SealedPayload, bytes]:
    """Separa cabecera y carga de un contenedor protegido.

    Args:
        data (bytes): Contenido completo del archivo.

    Returns:
        Tuple[ProtectedHeader, SealedPayload, bytes]: Cabecera interpretada,
        carga sellada y bytes crudos de la cabecera para usarlos como AAD.

    Raises:
        MalformedContainer: Si el tamaño, el número mágico, la versión o los
        parámetros no son válidos.

    """

    if len(data) < HEADER_SIZE + TAG_SIZE:
        raise MalformedContainer(
            f"Archivo truncado: {len(data)} bytes, mínimo {HEADER_SIZE + TAG_SIZE}."
        )
    raw_header = bytes(data[:HEADER_SIZE])
    magic, version, salt, nonce, t_cost, m_cost, par = _HEADER.unpack(raw_header)
    if magic != MAGIC:
        raise MalformedContainer("El archivo no es un contenedor protegido.")
    if version != VERSION:
        raise MalformedContainer(f"Versión de contenedor no soportada: {version}.")
    try:
        kdf = KdfParams(time_cost=t_cost, memory_cost=m_cost, parallelism=par)
    except ValueError as exc:
        raise MalformedContainer("Parámetros de derivación inválidos.") from exc

    header = ProtectedHeader(salt=salt, nonce=nonce, kdf=kdf)
    return header, SealedPayload(data=bytes(data[HEADER_SIZE:])), raw_header
