# --------------------------------------------------------------
# File: validators.py
# Description: Validación de longitud de clave y nonce antes de cifrar.
# --------------------------------------------------------------
"""Convierte bytes proporcionados por el usuario en `KeyMaterial` y `Nonce`."""

from __future__ import annotations

import json
from typing import List

from encryptor.errors import InvalidKeyLength, InvalidNonceFormat, InvalidNonceLength
from encryptor.models import KEY_SIZES, NONCE_SIZE, KeyMaterial, Nonce

__all__ = ["validate_key", "validate_nonce", "parse_nonce", "format_nonce"]


def validate_key(data: bytes) -> KeyMaterial:
    """Valida que la contraseña tenga una longitud de clave AES soportada.

    Los bytes se usan tal cual como clave: no se aplica hash ni derivación.

    Args:
        data (bytes): Bytes de la contraseña.

    Returns:
        KeyMaterial: Clave lista para el motor AEAD.

    Raises:
        InvalidKeyLength: Si la longitud no es 16, 24 ni 32 bytes.
        TypeError: Si `data` no es un objeto de bytes.

    """

    raw = bytes(memoryview(data))
    if len(raw) not in KEY_SIZES:
        raise InvalidKeyLength(len(raw), KEY_SIZES)
    return KeyMaterial(value=raw)


def validate_nonce(data: bytes) -> Nonce:
    """Valida que el nonce mida exactamente 12 bytes.

    Args:
        data (bytes): Nonce proporcionado por el usuario.

    Returns:
        Nonce: Nonce validado.

    Raises:
        InvalidNonceLength: Si la longitud es distinta de 12.
        TypeError: Si `data` no es un objeto de bytes.

    """

    raw = bytes(memoryview(data))
    if len(raw) != NONCE_SIZE:
        raise InvalidNonceLength(len(raw), NONCE_SIZE)
    return Nonce(value=raw)


def parse_nonce(text: str) -> bytes:
    """Interpreta un nonce escrito como array JSON de enteros.

    Ejemplo: ``"[246,231,118,136,232,16,173,214,11,241,220,114]"``. La
    longitud no se comprueba aquí; de eso se encarga `validate_nonce`.

    Args:
        text (str): Representación textual recibida desde la línea de comandos.

    Returns:
        bytes: Bytes del nonce.

    Raises:
        InvalidNonceFormat: Si el texto no es un array de valores 0..255.

    """

    try:
        values = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidNonceFormat(f"Nonce ilegible: {exc.msg}.") from exc

    if not isinstance(values, list):
        raise InvalidNonceFormat("El nonce debe ser un array JSON de enteros.")
    for value in values:
        # bool es subclase de int en Python
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
            raise InvalidNonceFormat(f"Valor de nonce fuera de rango: {value!r}.")
    return bytes(values)


def format_nonce(data: bytes) -> str:
    """Serializa un nonce como array JSON compacto, inverso de `parse_nonce`."""

    values: List[int] = list(bytes(memoryview(data)))
    return json.dumps(values, separators=(",", ":"))
