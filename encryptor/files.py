# --------------------------------------------------------------
# File: files.py
# Description: Cifrado y descifrado de archivos completos en memoria.
# --------------------------------------------------------------
"""Orquestación: validar clave y nonce, sellar/abrir y codificar el contenedor."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from encryptor import config
from encryptor.container import decode, decode_protected, encode, encode_protected, pack_header
from encryptor.crypto_aead import new_nonce, open_sealed, seal
from encryptor.crypto_kdf import derive_key
from encryptor.errors import InvalidKeyLength, InvalidNonceLength
from encryptor.models import SALT_SIZE, KdfParams, ProtectedHeader
from encryptor.storage import PathLike, read_bytes, write_bytes_atomic
from encryptor.validators import validate_key, validate_nonce

__all__ = [
    "encrypt_file",
    "decrypt_file",
    "encrypt_file_protected",
    "decrypt_file_protected",
    "encrypted_name",
    "decrypted_name",
    "encrypt_path",
    "decrypt_path",
]

logger = logging.getLogger("encryptor")


def encrypt_file(password: bytes, nonce: bytes, plaintext: bytes) -> bytes:
    """Cifra el contenido de un archivo con la contraseña como clave AES-GCM.

    Args:
        password (bytes): Contraseña de 16, 24 o 32 bytes.
        nonce (bytes): Nonce de 12 bytes; no debe reutilizarse con la misma clave.
        plaintext (bytes): Contenido original.

    Returns:
        bytes: `ciphertext ‖ tag`, listo para persistir.

    Raises:
        InvalidKeyLength: Si la contraseña no mide 16, 24 ni 32 bytes.
        InvalidNonceLength: Si el nonce no mide 12 bytes.

    """

    key = validate_key(password)
    checked_nonce = validate_nonce(nonce)
    return encode(seal(key, checked_nonce, plaintext))


def decrypt_file(password: bytes, nonce: bytes, ciphertext: bytes) -> bytes:
    """Descifra un archivo producido por `encrypt_file`.

    Args:
        password (bytes): Contraseña usada al cifrar.
        nonce (bytes): Nonce usado al cifrar.
        ciphertext (bytes): Contenido del archivo cifrado.

    Returns:
        bytes: Contenido original.

    Raises:
        InvalidKeyLength: Si la contraseña no tiene una longitud soportada.
        InvalidNonceLength: Si el nonce no mide 12 bytes.
        MalformedContainer: Si el archivo es más corto que la etiqueta.
        AuthenticationFailure: Si la contraseña, el nonce o el archivo no cuadran.

    """

    key = validate_key(password)
    checked_nonce = validate_nonce(nonce)
    return open_sealed(key, checked_nonce, decode(ciphertext))


def encrypt_file_protected(
    password: bytes, plaintext: bytes, params: Optional[KdfParams] = None
) -> bytes:
    """Cifra con el formato protegido: Argon2id, salt y nonce aleatorios en cabecera.

    Este formato no es compatible con `decrypt_file`.

    Args:
        password (bytes): Contraseña no vacía de cualquier longitud.
        plaintext (bytes): Contenido original.
        params (Optional[KdfParams]): Parámetros Argon2id; por defecto los de `config`.

    Returns:
        bytes: Cabecera seguida de `ciphertext ‖ tag`.

    """

    if not password:
        raise InvalidKeyLength(0, message="La contraseña no puede estar vacía.")
    header = ProtectedHeader(
        salt=os.urandom(SALT_SIZE),
        nonce=new_nonce(),
        kdf=params or config.kdf_params(),
    )
    key = validate_key(derive_key(password, header.salt, header.kdf))
    sealed = seal(key, validate_nonce(header.nonce), plaintext, aad=pack_header(header))
    return encode_protected(header, sealed)


def decrypt_file_protected(password: bytes, data: bytes) -> bytes:
    """Descifra un contenedor producido por `encrypt_file_protected`.

    Raises:
        InvalidKeyLength: Si la contraseña está vacía.
        MalformedContainer: Si la cabecera no es válida.
        AuthenticationFailure: Si la contraseña no cuadra o hubo manipulación.

    """

    if not password:
        raise InvalidKeyLength(0, message="La contraseña no puede estar vacía.")
    header, sealed, raw_header = decode_protected(data)
    key = validate_key(derive_key(password, header.salt, header.kdf))
    return open_sealed(key, validate_nonce(header.nonce), sealed, aad=raw_header)


def encrypted_name(path: PathLike) -> Path:
    """`nombre.ext` -> `nombre.ext.enc` (sufijo configurable)."""

    source = Path(path)
    return source.with_name(source.name + config.encrypted_suffix())


def decrypted_name(path: PathLike) -> Path:
    """Nombre de salida al descifrar.

    Quita el sufijo de cifrado si está presente; si no, quita la última
    extensión, y si no hay extensión añade `.dec` para no sobrescribir la
    entrada.
    """

    source = Path(path)
    suffix = config.encrypted_suffix()
    if source.name.endswith(suffix) and len(source.name) > len(suffix):
        return source.with_name(source.name[: -len(suffix)])
    if source.suffix:
        return source.with_suffix("")
    return source.with_name(source.name + ".dec")


def encrypt_path(
    password: bytes,
    path: PathLike,
    *,
    nonce: Optional[bytes] = None,
    output: Optional[PathLike] = None,
    protected: bool = False,
) -> Path:
    """Cifra un archivo en disco y escribe el resultado junto a él.

    Args:
        password (bytes): Contraseña.
        path (PathLike): Archivo original.
        nonce (Optional[bytes]): Nonce de 12 bytes; obligatorio salvo en modo protegido.
        output (Optional[PathLike]): Ruta de salida; por defecto `encrypted_name(path)`.
        protected (bool): Usa el contenedor protegido en lugar del formato crudo.

    Returns:
        Path: Ruta del archivo cifrado.

    """

    target = Path(output) if output else encrypted_name(path)
    plaintext = read_bytes(path)
    if protected:
        data = encrypt_file_protected(password, plaintext)
    else:
        if nonce is None:
            raise InvalidNonceLength(0)
        data = encrypt_file(password, nonce, plaintext)
    write_bytes_atomic(target, data)
    logger.info("Cifrado %s -> %s (%d bytes)", path, target, len(data))
    return target


def decrypt_path(
    password: bytes,
    path: PathLike,
    *,
    nonce: Optional[bytes] = None,
    output: Optional[PathLike] = None,
    protected: bool = False,
) -> Path:
    """Descifra un archivo en disco.

    La salida solo se escribe después de verificar la etiqueta; un fallo no
    deja ningún archivo parcial.

    Returns:
        Path: Ruta del archivo descifrado.

    """

    target = Path(output) if output else decrypted_name(path)
    data = read_bytes(path)
    if protected:
        plaintext = decrypt_file_protected(password, data)
    else:
        if nonce is None:
            raise InvalidNonceLength(0)
        plaintext = decrypt_file(password, nonce, data)
    if target.exists():
        logger.warning("Se sobrescribe el archivo existente %s", target)
    write_bytes_atomic(target, plaintext)
    logger.info("Descifrado %s -> %s (%d bytes)", path, target, len(plaintext))
    return target
