# --------------------------------------------------------------
# File: crypto_aead.py
# Description: Primitivas AES-GCM para sellar y abrir cargas autenticadas.
# --------------------------------------------------------------
"""Motor AEAD: cifrado AES-GCM con etiqueta de 128 bits anexada."""

import os
from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from encryptor.errors import AuthenticationFailure
from encryptor.models import NONCE_SIZE, KeyMaterial, Nonce, SealedPayload

__all__ = ["seal", "open_sealed", "new_nonce"]


def seal(
    key: KeyMaterial, nonce: Nonce, plaintext: bytes, aad: Optional[bytes] = None
) -> SealedPayload:
    """Cifra y autentica `plaintext` con AES-GCM.

    La operación es determinista para entradas idénticas. El resultado mide
    `len(plaintext) + 16` bytes.

    Args:
        key (KeyMaterial): Clave de 128, 192 o 256 bits.
        nonce (Nonce): Nonce de 96 bits; nunca debe repetirse con la misma clave.
        plaintext (bytes): Datos en claro.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        SealedPayload: `ciphertext ‖ tag`.

    """

    aes = AESGCM(key.value)
    return SealedPayload(data=aes.encrypt(nonce.value, bytes(plaintext), aad))


def open_sealed(
    key: KeyMaterial, nonce: Nonce, sealed: SealedPayload, aad: Optional[bytes] = None
) -> bytes:
    """Verifica la etiqueta y descifra la carga sellada.

    `AESGCM.decrypt` compara la etiqueta en tiempo constante y no devuelve
    ningún byte en claro si la verificación falla.

    Args:
        key (KeyMaterial): Clave usada al sellar.
        nonce (Nonce): Nonce usado al sellar.
        sealed (SealedPayload): `ciphertext ‖ tag`.
        aad (Optional[bytes]): Datos autenticados adicionales usados al sellar.

    Returns:
        bytes: Texto en claro original.

    Raises:
        AuthenticationFailure: Si la etiqueta no verifica.

    """

    aes = AESGCM(key.value)
    try:
        return aes.decrypt(nonce.value, sealed.data, aad)
    except InvalidTag:
        raise AuthenticationFailure() from None


def new_nonce() -> bytes:
    """Genera un nonce aleatorio de 96 bits para quien lo solicite."""

    return os.urandom(NONCE_SIZE)
