# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación opcional de claves simétricas mediante Argon2id.
# --------------------------------------------------------------
"""Derivación de claves para el formato protegido.

El formato por defecto usa la contraseña directamente como clave; esta
derivación solo interviene cuando se elige el contenedor protegido.
"""

from argon2.low_level import Type, hash_secret_raw

from encryptor.models import KdfParams, KeySize


def derive_key(password: bytes, salt: bytes, params: KdfParams) -> bytes:
    """Deriva una clave AES-256 a partir de una contraseña con Argon2id.

    Args:
        password (bytes): Contraseña del usuario, de cualquier longitud.
        salt (bytes): Salt aleatoria almacenada en la cabecera.
        params (KdfParams): Coste temporal, memoria y paralelismo.

    Returns:
        bytes: Clave de 32 bytes.

    """

    return hash_secret_raw(
        bytes(password),
        salt,
        time_cost=params.time_cost,
        memory_cost=params.memory_cost,
        parallelism=params.parallelism,
        hash_len=KeySize.AES_256.value,
        type=Type.ID,
    )
