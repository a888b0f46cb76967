# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan claves, nonces y cargas selladas."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

NONCE_SIZE = 12
TAG_SIZE = 16
SALT_SIZE = 16

# Límites al leer cabeceras ajenas: 1 GiB de memoria, 64 iteraciones.
MAX_TIME_COST = 64
MAX_MEMORY_COST = 1024 * 1024


class KeySize(IntEnum):
    """Tamaños de clave AES-GCM admitidos, en bytes."""

    AES_128 = 16
    AES_192 = 24
    AES_256 = 32


KEY_SIZES = tuple(size.value for size in KeySize)


class KeyMaterial(BaseModel):
    """Bytes de la contraseña usados directamente como clave AES.

    Attributes:
        value (bytes): Clave de 16, 24 o 32 bytes, sin relleno ni recorte.

    """

    model_config = ConfigDict(frozen=True)

    value: bytes = Field(repr=False)

    @field_validator("value")
    @classmethod
    def check_length(cls, value: bytes) -> bytes:
        if len(value) not in KEY_SIZES:
            raise ValueError(f"longitud de clave no soportada: {len(value)}")
        return value

    @property
    def size(self) -> KeySize:
        """Variante AES que corresponde a la longitud de la clave."""

        return KeySize(len(self.value))


class Nonce(BaseModel):
    """Nonce de 96 bits proporcionado por quien invoca la operación.

    Attributes:
        value (bytes): Exactamente 12 bytes.

    """

    model_config = ConfigDict(frozen=True)

    value: bytes

    @field_validator("value")
    @classmethod
    def check_length(cls, value: bytes) -> bytes:
        if len(value) != NONCE_SIZE:
            raise ValueError(f"longitud de nonce no soportada: {len(value)}")
        return value


class SealedPayload(BaseModel):
    """Resultado de `seal`: ciphertext concatenado con la etiqueta AEAD.

    Attributes:
        data (bytes): `ciphertext ‖ tag`, con la etiqueta de 16 bytes al final.

    """

    model_config = ConfigDict(frozen=True)

    data: bytes = Field(repr=False)

    @field_validator("data")
    @classmethod
    def check_tag(cls, value: bytes) -> bytes:
        if len(value) < TAG_SIZE:
            raise ValueError("la carga es más corta que la etiqueta")
        return value

    @property
    def ciphertext(self) -> bytes:
        return self.data[:-TAG_SIZE]

    @property
    def tag(self) -> bytes:
        return self.data[-TAG_SIZE:]

    def __len__(self) -> int:
        return len(self.data)


class KdfParams(BaseModel):
    """Parámetros Argon2id del formato protegido.

    Attributes:
        time_cost (int): Iteraciones de Argon2id.
        memory_cost (int): Memoria en KiB.
        parallelism (int): Hilos; se serializa en un byte.

    """

    model_config = ConfigDict(frozen=True)

    time_cost: int = Field(default=3, ge=1, le=MAX_TIME_COST)
    memory_cost: int = Field(default=64 * 1024, ge=8, le=MAX_MEMORY_COST)
    parallelism: int = Field(default=1, ge=1, le=0xFF)

    @model_validator(mode="after")
    def check_memory(self) -> "KdfParams":
        # Argon2 exige al menos 8 KiB por hilo
        if self.memory_cost < 8 * self.parallelism:
            raise ValueError("memory_cost debe ser al menos 8 * parallelism")
        return self


class ProtectedHeader(BaseModel):
    """Cabecera del contenedor protegido: salt, nonce y parámetros de KDF."""

    model_config = ConfigDict(frozen=True)

    salt: bytes
    nonce: bytes
    kdf: KdfParams = Field(default_factory=KdfParams)

    @field_validator("salt")
    @classmethod
    def check_salt(cls, value: bytes) -> bytes:
        if len(value) != SALT_SIZE:
            raise ValueError(f"el salt debe medir {SALT_SIZE} bytes")
        return value

    @field_validator("nonce")
    @classmethod
    def check_nonce(cls, value: bytes) -> bytes:
        if len(value) != NONCE_SIZE:
            raise ValueError(f"el nonce debe medir {NONCE_SIZE} bytes")
        return value
