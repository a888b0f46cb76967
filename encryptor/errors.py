# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del motor de cifrado de archivos.
# --------------------------------------------------------------
"""Errores tipados que el núcleo propaga hacia la CLI y la interfaz web."""

__all__ = [
    "EncryptorError",
    "InvalidKeyLength",
    "InvalidNonceLength",
    "InvalidNonceFormat",
    "MalformedContainer",
    "AuthenticationFailure",
    "ConfigurationError",
]


class EncryptorError(Exception):
    """Base común de todos los errores del paquete."""


class InvalidKeyLength(EncryptorError, ValueError):
    """La contraseña no tiene una longitud de clave AES soportada."""

    def __init__(self, length: int, expected=(16, 24, 32), message=None):
        self.length = length
        self.expected = tuple(expected)
        if message is None:
            sizes = ", ".join(str(size) for size in self.expected)
            message = f"La clave debe medir {sizes} bytes; se recibieron {length} bytes."
        super().__init__(message)


class InvalidNonceLength(EncryptorError, ValueError):
    """El nonce no mide exactamente 12 bytes."""

    def __init__(self, length: int, expected: int = 12):
        self.length = length
        self.expected = expected
        super().__init__(
            f"El nonce debe medir {expected} bytes; se recibieron {length} bytes."
        )


class InvalidNonceFormat(EncryptorError, ValueError):
    """El texto del nonce no es un array JSON de enteros entre 0 y 255."""


class MalformedContainer(EncryptorError, ValueError):
    """El archivo cifrado está truncado o no respeta el formato esperado."""


class AuthenticationFailure(EncryptorError):
    """La etiqueta AEAD no verifica.

    No distingue entre contraseña incorrecta, nonce incorrecto o archivo
    corrupto para no filtrar qué entrada falló.
    """

    def __init__(self, message: str = "Contraseña incorrecta, nonce incorrecto o archivo corrupto."):
        super().__init__(message)


class ConfigurationError(EncryptorError, ValueError):
    """Una variable `ENCRYPTOR_*` tiene un valor inválido."""
