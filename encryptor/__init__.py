# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de las operaciones de cifrado de archivos.
# --------------------------------------------------------------
"""Cifrado autenticado AES-GCM de archivos con contraseña y nonce explícitos."""

from encryptor.errors import (
    AuthenticationFailure,
    ConfigurationError,
    EncryptorError,
    InvalidKeyLength,
    InvalidNonceFormat,
    InvalidNonceLength,
    MalformedContainer,
)
from encryptor.files import decrypt_file, encrypt_file

__version__ = "0.1.0"

__all__ = [
    "AuthenticationFailure",
    "ConfigurationError",
    "EncryptorError",
    "InvalidKeyLength",
    "InvalidNonceFormat",
    "InvalidNonceLength",
    "MalformedContainer",
    "decrypt_file",
    "encrypt_file",
]
