# --------------------------------------------------------------
# File: cli.py
# Description: Interfaz de línea de comandos para cifrar y descifrar archivos.
# --------------------------------------------------------------
"""Punto de entrada `encryptor <encrypt|decrypt|nonce> ...`."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from encryptor.crypto_aead import new_nonce
from encryptor.errors import (
    AuthenticationFailure,
    ConfigurationError,
    InvalidKeyLength,
    InvalidNonceFormat,
    InvalidNonceLength,
    MalformedContainer,
)
from encryptor.files import decrypt_path, encrypt_path
from encryptor.logging_config import setup_logger
from encryptor.validators import format_nonce, parse_nonce

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_USAGE = 2
EXIT_MALFORMED = 3
EXIT_AUTH = 4
EXIT_IO = 5


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="encryptor",
        description="Cifrado autenticado AES-GCM de archivos con contraseña y nonce.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("encrypt", "Cifra FILE y escribe FILE.enc"),
        ("decrypt", "Descifra FILE.enc y escribe FILE"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("password", help="Contraseña de 16, 24 o 32 bytes (UTF-8)")
        cmd.add_argument("file", help="Archivo de entrada")
        cmd.add_argument(
            "nonce",
            nargs="?",
            help="Nonce como array JSON de 12 enteros, p. ej. [246,231,...]",
        )
        cmd.add_argument("-o", "--output", help="Ruta de salida")
        cmd.add_argument(
            "--protected",
            action="store_true",
            help="Formato protegido: Argon2id y nonce aleatorio en cabecera (incompatible)",
        )

    sub.add_parser("nonce", help="Imprime un nonce aleatorio de 12 bytes")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Ejecuta la CLI y devuelve el código de salida."""

    parser = build_parser()
    args = parser.parse_args(argv)
    logger = setup_logger()

    if args.command == "nonce":
        print(format_nonce(new_nonce()))
        return EXIT_OK

    if args.protected and args.nonce is not None:
        parser.error("--protected genera su propio nonce; no lo indiques")
    if not args.protected and args.nonce is None:
        parser.error("falta el nonce")

    operation = encrypt_path if args.command == "encrypt" else decrypt_path
    try:
        nonce = None if args.protected else parse_nonce(args.nonce)
        target = operation(
            args.password.encode("utf-8"),
            args.file,
            nonce=nonce,
            output=args.output,
            protected=args.protected,
        )
    except (InvalidKeyLength, InvalidNonceLength, InvalidNonceFormat) as exc:
        logger.error("Entrada inválida: %s", exc)
        return EXIT_INVALID_INPUT
    except ConfigurationError as exc:
        logger.error("Configuración inválida: %s", exc)
        return EXIT_INVALID_INPUT
    except MalformedContainer as exc:
        logger.error("Archivo corrupto o truncado: %s", exc)
        return EXIT_MALFORMED
    except AuthenticationFailure as exc:
        logger.error("Error de descifrado: %s", exc)
        return EXIT_AUTH
    except OSError as exc:
        logger.error("Error de E/S: %s", exc)
        return EXIT_IO

    logger.info("Escrito %s", target)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
