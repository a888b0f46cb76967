# --------------------------------------------------------------
# File: test_crypto_aead.py
# Description: Pruebas del motor AEAD: ida y vuelta, manipulación y sensibilidad.
# --------------------------------------------------------------

import os

import pytest

from encryptor.crypto_aead import new_nonce, open_sealed, seal
from encryptor.errors import AuthenticationFailure
from encryptor.models import SealedPayload
from encryptor.validators import validate_key, validate_nonce


@pytest.mark.parametrize("key_len", [16, 24, 32])
@pytest.mark.parametrize("size", [0, 1, 15, 16, 17, 1000])
def test_seal_open_roundtrip(key_len, size):
    """Comprueba que open(seal(p)) devuelva p y que el tamaño crezca 16 bytes.

    Returns:
        None: Las aserciones evalúan la igualdad y la longitud.
    """
    key = validate_key(os.urandom(key_len))
    nonce = validate_nonce(os.urandom(12))
    plaintext = os.urandom(size)
    sealed = seal(key, nonce, plaintext)
    assert len(sealed) == size + 16
    assert open_sealed(key, nonce, sealed) == plaintext


def test_seal_is_deterministic(key, nonce):
    """Verifica que entradas idénticas produzcan la misma carga sellada.

    Returns:
        None: La aserción compara ambas cargas.
    """
    k, n = validate_key(key), validate_nonce(nonce)
    assert seal(k, n, b"data").data == seal(k, n, b"data").data


def test_empty_plaintext_is_tag_only(key, nonce):
    """Garantiza que un texto vacío produzca solo la etiqueta de 16 bytes.

    Returns:
        None: Las aserciones revisan longitud y descifrado.
    """
    k, n = validate_key(key), validate_nonce(nonce)
    sealed = seal(k, n, b"")
    assert len(sealed.data) == 16
    assert sealed.tag == sealed.data
    assert open_sealed(k, n, sealed) == b""


def test_every_bit_flip_is_detected(key, nonce):
    """Comprueba que alterar cualquier bit de la carga provoque AuthenticationFailure.

    Returns:
        None: Se espera una excepción para cada bit modificado.
    """
    k, n = validate_key(key), validate_nonce(nonce)
    data = seal(k, n, b"hello").data
    for index in range(len(data)):
        for bit in range(8):
            tampered = bytearray(data)
            tampered[index] ^= 1 << bit
            with pytest.raises(AuthenticationFailure):
                open_sealed(k, n, SealedPayload(data=bytes(tampered)))


@pytest.mark.parametrize("other_len", [16, 24, 32])
def test_wrong_key_fails(key, nonce, other_len):
    """Verifica que una clave distinta no pueda abrir la carga.

    Returns:
        None: Se espera AuthenticationFailure.
    """
    n = validate_nonce(nonce)
    sealed = seal(validate_key(key), n, b"hello")
    other = bytearray(key[:other_len])
    other[-1] ^= 0x01
    with pytest.raises(AuthenticationFailure):
        open_sealed(validate_key(bytes(other)), n, sealed)


def test_wrong_nonce_fails(key, nonce):
    """Comprueba que modificar el nonce haga fallar la autenticación.

    Returns:
        None: Se espera AuthenticationFailure.
    """
    k = validate_key(key)
    sealed = seal(k, validate_nonce(nonce), b"hello")
    bad_nonce = bytes([nonce[0] ^ 1]) + nonce[1:]
    with pytest.raises(AuthenticationFailure):
        open_sealed(k, validate_nonce(bad_nonce), sealed)


def test_aad_is_authenticated(key, nonce):
    """Asegura que los datos adicionales formen parte de la autenticación.

    Returns:
        None: El descifrado con AAD distinta debe fallar.
    """
    k, n = validate_key(key), validate_nonce(nonce)
    sealed = seal(k, n, b"hello", aad=b"header")
    assert open_sealed(k, n, sealed, aad=b"header") == b"hello"
    with pytest.raises(AuthenticationFailure):
        open_sealed(k, n, sealed, aad=b"other")
    with pytest.raises(AuthenticationFailure):
        open_sealed(k, n, sealed)


def test_failure_hides_primitive_exception(key, nonce):
    """El error de autenticación no encadena la excepción del primitivo.

    Returns:
        None: Las aserciones revisan la causa y el contexto.
    """
    k = validate_key(key)
    sealed = seal(k, validate_nonce(nonce), b"hello")
    with pytest.raises(AuthenticationFailure) as excinfo:
        open_sealed(k, validate_nonce(b"\x00" * 12), sealed)
    assert excinfo.value.__cause__ is None
    assert excinfo.value.__suppress_context__


def test_new_nonce_is_random_and_valid():
    """Evalúa que los nonces generados midan 12 bytes y no se repitan.

    Returns:
        None: Las aserciones verifican la unicidad dentro del muestreo.
    """
    nonces = set()
    for _ in range(200):
        value = new_nonce()
        assert len(value) == 12
        assert value not in nonces
        nonces.add(value)
