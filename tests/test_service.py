# --------------------------------------------------------------
# File: test_service.py
# Description: Pruebas de integración del cifrado de teléfonos en phonevault.service.
# --------------------------------------------------------------

import logging

from phonevault import service
from phonevault.errors import ErrorKind
from phonevault.key_codec import generate_key_hex


def test_encrypt_and_decrypt_happy_path(zero_key):
    """Valida el flujo exitoso de cifrado seguido de descifrado.

    Returns:
        None: Las aserciones internas verifican el comportamiento esperado.
    """
    enc = service.encrypt_phone_number("+15551234567", zero_key)
    assert enc.ok, enc.message
    assert enc.error is None
    assert enc.debug.startswith("[ENCRYPT]")

    dec = service.decrypt_phone_number(enc.value, zero_key)
    assert dec.ok, dec.message
    assert dec.value == "+15551234567"


def test_decrypt_with_other_key_fails(zero_key):
    """Comprueba que otra clave produzca `AuthenticationFailed` sin valor.

    Returns:
        None: Las aserciones revisan el resultado discriminado.
    """
    enc = service.encrypt_phone_number("+15551234567", zero_key)
    dec = service.decrypt_phone_number(enc.value, "ff" * 32)
    assert not dec.ok
    assert dec.error is ErrorKind.AUTHENTICATION_FAILED
    assert dec.value is None


def test_blank_inputs_are_rejected(zero_key):
    """Garantiza que entradas vacías o en blanco devuelvan `EmptyInput`.

    Returns:
        None: Las aserciones cubren cifrado y descifrado.
    """
    for value in ("", "   "):
        assert service.encrypt_phone_number(value, zero_key).error is ErrorKind.EMPTY_INPUT
        assert service.decrypt_phone_number(value, zero_key).error is ErrorKind.EMPTY_INPUT


def test_invalid_keys_are_reported():
    """Verifica que claves mal formadas devuelvan su tipo de error.

    Returns:
        None: Las aserciones comparan los `ErrorKind`.
    """
    short = service.encrypt_phone_number("+15551234567", "abc")
    assert short.error is ErrorKind.INVALID_KEY_LENGTH
    non_hex = service.encrypt_phone_number("+15551234567", "zz" * 32)
    assert non_hex.error is ErrorKind.INVALID_KEY_ENCODING


def test_unencodable_phone_number_is_reported(zero_key):
    """Garantiza que un teléfono con sustitutos aislados devuelva un resultado tipado.

    Returns:
        None: Las aserciones revisan el `ErrorKind` sin excepción.
    """
    result = service.encrypt_phone_number("+1555\ud800", zero_key)
    assert not result.ok
    assert result.error is ErrorKind.INVALID_UTF8
    assert result.value is None


def test_short_ciphertext_is_malformed():
    """Comprueba que un texto demasiado corto sea `MalformedCiphertext`.

    Returns:
        None: Las aserciones revisan tipo y mensaje.
    """
    result = service.decrypt_phone_number("short", generate_key_hex())
    assert result.error is ErrorKind.MALFORMED_CIPHERTEXT
    assert "mal formado" in result.message


def test_authentication_message_does_not_reveal_cause(zero_key):
    """Asegura el mismo mensaje para clave errónea y texto manipulado.

    Returns:
        None: Las aserciones comparan ambos mensajes.
    """
    sealed = service.encrypt_phone_number("+15551234567", zero_key).value
    wrong_key = service.decrypt_phone_number(sealed, "ff" * 32)
    tampered_text = sealed[:-6] + ("A" if sealed[-6] != "A" else "B") + sealed[-5:]
    tampered = service.decrypt_phone_number(tampered_text, zero_key)
    assert wrong_key.error is tampered.error is ErrorKind.AUTHENTICATION_FAILED
    assert wrong_key.message == tampered.message


def test_failures_are_logged_without_secrets(zero_key, caplog):
    """Comprueba que el registro de fallos no incluya el texto ni la clave.

    Args:
        caplog (pytest.LogCaptureFixture): Captura de registros de pytest.

    Returns:
        None: Las aserciones revisan los mensajes capturados.
    """
    sealed = service.encrypt_phone_number("+15551234567", zero_key).value
    with caplog.at_level(logging.WARNING, logger="phonevault.service"):
        service.decrypt_phone_number(sealed, "ff" * 32)
    assert "AuthenticationFailed" in caplog.text
    assert sealed not in caplog.text
    assert "ff" * 32 not in caplog.text
