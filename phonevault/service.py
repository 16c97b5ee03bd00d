# --------------------------------------------------------------
# File: service.py
# Description: Operaciones de cifrado y descifrado de teléfonos con resultado tipado.
# --------------------------------------------------------------
"""Funciones de negocio que sellan y abren números de teléfono."""

from __future__ import annotations

import logging

from phonevault.aead import open_sealed, seal
from phonevault.errors import CodecError, ErrorKind
from phonevault.key_codec import decode_key
from phonevault.models import CodecResult

logger = logging.getLogger(__name__)

MESSAGES = {
    ErrorKind.INVALID_KEY_LENGTH: "La clave de cifrado debe tener 64 caracteres hexadecimales.",
    ErrorKind.INVALID_KEY_ENCODING: "La clave de cifrado contiene caracteres no hexadecimales.",
    ErrorKind.EMPTY_INPUT: "Introduce un valor para procesar.",
    ErrorKind.INVALID_ENCODING: "El texto cifrado no es Base64 válido.",
    ErrorKind.MALFORMED_CIPHERTEXT: "El texto cifrado está incompleto o mal formado.",
    # Un único mensaje para clave errónea, corrupción o manipulación.
    ErrorKind.AUTHENTICATION_FAILED: "No se ha podido descifrar el teléfono.",
    ErrorKind.INVALID_UTF8: "El contenido descifrado no es texto UTF-8.",
}


def _failure(operation: str, exc: CodecError) -> CodecResult:
    logger.warning("%s fallido: %s", operation, exc.kind.value)
    return CodecResult(
        ok=False,
        error=exc.kind,
        message=MESSAGES[exc.kind],
        debug=f"[{operation}] error={exc.kind.value}",
    )


def encrypt_phone_number(phone_number: str, key_hex: str) -> CodecResult:
    """Cifra un número de teléfono con la clave hex indicada.

    Args:
        phone_number (str): Teléfono en claro; no puede estar en blanco.
        key_hex (str): Clave AES-256 en 64 caracteres hexadecimales.

    Returns:
        CodecResult: Texto sellado en `value` o el `ErrorKind` del fallo.

    """
    try:
        if not phone_number or not phone_number.strip():
            raise CodecError(ErrorKind.EMPTY_INPUT)
        key = decode_key(key_hex)
        sealed = seal(phone_number, key)
    except CodecError as exc:
        return _failure("ENCRYPT", exc)

    debug = (
        f"[ENCRYPT] AES-GCM-256 nonce=128-bit tag=128-bit "
        f"claro={len(phone_number.encode('utf-8'))}B sellado={len(sealed)} chars"
    )
    return CodecResult(
        ok=True, value=sealed, message="Teléfono cifrado.", debug=debug
    )


def decrypt_phone_number(sealed_text: str, key_hex: str) -> CodecResult:
    """Descifra un teléfono sellado con la clave hex indicada.

    Args:
        sealed_text (str): Mensaje sellado en Base64.
        key_hex (str): Clave AES-256 en 64 caracteres hexadecimales.

    Returns:
        CodecResult: Teléfono en `value` o el `ErrorKind` del fallo.

    """
    try:
        if not sealed_text or not sealed_text.strip():
            raise CodecError(ErrorKind.EMPTY_INPUT)
        key = decode_key(key_hex)
        phone_number = open_sealed(sealed_text, key)
    except CodecError as exc:
        return _failure("DECRYPT", exc)

    return CodecResult(
        ok=True,
        value=phone_number,
        message="Teléfono descifrado.",
        debug="[DECRYPT] AES-GCM-256 tag verificado",
    )
