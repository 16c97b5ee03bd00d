# --------------------------------------------------------------
# File: aead.py
# Description: Primitivas AES-GCM para sellar y abrir números de teléfono.
# --------------------------------------------------------------
"""Cifrado autenticado AES-256-GCM con nonce aleatorio de 128 bits por mensaje."""

import os
from typing import Optional, Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from phonevault.errors import CodecError, ErrorKind
from phonevault.key_codec import KEY_SIZE
from phonevault.models import NONCE_SIZE, TAG_SIZE, SealedMessage


def _check_key(key: bytes) -> None:
    if len(key) != KEY_SIZE:
        raise CodecError(ErrorKind.INVALID_KEY_LENGTH, "se esperaban 32 bytes")


def aes_gcm_encrypt_with_key(
    key: bytes, plaintext: bytes, nonce: Optional[bytes] = None
) -> Tuple[bytes, bytes, bytes]:
    """Cifra datos con AES-GCM sin datos autenticados adicionales.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        plaintext (bytes): Datos a cifrar.
        nonce (Optional[bytes]): Nonce de 16 bytes; si se omite se genera con
            `os.urandom`. Solo debe fijarse en pruebas con vectores conocidos.

    Returns:
        Tuple[bytes, bytes, bytes]: Ciphertext sin etiqueta, nonce y tag.

    """

    _check_key(key)
    if nonce is None:
        nonce = os.urandom(NONCE_SIZE)
    aes = AESGCM(key)
    # AESGCM devuelve ciphertext || tag.
    ct_full = aes.encrypt(nonce, plaintext, None)
    return ct_full[:-TAG_SIZE], nonce, ct_full[-TAG_SIZE:]


def aes_gcm_decrypt_with_key(key: bytes, nonce: bytes, ciphertext: bytes, tag: bytes) -> bytes:
    """Descifra y verifica datos AES-GCM.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        nonce (bytes): Vector de inicialización usado al cifrar.
        ciphertext (bytes): Datos cifrados sin etiqueta.
        tag (bytes): Etiqueta de autenticación de 128 bits.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        CodecError: `AuthenticationFailed` si la etiqueta no verifica.

    """

    _check_key(key)
    aes = AESGCM(key)
    try:
        return aes.decrypt(nonce, ciphertext + tag, None)
    except InvalidTag as exc:
        raise CodecError(ErrorKind.AUTHENTICATION_FAILED) from exc


def seal(plaintext: str, key: bytes) -> str:
    """Cifra un texto y devuelve `base64(nonce || ciphertext || tag)`.

    Args:
        plaintext (str): Texto no vacío, típicamente un número de teléfono.
        key (bytes): Clave simétrica de 256 bits.

    Returns:
        str: Mensaje sellado listo para almacenar o transmitir.

    Raises:
        CodecError: `EmptyInput`, `InvalidUtf8` o `InvalidKeyLength`.

    """

    if not plaintext:
        raise CodecError(ErrorKind.EMPTY_INPUT, "no hay texto que cifrar")
    try:
        data = plaintext.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise CodecError(ErrorKind.INVALID_UTF8, "el claro no es UTF-8") from exc
    ciphertext, nonce, tag = aes_gcm_encrypt_with_key(key, data)
    return SealedMessage(nonce=nonce, ciphertext=ciphertext, tag=tag).to_text()


def open_sealed(sealed_text: str, key: bytes) -> str:
    """Abre un mensaje sellado y devuelve el texto original.

    Raises:
        CodecError: `MalformedCiphertext`, `InvalidKeyLength`,
            `AuthenticationFailed` o `InvalidUtf8`. Nunca devuelve claro parcial.

    """

    message = SealedMessage.from_text(sealed_text)
    data = aes_gcm_decrypt_with_key(key, message.nonce, message.ciphertext, message.tag)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise CodecError(ErrorKind.INVALID_UTF8, "el claro no es UTF-8") from exc
