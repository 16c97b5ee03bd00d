# --------------------------------------------------------------
# File: key_codec.py
# Description: Conversión entre la clave AES-256 en hex y su forma binaria.
# --------------------------------------------------------------
"""Representación externa (hex) e interna (bytes) de la clave simétrica."""

import os
import string

from phonevault.errors import CodecError, ErrorKind

KEY_SIZE = 32
KEY_HEX_LENGTH = KEY_SIZE * 2

_HEX_DIGITS = frozenset(string.hexdigits)


def decode_key(hex_key: str) -> bytes:
    """Convierte una clave hexadecimal de 64 caracteres en 32 bytes.

    Args:
        hex_key (str): Clave en hexadecimal, mayúsculas o minúsculas.

    Returns:
        bytes: Clave simétrica de 256 bits.

    Raises:
        CodecError: `InvalidKeyLength` si no tiene 64 caracteres,
            `InvalidKeyEncoding` si contiene caracteres no hexadecimales.

    """

    if not isinstance(hex_key, str) or len(hex_key) != KEY_HEX_LENGTH:
        raise CodecError(ErrorKind.INVALID_KEY_LENGTH, "se esperaban 64 caracteres hex")
    # bytes.fromhex admite espacios; aquí solo se aceptan dígitos hex.
    if not all(char in _HEX_DIGITS for char in hex_key):
        raise CodecError(ErrorKind.INVALID_KEY_ENCODING, "caracteres no hexadecimales")
    return bytes.fromhex(hex_key)


def encode_key(key: bytes) -> str:
    """Devuelve la clave como 64 caracteres hexadecimales en minúsculas."""

    if len(key) != KEY_SIZE:
        raise CodecError(ErrorKind.INVALID_KEY_LENGTH, "se esperaban 32 bytes")
    return key.hex()


def generate_key_hex() -> str:
    """Genera una clave nueva de 256 bits a partir de `os.urandom`."""

    return encode_key(os.urandom(KEY_SIZE))
