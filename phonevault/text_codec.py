# --------------------------------------------------------------
# File: text_codec.py
# Description: Codificación Base64 estándar para transportar bytes como texto.
# --------------------------------------------------------------
"""Conversión estricta entre bytes y Base64 con relleno."""

import base64
import binascii

from phonevault.errors import CodecError, ErrorKind


def b64encode(data: bytes) -> str:
    """Codifica bytes en Base64 estándar con relleno y sin saltos de línea."""

    return base64.b64encode(data).decode("ascii")


def b64decode(text: str) -> bytes:
    """Decodifica Base64 estándar rechazando alfabeto, relleno o longitud inválidos.

    Args:
        text (str): Cadena Base64 con relleno.

    Returns:
        bytes: Datos originales.

    Raises:
        CodecError: `InvalidEncoding` si la cadena no es Base64 válido.

    """

    try:
        raw = text.encode("ascii")
    except UnicodeEncodeError as exc:
        raise CodecError(ErrorKind.INVALID_ENCODING, "caracteres fuera del alfabeto") from exc
    try:
        data = base64.b64decode(raw, validate=True)
    except binascii.Error as exc:
        raise CodecError(ErrorKind.INVALID_ENCODING, str(exc)) from exc
    # b64decode ignora los bits sobrantes del último bloque ("QR==" -> b"A").
    if base64.b64encode(data) != raw:
        raise CodecError(ErrorKind.INVALID_ENCODING, "Base64 no canónico")
    return data
