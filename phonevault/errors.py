# --------------------------------------------------------------
# File: errors.py
# Description: Tipos de error cerrados que devuelve el códec de teléfonos.
# --------------------------------------------------------------
"""Enumeración de fallos del códec y excepción que los transporta."""

from __future__ import annotations

from enum import Enum

__all__ = ["CodecError", "ErrorKind"]


class ErrorKind(str, Enum):
    """Motivos de fallo posibles en las operaciones del códec."""

    INVALID_KEY_LENGTH = "InvalidKeyLength"
    INVALID_KEY_ENCODING = "InvalidKeyEncoding"
    EMPTY_INPUT = "EmptyInput"
    INVALID_ENCODING = "InvalidEncoding"
    MALFORMED_CIPHERTEXT = "MalformedCiphertext"
    AUTHENTICATION_FAILED = "AuthenticationFailed"
    INVALID_UTF8 = "InvalidUtf8"


class CodecError(ValueError):
    """Error tipado del códec; nunca incluye texto en claro ni material de clave.

    Attributes:
        kind (ErrorKind): Categoría del fallo.

    """

    def __init__(self, kind: ErrorKind, detail: str = "") -> None:
        self.kind = kind
        super().__init__(f"{kind.value}: {detail}" if detail else kind.value)
