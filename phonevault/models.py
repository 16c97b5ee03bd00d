# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos del mensaje sellado y del resultado del códec.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan el formato de intercambio del códec."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from phonevault.errors import CodecError, ErrorKind
from phonevault.text_codec import b64decode, b64encode

NONCE_SIZE = 16
TAG_SIZE = 16


class SealedMessage(BaseModel):
    """Mensaje sellado con AES-GCM: `nonce || ciphertext || tag`.

    Attributes:
        nonce (bytes): Vector de inicialización de 128 bits.
        ciphertext (bytes): Datos cifrados sin etiqueta, misma longitud que el claro.
        tag (bytes): Etiqueta de autenticación de 128 bits.

    """

    model_config = ConfigDict(frozen=True)

    nonce: bytes
    ciphertext: bytes
    tag: bytes

    @field_validator("nonce")
    @classmethod
    def _check_nonce(cls, value: bytes) -> bytes:
        if len(value) != NONCE_SIZE:
            raise ValueError(f"el nonce debe tener {NONCE_SIZE} bytes")
        return value

    @field_validator("tag")
    @classmethod
    def _check_tag(cls, value: bytes) -> bytes:
        if len(value) != TAG_SIZE:
            raise ValueError(f"el tag debe tener {TAG_SIZE} bytes")
        return value

    def to_bytes(self) -> bytes:
        """Serializa el mensaje en el orden del formato de cable."""

        return self.nonce + self.ciphertext + self.tag

    def to_text(self) -> str:
        """Serializa el mensaje como Base64 estándar."""

        return b64encode(self.to_bytes())

    @classmethod
    def from_bytes(cls, blob: bytes) -> "SealedMessage":
        """Separa nonce, ciphertext y tag de un mensaje sellado.

        Args:
            blob (bytes): Mensaje completo tal como viaja por el cable.

        Returns:
            SealedMessage: Mensaje desestructurado.

        Raises:
            CodecError: `MalformedCiphertext` si no caben nonce y tag.

        """

        if len(blob) < NONCE_SIZE + TAG_SIZE:
            raise CodecError(ErrorKind.MALFORMED_CIPHERTEXT, "mensaje demasiado corto")
        return cls(
            nonce=blob[:NONCE_SIZE],
            ciphertext=blob[NONCE_SIZE:-TAG_SIZE],
            tag=blob[-TAG_SIZE:],
        )

    @classmethod
    def from_text(cls, text: str) -> "SealedMessage":
        """Decodifica un mensaje en Base64; cualquier fallo es `MalformedCiphertext`."""

        try:
            blob = b64decode(text)
        except CodecError as exc:
            raise CodecError(ErrorKind.MALFORMED_CIPHERTEXT, "Base64 inválido") from exc
        return cls.from_bytes(blob)


class CodecResult(BaseModel):
    """Resultado discriminado de una operación de cifrado o descifrado.

    Attributes:
        ok (bool): Indica si la operación terminó correctamente.
        value (Optional[str]): Texto sellado o teléfono recuperado si `ok`.
        error (Optional[ErrorKind]): Motivo del fallo si no `ok`.
        message (str): Mensaje destinado a la interfaz.
        debug (str): Traza de depuración sin datos sensibles.

    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    value: Optional[str] = None
    error: Optional[ErrorKind] = None
    message: str = ""
    debug: str = ""

    @model_validator(mode="after")
    def _check_discriminant(self) -> "CodecResult":
        if self.ok and (self.value is None or self.error is not None):
            raise ValueError("un resultado correcto lleva valor y no error")
        if not self.ok and (self.error is None or self.value is not None):
            raise ValueError("un resultado fallido lleva error y no valor")
        return self
