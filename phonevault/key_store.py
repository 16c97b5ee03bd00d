# --------------------------------------------------------------
# File: key_store.py
# Description: Almacén externo de la clave hex en un único hueco clave-valor.
# --------------------------------------------------------------
"""Persistencia de la clave simétrica fuera del códec."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional, Protocol

from phonevault import config
from phonevault.key_codec import decode_key, generate_key_hex

__all__ = [
    "JsonFileKeyStore",
    "KeyStore",
    "MemoryKeyStore",
    "default_key_store",
    "load_or_create_key",
    "regenerate_key",
]

logger = logging.getLogger(__name__)


class KeyStore(Protocol):
    """Hueco persistente con una sola cadena."""

    def get(self) -> Optional[str]: ...

    def set(self, value: str) -> None: ...


class MemoryKeyStore:
    """Hueco en memoria, útil para pruebas y sesiones efímeras."""

    def __init__(self, value: Optional[str] = None) -> None:
        self._value = value

    def get(self) -> Optional[str]:
        return self._value

    def set(self, value: str) -> None:
        self._value = value


def _ensure_parent_dir(path: str) -> None:
    """Garantiza que exista el directorio padre del archivo de destino."""

    parent = os.path.dirname(path) or "."
    os.makedirs(parent, exist_ok=True)


class JsonFileKeyStore:
    """Guarda la clave bajo un nombre fijo dentro de un archivo JSON.

    Args:
        path (str): Ruta del archivo JSON.
        slot (str): Nombre lógico del hueco dentro del archivo.

    """

    def __init__(self, path: str, slot: str = config.KEY_SLOT) -> None:
        self.path = path
        self.slot = slot

    def _load(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as handler:
                data = json.load(handler)
        # ValueError cubre JSONDecodeError y UnicodeDecodeError.
        except (FileNotFoundError, ValueError):
            return {}
        return data if isinstance(data, dict) else {}

    def get(self) -> Optional[str]:
        value = self._load().get(self.slot)
        return value if isinstance(value, str) else None

    def set(self, value: str) -> None:
        """Escribe el hueco aplicando escritura atómica."""

        data = self._load()
        data[self.slot] = value
        _ensure_parent_dir(self.path)
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as handler:
            json.dump(data, handler, indent=2)
        os.replace(tmp_path, self.path)


def default_key_store() -> JsonFileKeyStore:
    """Construye el almacén configurado por `STORAGE_PATH` y `KEY_SLOT`."""

    return JsonFileKeyStore(config.KEY_STORE_PATH, config.KEY_SLOT)


def load_or_create_key(store: KeyStore) -> str:
    """Devuelve la clave almacenada o genera y guarda una nueva si no existe.

    Args:
        store (KeyStore): Hueco persistente de la clave.

    Returns:
        str: Clave hex de 64 caracteres.

    Raises:
        CodecError: Si el valor almacenado no es una clave válida; no se
            sobrescribe para no perder la capacidad de descifrar.

    """

    stored = store.get()
    if stored is not None:
        decode_key(stored)
        return stored
    return regenerate_key(store)


def regenerate_key(store: KeyStore) -> str:
    """Sustituye la clave; los mensajes sellados con la anterior quedan ilegibles."""

    new_key = generate_key_hex()
    store.set(new_key)
    logger.info("Nueva clave de cifrado generada y guardada")
    return new_key
