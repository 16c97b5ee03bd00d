# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del códec de números de teléfono.
# --------------------------------------------------------------
"""Inicializa el paquete `phonevault` y documenta sus módulos principales."""

__all__ = [
    "aead",
    "config",
    "errors",
    "key_codec",
    "key_store",
    "models",
    "service",
    "text_codec",
]
